from typing import Any, Dict, Optional

class ApiwireError(Exception):
    """Base exception class for all apiwire exceptions"""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

class ConfigError(ApiwireError):
    """Raised when there is a configuration error"""
    pass

class LoggerError(ApiwireError):
    """Raised when there is a logging error"""
    pass

class TransportFailure(ApiwireError):
    """Raised when the underlying network call fails outright"""
    pass

class DecodeFailure(ApiwireError):
    """Raised when a response body is not valid JSON"""
    pass

class BatchStateError(ApiwireError):
    """Raised when a batch is driven through an illegal transition"""
    pass

class ApiCallFailed(ApiwireError):
    """Raised when the server answers with an error status code"""
    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        request: Any = None,
        response: Any = None
    ):
        super().__init__(message, details)
        self.request = request
        self.response = response

    @classmethod
    def from_call(cls, request: Any, response: Any) -> "ApiCallFailed":
        """Build the error from the request we sent and what came back"""
        details = {
            "request": request.summary(),
            "response": {
                "status_code": response.status_code,
                "body": response.body
            }
        }
        message = f"{request.method.value} {request.url} failed with status {response.status_code}"
        return cls(message, details=details, request=request, response=response)
