# apiwire/clients/base.py
# Created: 2026-10-19 10:48:09

from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional
import logging

from ..core.exceptions import ConfigError
from .headers import to_wire_lines
from .options import ClientOptions
from .request import HttpMethod, RequestDescriptor, build_request
from ..transport.aiohttp_transport import AiohttpTransport
from ..transport.base import Transport

logger = logging.getLogger(__name__)

class HttpClient(ABC):
    """
    A generic HTTP client for making API calls.

    Subclasses decide what happens to a built request: SingleClient sends it
    straight away, MultiClient queues it for the next batch.
    """

    def __init__(
        self,
        options: ClientOptions,
        transport: Optional[Transport] = None
    ):
        self.options = options
        self._owns_transport = transport is None
        self._transport = transport if transport is not None else AiohttpTransport()

    def _build(
        self,
        method: HttpMethod,
        path: str,
        query_params: Optional[Mapping[str, Any]] = None,
        content_type: Optional[str] = None,
        payload: Any = None,
        headers: Optional[Mapping[str, str]] = None
    ) -> RequestDescriptor:
        request = build_request(
            method,
            self.options.base_url,
            path,
            query_params=query_params,
            content_type=content_type,
            payload=payload,
            headers=headers,
            default_headers=self.options.default_headers()
        )
        if logger.isEnabledFor(logging.DEBUG):
            extra = {"method": request.method.value, "url": request.url}
            for line in to_wire_lines(request.headers):
                logger.debug(f"> {line}", extra=extra)
        return request

    def _timeout(self, timeout: Optional[float]) -> float:
        if timeout is None:
            return self.options.timeout
        if timeout <= 0:
            raise ConfigError(f"timeout must be a positive number: {timeout}")
        return timeout

    @abstractmethod
    def _dispatch(self, request: RequestDescriptor, timeout: float) -> Any:
        """Hand a built request to the transport"""
        raise NotImplementedError

    def http_get(
        self,
        path: str,
        query_params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
        timeout: Optional[float] = None
    ) -> Any:
        """Make a HTTP GET request to the API"""
        request = self._build(HttpMethod.GET, path, query_params, headers=headers)
        return self._dispatch(request, self._timeout(timeout))

    def http_post(
        self,
        path: str,
        content_type: str,
        query_params: Optional[Mapping[str, Any]] = None,
        payload: Any = None,
        headers: Optional[Mapping[str, str]] = None,
        timeout: Optional[float] = None
    ) -> Any:
        """
        Make a HTTP POST request to the API

        Args:
            path: Application route to call
            content_type: What kind of data we are uploading
            query_params: Query string parameters
            payload: Mapping of form fields, or a raw body
            headers: Additional headers
            timeout: Seconds before the call is abandoned
        """
        request = self._build(HttpMethod.POST, path, query_params, content_type, payload, headers)
        return self._dispatch(request, self._timeout(timeout))

    def http_put(
        self,
        path: str,
        content_type: str,
        query_params: Optional[Mapping[str, Any]] = None,
        payload: Any = None,
        headers: Optional[Mapping[str, str]] = None,
        timeout: Optional[float] = None
    ) -> Any:
        """Make a HTTP PUT request to the API; object-like payloads are sent as JSON"""
        request = self._build(HttpMethod.PUT, path, query_params, content_type, payload, headers)
        return self._dispatch(request, self._timeout(timeout))

    def http_delete(
        self,
        path: str,
        query_params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
        timeout: Optional[float] = None
    ) -> Any:
        """Make a HTTP DELETE request to the API"""
        request = self._build(HttpMethod.DELETE, path, query_params, headers=headers)
        return self._dispatch(request, self._timeout(timeout))

    def close(self) -> None:
        """Close the transport if this client created it"""
        if self._owns_transport:
            self._transport.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
