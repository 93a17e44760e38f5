# apiwire/clients/single.py
# Created: 2026-10-19 11:05:36

from typing import Any, NamedTuple
import logging

from ..core.exceptions import ApiCallFailed, TransportFailure
from ..core.utils import decode_json
from .base import HttpClient
from .request import RequestDescriptor
from .response import ResponseRecord, parse_response

logger = logging.getLogger(__name__)

class CallResult(NamedTuple):
    """The request we built and sent, and what came back"""
    request: RequestDescriptor
    response: ResponseRecord

class SingleClient(HttpClient):
    """
    Sequential HTTP client.

    Every verb call blocks the calling thread until its response has
    arrived or the call's timeout expires. Nothing is retried.
    """

    def _dispatch(self, request: RequestDescriptor, timeout: float) -> CallResult:
        extra = {"method": request.method.value, "url": request.url}
        handle = self._transport.configure(request, timeout)
        try:
            raw_response = self._transport.execute(handle)
        except TransportFailure as e:
            logger.error(f"HTTP call failed: {e.message}", extra=extra)
            details = dict(e.details)
            details["request"] = request.summary()
            raise TransportFailure(e.message, details=details) from e

        response = parse_response(raw_response)
        logger.debug(f"< {response.status_code} ({len(response.raw_body)} bytes)", extra=extra)
        return CallResult(request=request, response=response)

    def extract_payload(self, request: RequestDescriptor, response: ResponseRecord) -> Any:
        """
        Extract and decode the payload from a HTTP response

        Args:
            request: The request returned by one of the http_* calls
            response: The response returned alongside it

        Returns:
            The decoded JSON payload; an empty dict for 204 No Content

        Raises:
            ApiCallFailed: the server answered with a status above 399
            DecodeFailure: the body is not valid JSON
        """
        if response.status_code > 399:
            error = ApiCallFailed.from_call(request, response)
            logger.error(error.message, extra={"method": request.method.value, "url": request.url})
            raise error

        if response.status_code == 204:
            return {}

        return decode_json(response.raw_body)
