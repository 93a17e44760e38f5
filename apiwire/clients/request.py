# apiwire/clients/request.py
# Created: 2026-10-19 09:20:13

from typing import Any, Dict, Mapping, Optional, Union
from dataclasses import dataclass, asdict, is_dataclass
from enum import Enum
from types import MappingProxyType
import json

from ..core.utils import build_url
from .headers import DEFAULT_HEADERS, merge_headers, to_wire_lines

Payload = Union[bytes, str, Mapping[str, Any]]

class HttpMethod(Enum):
    """HTTP request methods"""
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"

@dataclass(frozen=True)
class RequestDescriptor:
    """The request we are about to send, fixed before any network activity"""
    url: str
    method: HttpMethod
    headers: Mapping[str, str]
    payload: Optional[Payload] = None

    def summary(self) -> str:
        """Render the request line and headers for diagnostics"""
        lines = [f"{self.method.value} {self.url}"]
        lines.extend(to_wire_lines(self.headers))
        return "\r\n".join(lines)

def _is_object_like(payload: Any) -> bool:
    if isinstance(payload, (list, tuple)):
        return True
    if isinstance(payload, (type, Enum)):
        return False
    if is_dataclass(payload):
        return True
    return hasattr(payload, '__dict__')

def _encode_object(payload: Any) -> str:
    # values JSON cannot represent are sent as their str() form
    if is_dataclass(payload):
        return json.dumps(asdict(payload), default=str)
    if isinstance(payload, (list, tuple)):
        return json.dumps(list(payload), default=str)
    return json.dumps(vars(payload), default=str)

def _prepare_payload(method: HttpMethod, payload: Any) -> Optional[Payload]:
    if payload is None:
        return None
    if isinstance(payload, Mapping):
        # form fields; the transport encodes them
        return MappingProxyType(dict(payload))
    if isinstance(payload, bytes):
        return payload
    if method is HttpMethod.PUT and _is_object_like(payload):
        return _encode_object(payload)
    return str(payload)

def build_request(
    method: HttpMethod,
    base_url: str,
    path: str,
    query_params: Optional[Mapping[str, Any]] = None,
    content_type: Optional[str] = None,
    payload: Any = None,
    headers: Optional[Mapping[str, str]] = None,
    default_headers: Optional[Mapping[str, str]] = None
) -> RequestDescriptor:
    """
    Build the descriptor for one outgoing request

    Args:
        method: HTTP verb to use
        base_url: Where the API server lives
        path: Application route to call
        query_params: Query string parameters
        content_type: Body content type, forced onto POST and PUT requests
        payload: Body to send; ignored for GET and DELETE
        headers: Caller-supplied headers
        default_headers: Headers to add when the caller has not set them

    Returns:
        RequestDescriptor with the effective headers merged in
    """
    url = build_url(base_url, path, query_params)

    request_headers: Dict[str, str] = dict(headers or {})
    body: Optional[Payload] = None
    if method in (HttpMethod.POST, HttpMethod.PUT):
        if content_type is not None:
            request_headers["Content-Type"] = content_type
        body = _prepare_payload(method, payload)

    if default_headers is None:
        default_headers = DEFAULT_HEADERS
    request_headers = merge_headers(request_headers, default_headers)

    return RequestDescriptor(
        url=url,
        method=method,
        headers=MappingProxyType(request_headers),
        payload=body
    )
