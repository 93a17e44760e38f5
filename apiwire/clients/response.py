# apiwire/clients/response.py
# Created: 2026-10-19 09:31:57

from typing import Any, Dict, Mapping, Optional, Tuple
from dataclasses import dataclass, field, replace
from types import MappingProxyType

from ..core.utils import summarise_body

HEADER_ENCODING = 'iso-8859-1'

@dataclass(frozen=True)
class RawResponse:
    """A completed call as the transport reports it: header block and body in one buffer"""
    status_code: int
    raw: bytes
    header_size: int

@dataclass(frozen=True)
class ResponseRecord:
    """Container for parsed response data"""
    status_code: int
    raw_header_block: str
    raw_body: bytes
    headers: Mapping[str, str] = field(default_factory=dict)
    decoded_payload: Optional[Any] = None

    def __post_init__(self):
        if not isinstance(self.headers, MappingProxyType):
            object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))

    @property
    def body(self) -> str:
        return summarise_body(self.raw_body)

    def with_payload(self, payload: Any) -> "ResponseRecord":
        return replace(self, decoded_payload=payload)

def split_header_body(raw: bytes, header_size: int) -> Tuple[bytes, bytes]:
    return raw[:header_size], raw[header_size:]

def parse_header_lines(header_block: str) -> Dict[str, str]:
    """
    Parse a raw header block into a mapping.

    Lines without a colon (the status line, blank separator lines) land under
    the empty key with the whole line as value. Later duplicates win.
    """
    headers: Dict[str, str] = {}
    for line in header_block.split("\r\n"):
        key, separator, value = line.partition(':')
        if not separator:
            headers[""] = line.strip()
            continue
        headers[key] = value.strip()
    return headers

def parse_response(raw_response: RawResponse) -> ResponseRecord:
    header_bytes, body = split_header_body(raw_response.raw, raw_response.header_size)
    header_block = header_bytes.decode(HEADER_ENCODING)
    return ResponseRecord(
        status_code=raw_response.status_code,
        raw_header_block=header_block,
        raw_body=body,
        headers=parse_header_lines(header_block)
    )
