# apiwire/clients/__init__.py
# Created: 2026-10-19 09:05:11

"""
HTTP clients for making API calls and handling their responses.
"""

from .headers import DEFAULT_HEADERS, merge_headers, to_wire_lines
from .request import HttpMethod, RequestDescriptor, build_request
from .response import (
    RawResponse,
    ResponseRecord,
    parse_header_lines,
    parse_response,
    split_header_body
)
from .options import ClientOptions
from .base import HttpClient
from .single import CallResult, SingleClient
from .multi import BatchState, MultiClient, PendingCall, Submission

__all__ = [
    'DEFAULT_HEADERS',
    'merge_headers',
    'to_wire_lines',
    'HttpMethod',
    'RequestDescriptor',
    'build_request',
    'RawResponse',
    'ResponseRecord',
    'parse_header_lines',
    'parse_response',
    'split_header_body',
    'ClientOptions',
    'HttpClient',
    'CallResult',
    'SingleClient',
    'BatchState',
    'MultiClient',
    'PendingCall',
    'Submission'
]
