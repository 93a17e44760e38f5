"""Test module for response parsing."""
import dataclasses

import pytest
from apiwire.clients.response import (
    RawResponse,
    ResponseRecord,
    parse_header_lines,
    parse_response,
    split_header_body
)

def test_split_header_body():
    header, body = split_header_body(b"HEADbody", 4)
    assert header == b"HEAD"
    assert body == b"body"

def test_split_with_zero_header_size():
    assert split_header_body(b"body", 0) == (b"", b"body")

def test_parse_header_lines():
    headers = parse_header_lines("Content-Type: application/json\r\nX-Count:  3 ")
    assert headers == {"Content-Type": "application/json", "X-Count": "3"}

def test_split_at_first_colon_only():
    headers = parse_header_lines("Location: http://example.com:8080/next")
    assert headers == {"Location": "http://example.com:8080/next"}

def test_line_without_colon_maps_to_empty_key():
    """Malformed lines are kept under the empty key, whole line trimmed"""
    headers = parse_header_lines("HTTP/1.1 200 OK \r\nServer: test")
    assert headers == {"": "HTTP/1.1 200 OK", "Server": "test"}

def test_blank_lines_are_colonless_lines():
    headers = parse_header_lines("HTTP/1.1 200 OK\r\nServer: test\r\n\r\n")
    assert headers == {"": "", "Server": "test"}

def test_later_duplicates_win():
    headers = parse_header_lines("Set-Cookie: a=1\r\nSet-Cookie: b=2")
    assert headers == {"Set-Cookie": "b=2"}

def test_parse_response():
    header_block = b"HTTP/1.1 200 OK\r\nContent-Type: application/json\r\n\r\n"
    raw = RawResponse(status_code=200, raw=header_block + b'{"id": 1}', header_size=len(header_block))

    response = parse_response(raw)

    assert response.status_code == 200
    assert response.raw_header_block == header_block.decode('iso-8859-1')
    assert response.raw_body == b'{"id": 1}'
    assert response.body == '{"id": 1}'
    assert response.headers["Content-Type"] == "application/json"
    assert response.decoded_payload is None

def test_record_is_immutable():
    raw = RawResponse(status_code=204, raw=b"HTTP/1.1 204 No Content\r\n\r\n", header_size=27)
    response = parse_response(raw)

    with pytest.raises(dataclasses.FrozenInstanceError):
        response.status_code = 200
    with pytest.raises(TypeError):
        response.headers["X-Injected"] = "yes"

    decoded = response.with_payload({"a": 1})
    assert decoded.decoded_payload == {"a": 1}
    assert response.decoded_payload is None

def test_directly_built_record_has_read_only_headers():
    headers = {"Content-Type": "application/json"}
    response = ResponseRecord(status_code=200, raw_header_block="", raw_body=b"{}", headers=headers)
    headers["Content-Type"] = "text/html"

    assert response.headers["Content-Type"] == "application/json"
    with pytest.raises(TypeError):
        response.with_payload({}).headers["Content-Type"] = "text/html"
