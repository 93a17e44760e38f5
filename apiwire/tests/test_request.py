"""Test module for building request descriptors."""
import dataclasses
import json
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

import pytest
import yarl
from apiwire.clients.headers import DEFAULT_HEADERS
from apiwire.clients.request import HttpMethod, RequestDescriptor, build_request

BASE_URL = "https://api.example.com/v1"

@dataclass
class Widget:
    name: str
    size: int

class Gadget:
    def __init__(self):
        self.colour = "red"

class Colour(Enum):
    RED = "red"

class Shipment:
    def __init__(self):
        self.shipped_at = datetime(2026, 10, 20, 9, 30)
        self.colour = Colour.RED

def test_get_request_descriptor():
    request = build_request(HttpMethod.GET, BASE_URL, "/users", {"page": "2", "q": "a b"})

    assert request.method is HttpMethod.GET
    url = yarl.URL(request.url)
    assert url.path == "/v1/users"
    assert dict(url.query) == {"page": "2", "q": "a b"}
    assert " " not in request.url
    assert request.payload is None
    for key, value in DEFAULT_HEADERS.items():
        assert request.headers[key] == value

def test_get_ignores_payload_and_content_type():
    request = build_request(HttpMethod.GET, BASE_URL, "/users", content_type="text/plain", payload="body")
    assert request.payload is None
    assert "Content-Type" not in request.headers

def test_post_forces_content_type():
    """Content-Type comes from the content_type argument, whatever the caller sent"""
    request = build_request(
        HttpMethod.POST, BASE_URL, "/users", {},
        content_type="application/json",
        payload={"a": 1},
        headers={"Content-Type": "text/plain", "X-Trace": "abc"}
    )
    assert request.headers["Content-Type"] == "application/json"
    assert request.headers["X-Trace"] == "abc"

def test_put_forces_content_type():
    request = build_request(
        HttpMethod.PUT, BASE_URL, "/users/1",
        content_type="application/json",
        headers={"Content-Type": "text/plain"}
    )
    assert request.headers["Content-Type"] == "application/json"

def test_mapping_payload_passes_through_as_fields():
    request = build_request(HttpMethod.POST, BASE_URL, "/form", content_type="application/x-www-form-urlencoded",
                            payload={"name": "bob", "age": 3})
    assert dict(request.payload) == {"name": "bob", "age": 3}

def test_scalar_payload_becomes_string():
    request = build_request(HttpMethod.POST, BASE_URL, "/count", content_type="text/plain", payload=42)
    assert request.payload == "42"

def test_bytes_payload_is_kept():
    request = build_request(HttpMethod.POST, BASE_URL, "/blob", content_type="application/octet-stream",
                            payload=b"\x00\x01")
    assert request.payload == b"\x00\x01"

def test_put_encodes_dataclass_as_json():
    request = build_request(HttpMethod.PUT, BASE_URL, "/widgets/1", content_type="application/json",
                            payload=Widget(name="cog", size=3))
    assert json.loads(request.payload) == {"name": "cog", "size": 3}

def test_put_encodes_plain_object_as_json():
    request = build_request(HttpMethod.PUT, BASE_URL, "/gadgets/1", content_type="application/json",
                            payload=Gadget())
    assert json.loads(request.payload) == {"colour": "red"}

def test_put_encodes_list_as_json():
    request = build_request(HttpMethod.PUT, BASE_URL, "/tags", content_type="application/json",
                            payload=["a", "b"])
    assert json.loads(request.payload) == ["a", "b"]

def test_post_does_not_json_encode_objects():
    request = build_request(HttpMethod.POST, BASE_URL, "/tags", content_type="text/plain", payload=["a", "b"])
    assert request.payload == "['a', 'b']"

def test_delete_request_descriptor():
    request = build_request(HttpMethod.DELETE, BASE_URL, "users/7")
    assert request.method is HttpMethod.DELETE
    assert request.url == "https://api.example.com/v1/users/7"

def test_descriptor_is_immutable():
    request = build_request(HttpMethod.GET, BASE_URL, "/users", headers={"X-Trace": "abc"})

    with pytest.raises(dataclasses.FrozenInstanceError):
        request.url = "https://elsewhere.example.com"
    with pytest.raises(TypeError):
        request.headers["X-Trace"] = "changed"

def test_caller_headers_are_not_mutated():
    headers = {"Content-Type": "text/plain"}
    build_request(HttpMethod.POST, BASE_URL, "/users", content_type="application/json", headers=headers)
    assert headers == {"Content-Type": "text/plain"}

def test_summary_renders_wire_lines():
    request = RequestDescriptor(
        url="https://api.example.com/users",
        method=HttpMethod.GET,
        headers={"Accept": "application/json"}
    )
    assert request.summary() == "GET https://api.example.com/users\r\nAccept: application/json"

def test_put_stringifies_values_json_cannot_encode():
    request = build_request(
        HttpMethod.PUT, BASE_URL, "/shipments", content_type="application/json", payload=Shipment()
    )
    assert json.loads(request.payload) == {"shipped_at": "2026-10-20 09:30:00", "colour": "Colour.RED"}

def test_put_enum_payload_is_not_treated_as_object():
    request = build_request(
        HttpMethod.PUT, BASE_URL, "/colours", content_type="text/plain", payload=Colour.RED
    )
    assert request.payload == "Colour.RED"
