import json
from typing import Any, Mapping, Optional

import yarl

from .exceptions import DecodeFailure

def build_url(
    base_url: str,
    path: str,
    query_params: Optional[Mapping[str, Any]] = None
) -> str:
    """Join base URL and path, then append percent-encoded query parameters."""
    url = yarl.URL(base_url)
    path = path.strip('/')
    if path:
        url = url / path
    if query_params:
        url = url.update_query({key: str(value) for key, value in query_params.items()})
    return str(url)

def decode_json(body: bytes) -> Any:
    """Decode a JSON response body."""
    try:
        return json.loads(body.decode('utf-8'))
    except (UnicodeDecodeError, ValueError) as e:
        text = body.decode('utf-8', errors='replace')
        raise DecodeFailure(f"Response body is not valid JSON: {str(e)}", details={"body": text})

def summarise_body(body: bytes) -> str:
    """Render a response body as text for diagnostics."""
    return body.decode('utf-8', errors='replace').strip()
