# apiwire/clients/headers.py
# Created: 2026-10-19 09:12:40

from typing import Dict, List, Mapping, Optional

DEFAULT_HEADERS: Dict[str, str] = {
    "Accept": "application/json",
    "User-Agent": "apiwire/1.0",
    "Keep-Alive": "300",
}

def merge_headers(
    caller_headers: Optional[Mapping[str, str]],
    defaults: Mapping[str, str]
) -> Dict[str, str]:
    """
    Add each default header the caller has not already set.

    Keys are compared exactly as supplied; "accept" does not shadow "Accept".
    """
    merged = dict(caller_headers or {})
    for key, value in defaults.items():
        if key not in merged:
            merged[key] = value
    return merged

def to_wire_lines(headers: Mapping[str, str]) -> List[str]:
    """Convert a header mapping into "Name: value" lines"""
    return [f"{key}: {value}" for key, value in headers.items()]
