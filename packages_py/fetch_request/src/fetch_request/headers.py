"""
Header mapping helpers.

Header names compare case-insensitively. Setting a name that already exists
(in any case) replaces the value in place and keeps the caller's spelling of
the latest write.
"""
from typing import Dict, Mapping, Optional

SENSITIVE_HEADERS = {"authorization", "x-api-key", "api-key", "token", "secret", "cookie"}


def find_header(headers: Mapping[str, str], name: str) -> Optional[str]:
    """Return the stored key matching ``name`` case-insensitively."""
    lowered = name.lower()
    for key in headers:
        if key.lower() == lowered:
            return key
    return None


def get_header(headers: Mapping[str, str], name: str) -> Optional[str]:
    key = find_header(headers, name)
    return headers[key] if key is not None else None


def merge_headers(base: Mapping[str, str], updates: Mapping[str, str]) -> Dict[str, str]:
    """Return a new dict with ``updates`` applied over ``base``; last write wins."""
    merged: Dict[str, str] = dict(base)
    for name, value in updates.items():
        existing = find_header(merged, name)
        if existing is None:
            merged[name] = value
            continue
        # Rebuild to keep position while adopting the new spelling
        merged = {
            (name if key == existing else key): (value if key == existing else val)
            for key, val in merged.items()
        }
    return merged


def mask_header_value(name: str, value: str) -> str:
    """Mask sensitive header values for logging."""
    if name.lower() in SENSITIVE_HEADERS:
        if len(value) <= 20:
            return "****"
        return f"{value[:20]}..."
    return value


def mask_headers(headers: Mapping[str, str]) -> Dict[str, str]:
    return {k: mask_header_value(k, str(v)) for k, v in headers.items()}
