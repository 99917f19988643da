"""
Percent-encoding helpers for URL components and form bodies.
"""
from typing import Any, Iterable
from urllib.parse import quote, unquote, unquote_plus

# RFC 3986 unreserved marks; ASCII letters and digits are always kept by quote()
UNRESERVED_MARKS = "-._~"


def percent_encode(value: str, ignore: Iterable[str] = ()) -> str:
    """
    Percent-encode a string for safe inclusion in a URL query or form body.

    Args:
        value: The text to encode.
        ignore: Characters that must pass through verbatim (e.g. ``+``).

    Returns:
        The encoded text. Every character outside ASCII alphanumerics, the
        unreserved marks and ``ignore`` is emitted as UTF-8 ``%XX`` escapes.
    """
    if not value:
        return ""
    return quote(value, safe="".join(ignore))


def percent_decode(value: str, plus_as_space: bool = False) -> str:
    """Decode ``%XX`` escapes; optionally treat ``+`` as an encoded space."""
    if plus_as_space:
        return unquote_plus(value)
    return unquote(value)


def stringify_value(value: Any) -> str:
    """Convert a parameter value to its wire text."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8")
    return str(value)
