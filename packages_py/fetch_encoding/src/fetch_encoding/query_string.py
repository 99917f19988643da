"""
Query-string parsing.
"""
import logging
import re
from typing import Dict, Union

import httpx

from .encoding import percent_decode

logger = logging.getLogger(__name__)

QueryInput = Union[str, bytes, bytearray, httpx.URL]

# A str is read as a URL only when it starts with scheme://
URL_PREFIX = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*://")


def _query_part(url: str) -> str:
    """Return the text after the first ``?``, or ``""`` when there is none."""
    _, sep, query = url.partition("?")
    return query if sep else ""


def _looks_like_url(text: str) -> bool:
    return URL_PREFIX.match(text) is not None


def _parse_pairs(query: str, decode: bool) -> Dict[str, str]:
    result: Dict[str, str] = {}
    for pair in query.split("&"):
        parts = pair.split("=")
        # Exactly one key and one value; empty segments do not count
        if len(parts) != 2 or not parts[0] or not parts[1]:
            if pair:
                logger.debug(f"Dropping malformed query pair: {pair!r}")
            continue
        key, value = parts
        if decode:
            key, value = percent_decode(key), percent_decode(value)
        result[key] = value
    return result


def parse_query_string(
    value: QueryInput,
    encoding: str = "utf-8",
    decode: bool = True,
) -> Dict[str, str]:
    """
    Parse ``key=value&key=value`` text into a mapping.

    Args:
        value: A bare query string (a leading ``?`` is ignored), a full URL
            (``str`` starting with ``scheme://``, or ``httpx.URL``), or raw
            bytes holding either. Other strings are always read as a query,
            so values such as ``next=https://x.com`` or ``q=why?`` survive.
        encoding: Codec used when ``value`` is bytes. Undecodable input
            yields an empty mapping.
        decode: Percent-decode keys and values (``+`` is left alone).

    Returns:
        A dict of keys to values. Later duplicates overwrite earlier ones;
        pairs without exactly one non-empty key and one non-empty value
        are dropped, so ``a=`` does not appear in the result.
    """
    if isinstance(value, (bytes, bytearray)):
        try:
            value = bytes(value).decode(encoding)
        except (UnicodeDecodeError, LookupError) as e:
            logger.debug(f"Unable to decode query bytes with {encoding}: {e}")
            return {}

    if isinstance(value, httpx.URL):
        query = _query_part(str(value))
    elif _looks_like_url(value):
        query = _query_part(value)
    else:
        query = value[1:] if value.startswith("?") else value

    if not query:
        return {}

    return _parse_pairs(query, decode)
