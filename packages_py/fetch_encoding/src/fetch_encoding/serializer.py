"""
Deterministic parameter serialization for query strings and form bodies.
"""
from enum import Enum
from typing import Any, List, Mapping, Tuple

from .encoding import percent_encode, stringify_value


class SerializeTarget(str, Enum):
    """Where serialized parameters end up."""
    QUERY = "query"
    BODY = "body"


# Characters left verbatim in values, per target
QUERY_VALUE_IGNORE = ("+", "-")
BODY_VALUE_IGNORE = ("+",)


def sorted_items(parameters: Mapping[str, Any]) -> List[Tuple[str, Any]]:
    """Return parameter items in ascending lexicographic key order."""
    return [(key, parameters[key]) for key in sorted(parameters)]


def _encode_pair(key: str, value: Any, target: SerializeTarget) -> str:
    text = stringify_value(value)
    if target == SerializeTarget.BODY:
        encoded = percent_encode(text.replace(" ", "+"), ignore=BODY_VALUE_IGNORE)
    else:
        encoded = percent_encode(text, ignore=QUERY_VALUE_IGNORE)
    return f"{percent_encode(str(key))}={encoded}"


def serialize_parameters(parameters: Mapping[str, Any], target: SerializeTarget) -> str:
    """
    Serialize parameters as ``key=value`` pairs joined by ``&``.

    Keys are emitted in sorted order. Query output is prefixed with ``?``
    when at least one parameter exists; an empty mapping always yields ``""``.

    Query target: spaces become ``%20``; ``+`` and ``-`` pass through.
    Body target: spaces become ``+`` before encoding, ``+`` passes through.

    Empty values serialize as ``key=``. ``parse_query_string`` drops such
    pairs, so parameters with empty values do not survive a round trip.
    """
    if not parameters:
        return ""

    joined = "&".join(
        _encode_pair(key, value, target) for key, value in sorted_items(parameters)
    )

    if target == SerializeTarget.QUERY:
        return f"?{joined}"
    return joined.rstrip("& ")
