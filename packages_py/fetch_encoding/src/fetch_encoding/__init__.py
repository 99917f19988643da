"""
Fetch Encoding - percent-encoding, form/query serialization and query-string parsing.
"""
from .encoding import percent_encode, percent_decode, stringify_value
from .serializer import SerializeTarget, serialize_parameters, sorted_items
from .query_string import parse_query_string

__version__ = "0.1.0"

__all__ = [
    "percent_encode",
    "percent_decode",
    "stringify_value",
    "SerializeTarget",
    "serialize_parameters",
    "sorted_items",
    "parse_query_string",
]
