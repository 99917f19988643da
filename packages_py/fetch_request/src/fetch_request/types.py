"""
Core type definitions for fetch-request.
"""
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional

# Fixed transport settings
DEFAULT_TIMEOUT = 120.0

FORM_ENCODED = "application/x-www-form-urlencoded"
JSON = "application/json"


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"


class CachePolicy(str, Enum):
    """Cache policy hint handed to the transport."""
    USE_PROTOCOL_CACHE_POLICY = "use_protocol_cache_policy"
    RETURN_CACHE_DATA_ELSE_LOAD = "return_cache_data_else_load"
    RELOAD_IGNORING_CACHE_DATA = "reload_ignoring_cache_data"


def _freeze(headers: Optional[Mapping[str, str]]) -> Mapping[str, str]:
    return MappingProxyType(dict(headers or {}))


@dataclass(frozen=True)
class TransportRequest:
    """A finalized, transport-ready request."""
    method: HttpMethod
    url: str
    headers: Mapping[str, str] = field(default_factory=dict)
    body: Optional[bytes] = None
    timeout: float = DEFAULT_TIMEOUT
    cache_policy: CachePolicy = CachePolicy.RETURN_CACHE_DATA_ELSE_LOAD
    handle_cookies: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", _freeze(self.headers))

@dataclass(frozen=True)
class TransportResponse:
    """What the transport delivers: a status and body, or an error."""
    status: Optional[int] = None
    body: Optional[bytes] = None
    error: Optional[BaseException] = None

    @property
    def has_response(self) -> bool:
        return self.error is None and self.status is not None
