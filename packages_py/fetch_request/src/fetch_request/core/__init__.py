from .request import DEFAULT_HEADERS, Request, RequestBuilder
from .builder import authorize, build_transport_request, prepare

__all__ = [
    "DEFAULT_HEADERS",
    "Request",
    "RequestBuilder",
    "authorize",
    "build_transport_request",
    "prepare",
]
