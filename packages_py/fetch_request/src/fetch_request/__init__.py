"""
Fetch Request - HTTP request builder and completion dispatcher
"""
from .types import (
    DEFAULT_TIMEOUT,
    CachePolicy,
    HttpMethod,
    TransportRequest,
    TransportResponse,
)
from .completion import (
    CompletionOutcome,
    CompletionStrategy,
    RawDataCallback,
    ResultsDelegate,
    ResultsReceiver,
    SuccessFailureDelegate,
    SuccessFailureReceiver,
    classify_response,
    decode_body,
    describe_status,
    dispatch,
)
from .core import Request, RequestBuilder, build_transport_request, prepare
from .auth import (
    AuthCredentials,
    AuthorizationHook,
    OAuth1AuthorizationHook,
    OAuth1Credentials,
    StaticAuthorizationHook,
)
from .transport import BaseTransport, HttpxTransport, get_transport, register_transport
from .config import TransportConfig, resolve_transport_config
from .errors import (
    AuthorizationError,
    DecodingFailure,
    FetchRequestError,
    HttpStatusFailure,
    TransportError,
)
from .client import send
from .logger import configure_logging, get_log_level, set_log_level

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_TIMEOUT",
    "CachePolicy",
    "HttpMethod",
    "TransportRequest",
    "TransportResponse",
    "CompletionOutcome",
    "CompletionStrategy",
    "RawDataCallback",
    "ResultsDelegate",
    "ResultsReceiver",
    "SuccessFailureDelegate",
    "SuccessFailureReceiver",
    "classify_response",
    "decode_body",
    "describe_status",
    "dispatch",
    "Request",
    "RequestBuilder",
    "build_transport_request",
    "prepare",
    "AuthCredentials",
    "AuthorizationHook",
    "OAuth1AuthorizationHook",
    "OAuth1Credentials",
    "StaticAuthorizationHook",
    "BaseTransport",
    "HttpxTransport",
    "get_transport",
    "register_transport",
    "TransportConfig",
    "resolve_transport_config",
    "AuthorizationError",
    "DecodingFailure",
    "FetchRequestError",
    "HttpStatusFailure",
    "TransportError",
    "send",
    "configure_logging",
    "get_log_level",
    "set_log_level",
]
