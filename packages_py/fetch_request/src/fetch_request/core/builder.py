"""
Turns a Request into a TransportRequest.
"""
import logging
from dataclasses import replace
from typing import Callable, Optional

from fetch_encoding import SerializeTarget, serialize_parameters

from ..errors import AuthorizationError
from ..headers import mask_headers
from ..types import DEFAULT_TIMEOUT, CachePolicy, HttpMethod, TransportRequest
from .request import Request

logger = logging.getLogger(__name__)

LOG_PREFIX = "[RequestBuilder]"


def build_transport_request(request: Request) -> TransportRequest:
    """
    Assemble the transport-ready request.

    GET requests carry their parameters in the query string appended to the
    base URL and never have a body. Every other method keeps the base URL
    unchanged and sends the parameters as a form-encoded UTF-8 body.
    """
    is_get = request.method == HttpMethod.GET

    url = request.base_url
    if is_get:
        url = f"{request.base_url}{serialize_parameters(request.parameters, SerializeTarget.QUERY)}"

    body = None
    if not is_get:
        body = serialize_parameters(request.parameters, SerializeTarget.BODY).encode("utf-8")

    transport_request = TransportRequest(
        method=request.method,
        url=url,
        headers=request.headers,
        body=body,
        timeout=DEFAULT_TIMEOUT,
        cache_policy=CachePolicy.RETURN_CACHE_DATA_ELSE_LOAD,
        handle_cookies=False,
    )
    logger.debug(
        f"{LOG_PREFIX} Built {transport_request.method.value} {transport_request.url} "
        f"headers={mask_headers(transport_request.headers)}"
    )
    return transport_request


async def authorize(request: Request) -> Request:
    """
    Let the request's authorization hook sign the parameters and set its
    header. Returns the request unchanged when no hook is attached.
    """
    hook = request.authorization_hook
    if hook is None:
        return request

    logger.debug(f"{LOG_PREFIX} Signing with {type(hook).__name__}")
    try:
        signed = await hook.sign_and_parameterize(
            request.base_url, dict(request.parameters), request.method
        )
        headers = hook.apply_auth_header(request.base_url, dict(request.headers))
        return replace(request, parameters=signed, headers=headers)
    except AuthorizationError:
        raise
    except Exception as e:
        raise AuthorizationError(f"{type(hook).__name__} failed: {e}") from e


async def prepare(
    request: Request,
    on_ready: Optional[Callable[[TransportRequest], None]] = None,
) -> TransportRequest:
    """
    Finalize a request for the transport.

    When an authorization hook is attached the single suspension point is
    its signing step; otherwise no awaiting happens at all. ``on_ready``,
    when given, is called exactly once with the result.
    """
    authorized = await authorize(request)
    transport_request = build_transport_request(authorized)
    if on_ready is not None:
        on_ready(transport_request)
    return transport_request
