"""
Request lifecycle: prepare, execute, dispatch.
"""
import logging
from typing import Optional

from .completion import CompletionOutcome, dispatch
from .core.builder import prepare
from .core.request import Request
from .errors import AuthorizationError, TransportError
from .transport import BaseTransport, get_transport

logger = logging.getLogger(__name__)

LOG_PREFIX = "[FetchRequest]"


async def send(
    request: Request,
    transport: Optional[BaseTransport] = None,
) -> CompletionOutcome:
    """
    Run one request end to end.

    The completion strategy is notified exactly once. Any failure before a
    response arrives is logged and delivered as a plain failure; nothing
    is raised.
    """
    try:
        transport_request = await prepare(request)
    except AuthorizationError as e:
        logger.error(f"{LOG_PREFIX} Authorization failed for {request.base_url}: {e}")
        return dispatch(request.on_complete, None, None, e)
    except Exception as e:
        logger.exception(f"{LOG_PREFIX} Unable to prepare request for {request.base_url}")
        return dispatch(request.on_complete, None, None, e)

    owned = transport is None
    try:
        active = transport or get_transport()
    except Exception as e:
        logger.exception(f"{LOG_PREFIX} No transport available")
        return dispatch(request.on_complete, None, None, e)

    try:
        response = await active.execute(transport_request)
    except Exception as e:
        logger.exception(f"{LOG_PREFIX} Transport '{active.name}' raised")
        return dispatch(request.on_complete, None, None, TransportError(str(e), cause=e))
    finally:
        if owned:
            await active.close()

    return dispatch(request.on_complete, response.status, response.body, response.error)
