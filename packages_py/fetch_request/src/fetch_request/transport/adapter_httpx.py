"""
Transport backed by httpx.
"""
import logging
from http.cookiejar import CookieJar, DefaultCookiePolicy
from typing import Any, Dict, Optional

import httpx

from ..config import TransportConfig, resolve_transport_config
from ..errors import TransportError
from ..types import TransportRequest, TransportResponse
from .base import BaseTransport

logger = logging.getLogger(__name__)

LOG_PREFIX = "[HttpxTransport]"


def _cookie_blocking_jar() -> CookieJar:
    """A jar that neither stores nor returns any cookie."""
    return CookieJar(policy=DefaultCookiePolicy(allowed_domains=[]))


class HttpxTransport(BaseTransport):
    """
    Executes requests through an ``httpx.AsyncClient``.

    Cookies are never stored or sent, whatever ``handle_cookies`` says on
    the request.
    """

    def __init__(
        self,
        config: Optional[TransportConfig] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.config = config or resolve_transport_config()
        self._client = client
        # Flag to track if we own the client (created it)
        self._own_client = client is None

    @property
    def name(self) -> str:
        return "httpx"

    def get_client_kwargs(self) -> Dict[str, Any]:
        """Build kwargs for httpx.AsyncClient."""
        kwargs: Dict[str, Any] = {
            "follow_redirects": self.config.follow_redirects,
            "trust_env": self.config.trust_env,
            "cookies": _cookie_blocking_jar(),
        }
        if self.config.proxy:
            kwargs["proxy"] = self.config.proxy
        return kwargs

    def get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            kwargs = self.get_client_kwargs()
            logger.debug(f"{LOG_PREFIX} Creating httpx.AsyncClient with config: {self.config.model_dump()}")
            self._client = httpx.AsyncClient(**kwargs)
        return self._client

    async def execute(self, request: TransportRequest) -> TransportResponse:
        client = self.get_client()
        httpx_request = client.build_request(
            method=request.method.value,
            url=request.url,
            headers=dict(request.headers),
            content=request.body,
            timeout=httpx.Timeout(request.timeout),
        )
        logger.debug(f"{LOG_PREFIX} Request: {request.method.value} {request.url}")
        try:
            response = await client.send(httpx_request)
        except httpx.RequestError as e:
            logger.error(f"{LOG_PREFIX} Request failed: {e}")
            return TransportResponse(error=TransportError(str(e) or type(e).__name__, cause=e))

        return TransportResponse(status=response.status_code, body=response.content)

    async def close(self) -> None:
        """Close the client if we own it."""
        if self._own_client and self._client is not None:
            await self._client.aclose()
            self._client = None
