"""
OAuth 1.0a request signing (HMAC-SHA1).
"""
import base64
import hashlib
import hmac
import logging
import secrets
import time
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

import httpx
from pydantic import BaseModel, SecretStr

from fetch_encoding import percent_encode, stringify_value

from ..errors import AuthorizationError
from ..headers import merge_headers
from ..types import HttpMethod
from .base import AuthorizationHook

logger = logging.getLogger(__name__)

LOG_PREFIX = "[OAuth1]"

SIGNATURE_METHOD = "HMAC-SHA1"
OAUTH_VERSION = "1.0"


class OAuth1Credentials(BaseModel):
    consumer_key: str
    consumer_secret: SecretStr
    token: Optional[str] = None
    token_secret: Optional[SecretStr] = None
    callback: Optional[str] = None
    verifier: Optional[str] = None


def _default_nonce() -> str:
    return secrets.token_hex(16)


def _default_timestamp() -> str:
    return str(int(time.time()))


def normalize_url(url: str) -> Tuple[str, List[Tuple[str, str]]]:
    """Split a URL into its signature base URI and its query pairs."""
    parsed = httpx.URL(url)
    port = f":{parsed.port}" if parsed.port else ""
    base_uri = f"{parsed.scheme}://{parsed.host}{port}{parsed.path}"
    return base_uri, list(parsed.params.multi_items())


def parameter_string(pairs: List[Tuple[str, str]]) -> str:
    """Encode, sort by key then value, and join the signature parameters."""
    encoded = sorted((percent_encode(k), percent_encode(v)) for k, v in pairs)
    return "&".join(f"{k}={v}" for k, v in encoded)


def signature_base_string(method: str, url: str, pairs: List[Tuple[str, str]]) -> str:
    base_uri, query_pairs = normalize_url(url)
    return "&".join([
        method.upper(),
        percent_encode(base_uri),
        percent_encode(parameter_string(pairs + query_pairs)),
    ])


def sign(base_string: str, consumer_secret: str, token_secret: Optional[str]) -> str:
    key = f"{percent_encode(consumer_secret)}&{percent_encode(token_secret or '')}"
    digest = hmac.new(key.encode("utf-8"), base_string.encode("utf-8"), hashlib.sha1).digest()
    return base64.b64encode(digest).decode("utf-8")


class OAuth1AuthorizationHook(AuthorizationHook):
    """
    Signs requests with OAuth 1.0a and sends the protocol parameters in an
    ``Authorization: OAuth ...`` header. Request parameters are sent unchanged.
    """

    def __init__(
        self,
        credentials: OAuth1Credentials,
        nonce_factory: Callable[[], str] = _default_nonce,
        timestamp_factory: Callable[[], str] = _default_timestamp,
    ):
        self.credentials = credentials
        self._nonce_factory = nonce_factory
        self._timestamp_factory = timestamp_factory
        self._pending: Optional[Dict[str, str]] = None

    def oauth_parameters(self) -> Dict[str, str]:
        creds = self.credentials
        params = {
            "oauth_consumer_key": creds.consumer_key,
            "oauth_nonce": self._nonce_factory(),
            "oauth_signature_method": SIGNATURE_METHOD,
            "oauth_timestamp": self._timestamp_factory(),
            "oauth_version": OAUTH_VERSION,
        }
        if creds.token:
            params["oauth_token"] = creds.token
        if creds.callback:
            params["oauth_callback"] = creds.callback
        if creds.verifier:
            params["oauth_verifier"] = creds.verifier
        return params

    async def sign_and_parameterize(
        self,
        url: str,
        parameters: Mapping[str, Any],
        method: HttpMethod,
    ) -> Dict[str, Any]:
        oauth_params = self.oauth_parameters()
        pairs = [(str(k), stringify_value(v)) for k, v in parameters.items()]
        pairs += list(oauth_params.items())

        method_name = method.value if isinstance(method, HttpMethod) else str(method)
        base_string = signature_base_string(method_name, url, pairs)
        logger.debug(f"{LOG_PREFIX} Signature base string: {base_string}")

        token_secret = self.credentials.token_secret
        oauth_params["oauth_signature"] = sign(
            base_string,
            self.credentials.consumer_secret.get_secret_value(),
            token_secret.get_secret_value() if token_secret else None,
        )
        self._pending = oauth_params
        return dict(parameters)

    def apply_auth_header(self, url: str, headers: Mapping[str, str]) -> Dict[str, str]:
        if self._pending is None:
            raise AuthorizationError("apply_auth_header called before sign_and_parameterize")
        oauth_params, self._pending = self._pending, None
        value = "OAuth " + ", ".join(
            f'{percent_encode(k)}="{percent_encode(v)}"' for k, v in sorted(oauth_params.items())
        )
        return merge_headers(headers, {"Authorization": value})
