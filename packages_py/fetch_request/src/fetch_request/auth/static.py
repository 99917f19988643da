"""
Credential-based header authorization (basic, bearer, api-key, custom).
"""
import base64
import logging
from typing import Any, Dict, Literal, Mapping, Optional

from pydantic import BaseModel, SecretStr, model_validator

from ..headers import mask_header_value, merge_headers
from ..types import HttpMethod
from .base import AuthorizationHook

logger = logging.getLogger(__name__)

LOG_PREFIX = "[StaticAuth]"

AuthType = Literal[
    "basic",
    "basic_email_token",
    "basic_token",
    "basic_email",
    "bearer",
    "bearer_oauth",
    "bearer_jwt",
    "bearer_username_token",
    "bearer_username_password",
    "bearer_email_token",
    "bearer_email_password",
    "x-api-key",
    "custom",
    "custom_header",
    "none",
]


def _b64(text: str) -> str:
    return base64.b64encode(text.encode("utf-8")).decode("utf-8")


def _secret(value: Optional[SecretStr]) -> Optional[str]:
    return value.get_secret_value() if value else None


class AuthCredentials(BaseModel):
    """Static credentials for a header-based auth scheme."""
    type: AuthType
    username: Optional[str] = None
    email: Optional[str] = None
    password: Optional[SecretStr] = None
    raw_api_key: Optional[SecretStr] = None
    header_name: Optional[str] = None

    @model_validator(mode="after")
    def validate_credentials(self) -> "AuthCredentials":
        """Validate that required fields are present for the selected auth type."""
        t = self.type
        has_user = bool(self.username)
        has_email = bool(self.email)
        has_pass = bool(self.password)
        has_key = bool(self.raw_api_key)

        if t == "basic" and not (has_user and has_pass):
            raise ValueError("Basic auth requires 'username' and 'password'")

        if t in ("basic_email_token", "bearer_email_token") and not (has_email and has_key):
            raise ValueError(f"{t} requires 'email' and 'raw_api_key'")

        if t in ("basic_token", "bearer_username_token") and not (has_user and has_key):
            raise ValueError(f"{t} requires 'username' and 'raw_api_key'")

        if t in ("basic_email", "bearer_email_password") and not (has_email and has_pass):
            raise ValueError(f"{t} requires 'email' and 'password'")

        if t == "bearer_username_password" and not (has_user and has_pass):
            raise ValueError("bearer_username_password requires 'username' and 'password'")

        if t in ("bearer", "bearer_oauth", "bearer_jwt", "x-api-key") and not has_key:
            raise ValueError(f"{t} requires 'raw_api_key'")

        if t in ("custom", "custom_header") and not (self.header_name and has_key):
            raise ValueError(f"{t} requires 'header_name' and 'raw_api_key'")

        return self

    def to_headers(self) -> Dict[str, str]:
        """Encode the credentials into HTTP headers."""
        t = self.type
        password = _secret(self.password)
        key = _secret(self.raw_api_key)

        if t == "basic":
            return {"Authorization": f"Basic {_b64(f'{self.username}:{password}')}"}
        if t == "basic_email_token":
            return {"Authorization": f"Basic {_b64(f'{self.email}:{key}')}"}
        if t == "basic_token":
            return {"Authorization": f"Basic {_b64(f'{self.username}:{key}')}"}
        if t == "basic_email":
            return {"Authorization": f"Basic {_b64(f'{self.email}:{password}')}"}

        if t in ("bearer", "bearer_oauth", "bearer_jwt"):
            return {"Authorization": f"Bearer {key}"}
        if t == "bearer_username_token":
            return {"Authorization": f"Bearer {_b64(f'{self.username}:{key}')}"}
        if t == "bearer_username_password":
            return {"Authorization": f"Bearer {_b64(f'{self.username}:{password}')}"}
        if t == "bearer_email_token":
            return {"Authorization": f"Bearer {_b64(f'{self.email}:{key}')}"}
        if t == "bearer_email_password":
            return {"Authorization": f"Bearer {_b64(f'{self.email}:{password}')}"}

        if t == "x-api-key":
            return {"X-API-Key": key or ""}
        if t in ("custom", "custom_header"):
            return {self.header_name or "Authorization": key or ""}

        return {}


class StaticAuthorizationHook(AuthorizationHook):
    """Adds a fixed authorization header; parameters pass through unsigned."""

    def __init__(self, credentials: AuthCredentials):
        self.credentials = credentials

    async def sign_and_parameterize(
        self,
        url: str,
        parameters: Mapping[str, Any],
        method: HttpMethod,
    ) -> Dict[str, Any]:
        return dict(parameters)

    def apply_auth_header(self, url: str, headers: Mapping[str, str]) -> Dict[str, str]:
        auth_headers = self.credentials.to_headers()
        for name, value in auth_headers.items():
            logger.debug(f"{LOG_PREFIX} {name}={mask_header_value(name, value)} for {url}")
        return merge_headers(headers, auth_headers)
