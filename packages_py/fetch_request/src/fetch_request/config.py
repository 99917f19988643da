"""
Transport configuration.

Values resolve in priority order: explicit argument, environment variable,
config mapping, default. The request timeout and cache policy are fixed and
not configurable here.
"""
import logging
import os
from typing import Any, Mapping, Optional

from pydantic import BaseModel

logger = logging.getLogger(__name__)

ENV_FOLLOW_REDIRECTS = "FETCH_REQUEST_FOLLOW_REDIRECTS"
ENV_TRUST_ENV = "FETCH_REQUEST_TRUST_ENV"
ENV_PROXY = "FETCH_REQUEST_PROXY"

TRUTHY = ("true", "1", "yes", "on")


class TransportConfig(BaseModel):
    """Settings for the httpx transport."""
    follow_redirects: bool = True
    trust_env: bool = False
    proxy: Optional[str] = None


def _setting(
    arg: Any,
    env_key: str,
    config: Optional[Mapping[str, Any]],
    key: str,
    default: Any,
) -> Any:
    if arg is not None:
        return arg
    env_value = os.getenv(env_key)
    if env_value is not None:
        return env_value
    return (config or {}).get(key, default)


def _flag(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in TRUTHY
    return bool(value)


def resolve_transport_config(
    follow_redirects: Optional[bool] = None,
    trust_env: Optional[bool] = None,
    proxy: Optional[str] = None,
    config: Optional[Mapping[str, Any]] = None,
) -> TransportConfig:
    """Build a TransportConfig from arguments, environment and a config mapping."""
    resolved = TransportConfig(
        follow_redirects=_flag(
            _setting(follow_redirects, ENV_FOLLOW_REDIRECTS, config, "follow_redirects", True)
        ),
        trust_env=_flag(_setting(trust_env, ENV_TRUST_ENV, config, "trust_env", False)),
        proxy=_setting(proxy, ENV_PROXY, config, "proxy", None) or None,
    )
    logger.debug(f"Resolved transport config: {resolved.model_dump()}")
    return resolved
