"""
Transport registry.
"""
import logging
from typing import Dict, Type

from .base import BaseTransport
from .adapter_httpx import HttpxTransport

logger = logging.getLogger(__name__)

_transports: Dict[str, Type[BaseTransport]] = {}


def register_transport(name: str, transport_cls: Type[BaseTransport]) -> None:
    """Register a transport class under a name."""
    _transports[name] = transport_cls
    logger.debug(f"Registered transport: {name}")


def get_transport(name: str = "httpx") -> BaseTransport:
    """Get a new transport instance by name."""
    if name not in _transports:
        raise KeyError(f"Transport '{name}' not found. Available: {list(_transports.keys())}")
    return _transports[name]()


# Register default transports
register_transport("httpx", HttpxTransport)

__all__ = ["BaseTransport", "HttpxTransport", "register_transport", "get_transport"]
