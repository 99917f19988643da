"""
Authorization hooks.
"""
from .base import AuthorizationHook
from .static import AuthCredentials, AuthType, StaticAuthorizationHook
from .oauth1 import OAuth1AuthorizationHook, OAuth1Credentials

__all__ = [
    "AuthorizationHook",
    "AuthCredentials",
    "AuthType",
    "StaticAuthorizationHook",
    "OAuth1AuthorizationHook",
    "OAuth1Credentials",
]
