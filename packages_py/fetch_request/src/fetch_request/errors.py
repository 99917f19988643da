"""
Error taxonomy for fetch-request.

These errors classify failures for logging. None of them is surfaced to a
completion strategy; every failure collapses to a plain failure notification.
"""
from typing import Optional


class FetchRequestError(Exception):
    """Base exception for fetch-request errors."""
    pass


class TransportError(FetchRequestError):
    """Network or connectivity failure; no response was received."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class HttpStatusFailure(FetchRequestError):
    """A response arrived with a status other than 200."""

    def __init__(self, status: int, label: str):
        super().__init__(f"({status}) {label}")
        self.status = status
        self.label = label


class DecodingFailure(FetchRequestError):
    """Body bytes could not be decoded under the assumed encoding."""

    def __init__(self, encoding: str, cause: Optional[BaseException] = None):
        super().__init__(f"Unable to decode body as {encoding}")
        self.encoding = encoding
        self.cause = cause


class AuthorizationError(FetchRequestError):
    """An authorization hook could not sign or authorize a request."""
    pass
