"""
Completion strategies and the completion dispatcher.

A request carries exactly one completion strategy. The dispatcher maps the
transport result to an outcome (only status 200 is a success) and notifies
the strategy exactly once.
"""
import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable, Optional, Protocol, runtime_checkable

from .errors import DecodingFailure, HttpStatusFailure, TransportError

logger = logging.getLogger(__name__)

LOG_PREFIX = "[Completion]"

STATUS_LABELS = {
    401: "Unauthorized",
    403: "Resource Forbidden",
    404: "Resource Not Found",
    408: "Network Timeout",
    415: "Unsupported Media Type",
    500: "Server Error",
}


class CompletionOutcome(str, Enum):
    SUCCESS = "success"
    FAILURE = "failure"


@runtime_checkable
class ResultsReceiver(Protocol):
    """Receives the response body of a successful request."""
    def on_results(self, data: Optional[bytes]) -> None: ...


@runtime_checkable
class SuccessFailureReceiver(Protocol):
    """Receives a bare success or failure signal."""
    def on_success(self) -> None: ...
    def on_failure(self) -> None: ...


class CompletionStrategy(ABC):
    """The caller-selected way of hearing back from a request."""

    @abstractmethod
    def notify(self, outcome: CompletionOutcome, payload: Optional[bytes]) -> None:
        """Deliver the outcome. ``payload`` is the body on success, else None."""
        ...


class RawDataCallback(CompletionStrategy):
    """Calls ``fn(body)`` on success and ``fn(None)`` on any failure."""

    def __init__(self, fn: Callable[[Optional[bytes]], None]):
        self.fn = fn

    def notify(self, outcome: CompletionOutcome, payload: Optional[bytes]) -> None:
        self.fn(payload if outcome == CompletionOutcome.SUCCESS else None)


class ResultsDelegate(CompletionStrategy):
    """
    Calls ``delegate.on_results(body)`` on success.

    Failures are dropped without any notification unless ``notify_failures``
    is set, in which case ``on_results(None)`` is called.
    """

    def __init__(self, delegate: ResultsReceiver, notify_failures: bool = False):
        self.delegate = delegate
        self.notify_failures = notify_failures

    def notify(self, outcome: CompletionOutcome, payload: Optional[bytes]) -> None:
        if outcome == CompletionOutcome.SUCCESS:
            self.delegate.on_results(payload)
        elif self.notify_failures:
            self.delegate.on_results(None)
        else:
            logger.debug(f"{LOG_PREFIX} Failure not delivered to results delegate")


class SuccessFailureDelegate(CompletionStrategy):
    """Calls ``delegate.on_success()`` for status 200, ``on_failure()`` otherwise."""

    def __init__(self, delegate: SuccessFailureReceiver):
        self.delegate = delegate

    def notify(self, outcome: CompletionOutcome, payload: Optional[bytes]) -> None:
        if outcome == CompletionOutcome.SUCCESS:
            self.delegate.on_success()
        else:
            self.delegate.on_failure()


def decode_body(body: Optional[bytes], encoding: str = "utf-8") -> Optional[str]:
    """Decode a response body; undecodable bytes are treated as absent."""
    if body is None:
        return None
    try:
        return body.decode(encoding)
    except (UnicodeDecodeError, LookupError) as e:
        failure = DecodingFailure(encoding, cause=e)
        logger.debug(f"{LOG_PREFIX} {failure}")
        return None


def _preview(body: Optional[bytes], max_len: int = 200) -> str:
    text = decode_body(body)
    if text is None:
        return "<empty>" if body is None else f"<binary data: {len(body)} bytes>"
    if len(text) <= max_len:
        return text
    return text[:max_len] + "... (truncated)"


def describe_status(status: int) -> str:
    """Diagnostic label for a status code."""
    return STATUS_LABELS.get(status, "Unexpected Status")


def classify_response(
    status: Optional[int],
    error: Optional[BaseException] = None,
) -> CompletionOutcome:
    """Only a status of exactly 200 without a transport error is a success."""
    if error is not None or status is None:
        return CompletionOutcome.FAILURE
    if status == 200:
        return CompletionOutcome.SUCCESS
    return CompletionOutcome.FAILURE


def _log_failure(status: Optional[int], error: Optional[BaseException]) -> None:
    if error is not None or status is None:
        failure = error if isinstance(error, TransportError) else TransportError(
            str(error) if error else "No response received", cause=error
        )
        logger.error(f"{LOG_PREFIX} {type(failure).__name__}: {failure}")
        return
    failure = HttpStatusFailure(status, describe_status(status))
    logger.warning(f"{LOG_PREFIX} {type(failure).__name__}: {failure}")


def dispatch(
    strategy: CompletionStrategy,
    status: Optional[int],
    body: Optional[bytes] = None,
    error: Optional[BaseException] = None,
) -> CompletionOutcome:
    """
    Route a transport result to the completion strategy.

    Args:
        strategy: The request's completion strategy.
        status: HTTP status, or None when no response arrived.
        body: Response body bytes, discarded unless the outcome is a success.
        error: Transport error, if any. Its presence forces a failure.

    Returns:
        The outcome that was delivered.
    """
    outcome = classify_response(status, error)
    if outcome == CompletionOutcome.SUCCESS:
        logger.debug(f"{LOG_PREFIX} (200) Success: {_preview(body)}")
        strategy.notify(outcome, body)
    else:
        _log_failure(status, error)
        strategy.notify(outcome, None)
    return outcome
