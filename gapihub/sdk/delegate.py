"""Delegates: the retry policy and progress observer consulted by every call.

A delegate is asked what to do whenever something goes wrong while a call
executes, and is told when the call begins and ends. The base `Delegate`
never retries; `PolicyDelegate` composes a `RetryPolicy` with an optional
observer that receives the lifecycle events.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from email.utils import parsedate_to_datetime
from typing import Any, FrozenSet, Optional

from tenacity import RetryCallState, wait_exponential, wait_random_exponential

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MethodInfo:
    """Identifies the method a call executes."""
    id: str
    http_method: str


class Retry:
    """Decision returned by the retry hooks."""

    __slots__ = ("kind", "delay")

    def __init__(self, kind: str, delay: float = 0.0):
        self.kind = kind
        self.delay = delay

    @classmethod
    def after(cls, seconds: float) -> "Retry":
        """Retry the request after sleeping `seconds`."""
        return cls("after", max(0.0, float(seconds)))

    @property
    def is_retry(self) -> bool:
        return self.kind == "after"

    def __eq__(self, other):
        return isinstance(other, Retry) and (self.kind, self.delay) == (other.kind, other.delay)

    def __hash__(self):
        return hash((self.kind, self.delay))

    def __repr__(self):
        if self.is_retry:
            return f"Retry.after({self.delay})"
        return f"Retry.{self.kind.upper()}"


# Surface the error to the caller.
Retry.ABORT = Retry("abort")
# Abandon the call; it ends with Cancelled.
Retry.CANCEL = Retry("cancel")


class Delegate:
    """
    Hooks consulted during a call.

    Every method has a no-op default, so subclasses override only what they
    need. This base class is used when a call has no delegate: it supplies
    no substitute token and never retries.
    """

    def begin(self, info: MethodInfo):
        """Called before any validation or I/O."""
        pass

    def token(self, error: Exception) -> Optional[str]:
        """Token acquisition failed; return a substitute token or None."""
        return None

    def pre_request(self):
        """Called right before each HTTP request is sent."""
        pass

    def http_error(self, error: Exception) -> Retry:
        """A transport error occurred."""
        return Retry.ABORT

    def http_failure(self, response, server_error: Optional[dict]) -> Retry:
        """The server answered with a non-2xx status."""
        return Retry.ABORT

    def response_json_decode_error(self, body: str, error: Exception):
        """A successful response did not match the response schema."""
        pass

    def finished(self, is_success: bool):
        """Called once on every exit path."""
        pass


DefaultDelegate = Delegate


@dataclass
class RetryPolicy:
    """
    Exponential backoff with full jitter.

    `max_attempts` counts the first attempt, so 1 disables retries.
    A Retry-After header on a failure response (seconds or HTTP date) takes
    precedence over the computed backoff.
    """
    max_attempts: int = 5
    initial_backoff: float = 1.0
    max_backoff: float = 32.0
    multiplier: float = 2.0
    jitter: bool = True
    retryable_status: FrozenSet[int] = field(
        default_factory=lambda: frozenset({408, 429, 500, 502, 503, 504}))

    def wait_strategy(self):
        """The tenacity wait strategy computing the backoff."""
        wait_cls = wait_random_exponential if self.jitter else wait_exponential
        return wait_cls(multiplier=self.initial_backoff, max=self.max_backoff, exp_base=self.multiplier)

    def backoff(self, retry_number: int) -> float:
        """Delay before retry number `retry_number` (1-based)."""
        state = RetryCallState(retry_object=None, fn=None, args=(), kwargs={})
        state.attempt_number = retry_number
        return self.wait_strategy()(state)

    def can_retry(self, attempts: int) -> bool:
        return attempts < self.max_attempts


def retry_after_seconds(response) -> Optional[float]:
    """
    Seconds to wait according to the response's Retry-After header.

    Accepts both the delay-seconds and the HTTP-date form. Returns None when
    the header is missing or unparseable; dates in the past give 0.
    """
    headers = getattr(response, "headers", None) or {}
    value = headers.get("Retry-After")
    if not value:
        return None
    try:
        return max(float(value), 0.0)
    except ValueError:
        pass
    try:
        retry_date = parsedate_to_datetime(value)
        delta = (retry_date - datetime.now(retry_date.tzinfo)).total_seconds()
        return max(delta, 0.0)
    except (ValueError, TypeError, AttributeError):
        return None


class PolicyDelegate(Delegate):
    """
    Delegate composed of a retry policy and an optional progress observer.

    The observer may be any object implementing some of the `Delegate`
    lifecycle hooks (`begin`, `pre_request`, `response_json_decode_error`,
    `finished`); missing hooks are skipped.
    """

    def __init__(self, policy: Optional[RetryPolicy] = None, observer: Any = None):
        self.policy = policy or RetryPolicy()
        self.observer = observer
        self.attempts = 0

    def _notify(self, hook: str, *args):
        fn = getattr(self.observer, hook, None)
        if fn is not None:
            fn(*args)

    def begin(self, info: MethodInfo):
        self.attempts = 0
        self._notify("begin", info)

    def pre_request(self):
        self.attempts += 1
        self._notify("pre_request")

    def http_error(self, error: Exception) -> Retry:
        if not self.policy.can_retry(self.attempts):
            logger.debug(f"Giving up after {self.attempts} attempt(s): {error}")
            return Retry.ABORT
        delay = self.policy.backoff(self.attempts)
        logger.debug(f"Transport error on attempt {self.attempts}, retrying in {delay:.2f}s: {error}")
        return Retry.after(delay)

    def http_failure(self, response, server_error: Optional[dict]) -> Retry:
        status = getattr(response, "status_code", None)
        if status not in self.policy.retryable_status:
            return Retry.ABORT
        if not self.policy.can_retry(self.attempts):
            logger.debug(f"Giving up after {self.attempts} attempt(s): HTTP {status}")
            return Retry.ABORT
        delay = retry_after_seconds(response)
        if delay is None:
            delay = self.policy.backoff(self.attempts)
        logger.debug(f"HTTP {status} on attempt {self.attempts}, retrying in {delay:.2f}s")
        return Retry.after(delay)

    def response_json_decode_error(self, body: str, error: Exception):
        self._notify("response_json_decode_error", body, error)

    def finished(self, is_success: bool):
        self._notify("finished", is_success)


class LoggingObserver:
    """Progress observer that logs lifecycle events at debug level."""

    def __init__(self, log: Optional[logging.Logger] = None):
        self.log = log or logger
        self.method = None

    def begin(self, info: MethodInfo):
        self.method = info
        self.log.debug(f"Begin {info.http_method} {info.id}")

    def pre_request(self):
        self.log.debug(f"Sending request for {self.method.id if self.method else '?'}")

    def response_json_decode_error(self, body: str, error: Exception):
        self.log.debug(f"Response did not match schema: {error}")

    def finished(self, is_success: bool):
        outcome = "succeeded" if is_success else "failed"
        self.log.debug(f"{self.method.id if self.method else 'Call'} {outcome}")
