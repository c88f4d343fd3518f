"""
Opt-in retry for transient failures.

``Client.send`` makes exactly one attempt. Callers that want retries wrap it
with ``send_with_retry`` and a ``RetryPolicy``.
"""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional, Tuple, Union

from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from .api import Api, RequestT, ResponseT
from .errors import ApiError, HttpStatusError, ResponseTooLargeError, TransportError

if TYPE_CHECKING:
    from .client import Client

logger = logging.getLogger(__name__)

# Vendor codes worth another attempt
TRANSIENT_API_ERROR_CODES = frozenset({"RequestLimitExceeded", "InternalError"})


def is_transient_error(exception: BaseException) -> bool:
    """
    Determine if an error is transient and should be retried.

    Transient errors:
    - TransportError (connection issues, timeouts)
    - HttpStatusError with 5xx status codes
    - ApiError with RequestLimitExceeded / InternalError

    Non-transient errors (do NOT retry):
    - ResponseTooLargeError
    - MarshalError, DecodeError, SigningError
    - ProtocolError
    - Other HTTP status codes and vendor error codes
    """
    if isinstance(exception, ResponseTooLargeError):
        return False

    if isinstance(exception, HttpStatusError):
        return 500 <= exception.status_code < 600

    if isinstance(exception, TransportError):
        return True

    if isinstance(exception, ApiError):
        return exception.code in TRANSIENT_API_ERROR_CODES

    return False


def _log_before_sleep(retry_state: RetryCallState) -> None:
    exception = retry_state.outcome.exception() if retry_state.outcome else None
    logger.warning(f"Retrying after attempt {retry_state.attempt_number}: {exception}")


@dataclass(frozen=True)
class RetryPolicy:
    """
    How many times to call an action and how long to back off in between.

    Waits grow exponentially from ``min_wait_seconds`` and are capped at
    ``max_wait_seconds``. Only errors accepted by ``is_transient_error`` are
    attempted again.
    """

    max_attempts: int = 3
    min_wait_seconds: float = 1.0
    max_wait_seconds: float = 10.0
    multiplier: float = 2.0

    @classmethod
    def default(cls) -> "RetryPolicy":
        return cls()

    @classmethod
    def no_retry(cls) -> "RetryPolicy":
        """Single attempt; the first error propagates."""
        return cls(max_attempts=1)

    @classmethod
    def rate_limited(cls) -> "RetryPolicy":
        """
        For accounts that regularly hit ``RequestLimitExceeded``.

        Tencent Cloud frequency limits are counted per second, so the first
        wait already clears the window and later ones back off further.
        """
        return cls(max_attempts=5, min_wait_seconds=1.0, max_wait_seconds=20.0)

    def to_tenacity_kwargs(self) -> Dict[str, Any]:
        return {
            "stop": stop_after_attempt(self.max_attempts),
            "wait": wait_exponential(
                multiplier=self.multiplier,
                min=self.min_wait_seconds,
                max=self.max_wait_seconds,
            ),
            "retry": retry_if_exception(is_transient_error),
            "before_sleep": _log_before_sleep,
            "reraise": True,
        }


async def send_with_retry(
    client: "Client",
    api: Api[RequestT, ResponseT],
    request: Union[RequestT, Mapping[str, Any]],
    retry_policy: Optional[RetryPolicy] = None,
) -> Tuple[ResponseT, str]:
    """
    ``client.send`` with retries for transient failures.

    Every attempt is signed afresh with the current time. The last error is
    re-raised once the policy gives up.
    """
    policy = retry_policy or RetryPolicy.default()
    async for attempt in AsyncRetrying(**policy.to_tenacity_kwargs()):
        with attempt:
            return await client.send(api, request)

    # unreachable with reraise=True
    raise RuntimeError("retry loop exited without a result")
