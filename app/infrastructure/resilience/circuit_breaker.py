"""Circuit breaker for ledger operations.

Stops a caller from hammering a ledger network that keeps failing:

1. CLOSED: normal operation, calls pass through
2. OPEN: calls are rejected immediately (after failure_threshold failures)
3. HALF_OPEN: a limited number of trial calls test recovery

State transitions:
- CLOSED -> OPEN: after failure_threshold consecutive failures
- OPEN -> HALF_OPEN: once reset_timeout_seconds have passed since the last failure
- HALF_OPEN -> CLOSED: after a successful trial call
- HALF_OPEN -> OPEN: if a trial call fails

Breakers are plain objects owned by their caller; there is no global registry.
"""

import threading
import time
from enum import Enum
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Dict, Optional

from infrastructure.logging import get_module_logger
from infrastructure.operations.errors import TerminalLedgerError

if TYPE_CHECKING:
    from infrastructure.configuration import CircuitBreakerSettings

logger = get_module_logger()

Clock = Callable[[], float]


class CircuitState(Enum):
    """Circuit breaker states."""

    CLOSED = "closed"
    OPEN = "open"
    HALF_OPEN = "half_open"


class CircuitBreakerOpenError(TerminalLedgerError):
    """Raised when the breaker rejects a call without running it."""

    def __init__(self, name: str, retry_in_seconds: float):
        super().__init__(
            f"Circuit breaker '{name}' is OPEN. "
            f"Retry in {int(retry_in_seconds)} seconds.",
            status="CIRCUIT_OPEN",
        )
        self.name = name
        self.retry_in_seconds = retry_in_seconds


class CircuitBreaker:
    """Circuit breaker guarding calls to one ledger network.

    Args:
        name: Name of the circuit, used in logs and errors
        failure_threshold: Consecutive failures before opening
        reset_timeout_seconds: Wait after the last failure before a trial call
        half_open_max_calls: Trial calls allowed at once while HALF_OPEN
        clock: Monotonic clock in seconds. Defaults to time.monotonic.

    Example:
        breaker = CircuitBreaker("hedera-testnet", failure_threshold=5)

        receipt = await breaker.call(
            executor.safe_transaction_execute, build_mint, client, "HTS Token Mint"
        )
    """

    def __init__(
        self,
        name: str = "ledger",
        failure_threshold: int = 5,
        reset_timeout_seconds: float = 60,
        half_open_max_calls: int = 1,
        clock: Optional[Clock] = None,
    ):
        if failure_threshold < 1:
            raise ValueError("failure_threshold must be at least 1")
        if reset_timeout_seconds < 0:
            raise ValueError("reset_timeout_seconds must be >= 0")
        if half_open_max_calls < 1:
            raise ValueError("half_open_max_calls must be at least 1")

        self.name = name
        self.failure_threshold = failure_threshold
        self.reset_timeout_seconds = reset_timeout_seconds
        self.half_open_max_calls = half_open_max_calls
        self._clock = clock or time.monotonic

        self._state = CircuitState.CLOSED
        self._failure_count = 0
        self._last_failure_time: Optional[float] = None
        self._half_open_calls = 0

        self._lock = threading.Lock()

    @classmethod
    def from_settings(
        cls,
        settings: "CircuitBreakerSettings",
        name: str = "ledger",
        clock: Optional[Clock] = None,
    ) -> "CircuitBreaker":
        return cls(
            name=name,
            failure_threshold=settings.failure_threshold,
            reset_timeout_seconds=settings.reset_timeout_seconds,
            half_open_max_calls=settings.half_open_max_calls,
            clock=clock,
        )

    @property
    def state(self) -> CircuitState:
        with self._lock:
            return self._state

    def before_call(self) -> None:
        """Admit a call or raise CircuitBreakerOpenError.

        Every admitted call must be followed by record_success() or
        record_failure(), and then release_call().
        """
        with self._lock:
            if self._state == CircuitState.OPEN:
                remaining = self._seconds_until_reset()
                if remaining > 0:
                    logger.warning(
                        "circuit_breaker_open",
                        name=self.name,
                        failure_count=self._failure_count,
                        retry_in_seconds=int(remaining),
                    )
                    raise CircuitBreakerOpenError(self.name, remaining)
                self._transition_to_half_open()

            if self._state == CircuitState.HALF_OPEN:
                if self._half_open_calls >= self.half_open_max_calls:
                    logger.debug(
                        "circuit_breaker_half_open_limit",
                        name=self.name,
                        calls=self._half_open_calls,
                    )
                    raise CircuitBreakerOpenError(self.name, 0)
                self._half_open_calls += 1

    def record_success(self) -> None:
        with self._lock:
            if self._state == CircuitState.HALF_OPEN:
                logger.info("circuit_breaker_recovered", name=self.name)
                self._transition_to_closed()
            elif self._failure_count:
                self._failure_count = 0

    def record_failure(self, error: Optional[BaseException] = None) -> None:
        with self._lock:
            self._failure_count += 1
            self._last_failure_time = self._clock()

            if self._state == CircuitState.HALF_OPEN:
                logger.warning(
                    "circuit_breaker_recovery_failed", name=self.name, error=str(error)
                )
                self._transition_to_open()
            elif self._failure_count >= self.failure_threshold:
                logger.error(
                    "circuit_breaker_threshold_exceeded",
                    name=self.name,
                    failure_count=self._failure_count,
                    threshold=self.failure_threshold,
                    error=str(error),
                )
                self._transition_to_open()
            else:
                logger.warning(
                    "circuit_breaker_failure",
                    name=self.name,
                    failure_count=self._failure_count,
                    threshold=self.failure_threshold,
                    error=str(error),
                )

    def release_call(self) -> None:
        """Free the HALF_OPEN trial slot taken by before_call()."""
        with self._lock:
            if self._state == CircuitState.HALF_OPEN and self._half_open_calls:
                self._half_open_calls -= 1

    async def call(self, func: Callable[..., Awaitable[Any]], *args, **kwargs) -> Any:
        """Await ``func(*args, **kwargs)`` through the breaker.

        Raises:
            CircuitBreakerOpenError: if the circuit rejects the call
            Exception: anything raised by func
        """
        self.before_call()
        try:
            result = await func(*args, **kwargs)
        except Exception as e:
            self.record_failure(e)
            raise
        else:
            self.record_success()
            return result
        finally:
            self.release_call()

    def get_stats(self) -> Dict[str, Any]:
        with self._lock:
            return {
                "name": self.name,
                "state": self._state.value,
                "failure_count": self._failure_count,
                "last_failure_time": self._last_failure_time,
                "half_open_calls": self._half_open_calls,
            }

    def reset(self) -> None:
        """Force the circuit back to CLOSED."""
        with self._lock:
            logger.info("circuit_breaker_manual_reset", name=self.name)
            self._transition_to_closed()

    def _seconds_until_reset(self) -> float:
        if self._last_failure_time is None:
            return 0
        elapsed = self._clock() - self._last_failure_time
        return self.reset_timeout_seconds - elapsed

    def _transition_to_closed(self) -> None:
        logger.info("circuit_breaker_closed", name=self.name)
        self._state = CircuitState.CLOSED
        self._failure_count = 0
        self._half_open_calls = 0

    def _transition_to_open(self) -> None:
        logger.error(
            "circuit_breaker_opened",
            name=self.name,
            reset_timeout_seconds=self.reset_timeout_seconds,
        )
        self._state = CircuitState.OPEN
        self._half_open_calls = 0

    def _transition_to_half_open(self) -> None:
        logger.info("circuit_breaker_half_open", name=self.name)
        self._state = CircuitState.HALF_OPEN
        self._failure_count = 0
        self._half_open_calls = 0
