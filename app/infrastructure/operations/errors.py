"""Structural error types for ledger operations.

Whether a failure is worth retrying is a property of the error type, not of
its message text. Adapters that wrap a concrete ledger SDK should raise these
(or exceptions exposing a ``status`` code) so the executor can classify them.
"""

from typing import Any, Optional, TYPE_CHECKING

from infrastructure.operations.status import is_transient_ledger_status

if TYPE_CHECKING:
    from infrastructure.operations.result import OperationOutcome
    from infrastructure.resilience.health import HealthCheckResult


class LedgerError(Exception):
    """Base class for ledger failures.

    Attributes:
        status: Optional ledger status code (e.g., "BUSY")
        retryable: Whether another attempt could succeed
    """

    retryable: bool = True

    def __init__(self, message: str, status: Optional[str] = None):
        super().__init__(message)
        self.status = status


class TransientLedgerError(LedgerError):
    """Network timeout, node busy, temporary unavailability."""

    retryable = True


class TerminalLedgerError(LedgerError):
    """Invalid request, insufficient balance, duplicate submission, auth failure."""

    retryable = False


class ReceiptStatusError(LedgerError):
    """A submitted transaction reached consensus with a non-success status."""

    def __init__(self, status: str, receipt: Any = None):
        super().__init__(f"Transaction failed with status: {status}", status=status)
        self.receipt = receipt

    @property  # type: ignore[override]
    def retryable(self) -> bool:
        return is_transient_ledger_status(self.status or "")


class OperationFailedError(Exception):
    """Raised by the safe_* executor methods when an operation does not succeed.

    Attributes:
        outcome: The failure OperationOutcome (last_error, attempts_made, ...)
    """

    def __init__(self, outcome: "OperationOutcome"):
        self.outcome = outcome
        super().__init__(
            f"{outcome.label} failed after {outcome.attempts_made} attempt(s): "
            f"{outcome.message}"
        )

    @property
    def last_error(self) -> Optional[BaseException]:
        return self.outcome.last_error

    @property
    def attempts_made(self) -> int:
        return self.outcome.attempts_made


class HealthCheckFailedError(Exception):
    """Raised when the readiness gate finds the ledger client unhealthy."""

    def __init__(self, result: "HealthCheckResult"):
        self.result = result
        super().__init__(
            f"Health check failed: {result.error or 'System not ready'} "
            f"(score {result.score}/3)"
        )
