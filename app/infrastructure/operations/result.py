"""Operation outcome dataclass.

Uniform result type returned from ledger operations: either a success
carrying the network response (and receipt, for transactions) or a failure
carrying the last underlying error and the number of attempts made.
"""

from typing import Optional, Any
from dataclasses import dataclass

from infrastructure.operations.errors import OperationFailedError
from infrastructure.operations.status import OperationStatus


@dataclass
class OperationOutcome:
    """Tagged outcome of one ledger operation invocation.

    Created fresh per invocation and never persisted. The caller decides
    whether a failure is fatal to the surrounding workflow.

    Attributes:
        status: OperationStatus -- high-level outcome
        message: str -- human-friendly message for logs/troubleshooting
        label: Optional[str] -- label of the operation that produced it
        response: Optional[Any] -- submit/query response (success only)
        receipt: Optional[Any] -- transaction receipt (successful submits only)
        last_error: Optional[BaseException] -- last underlying error (failure only)
        error_code: Optional[str] -- machine error code, usually a ledger status
        attempts_made: int -- attempts consumed, including the first
        elapsed_ms: float -- wall time spent, including retry delays
    """

    status: OperationStatus
    message: str
    label: Optional[str] = None
    response: Optional[Any] = None
    receipt: Optional[Any] = None
    last_error: Optional[BaseException] = None
    error_code: Optional[str] = None
    attempts_made: int = 0
    elapsed_ms: float = 0.0

    @property
    def is_success(self) -> bool:
        """Helper property to check if operation was successful.

        Returns:
            True if status is SUCCESS, False otherwise
        """
        return self.status == OperationStatus.SUCCESS

    @property
    def is_retryable(self) -> bool:
        """True only for failures that another attempt could fix."""
        return self.status == OperationStatus.TRANSIENT_ERROR

    @classmethod
    def success(
        cls,
        response: Optional[Any] = None,
        receipt: Optional[Any] = None,
        message: str = "ok",
        **kwargs: Any,
    ) -> "OperationOutcome":
        """Create a SUCCESS outcome.

        Args:
            response: Network response for the submit or query
            receipt: Transaction receipt, None for queries
            message: Human-friendly success message
            **kwargs: label, attempts_made, elapsed_ms

        Returns:
            OperationOutcome with SUCCESS status
        """
        return cls(
            status=OperationStatus.SUCCESS,
            message=message,
            response=response,
            receipt=receipt,
            **kwargs,
        )

    @classmethod
    def error(
        cls,
        status: OperationStatus,
        message: str,
        error_code: Optional[str] = None,
        last_error: Optional[BaseException] = None,
        **kwargs: Any,
    ) -> "OperationOutcome":
        """Create an error outcome.

        Args:
            status: OperationStatus indicating error type
            message: Human-friendly error message
            error_code: Optional machine error code
            last_error: Underlying exception
            **kwargs: label, attempts_made, elapsed_ms

        Returns:
            OperationOutcome with specified error status
        """
        return cls(
            status=status,
            message=message,
            error_code=error_code,
            last_error=last_error,
            **kwargs,
        )

    @classmethod
    def transient_error(
        cls,
        message: str,
        error_code: Optional[str] = None,
        last_error: Optional[BaseException] = None,
    ) -> "OperationOutcome":
        """Create a transient (retryable) error outcome.

        Use for errors that may succeed on retry, such as:
        - Network timeouts
        - Node busy / throttled
        - Receipt not yet available

        Returns:
            OperationOutcome with TRANSIENT_ERROR status
        """
        return cls.error(
            OperationStatus.TRANSIENT_ERROR, message, error_code, last_error
        )

    @classmethod
    def permanent_error(
        cls,
        message: str,
        error_code: Optional[str] = None,
        last_error: Optional[BaseException] = None,
    ) -> "OperationOutcome":
        """Create a permanent (non-retryable) error outcome.

        Use for errors that will not succeed on retry, such as:
        - Malformed parameters
        - Insufficient account balance
        - Duplicate transaction

        Returns:
            OperationOutcome with PERMANENT_ERROR status
        """
        return cls.error(
            OperationStatus.PERMANENT_ERROR, message, error_code, last_error
        )

    def with_attempts(
        self, label: str, attempts_made: int, elapsed_ms: float
    ) -> "OperationOutcome":
        """Return a copy stamped with invocation bookkeeping."""
        return OperationOutcome(
            status=self.status,
            message=self.message,
            label=label,
            response=self.response,
            receipt=self.receipt,
            last_error=self.last_error,
            error_code=self.error_code,
            attempts_made=attempts_made,
            elapsed_ms=elapsed_ms,
        )

    def unwrap(self) -> "OperationOutcome":
        """Return self on success, raise OperationFailedError otherwise."""
        if not self.is_success:
            raise OperationFailedError(self)
        return self
