"""Error classifier for ledger exceptions.

Converts exceptions raised while building, submitting, or confirming a
ledger operation into OperationOutcome objects whose status says whether
another attempt is worthwhile. Classification is structural: it looks at
exception types and ledger status codes, never at message text.

Key Functions:
- classify_ledger_error(): any exception -> failure OperationOutcome
- classify_status_code(): ledger status code -> OperationStatus

Usage:
    from infrastructure.operations.classifiers import classify_ledger_error

    try:
        response = await client.submit(transaction)
    except Exception as exc:
        failure = classify_ledger_error(exc)
        if not failure.is_retryable:
            ...
"""

from typing import Optional

from infrastructure.operations.errors import LedgerError
from infrastructure.operations.result import OperationOutcome
from infrastructure.operations.status import (
    NOT_FOUND_LEDGER_STATUSES,
    UNAUTHORIZED_LEDGER_STATUSES,
    OperationStatus,
    is_transient_ledger_status,
)


def classify_status_code(status: str) -> OperationStatus:
    """Map a ledger status code to an OperationStatus.

    Status Code Mapping:
    - BUSY, PLATFORM_*, TRANSACTION_EXPIRED, RECEIPT_NOT_FOUND... -> TRANSIENT_ERROR
    - INVALID_SIGNATURE, UNAUTHORIZED... -> UNAUTHORIZED
    - INVALID_ACCOUNT_ID, INVALID_TOKEN_ID... -> NOT_FOUND
    - INSUFFICIENT_*, DUPLICATE_TRANSACTION, other INVALID_* -> PERMANENT_ERROR
    - Any other code -> TRANSIENT_ERROR

    Args:
        status: Status code as reported by the ledger (case-insensitive)

    Returns:
        OperationStatus for the code
    """
    code = str(status).upper()
    if is_transient_ledger_status(code):
        return OperationStatus.TRANSIENT_ERROR
    if code in UNAUTHORIZED_LEDGER_STATUSES:
        return OperationStatus.UNAUTHORIZED
    if code in NOT_FOUND_LEDGER_STATUSES:
        return OperationStatus.NOT_FOUND
    return OperationStatus.PERMANENT_ERROR


def _status_code_of(exc: BaseException) -> Optional[str]:
    # SDK exceptions (precheck/receipt errors) expose the code as `.status`
    status = getattr(exc, "status", None)
    if status is None:
        return None
    return str(status).upper()


def classify_ledger_error(exc: BaseException) -> OperationOutcome:
    """Classify a ledger exception into a failure OperationOutcome.

    Checked in order:
    1. LedgerError subclasses: the structural ``retryable`` flag decides;
       a status code, when present, refines terminal failures.
    2. Exceptions exposing a ``status`` code: status table lookup.
    3. TimeoutError / ConnectionError / OSError: transient network failure.
    4. ValueError / TypeError: the caller built a malformed request, terminal.
    5. Anything else: transient.

    Args:
        exc: Exception raised by the transaction builder, client, or receipt

    Returns:
        OperationOutcome with a non-success status, message, error_code and
        the original exception as last_error

    Example:
        exc = TerminalLedgerError("no funds", status="INSUFFICIENT_PAYER_BALANCE")
        failure = classify_ledger_error(exc)
        assert failure.status == OperationStatus.PERMANENT_ERROR
    """
    code = _status_code_of(exc)

    if isinstance(exc, LedgerError):
        if exc.retryable:
            return OperationOutcome.transient_error(
                f"Transient ledger error: {exc}",
                error_code=code or "TRANSIENT_LEDGER_ERROR",
                last_error=exc,
            )
        status = OperationStatus.PERMANENT_ERROR
        if code is not None:
            refined = classify_status_code(code)
            if refined != OperationStatus.TRANSIENT_ERROR:
                status = refined
        return OperationOutcome.error(
            status,
            f"Terminal ledger error: {exc}",
            error_code=code or "TERMINAL_LEDGER_ERROR",
            last_error=exc,
        )

    if code is not None:
        status = classify_status_code(code)
        return OperationOutcome.error(
            status,
            f"Ledger returned status {code}",
            error_code=code,
            last_error=exc,
        )

    # asyncio.TimeoutError is an alias of TimeoutError on current interpreters
    if isinstance(exc, TimeoutError):
        return OperationOutcome.transient_error(
            f"Ledger request timed out: {type(exc).__name__}: {exc}",
            error_code="TIMEOUT",
            last_error=exc,
        )

    if isinstance(exc, (ConnectionError, OSError)):
        return OperationOutcome.transient_error(
            f"Ledger connection error: {type(exc).__name__}: {exc}",
            error_code="NETWORK_ERROR",
            last_error=exc,
        )

    if isinstance(exc, (ValueError, TypeError)):
        return OperationOutcome.permanent_error(
            f"Invalid ledger request: {type(exc).__name__}: {exc}",
            error_code="INVALID_REQUEST",
            last_error=exc,
        )

    return OperationOutcome.transient_error(
        f"Unclassified ledger error: {type(exc).__name__}: {exc}",
        error_code="UNKNOWN_ERROR",
        last_error=exc,
    )
