"""Operation outcomes, ledger errors and error classification.

This module contains the standardized outcome type for ledger operations,
status enums and ledger status code tables, structural error types, and the
classifier that decides whether a failure is worth retrying.
"""

from infrastructure.operations.classifiers import (
    classify_ledger_error,
    classify_status_code,
)
from infrastructure.operations.errors import (
    HealthCheckFailedError,
    LedgerError,
    OperationFailedError,
    ReceiptStatusError,
    TerminalLedgerError,
    TransientLedgerError,
)
from infrastructure.operations.models import LedgerOperation, OperationKind
from infrastructure.operations.result import OperationOutcome
from infrastructure.operations.status import (
    OperationStatus,
    is_receipt_pending_status,
    is_transient_ledger_status,
)

__all__ = [
    "OperationOutcome",
    "OperationStatus",
    "LedgerOperation",
    "OperationKind",
    "LedgerError",
    "TransientLedgerError",
    "TerminalLedgerError",
    "ReceiptStatusError",
    "OperationFailedError",
    "HealthCheckFailedError",
    "classify_ledger_error",
    "classify_status_code",
    "is_receipt_pending_status",
    "is_transient_ledger_status",
]
