"""Operation status enumeration and ledger status code tables.

Status codes for operation outcomes, used to classify results of ledger
operations for appropriate error handling and retries. The ledger code
tables hold the receipt/precheck status names reported by the network.
"""

from enum import Enum


class OperationStatus(Enum):
    """Status codes for operation outcomes.

    Attributes:
        SUCCESS: Operation completed successfully
        TRANSIENT_ERROR: Retryable error (network, timeout, node busy)
        PERMANENT_ERROR: Non-retryable error (invalid request, balance, duplicate)
        UNAUTHORIZED: Signature or authorization failure
        NOT_FOUND: Referenced ledger entity does not exist
    """

    SUCCESS = "success"
    TRANSIENT_ERROR = "transient_error"
    PERMANENT_ERROR = "permanent_error"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"


SUCCESS_STATUS = "SUCCESS"

# Conditions expected to clear after waiting
TRANSIENT_LEDGER_STATUSES = frozenset(
    {
        "BUSY",
        "PLATFORM_TRANSACTION_NOT_CREATED",
        "PLATFORM_NOT_ACTIVE",
        "TRANSACTION_EXPIRED",
        "INVALID_NODE_ACCOUNT",
        "RECEIPT_NOT_FOUND",
        "RECORD_NOT_FOUND",
        "THROTTLED_AT_CONSENSUS",
        "UNKNOWN",
    }
)

UNAUTHORIZED_LEDGER_STATUSES = frozenset(
    {
        "INVALID_SIGNATURE",
        "UNAUTHORIZED",
        "AUTHORIZATION_FAILED",
        "INVALID_PAYER_SIGNATURE",
        "KEY_REQUIRED",
        "TOKEN_HAS_NO_SUPPLY_KEY",
    }
)

NOT_FOUND_LEDGER_STATUSES = frozenset(
    {
        "INVALID_ACCOUNT_ID",
        "INVALID_TOKEN_ID",
        "INVALID_TOPIC_ID",
        "INVALID_FILE_ID",
        "ACCOUNT_DELETED",
        "PAYER_ACCOUNT_NOT_FOUND",
        "TOKEN_WAS_DELETED",
    }
)

# Receipt lookups that mean the submitted transaction has not resolved yet
RECEIPT_PENDING_STATUSES = frozenset(
    {
        "RECEIPT_NOT_FOUND",
        "RECORD_NOT_FOUND",
        "UNKNOWN",
    }
)

# Requests that can never succeed as submitted
TERMINAL_LEDGER_STATUSES = frozenset(
    {
        "INSUFFICIENT_PAYER_BALANCE",
        "INSUFFICIENT_ACCOUNT_BALANCE",
        "INSUFFICIENT_TOKEN_BALANCE",
        "INSUFFICIENT_TX_FEE",
        "DUPLICATE_TRANSACTION",
        "INVALID_TRANSACTION",
        "INVALID_TRANSACTION_BODY",
        "INVALID_TRANSACTION_START",
        "INVALID_TRANSACTION_DURATION",
        "TRANSACTION_OVERSIZE",
        "MEMO_TOO_LONG",
        "INVALID_TOKEN_MINT_AMOUNT",
        "INVALID_TOKEN_BURN_AMOUNT",
        "TOKEN_NOT_ASSOCIATED_TO_ACCOUNT",
        "TOKEN_ALREADY_ASSOCIATED_TO_ACCOUNT",
    }
    | UNAUTHORIZED_LEDGER_STATUSES
    | NOT_FOUND_LEDGER_STATUSES
)

# Unlisted codes with these prefixes describe a malformed or unfundable request
TERMINAL_STATUS_PREFIXES = ("INVALID_", "INSUFFICIENT_")


def is_transient_ledger_status(status: str) -> bool:
    """Return True if a ledger status code is worth retrying.

    Listed terminal codes and unlisted codes starting with a terminal prefix
    are not retryable; everything else is.
    """
    code = str(status).upper()
    if code in TRANSIENT_LEDGER_STATUSES:
        return True
    if code in TERMINAL_LEDGER_STATUSES:
        return False
    return not code.startswith(TERMINAL_STATUS_PREFIXES)


def is_receipt_pending_status(status: str) -> bool:
    """Return True if a receipt status means "ask again", not "submit again"."""
    return str(status).upper() in RECEIPT_PENDING_STATUSES
