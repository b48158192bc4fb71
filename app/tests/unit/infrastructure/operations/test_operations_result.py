"""Unit tests for OperationOutcome, ledger errors and operation descriptors."""

import pytest

from infrastructure.operations import (
    HealthCheckFailedError,
    LedgerOperation,
    OperationFailedError,
    OperationKind,
    OperationOutcome,
    OperationStatus,
    ReceiptStatusError,
    TerminalLedgerError,
    TransientLedgerError,
)
from infrastructure.resilience.health import HealthCheckResult


@pytest.mark.unit
class TestOperationOutcome:
    """Tests for OperationOutcome constructors and helpers."""

    def test_success(self):
        outcome = OperationOutcome.success({"tx": 1}, receipt="receipt")

        assert outcome.is_success
        assert not outcome.is_retryable
        assert outcome.status == OperationStatus.SUCCESS
        assert outcome.response == {"tx": 1}
        assert outcome.receipt == "receipt"
        assert outcome.message == "ok"

    def test_success_with_bookkeeping(self):
        outcome = OperationOutcome.success(
            "response", label="HTS Token Mint", attempts_made=2, elapsed_ms=5.0
        )

        assert outcome.label == "HTS Token Mint"
        assert outcome.attempts_made == 2
        assert outcome.elapsed_ms == 5.0

    def test_transient_error(self):
        exc = TimeoutError("deadline")
        outcome = OperationOutcome.transient_error(
            "timed out", error_code="TIMEOUT", last_error=exc
        )

        assert not outcome.is_success
        assert outcome.is_retryable
        assert outcome.last_error is exc

    def test_permanent_error(self):
        outcome = OperationOutcome.permanent_error("bad", error_code="INVALID_REQUEST")

        assert outcome.status == OperationStatus.PERMANENT_ERROR
        assert not outcome.is_retryable

    @pytest.mark.parametrize(
        "status", [OperationStatus.UNAUTHORIZED, OperationStatus.NOT_FOUND]
    )
    def test_other_errors_are_not_retryable(self, status):
        assert not OperationOutcome.error(status, "nope").is_retryable

    def test_with_attempts_returns_stamped_copy(self):
        original = OperationOutcome.transient_error("busy", error_code="BUSY")

        stamped = original.with_attempts("HCS Message Submit", 3, 4000.0)

        assert stamped is not original
        assert stamped.label == "HCS Message Submit"
        assert stamped.attempts_made == 3
        assert stamped.elapsed_ms == 4000.0
        assert stamped.error_code == "BUSY"
        assert original.attempts_made == 0

    def test_unwrap_success_returns_self(self):
        outcome = OperationOutcome.success("response")

        assert outcome.unwrap() is outcome

    def test_unwrap_failure_raises(self):
        exc = TransientLedgerError("busy", status="BUSY")
        outcome = OperationOutcome.transient_error(
            "busy", error_code="BUSY", last_error=exc
        ).with_attempts("HTS Token Mint", 3, 0.0)

        with pytest.raises(OperationFailedError) as exc_info:
            outcome.unwrap()

        assert exc_info.value.outcome is outcome
        assert exc_info.value.last_error is exc
        assert exc_info.value.attempts_made == 3


@pytest.mark.unit
class TestLedgerErrors:
    """Tests for structural error types."""

    def test_transient_is_retryable(self):
        error = TransientLedgerError("busy", status="BUSY")

        assert error.retryable is True
        assert error.status == "BUSY"
        assert str(error) == "busy"

    def test_terminal_is_not_retryable(self):
        assert TerminalLedgerError("no funds").retryable is False

    def test_receipt_status_error_message(self):
        error = ReceiptStatusError("INVALID_SIGNATURE", receipt="receipt")

        assert str(error) == "Transaction failed with status: INVALID_SIGNATURE"
        assert error.receipt == "receipt"
        assert error.retryable is False

    def test_receipt_status_error_transient_code(self):
        assert ReceiptStatusError("BUSY").retryable is True

    def test_health_check_failed_message(self):
        error = HealthCheckFailedError(HealthCheckResult(healthy=False, score=1))

        assert str(error) == "Health check failed: System not ready (score 1/3)"

    def test_health_check_failed_message_with_error(self):
        result = HealthCheckResult(healthy=False, score=0, error="client closed")

        assert "client closed" in str(HealthCheckFailedError(result))


@pytest.mark.unit
class TestLedgerOperation:
    """Tests for LedgerOperation."""

    def test_query_is_idempotent(self):
        operation = LedgerOperation("Treasury Balance", OperationKind.QUERY)

        assert operation.is_idempotent
        assert operation.metadata == {}

    def test_submit_is_not_idempotent(self):
        operation = LedgerOperation(
            "HTS Token Mint", OperationKind.SUBMIT, {"amount": 500}
        )

        assert not operation.is_idempotent

    def test_label_required(self):
        with pytest.raises(ValueError, match="label is required"):
            LedgerOperation("", OperationKind.SUBMIT)

    def test_metadata_must_be_dict(self):
        with pytest.raises(ValueError, match="metadata must be a dictionary"):
            LedgerOperation("HTS Token Mint", OperationKind.SUBMIT, ["amount"])
