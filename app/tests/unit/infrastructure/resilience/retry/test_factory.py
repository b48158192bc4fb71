"""Unit tests for create_executor."""

import pytest

from infrastructure.configuration import Settings, RetrySettings
from infrastructure.resilience.circuit_breaker import CircuitBreaker
from infrastructure.resilience.retry import (
    RetryHistory,
    RetryingLedgerOperationExecutor,
    RetryPolicy,
    create_executor,
)


@pytest.mark.unit
class TestCreateExecutor:
    """Tests for the executor factory."""

    def test_policy_from_explicit_settings(self):
        settings = Settings(
            retry=RetrySettings(RETRY_MAX_ATTEMPTS=5, RETRY_BASE_DELAY_MS=250)
        )

        executor = create_executor(settings=settings)

        assert isinstance(executor, RetryingLedgerOperationExecutor)
        assert executor.policy == RetryPolicy(max_attempts=5, base_delay_ms=250)

    def test_policy_from_environment(self, monkeypatch):
        monkeypatch.setenv("RETRY_MAX_ATTEMPTS", "4")
        monkeypatch.setenv("RETRY_BASE_DELAY_MS", "10")

        executor = create_executor()

        assert executor.policy == RetryPolicy(max_attempts=4, base_delay_ms=10)

    def test_explicit_policy_wins(self, monkeypatch):
        monkeypatch.setenv("RETRY_MAX_ATTEMPTS", "9")

        executor = create_executor(policy=RetryPolicy(max_attempts=1))

        assert executor.policy.max_attempts == 1

    def test_shared_history_and_sleep(self, fake_sleep):
        history = RetryHistory()

        executor = create_executor(
            policy=RetryPolicy(), sleep=fake_sleep, history=history
        )

        assert executor.history is history

    def test_circuit_breaker_is_passed_through(self):
        breaker = CircuitBreaker("hedera-testnet", failure_threshold=2)

        executor = create_executor(policy=RetryPolicy(), circuit_breaker=breaker)

        assert executor.circuit_breaker is breaker

    def test_no_circuit_breaker_by_default(self):
        executor = create_executor(policy=RetryPolicy())

        assert executor.circuit_breaker is None

    def test_builds_without_operator(self, monkeypatch):
        """A missing operator is logged, not fatal."""
        monkeypatch.delenv("HEDERA_ACCOUNT_ID", raising=False)
        monkeypatch.delenv("HEDERA_PRIVATE_KEY", raising=False)
        settings = Settings()

        executor = create_executor(settings=settings)

        assert settings.hedera.has_operator is False
        assert isinstance(executor, RetryingLedgerOperationExecutor)
