"""Unit tests for RetryPolicy."""

import pytest

from infrastructure.configuration import RetrySettings
from infrastructure.resilience.retry import RetryPolicy


@pytest.mark.unit
class TestRetryPolicy:
    """Tests for RetryPolicy validation and derived values."""

    def test_defaults(self):
        policy = RetryPolicy()

        assert policy.max_attempts == 3
        assert policy.base_delay_ms == 2000
        assert policy.base_delay_seconds == 2.0

    def test_max_total_delay(self):
        policy = RetryPolicy(max_attempts=4, base_delay_ms=500)

        assert policy.max_total_delay_ms == 1500

    def test_single_attempt_has_no_delay_budget(self):
        assert RetryPolicy(max_attempts=1).max_total_delay_ms == 0

    def test_zero_delay_allowed(self):
        policy = RetryPolicy(base_delay_ms=0)

        assert policy.base_delay_seconds == 0

    @pytest.mark.parametrize("max_attempts", [0, -1])
    def test_rejects_max_attempts_below_one(self, max_attempts):
        with pytest.raises(ValueError, match="max_attempts must be at least 1"):
            RetryPolicy(max_attempts=max_attempts)

    def test_rejects_negative_delay(self):
        with pytest.raises(ValueError, match="base_delay_ms must be >= 0"):
            RetryPolicy(base_delay_ms=-1)

    def test_is_immutable(self):
        policy = RetryPolicy()

        with pytest.raises(AttributeError):
            policy.max_attempts = 10  # type: ignore[misc]

    def test_from_settings(self):
        settings = RetrySettings(RETRY_MAX_ATTEMPTS=5, RETRY_BASE_DELAY_MS=100)

        policy = RetryPolicy.from_settings(settings)

        assert policy == RetryPolicy(max_attempts=5, base_delay_ms=100)
