"""Retry system infrastructure settings."""

from pydantic import Field

from infrastructure.configuration.base import InfrastructureSettings


class RetrySettings(InfrastructureSettings):
    """Retry configuration for ledger operations.

    Controls how many times a transient ledger failure is retried and how
    long the executor waits between attempts.

    Environment Variables:
        RETRY_MAX_ATTEMPTS: Total attempts including the first (default: 3)
        RETRY_BASE_DELAY_MS: Fixed delay between attempts in ms (default: 2000)

    Fixed Delay:
        Every retry waits exactly RETRY_BASE_DELAY_MS. There is no exponential
        growth, so the total wait for one operation is bounded by
        (RETRY_MAX_ATTEMPTS - 1) * RETRY_BASE_DELAY_MS.

        Example with defaults (3 attempts, 2000ms):
            Attempt 1: immediate
            Attempt 2: after 2000ms
            Attempt 3: after another 2000ms

    Example:
        ```python
        from infrastructure.services import get_settings
        from infrastructure.resilience.retry import RetryPolicy

        policy = RetryPolicy.from_settings(get_settings().retry)
        ```
    """

    max_attempts: int = Field(
        default=3,
        ge=1,
        alias="RETRY_MAX_ATTEMPTS",
        description="Total attempts per ledger operation, including the first",
    )
    base_delay_ms: int = Field(
        default=2000,
        ge=0,
        alias="RETRY_BASE_DELAY_MS",
        description="Fixed delay between attempts (milliseconds)",
    )
