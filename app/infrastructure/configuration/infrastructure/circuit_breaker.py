"""Circuit breaker infrastructure settings."""

from pydantic import Field

from infrastructure.configuration.base import InfrastructureSettings


class CircuitBreakerSettings(InfrastructureSettings):
    """Thresholds for the ledger circuit breaker.

    Environment Variables:
        CIRCUIT_BREAKER_FAILURE_THRESHOLD: Consecutive failures before opening
            (default: 5)
        CIRCUIT_BREAKER_RESET_TIMEOUT_SECONDS: Wait before a trial call after
            the last failure (default: 60)
        CIRCUIT_BREAKER_HALF_OPEN_MAX_CALLS: Trial calls allowed at once
            (default: 1)
    """

    failure_threshold: int = Field(
        default=5,
        ge=1,
        alias="CIRCUIT_BREAKER_FAILURE_THRESHOLD",
    )
    reset_timeout_seconds: float = Field(
        default=60,
        ge=0,
        alias="CIRCUIT_BREAKER_RESET_TIMEOUT_SECONDS",
    )
    half_open_max_calls: int = Field(
        default=1,
        ge=1,
        alias="CIRCUIT_BREAKER_HALF_OPEN_MAX_CALLS",
    )
