"""Infrastructure settings __init__ - exports all infrastructure settings."""

from infrastructure.configuration.infrastructure.circuit_breaker import (
    CircuitBreakerSettings,
)
from infrastructure.configuration.infrastructure.retry import RetrySettings

__all__ = [
    "CircuitBreakerSettings",
    "RetrySettings",
]
