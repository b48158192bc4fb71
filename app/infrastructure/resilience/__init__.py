"""Resilience patterns for ledger operations.

This module contains the bounded-retry ledger executor, the circuit breaker
that can gate it, and the readiness health check that gates workflows before
their first operation.
"""

from infrastructure.resilience.circuit_breaker import (
    CircuitBreaker,
    CircuitBreakerOpenError,
    CircuitState,
)
from infrastructure.resilience.health import HealthCheckResult, perform_health_check
from infrastructure.resilience.retry import (
    AttemptRecord,
    RetryHistory,
    RetryingLedgerOperationExecutor,
    RetryPolicy,
    TransactionResult,
    create_executor,
)

__all__ = [
    # Circuit breaker
    "CircuitBreaker",
    "CircuitBreakerOpenError",
    "CircuitState",
    # Health
    "HealthCheckResult",
    "perform_health_check",
    # Retry
    "RetryPolicy",
    "RetryingLedgerOperationExecutor",
    "TransactionResult",
    "RetryHistory",
    "AttemptRecord",
    "create_executor",
]
