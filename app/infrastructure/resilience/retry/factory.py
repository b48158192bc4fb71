"""Factory for creating ledger executors based on configuration."""

from typing import Optional, TYPE_CHECKING

import structlog
from infrastructure.resilience.circuit_breaker import CircuitBreaker
from infrastructure.resilience.retry.config import RetryPolicy
from infrastructure.resilience.retry.executor import (
    RetryingLedgerOperationExecutor,
    SleepFunc,
)
from infrastructure.resilience.retry.history import RetryHistory

if TYPE_CHECKING:
    from infrastructure.configuration import Settings

logger = structlog.get_logger()


def create_executor(
    settings: Optional["Settings"] = None,
    policy: Optional[RetryPolicy] = None,
    sleep: Optional[SleepFunc] = None,
    history: Optional[RetryHistory] = None,
    circuit_breaker: Optional[CircuitBreaker] = None,
) -> RetryingLedgerOperationExecutor:
    """Build an executor whose policy comes from settings unless overridden.

    Args:
        settings: Optional Settings. Defaults to the application settings.
        policy: Optional RetryPolicy override; settings.retry is ignored if given.
        sleep: Optional sleep coroutine (tests inject a fake).
        history: Optional shared RetryHistory.
        circuit_breaker: Optional CircuitBreaker, e.g. one built with
            CircuitBreaker.from_settings(settings.circuit_breaker).

    Returns:
        A fresh RetryingLedgerOperationExecutor

    Examples:
        >>> executor = create_executor()  # RETRY_* environment variables
        >>> executor = create_executor(policy=RetryPolicy(max_attempts=1))
    """
    if settings is None:
        from infrastructure.services.providers import get_settings

        settings = get_settings()

    if policy is None:
        policy = RetryPolicy.from_settings(settings.retry)

    if not settings.hedera.has_operator:
        logger.warning(
            "ledger_operator_not_configured",
            network=settings.hedera.NETWORK,
            hint="set HEDERA_ACCOUNT_ID and HEDERA_PRIVATE_KEY",
        )

    logger.info(
        "creating_ledger_executor",
        network=settings.hedera.NETWORK,
        max_attempts=policy.max_attempts,
        base_delay_ms=policy.base_delay_ms,
        circuit_breaker=circuit_breaker.name if circuit_breaker else None,
    )
    return RetryingLedgerOperationExecutor(
        policy=policy,
        sleep=sleep,
        history=history,
        circuit_breaker=circuit_breaker,
    )
