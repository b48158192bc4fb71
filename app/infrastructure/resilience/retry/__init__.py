"""Bounded retry for ledger operations.

This module provides the retrying executor used by every workflow that
submits transactions or runs queries against the ledger.

Architecture:
- RetryPolicy: max attempts and fixed delay between attempts
- RetryingLedgerOperationExecutor: runs transactions/queries with retry
- RetryHistory: failed-attempt log and error report
- create_executor: builds an executor from settings

Usage:
    from infrastructure.resilience.retry import create_executor

    executor = create_executor()
    await executor.ensure_ready(client)

    response, receipt = await executor.safe_transaction_execute(
        build_mint, client, "HTS Token Mint", {"amount": 500}
    )
    balance = await executor.safe_query_execute(
        balance_query, client, "Treasury Balance"
    )
"""

from infrastructure.resilience.retry.config import RetryPolicy
from infrastructure.resilience.retry.executor import (
    RetryingLedgerOperationExecutor,
    TransactionResult,
)
from infrastructure.resilience.retry.history import AttemptRecord, RetryHistory
from infrastructure.resilience.retry.factory import create_executor

__all__ = [
    # Configuration
    "RetryPolicy",
    # Executor
    "RetryingLedgerOperationExecutor",
    "TransactionResult",
    # History
    "AttemptRecord",
    "RetryHistory",
    # Factory
    "create_executor",
]
