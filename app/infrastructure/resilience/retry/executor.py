"""Retrying executor for ledger transactions and queries.

Wraps a single submit-and-confirm or query call against a ledger client,
retries transient failures with a fixed delay up to the policy bound, and
exposes the pre-flight readiness check.

Per invocation:

    ATTEMPT(1)
    ATTEMPT(n) --success--> DONE(success)
    ATTEMPT(n) --terminal error--> DONE(failure)
    ATTEMPT(n) --transient error, n < max--> WAIT(base_delay) -> ATTEMPT(n+1)
    ATTEMPT(n) --transient error, n == max--> DONE(failure)

Once the network has accepted a submission, later attempts only fetch its
receipt again. A new submission is built only when submit itself failed or
the receipt reports a status meaning the transaction was not applied (e.g.
BUSY). Delivery is at-least-once; the executor does not deduplicate.
"""

import asyncio
import inspect
import time
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Optional, Tuple, Union

from infrastructure.clients.ledger.protocols import LedgerClient, Receipt
from infrastructure.logging import (
    bind_operation_context,
    get_correlation_id,
    get_module_logger,
)
from infrastructure.operations.classifiers import classify_ledger_error
from infrastructure.operations.errors import (
    HealthCheckFailedError,
    ReceiptStatusError,
)
from infrastructure.operations.models import LedgerOperation, OperationKind
from infrastructure.operations.result import OperationOutcome
from infrastructure.operations.status import is_receipt_pending_status
from infrastructure.resilience.circuit_breaker import (
    CircuitBreaker,
    CircuitBreakerOpenError,
)
from infrastructure.resilience.health import HealthCheckResult, perform_health_check
from infrastructure.resilience.retry.config import RetryPolicy
from infrastructure.resilience.retry.history import RetryHistory

logger = get_module_logger()

TransactionBuilder = Callable[[], Union[Any, Awaitable[Any]]]
SleepFunc = Callable[[float], Awaitable[Any]]
_AttemptFunc = Callable[[], Awaitable[Tuple[Any, Optional[Receipt]]]]


@dataclass(frozen=True)
class TransactionResult:
    """Response and receipt of a confirmed transaction."""

    response: Any
    receipt: Receipt

    def __iter__(self):
        # Allows `response, receipt = await executor.safe_transaction_execute(...)`
        return iter((self.response, self.receipt))


class _Submission:
    """Response of the current submission, kept across attempts."""

    def __init__(self) -> None:
        self.response: Any = None
        self.accepted = False

    def accept(self, response: Any) -> None:
        self.response = response
        self.accepted = True

    def discard(self) -> None:
        self.response = None
        self.accepted = False


class RetryingLedgerOperationExecutor:
    """Bounded-retry executor for ledger operations.

    The ledger client is passed to every call and never stored or mutated,
    so one executor can serve any number of clients and concurrent tasks.

    Attributes:
        policy: RetryPolicy bounding attempts and the fixed delay
        history: RetryHistory of failed attempts, for error reports
        circuit_breaker: Optional CircuitBreaker gating whole invocations

    Example:
        executor = RetryingLedgerOperationExecutor(RetryPolicy(3, 2000))

        await executor.ensure_ready(client)

        response, receipt = await executor.safe_transaction_execute(
            lambda: build_topic_create(operator_key),
            client,
            "HCS Topic Creation",
            {"memo": "AION AI decisions"},
        )
    """

    def __init__(
        self,
        policy: Optional[RetryPolicy] = None,
        sleep: Optional[SleepFunc] = None,
        history: Optional[RetryHistory] = None,
        circuit_breaker: Optional[CircuitBreaker] = None,
    ) -> None:
        """Initialize the executor.

        Args:
            policy: Optional RetryPolicy. If not provided, uses defaults.
            sleep: Coroutine function awaited between attempts with the delay
                in seconds. Defaults to asyncio.sleep.
            history: Optional RetryHistory to record into.
            circuit_breaker: Optional CircuitBreaker. Each invocation counts
                as one call; a rejected invocation makes no attempt.
        """
        self.policy = policy or RetryPolicy()
        self.history = history or RetryHistory()
        self.circuit_breaker = circuit_breaker
        self._sleep = sleep or asyncio.sleep
        self.log = logger.bind(
            max_attempts=self.policy.max_attempts,
            base_delay_ms=self.policy.base_delay_ms,
        )

    # Health

    async def perform_health_check(self, client: LedgerClient) -> HealthCheckResult:
        """Run the three readiness probes. Never raises, never retries."""
        return await perform_health_check(client)

    async def ensure_ready(self, client: LedgerClient) -> HealthCheckResult:
        """Run the health check and raise if the client is not ready.

        Raises:
            HealthCheckFailedError: when any probe failed
        """
        result = await self.perform_health_check(client)
        if not result.healthy:
            raise HealthCheckFailedError(result)
        return result

    # Transactions

    async def execute_transaction(
        self,
        build_and_sign: TransactionBuilder,
        client: LedgerClient,
        label: str,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> OperationOutcome:
        """Build, submit and confirm a transaction with bounded retry.

        ``build_and_sign`` is called for every new submission so each one
        carries fresh node IDs, valid-start time and signatures. After a
        submission is accepted, failed receipt lookups are retried without
        submitting again.

        Returns:
            OperationOutcome; on success ``response`` and ``receipt`` are set,
            on failure ``last_error`` and ``attempts_made`` are set.
        """
        operation = LedgerOperation(
            label, OperationKind.SUBMIT, dict(metadata or {})
        )
        submission = _Submission()

        async def attempt() -> Tuple[Any, Optional[Receipt]]:
            if not submission.accepted:
                transaction = build_and_sign()
                if inspect.isawaitable(transaction):
                    transaction = await transaction
                submission.accept(await client.submit(transaction))
            else:
                logger.debug("ledger_receipt_refetch", operation=label)

            try:
                receipt = await client.get_receipt(submission.response)
                if not receipt.is_success:
                    raise ReceiptStatusError(receipt.status, receipt)
            except Exception as e:
                # A reported status other than "pending" settles this submission
                status = getattr(e, "status", None)
                if status is not None and not is_receipt_pending_status(status):
                    submission.discard()
                raise
            return submission.response, receipt

        return await self._run(operation, attempt)

    async def safe_transaction_execute(
        self,
        build_and_sign: TransactionBuilder,
        client: LedgerClient,
        label: str,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> TransactionResult:
        """Like execute_transaction, but raise on failure.

        Raises:
            OperationFailedError: carrying the failure outcome
        """
        outcome = await self.execute_transaction(
            build_and_sign, client, label, metadata
        )
        outcome.unwrap()
        return TransactionResult(outcome.response, outcome.receipt)

    # Queries

    async def execute_query(
        self,
        query: Any,
        client: LedgerClient,
        label: str,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> OperationOutcome:
        """Run a read-only query with bounded retry.

        Queries have no side effects, so repeating one is always safe.
        """
        operation = LedgerOperation(
            label, OperationKind.QUERY, dict(metadata or {})
        )

        async def attempt() -> Tuple[Any, Optional[Receipt]]:
            return await client.query(query), None

        return await self._run(operation, attempt)

    async def safe_query_execute(
        self,
        query: Any,
        client: LedgerClient,
        label: str,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Like execute_query, but return the response or raise.

        Raises:
            OperationFailedError: carrying the failure outcome
        """
        outcome = await self.execute_query(query, client, label, metadata)
        return outcome.unwrap().response

    # Reporting

    def generate_error_report(self) -> Dict[str, Any]:
        return self.history.generate_error_report()

    # Internals

    async def _run(
        self, operation: LedgerOperation, attempt_func: _AttemptFunc
    ) -> OperationOutcome:
        with bind_operation_context(
            correlation_id=get_correlation_id(),
            operation=operation.label,
            kind=operation.kind.value,
        ):
            log = self.log.bind(context=operation.metadata)
            breaker = self.circuit_breaker
            if breaker is None:
                return await self._attempt_loop(operation, attempt_func, log)

            try:
                breaker.before_call()
            except CircuitBreakerOpenError as e:
                log.warning("ledger_operation_rejected", circuit=breaker.name)
                return self._fail(log, operation, classify_ledger_error(e), 0, 0.0)

            try:
                outcome = await self._attempt_loop(operation, attempt_func, log)
                if outcome.is_success:
                    breaker.record_success()
                else:
                    breaker.record_failure(outcome.last_error)
                return outcome
            finally:
                breaker.release_call()

    async def _attempt_loop(
        self, operation: LedgerOperation, attempt_func: _AttemptFunc, log: Any
    ) -> OperationOutcome:
        max_attempts = self.policy.max_attempts
        started = time.monotonic()

        def elapsed_ms() -> float:
            return (time.monotonic() - started) * 1000

        attempt = 0
        while True:
            attempt += 1
            log.info("ledger_operation_attempt", attempt=attempt)
            try:
                response, receipt = await attempt_func()
            except Exception as e:
                failure = classify_ledger_error(e)
                will_retry = failure.is_retryable and attempt < max_attempts
                self.history.record_failure(
                    operation.label,
                    attempt,
                    failure,
                    context=operation.metadata,
                    retried=will_retry,
                )
                log.warning(
                    "ledger_operation_attempt_failed",
                    attempt=attempt,
                    status=failure.status.value,
                    error_code=failure.error_code,
                    error=str(e),
                )
                if not will_retry:
                    return self._fail(log, operation, failure, attempt, elapsed_ms())

                log.info(
                    "ledger_operation_retry_scheduled",
                    attempt=attempt,
                    delay_ms=self.policy.base_delay_ms,
                    idempotent=operation.is_idempotent,
                )
                await self._sleep(self.policy.base_delay_seconds)
                continue

            self.history.record_success(operation.label, attempt)
            log.info(
                "ledger_operation_succeeded",
                attempts=attempt,
                elapsed_ms=round(elapsed_ms(), 1),
            )
            return OperationOutcome.success(
                response,
                receipt,
                label=operation.label,
                attempts_made=attempt,
                elapsed_ms=elapsed_ms(),
            )

    def _fail(
        self,
        log: Any,
        operation: LedgerOperation,
        failure: OperationOutcome,
        attempts_made: int,
        elapsed_ms: float,
    ) -> OperationOutcome:
        outcome = failure.with_attempts(operation.label, attempts_made, elapsed_ms)
        log.error(
            "ledger_operation_failed",
            attempts=attempts_made,
            status=outcome.status.value,
            error_code=outcome.error_code,
            message=outcome.message,
            retryable=outcome.is_retryable,
        )
        return outcome
