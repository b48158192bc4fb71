"""Retry history and error report.

Keeps a per-executor record of failed attempts and of operations that only
succeeded after retrying, and summarizes them for run reports.
"""

from collections import Counter
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from infrastructure.operations.result import OperationOutcome


@dataclass
class AttemptRecord:
    """One failed attempt of a ledger operation."""

    operation: str
    attempt: int
    error_code: Optional[str]
    status: str
    message: str
    retried: bool = False
    context: Dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["timestamp"] = self.timestamp.isoformat()
        return data


class RetryHistory:
    """Accumulates attempt failures across every operation an executor runs.

    Not thread-safe; intended for one event loop.
    """

    def __init__(self) -> None:
        self._records: List[AttemptRecord] = []
        self._error_counts: Counter = Counter()
        self._recovered: List[Dict[str, Any]] = []

    @property
    def records(self) -> List[AttemptRecord]:
        return list(self._records)

    @property
    def error_counts(self) -> Dict[str, int]:
        return dict(self._error_counts)

    def record_failure(
        self,
        operation: str,
        attempt: int,
        failure: OperationOutcome,
        context: Optional[Dict[str, Any]] = None,
        retried: bool = False,
    ) -> AttemptRecord:
        """Record a failed attempt and whether another attempt follows it."""
        record = AttemptRecord(
            operation=operation,
            attempt=attempt,
            error_code=failure.error_code,
            status=failure.status.value,
            message=failure.message,
            retried=retried,
            context=dict(context or {}),
        )
        self._records.append(record)
        self._error_counts[failure.error_code or failure.status.value] += 1
        return record

    def record_success(self, operation: str, attempts_made: int) -> None:
        """Note a success; only successes that needed a retry are kept."""
        if attempts_made > 1:
            self._recovered.append(
                {"operation": operation, "attempts": attempts_made}
            )

    def most_common_error(self) -> str:
        if not self._error_counts:
            return "None"
        return self._error_counts.most_common(1)[0][0]

    def generate_error_report(self) -> Dict[str, Any]:
        """Summarize recorded failures.

        Returns:
            Dictionary with timestamp, total_errors, error_counts,
            retry_history, and a summary block (most_common_error,
            total_retries, successful_retries).
        """
        return {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "total_errors": len(self._records),
            "error_counts": self.error_counts,
            "retry_history": [record.to_dict() for record in self._records],
            "summary": {
                "most_common_error": self.most_common_error(),
                "total_retries": sum(1 for record in self._records if record.retried),
                "successful_retries": len(self._recovered),
            },
        }

    def reset(self) -> None:
        self._records.clear()
        self._error_counts.clear()
        self._recovered.clear()
