"""Ledger operation descriptors."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict


class OperationKind(Enum):
    """Whether an operation mutates ledger state or only reads it."""

    SUBMIT = "submit"
    QUERY = "query"


@dataclass(frozen=True)
class LedgerOperation:
    """One unit of ledger work, as seen by logs and retry history.

    Attributes:
        label: Human-readable name (e.g., "HTS Token Mint - 500 AION")
        kind: SUBMIT for transactions, QUERY for read-only requests
        metadata: Caller-supplied values for logging and correlation
    """

    label: str
    kind: OperationKind
    metadata: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.label:
            raise ValueError("label is required")
        if not isinstance(self.metadata, dict):
            raise ValueError("metadata must be a dictionary")

    @property
    def is_idempotent(self) -> bool:
        """Queries have no side effects and are always safe to repeat."""
        return self.kind == OperationKind.QUERY
