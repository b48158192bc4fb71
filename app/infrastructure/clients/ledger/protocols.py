"""Narrow ledger client interface consumed by the retrying executor.

The executor depends only on these shapes, never on a concrete ledger SDK.
An adapter around a Hedera SDK client implements LedgerClient by delegating
``submit`` to ``transaction.execute(client)``, ``get_receipt`` to
``response.get_receipt(client)``, and so on, converting the SDK receipt into
a Receipt.
"""

from dataclasses import dataclass
from typing import Any, Optional, Protocol, runtime_checkable

from infrastructure.operations.status import SUCCESS_STATUS


@dataclass(frozen=True)
class Receipt:
    """The ledger's confirmation record for a submitted transaction.

    Attributes:
        status: Status code name, "SUCCESS" when the transaction applied
        transaction_id: ID of the confirmed transaction
        entity_id: ID of a created topic/token/file, if any
        raw: The SDK's own receipt object, for callers that need more fields
    """

    status: str
    transaction_id: Optional[str] = None
    entity_id: Optional[str] = None
    raw: Any = None

    @property
    def is_success(self) -> bool:
        return str(self.status).upper() == SUCCESS_STATUS


@runtime_checkable
class LedgerClient(Protocol):
    """Fully configured ledger client handle.

    Supplied by the caller with network endpoint and operator identity
    already set. Shared read-only across operations; the executor never
    mutates it.
    """

    @property
    def operator_account_id(self) -> Optional[str]:  # pragma: no cover
        ...

    async def ping(self) -> Any:  # pragma: no cover - typing helper
        """Basic connectivity probe; raises when no node is reachable."""
        ...

    async def resolve_operator(self) -> str:  # pragma: no cover
        """Resolve the configured operator identity to an account ID."""
        ...

    async def get_account_balance(self, account_id: str) -> Any:  # pragma: no cover
        """Lightweight read used by the readiness probe."""
        ...

    async def submit(self, transaction: Any) -> Any:  # pragma: no cover
        """Submit a signed transaction and return the network response."""
        ...

    async def get_receipt(self, response: Any) -> Receipt:  # pragma: no cover
        """Wait for and return the authoritative receipt for a response."""
        ...

    async def query(self, query: Any) -> Any:  # pragma: no cover
        """Run a read-only query and return its response."""
        ...
