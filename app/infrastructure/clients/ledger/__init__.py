"""Ledger client protocol and receipt type."""

from infrastructure.clients.ledger.protocols import LedgerClient, Receipt

__all__ = ["LedgerClient", "Receipt"]
