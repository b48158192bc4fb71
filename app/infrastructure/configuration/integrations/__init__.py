"""Integration settings __init__ - exports all integration settings."""

from infrastructure.configuration.integrations.hedera import HederaSettings

__all__ = [
    "HederaSettings",
]
