"""Infrastructure configuration module - public API.

This module provides centralized configuration management for the AION
ledger tooling using Pydantic BaseSettings with domain-based organization.

Exports:
    Settings: Main settings class (for testing/overrides)
    HederaSettings: Ledger network and operator settings
    RetrySettings: Retry policy settings
    CircuitBreakerSettings: Circuit breaker thresholds

Settings are never instantiated at import time. Use the provider so every
caller shares one instance:

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    operator = settings.hedera.ACCOUNT_ID
    max_attempts = settings.retry.max_attempts
    ```
"""

from infrastructure.configuration.settings import Settings
from infrastructure.configuration.integrations import HederaSettings
from infrastructure.configuration.infrastructure import (
    CircuitBreakerSettings,
    RetrySettings,
)

__all__ = [
    "Settings",
    "HederaSettings",
    "RetrySettings",
    "CircuitBreakerSettings",
]
