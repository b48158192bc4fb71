"""Top-level Settings for the AION ledger tooling."""

from typing import Any, Dict, Type

from pydantic_settings import BaseSettings

from infrastructure.configuration.base import ENV_SETTINGS_CONFIG
from infrastructure.configuration.infrastructure import (
    CircuitBreakerSettings,
    RetrySettings,
)
from infrastructure.configuration.integrations import HederaSettings

# Section name -> class, loaded from the environment unless passed explicitly
SETTINGS_SECTIONS: Dict[str, Type[BaseSettings]] = {
    "hedera": HederaSettings,
    "retry": RetrySettings,
    "circuit_breaker": CircuitBreakerSettings,
}


class Settings(BaseSettings):
    """Aggregate of every settings section.

    Sections:
        hedera: Network name, operator account and key (HEDERA_*)
        retry: Attempt bound and fixed delay (RETRY_*)
        circuit_breaker: Failure threshold and reset timeout (CIRCUIT_BREAKER_*)

    Environment Variables:
        PREFIX: Deployment prefix; empty means production
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        GIT_SHA: Build identifier stamped on log entries

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()
        policy = RetryPolicy.from_settings(settings.retry)

        # Tests build Settings directly with overridden sections
        settings = Settings(retry=RetrySettings(RETRY_MAX_ATTEMPTS=1))
        ```
    """

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"
    GIT_SHA: str = "Unknown"

    hedera: HederaSettings
    retry: RetrySettings
    circuit_breaker: CircuitBreakerSettings

    model_config = ENV_SETTINGS_CONFIG

    def __init__(self, **kwargs: Any):
        for name, section_class in SETTINGS_SECTIONS.items():
            if name not in kwargs:
                kwargs[name] = section_class()
        super().__init__(**kwargs)

    @property
    def is_production(self) -> bool:
        """True when no deployment PREFIX is set."""
        return not self.PREFIX
