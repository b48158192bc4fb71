"""Retry policy configuration.

This module defines the bounded, fixed-delay policy applied to ledger
operations.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from infrastructure.configuration import RetrySettings


@dataclass(frozen=True)
class RetryPolicy:
    """Retry bounds for a single ledger operation.

    Attributes:
        max_attempts: Total tries, including the first
        base_delay_ms: Fixed wait between consecutive attempts (not exponential)

    Example:
        # Default policy: 3 attempts, 2s apart
        policy = RetryPolicy()

        # Tests
        policy = RetryPolicy(max_attempts=5, base_delay_ms=0)
    """

    max_attempts: int = 3
    base_delay_ms: int = 2000

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if self.base_delay_ms < 0:
            raise ValueError("base_delay_ms must be >= 0")

    @property
    def base_delay_seconds(self) -> float:
        return self.base_delay_ms / 1000

    @property
    def max_total_delay_ms(self) -> int:
        """Upper bound on time spent waiting between attempts."""
        return (self.max_attempts - 1) * self.base_delay_ms

    @classmethod
    def from_settings(cls, settings: "RetrySettings") -> "RetryPolicy":
        return cls(
            max_attempts=settings.max_attempts,
            base_delay_ms=settings.base_delay_ms,
        )
