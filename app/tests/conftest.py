import sys
from pathlib import Path
from unittest.mock import AsyncMock

# Ensure the application package root is on sys.path so importing application
# modules (e.g. `infrastructure.operations`) works during pytest collection
# regardless of the invocation directory.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest  # noqa: E402

from infrastructure.resilience.retry import (  # noqa: E402
    RetryingLedgerOperationExecutor,
    RetryPolicy,
)
from infrastructure.services.providers import get_settings  # noqa: E402
from tests.fixtures.ledger_clients import FakeLedgerClient  # noqa: E402


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are cached per process; start every test from the environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def ledger_client_factory():
    """Factory for scripted FakeLedgerClient instances."""

    def _factory(**kwargs) -> FakeLedgerClient:
        return FakeLedgerClient(**kwargs)

    return _factory


@pytest.fixture
def ledger_client(ledger_client_factory):
    """Healthy ledger client whose operations all succeed."""
    return ledger_client_factory()


@pytest.fixture
def fake_sleep():
    """Sleep replacement that records requested delays without waiting."""
    return AsyncMock(return_value=None)


@pytest.fixture
def executor_factory(fake_sleep):
    """Factory for executors wired to the fake sleep."""

    def _factory(
        max_attempts: int = 3, base_delay_ms: int = 2000
    ) -> RetryingLedgerOperationExecutor:
        return RetryingLedgerOperationExecutor(
            policy=RetryPolicy(max_attempts=max_attempts, base_delay_ms=base_delay_ms),
            sleep=fake_sleep,
        )

    return _factory
