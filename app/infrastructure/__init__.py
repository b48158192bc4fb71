"""Infrastructure modules for the AION ledger tooling.

Centralized infrastructure components:
- configuration: Settings management (Settings, HederaSettings, RetrySettings)
- logging: Structured logging setup and operation context binding
- operations: Operation outcomes, ledger errors and error classification
- clients: Narrow ledger client protocol consumed by the executor
- resilience: Retrying ledger executor and readiness health check
- services: Provider functions (get_settings)
"""

# Operations
from infrastructure.operations.result import OperationOutcome
from infrastructure.operations.status import OperationStatus

# Services
from infrastructure.services import get_settings

__all__ = [
    # Operations
    "OperationOutcome",
    "OperationStatus",
    # Services
    "get_settings",
]
