"""Readiness health check for ledger clients.

Runs three independent probes against a configured ledger client before any
group of operations starts:

1. connectivity - the client can reach a node
2. operator - the configured operator identity resolves to an account
3. balance - a lightweight balance query for the operator succeeds

A probe that raises only fails itself; later probes still run. The check
never raises to the caller and is never retried.
"""

from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, List, Optional, Tuple

import structlog

from infrastructure.clients.ledger.protocols import LedgerClient

logger = structlog.get_logger()

PROBE_COUNT = 3


@dataclass
class HealthCheckResult:
    """Outcome of a readiness check.

    Attributes:
        healthy: True only when every probe passed
        score: Number of probes that passed (0-3)
        error: Set only when the check itself broke outside the probes
        checks: Per-probe pass/fail, keyed by probe name
    """

    healthy: bool
    score: int
    error: Optional[str] = None
    checks: Dict[str, bool] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "healthy": self.healthy,
            "score": self.score,
            "error": self.error,
            "checks": dict(self.checks),
        }


async def _probe_connectivity(client: LedgerClient) -> None:
    await client.ping()


async def _probe_operator(client: LedgerClient) -> None:
    account_id = await client.resolve_operator()
    if not account_id:
        raise LookupError("operator identity did not resolve to an account")


async def _probe_balance(client: LedgerClient) -> None:
    account_id = client.operator_account_id
    if not account_id:
        raise LookupError("no operator account configured")
    await client.get_account_balance(account_id)


def _probes() -> List[Tuple[str, Callable[[LedgerClient], Awaitable[None]]]]:
    return [
        ("connectivity", _probe_connectivity),
        ("operator", _probe_operator),
        ("balance", _probe_balance),
    ]


async def perform_health_check(client: LedgerClient) -> HealthCheckResult:
    """Probe a ledger client and score its readiness.

    Args:
        client: Fully configured ledger client

    Returns:
        HealthCheckResult; healthy iff all three probes pass
    """
    log = logger.bind(component="health_check")
    checks: Dict[str, bool] = {}

    try:
        log.info("health_check_started")
        for name, probe in _probes():
            try:
                await probe(client)
            except Exception as e:
                checks[name] = False
                log.warning("health_probe_failed", probe=name, error=str(e))
            else:
                checks[name] = True
                log.debug("health_probe_passed", probe=name)

        score = sum(1 for passed in checks.values() if passed)
        result = HealthCheckResult(
            healthy=score == PROBE_COUNT, score=score, checks=checks
        )
        log.info(
            "health_check_complete",
            healthy=result.healthy,
            score=f"{score}/{PROBE_COUNT}",
            checks=checks,
        )
        return result

    except Exception as e:
        log.error("health_check_failed", error=str(e), exc_info=True)
        return HealthCheckResult(healthy=False, score=0, error=str(e), checks=checks)
