"""Structlog configuration for the ledger tooling.

Output is JSON when running in production and console-rendered otherwise.
Under pytest every entry is dropped so test output stays readable.

Usage:
    from infrastructure.logging import configure_logging, get_module_logger

    configure_logging()

    logger = get_module_logger()
    logger.info("ledger_operation_attempt", attempt=1)
"""

import inspect
import logging
import sys
from typing import Any, List, Optional

import structlog
from structlog.stdlib import BoundLogger

from infrastructure.logging.formatters import (
    add_app_info,
    add_network_info,
    mask_sensitive_data,
    truncate_large_values,
)
from infrastructure.services.providers import get_settings

APP_NAME = "aion-ledger"

SILENT_LEVEL = logging.CRITICAL + 1


def _is_test_environment() -> bool:
    return "pytest" in sys.modules


def _configure_silenced() -> BoundLogger:
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", level=SILENT_LEVEL, force=True)
    logging.root.setLevel(SILENT_LEVEL)
    return structlog.stdlib.get_logger()


def _build_processors(network: str, git_sha: str, json_output: bool) -> List[Any]:
    processors: List[Any] = [
        # correlation_id, operation and kind bound by bind_operation_context
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
        add_app_info(APP_NAME, git_sha),
        add_network_info(network),
        truncate_large_values(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        # After exception formatting so rendered tracebacks are scrubbed too
        mask_sensitive_data(),
    ]
    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())
    return processors


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structlog and the stdlib root logger.

    Args:
        log_level: Overrides settings.LOG_LEVEL (DEBUG, INFO, WARNING, ...).
        is_production: Overrides settings.is_production; selects JSON output.

    Returns:
        The configured root BoundLogger
    """
    if _is_test_environment():
        return _configure_silenced()

    settings = get_settings()
    json_output = settings.is_production if is_production is None else is_production

    structlog.configure(
        processors=_build_processors(
            settings.hedera.NETWORK, settings.GIT_SHA, json_output
        ),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    level_name = (log_level or settings.LOG_LEVEL).upper()
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level_name, logging.INFO),
    )
    return structlog.stdlib.get_logger()


logger: BoundLogger = configure_logging()


def _caller_module_name(depth: int = 2) -> Optional[str]:
    frame = inspect.currentframe()
    for _ in range(depth):
        if frame is None:
            return None
        frame = frame.f_back
    if frame is None:
        return None
    module = inspect.getmodule(frame)
    return module.__name__ if module else None


def get_logger(name: Optional[str] = None) -> BoundLogger:
    """Return the root logger bound to ``name`` or to the caller's module."""
    return logger.bind(logger_name=name or _caller_module_name() or "unknown")


def get_module_logger() -> BoundLogger:
    """Return a logger bound with the calling module's component and path.

    Example:
        # In infrastructure/resilience/retry/executor.py
        logger = get_module_logger()
        # context: component="executor",
        #          module_path="infrastructure.resilience.retry.executor"
    """
    module_name = _caller_module_name()
    if module_name is None:
        return logger.bind(component="unknown")
    return logger.bind(
        component=module_name.rsplit(".", 1)[-1],
        module_path=module_name,
    )
