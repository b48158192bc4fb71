"""Operation context binding for structured logging.

Binds operation-scoped metadata (correlation ID, operation label, network)
to every log entry emitted while a ledger operation runs. Context lives in
structlog's contextvars, so concurrent asyncio tasks each see their own.

Usage:
    from infrastructure.logging import bind_operation_context

    with bind_operation_context(operation="HTS Token Creation", kind="submit"):
        logger.info("ledger_operation_attempt", attempt=1)

Dependencies:
    - structlog.contextvars
"""

import uuid
from contextlib import contextmanager
from typing import Optional, Any, Generator
import structlog


@contextmanager
def bind_operation_context(
    correlation_id: Optional[str] = None,
    operation: Optional[str] = None,
    kind: Optional[str] = None,
    network: Optional[str] = None,
    **extra_context: Any,
) -> Generator[None, None, None]:
    """Bind operation-scoped context to all logs within the context manager.

    Args:
        correlation_id: Unique identifier. Auto-generated if not provided.
        operation: Human-readable operation label.
        kind: Operation kind ("submit" or "query").
        network: Ledger network name (e.g., "testnet").
        **extra_context: Additional key-value pairs to include in logs.

    Yields:
        None - context is automatically bound to structlog's context vars.
    """
    context: dict[str, Any] = {}

    context["correlation_id"] = correlation_id or str(uuid.uuid4())

    if operation is not None:
        context["operation"] = operation

    if kind is not None:
        context["kind"] = kind

    if network is not None:
        context["network"] = network

    context.update(extra_context)

    previous = structlog.contextvars.get_contextvars()
    structlog.contextvars.bind_contextvars(**context)
    try:
        yield
    finally:
        structlog.contextvars.unbind_contextvars(*context.keys())
        # Restore values shadowed by an enclosing context
        restored = {k: previous[k] for k in context if k in previous}
        if restored:
            structlog.contextvars.bind_contextvars(**restored)


def get_correlation_id() -> Optional[str]:
    """Get the current correlation ID from the logging context.

    Returns:
        The correlation ID if set, None otherwise.
    """
    ctx = structlog.contextvars.get_contextvars()
    return ctx.get("correlation_id")


def set_correlation_id(correlation_id: str) -> None:
    """Set the correlation ID in the current logging context.

    Args:
        correlation_id: The correlation ID to set.
    """
    structlog.contextvars.bind_contextvars(correlation_id=correlation_id)


def clear_operation_context() -> None:
    """Clear all operation-scoped context from the logging context."""
    structlog.contextvars.clear_contextvars()
