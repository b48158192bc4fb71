"""Structlog processors for ledger log entries.

Every factory here returns a structlog processor. They are wired together in
``infrastructure.logging.setup``.

Usage:
    from infrastructure.logging.formatters import add_app_info, mask_sensitive_data
"""

import re
from typing import Any, Callable

Processor = Callable[[Any, str, dict[str, Any]], dict[str, Any]]

# Key names whose values are secrets (matched as case-insensitive substrings)
SENSITIVE_PATTERNS = frozenset(
    {
        "private_key",
        "operator_key",
        "supply_key",
        "admin_key",
        "mnemonic",
        "seed_phrase",
        "password",
        "secret",
        "api_key",
        "apikey",
        "authorization",
        "credential",
        "access_token",
        "refresh_token",
        "bearer",
    }
)

# DER headers of ED25519 and ECDSA(secp256k1) private keys, hex encoded
PRIVATE_KEY_DER_PREFIXES = (
    "302e020100300506032b657004220420",
    "3030020100300706052b8104000a04220420",
)

REDACTED = "***REDACTED***"

# A DER private key anywhere in a string, e.g. inside an exception message
_PRIVATE_KEY_RE = re.compile(
    r"(?:0x)?(?:"
    + "|".join(PRIVATE_KEY_DER_PREFIXES)
    + r")[0-9a-f]*",
    re.IGNORECASE,
)


def add_app_info(app_name: str, app_version: str = "unknown") -> Processor:
    """Stamp the application name and build version on every entry."""

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        event_dict.setdefault("app_name", app_name)
        event_dict.setdefault("app_version", app_version)
        return event_dict

    return processor


def add_network_info(network: str) -> Processor:
    """Tag entries with the ledger network unless a context already set it."""

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        event_dict.setdefault("network", network)
        return event_dict

    return processor


def _redact_private_keys(value: str, mask_value: str) -> str:
    return _PRIVATE_KEY_RE.sub(mask_value, value)


def mask_sensitive_data(
    mask_value: str = REDACTED,
    additional_patterns: frozenset[str] | None = None,
) -> Processor:
    """Create a processor that redacts key material from log entries.

    A value is redacted when its key name contains a sensitive pattern, or
    when it is, or contains, a hex-encoded DER private key. Nested dicts,
    lists and tuples are walked, since operation metadata is logged as a
    whole; named tuples come back as plain tuples.

    Args:
        mask_value: Replacement for redacted values.
        additional_patterns: Extra key patterns to treat as sensitive.
    """
    patterns = SENSITIVE_PATTERNS | (additional_patterns or frozenset())

    def is_sensitive_key(key: Any) -> bool:
        key_lower = str(key).lower()
        return any(pattern in key_lower for pattern in patterns)

    def scrub(value: Any) -> Any:
        if isinstance(value, dict):
            return {
                k: mask_value if is_sensitive_key(k) and v is not None else scrub(v)
                for k, v in value.items()
            }
        if isinstance(value, list):
            return [scrub(item) for item in value]
        if isinstance(value, tuple):
            return tuple(scrub(item) for item in value)
        if isinstance(value, str):
            return _redact_private_keys(value, mask_value)
        return value

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        return scrub(event_dict)

    return processor


def truncate_large_values(max_length: int = 500) -> Processor:
    """Create a processor that shortens oversized values.

    Strings over ``max_length`` are cut with a length marker. Raw bytes,
    such as HCS message payloads, are replaced by their size.
    """

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        for key, value in event_dict.items():
            if isinstance(value, (bytes, bytearray)):
                event_dict[key] = f"<{len(value)} bytes>"
            elif isinstance(value, str) and len(value) > max_length:
                event_dict[key] = (
                    f"{value[:max_length]}...[truncated, {len(value)} chars total]"
                )
        return event_dict

    return processor
