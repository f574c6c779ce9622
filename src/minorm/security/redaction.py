"""Redaction helpers for DSNs and logged bind parameters."""

from __future__ import annotations

from typing import Any, Iterable

REDACTED_VALUE = "***"

_SENSITIVE_TOKENS = (
    "password",
    "passwd",
    "pwd",
    "secret",
    "token",
    "apikey",
    "api_key",
    "private_key",
    "bearer",
)


def is_sensitive(text: str) -> bool:
    normalized = text.lower()
    return any(token in normalized for token in _SENSITIVE_TOKENS)


def redact_query_params(query: dict[str, str]) -> dict[str, str]:
    return {key: REDACTED_VALUE if is_sensitive(key) else value for key, value in query.items()}


def redact_value(value: Any) -> Any:
    if isinstance(value, bytes):
        decoded = value.decode("utf-8", errors="ignore")
        return REDACTED_VALUE if decoded and is_sensitive(decoded) else value
    if isinstance(value, str) and is_sensitive(value):
        return REDACTED_VALUE
    return value


def redact_params(params: Iterable[Any]) -> list[Any]:
    """Mask bind values that look like credentials before they reach a log record."""
    return [redact_value(value) for value in params]
