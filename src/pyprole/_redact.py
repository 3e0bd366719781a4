"""Helpers for safe debug logging.

Requests to the hosted store carry the anon key in two headers and
submission payloads carry visitor contact details. Keys are hidden
outright, the ``Authorization`` scheme is kept so a missing ``Bearer``
prefix still shows up in logs, and email addresses keep their domain.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

_SECRET_KEYS: frozenset[str] = frozenset({"apikey", "anon_key", "cookie", "password", "token"})
_CONTACT_KEYS: frozenset[str] = frozenset({"message", "name"})

_REDACTED = "<redacted>"
_MAX_DEPTH = 8


def mask_email(address: str) -> str:
    """Mask the local part of an email address for INFO-level logs.

    ``"scout@example.com"`` becomes ``"s***@example.com"``. Strings without
    an ``@`` are fully masked.
    """
    local, sep, domain = address.strip().partition("@")
    if not sep or not local:
        return "***"
    return f"{local[0]}***@{domain}"


def _mask_authorization(value: Any) -> str:
    scheme, sep, _credentials = str(value).partition(" ")
    return f"{scheme} {_REDACTED}" if sep else _REDACTED


def _redact_field(key: str, value: Any, max_string: int, depth: int) -> Any:
    lowered = key.lower()
    if lowered in _SECRET_KEYS or lowered in _CONTACT_KEYS:
        return _REDACTED
    if lowered == "authorization":
        return _mask_authorization(value)
    if lowered == "email" and isinstance(value, str):
        return mask_email(value)
    return redact_for_log(value, max_string=max_string, _depth=depth + 1)


def redact_for_log(value: Any, *, max_string: int = 512, _depth: int = 0) -> Any:
    """Return a copy of a header map or JSON body that is safe to log.

    Rows sent to the ``adventures`` table pass through unchanged apart from
    long strings being truncated to *max_string* characters.
    """
    if _depth > _MAX_DEPTH:
        return "<max-depth>"
    if isinstance(value, Mapping):
        return {str(k): _redact_field(str(k), v, max_string, _depth) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [redact_for_log(item, max_string=max_string, _depth=_depth + 1) for item in value]
    if isinstance(value, str) and len(value) > max_string:
        return f"{value[:max_string]}...<truncated {len(value) - max_string} chars>"
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    return repr(value)
