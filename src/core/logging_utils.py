"""Helpers to keep credentials out of log records."""

from __future__ import annotations

import re

_SIGNATURE_RE = re.compile(r"signature=([0-9A-Za-z]+)")


def mask_key(key: str | None) -> str:
    """Return the key masked, showing only the first and last 3 characters."""
    if not key:
        return ""
    if len(key) <= 6:
        return key[0] + "***" + key[-1]
    return f"{key[:3]}***{key[-3:]}"


def redact_signature(text: str | None) -> str:
    """Replace every ``signature=<hex>`` value with its length only.

    Works on plain query strings, full URLs and whole log lines. Text that is
    already redacted is left as it is.
    """
    if not text:
        return ""
    return _SIGNATURE_RE.sub(
        lambda m: f"signature=<hidden len={len(m.group(1))}>", text
    )
