"""Canonical query serialisation and HMAC-SHA256 signing for Binance.

The signed payload is exactly the query string that travels on the wire, so
parameters are emitted in the order the caller assembled them. Binance
re-derives the digest from the received query and compares it with the
``signature`` parameter, which must therefore always come last.
"""

from __future__ import annotations

import hashlib
import hmac
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Iterator
from urllib.parse import quote_plus

from core.errors import ValidationError
from core.models import ParameterSet, ParamValue

__all__ = [
    "RequestSigner",
    "canonicalize",
    "format_number",
    "render_value",
    "sign",
]

# ``@`` stays literal so sub-account e-mails remain readable in logs.
_SAFE_CHARS = "@"


def format_number(value: float | Decimal) -> str:
    """Return ``value`` in positional notation without binary tails.

    ``float`` inputs are stringified first so ``0.1`` stays ``0.1``.
    Trailing zeros are dropped and exponents are never emitted.
    """

    try:
        dec = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError) as err:
        raise ValidationError(f"Cannot serialise number {value!r}") from err
    if not dec.is_finite():
        raise ValidationError(f"Cannot serialise non-finite number {value!r}")
    text = format(dec, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("", "-0"):
        return "0"
    return text


def render_value(value: ParamValue) -> str:
    """Render a scalar parameter value as Binance expects it."""

    # bool is checked before int: it is a subclass of it.
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return render_value(value.value)
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        return str(value)
    if isinstance(value, (float, Decimal)):
        return format_number(value)
    raise ValidationError(
        f"Unsupported parameter type {type(value).__name__}: {value!r}"
    )


def _iter_pairs(params: ParameterSet) -> Iterator[tuple[str, str]]:
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            for item in value:
                if item is not None:
                    yield key, render_value(item)
            continue
        yield key, render_value(value)


def canonicalize(params: ParameterSet) -> str:
    """Return the ``&``-joined ``key=value`` query for ``params``.

    ``None`` values are skipped, sequences expand to repeated pairs and
    insertion order is kept (keys are never sorted).
    """

    return "&".join(
        f"{quote_plus(key, safe=_SAFE_CHARS)}={quote_plus(text, safe=_SAFE_CHARS)}"
        for key, text in _iter_pairs(params)
    )


def sign(secret: bytes | str, canonical_query: str) -> str:
    """Return the lower-case hex HMAC-SHA256 of ``canonical_query``."""

    key = secret.encode("utf-8") if isinstance(secret, str) else secret
    return hmac.new(key, canonical_query.encode("utf-8"), hashlib.sha256).hexdigest()


class RequestSigner:
    """Bind an API secret to :func:`sign`."""

    def __init__(self, api_secret: bytes | str) -> None:
        if not api_secret:
            raise ValidationError("An API secret is required to sign requests")
        self._secret = (
            api_secret.encode("utf-8") if isinstance(api_secret, str) else api_secret
        )

    def __repr__(self) -> str:
        return "RequestSigner(api_secret=<hidden>)"

    def sign(self, canonical_query: str) -> str:
        return sign(self._secret, canonical_query)

    def signed_query(self, params: ParameterSet) -> str:
        """Canonicalize ``params`` and append ``signature`` as the last pair."""

        query = canonicalize(params)
        signature = self.sign(query)
        return f"{query}&signature={signature}" if query else f"signature={signature}"
