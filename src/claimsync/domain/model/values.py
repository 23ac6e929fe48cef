"""Claim values and the equality rule used when comparing them to stored state."""

from __future__ import annotations

from collections.abc import Mapping

type Claims = Mapping[str, object]


def normalize_value(value: object) -> str | None:
    """Collapse a claim or stored value to its comparable form.

    ``None`` and the empty string both mean "no value". Other strings are kept
    verbatim (no trimming, no case folding); other scalars are compared by their
    ``str()`` form.
    """

    if value is None:
        return None
    if isinstance(value, str):
        return value or None
    return str(value)


def values_equal(stored: object, claimed: object) -> bool:
    return normalize_value(stored) == normalize_value(claimed)
