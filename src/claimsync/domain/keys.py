"""Natural-key derivation from raw claim values."""

from __future__ import annotations

import re
from typing import Final

from claimsync.domain.model import normalize_value

# Organisation codes from the Flemish organisation register, e.g. "OVO000032".
OVO_CODE_PATTERN: Final[re.Pattern[str]] = re.compile(r"OVO\d{6}")


def ovo_code_from_string(value: str) -> str | None:
    """Return the first organisation code embedded in ``value``, or ``None``.

    >>> ovo_code_from_string("prefix-OVO000032-suffix")
    'OVO000032'
    """

    match = OVO_CODE_PATTERN.search(value)
    return match.group(0) if match else None


def claim_key(value: object) -> str | None:
    """Use a claim value verbatim as a natural key when it is present."""

    return normalize_value(value)


def organization_code_key(value: object) -> str | None:
    raw = normalize_value(value)
    if raw is None:
        return None
    return ovo_code_from_string(raw)
