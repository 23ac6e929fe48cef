"""Escaping helpers for embedding values in SPARQL statements."""

from __future__ import annotations

import re
from datetime import UTC, datetime
from typing import Final

XSD_DATETIME: Final[str] = "http://www.w3.org/2001/XMLSchema#dateTime"

# IRIREF production from the SPARQL 1.1 grammar, minus the angle brackets.
_IRI_FORBIDDEN = re.compile(r'[\x00-\x20<>"{}|^`\\]')

_STRING_ESCAPES: Final[dict[str, str]] = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\b": "\\b",
    "\f": "\\f",
}


def escape_uri(iri: str) -> str:
    """Return ``iri`` as a SPARQL IRI reference, rejecting characters it may not contain."""

    if not iri or _IRI_FORBIDDEN.search(iri):
        raise ValueError(f"Not a valid IRI for SPARQL: {iri!r}")
    return f"<{iri}>"


def escape_string(value: str) -> str:
    escaped = "".join(_STRING_ESCAPES.get(char, char) for char in value)
    return f'"{escaped}"'


def escape_datetime(value: datetime) -> str:
    """Return ``value`` as an ``xsd:dateTime`` literal in UTC.

    Naive datetimes are interpreted as UTC.
    """

    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    lexical = value.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")
    return f'"{lexical}"^^{escape_uri(XSD_DATETIME)}'
