from __future__ import annotations

from .sparql import XSD_DATETIME, escape_datetime, escape_string, escape_uri

__all__ = [
    "XSD_DATETIME",
    "escape_datetime",
    "escape_string",
    "escape_uri",
]
