"""Domain port definitions for adapters."""

from __future__ import annotations

from .graph_store import Binding, GraphStore
from .identifiers import Clock, IdFactory, new_id, utc_now

__all__ = [
    "Binding",
    "Clock",
    "GraphStore",
    "IdFactory",
    "new_id",
    "utc_now",
]
