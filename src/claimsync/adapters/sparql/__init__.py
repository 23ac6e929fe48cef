"""Public interface for the SPARQL graph store adapter."""

from __future__ import annotations

from .client import GraphStoreError, SparqlGraphStore
from .schema import RdfTerm, SelectResponse

__all__ = [
    "GraphStoreError",
    "RdfTerm",
    "SelectResponse",
    "SparqlGraphStore",
]
