"""Port for the graph store holding identity resources."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol, runtime_checkable

type Binding = Mapping[str, str]
"""One solution row: variable name -> lexical value. Unbound variables are absent."""


@runtime_checkable
class GraphStore(Protocol):
    """Executes read and write statements against the graph store."""

    async def query(self, statement: str) -> list[Binding]: ...

    async def update(self, statement: str) -> None: ...
