"""Lookup stage: find the stored resource for a natural key.

Read-only. Issues no query when there is no key to look up.
"""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from claimsync.domain.model import ResourceHandle

from .statements import select_by_key

if TYPE_CHECKING:
    from collections.abc import Sequence

    from claimsync.domain.model import EntityKind
    from claimsync.domain.ports import Binding, GraphStore

log = getLogger(__name__)


@dataclass(slots=True)
class ResourceResolver:
    """Resolve natural keys of one entity kind against the graph store."""

    kind: EntityKind
    store: GraphStore
    graph: str

    async def __call__(self, key: str | None) -> ResourceHandle | None:
        if key is None:
            return None

        bindings = await self.store.query(select_by_key(self.kind, graph=self.graph, key=key))
        if not bindings:
            log.debug("No %s found for key %s", self.kind.entity_type, key)
            return None

        handle = self._handle_from_bindings(bindings)
        log.debug("Resolved %s %s to %s", self.kind.entity_type, key, handle.uri)
        return handle

    def _handle_from_bindings(self, bindings: Sequence[Binding]) -> ResourceHandle:
        uri = bindings[0].get("resource")
        if not uri:
            raise ValueError(f"Lookup result for {self.kind.entity_type} has no resource binding")

        values: dict[str, set[str]] = {rule.name: set() for rule in self.kind.attributes}
        for binding in bindings:
            for name, seen in values.items():
                value = binding.get(name)
                if value is not None:
                    seen.add(value)

        conflicting = frozenset(name for name, seen in values.items() if len(seen) > 1)
        if conflicting:
            log.warning(
                "%s %s holds several values for %s", self.kind.entity_type, uri, sorted(conflicting)
            )
        return ResourceHandle(
            uri=uri,
            local_id=bindings[0].get("uuid"),
            attributes={name: min(seen) if seen else None for name, seen in values.items()},
            conflicting=conflicting,
        )
