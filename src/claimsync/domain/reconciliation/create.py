"""Create-if-absent stage.

The creator does not check for an existing resource; callers confirm absence
through the resolver first.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from claimsync.domain.model import ResourceHandle
from claimsync.domain.ports import new_id, utc_now

from .statements import insert_resource

if TYPE_CHECKING:
    from claimsync.domain.model import Claims, EntityKind
    from claimsync.domain.ports import Clock, GraphStore, IdFactory

log = getLogger(__name__)


@dataclass(slots=True)
class ResourceCreator:
    """Insert a fresh resource of one entity kind built from a claim set."""

    kind: EntityKind
    store: GraphStore
    graph: str
    resource_base_uri: str
    id_factory: IdFactory = field(default=new_id)
    clock: Clock = field(default=utc_now)

    async def __call__(self, claims: Claims, *, key: str) -> ResourceHandle:
        local_id = self.id_factory()
        uri = f"{self.resource_base_uri.rstrip('/')}/{self.kind.uri_segment}/{local_id}"

        attributes: dict[str, str] = {}
        for rule in self.kind.attributes:
            value = rule.claim_value(claims)
            if value is not None:
                attributes[rule.name] = value

        created_at = self.clock() if self.kind.created_predicate is not None else None
        await self.store.update(
            insert_resource(
                self.kind,
                graph=self.graph,
                uri=uri,
                local_id=local_id,
                key=key,
                attributes=attributes,
                created_at=created_at,
            )
        )
        log.info("Created %s %s for key %s", self.kind.entity_type, uri, key)
        return ResourceHandle(uri=uri, local_id=local_id, attributes=attributes)
