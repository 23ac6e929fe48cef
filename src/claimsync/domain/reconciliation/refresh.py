"""Reconcile-if-present stage: bring stored attributes in line with the claims.

Each attribute is handled on its own: a drifted attribute is cleared with one
``DELETE`` and, when the claim carries a value, re-inserted with one ``INSERT``.
Attributes are not updated atomically as a group, and a claim without a value
clears the stored attribute.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from claimsync.domain.model import values_equal

from .statements import delete_attribute, insert_attribute

if TYPE_CHECKING:
    from claimsync.domain.model import AttributeRule, Claims, EntityKind, ResourceHandle
    from claimsync.domain.ports import GraphStore

log = getLogger(__name__)


@dataclass(slots=True)
class RefreshResult:
    """Attributes touched by one refresh run."""

    uri: str
    replaced: list[str] = field(default_factory=list["str"])
    cleared: list[str] = field(default_factory=list["str"])

    @property
    def changed(self) -> bool:
        return bool(self.replaced or self.cleared)


def drifted_attributes(
    kind: EntityKind,
    resource: ResourceHandle,
    claims: Claims,
) -> list[tuple[AttributeRule, str | None]]:
    """Return ``(rule, new_value)`` for every attribute whose stored value differs.

    An attribute stored with several values always counts as drifted.
    """

    drift: list[tuple[AttributeRule, str | None]] = []
    for rule in kind.attributes:
        new_value = rule.claim_value(claims)
        if rule.name in resource.conflicting or not values_equal(
            resource.stored_value(rule.name), new_value
        ):
            drift.append((rule, new_value))
    return drift


@dataclass(slots=True)
class AttributeRefresher:
    """Patch the drifted attributes of one stored resource."""

    kind: EntityKind
    store: GraphStore
    graph: str

    async def __call__(self, resource: ResourceHandle, claims: Claims) -> RefreshResult:
        result = RefreshResult(uri=resource.uri)
        for rule, new_value in drifted_attributes(self.kind, resource, claims):
            log.debug(
                "Attribute %s of %s drifted: %r -> %r",
                rule.name,
                resource.uri,
                resource.stored_value(rule.name),
                new_value,
            )
            await self.store.update(
                delete_attribute(graph=self.graph, uri=resource.uri, predicate=rule.predicate)
            )
            if new_value is None:
                result.cleared.append(rule.name)
                continue
            await self.store.update(
                insert_attribute(
                    graph=self.graph,
                    uri=resource.uri,
                    predicate=rule.predicate,
                    value=new_value,
                )
            )
            result.replaced.append(rule.name)
        return result
