"""Entity kinds and the handles returned by the reconciliation stages."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

from .values import normalize_value

if TYPE_CHECKING:
    from .values import Claims


# Variables the resolver binds itself.
_RESERVED_VARIABLES = frozenset({"resource", "uuid"})


class EntityType(StrEnum):
    PERSON = "person"
    ORGANIZATION = "organization"


@dataclass(frozen=True, slots=True, kw_only=True)
class AttributeRule:
    """A mutable attribute fed from one claim and stored under one predicate."""

    name: str
    predicate: str
    claim: str

    def claim_value(self, claims: Claims) -> str | None:
        return normalize_value(claims.get(self.claim))


@dataclass(frozen=True, slots=True, kw_only=True)
class EntityKind:
    """Everything the generic pipeline stages need to know about one resource type.

    ``derive_key`` turns the raw ``key_claim`` value into the lookup key; ``None``
    means no usable key. ``created_predicate`` is set for kinds that record a
    creation timestamp.
    """

    entity_type: EntityType
    rdf_type: str
    key_predicate: str
    key_claim: str
    derive_key: Callable[[object], str | None] = field(repr=False)
    uri_segment: str
    attributes: tuple[AttributeRule, ...] = ()
    created_predicate: str | None = None

    def __post_init__(self) -> None:
        names = [rule.name for rule in self.attributes]
        if len(names) != len(set(names)):
            raise ValueError(f"Duplicate attribute names for {self.entity_type}: {names}")
        reserved = _RESERVED_VARIABLES.intersection(names)
        if reserved:
            raise ValueError(f"Reserved attribute names for {self.entity_type}: {sorted(reserved)}")

    def natural_key(self, claims: Claims) -> str | None:
        return self.derive_key(claims.get(self.key_claim))


@dataclass(frozen=True, slots=True, kw_only=True)
class ResourceHandle:
    """A stored resource as last seen by the resolver or creator.

    ``conflicting`` names attributes stored with more than one value; ``attributes``
    then holds one of them.
    """

    uri: str
    local_id: str | None = None
    attributes: Mapping[str, str | None] = field(default_factory=dict["str", "str | None"])
    conflicting: frozenset[str] = frozenset()

    def stored_value(self, name: str) -> str | None:
        return normalize_value(self.attributes.get(name))
