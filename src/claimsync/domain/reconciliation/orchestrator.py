"""Orchestration of resolve, create and refresh for login claims.

Per call, a resource is either found (its uri is returned at once and its
attributes are refreshed in the background) or not found (it is created and
the new uri is returned). Store failures while resolving or creating
propagate to the caller; failures while refreshing never do.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from claimsync.domain.model import EntityType, normalize_value

from .background import BackgroundTasks
from .errors import UnresolvableIdentityError
from .locks import KeyedLock

if TYPE_CHECKING:
    from claimsync.domain.model import Claims, EntityKind, ResourceHandle

    from .create import ResourceCreator
    from .refresh import AttributeRefresher
    from .resolve import ResourceResolver

log = getLogger(__name__)


@dataclass(slots=True)
class ResourceReconciler:
    """Map a claim set onto exactly one stored resource of one entity kind."""

    resolve: ResourceResolver
    create: ResourceCreator
    refresh: AttributeRefresher
    background: BackgroundTasks = field(default_factory=BackgroundTasks)
    creation_locks: KeyedLock = field(default_factory=KeyedLock)

    @property
    def kind(self) -> EntityKind:
        return self.resolve.kind

    async def ensure(self, claims: Claims) -> str | None:
        """Return the uri of the resource matching ``claims``, or ``None`` without a key."""

        key = self.kind.natural_key(claims)
        if key is None:
            return None

        resource = await self.resolve(key)
        if resource is None:
            # Re-resolve under the lock so concurrent first logins in this
            # process create the resource once.
            async with self.creation_locks.hold(key):
                resource = await self.resolve(key)
                if resource is None:
                    created = await self.create(claims, key=key)
                    return created.uri

        self._schedule_refresh(resource, claims)
        return resource.uri

    def _schedule_refresh(self, resource: ResourceHandle, claims: Claims) -> None:
        snapshot = dict(claims)
        self.background.spawn(
            self._refresh(resource, snapshot),
            name=f"refresh-{self.kind.entity_type}-{resource.uri}",
        )

    async def _refresh(self, resource: ResourceHandle, claims: Claims) -> None:
        result = await self.refresh(resource, claims)
        if result.changed:
            log.info(
                "Refreshed %s %s: replaced=%s, cleared=%s",
                self.kind.entity_type,
                result.uri,
                result.replaced,
                result.cleared,
            )


@dataclass(frozen=True, slots=True)
class LoginResources:
    person_uri: str
    organization_uri: str | None


@dataclass(slots=True)
class LoginReconciler:
    """Resolve the person and organization behind one authentication event."""

    persons: ResourceReconciler
    organizations: ResourceReconciler

    def __post_init__(self) -> None:
        if self.persons.kind.entity_type is not EntityType.PERSON:
            raise ValueError("persons reconciler must handle person resources")
        if self.organizations.kind.entity_type is not EntityType.ORGANIZATION:
            raise ValueError("organizations reconciler must handle organization resources")

    async def ensure_person(self, claims: Claims) -> str:
        """Return the person uri for ``claims``.

        Raises:
            UnresolvableIdentityError: the claims carry no user identifier.
        """

        person_uri = await self.persons.ensure(claims)
        if person_uri is None:
            raise UnresolvableIdentityError(self.persons.kind.key_claim)
        return person_uri

    async def ensure_organization(self, claims: Claims) -> str | None:
        """Return the organization uri for ``claims``, or ``None`` when there is none."""

        organization_uri = await self.organizations.ensure(claims)
        if organization_uri is None:
            code_claim = self.organizations.kind.key_claim
            raw_code = normalize_value(claims.get(code_claim))
            if raw_code is None:
                log.info(
                    "No organization code found in claim %r. "
                    "Cannot relate user to an organization.",
                    code_claim,
                )
            else:
                log.warning(
                    "Claim %r holds no recognisable organization code: %r",
                    code_claim,
                    raw_code,
                )
        return organization_uri

    async def reconcile(self, claims: Claims) -> LoginResources:
        person_uri = await self.ensure_person(claims)
        organization_uri = await self.ensure_organization(claims)
        return LoginResources(person_uri=person_uri, organization_uri=organization_uri)
