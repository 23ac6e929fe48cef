"""Application orchestration entry points."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from claimsync.adapters.sparql import SparqlGraphStore
from claimsync.config import get_claim_key_config, get_graph_config, get_sparql_config
from claimsync.domain.kinds import organization_kind, person_kind
from claimsync.domain.ports import new_id, utc_now
from claimsync.domain.reconciliation import (
    AttributeRefresher,
    BackgroundTasks,
    LoginReconciler,
    LoginResources,
    ResourceCreator,
    ResourceReconciler,
    ResourceResolver,
)

if TYPE_CHECKING:
    from claimsync.config import ClaimKeyConfig, GraphConfig
    from claimsync.domain.model import Claims, EntityKind
    from claimsync.domain.ports import Clock, GraphStore, IdFactory


log = getLogger(__name__)


def build_resource_reconciler(
    kind: EntityKind,
    *,
    store: GraphStore,
    graph: GraphConfig,
    background: BackgroundTasks,
    id_factory: IdFactory = new_id,
    clock: Clock = utc_now,
) -> ResourceReconciler:
    return ResourceReconciler(
        resolve=ResourceResolver(kind=kind, store=store, graph=graph.users_graph),
        create=ResourceCreator(
            kind=kind,
            store=store,
            graph=graph.users_graph,
            resource_base_uri=graph.resource_base_uri,
            id_factory=id_factory,
            clock=clock,
        ),
        refresh=AttributeRefresher(kind=kind, store=store, graph=graph.users_graph),
        background=background,
    )


def build_login_reconciler(
    *,
    store: GraphStore,
    claim_keys: ClaimKeyConfig | None = None,
    graph: GraphConfig | None = None,
    background: BackgroundTasks | None = None,
    id_factory: IdFactory = new_id,
    clock: Clock = utc_now,
) -> LoginReconciler:
    """Wire both pipelines against ``store``; missing settings come from the environment."""

    keys = claim_keys or get_claim_key_config()
    graph_config = graph or get_graph_config()
    tasks = background or BackgroundTasks()

    persons = person_kind(
        id_claim=keys.subject_id,
        first_name_claim=keys.first_name,
        family_name_claim=keys.family_name,
    )
    organizations = organization_kind(code_claim=keys.org_code, name_claim=keys.org_name)
    return LoginReconciler(
        persons=build_resource_reconciler(
            persons,
            store=store,
            graph=graph_config,
            background=tasks,
            id_factory=id_factory,
            clock=clock,
        ),
        organizations=build_resource_reconciler(
            organizations,
            store=store,
            graph=graph_config,
            background=tasks,
            id_factory=id_factory,
            clock=clock,
        ),
    )


async def reconcile_login_claims(
    claims: Claims,
    *,
    store: GraphStore | None = None,
    claim_keys: ClaimKeyConfig | None = None,
    graph: GraphConfig | None = None,
) -> LoginResources:
    """Reconcile one claim set against the configured store and wait for background refreshes.

    Meant for one-shot use such as the CLI. Long-running services build a
    :class:`LoginReconciler` once and never wait on its background tasks.
    """

    if store is None:
        sparql = get_sparql_config()
        log.info("Reconciling login claims against %s", sparql.endpoint)
        async with SparqlGraphStore(config=sparql) as sparql_store:
            return await reconcile_login_claims(
                claims, store=sparql_store, claim_keys=claim_keys, graph=graph
            )

    background = BackgroundTasks()
    reconciler = build_login_reconciler(
        store=store, claim_keys=claim_keys, graph=graph, background=background
    )
    try:
        return await reconciler.reconcile(claims)
    finally:
        await background.drain()
