from __future__ import annotations

from datetime import UTC, datetime
from itertools import count
from typing import TYPE_CHECKING

import pytest

from claimsync.app import build_login_reconciler
from claimsync.config import ClaimKeyConfig, GraphConfig
from claimsync.domain.reconciliation import BackgroundTasks
from tests.support.graph_store import InMemoryGraphStore
from tests.support.identities import BASE_URI, USERS_GRAPH

if TYPE_CHECKING:
    from collections.abc import Callable

    from claimsync.domain.reconciliation import LoginReconciler

FIXED_NOW = datetime(2024, 5, 1, 12, 30, tzinfo=UTC)


@pytest.fixture
def store() -> InMemoryGraphStore:
    return InMemoryGraphStore()


@pytest.fixture
def graph_config() -> GraphConfig:
    return GraphConfig(users_graph=USERS_GRAPH, resource_base_uri=BASE_URI)


@pytest.fixture
def claim_keys() -> ClaimKeyConfig:
    return ClaimKeyConfig()


@pytest.fixture
def id_factory() -> Callable[[], str]:
    counter = count(1)
    return lambda: f"id-{next(counter)}"


@pytest.fixture
def background() -> BackgroundTasks:
    return BackgroundTasks()


@pytest.fixture
def reconciler(
    store: InMemoryGraphStore,
    graph_config: GraphConfig,
    claim_keys: ClaimKeyConfig,
    background: BackgroundTasks,
    id_factory: Callable[[], str],
) -> LoginReconciler:
    return build_login_reconciler(
        store=store,
        claim_keys=claim_keys,
        graph=graph_config,
        background=background,
        id_factory=id_factory,
        clock=lambda: FIXED_NOW,
    )
