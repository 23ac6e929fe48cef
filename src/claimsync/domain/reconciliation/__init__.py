"""Reconciliation of login claims with identity resources in the graph store.

Stages, per entity kind:
1) resolve the natural key derived from the claims to a stored resource
2) create the resource when it does not exist yet
3) refresh drifted attributes of an existing resource in the background
"""

from __future__ import annotations

from .background import BackgroundTasks
from .create import ResourceCreator
from .errors import UnresolvableIdentityError
from .locks import KeyedLock
from .orchestrator import LoginReconciler, LoginResources, ResourceReconciler
from .refresh import AttributeRefresher, RefreshResult, drifted_attributes
from .resolve import ResourceResolver

__all__ = [
    "AttributeRefresher",
    "BackgroundTasks",
    "KeyedLock",
    "LoginReconciler",
    "LoginResources",
    "RefreshResult",
    "ResourceCreator",
    "ResourceReconciler",
    "ResourceResolver",
    "UnresolvableIdentityError",
    "drifted_attributes",
]
