"""Domain model for identity resources."""

from __future__ import annotations

from .resources import AttributeRule, EntityKind, EntityType, ResourceHandle
from .values import Claims, normalize_value, values_equal

__all__ = [
    "AttributeRule",
    "Claims",
    "EntityKind",
    "EntityType",
    "ResourceHandle",
    "normalize_value",
    "values_equal",
]
