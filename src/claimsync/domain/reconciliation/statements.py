"""SPARQL statements issued by the reconciliation stages.

Every statement is scoped to a single named graph. Predicates and types are
written as full IRIs so no prefix declarations are needed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from claimsync.common.sparql import escape_datetime, escape_string, escape_uri
from claimsync.domain.model.vocabulary import MU_UUID

if TYPE_CHECKING:
    from collections.abc import Mapping
    from datetime import datetime

    from claimsync.domain.model import EntityKind


def select_by_key(kind: EntityKind, *, graph: str, key: str) -> str:
    """Find at most one resource of ``kind`` whose natural key equals ``key``.

    The resource is picked by a ``LIMIT 1`` subquery; the outer query then yields
    one row per combination of stored attribute values, so duplicate values of an
    attribute are all visible to the caller.
    """

    variables = " ".join(f"?{rule.name}" for rule in kind.attributes)
    optionals = "\n".join(
        f"        OPTIONAL {{ ?resource {escape_uri(rule.predicate)} ?{rule.name} . }}"
        for rule in kind.attributes
    )
    return f"""
SELECT ?resource ?uuid {variables}
WHERE {{
    GRAPH {escape_uri(graph)} {{
        {{
            SELECT ?resource WHERE {{
                ?resource a {escape_uri(kind.rdf_type)} ;
                    {escape_uri(kind.key_predicate)} {escape_string(key)} .
            }} LIMIT 1
        }}
        OPTIONAL {{ ?resource {escape_uri(MU_UUID)} ?uuid . }}
{optionals}
    }}
}}"""


def insert_resource(
    kind: EntityKind,
    *,
    graph: str,
    uri: str,
    local_id: str,
    key: str,
    attributes: Mapping[str, str],
    created_at: datetime | None = None,
) -> str:
    """Insert a new resource with its mandatory triples and the given optional attributes."""

    subject = escape_uri(uri)
    mandatory = [
        f"a {escape_uri(kind.rdf_type)}",
        f"{escape_uri(MU_UUID)} {escape_string(local_id)}",
        f"{escape_uri(kind.key_predicate)} {escape_string(key)}",
    ]
    if kind.created_predicate is not None and created_at is not None:
        mandatory.append(f"{escape_uri(kind.created_predicate)} {escape_datetime(created_at)}")
    lines = [f"        {subject} " + " ;\n            ".join(mandatory) + " ."]
    lines.extend(
        f"        {subject} {escape_uri(rule.predicate)} {escape_string(attributes[rule.name])} ."
        for rule in kind.attributes
        if rule.name in attributes
    )
    body = "\n".join(lines)
    return f"""
INSERT DATA {{
    GRAPH {escape_uri(graph)} {{
{body}
    }}
}}"""


def delete_attribute(*, graph: str, uri: str, predicate: str) -> str:
    """Remove every value of ``predicate`` on ``uri``."""

    return f"""
DELETE WHERE {{
    GRAPH {escape_uri(graph)} {{
        {escape_uri(uri)} {escape_uri(predicate)} ?value .
    }}
}}"""


def insert_attribute(*, graph: str, uri: str, predicate: str, value: str) -> str:
    return f"""
INSERT DATA {{
    GRAPH {escape_uri(graph)} {{
        {escape_uri(uri)} {escape_uri(predicate)} {escape_string(value)} .
    }}
}}"""
