from __future__ import annotations

import asyncio

from claimsync.domain.kinds import person_kind
from claimsync.domain.model import ResourceHandle
from claimsync.domain.model import vocabulary as v
from claimsync.domain.reconciliation import AttributeRefresher, drifted_attributes
from tests.support.graph_store import InMemoryGraphStore
from tests.support.identities import USERS_GRAPH, seed_person

PERSONS = person_kind(
    id_claim="vo_id", first_name_claim="given_name", family_name_claim="family_name"
)
PERSON_URI = "http://data.example.org/id/gebruiker/p1"


def _stored(first_name: str | None = None, family_name: str | None = None) -> ResourceHandle:
    return ResourceHandle(
        uri=PERSON_URI,
        attributes={"firstName": first_name, "familyName": family_name},
    )


def test_drift_detection_ignores_equal_and_equivalent_values() -> None:
    resource = _stored(first_name="Ada", family_name=None)

    drift = drifted_attributes(PERSONS, resource, {"given_name": "Ada", "family_name": ""})

    assert drift == []


def test_drift_detection_reports_new_values() -> None:
    resource = _stored(first_name="Ada", family_name="Lovelace")

    drift = drifted_attributes(PERSONS, resource, {"given_name": "Grace"})

    assert [(rule.name, value) for rule, value in drift] == [
        ("firstName", "Grace"),
        ("familyName", None),
    ]


def test_changed_value_is_replaced() -> None:
    store = InMemoryGraphStore()
    seed_person(store, uri=PERSON_URI, identifier="U1", first_name="Ada")
    refresher = AttributeRefresher(kind=PERSONS, store=store, graph=USERS_GRAPH)

    result = asyncio.run(refresher(_stored(first_name="Ada"), {"given_name": "Grace"}))

    assert result.replaced == ["firstName"]
    assert result.cleared == []
    assert store.objects(PERSON_URI, v.FOAF_FIRST_NAME) == ["Grace"]


def test_missing_claim_clears_the_attribute() -> None:
    store = InMemoryGraphStore()
    seed_person(store, uri=PERSON_URI, identifier="U1", family_name="Lovelace")
    refresher = AttributeRefresher(kind=PERSONS, store=store, graph=USERS_GRAPH)

    result = asyncio.run(refresher(_stored(family_name="Lovelace"), {"vo_id": "U1"}))

    assert result.cleared == ["familyName"]
    assert store.objects(PERSON_URI, v.FOAF_FAMILY_NAME) == []
    assert len(store.updates) == 1
    assert "DELETE WHERE" in store.updates[0]


def test_delete_removes_every_stale_value() -> None:
    store = InMemoryGraphStore()
    seed_person(store, uri=PERSON_URI, identifier="U1", first_name="Ada")
    store.add(USERS_GRAPH, PERSON_URI, v.FOAF_FIRST_NAME, "Augusta")
    refresher = AttributeRefresher(kind=PERSONS, store=store, graph=USERS_GRAPH)

    asyncio.run(refresher(_stored(first_name="Ada"), {"given_name": "Grace"}))

    assert store.objects(PERSON_URI, v.FOAF_FIRST_NAME) == ["Grace"]


def test_unchanged_values_issue_no_writes() -> None:
    store = InMemoryGraphStore()
    seed_person(store, uri=PERSON_URI, identifier="U1", first_name="Ada", family_name="Lovelace")
    refresher = AttributeRefresher(kind=PERSONS, store=store, graph=USERS_GRAPH)

    result = asyncio.run(
        refresher(
            _stored(first_name="Ada", family_name="Lovelace"),
            {"given_name": "Ada", "family_name": "Lovelace"},
        )
    )

    assert not result.changed
    assert store.updates == []


def test_each_attribute_gets_its_own_delete_and_insert() -> None:
    store = InMemoryGraphStore()
    seed_person(store, uri=PERSON_URI, identifier="U1", first_name="Ada", family_name="Lovelace")
    refresher = AttributeRefresher(kind=PERSONS, store=store, graph=USERS_GRAPH)

    asyncio.run(
        refresher(
            _stored(first_name="Ada", family_name="Lovelace"),
            {"given_name": "Grace", "family_name": "Hopper"},
        )
    )

    kinds = ["DELETE" if "DELETE WHERE" in update else "INSERT" for update in store.updates]
    assert kinds == ["DELETE", "INSERT", "DELETE", "INSERT"]
    assert v.FOAF_FIRST_NAME in store.updates[0]
    assert v.FOAF_FAMILY_NAME in store.updates[2]
    assert store.objects(PERSON_URI, v.FOAF_FAMILY_NAME) == ["Hopper"]


def test_attribute_with_several_values_counts_as_drifted() -> None:
    resource = ResourceHandle(
        uri=PERSON_URI,
        attributes={"firstName": "Ada", "familyName": None},
        conflicting=frozenset({"firstName"}),
    )

    drift = drifted_attributes(PERSONS, resource, {"given_name": "Ada"})

    assert [(rule.name, value) for rule, value in drift] == [("firstName", "Ada")]
