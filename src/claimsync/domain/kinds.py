"""The two resource kinds reconciled from login claims."""

from __future__ import annotations

from claimsync.domain.keys import claim_key, organization_code_key
from claimsync.domain.model import AttributeRule, EntityKind, EntityType
from claimsync.domain.model import vocabulary as v

PERSON_URI_SEGMENT = "gebruiker"
ORGANIZATION_URI_SEGMENT = "organisatie"


def person_kind(*, id_claim: str, first_name_claim: str, family_name_claim: str) -> EntityKind:
    return EntityKind(
        entity_type=EntityType.PERSON,
        rdf_type=v.FOAF_PERSON,
        key_predicate=v.DCT_IDENTIFIER,
        uri_segment=PERSON_URI_SEGMENT,
        key_claim=id_claim,
        derive_key=claim_key,
        attributes=(
            AttributeRule(name="firstName", predicate=v.FOAF_FIRST_NAME, claim=first_name_claim),
            AttributeRule(name="familyName", predicate=v.FOAF_FAMILY_NAME, claim=family_name_claim),
        ),
        created_predicate=v.DCT_CREATED,
    )


def organization_kind(*, code_claim: str, name_claim: str) -> EntityKind:
    return EntityKind(
        entity_type=EntityType.ORGANIZATION,
        rdf_type=v.FOAF_ORGANIZATION,
        key_predicate=v.ORG_IDENTIFIER,
        uri_segment=ORGANIZATION_URI_SEGMENT,
        key_claim=code_claim,
        derive_key=organization_code_key,
        attributes=(AttributeRule(name="name", predicate=v.SKOS_PREF_LABEL, claim=name_claim),),
    )
