"""RDF terms used for identity resources."""

from __future__ import annotations

from typing import Final

RDF: Final[str] = "http://www.w3.org/1999/02/22-rdf-syntax-ns#"
FOAF: Final[str] = "http://xmlns.com/foaf/0.1/"
DCT: Final[str] = "http://purl.org/dc/terms/"
MU: Final[str] = "http://mu.semte.ch/vocabularies/core/"
ORG: Final[str] = "http://www.w3.org/ns/org#"
SKOS: Final[str] = "http://www.w3.org/2004/02/skos/core#"

RDF_TYPE: Final[str] = f"{RDF}type"

FOAF_PERSON: Final[str] = f"{FOAF}Person"
FOAF_ORGANIZATION: Final[str] = f"{FOAF}Organization"
FOAF_FIRST_NAME: Final[str] = f"{FOAF}firstName"
FOAF_FAMILY_NAME: Final[str] = f"{FOAF}familyName"

DCT_IDENTIFIER: Final[str] = f"{DCT}identifier"
DCT_CREATED: Final[str] = f"{DCT}created"

MU_UUID: Final[str] = f"{MU}uuid"

ORG_IDENTIFIER: Final[str] = f"{ORG}identifier"

SKOS_PREF_LABEL: Final[str] = f"{SKOS}prefLabel"
