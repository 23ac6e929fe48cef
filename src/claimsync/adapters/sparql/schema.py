"""Pydantic models describing SPARQL 1.1 JSON result documents."""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from claimsync.domain.ports import Binding


class SparqlBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class RdfTerm(SparqlBaseModel):
    type: Literal["uri", "literal", "typed-literal", "bnode"]
    value: str
    datatype: str | None = None
    lang: str | None = Field(default=None, alias="xml:lang")


class ResultHead(SparqlBaseModel):
    vars: list[str] = Field(default_factory=list["str"])


class ResultBindings(SparqlBaseModel):
    bindings: list[dict[str, RdfTerm]]


class SelectResponse(SparqlBaseModel):
    head: ResultHead = Field(default_factory=ResultHead)
    results: ResultBindings

    def flattened(self) -> list[Binding]:
        """Return each solution as ``variable -> lexical value``."""

        return [
            {name: term.value for name, term in binding.items()}
            for binding in self.results.bindings
        ]
