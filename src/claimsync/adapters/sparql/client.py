"""Graph store backed by a SPARQL 1.1 Protocol endpoint."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from pydantic import ValidationError

from claimsync.adapters.http_resilience import ResilientClient
from claimsync.config.sparql import SparqlConfig

from .schema import SelectResponse

if TYPE_CHECKING:
    from collections.abc import Callable
    from types import TracebackType

    import httpx

    from claimsync.config.http_resilience import ResilienceConfig
    from claimsync.domain.ports import Binding

log = getLogger(__name__)


class GraphStoreError(RuntimeError):
    """Raised when the SPARQL endpoint rejects a statement or answers unexpectedly."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class SparqlGraphStore:
    """Send queries and updates to one SPARQL endpoint.

    Requests are form-encoded POSTs. With ``sudo`` enabled every request carries
    the ``mu-auth-sudo`` header so the authorization layer in front of the
    triplestore is bypassed.
    """

    def __init__(
        self,
        *,
        config: SparqlConfig | None = None,
        client_factory: Callable[[ResilienceConfig], ResilientClient] | None = None,
    ) -> None:
        self._config = config or SparqlConfig()
        self._client = (client_factory or ResilientClient)(self._config.resilience)

    @property
    def endpoint(self) -> str:
        return self._config.endpoint

    async def __aenter__(self) -> SparqlGraphStore:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def query(self, statement: str) -> list[Binding]:
        response = await self._post("query", statement)
        try:
            payload = SelectResponse.model_validate_json(response.content)
        except ValidationError as exc:
            raise GraphStoreError(
                f"Unexpected SPARQL result document from {self.endpoint}",
                status_code=response.status_code,
            ) from exc
        return payload.flattened()

    async def update(self, statement: str) -> None:
        await self._post("update", statement)

    async def _post(self, operation: str, statement: str) -> httpx.Response:
        log.debug("SPARQL %s to %s:%s", operation, self.endpoint, statement)
        response = await self._client.post_form(
            self.endpoint,
            {operation: statement},
            headers=self._config.headers(),
        )
        if response.is_error:
            log.error("SPARQL endpoint answered %s: %s", response.status_code, response.text[:500])
            raise GraphStoreError(
                f"SPARQL endpoint {self.endpoint} answered {response.status_code}",
                status_code=response.status_code,
            )
        return response
