"""SPARQL endpoint configuration values."""

from __future__ import annotations

from dataclasses import dataclass, field

from .env import env_flag, env_optional_positive_int, env_or_default, env_positive_float
from .http_resilience import ConnectionLimits, RateLimit, ResilienceConfig

DEFAULT_SPARQL_ENDPOINT = "http://database:8890/sparql"
SPARQL_TIMEOUT_SECONDS = 30.0
SUDO_HEADER = "mu-auth-sudo"


def _default_resilience() -> ResilienceConfig:
    return ResilienceConfig(name="sparql", timeout_seconds=SPARQL_TIMEOUT_SECONDS)


@dataclass(frozen=True, slots=True)
class SparqlConfig:
    """Where the graph store lives and how requests are authorised."""

    endpoint: str = DEFAULT_SPARQL_ENDPOINT
    sudo: bool = True
    resilience: ResilienceConfig = field(default_factory=_default_resilience)

    def headers(self) -> dict[str, str]:
        headers = {"Accept": "application/sparql-results+json"}
        if self.sudo:
            headers[SUDO_HEADER] = "true"
        return headers


def get_sparql_resilience_config() -> ResilienceConfig:
    """Timeout, request rate and pool size for the store client.

    ``SPARQL_MAX_REQUESTS_PER_SECOND`` and ``SPARQL_MAX_CONNECTIONS`` are unbounded
    when unset.
    """

    max_per_second = env_optional_positive_int("SPARQL_MAX_REQUESTS_PER_SECOND")
    return ResilienceConfig(
        name="sparql",
        timeout_seconds=env_positive_float("SPARQL_TIMEOUT_SECONDS", SPARQL_TIMEOUT_SECONDS),
        ratelimit=RateLimit(max_calls=max_per_second) if max_per_second else None,
        connections=ConnectionLimits(
            max_connections=env_optional_positive_int("SPARQL_MAX_CONNECTIONS")
        ),
    )


def get_sparql_config(*, resilience: ResilienceConfig | None = None) -> SparqlConfig:
    return SparqlConfig(
        endpoint=env_or_default("MU_SPARQL_ENDPOINT", DEFAULT_SPARQL_ENDPOINT),
        sudo=env_flag("SPARQL_SUDO", default=True),
        resilience=resilience or get_sparql_resilience_config(),
    )
