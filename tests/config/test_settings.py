from __future__ import annotations

import pytest

from claimsync.config import (
    ClaimKeyConfig,
    ConfigurationError,
    ConnectionLimits,
    GraphConfig,
    RateLimit,
    SparqlConfig,
    get_claim_key_config,
    get_graph_config,
    get_sparql_config,
    get_sparql_resilience_config,
)
from claimsync.config.sparql import SPARQL_TIMEOUT_SECONDS, SUDO_HEADER

_CLAIM_VARS = (
    "AUTH_USERID_CLAIM",
    "AUTH_FIRST_NAME_CLAIM",
    "AUTH_FAMILY_NAME_CLAIM",
    "AUTH_ORG_CODE_CLAIM",
    "AUTH_ORG_NAME_CLAIM",
)


def test_claim_keys_default_when_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _CLAIM_VARS:
        monkeypatch.delenv(name, raising=False)

    assert get_claim_key_config() == ClaimKeyConfig()


def test_claim_keys_read_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AUTH_USERID_CLAIM", "sub")
    monkeypatch.setenv("AUTH_FIRST_NAME_CLAIM", "given")
    monkeypatch.setenv("AUTH_FAMILY_NAME_CLAIM", "family")
    monkeypatch.setenv("AUTH_ORG_CODE_CLAIM", "org")
    monkeypatch.setenv("AUTH_ORG_NAME_CLAIM", " org_name ")

    config = get_claim_key_config()

    assert config == ClaimKeyConfig(
        subject_id="sub",
        first_name="given",
        family_name="family",
        org_code="org",
        org_name="org_name",
    )


def test_blank_claim_key_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AUTH_USERID_CLAIM", "   ")

    with pytest.raises(ConfigurationError, match="AUTH_USERID_CLAIM"):
        get_claim_key_config()


def test_graph_config_strips_trailing_slash(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("USERS_GRAPH", "http://example.org/graphs/users")
    monkeypatch.setenv("RESOURCE_BASE_URI", "http://example.org/id/")

    assert get_graph_config() == GraphConfig(
        users_graph="http://example.org/graphs/users",
        resource_base_uri="http://example.org/id",
    )


def test_sparql_config_defaults_to_sudo(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("MU_SPARQL_ENDPOINT", raising=False)
    monkeypatch.delenv("SPARQL_SUDO", raising=False)

    config = get_sparql_config()

    assert config.endpoint == SparqlConfig().endpoint
    assert config.headers()[SUDO_HEADER] == "true"


def test_sparql_sudo_can_be_disabled(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MU_SPARQL_ENDPOINT", "http://localhost:8890/sparql")
    monkeypatch.setenv("SPARQL_SUDO", "false")

    config = get_sparql_config()

    assert config.endpoint == "http://localhost:8890/sparql"
    assert SUDO_HEADER not in config.headers()


def test_invalid_sudo_flag_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SPARQL_SUDO", "maybe")

    with pytest.raises(ConfigurationError, match="SPARQL_SUDO"):
        get_sparql_config()


def test_sparql_resilience_defaults_are_unbounded(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "SPARQL_TIMEOUT_SECONDS",
        "SPARQL_MAX_REQUESTS_PER_SECOND",
        "SPARQL_MAX_CONNECTIONS",
    ):
        monkeypatch.delenv(name, raising=False)

    resilience = get_sparql_resilience_config()

    assert resilience.timeout_seconds == SPARQL_TIMEOUT_SECONDS
    assert resilience.ratelimit is None
    assert resilience.connections == ConnectionLimits()


def test_sparql_resilience_read_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SPARQL_TIMEOUT_SECONDS", "2.5")
    monkeypatch.setenv("SPARQL_MAX_REQUESTS_PER_SECOND", "20")
    monkeypatch.setenv("SPARQL_MAX_CONNECTIONS", "8")

    resilience = get_sparql_config().resilience

    assert resilience.timeout_seconds == 2.5
    assert resilience.ratelimit == RateLimit(max_calls=20, per_seconds=1.0)
    assert resilience.connections.to_httpx().max_connections == 8


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("SPARQL_TIMEOUT_SECONDS", "soon"),
        ("SPARQL_TIMEOUT_SECONDS", "0"),
        ("SPARQL_MAX_REQUESTS_PER_SECOND", "-1"),
        ("SPARQL_MAX_CONNECTIONS", "many"),
    ],
)
def test_invalid_resilience_values_are_rejected(
    monkeypatch: pytest.MonkeyPatch, name: str, value: str
) -> None:
    monkeypatch.setenv(name, value)

    with pytest.raises(ConfigurationError) as excinfo:
        get_sparql_resilience_config()

    assert excinfo.value.variable == name
