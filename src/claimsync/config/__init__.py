"""Application configuration helpers."""

from __future__ import annotations

from .claims import ClaimKeyConfig, get_claim_key_config
from .env import env_flag, env_optional_positive_int, env_or_default, env_positive_float
from .errors import ConfigurationError
from .graph import GraphConfig, get_graph_config
from .http_resilience import ConnectionLimits, RateLimit, ResilienceConfig, RetryPolicy
from .logging import configure_logging
from .sparql import SparqlConfig, get_sparql_config, get_sparql_resilience_config

__all__ = [
    "ClaimKeyConfig",
    "ConfigurationError",
    "ConnectionLimits",
    "GraphConfig",
    "RateLimit",
    "ResilienceConfig",
    "RetryPolicy",
    "SparqlConfig",
    "configure_logging",
    "env_flag",
    "env_optional_positive_int",
    "env_or_default",
    "env_positive_float",
    "get_claim_key_config",
    "get_graph_config",
    "get_sparql_config",
    "get_sparql_resilience_config",
]
