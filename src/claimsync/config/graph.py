"""Graph identifiers used when reading and writing identity resources."""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_or_default

DEFAULT_USERS_GRAPH = "http://mu.semte.ch/graphs/users"
DEFAULT_RESOURCE_BASE_URI = "http://data.lblod.info/id"


@dataclass(frozen=True, slots=True)
class GraphConfig:
    users_graph: str = DEFAULT_USERS_GRAPH
    resource_base_uri: str = DEFAULT_RESOURCE_BASE_URI


def get_graph_config() -> GraphConfig:
    return GraphConfig(
        users_graph=env_or_default("USERS_GRAPH", DEFAULT_USERS_GRAPH),
        resource_base_uri=env_or_default("RESOURCE_BASE_URI", DEFAULT_RESOURCE_BASE_URI).rstrip(
            "/"
        ),
    )
