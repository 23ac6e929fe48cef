"""HTTP resilience settings for the graph store client."""

from __future__ import annotations

from dataclasses import dataclass, field

import httpx


@dataclass(slots=True, frozen=True)
class RetryPolicy:
    total: int = 3
    backoff_factor: float = 0.5
    max_backoff_wait: float = 10.0
    backoff_jitter: float = 1.0
    respect_retry_after_header: bool = True
    # Queries and updates are both form-encoded POSTs. INSERT DATA and
    # DELETE WHERE statements are idempotent.
    allowed_methods: frozenset[str] = frozenset({"POST"})
    status_forcelist: frozenset[int] = frozenset({429, 502, 503, 504})
    retry_on_exceptions: tuple[type[httpx.HTTPError], ...] = (
        httpx.TimeoutException,
        httpx.NetworkError,
        httpx.RemoteProtocolError,
    )


@dataclass(slots=True, frozen=True)
class RateLimit:
    """At most ``max_calls`` requests in any window of ``per_seconds``."""

    max_calls: int
    per_seconds: float = 1.0

    def __post_init__(self) -> None:
        if self.max_calls < 1 or self.per_seconds <= 0:
            raise ValueError(f"Invalid rate limit: {self.max_calls} per {self.per_seconds}s")


@dataclass(slots=True, frozen=True)
class ConnectionLimits:
    """Connection pool sizing; ``None`` leaves the httpx default in place."""

    max_connections: int | None = None
    max_keepalive_connections: int | None = None

    def to_httpx(self) -> httpx.Limits:
        defaults = httpx.Limits()
        return httpx.Limits(
            max_connections=self.max_connections or defaults.max_connections,
            max_keepalive_connections=(
                self.max_keepalive_connections or defaults.max_keepalive_connections
            ),
        )


@dataclass(slots=True, frozen=True)
class ResilienceConfig:
    name: str
    timeout_seconds: float = 30.0
    retry: RetryPolicy = field(default_factory=RetryPolicy)
    ratelimit: RateLimit | None = None
    connections: ConnectionLimits = field(default_factory=ConnectionLimits)
