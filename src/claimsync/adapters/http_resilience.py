from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

import httpx
from aiolimiter import AsyncLimiter
from httpx_retries import Retry, RetryTransport

if TYPE_CHECKING:
    from collections.abc import Mapping
    from types import TracebackType

    from claimsync.config.http_resilience import ResilienceConfig, RetryPolicy

__all__ = ["ResilientClient", "build_retry"]

log = getLogger(__name__)


def build_retry(policy: RetryPolicy) -> Retry:
    return Retry(
        total=policy.total,
        backoff_factor=policy.backoff_factor,
        max_backoff_wait=policy.max_backoff_wait,
        backoff_jitter=policy.backoff_jitter,
        respect_retry_after_header=policy.respect_retry_after_header,
        allowed_methods=tuple(policy.allowed_methods),
        status_forcelist=tuple(policy.status_forcelist),
        retry_on_exceptions=policy.retry_on_exceptions,
    )


class ResilientClient:
    """``httpx.AsyncClient`` for form posts with retry/backoff and an optional rate limit.

    Retries happen inside the transport, so a rate-limited caller holds its slot
    for the whole retry sequence of one request. Connection limits apply to the
    default transport only; a ``transport`` passed in keeps its own pool.
    """

    def __init__(
        self,
        config: ResilienceConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config
        self._limiter: AsyncLimiter | None = (
            AsyncLimiter(config.ratelimit.max_calls, config.ratelimit.per_seconds)
            if config.ratelimit
            else None
        )
        inner = transport or httpx.AsyncHTTPTransport(limits=config.connections.to_httpx())
        self._client = httpx.AsyncClient(
            timeout=config.timeout_seconds,
            transport=RetryTransport(transport=inner, retry=build_retry(config.retry)),
        )

    async def __aenter__(self) -> ResilientClient:
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

    async def post_form(
        self,
        url: str,
        data: Mapping[str, str],
        *,
        headers: Mapping[str, str] | None = None,
    ) -> httpx.Response:
        """POST ``data`` as ``application/x-www-form-urlencoded``.

        Transport failures that outlive the retry policy propagate as ``httpx.HTTPError``.
        """

        if self._limiter is None:
            return await self._post(url, data, headers)
        async with self._limiter:
            return await self._post(url, data, headers)

    async def _post(
        self,
        url: str,
        data: Mapping[str, str],
        headers: Mapping[str, str] | None,
    ) -> httpx.Response:
        try:
            return await self._client.post(url, data=dict(data), headers=headers)
        except httpx.HTTPError as exc:
            log.warning("%s request to %s failed: %s", self.config.name, url, exc)
            raise
