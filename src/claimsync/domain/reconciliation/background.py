"""Fire-and-forget execution of non-critical work.

Tasks spawned here are never awaited by the code that spawns them. A failing
task is logged and dropped at its own boundary; there is no retry and no
cancellation.
"""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Coroutine

log = getLogger(__name__)


class BackgroundTasks:
    """Registry of running background tasks.

    The event loop only keeps weak references to tasks, so the registry holds
    them until they finish.
    """

    def __init__(self) -> None:
        self._tasks: set[asyncio.Task[None]] = set()

    def __len__(self) -> int:
        return len(self._tasks)

    def spawn(self, work: Coroutine[object, object, object], *, name: str) -> asyncio.Task[None]:
        task = asyncio.get_running_loop().create_task(self._run(work, name), name=name)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def drain(self) -> None:
        """Wait until every spawned task, including ones spawned meanwhile, has finished.

        Only meant for process shutdown and tests; request handling never calls it.
        """

        while self._tasks:
            await asyncio.gather(*tuple(self._tasks), return_exceptions=True)

    @staticmethod
    async def _run(work: Coroutine[object, object, object], name: str) -> None:
        try:
            await work
        except Exception:
            log.exception("Background task %s failed; dropping it", name)
