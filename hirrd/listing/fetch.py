"""
Async fetch state for one data source (jobs or companies).

Each trigger gets a monotonically increasing request id. A newer trigger
supersedes older ones: an earlier request that resolves late is discarded,
whether it succeeded or failed.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Generic, Sequence, TypeVar

from hirrd.domain.enums import FetchStatus

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class FetchState(Generic[T]):
    """Snapshot of one data source: Idle → Loading → Success | Failure."""

    status: FetchStatus = FetchStatus.IDLE
    data: list[T] | None = None
    error: Exception | None = None

    @property
    def loading(self) -> bool:
        return self.status is FetchStatus.LOADING


class AsyncFetch(Generic[T]):
    """Runs a fetch collaborator and owns the resulting FetchState."""

    def __init__(
        self,
        fn: Callable[..., Awaitable[Sequence[T]]],
        *,
        name: str,
        on_settle: Callable[[FetchState[T]], None] | None = None,
    ) -> None:
        self._fn = fn
        self._name = name
        self._on_settle = on_settle
        self._request_id = 0
        self._tasks: set[asyncio.Task] = set()
        self._closed = False
        self.state: FetchState[T] = FetchState()

    @property
    def request_id(self) -> int:
        """Id of the most recent request."""
        return self._request_id

    def trigger(self, *args: Any) -> asyncio.Task:
        """Start a new request; it supersedes any request still in flight."""
        if self._closed:
            raise RuntimeError(f"{self._name} fetch is closed")

        self._request_id += 1
        request_id = self._request_id
        self.state = FetchState(status=FetchStatus.LOADING)

        task = asyncio.create_task(
            self._run(request_id, args), name=f"{self._name}-fetch-{request_id}"
        )
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    def cancel(self) -> list[asyncio.Task]:
        """Stop accepting results and cancel every request still in flight."""
        self._closed = True
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        return tasks

    async def close(self) -> None:
        """Cancel in-flight requests and wait for them to unwind."""
        tasks = self.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)

    def _is_stale(self, request_id: int) -> bool:
        return self._closed or request_id != self._request_id

    async def _run(self, request_id: int, args: tuple[Any, ...]) -> None:
        try:
            data = await self._fn(*args)
        except Exception as exc:
            if self._is_stale(request_id):
                logger.debug(
                    "Discarding stale %s failure #%d: %s", self._name, request_id, exc
                )
                return
            logger.warning("%s fetch #%d failed: %s", self._name, request_id, exc)
            self.state = FetchState(status=FetchStatus.FAILURE, error=exc)
        else:
            if self._is_stale(request_id):
                logger.debug("Discarding stale %s result #%d", self._name, request_id)
                return
            self.state = FetchState(status=FetchStatus.SUCCESS, data=list(data))
            logger.debug(
                "%s fetch #%d returned %d rows", self._name, request_id, len(self.state.data)
            )

        if self._on_settle is not None:
            self._on_settle(self.state)
