import asyncio

import pytest

from hirrd.domain.enums import FetchStatus
from hirrd.listing.fetch import AsyncFetch, FetchState


@pytest.mark.asyncio
async def test_lifecycle_idle_loading_success():
    async def fetch():
        await asyncio.sleep(0)
        return ["a", "b"]

    source = AsyncFetch(fetch, name="test")
    assert source.state == FetchState()
    assert source.state.status is FetchStatus.IDLE

    task = source.trigger()
    assert source.state.loading
    assert source.state.data is None

    await task
    assert source.state.status is FetchStatus.SUCCESS
    assert source.state.data == ["a", "b"]
    assert source.state.error is None
    assert not source.state.loading


@pytest.mark.asyncio
async def test_failure_exposes_error():
    error = ConnectionError("backend down")

    async def fetch():
        raise error

    settled: list[FetchState] = []
    source = AsyncFetch(fetch, name="test", on_settle=settled.append)

    await source.trigger()

    assert source.state.status is FetchStatus.FAILURE
    assert source.state.error is error
    assert source.state.data is None
    assert settled == [source.state]


@pytest.mark.asyncio
async def test_late_earlier_response_does_not_overwrite_newer_one():
    release_first = asyncio.Event()

    async def fetch(label: str):
        if label == "A":
            await release_first.wait()
        return [label]

    settled: list[FetchState] = []
    source = AsyncFetch(fetch, name="test", on_settle=settled.append)

    first = source.trigger("A")
    second = source.trigger("B")
    await second
    assert source.state.data == ["B"]

    release_first.set()
    await first

    assert source.state.data == ["B"]
    assert source.request_id == 2
    assert [s.data for s in settled] == [["B"]]


@pytest.mark.asyncio
async def test_late_earlier_failure_is_discarded():
    release_first = asyncio.Event()

    async def fetch(label: str):
        if label == "A":
            await release_first.wait()
            raise RuntimeError("stale")
        return [label]

    source = AsyncFetch(fetch, name="test")

    first = source.trigger("A")
    await source.trigger("B")
    release_first.set()
    await first

    assert source.state.status is FetchStatus.SUCCESS
    assert source.state.data == ["B"]


@pytest.mark.asyncio
async def test_close_cancels_in_flight_requests():
    never = asyncio.Event()
    settled: list[FetchState] = []

    async def fetch():
        await never.wait()
        return []

    source = AsyncFetch(fetch, name="test", on_settle=settled.append)
    task = source.trigger()

    await source.close()

    assert task.cancelled()
    assert settled == []
    with pytest.raises(RuntimeError):
        source.trigger()


@pytest.mark.asyncio
async def test_cancel_stops_results_before_tasks_unwind():
    never = asyncio.Event()

    async def fetch():
        await never.wait()
        return ["late"]

    source = AsyncFetch(fetch, name="test")
    task = source.trigger()
    await asyncio.sleep(0)

    pending = source.cancel()

    assert pending == [task]
    with pytest.raises(RuntimeError):
        source.trigger()
    await asyncio.gather(*pending, return_exceptions=True)
    assert task.cancelled()
    assert source.state.status is FetchStatus.LOADING
