import asyncio
import json

import pytest

from customer_api.app.core.errors import SnapshotError
from customer_api.app.core.store import CustomerStore, load_snapshot
from customer_api.app.schemas.customer import Customer

from .conftest import make_customer


def test_missing_snapshot_gives_empty_store(snapshot_path):
    async def scenario():
        store = CustomerStore.from_snapshot(snapshot_path)
        async with store.acquire() as customers:
            return list(customers)

    assert asyncio.run(scenario()) == []


def test_snapshot_order_is_preserved(write_snapshot):
    records = [make_customer("c"), make_customer("a"), make_customer("b")]
    path = write_snapshot(records)

    async def scenario():
        store = CustomerStore.from_snapshot(path)
        async with store.acquire() as customers:
            return [c.model_dump() for c in customers]

    assert asyncio.run(scenario()) == records


def test_empty_array_snapshot(write_snapshot):
    assert load_snapshot(write_snapshot([])) == []


@pytest.mark.parametrize(
    "content",
    [
        "not json at all",
        "[{\"guid\": \"a\"",
        json.dumps({"guid": "a"}),
        json.dumps([{"guid": "a", "first_name": "Jane"}]),
        json.dumps([make_customer("a") | {"email": 12}]),
        json.dumps([make_customer("a"), make_customer("a")]),
    ],
    ids=["garbage", "truncated", "object", "missing-fields", "wrong-type", "duplicate-guid"],
)
def test_corrupt_snapshot_is_fatal(write_snapshot, content):
    path = write_snapshot(content)
    with pytest.raises(SnapshotError) as excinfo:
        CustomerStore.from_snapshot(path)
    assert excinfo.value.path == str(path)


def test_snapshot_that_is_a_directory_is_fatal(tmp_path):
    with pytest.raises(SnapshotError):
        CustomerStore.from_snapshot(tmp_path)


def test_load_snapshot_missing_file_raises_file_not_found(snapshot_path):
    with pytest.raises(FileNotFoundError):
        load_snapshot(snapshot_path)


def test_acquire_is_exclusive():
    events = []

    async def holder(store, name):
        async with store.acquire():
            events.append(f"{name}:enter")
            await asyncio.sleep(0.01)
            events.append(f"{name}:exit")

    async def scenario():
        store = CustomerStore()
        await asyncio.gather(holder(store, "first"), holder(store, "second"), holder(store, "third"))

    asyncio.run(scenario())
    # Every enter is immediately followed by its own exit.
    for i in range(0, len(events), 2):
        name = events[i].split(":")[0]
        assert events[i + 1] == f"{name}:exit"
    assert len(events) == 6


def test_acquire_released_after_exception():
    async def scenario():
        store = CustomerStore()
        with pytest.raises(RuntimeError):
            async with store.acquire():
                raise RuntimeError("boom")
        return store.locked

    assert asyncio.run(scenario()) is False


def test_cancelled_waiter_and_holder_release_the_store():
    async def scenario():
        store = CustomerStore([Customer(**make_customer("a"))])
        holding = asyncio.Event()

        async def hold_forever():
            async with store.acquire():
                holding.set()
                await asyncio.sleep(3600)

        async def wait_for_store():
            async with store.acquire():
                pass

        holder = asyncio.create_task(hold_forever())
        await holding.wait()
        waiter = asyncio.create_task(wait_for_store())
        await asyncio.sleep(0)
        waiter.cancel()
        holder.cancel()
        await asyncio.gather(holder, waiter, return_exceptions=True)

        async with store.acquire() as customers:
            guids = [c.guid for c in customers]
        return guids, store.locked

    guids, locked = asyncio.run(scenario())
    assert guids == ["a"]
    assert locked is False
