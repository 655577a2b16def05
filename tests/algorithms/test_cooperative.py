import asyncio

import pytest

from citypath.algorithms.base import CooperativeYield


class CountingEvent:
    def __init__(self, fire_after=None):
        self.calls = 0
        self.fire_after = fire_after

    def is_set(self):
        self.calls += 1
        return self.fire_after is not None and self.calls >= self.fire_after


def test_checks_once_per_interval():
    event = CountingEvent()
    yielder = CooperativeYield(10, event)

    async def work():
        for _ in range(25):
            await yielder.tick()

    asyncio.run(work())
    assert event.calls == 2


def test_bulk_ticks_keep_remainder():
    event = CountingEvent()
    yielder = CooperativeYield(10, event)

    async def work():
        await yielder.tick(15)  # yields, 5 pending
        await yielder.tick(4)  # 9 pending
        await yielder.tick(1)  # yields

    asyncio.run(work())
    assert event.calls == 2


def test_zero_interval_disables_ticks_but_not_checkpoints():
    event = CountingEvent()
    yielder = CooperativeYield(0, event)

    async def work():
        for _ in range(100):
            await yielder.tick()
        await yielder.checkpoint()

    asyncio.run(work())
    assert event.calls == 1


def test_set_event_raises_cancelled_error():
    yielder = CooperativeYield(1, CountingEvent(fire_after=3))

    async def work():
        for _ in range(10):
            await yielder.tick()

    with pytest.raises(asyncio.CancelledError):
        asyncio.run(work())


def test_no_event_never_cancels():
    yielder = CooperativeYield(1)

    async def work():
        for _ in range(10):
            await yielder.tick()

    asyncio.run(work())
