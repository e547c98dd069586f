import asyncio
import threading
import time

import pytest

from fnchain.common.configuration import TimingConfig
from fnchain.common.schedulers import AsyncioScheduler, Scheduler, ThreadingScheduler
from fnchain.timing import Debouncer, debounce, throttle


def test_debounce_invokes_once_with_last_arguments(scheduler):
    calls = []
    debounced = debounce(lambda *args: calls.append(args), 100, scheduler=scheduler)

    for i in range(5):
        assert debounced(i) is None
        scheduler.advance(50)
    assert calls == []

    scheduler.advance(100)
    assert calls == [(4,)]

    scheduler.advance(1000)
    assert calls == [(4,)]


def test_debounce_invokes_again_after_new_quiet_period(scheduler):
    calls = []
    debounced = debounce(calls.append, 100, scheduler=scheduler)

    debounced("a")
    scheduler.advance(100)
    debounced("b")
    scheduler.advance(100)
    assert calls == ["a", "b"]


def test_debounce_cancel(scheduler):
    calls = []
    debounced = debounce(calls.append, 100, scheduler=scheduler)

    debounced("a")
    assert debounced.pending
    assert debounced.cancel() is True
    assert not debounced.pending
    assert debounced.cancel() is False

    scheduler.advance(200)
    assert calls == []


def test_debounce_forwards_keyword_arguments(scheduler):
    calls = []
    debounced = debounce(lambda *args, **kwargs: calls.append(kwargs), 10, scheduler=scheduler)

    debounced(sep="-")
    scheduler.advance(10)
    assert calls == [{"sep": "-"}]


def test_debounce_errors_are_reraised(scheduler):
    def boom():
        raise ValueError("boom")

    debounced = debounce(boom, 10, scheduler=scheduler)
    debounced()
    with pytest.raises(ValueError):
        scheduler.advance(10)
    assert not debounced.pending


def test_debounce_with_config(scheduler):
    debounced = debounce(print, TimingConfig(250), scheduler=scheduler)
    assert isinstance(debounced, Debouncer)
    debounced("x")
    assert scheduler.timers[0][0] == 250


def test_debounce_on_asyncio_loop():
    calls = []

    async def scenario():
        debounced = debounce(calls.append, 20, scheduler=AsyncioScheduler())
        for i in range(3):
            debounced(i)
            await asyncio.sleep(0.005)
        await asyncio.sleep(0.1)

    asyncio.run(scenario())
    assert calls == [2]


def test_throttle_invokes_at_most_once_per_timespan(clock):
    calls = []

    def record(value):
        calls.append(value)
        return value * 10

    throttled = throttle(record, 100, clock=clock)

    assert throttled(1) == 10
    assert throttled(2) == 10
    assert calls == [1]

    clock.now += 99
    assert throttled(3) == 10
    clock.now += 1
    assert throttled(4) == 40
    assert calls == [1, 4]


def test_throttle_first_call_is_immediate_at_time_zero():
    calls = []
    throttled = throttle(calls.append, 5000, clock=lambda: 0)
    throttled("first")
    throttled("second")
    assert calls == ["first"]


def test_throttle_with_config(clock):
    calls = []
    throttled = throttle(calls.append, TimingConfig(timespan=50), clock=clock)
    throttled(1)
    clock.now += 50
    throttled(2)
    assert calls == [1, 2]


class LeakyScheduler(Scheduler):
    """Keeps every callback and never cancels, so stale timers still run."""

    def __init__(self):
        self.callbacks = []

    def schedule(self, delay, callback):
        self.callbacks.append(callback)
        return callback

    def cancel(self, handle):
        pass


def test_debounce_superseded_timer_does_not_invoke():
    calls = []
    scheduler = LeakyScheduler()
    debounced = debounce(calls.append, 100, scheduler=scheduler)

    debounced("old")
    debounced("new")
    stale, current = scheduler.callbacks

    stale()
    assert calls == []
    assert debounced.pending

    current()
    assert calls == ["new"]
    current()
    assert calls == ["new"]


def test_debounce_on_timer_threads():
    calls = []
    debounced = debounce(calls.append, 100)
    assert isinstance(debounced._scheduler, ThreadingScheduler)

    for i in range(4):
        debounced(i)
        time.sleep(0.05)
    time.sleep(0.3)

    assert calls == [3]
    assert not debounced.pending


def test_debounce_defaults_to_running_loop():
    caller = threading.get_ident()
    seen = []

    async def scenario():
        debounced = debounce(lambda value: seen.append((value, threading.get_ident())), 10)
        assert isinstance(debounced._scheduler, AsyncioScheduler)
        debounced("a")
        debounced("b")
        await asyncio.sleep(0.1)

    asyncio.run(scenario())
    assert seen == [("b", caller)]


def test_rate_wrappers_bind_as_methods(scheduler, clock):
    class Widget:
        def __init__(self, name):
            self.name = name

        def _render(self, suffix):
            return self.name + suffix

        render = throttle(_render, 100, clock=clock)
        log = debounce(lambda self, event: events.append((self.name, event)), 10, scheduler=scheduler)

    events = []
    widget = Widget("w")
    assert widget.render("!") == "w!"
    assert Widget("other").render("?") == "w!"

    widget.log("resize")
    scheduler.advance(10)
    assert events == [("w", "resize")]
