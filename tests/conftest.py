import pytest

from fnchain.common.schedulers import Scheduler


class ManualScheduler(Scheduler):
    """Scheduler driven by the test: time only moves on advance()."""

    def __init__(self):
        self.now = 0
        self.timers = []

    def schedule(self, delay, callback):
        handle = [self.now + delay, callback, False]
        self.timers.append(handle)
        return handle

    def cancel(self, handle):
        handle[2] = True

    def advance(self, ms):
        self.now += ms
        due = [t for t in self.timers if t[0] <= self.now and not t[2]]
        self.timers = [t for t in self.timers if t not in due and not t[2]]
        for handle in due:
            handle[1]()


class FakeClock:
    def __init__(self, now=0):
        self.now = now

    def __call__(self):
        return self.now


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def clock():
    return FakeClock(1000)
