import asyncio
import threading
from abc import ABC, abstractmethod

THREADING = "threading"
ASYNCIO = "asyncio"


class Scheduler(ABC):
    """Runs a callback once after a delay expressed in milliseconds."""

    @abstractmethod
    def schedule(self, delay, callback):
        pass

    @abstractmethod
    def cancel(self, handle):
        pass


class ThreadingScheduler(Scheduler):
    def schedule(self, delay, callback):
        timer = threading.Timer(delay / 1000.0, callback)
        timer.daemon = True
        timer.start()
        return timer

    def cancel(self, handle: threading.Timer):
        handle.cancel()


class AsyncioScheduler(Scheduler):
    def __init__(self, loop: asyncio.AbstractEventLoop = None):
        self._loop = loop

    @property
    def loop(self):
        return self._loop if self._loop is not None else asyncio.get_running_loop()

    def schedule(self, delay, callback):
        return self.loop.call_later(delay / 1000.0, callback)

    def cancel(self, handle: asyncio.TimerHandle):
        handle.cancel()


_schedulers = {
    THREADING: ThreadingScheduler,
    ASYNCIO: AsyncioScheduler,
}


def new_scheduler(name: str) -> Scheduler:
    try:
        return _schedulers[name]()
    except KeyError:
        raise ValueError("unknown scheduler: {0}".format(name)) from None


def default_scheduler() -> Scheduler:
    """The running event loop when there is one, timer threads otherwise."""
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        return ThreadingScheduler()
    return AsyncioScheduler(loop)
