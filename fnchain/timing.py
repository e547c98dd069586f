"""Call-rate control: :func:`debounce` and :func:`throttle`.

Both take the timespan in milliseconds, or a
:class:`~fnchain.common.configuration.TimingConfig`.
"""
import functools
import logging
import threading
import time
import types

from fnchain.common.configuration import TimingConfig
from fnchain.common.schedulers import Scheduler, default_scheduler


def monotonic_ms():
    return time.monotonic() * 1000


class Debouncer:
    """Invokes the wrapped function once its calls stop for ``timespan`` milliseconds.

    Every call cancels the pending invocation, if any, and schedules a new one
    with its own arguments. Calls always return ``None``.

    Deferred calls run wherever the scheduler runs its callbacks: on the event
    loop with :class:`~fnchain.common.schedulers.AsyncioScheduler`, on a timer
    thread with :class:`~fnchain.common.schedulers.ThreadingScheduler`. The
    latter is the default outside a running loop, so ``fn`` must then be safe
    to call from another thread.

    Used as a class attribute it binds like a method; all instances share
    one pending call.
    """

    def __init__(self, fn, timespan, scheduler: Scheduler):
        functools.update_wrapper(self, fn)
        self._fn = fn
        self._timespan = timespan
        self._scheduler = scheduler
        self._lock = threading.Lock()
        self._pending = None
        self._logger = logging.getLogger(Debouncer.__name__)

    @property
    def pending(self):
        return self._pending is not None

    def __get__(self, instance, owner=None):
        if instance is None:
            return self
        return types.MethodType(self, instance)

    def _cancel_pending(self):
        if self._pending is not None:
            _, handle = self._pending
            self._scheduler.cancel(handle)
            self._pending = None
            return True
        return False

    def _fire(self, token, args, kwargs):
        with self._lock:
            # superseded timers may still run once started
            if self._pending is None or self._pending[0] is not token:
                return
            self._pending = None
        try:
            self._fn(*args, **kwargs)
        except Exception as error:
            self._logger.exception("Debounced call to %r failed", self._fn)
            raise error

    def __call__(self, *args, **kwargs):
        token = object()
        with self._lock:
            if self._cancel_pending():
                self._logger.debug("Rescheduling %r", self._fn)
            handle = self._scheduler.schedule(self._timespan, functools.partial(self._fire, token, args, kwargs))
            self._pending = (token, handle)

    def cancel(self):
        """Drops the pending invocation. Returns whether there was one."""
        with self._lock:
            cancelled = self._cancel_pending()
        if cancelled:
            self._logger.debug("Cancelled pending call to %r", self._fn)
        return cancelled


class Throttler:
    """Invokes the wrapped function at most once every ``timespan`` milliseconds.

    Calls arriving sooner return the result of the last real invocation.
    Used as a class attribute it binds like a method; all instances share
    one timestamp and cached result.
    """

    def __init__(self, fn, timespan, clock=monotonic_ms):
        functools.update_wrapper(self, fn)
        self._fn = fn
        self._timespan = timespan
        self._clock = clock
        self._lock = threading.RLock()
        self._last_call = None
        self._result = None
        self._logger = logging.getLogger(Throttler.__name__)

    def __get__(self, instance, owner=None):
        if instance is None:
            return self
        return types.MethodType(self, instance)

    def __call__(self, *args, **kwargs):
        with self._lock:
            now = self._clock()
            if self._last_call is None or now - self._last_call >= self._timespan:
                self._last_call = now
                self._result = self._fn(*args, **kwargs)
            else:
                self._logger.debug("Throttled call to %r", self._fn)
            return self._result


def debounce(fn, timespan, scheduler: Scheduler = None) -> Debouncer:
    if isinstance(timespan, TimingConfig):
        scheduler = scheduler or timespan.new_scheduler()
        timespan = timespan.timespan
    return Debouncer(fn, timespan, scheduler or default_scheduler())


def throttle(fn, timespan, clock=monotonic_ms) -> Throttler:
    if isinstance(timespan, TimingConfig):
        timespan = timespan.timespan
    return Throttler(fn, timespan, clock)
