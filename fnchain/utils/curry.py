from __future__ import annotations

import inspect
import logging
import math
import numbers
from typing import Callable, Generic, TypeVar, Union

from multipledispatch import dispatch

ReturnType = TypeVar("ReturnType")

logger = logging.getLogger(__name__)

_arity_space = dict()


def declared_arity(fn: Callable) -> int:
    """Number of positional parameters of ``fn`` that have no default value."""
    try:
        parameters = inspect.signature(fn).parameters.values()
    except (TypeError, ValueError):
        logger.debug("No signature available for %r, inferring arity 0", fn)
        return 0
    return sum(1 for p in parameters
               if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD) and p.default is p.empty)


@dispatch(object, object, namespace=_arity_space)
def resolve_arity(candidate, fn) -> int:
    if candidate is not None:
        logger.debug("Discarding arity %r for %r", candidate, fn)
    return declared_arity(fn)


@dispatch(bool, object, namespace=_arity_space)
def resolve_arity(candidate, fn) -> int:
    logger.debug("Discarding arity %r for %r", candidate, fn)
    return declared_arity(fn)


@dispatch(numbers.Integral, object, namespace=_arity_space)
def resolve_arity(candidate, fn) -> int:
    return int(candidate)


@dispatch(numbers.Real, object, namespace=_arity_space)
def resolve_arity(candidate, fn) -> int:
    value = float(candidate)
    if math.isfinite(value) and value == int(value):
        return int(value)
    logger.debug("Discarding arity %r for %r", candidate, fn)
    return declared_arity(fn)


class Currier(Generic[ReturnType]):
    """One step of a curry chain.

    A step never changes after construction: calling it either invokes the
    target, once ``arity`` positional arguments are held, or returns a new
    step holding the extended argument tuple. Any step can therefore be
    called again with different arguments.
    """

    def __init__(self, fn: Callable[..., ReturnType], arity: int, is_right: bool, is_auto: bool,
                 args: tuple = (), kwargs: dict = None) -> None:
        self._fn = fn
        self._arity = arity
        self._is_right = is_right
        self._is_auto = is_auto
        self._args = tuple(args)
        self._kwargs = dict(kwargs or {})

    @property
    def arity(self):
        return self._arity

    @property
    def args(self):
        return self._args

    @property
    def kwargs(self):
        return dict(self._kwargs)

    def __get__(self, instance, owner=None):
        # the instance becomes the next held argument
        if instance is None:
            return self
        return Currier(self._fn, self._arity, self._is_right, self._is_auto, self._args + (instance,), self._kwargs)

    def _accept(self, more_args: tuple) -> tuple:
        if self._is_auto:
            return more_args
        # one argument per call, extras are dropped
        if len(more_args) > 1:
            logger.debug("Dropping %d extra argument(s) passed to %r", len(more_args) - 1, self)
        return more_args[:1]

    def __call__(self, *more_args, **more_kwargs) -> Union[Currier[ReturnType], ReturnType]:
        all_args = self._args + self._accept(more_args)  # tuple addition
        all_kwargs = {**self._kwargs, **more_kwargs}  # non-mutative dictionary union
        if len(all_args) >= self._arity:
            return self._fn(*(all_args[::-1] if self._is_right else all_args), **all_kwargs)
        else:
            return Currier(self._fn, self._arity, self._is_right, self._is_auto, all_args, all_kwargs)

    def __repr__(self):
        return f"Currier({self._fn}, arity={self._arity}, args={self._args}, kwargs={self._kwargs})"


def _curry(fn, arity, is_right, is_auto=False) -> Currier:
    return Currier(fn, resolve_arity(arity, fn), is_right, is_auto)


def _decorate(fn, arity, is_right, is_auto):
    if fn is None:
        def decorator(target: Callable[..., ReturnType]) -> Currier[ReturnType]:
            return _curry(target, arity, is_right, is_auto)

        return decorator
    return _curry(fn, arity, is_right, is_auto)


def curry(fn: Callable[..., ReturnType] = None, arity: int = None):
    """Curries ``fn`` from the leftmost argument, one argument per call.

    Extra arguments passed to a single call are ignored, and an empty call
    returns an equivalent step::

        >>> add3 = curry(lambda a, b, c: a + b + c)
        >>> add3(1)()(2)(3)
        6
        >>> add3(1, 100)(2)(3)
        6

    Without ``fn`` it returns a decorator: ``@curry(arity=3)``.
    """
    return _decorate(fn, arity, False, False)


def curry_right(fn: Callable[..., ReturnType] = None, arity: int = None):
    """Same as :func:`curry`, but arguments are supplied from the rightmost one.

        >>> halve = curry_right(lambda a, b: a / b)(2)
        >>> halve(3)
        1.5
    """
    return _decorate(fn, arity, True, False)


def curryable(fn: Callable[..., ReturnType] = None, arity: int = None):
    """Auto-curries ``fn``: every call may supply any number of arguments.

        >>> collect4 = curryable(lambda *args: list(args), 4)
        >>> collect4(2)(3, 4)(5)
        [2, 3, 4, 5]
        >>> collect4()(2)()(3, 4, 5)
        [2, 3, 4, 5]
    """
    return _decorate(fn, arity, False, True)


def curryable_right(fn: Callable[..., ReturnType] = None, arity: int = None):
    """Same as :func:`curryable`, with the collected arguments reversed on invocation."""
    return _decorate(fn, arity, True, True)
