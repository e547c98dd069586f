"""Combinators that look into or transform the arguments of a call."""
import functools
import logging

from fnchain.application import apply
from fnchain.common.primitives import compose, list_, map_with, partial, type_of

logger = logging.getLogger(__name__)


def invoker(method_name, *bound_args):
    """Builds a function calling the method ``method_name`` on whatever object it receives.

    ``bound_args`` come first, followed by the arguments given after the
    target. When the target has no callable attribute with that name the
    result is ``None``::

        >>> strip_x = invoker("strip", "x")
        >>> strip_x("xxhixx")
        'hi'
        >>> invoker("strip")(42) is None
        True
    """
    def invoke(target, *args, **kwargs):
        method = getattr(target, method_name, None)
        if type_of(method) != "Function":
            logger.debug("%r has no method %r", target, method_name)
            return None
        return method(*bound_args, *args, **kwargs)

    return invoke


def tap_args(fn, *readers):
    """Builds a function that runs each argument through the reader at the same position.

    Arguments without a reader, or whose reader is ``None``, are passed
    through unchanged.
    """
    @functools.wraps(fn)
    def tapped(*args, **kwargs):
        tapped_args = []
        for i, arg in enumerate(args):
            reader = readers[i] if i < len(readers) else None
            tapped_args.append(reader(arg) if reader else arg)
        return fn(*tapped_args, **kwargs)

    return tapped


def map_args(fn, mapper):
    """Builds a function that maps ``mapper`` over all its arguments before calling ``fn``.

        >>> sum_squares = map_args(lambda *a: sum(a), lambda x: x ** 2)
        >>> sum_squares(1, 2, 3, 4, 5)
        55
    """
    return compose(partial(apply, fn), map_with(mapper), list_)
