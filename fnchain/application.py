"""Combinators that change how a function receives its arguments."""
import functools

from fnchain.common.primitives import compose, partial, slice_
from fnchain.utils.curry import _curry


def apply(fn, args):
    """Calls ``fn`` with the items of ``args`` as positional arguments.

        >>> apply(max, [3, 4])
        4
    """
    return fn(*slice_(args))


# apply_args(args)(fn): the argument list first, the function later
apply_args = _curry(apply, 2, True)


def aritize(fn, arity):
    """Builds a function that passes at most ``arity`` positional arguments to ``fn``."""
    def aritized(*args, **kwargs):
        return fn(*slice_(args, 0, arity), **kwargs)

    return aritized


def flip(fn):
    """Builds a function that passes its positional arguments to ``fn`` in reverse order."""
    @functools.wraps(fn)
    def flipped(*args, **kwargs):
        return fn(*args[::-1], **kwargs)

    return flipped


pipe = flip(compose)
pipe.__name__ = pipe.__qualname__ = "pipe"
pipe.__doc__ = """Builds the left-to-right pipeline of the given functions.

    >>> pipe(lambda a: a + 1, lambda a: a * 2)(3)
    8
"""

wrap = aritize(flip(partial), 2)
wrap.__name__ = wrap.__qualname__ = "wrap"
wrap.__doc__ = """wrap(fn, wrapper) builds a function calling ``wrapper(fn, *args)``.

    >>> wrap(max, apply)([4, 5, 2, 6, 1])
    6
"""
