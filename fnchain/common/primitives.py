"""Small building blocks shared by the combinators."""
import inspect


class Placeholder(object):
    """Marks an argument slot that :func:`partial` fills at call time."""

    def __repr__(self):
        return "__"


__ = Placeholder()


def slice_(seq, start=None, end=None) -> list:
    return list(seq)[start:end]


def list_(*args) -> list:
    return list(args)


def type_of(value) -> str:
    if value is None:
        return "None"
    if callable(value):
        return "Function"
    return type(value).__name__


def compose(*fns):
    """Builds the right-to-left pipeline of ``fns``.

    The rightmost function receives the call arguments, every other one the
    single result of its right neighbour.
    """
    def composed(*args, **kwargs):
        if not fns:
            return args[0] if args else None
        result = fns[-1](*args, **kwargs)
        for fn in reversed(fns[:-1]):
            result = fn(result)
        return result

    return composed


def _remaining_signature(fn, bound_args):
    """Signature of ``fn`` without the positional slots already bound."""
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        return None
    kept = []
    position = 0
    for parameter in signature.parameters.values():
        if parameter.kind in (parameter.POSITIONAL_ONLY, parameter.POSITIONAL_OR_KEYWORD) \
                and position < len(bound_args):
            if bound_args[position] is __:
                kept.append(parameter)
            position += 1
        else:
            kept.append(parameter)
    return signature.replace(parameters=kept)


def partial(fn, *bound_args):
    """Partial application where ``__`` leaves a slot open for a call-time argument.

    Call-time arguments fill the open slots in order; any left over are
    appended after the bound ones. The result reports the signature of the
    slots still open, so curry infers the remaining arity.
    """
    def partially_applied(*args, **kwargs):
        remaining = iter(args)
        filled = [next(remaining, None) if arg is __ else arg for arg in bound_args]
        return fn(*filled, *remaining, **kwargs)

    signature = _remaining_signature(fn, bound_args)
    if signature is not None:
        partially_applied.__signature__ = signature
    return partially_applied


def map_with(mapper):
    def mapped(seq):
        return [mapper(item) for item in seq]

    return mapped
