from fnchain.application import apply, apply_args, aritize, flip, pipe, wrap
from fnchain.arguments import invoker, map_args, tap_args
from fnchain.common.configuration import TimingConfig
from fnchain.common.primitives import __, compose, list_, map_with, partial, slice_, type_of
from fnchain.common.schedulers import AsyncioScheduler, Scheduler, ThreadingScheduler
from fnchain.timing import debounce, throttle
from fnchain.utils.constant import namespace
from fnchain.utils.curry import curry, curry_right, curryable, curryable_right

__version__ = "0.1.0"

fn = namespace(
    "fn",
    apply=apply,
    apply_args=apply_args,
    aritize=aritize,
    curry=curry,
    curry_right=curry_right,
    curryable=curryable,
    curryable_right=curryable_right,
    debounce=debounce,
    flip=flip,
    invoker=invoker,
    map_args=map_args,
    pipe=pipe,
    tap_args=tap_args,
    throttle=throttle,
    wrap=wrap,
)

__all__ = [
    "__", "apply", "apply_args", "aritize", "compose", "curry", "curry_right", "curryable",
    "curryable_right", "debounce", "flip", "fn", "invoker", "list_", "map_args", "map_with",
    "partial", "pipe", "slice_", "tap_args", "throttle", "type_of", "wrap",
    "AsyncioScheduler", "Scheduler", "ThreadingScheduler", "TimingConfig",
]
