import math
import numbers


def check_operation(func, name="operation"):
    if not callable(func):
        raise TypeError(f"{name} must be callable, got {type(func).__name__}")
    return func


def check_wait(wait):
    # bool is an Integral, but True milliseconds is never what the caller meant
    if isinstance(wait, bool) or not isinstance(wait, numbers.Real):
        raise TypeError(f"wait must be a number of milliseconds, got {wait!r}")
    if not math.isfinite(wait) or wait < 0:
        raise ValueError(f"wait must be a non-negative number of milliseconds, got {wait!r}")
    return wait


def to_seconds(wait_ms) -> float:
    return wait_ms / 1000


def describe(func) -> str:
    return getattr(func, "__qualname__", None) or repr(func)
