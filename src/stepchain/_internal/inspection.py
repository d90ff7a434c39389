import functools
import inspect

from typing_extensions import TypeIs

from stepchain._internal.step import Step


def _unwrap_partial(func: object) -> object:
    while isinstance(func, functools.partial):
        func = func.func
    return func


def is_runnable_step(value: object) -> TypeIs[Step]:
    """Report whether `value` can be stored and run as a step.

    Any callable qualifies except generator and async generator functions,
    which hand back an iterator instead of doing their work when called.
    """
    if not callable(value):
        return False
    func = _unwrap_partial(value)
    return not (
        inspect.isgeneratorfunction(func) or inspect.isasyncgenfunction(func)
    )
