# pyright: reportExplicitAny=false
from __future__ import annotations

from abc import ABCMeta, abstractmethod
from collections.abc import Callable
from typing import Any, TypeAlias

Step: TypeAlias = Callable[..., Any]
StepPredicate: TypeAlias = Callable[[object], bool]


class BaseStep(metaclass=ABCMeta):
    """Base class for class-based steps.

    Subclassing is optional: any plain or async callable can be a step.
    `__call__` may return a value or an awaitable of one.
    """

    @abstractmethod
    def __call__(self, *args: Any, **kwargs: Any) -> Any:  # noqa: ANN401
        pass
