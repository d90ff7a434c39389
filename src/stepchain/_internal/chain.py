"""Ordered chain of steps run one after another."""

# pyright: reportExplicitAny=false
from __future__ import annotations

import functools
import inspect
import logging
from typing import TYPE_CHECKING, Any, ParamSpec, TypeVar, final

from stepchain._internal.constants import Position, ProcessMode
from stepchain._internal.exceptions import InvalidStepError
from stepchain._internal.inspection import is_runnable_step
from stepchain._internal.stop import StopHandle

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Iterable

    from stepchain._internal.step import Step, StepPredicate

logger = logging.getLogger("stepchain")

ReturnT = TypeVar("ReturnT")
ParamsT = ParamSpec("ParamsT")


async def _settle(result: Any) -> Any:  # noqa: ANN401
    if inspect.isawaitable(result):
        return await result
    return result


@final
class StepChain:
    """Run steps one by one and stop the run when a step asks for it.

    Steps are plain or async callables. They are kept in insertion order,
    the same step may be stored several times, and every candidate is
    checked with `step_checker` before it is stored.
    """

    __slots__: tuple[str, ...] = ("_step_checker", "_steps")

    def __init__(
        self,
        steps: Iterable[Step] | None = None,
        *,
        step_checker: StepPredicate = is_runnable_step,
    ) -> None:
        self._step_checker: StepPredicate = step_checker
        self._steps: list[Step] = []
        if steps is not None:
            self.append(*steps)

    @property
    def size(self) -> int:
        return len(self._steps)

    @property
    def steps(self) -> tuple[Step, ...]:
        return tuple(self._steps)

    def __len__(self) -> int:
        return len(self._steps)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={len(self._steps)})"

    def append(self, *steps: Step) -> None:
        """Add steps to the end of the chain, in the given order."""
        for step in steps:
            self._check(step)
            self._steps.append(step)

    def remove(self, *steps: Step) -> None:
        """Remove every occurrence of each given step.

        Steps that are not in the chain are ignored.
        """
        for step in steps:
            self._check(step)
            self._steps = [s for s in self._steps if s != step]

    def prepend_all(self, *steps: Step) -> None:
        """Add steps to the head of the chain, keeping the given order."""
        for step in reversed(steps):
            self._check(step)
            self._steps.insert(0, step)

    def insert_relative(
        self,
        anchor: Step,
        *steps: Step,
        position: Position | str,
    ) -> None:
        """Insert steps next to every occurrence of `anchor`.

        Args:
            anchor: Step that marks the insertion points.
            steps: Steps to insert, one by one.
            position: Whether to insert before or after each occurrence.

        """
        offset = 0 if Position(position) is Position.BEFORE else 1
        for step in steps:
            self._check(step)
            i = 0
            while i < len(self._steps):
                if self._steps[i] == anchor:
                    self._steps.insert(i + offset, step)
                    # skip the anchor and the step placed next to it
                    i += 1
                i += 1

    def insert_before(self, anchor: Step, *steps: Step) -> None:
        self.insert_relative(anchor, *steps, position=Position.BEFORE)

    def insert_after(self, anchor: Step, *steps: Step) -> None:
        self.insert_relative(anchor, *steps, position=Position.AFTER)

    def reset(self) -> None:
        self._steps = []

    def _check(self, step: object) -> None:
        if not self._step_checker(step):
            logger.debug("Rejected %r: not a runnable step", step)
            raise InvalidStepError(step)

    async def process(self, *args: Any, **kwargs: Any) -> bool:  # noqa: ANN401
        """Run the steps with the given arguments.

        The run stops as soon as a step returns exactly `False`; any other
        result, falsy or not, lets the next step run.

        Returns:
            `True` if every step ran, `False` if the chain was stopped.

        """
        for step in self._steps:
            result = await _settle(step(*args, **kwargs))
            if result is False:
                logger.debug("Chain stopped by %r returning False", step)
                return False
        return True

    async def process_with_stop(
        self,
        *args: Any,  # noqa: ANN401
        **kwargs: Any,  # noqa: ANN401
    ) -> bool:
        """Run the steps, passing a `StopHandle` after the positional args.

        Results of the steps are ignored. A step stops the run by calling
        the handle; calling it with an exception also makes this coroutine
        raise that exception once the step has finished.

        Returns:
            `True` if every step ran, `False` if the chain was stopped.

        """
        stop = StopHandle()
        for step in self._steps:
            _ = await _settle(step(*args, stop, **kwargs))
            if stop.exception is not None:
                logger.debug(
                    "Chain stopped by %r with %r",
                    step,
                    stop.exception,
                )
                raise stop.exception
            if stop.stopped:
                logger.debug("Chain stopped by %r", step)
                return False
        return True

    def wrap(
        self,
        func: Callable[ParamsT, Awaitable[ReturnT] | ReturnT],
        mode: ProcessMode | str = ProcessMode.PROCESS,
    ) -> Callable[ParamsT, Awaitable[ReturnT | None]]:
        """Gate `func` behind a run of this chain.

        The returned coroutine function runs the chain with its own
        arguments and calls `func` with the same arguments only when the
        chain completes.
        """
        run = (
            self.process
            if ProcessMode(mode) is ProcessMode.PROCESS
            else self.process_with_stop
        )

        @functools.wraps(func)
        async def wrapper(
            *args: ParamsT.args,
            **kwargs: ParamsT.kwargs,
        ) -> ReturnT | None:
            if not await run(*args, **kwargs):
                return None
            return await _settle(func(*args, **kwargs))

        return wrapper
