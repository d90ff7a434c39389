"""Sequential step chains for asyncio applications.

This module exposes `StepChain`, an ordered chain of plain or async
callables that are run one after another with the same arguments, and
the helpers used to position steps and to stop a run early.
"""

from importlib.metadata import version as get_version

from stepchain._internal.chain import StepChain
from stepchain._internal.constants import Position, ProcessMode
from stepchain._internal.inspection import is_runnable_step
from stepchain._internal.step import BaseStep, Step
from stepchain._internal.stop import StopHandle

__version__ = get_version("stepchain")
__all__ = (
    "BaseStep",
    "Position",
    "ProcessMode",
    "Step",
    "StepChain",
    "StopHandle",
    "is_runnable_step",
)
