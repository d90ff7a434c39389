"""Exceptions raised by stepchain.

Errors raised by the steps themselves, or passed to a `StopHandle`, are
propagated unchanged and are not wrapped in these classes.
"""

from stepchain._internal.exceptions import BaseStepChainError, InvalidStepError

__all__ = (
    "BaseStepChainError",
    "InvalidStepError",
)
