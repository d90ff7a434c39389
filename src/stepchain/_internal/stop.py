from __future__ import annotations

from typing import final


@final
class StopHandle:
    """Stop-callback handed to every step by `StepChain.process_with_stop`.

    A fresh handle is created for each run, so concurrent runs of the same
    chain never share stopping decisions.
    """

    __slots__: tuple[str, ...] = ("_exception", "_stopped")

    def __init__(self) -> None:
        self._stopped: bool = False
        self._exception: BaseException | None = None

    @property
    def stopped(self) -> bool:
        return self._stopped

    @property
    def exception(self) -> BaseException | None:
        return self._exception

    def signal(
        self,
        exc: BaseException | type[BaseException] | None = None,
    ) -> None:
        """Stop the chain after the current step settles.

        Args:
            exc: Optional exception, or exception class, to raise from the
                run once the current step has finished. Any other value
                stops the run with a `TypeError` instead.

        """
        self._stopped = True
        if exc is None or self._exception is not None:
            return
        if isinstance(exc, type) and issubclass(exc, BaseException):
            exc = exc()
        if not isinstance(exc, BaseException):
            msg = (
                "stop handle accepts an exception or nothing, "
                f"got {type(exc).__name__!r}"
            )
            exc = TypeError(msg)
        self._exception = exc

    def __call__(
        self,
        exc: BaseException | type[BaseException] | None = None,
    ) -> None:
        self.signal(exc)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(stopped={self._stopped!r}, "
            f"exception={self._exception!r})"
        )
