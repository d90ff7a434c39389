from typing import Any


class BaseStepChainError(Exception):
    pass


class InvalidStepError(BaseStepChainError, TypeError):
    """Raised when a value passed to a chain cannot be run as a step."""

    def __init__(
        self,
        value: Any,  # noqa: ANN401
        msg: str = "value is not a runnable step",
    ) -> None:
        self.value: Any = value
        super().__init__(msg)
