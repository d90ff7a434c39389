import asyncio
from collections.abc import Awaitable, Callable
from unittest.mock import Mock

import pytest

from stepchain import StepChain


@pytest.fixture
def chain() -> StepChain:
    return StepChain()


def create_steps(count: int) -> list[Mock]:
    return [Mock(return_value=None) for _ in range(count)]


def delayed_step(
    results: list[int],
    value: int,
    delay: float,
) -> Callable[..., Awaitable[None]]:
    async def step(*_args: object, **_kwargs: object) -> None:
        await asyncio.sleep(delay)
        results.append(value)

    return step
