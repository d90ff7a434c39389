import functools
from collections.abc import AsyncIterator, Iterator
from unittest.mock import AsyncMock, Mock

import pytest

from stepchain import is_runnable_step


def sync_step() -> None:
    pass


async def async_step() -> None:
    pass


def gen_step() -> Iterator[int]:
    yield 1


async def agen_step() -> AsyncIterator[int]:
    yield 1


class CallableStep:
    def __call__(self) -> None:
        pass


@pytest.mark.parametrize(
    "value",
    [
        sync_step,
        async_step,
        lambda: None,
        functools.partial(async_step),
        CallableStep(),
        CallableStep().__call__,
        print,
        Mock(),
        AsyncMock(),
    ],
)
def test_runnable(value: object) -> None:
    assert is_runnable_step(value) is True


@pytest.mark.parametrize(
    "value",
    [
        gen_step,
        agen_step,
        functools.partial(gen_step),
        functools.partial(functools.partial(agen_step)),
        gen_step(),
        0,
        "string",
        None,
        object(),
    ],
)
def test_not_runnable(value: object) -> None:
    assert is_runnable_step(value) is False
