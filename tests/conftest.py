"""
Pytest configuration and fixtures.
"""

import asyncio
from typing import List

import pytest

from viewstate.screens.state import Store
from viewstate.shared.core.observable import ObservableContainer
from viewstate.shared.core.result import Result
from viewstate.shared.infrastructure.repository import UserRepository


class GatedUserRepository(UserRepository):
    """Repository whose calls stay pending until the test resolves them.

    Every ``get_user_data`` call parks on its own future, so overlapping
    loads can be resolved in any order.
    """

    def __init__(self) -> None:
        self.pending: List[asyncio.Future] = []

    async def get_user_data(self) -> Result:
        future = asyncio.get_running_loop().create_future()
        self.pending.append(future)
        return await future

    def resolve(self, index: int, result: Result) -> None:
        self.pending[index].set_result(result)

    def fail_with(self, index: int, exc: BaseException) -> None:
        self.pending[index].set_exception(exc)


class Recorder:
    """Zero-argument listener that records what it reads from a source."""

    def __init__(self, read) -> None:
        self._read = read
        self.seen = []

    def __call__(self) -> None:
        self.seen.append(self._read())

    @property
    def calls(self) -> int:
        return len(self.seen)


async def settle() -> None:
    """Let every ready task run until the loop is quiet."""
    for _ in range(5):
        await asyncio.sleep(0)


@pytest.fixture
def gated_repository() -> GatedUserRepository:
    return GatedUserRepository()


@pytest.fixture
def container() -> ObservableContainer:
    return ObservableContainer(0, name="test")


@pytest.fixture(autouse=True)
def reset_store():
    """Keep the Store singleton from leaking between tests."""
    Store.reset()
    yield
    Store.reset()
