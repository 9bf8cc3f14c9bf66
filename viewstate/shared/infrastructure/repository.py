"""User data sources.

A repository exposes one asynchronous operation that returns a Result; it
never raises for an expected failure.
"""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Optional

from viewstate.shared.core.configuration import RepositoryConfig
from viewstate.shared.core.result import Result, capture
from viewstate.shared.domain.models import UserModel

logger = logging.getLogger(__name__)


class UserRepository(ABC):
    """Source of the user shown on the user screen."""

    @abstractmethod
    async def get_user_data(self) -> Result:
        """Fetch the user as ``Ok(UserModel)`` or ``Err(Exception)``."""


class MockUserRepository(UserRepository):
    """In-memory repository with a simulated network delay.

    Args:
        delay: Seconds to wait before answering
        user_name: Name of the returned user
        fail: Answer with ``Err`` instead of ``Ok``
        error_message: Message of the failure when ``fail`` is set
    """

    def __init__(
        self,
        delay: float = 4.0,
        user_name: Optional[str] = "John Doe",
        fail: bool = False,
        error_message: str = "An error occurred.",
    ) -> None:
        self.delay = delay
        self.user_name = user_name
        self.fail = fail
        self.error_message = error_message
        self.calls = 0

    @classmethod
    def from_config(cls, config: RepositoryConfig) -> "MockUserRepository":
        return cls(
            delay=config.delay_seconds,
            user_name=config.user_name,
            fail=config.fail,
            error_message=config.error_message,
        )

    async def get_user_data(self) -> Result:
        self.calls += 1
        logger.debug(f"Fetching user (call {self.calls}, delay={self.delay}s, fail={self.fail})")
        return await capture(self._fetch)

    async def _fetch(self) -> UserModel:
        await asyncio.sleep(self.delay)
        if self.fail:
            raise Exception(self.error_message)
        return UserModel(name=self.user_name)
