"""View model for the user screen."""

from __future__ import annotations

import logging

from viewstate.shared.core.orchestrator import Orchestrator
from viewstate.shared.domain.models import (
    USER_NOT_UPDATED_NOTICE,
    USER_UPDATED_NOTICE,
    InfoErrorModel,
    UserModel,
)
from viewstate.shared.infrastructure.repository import UserRepository

logger = logging.getLogger(__name__)


class UserViewModel(Orchestrator[UserModel]):
    """Loads the user from a repository into a lifecycle state container."""

    def __init__(self, repository: UserRepository, *, log_changes: bool = True) -> None:
        super().__init__(repository.get_user_data, name="user", log_changes=log_changes)
        self.repository = repository

    async def refresh(self) -> InfoErrorModel:
        """Reload the user and describe the outcome as a notice.

        Returns:
            The success notice when the reload ended in Success, the error
            notice otherwise. A disposed view model publishes nothing, so it
            always reports the error notice.
        """
        state = await self.load()
        if self.disposed:
            return USER_NOT_UPDATED_NOTICE

        notice = state.fold(
            initial=lambda: USER_NOT_UPDATED_NOTICE,
            loading=lambda: USER_NOT_UPDATED_NOTICE,
            success=lambda _user: USER_UPDATED_NOTICE,
            error=lambda message: USER_NOT_UPDATED_NOTICE.copy_with(description=f"User not updated: {message}"),
        )
        logger.info(f"User refresh finished: {notice.title} ({notice.status_code})")
        return notice
