"""
Shared Domain Module
====================

Models rendered by the demo screens.
"""

from viewstate.shared.domain.models import (
    USER_NOT_UPDATED_NOTICE,
    USER_UPDATED_NOTICE,
    CounterState,
    InfoErrorModel,
    UserModel,
)

__all__ = [
    "UserModel",
    "InfoErrorModel",
    "CounterState",
    "USER_UPDATED_NOTICE",
    "USER_NOT_UPDATED_NOTICE",
]
