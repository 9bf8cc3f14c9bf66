"""Screen view models."""

from .counter_controller import CounterViewModel
from .user_controller import UserViewModel

__all__ = ["CounterViewModel", "UserViewModel"]
