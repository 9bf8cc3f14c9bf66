"""Global State Store - Service Locator Pattern.

Provides centralized access to the screen view models from any UI
component. Implements the singleton pattern for consistent state access.
"""

from __future__ import annotations

import logging
from typing import Optional

from viewstate.screens.controllers.counter_controller import CounterViewModel
from viewstate.screens.controllers.user_controller import UserViewModel
from viewstate.shared.core.configuration import SystemConfig
from viewstate.shared.infrastructure.repository import MockUserRepository, UserRepository

logger = logging.getLogger(__name__)


class Store:
    """Global store for the screen view models.

    The store owns every view model it creates and disposes them together.

    Usage:
        # During app initialization
        Store.initialize(repository)

        # In any UI component
        store = Store.get()
        await store.user.load()
    """

    _instance: Optional['Store'] = None

    def __init__(self, repository: UserRepository, log_changes: bool = True) -> None:
        """Initialize store with the user data source.

        Note: Do not call directly. Use Store.initialize() instead.

        Args:
            repository: Data source for the user screen
            log_changes: Log every accepted state change at DEBUG
        """
        self.user = UserViewModel(repository, log_changes=log_changes)
        self.counter = CounterViewModel(log_changes=log_changes)

    @classmethod
    def initialize(cls, repository: UserRepository, log_changes: bool = True) -> 'Store':
        """Initialize the global store instance.

        Should be called once during application startup before any UI
        components are created.

        Args:
            repository: Data source for the user screen
            log_changes: Log every accepted state change at DEBUG

        Returns:
            The initialized store instance

        Raises:
            RuntimeError: If store is already initialized
        """
        if cls._instance is not None:
            raise RuntimeError("Store already initialized!")

        cls._instance = cls(repository, log_changes=log_changes)
        logger.debug("Store initialized")
        return cls._instance

    @classmethod
    def from_config(cls, config: SystemConfig) -> 'Store':
        """Initialize the global store with a mock repository built from config."""
        repository = MockUserRepository.from_config(config.repository)
        return cls.initialize(repository, log_changes=config.logging.log_state_changes)

    @classmethod
    def get(cls) -> 'Store':
        """Get the global store instance.

        Returns:
            The store instance

        Raises:
            RuntimeError: If store has not been initialized
        """
        if cls._instance is None:
            raise RuntimeError("Store not initialized! Call Store.initialize() first.")
        return cls._instance

    def dispose(self) -> None:
        """Dispose every view model and all of their subscriptions."""
        self.user.dispose()
        self.counter.dispose()

    @classmethod
    def reset(cls) -> None:
        """Dispose and drop the store instance.

        Primarily used for testing. In production, store persists for
        application lifetime.
        """
        if cls._instance is not None:
            cls._instance.dispose()
        cls._instance = None
