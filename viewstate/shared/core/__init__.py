"""
Shared Core Module
==================

Lifecycle and result types, the observable container, selectors, the
orchestrator, configuration and logging.
"""

# State model
from .lifecycle import (
    Error,
    Initial,
    InvalidTransitionError,
    LifecycleEvent,
    LifecycleState,
    Loading,
    Success,
    can_transition,
    transition,
)
from .result import Err, Ok, Result, capture, result_from_record

# Reactive primitives
from .observable import ObservableContainer, ReadOnlyContainer, SubscriptionToken
from .selector import SelectorSubscription, select
from .orchestrator import Orchestrator

# Configuration
from .configuration import (
    ConfigManager,
    SystemConfig,
    ValidationLevel,
    get_config,
    get_config_manager,
)
from .logging_config import configure_logging

__all__ = [
    # State model
    "LifecycleState",
    "Initial",
    "Loading",
    "Success",
    "Error",
    "LifecycleEvent",
    "InvalidTransitionError",
    "transition",
    "can_transition",
    "Result",
    "Ok",
    "Err",
    "capture",
    "result_from_record",
    # Reactive primitives
    "ObservableContainer",
    "ReadOnlyContainer",
    "SubscriptionToken",
    "SelectorSubscription",
    "select",
    "Orchestrator",
    # Configuration
    "ConfigManager",
    "SystemConfig",
    "ValidationLevel",
    "get_config",
    "get_config_manager",
    "configure_logging",
]
