"""ViewState package."""

from .shared.core.lifecycle import Error, Initial, LifecycleState, Loading, Success
from .shared.core.observable import ObservableContainer, ReadOnlyContainer, SubscriptionToken
from .shared.core.orchestrator import Orchestrator
from .shared.core.result import Err, Ok, Result
from .shared.core.selector import SelectorSubscription, select

__all__ = [
    "LifecycleState",
    "Initial",
    "Loading",
    "Success",
    "Error",
    "Result",
    "Ok",
    "Err",
    "ObservableContainer",
    "ReadOnlyContainer",
    "SubscriptionToken",
    "SelectorSubscription",
    "select",
    "Orchestrator",
]
