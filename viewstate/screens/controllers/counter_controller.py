"""View model for the counter screen.

Two independent numbers live in one container. Widgets that care about a
single number watch it through a selector and skip updates that only touch
the other one.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, TypeVar

from viewstate.shared.core.observable import (
    Listener,
    ObservableContainer,
    ReadOnlyContainer,
    SubscriptionToken,
)
from viewstate.shared.core.selector import SelectorSubscription
from viewstate.shared.domain.models import CounterState

logger = logging.getLogger(__name__)

U = TypeVar("U")


class CounterViewModel:
    """Owns the counter container; the only code allowed to write it."""

    def __init__(self, initial: Optional[CounterState] = None, *, log_changes: bool = True) -> None:
        self._state: ObservableContainer[CounterState] = ObservableContainer(
            initial or CounterState(),
            name="counter",
            log_changes=log_changes,
        )

    @property
    def state(self) -> CounterState:
        return self._state.get()

    @property
    def container(self) -> ReadOnlyContainer[CounterState]:
        return self._state.view()

    @property
    def number1(self) -> int:
        return self._state.get().number1

    @property
    def number2(self) -> int:
        return self._state.get().number2

    @property
    def disposed(self) -> bool:
        return self._state.disposed

    # --- Actions ---

    def add(self) -> None:
        """Increment both numbers."""
        self._state.update(lambda s: s.model_copy(update={"number1": s.number1 + 1, "number2": s.number2 + 1}))

    def add_to_1(self) -> None:
        self._state.update(lambda s: s.model_copy(update={"number1": s.number1 + 1}))

    def add_to_2(self) -> None:
        self._state.update(lambda s: s.model_copy(update={"number2": s.number2 + 1}))

    def clear(self) -> None:
        """Reset to the starting numbers (0 and 1)."""
        logger.debug("Counter cleared")
        self._state.set(CounterState())

    # --- Subscriptions ---

    def subscribe(self, listener: Listener) -> SubscriptionToken:
        return self._state.subscribe(listener)

    def unsubscribe(self, token: SubscriptionToken) -> None:
        self._state.unsubscribe(token)

    def select(
        self,
        projector: Callable[[CounterState], U],
        comparator: Optional[Callable[[U, U], bool]] = None,
    ) -> SelectorSubscription[CounterState, U]:
        return self._state.select(projector, comparator)

    def dispose(self) -> None:
        self._state.dispose()
