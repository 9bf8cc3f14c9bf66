"""Selector subscriptions: observe a projection of a container's state.

A selector reduces the source value with a projector and notifies its own
listeners only when the projection changes under its comparator. Whole-state
equality (checked by the source) and projected equality (checked here) are
different predicates, so the check is repeated on every source notification.
"""

from __future__ import annotations

import logging
import operator
from typing import Callable, Generic, Optional, Protocol, TypeVar

from .observable import Listener, ObservableContainer, SubscriptionToken

logger = logging.getLogger(__name__)

S = TypeVar("S")
U = TypeVar("U")


class Observable(Protocol[S]):
    """Anything a selector can watch: a container or its read-only view."""

    name: str

    def get(self) -> S: ...

    def subscribe(self, listener: Listener) -> SubscriptionToken: ...

    def unsubscribe(self, token: SubscriptionToken) -> None: ...


class SelectorSubscription(Generic[S, U]):
    """Derived observable over ``projector(source.get())``.

    Args:
        source: Container (or view) to watch
        projector: Pure function narrowing the source state
        comparator: ``(previous, next) -> bool``, True when the projection
            counts as changed. Defaults to ``previous != next``.

    Usage:
        number1 = counter.select(lambda s: s.number1)
        number1.subscribe(lambda: render(number1.current()))
        ...
        number1.dispose()
    """

    def __init__(
        self,
        source: Observable[S],
        projector: Callable[[S], U],
        comparator: Optional[Callable[[U, U], bool]] = None,
    ) -> None:
        self._source = source
        self._projector = projector
        self._comparator = comparator or operator.ne
        self._disposed = False

        # The projected value lives in its own container whose write gate is
        # the comparator, so selector listeners get the container semantics.
        self._projected: ObservableContainer[U] = ObservableContainer(
            projector(source.get()),
            name=f"{source.name}.selector",
            equals=lambda previous, nxt: not self._comparator(previous, nxt),
            log_changes=False,
        )
        self._source_token = source.subscribe(self._on_source_changed)

    def current(self) -> U:
        """Last projected value that passed the comparator."""
        return self._projected.get()

    @property
    def disposed(self) -> bool:
        return self._disposed

    @property
    def listener_count(self) -> int:
        return self._projected.listener_count

    def subscribe(self, listener: Listener) -> SubscriptionToken:
        """Register a zero-argument listener; read the value via ``current()``."""
        return self._projected.subscribe(listener)

    def unsubscribe(self, token: SubscriptionToken) -> None:
        self._projected.unsubscribe(token)

    def _on_source_changed(self) -> None:
        if self._disposed:
            return
        next_value = self._projector(self._source.get())
        if self._projected.set(next_value):
            logger.debug(f"{self._projected.name}: projection changed to {next_value!r}")

    def dispose(self) -> None:
        """Detach from the source and drop every listener. Safe to call twice."""
        if self._disposed:
            return
        self._disposed = True
        self._source.unsubscribe(self._source_token)
        self._projected.dispose()
        forget = getattr(self._source, "_forget_selector", None)
        if forget is not None:
            forget(self)

    def __repr__(self) -> str:
        return f"SelectorSubscription({self._projected.name}: {self.current()!r})"


def select(
    source: Observable[S],
    projector: Callable[[S], U],
    comparator: Optional[Callable[[U, U], bool]] = None,
) -> SelectorSubscription[S, U]:
    """Functional spelling of ``SelectorSubscription(source, projector, comparator)``."""
    return SelectorSubscription(source, projector, comparator)


__all__ = ["Observable", "SelectorSubscription", "select"]
