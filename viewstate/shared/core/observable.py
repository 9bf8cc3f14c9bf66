"""Observable container: one mutable cell with equality-gated notification.

The container holds a single immutable value and an ordered set of
zero-argument listeners. Listeners pull the new value with ``get()``.
Writing a value equal to the current one does nothing, so repeated writes
of the same state never trigger redundant renders.
"""

from __future__ import annotations

import itertools
import logging
import operator
from typing import TYPE_CHECKING, Any, Callable, Dict, Generic, List, Optional, TypeVar

if TYPE_CHECKING:
    from .selector import SelectorSubscription

logger = logging.getLogger(__name__)

S = TypeVar("S")
U = TypeVar("U")

Listener = Callable[[], None]

_token_ids = itertools.count(1)


class SubscriptionToken:
    """Handle returned by ``subscribe``; pass it back to ``unsubscribe``."""

    __slots__ = ("id", "owner")

    def __init__(self, owner: str) -> None:
        self.id = next(_token_ids)
        self.owner = owner

    def __repr__(self) -> str:
        return f"SubscriptionToken({self.owner}#{self.id})"


class ObservableContainer(Generic[S]):
    """Mutable cell holding one state value.

    Only the owner of a container should call ``set``/``update``/``dispose``.
    Hand consumers ``view()`` instead, which exposes reading and
    subscribing only.

    Usage:
        counter = ObservableContainer(CounterState(), name="counter")
        token = counter.subscribe(lambda: print(counter.get()))
        counter.update(lambda s: s.model_copy(update={"number1": 1}))
        counter.unsubscribe(token)
    """

    def __init__(
        self,
        initial: S,
        *,
        name: str = "container",
        equals: Optional[Callable[[S, S], bool]] = None,
        log_changes: bool = True,
    ) -> None:
        """Create a container.

        Args:
            initial: Initial value
            name: Label used in logs and token reprs
            equals: Equality predicate gating ``set`` (defaults to ``==``)
            log_changes: Log every accepted change at DEBUG level
        """
        self.name = name
        self._value = initial
        self._equals = equals or operator.eq
        self._log_changes = log_changes
        self._listeners: Dict[SubscriptionToken, Listener] = {}
        self._selectors: List["SelectorSubscription[S, Any]"] = []
        self._disposed = False

    # --- Reading ---

    def get(self) -> S:
        """Return the current value."""
        return self._value

    @property
    def value(self) -> S:
        return self._value

    @property
    def disposed(self) -> bool:
        return self._disposed

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    # --- Writing ---

    def set(self, new_value: S) -> bool:
        """Replace the current value and notify listeners.

        Args:
            new_value: Value to store

        Returns:
            True if listeners were notified, False if the write was
            suppressed (equal value or disposed container)
        """
        if self._disposed:
            logger.debug(f"{self.name}: ignoring write after dispose: {new_value!r}")
            return False
        if self._equals(self._value, new_value):
            return False

        self._value = new_value
        if self._log_changes:
            logger.debug(f"{self.name} state: {new_value!r}")
        self._notify()
        return True

    def update(self, fn: Callable[[S], S]) -> bool:
        """Set the value computed by ``fn`` from the current value."""
        return self.set(fn(self._value))

    # --- Subscriptions ---

    def subscribe(self, listener: Listener) -> SubscriptionToken:
        """Register a zero-argument listener.

        The same callable may be registered more than once; every
        registration gets its own token and is removed independently.

        Returns:
            Token for ``unsubscribe``
        """
        token = SubscriptionToken(self.name)
        if self._disposed:
            logger.debug(f"{self.name}: subscribe after dispose, listener will never fire")
            return token
        self._listeners[token] = listener
        return token

    def unsubscribe(self, token: SubscriptionToken) -> None:
        """Remove a listener. Unknown or already-removed tokens are ignored."""
        self._listeners.pop(token, None)

    def select(
        self,
        projector: Callable[[S], U],
        comparator: Optional[Callable[[U, U], bool]] = None,
    ) -> "SelectorSubscription[S, U]":
        """Create a selector over this container.

        The container keeps track of the selector and disposes it along
        with itself. On a disposed container the selector comes back
        already disposed.
        """
        from .selector import SelectorSubscription

        selector = SelectorSubscription(self, projector, comparator)
        if self._disposed:
            logger.debug(f"{self.name}: select after dispose, selector returned disposed")
            selector.dispose()
            return selector
        self._selectors.append(selector)
        return selector

    def view(self) -> "ReadOnlyContainer[S]":
        """Read-only facade for consumers."""
        return ReadOnlyContainer(self)

    def _forget_selector(self, selector: "SelectorSubscription[S, Any]") -> None:
        if selector in self._selectors:
            self._selectors.remove(selector)

    def _notify(self) -> None:
        # Snapshot so listeners may (un)subscribe while being notified
        snapshot = list(self._listeners.items())
        for token, listener in snapshot:
            try:
                listener()
            except Exception as exc:
                listener_name = getattr(listener, "__name__", str(listener))
                logger.exception(
                    f"{self.name}: listener '{listener_name}' ({token!r}) failed",
                    exc_info=exc,
                )

    # --- Teardown ---

    def dispose(self) -> None:
        """Release every listener and selector. Safe to call twice."""
        if self._disposed:
            return
        self._disposed = True
        selectors = list(self._selectors)
        self._selectors.clear()
        for selector in selectors:
            selector.dispose()
        self._listeners.clear()
        logger.debug(f"{self.name}: disposed")

    def __repr__(self) -> str:
        return f"ObservableContainer({self.name}: {self._value!r})"


class ReadOnlyContainer(Generic[S]):
    """Consumer-facing view of a container: read and subscribe, never write."""

    __slots__ = ("_source",)

    def __init__(self, source: ObservableContainer[S]) -> None:
        self._source = source

    @property
    def name(self) -> str:
        return self._source.name

    @property
    def disposed(self) -> bool:
        return self._source.disposed

    def get(self) -> S:
        return self._source.get()

    @property
    def value(self) -> S:
        return self._source.get()

    def subscribe(self, listener: Listener) -> SubscriptionToken:
        return self._source.subscribe(listener)

    def unsubscribe(self, token: SubscriptionToken) -> None:
        self._source.unsubscribe(token)

    def select(
        self,
        projector: Callable[[S], U],
        comparator: Optional[Callable[[U, U], bool]] = None,
    ) -> "SelectorSubscription[S, U]":
        return self._source.select(projector, comparator)

    def __repr__(self) -> str:
        return f"ReadOnlyContainer({self._source.name}: {self._source.get()!r})"
