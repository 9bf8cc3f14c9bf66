"""Orchestrator: drives a lifecycle state container from an async fetch.

The orchestrator owns one observable container and is its only writer.
``load()`` publishes Loading, awaits the injected fetch, and folds the
Result into Success or Error. Consumers get read and subscribe access only.
"""

from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable, Generic, Optional, TypeVar

from .lifecycle import Initial, LifecycleEvent, LifecycleState, transition
from .observable import Listener, ObservableContainer, ReadOnlyContainer, SubscriptionToken
from .result import Err, Result
from .selector import SelectorSubscription

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")

Fetch = Callable[[], Awaitable[Result]]


class Orchestrator(Generic[T]):
    """Owns a ``LifecycleState`` container and maps fetch results into it.

    Overlapping ``load()`` calls are not cancelled or de-duplicated: each
    publishes Loading and then its own resolution, and whichever resolves
    last determines the final state.
    """

    def __init__(
        self,
        fetch: Fetch,
        *,
        name: str = "state",
        initial_state: Optional[LifecycleState] = None,
        log_changes: bool = True,
    ) -> None:
        """Initialize the orchestrator.

        Args:
            fetch: Async callable returning ``Ok(value)`` or ``Err(error)``
            name: Label used in logs
            initial_state: Starting state (defaults to ``Initial``)
            log_changes: Log every published state at DEBUG level
        """
        self.name = name
        self._fetch = fetch
        self._container: ObservableContainer[LifecycleState] = ObservableContainer(
            initial_state or Initial(),
            name=name,
            log_changes=log_changes,
        )

    # --- Consumer surface ---

    @property
    def state(self) -> LifecycleState:
        return self._container.get()

    @property
    def container(self) -> ReadOnlyContainer[LifecycleState]:
        return self._container.view()

    @property
    def disposed(self) -> bool:
        return self._container.disposed

    def subscribe(self, listener: Listener) -> SubscriptionToken:
        return self._container.subscribe(listener)

    def unsubscribe(self, token: SubscriptionToken) -> None:
        self._container.unsubscribe(token)

    def select(
        self,
        projector: Callable[[LifecycleState], U],
        comparator: Optional[Callable[[U, U], bool]] = None,
    ) -> SelectorSubscription[LifecycleState, U]:
        return self._container.select(projector, comparator)

    # --- Transitions ---

    async def load(self) -> LifecycleState:
        """Fetch once and publish Loading followed by Success or Error.

        Failures never escape: an ``Err`` result, or an exception raised by a
        misbehaving fetch, becomes an ``Error`` state.

        After ``dispose()`` the fetch is not issued at all.

        Returns:
            The state held by the container once this call has finished
        """
        if self.disposed:
            logger.debug(f"{self.name}: load after dispose ignored")
            return self.state

        self._apply(LifecycleEvent.LOAD)

        result = await self._run_fetch()

        if self.disposed:
            logger.debug(f"{self.name}: discarding late result after dispose: {result!r}")
            return self.state

        result.fold(
            on_success=lambda value: self._apply(LifecycleEvent.RESOLVE_OK, value),
            on_error=lambda failure: self._apply(LifecycleEvent.RESOLVE_ERR, failure),
        )
        return self.state

    async def _run_fetch(self) -> Result:
        try:
            return await self._fetch()
        except Exception as exc:
            logger.exception(f"{self.name}: fetch raised instead of returning Err", exc_info=exc)
            return Err(error=exc)

    def _apply(self, event: LifecycleEvent, payload: Any = None) -> bool:
        new_state = transition(self._container.get(), event, payload)
        return self._container.set(new_state)

    # --- Teardown ---

    def dispose(self) -> None:
        """Dispose the container and everything subscribed to it."""
        self._container.dispose()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name}: {self.state!r})"
