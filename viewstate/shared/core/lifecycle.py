"""Lifecycle state of one asynchronous operation.

The state is a closed set of immutable variants:

- Initial: nothing requested yet
- Loading: a request is in flight
- Success: the request produced ``data`` (may be ``None``)
- Error: the request failed with ``message``

Variants compare structurally (variant + payload), which is what lets the
observable container suppress redundant notifications. Moving between
variants goes through ``transition()`` and its explicit table.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, ClassVar, Dict, Generic, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T")
R = TypeVar("R")


class InvalidTransitionError(ValueError):
    """Raised when an event is not allowed from the current lifecycle state."""


class LifecycleState(BaseModel):
    """Base of the lifecycle variants. Never instantiated directly."""

    model_config = ConfigDict(frozen=True)

    kind: ClassVar[str] = "unknown"

    def fold(
        self,
        *,
        initial: Callable[[], R],
        loading: Callable[[], R],
        success: Callable[[Any], R],
        error: Callable[[str], R],
    ) -> R:
        """Run exactly the handler matching this variant.

        Every handler is required, so a call site that forgets a variant
        fails immediately instead of falling through to a default.

        Args:
            initial: Called for ``Initial``
            loading: Called for ``Loading``
            success: Called with ``data`` for ``Success``
            error: Called with ``message`` for ``Error``

        Returns:
            Whatever the selected handler returns

        Raises:
            TypeError: If the state is not one of the four variants
        """
        match self:
            case Initial():
                return initial()
            case Loading():
                return loading()
            case Success(data=data):
                return success(data)
            case Error(message=message):
                return error(message)
        raise TypeError(f"Unhandled lifecycle state: {self!r}")


class Initial(LifecycleState):
    kind: ClassVar[str] = "initial"


class Loading(LifecycleState):
    kind: ClassVar[str] = "loading"


class Success(LifecycleState, Generic[T]):
    kind: ClassVar[str] = "success"

    data: Optional[T]


class Error(LifecycleState):
    kind: ClassVar[str] = "error"

    message: str


def initial() -> LifecycleState:
    return Initial()


def loading() -> LifecycleState:
    return Loading()


def success(data: Any) -> LifecycleState:
    return Success(data=data)


def error(message: str) -> LifecycleState:
    return Error(message=message)


class LifecycleEvent(str, Enum):
    """Events that drive the lifecycle state machine."""

    LOAD = "load"
    RESOLVE_OK = "resolve_ok"
    RESOLVE_ERR = "resolve_err"


# Resolving from Success/Error happens when overlapping loads race: the
# later resolution replaces the earlier one.
_TRANSITIONS: Dict[Tuple[Type[LifecycleState], LifecycleEvent], Callable[[Any], LifecycleState]] = {
    (Initial, LifecycleEvent.LOAD): lambda _: Loading(),
    (Loading, LifecycleEvent.LOAD): lambda _: Loading(),
    (Success, LifecycleEvent.LOAD): lambda _: Loading(),
    (Error, LifecycleEvent.LOAD): lambda _: Loading(),
    (Loading, LifecycleEvent.RESOLVE_OK): lambda data: Success(data=data),
    (Success, LifecycleEvent.RESOLVE_OK): lambda data: Success(data=data),
    (Error, LifecycleEvent.RESOLVE_OK): lambda data: Success(data=data),
    (Loading, LifecycleEvent.RESOLVE_ERR): lambda exc: Error(message=str(exc)),
    (Success, LifecycleEvent.RESOLVE_ERR): lambda exc: Error(message=str(exc)),
    (Error, LifecycleEvent.RESOLVE_ERR): lambda exc: Error(message=str(exc)),
}


def _variant_of(state: LifecycleState) -> Type[LifecycleState]:
    # Parametrized generics (Success[int]) report their unparametrized origin
    origin = state.__pydantic_generic_metadata__.get("origin")
    return origin or type(state)


def can_transition(state: LifecycleState, event: LifecycleEvent) -> bool:
    """Check whether ``event`` is allowed from ``state``."""
    return (_variant_of(state), event) in _TRANSITIONS


def transition(
    state: LifecycleState,
    event: LifecycleEvent,
    payload: Any = None,
) -> LifecycleState:
    """Compute the state that follows ``state`` when ``event`` happens.

    Args:
        state: Current lifecycle state
        event: Event to apply
        payload: Fetched data for RESOLVE_OK, the failure for RESOLVE_ERR

    Returns:
        A new immutable lifecycle state

    Raises:
        InvalidTransitionError: If the table has no entry for the pair
    """
    builder = _TRANSITIONS.get((_variant_of(state), event))
    if builder is None:
        raise InvalidTransitionError(
            f"Cannot apply '{event.value}' to lifecycle state '{state.kind}'"
        )
    return builder(payload)
