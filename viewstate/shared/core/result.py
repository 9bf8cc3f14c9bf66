"""Result of an asynchronous operation: ``Ok(value)`` or ``Err(error)``.

Data sources hand a Result to the orchestrator instead of raising, so
mapping a fetch onto lifecycle state is total. A Result is consumed once
and never stored.
"""

from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable, ClassVar, Generic, Optional, Tuple, TypeVar

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

T = TypeVar("T")
E = TypeVar("E")
R = TypeVar("R")


class Result(BaseModel):
    """Base of the two result variants."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    is_ok: ClassVar[bool] = False

    def fold(
        self,
        *,
        on_success: Callable[[Any], R],
        on_error: Callable[[Any], R],
    ) -> R:
        """Run ``on_success`` for Ok and ``on_error`` for Err, never both."""
        match self:
            case Ok(value=value):
                return on_success(value)
            case Err(error=err_value):
                return on_error(err_value)
        raise TypeError(f"Unhandled result: {self!r}")


class Ok(Result, Generic[T]):
    is_ok: ClassVar[bool] = True

    value: Optional[T]


class Err(Result, Generic[E]):
    error: E


def ok(value: Any) -> Result:
    return Ok(value=value)


def err(error: Any) -> Result:
    return Err(error=error)


def result_from_record(record: Tuple[Any, Optional[BaseException]]) -> Result:
    """Adapt a ``(value, exception)`` pair into a Result.

    Repositories written in the pair style return ``(value, None)`` on
    success and ``(None, exc)`` on failure. The exception wins when both
    halves are set.
    """
    value, exc = record
    if exc is not None:
        return Err(error=exc)
    return Ok(value=value)


async def capture(operation: Callable[[], Awaitable[Any]]) -> Result:
    """Await ``operation()`` and wrap its outcome in a Result.

    For data sources that raise instead of returning a Result. Only
    ``Exception`` is captured; cancellation still propagates.
    """
    try:
        value = await operation()
    except Exception as exc:
        logger.debug(f"Captured failure from {getattr(operation, '__name__', operation)}: {exc!r}")
        return Err(error=exc)
    return Ok(value=value)
