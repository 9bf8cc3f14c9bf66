"""Rich renderers for the demo screens.

Renderers are pure: they read a state value and return a rich renderable.
The user screen folds the lifecycle state, so every variant has exactly one
view.
"""

from __future__ import annotations

from typing import Optional

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.spinner import Spinner
from rich.text import Text

from viewstate.screens.ui import theme
from viewstate.shared.core.lifecycle import LifecycleState
from viewstate.shared.domain.models import CounterState, InfoErrorModel, UserModel


def _user_line(user: Optional[UserModel]) -> Text:
    name = user.name if user is not None else None
    return Text(f"User: {name}", style=theme.TEAL_PRIMARY)


def render_user_state(state: LifecycleState) -> RenderableType:
    """Map each lifecycle variant to its view."""
    return state.fold(
        initial=lambda: Text(""),
        loading=lambda: Spinner("dots", text=Text("Loading...", style=theme.CYAN_PRIMARY)),
        success=_user_line,
        error=lambda message: Text(f"Error: {message}", style=theme.RED_PRIMARY),
    )


def render_user_screen(
    state: LifecycleState,
    title: str = "User Info",
    notice: Optional[InfoErrorModel] = None,
) -> RenderableType:
    body = [render_user_state(state)]
    if notice is not None:
        body.append(render_notice(notice))
    return Panel(Group(*body), title=title, border_style=theme.TEXT_MUTED)


def render_notice(notice: InfoErrorModel) -> RenderableType:
    """Transient notice shown after a refresh (green on success, red otherwise)."""
    color = theme.NOTICE_SUCCESS if notice.is_success else theme.NOTICE_ERROR
    content = Group(
        Text(notice.title or "", style="bold white"),
        Text(notice.description or "", style="white"),
    )
    return Panel(content, style=f"on {color}", expand=False)


def render_number(value: int, background: str) -> RenderableType:
    return Panel(Text(str(value), justify="center"), style=f"on {background}", expand=False)


def render_counter_screen(
    state: CounterState,
    number1: int,
    number2: int,
    title: str = "Counter with selector",
) -> RenderableType:
    """Counter screen: both numbers from the full state, then one panel per selector."""
    return Panel(
        Group(
            Text("Full state", style=theme.TEXT_MUTED),
            render_number(state.number1, theme.NUMBER1_BG),
            render_number(state.number2, theme.NUMBER2_BG),
            Text("Selectors", style=theme.TEXT_MUTED),
            render_number(number1, theme.NUMBER1_BG),
            render_number(number2, theme.NUMBER2_BG),
        ),
        title=title,
        border_style=theme.TEXT_MUTED,
    )
