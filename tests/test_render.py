"""Tests for the rich renderers and the demo screens."""

import pytest
from rich.console import Console
from rich.spinner import Spinner

from viewstate.screens.main import run_counter_screen, run_user_screen
from viewstate.screens.state import Store
from viewstate.screens.ui.render import (
    render_counter_screen,
    render_notice,
    render_user_screen,
    render_user_state,
)
from viewstate.shared.core.configuration import SystemConfig
from viewstate.shared.core.lifecycle import Error, Initial, Loading, Success
from viewstate.shared.domain.models import (
    USER_NOT_UPDATED_NOTICE,
    USER_UPDATED_NOTICE,
    CounterState,
    UserModel,
)


def _text(renderable) -> str:
    console = Console(record=True, width=80, color_system=None)
    console.print(renderable)
    return console.export_text()


def _fast_config(**repository) -> SystemConfig:
    return SystemConfig.model_validate({
        "repository": {"delay_seconds": 0, **repository},
        "ui": {"notice_seconds": 0},
    })


class TestUserRenderers:
    def test_initial_renders_nothing(self):
        assert _text(render_user_state(Initial())).strip() == ""

    def test_loading_renders_spinner(self):
        assert isinstance(render_user_state(Loading()), Spinner)

    def test_success_renders_user_name(self):
        assert "User: John Doe" in _text(render_user_state(Success(data=UserModel(name="John Doe"))))

    def test_success_without_user(self):
        assert "User: None" in _text(render_user_state(Success(data=None)))

    def test_error_renders_message(self):
        assert "Error: boom" in _text(render_user_state(Error(message="boom")))

    def test_screen_includes_title_and_notice(self):
        text = _text(render_user_screen(Error(message="boom"), "User Info", USER_NOT_UPDATED_NOTICE))
        assert "User Info" in text
        assert "User not updated." in text

    def test_notice_text(self):
        text = _text(render_notice(USER_UPDATED_NOTICE))
        assert "Success" in text
        assert "Updated user." in text


class TestCounterRenderer:
    def test_counter_screen_shows_numbers(self):
        text = _text(render_counter_screen(CounterState(number1=7, number2=9), 7, 9))
        assert "7" in text and "9" in text
        assert "Counter with selector" in text


class TestScreens:
    @pytest.mark.asyncio
    async def test_user_screen_returns_refresh_notice(self):
        config = _fast_config()
        store = Store.from_config(config)
        console = Console(record=True, width=80, color_system=None)

        notice = await run_user_screen(store, config, console)

        assert notice == USER_UPDATED_NOTICE
        assert store.user.state == Success(data=UserModel(name="John Doe"))

    @pytest.mark.asyncio
    async def test_user_screen_failure(self):
        config = _fast_config(fail=True, error_message="offline")
        store = Store.from_config(config)
        console = Console(record=True, width=80, color_system=None)

        notice = await run_user_screen(store, config, console)

        assert notice.title == "Error"
        assert store.user.state == Error(message="offline")

    @pytest.mark.asyncio
    async def test_counter_screen_counts_updates_per_consumer(self):
        config = _fast_config()
        store = Store.from_config(config)
        console = Console(record=True, width=80, color_system=None)

        updates = await run_counter_screen(store, config, console, step_delay=0)

        assert updates == {"state": 4, "number1": 3, "number2": 3}
        assert "Updates received" in console.export_text()
