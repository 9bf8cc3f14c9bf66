"""ViewState - console demo entry point.

Runs the user screen (load + refresh with a notice) and/or the counter
screen (selectors watching one number each) in the terminal with rich.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Dict, Optional

from dotenv import load_dotenv
from rich.console import Console
from rich.live import Live
from rich.table import Table

from viewstate.screens.state import Store
from viewstate.screens.ui.render import render_counter_screen, render_user_screen
from viewstate.shared.core.configuration import SystemConfig, ValidationLevel, get_config_manager
from viewstate.shared.core.logging_config import configure_logging
from viewstate.shared.domain.models import InfoErrorModel

logger = logging.getLogger(__name__)


async def run_user_screen(store: Store, config: SystemConfig, console: Console) -> InfoErrorModel:
    """Load the user, then refresh it and show the resulting notice."""
    user = store.user
    notice: Optional[InfoErrorModel] = None

    with Live(render_user_screen(user.state, config.ui.user_title), console=console, refresh_per_second=8) as live:
        def redraw() -> None:
            live.update(render_user_screen(user.state, config.ui.user_title, notice))

        token = user.subscribe(redraw)
        try:
            await user.load()
            notice = await user.refresh()
            redraw()
            await asyncio.sleep(config.ui.notice_seconds)
        finally:
            user.unsubscribe(token)

    return notice


async def run_counter_screen(
    store: Store,
    config: SystemConfig,
    console: Console,
    step_delay: float = 0.5,
) -> Dict[str, int]:
    """Press each counter button once and count what every consumer saw.

    Returns:
        Number of updates received by the full-state listener and by each
        selector
    """
    counter = store.counter
    number1 = counter.select(lambda s: s.number1)
    number2 = counter.select(lambda s: s.number2)
    updates = {"state": 0, "number1": 0, "number2": 0}

    def count(key: str):
        def listener() -> None:
            updates[key] += 1
        listener.__name__ = f"count_{key}"
        return listener

    def snapshot():
        return render_counter_screen(counter.state, number1.current(), number2.current(), config.ui.counter_title)

    with Live(snapshot(), console=console, refresh_per_second=8) as live:
        tokens = [
            counter.subscribe(lambda: live.update(snapshot())),
            counter.subscribe(count("state")),
        ]
        number1.subscribe(count("number1"))
        number2.subscribe(count("number2"))
        try:
            for label, action in (
                ("all", counter.add),
                ("1", counter.add_to_1),
                ("2", counter.add_to_2),
                ("clear", counter.clear),
            ):
                logger.info(f"Counter button '{label}' pressed")
                action()
                await asyncio.sleep(step_delay)
        finally:
            for token in tokens:
                counter.unsubscribe(token)
            number1.dispose()
            number2.dispose()

    table = Table(title="Updates received")
    table.add_column("Consumer")
    table.add_column("Updates", justify="right")
    for key, value in updates.items():
        table.add_row(key, str(value))
    console.print(table)
    return updates


async def main(screen: str, config: SystemConfig, console: Optional[Console] = None) -> None:
    console = console or Console()
    store = Store.from_config(config)
    try:
        if screen in ("user", "all"):
            await run_user_screen(store, config, console)
        if screen in ("counter", "all"):
            await run_counter_screen(store, config, console)
    finally:
        Store.reset()


def cli():
    """Command-line entry point."""
    import argparse

    parser = argparse.ArgumentParser(
        description="ViewState demo screens",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--screen",
        choices=["user", "counter", "all"],
        default="all",
        help="Which screen to run (default: all)",
    )
    parser.add_argument("--fail", action="store_true", help="Make the user fetch fail")
    parser.add_argument("--delay", type=float, default=None, help="Simulated fetch delay in seconds")
    parser.add_argument("--config-dir", type=Path, default=None, help="Directory holding the YAML config files")
    parser.add_argument("--log-file", type=Path, default=None, help="Write a rotating debug log here")
    args = parser.parse_args()

    load_dotenv()

    config = get_config_manager(args.config_dir).get_config(ValidationLevel.LENIENT)
    repository_overrides = {}
    if args.fail:
        repository_overrides["fail"] = True
    if args.delay is not None:
        repository_overrides["delay_seconds"] = args.delay
    if repository_overrides:
        config = config.model_copy(
            update={"repository": config.repository.model_copy(update=repository_overrides)}
        )

    configure_logging(config.logging.level, args.log_file or config.logging.log_file)

    try:
        asyncio.run(main(args.screen, config))
    except KeyboardInterrupt:
        logger.info("Interrupted by user")


if __name__ == "__main__":
    cli()
