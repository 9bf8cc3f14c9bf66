"""Console rendering for the demo screens."""

from .render import render_counter_screen, render_notice, render_user_screen, render_user_state

__all__ = ["render_user_state", "render_user_screen", "render_notice", "render_counter_screen"]
