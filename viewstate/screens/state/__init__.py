"""State access for the demo screens.

Architecture:
- Store: Service locator owning the user and counter view models
"""

from .store import Store

__all__ = ["Store"]
