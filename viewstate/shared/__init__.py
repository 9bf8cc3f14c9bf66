"""
ViewState Shared Kernel
=======================

Reusable state machinery for the demo screens.

Architecture:
- core: lifecycle/result types, observable container, selectors, orchestrator
- infrastructure: data sources
- domain: models rendered by the screens
"""

__version__ = "1.0.0"
