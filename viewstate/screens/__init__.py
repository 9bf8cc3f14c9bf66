"""Demo screens built on the shared state machinery.

Architecture:
- controllers: view models owning the state containers
- state: Store, the service locator handing view models to the UI
- ui: rich renderers, one per screen
"""
