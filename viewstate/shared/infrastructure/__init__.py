"""
Shared Infrastructure Module
=============================

Data sources feeding the screen orchestrators.
"""

from viewstate.shared.infrastructure.repository import MockUserRepository, UserRepository

__all__ = ["UserRepository", "MockUserRepository"]
