"""
Testing helpers for code wired through the container.
"""

from .mocks import mocked

__all__ = ["mocked"]
