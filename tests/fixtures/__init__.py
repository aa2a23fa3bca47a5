"""Test fixtures for less-compiler.

Provides a fake compilation service and test utilities.
"""

from .fake_service import FakeService

__all__ = [
    "FakeService",
]
