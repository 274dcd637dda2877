"""Mock providers for testing."""

from .persistence import MockPersistenceProvider
from .session import MockSessionProvider
from .container import build_test_container

__all__ = [
    "MockPersistenceProvider",
    "MockSessionProvider",
    "build_test_container",
]
