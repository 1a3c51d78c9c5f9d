"""Mock providers for testing."""

from .persistence import MockPersistenceProvider
from .pusher import MockPusherProvider
from .container import build_test_container

__all__ = [
    "MockPersistenceProvider",
    "MockPusherProvider",
    "build_test_container",
]
