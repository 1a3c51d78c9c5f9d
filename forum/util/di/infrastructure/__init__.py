"""Infrastructure component providers.

The production subclasses are imported here so that ``get_provider``
finds them through ``__subclasses__()``.
"""

from .persistence import PersistenceProvider, ProdPersistenceProvider
from .pusher import ProdPusherProvider, PusherProvider

__all__ = [
    "PersistenceProvider",
    "ProdPersistenceProvider",
    "ProdPusherProvider",
    "PusherProvider",
]
