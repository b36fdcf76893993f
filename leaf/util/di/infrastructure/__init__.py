"""Infrastructure providers."""

from .persistence import PersistenceProvider

# Importing the implementation registers it with ProviderBase
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
