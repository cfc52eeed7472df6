"""Business stores."""

from venture_cms.business.store import BusinessStore
from venture_cms.business.stores.inmemory import InMemoryBusinessStore

__all__ = [
    "BusinessStore",
    "InMemoryBusinessStore",
]
