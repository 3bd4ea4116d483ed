"""
Data access layer.

Repositories own the stored items and expose CRUD primitives.  The
service layer depends only on the ``ItemRepository`` interface, so the
in-memory backend used here can be swapped for a database-backed one.
"""

from .base import ItemRepository
from .memory import SEED_ITEMS, InMemoryItemRepository

__all__ = ["ItemRepository", "InMemoryItemRepository", "SEED_ITEMS"]
