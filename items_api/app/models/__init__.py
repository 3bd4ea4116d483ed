"""
Domain models.

These dataclasses describe the entities the data and service layers
work with.  API payloads are defined separately in ``schemas``.
"""

from .item import IdentifiedItem, Item, ItemQuality

__all__ = ["IdentifiedItem", "Item", "ItemQuality"]
