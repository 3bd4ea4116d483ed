"""
Service layer for the items resource.

``ItemService`` sits between the HTTP controller and the data layer.
It currently adds no rules of its own: each method forwards to the
injected repository and returns, or propagates, its result unchanged.
Business rules such as computed fields or cross-entity checks belong
here when they are introduced.
"""

from __future__ import annotations

from typing import List, Optional

from items_api.app.models.item import IdentifiedItem, Item, ItemQuality
from items_api.app.repositories.base import ItemRepository


class ItemService:
    """Business operations on items, delegating storage to a repository."""

    def __init__(self, repository: ItemRepository) -> None:
        self._repository = repository

    async def add_item(self, name: str, quality: ItemQuality, value: float) -> IdentifiedItem:
        """Create an item from its fields and return it with its new id."""
        return self._repository.create(Item(name=name, quality=quality, value=value))

    async def get_all_items(self) -> List[IdentifiedItem]:
        return self._repository.list_all()

    async def get_item_by_id(self, item_id: str) -> IdentifiedItem:
        return self._repository.get_by_id(item_id)

    async def update_item_by_id(
        self,
        item_id: str,
        name: Optional[str] = None,
        quality: Optional[ItemQuality] = None,
        value: Optional[float] = None,
    ) -> IdentifiedItem:
        """Update the supplied fields of an item.

        Omitted fields keep their stored values; see
        ``InMemoryItemRepository.update_by_id`` for how a negative
        ``value`` is treated.
        """
        return self._repository.update_by_id(item_id, name=name, quality=quality, value=value)

    async def delete_item_by_id(self, item_id: str) -> IdentifiedItem:
        return self._repository.delete_by_id(item_id)
