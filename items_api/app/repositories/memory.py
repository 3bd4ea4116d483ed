"""
In-memory implementation of ``ItemRepository``.

Items live in a plain Python list owned by the repository instance, so
every application (and every test) that builds its own repository gets
an isolated collection.  Lookups are linear scans; the collection is
expected to hold a few dozen records at most.  An ``id -> position``
index could be added without changing behaviour.

Nothing here awaits, so no two operations interleave on the event
loop and no locking is needed.  State is lost when the process exits.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from typing import Iterable, List, Optional

from items_api.app.core.exceptions import ItemNotFoundError
from items_api.app.models.item import IdentifiedItem, Item, ItemQuality
from items_api.app.repositories.base import ItemRepository

logger = logging.getLogger(__name__)


SEED_ITEMS = (
    IdentifiedItem(
        id="615a0e18-415c-41ba-9c51-3b403deec651",
        name="bronze sword",
        quality=ItemQuality.COMMON,
        value=10,
    ),
    IdentifiedItem(
        id="bebaf5f9-2cbe-4c84-a472-4bd11dadec79",
        name="Poseidon's Trident",
        quality=ItemQuality.LEGENDARY,
        value=1000,
    ),
    IdentifiedItem(
        id="eb425a54-9966-4b70-a64b-8020e3ce5995",
        name="greater health potion",
        quality=ItemQuality.UNCOMMON,
        value=100,
    ),
)


class InMemoryItemRepository(ItemRepository):
    """Item repository backed by a list.

    Parameters
    ----------
    seed : Iterable[IdentifiedItem]
        Records to load at construction time, e.g. ``SEED_ITEMS``.
        They are copied, so the caller's objects are never mutated.
    raise_on_empty : bool
        When true, ``list_all`` raises ``ItemNotFoundError`` on an
        empty collection; otherwise it returns an empty list.
    """

    def __init__(self, seed: Iterable[IdentifiedItem] = (), raise_on_empty: bool = True) -> None:
        self._items: List[IdentifiedItem] = [replace(record) for record in seed]
        self._raise_on_empty = raise_on_empty

    def __len__(self) -> int:
        return len(self._items)

    def _index_of(self, item_id: str) -> int:
        for index, record in enumerate(self._items):
            if record.id == item_id:
                return index
        raise ItemNotFoundError(item_id)

    def create(self, item: Item) -> IdentifiedItem:
        record = IdentifiedItem(
            id=str(uuid.uuid4()),
            name=item.name,
            quality=item.quality,
            value=item.value,
        )
        self._items.append(record)
        logger.info("Created item %s", record.id)
        return replace(record)

    def list_all(self) -> List[IdentifiedItem]:
        if not self._items and self._raise_on_empty:
            raise ItemNotFoundError()
        return [replace(record) for record in self._items]

    def get_by_id(self, item_id: str) -> IdentifiedItem:
        return replace(self._items[self._index_of(item_id)])

    def update_by_id(
        self,
        item_id: str,
        name: Optional[str] = None,
        quality: Optional[ItemQuality] = None,
        value: Optional[float] = None,
    ) -> IdentifiedItem:
        """Update the supplied fields of an item in place.

        A negative ``value`` is ignored and the stored value is kept;
        the update is not rejected.
        """
        record = self._items[self._index_of(item_id)]
        if name:
            record.name = name
        if quality is not None:
            record.quality = ItemQuality(quality)
        if value is not None:
            if value >= 0:
                record.value = value
            else:
                logger.warning("Ignoring negative value %s for item %s", value, item_id)
        logger.info("Updated item %s", item_id)
        return replace(record)

    def delete_by_id(self, item_id: str) -> IdentifiedItem:
        removed = self._items.pop(self._index_of(item_id))
        logger.info("Deleted item %s", item_id)
        return removed
