"""
Repository interface for the items resource.

``ItemRepository`` lists the CRUD primitives the service layer relies
on.  Any backend (in-memory list, SQL table, remote store) that
implements these methods can be injected into ``ItemService`` without
touching the service or controller.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from items_api.app.models.item import IdentifiedItem, Item, ItemQuality


class ItemRepository(ABC):
    """CRUD operations on a collection of items.

    Every method returning a record returns a copy; callers never hold
    a reference to the stored object.  Lookups by id raise
    ``ItemNotFoundError`` when no record matches.
    """

    @abstractmethod
    def create(self, item: Item) -> IdentifiedItem:
        """Store ``item`` under a freshly minted id and return it."""

    @abstractmethod
    def list_all(self) -> List[IdentifiedItem]:
        """Return every stored item in insertion order."""

    @abstractmethod
    def get_by_id(self, item_id: str) -> IdentifiedItem:
        """Return the item with ``item_id``."""

    @abstractmethod
    def update_by_id(
        self,
        item_id: str,
        name: Optional[str] = None,
        quality: Optional[ItemQuality] = None,
        value: Optional[float] = None,
    ) -> IdentifiedItem:
        """Overwrite the supplied fields of an item and return the result."""

    @abstractmethod
    def delete_by_id(self, item_id: str) -> IdentifiedItem:
        """Remove an item and return it as it was before removal."""
