"""
HTTP controller for the items resource.

The controller turns validated request payloads into service calls
and projects the returned domain records into ``ItemRead`` transfer
objects.  Status codes are declared on the routes in
``api/v1/endpoints/items.py``.  ``ItemNotFoundError`` is not caught
here; the application-wide handler maps it to 404.
"""

from __future__ import annotations

import logging

from items_api.app.models.item import IdentifiedItem
from items_api.app.schemas.item import ItemCreate, ItemList, ItemRead, ItemUpdate
from items_api.app.services.item_service import ItemService

logger = logging.getLogger(__name__)


class ItemController:
    """Request handlers for ``/api/v1/items``."""

    def __init__(self, service: ItemService) -> None:
        self._service = service

    @staticmethod
    def _to_dto(record: IdentifiedItem) -> ItemRead:
        return ItemRead.model_validate(record)

    async def add_item(self, payload: ItemCreate) -> ItemRead:
        """Create an item.

        Route: ``POST /api/v1/items`` (201).
        """
        created = await self._service.add_item(payload.name, payload.quality, payload.value)
        return self._to_dto(created)

    async def get_all_items(self) -> ItemList:
        """List all items as ``{"items": [...]}``.

        Route: ``GET /api/v1/items``.
        """
        records = await self._service.get_all_items()
        return ItemList(items=[self._to_dto(record) for record in records])

    async def get_item_by_id(self, item_id: str) -> ItemRead:
        record = await self._service.get_item_by_id(item_id)
        return self._to_dto(record)

    async def update_item_by_id(self, item_id: str, payload: ItemUpdate) -> ItemRead:
        """Apply a partial update.

        Route: ``PUT /api/v1/items/{item_id}``.  Only fields present in
        the body are forwarded; an explicit ``null`` counts as absent.
        """
        fields = payload.model_dump(exclude_unset=True)
        logger.debug("Updating item %s with fields %s", item_id, sorted(fields))
        record = await self._service.update_item_by_id(
            item_id,
            name=fields.get("name"),
            quality=fields.get("quality"),
            value=fields.get("value"),
        )
        return self._to_dto(record)

    async def delete_item_by_id(self, item_id: str) -> ItemRead:
        """Delete an item and return it as it was before deletion.

        Route: ``DELETE /api/v1/items/{item_id}``.
        """
        removed = await self._service.delete_item_by_id(item_id)
        return self._to_dto(removed)
