"""
Item endpoints for API v1.

These routes expose CRUD operations on the in-memory items
collection.  Request bodies are validated by the ``ItemCreate`` and
``ItemUpdate`` schemas before a handler runs; a failing body is
answered with 400 by the application's validation handler.  Response
models document the returned shapes in the OpenAPI schema.
"""

from fastapi import APIRouter, Depends, Request, status

from items_api.app.controllers.item_controller import ItemController
from items_api.app.schemas.item import ItemCreate, ItemList, ItemRead, ItemUpdate

router = APIRouter()


def get_item_controller(request: Request) -> ItemController:
    """Return the controller built for this application by ``create_app``."""
    return request.app.state.item_controller


@router.post(
    "/",
    response_model=ItemRead,
    status_code=status.HTTP_201_CREATED,
    summary="Add new item",
)
async def add_item(
    item_in: ItemCreate,
    controller: ItemController = Depends(get_item_controller),
) -> ItemRead:
    """Create a new item.

    ``name``, ``quality`` and ``value`` are required; ``quality`` must be
    one of ``common``, ``uncommon``, ``rare`` or ``legendary`` and
    ``value`` must not be negative.  The response carries the new id.
    """
    return await controller.add_item(item_in)


@router.get("/", response_model=ItemList, summary="Get all items")
async def get_all_items(controller: ItemController = Depends(get_item_controller)) -> ItemList:
    """Return every item in insertion order.

    Answers 404 when the collection is empty, unless the application
    was configured with ``EMPTY_LIST_IS_ERROR=false``.
    """
    return await controller.get_all_items()


@router.get("/{item_id}", response_model=ItemRead, summary="Get item by id")
async def get_item_by_id(
    item_id: str,
    controller: ItemController = Depends(get_item_controller),
) -> ItemRead:
    """Retrieve a single item.  Raises 404 if the item is not found."""
    return await controller.get_item_by_id(item_id)


@router.put("/{item_id}", response_model=ItemRead, summary="Update an item with specific id")
async def update_item_by_id(
    item_id: str,
    item_in: ItemUpdate,
    controller: ItemController = Depends(get_item_controller),
) -> ItemRead:
    """Update any subset of ``name``, ``quality`` and ``value``.

    Omitted fields keep their values.  A negative ``value`` is ignored
    and the stored value is returned unchanged.  Raises 404 if the item
    is not found.
    """
    return await controller.update_item_by_id(item_id, item_in)


@router.delete("/{item_id}", response_model=ItemRead, summary="Delete an item by its id")
async def delete_item_by_id(
    item_id: str,
    controller: ItemController = Depends(get_item_controller),
) -> ItemRead:
    """Delete an item and return the removed record.  Raises 404 if missing."""
    return await controller.delete_item_by_id(item_id)
