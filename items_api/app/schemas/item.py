"""
Pydantic models for item payloads.

``ItemCreate`` and ``ItemUpdate`` validate request bodies before a
handler runs; FastAPI rejects a failing body without calling the
controller.  ``ItemRead`` is the public transfer shape of a stored
item, and ``ItemList`` wraps a list of them.

Values are finite JSON numbers.  Integers stay integers (``10`` is
served back as ``10``, not ``10.0``); ``Infinity``, ``NaN`` and
overflowing literals such as ``1e400`` are rejected.
"""

from typing import Annotated, List, Optional, Union

from pydantic import BaseModel, Field, StrictInt

from items_api.app.models.item import ItemQuality

FiniteFloat = Annotated[float, Field(allow_inf_nan=False)]
NonNegativeInt = Annotated[int, Field(strict=True, ge=0)]
NonNegativeFloat = Annotated[float, Field(ge=0, allow_inf_nan=False)]

ItemValue = Union[StrictInt, FiniteFloat]
NonNegativeItemValue = Union[NonNegativeInt, NonNegativeFloat]


class ItemCreate(BaseModel):
    """Schema for creating an item."""

    name: str = Field(..., min_length=1, examples=["mithril sword"])
    quality: ItemQuality = Field(..., examples=["rare"])
    value: NonNegativeItemValue = Field(..., examples=[100])


class ItemUpdate(BaseModel):
    """Schema for updating an item.

    All fields are optional; only provided fields will be updated.
    ``value`` has no lower bound here: a negative value is accepted
    and the stored value is left unchanged.
    """

    name: Optional[str] = Field(None, min_length=1)
    quality: Optional[ItemQuality] = None
    value: Optional[ItemValue] = None


class ItemRead(BaseModel):
    """Schema for reading an item from the API."""

    id: str = Field(..., examples=["615a0e18-415c-41ba-9c51-3b403deec651"])
    name: str
    quality: ItemQuality
    value: Union[int, float]

    model_config = {
        "from_attributes": True,
    }


class ItemList(BaseModel):
    """Schema for the list of all items."""

    items: List[ItemRead]
