"""
Domain entities for the items resource.

``Item`` is what a client submits; ``IdentifiedItem`` is what the
repository stores, i.e. an ``Item`` plus the identifier minted at
creation time.  These are plain dataclasses, independent of the
Pydantic schemas used on the wire.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union


class ItemQuality(str, Enum):
    """Allowed quality grades of an item."""

    COMMON = "common"
    UNCOMMON = "uncommon"
    RARE = "rare"
    LEGENDARY = "legendary"


@dataclass
class Item:
    name: str
    quality: ItemQuality
    value: Union[int, float]


@dataclass
class IdentifiedItem(Item):
    """An item as held by a repository.

    ``id`` is declared last because dataclass inheritance appends
    fields; pass it by keyword.
    """

    id: str = ""
