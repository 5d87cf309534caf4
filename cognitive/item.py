"""Kinds of items in the metamodel."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum


class ItemType(Enum):
    """The type of an item; its value is the short code used for storage."""

    TAG = "tag"
    ATTRIBUTE_DEF = "atd"
    ENTITY_DEF = "end"
    ENTITY_LINK_DEF = "eld"
    ENTITY = "eni"
    ENTITY_LINK = "enl"
    TEXT_ATTRIBUTE = "tea"
    SMALLINT_ATTRIBUTE = "sma"
    INTEGER_ATTRIBUTE = "ina"
    BOOLEAN_ATTRIBUTE = "boa"
    UNKNOWN = "unk"

    @classmethod
    def from_code(cls, code: str) -> ItemType:
        """Return the type for ``code``; unrecognised codes map to TAG."""
        try:
            return cls(code)
        except ValueError:
            return cls.TAG


class Item(ABC):
    """Anything that can report its item type."""

    @abstractmethod
    def item_type(self) -> ItemType:
        """The type of this item."""