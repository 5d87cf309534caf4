"""Tags used to group metamodel items."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from cognitive.attr_def import _as_dict, _field, _optional
from cognitive.ids import Id
from cognitive.item import Item, ItemType


@dataclass
class Tag(Item):
    """A named tag with an optional description."""

    id: Id = field(default_factory=Id)
    name: str = ""
    description: Optional[str] = None

    def item_type(self) -> ItemType:
        return ItemType.TAG

    def to_dict(self) -> dict:
        return _as_dict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Tag:
        return cls(
            id=Id(data["id"]),
            name=_field(data, "name", str),
            description=_optional(data, "description", str),
        )