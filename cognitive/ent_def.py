"""Entity definitions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional

from cognitive.attr_def import AttributeDef, _as_dict, _field, _list_field, _optional
from cognitive.ids import Id
from cognitive.item import Item, ItemType


@dataclass
class EntityDef(Item):
    """The definition of an entity: its name and the attributes it carries."""

    id: Id = field(default_factory=Id)
    name: str = ""
    description: Optional[str] = None
    attributes: List[AttributeDef] = field(default_factory=list)
    listing_attr_def_id: Id = field(default_factory=Id)

    @classmethod
    def with_attr_def_ids(
        cls,
        id: Id,
        name: str,
        description: Optional[str],
        attributes: Mapping[Id, str],
        listing_attr_def_id: Id,
    ) -> EntityDef:
        """Build a definition whose attributes are known only by id and name."""
        return cls(
            id=id,
            name=name,
            description=description,
            attributes=[
                AttributeDef.with_id_name(attr_id, attr_name)
                for attr_id, attr_name in attributes.items()
            ],
            listing_attr_def_id=listing_attr_def_id,
        )

    def item_type(self) -> ItemType:
        return ItemType.ENTITY_DEF

    def to_dict(self) -> dict:
        return _as_dict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> EntityDef:
        return cls(
            id=Id(data["id"]),
            name=_field(data, "name", str),
            description=_optional(data, "description", str),
            attributes=_list_field(data, "attributes", AttributeDef.from_dict),
            listing_attr_def_id=Id(data["listing_attr_def_id"]),
        )