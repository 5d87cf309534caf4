"""Links between entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, List, Mapping, TypeVar

from cognitive.attributes import (
    BooleanAttribute,
    IntegerAttribute,
    SmallintAttribute,
    TextAttribute,
)
from cognitive.ids import Id
from cognitive.item import Item, ItemType

T = TypeVar("T")


def _list_of(data: Mapping[str, Any], key: str, parse: Callable[[Any], T]) -> List[T]:
    items = data.get(key, [])
    if not isinstance(items, list):
        raise TypeError(f"{key!r} must be a list")
    return [parse(item) for item in items]


@dataclass
class EntityLink(Item):
    """An instance of a link definition between a source and a target entity."""

    id: Id = field(default_factory=Id)
    kind: str = ""
    def_id: Id = field(default_factory=Id)
    source_entity_id: Id = field(default_factory=Id)
    target_entity_id: Id = field(default_factory=Id)
    text_attributes: List[TextAttribute] = field(default_factory=list)
    smallint_attributes: List[SmallintAttribute] = field(default_factory=list)
    int_attributes: List[IntegerAttribute] = field(default_factory=list)
    boolean_attributes: List[BooleanAttribute] = field(default_factory=list)

    def item_type(self) -> ItemType:
        return ItemType.ENTITY_LINK

    def to_dict(self) -> dict:
        return {
            "id": str(self.id),
            "kind": self.kind,
            "def_id": str(self.def_id),
            "source_entity_id": str(self.source_entity_id),
            "target_entity_id": str(self.target_entity_id),
            "text_attributes": [a.to_dict() for a in self.text_attributes],
            "smallint_attributes": [a.to_dict() for a in self.smallint_attributes],
            "int_attributes": [a.to_dict() for a in self.int_attributes],
            "boolean_attributes": [a.to_dict() for a in self.boolean_attributes],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> EntityLink:
        kind = data["kind"]
        if not isinstance(kind, str):
            raise TypeError("'kind' must be of type str")
        return cls(
            id=Id(data["id"]),
            kind=kind,
            def_id=Id(data["def_id"]),
            source_entity_id=Id(data["source_entity_id"]),
            target_entity_id=Id(data["target_entity_id"]),
            text_attributes=_list_of(data, "text_attributes", TextAttribute.from_dict),
            smallint_attributes=_list_of(
                data, "smallint_attributes", SmallintAttribute.from_dict
            ),
            int_attributes=_list_of(data, "int_attributes", IntegerAttribute.from_dict),
            boolean_attributes=_list_of(
                data, "boolean_attributes", BooleanAttribute.from_dict
            ),
        )