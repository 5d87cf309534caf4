"""Entity instances."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Mapping, Tuple

from cognitive.attr_def import AttributeValueType, _as_dict, _field, _list_field
from cognitive.attributes import (
    BooleanAttribute,
    IntegerAttribute,
    SmallintAttribute,
    TextAttribute,
)
from cognitive.ids import Id
from cognitive.item import Item, ItemType


def _order_entry(item: Any) -> Tuple[AttributeValueType, Id]:
    if not isinstance(item, (list, tuple)):
        raise TypeError("an 'attributes_order' entry must be a pair")
    value_type, attr_id = item
    return AttributeValueType.from_variant_name(value_type), Id(attr_id)


_OPTIONAL_LISTS = (
    ("attributes_order", _order_entry),
    ("text_attributes", TextAttribute.from_dict),
    ("smallint_attributes", SmallintAttribute.from_dict),
    ("int_attributes", IntegerAttribute.from_dict),
    ("boolean_attributes", BooleanAttribute.from_dict),
)


@dataclass
class Entity(Item):
    """An instance of an entity definition, with its attribute values."""

    id: Id = field(default_factory=Id)
    kind: str = ""
    def_id: Id = field(default_factory=Id)
    attributes_order: List[Tuple[AttributeValueType, Id]] = field(default_factory=list)
    text_attributes: List[TextAttribute] = field(default_factory=list)
    smallint_attributes: List[SmallintAttribute] = field(default_factory=list)
    int_attributes: List[IntegerAttribute] = field(default_factory=list)
    boolean_attributes: List[BooleanAttribute] = field(default_factory=list)
    listing_attr_def_id: Id = field(default_factory=Id)
    listing_attr_name: str = ""
    listing_attr_value: str = ""

    def item_type(self) -> ItemType:
        return ItemType.ENTITY

    def to_dict(self) -> dict:
        return _as_dict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Entity:
        lists = {
            key: _list_field(data, key, parse, default=[])
            for key, parse in _OPTIONAL_LISTS
        }
        return cls(
            id=Id(data["id"]),
            kind=_field(data, "kind", str),
            def_id=Id(data["def_id"]),
            listing_attr_def_id=Id(data["listing_attr_def_id"]),
            listing_attr_name=_field(data, "listing_attr_name", str),
            listing_attr_value=_field(data, "listing_attr_value", str),
            **lists,
        )