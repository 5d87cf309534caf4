"""Entity link definitions and their cardinality."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from cognitive.attr_def import (
    AttributeDef,
    _as_dict,
    _field,
    _list_field,
    _optional,
    _VariantEnum,
)
from cognitive.ids import Id
from cognitive.item import Item, ItemType


class Cardinality(_VariantEnum):
    """The cardinality of a link definition; its value is the short notation."""

    ONE_TO_ONE = "1:1"
    ONE_TO_MANY = "1:M"
    MANY_TO_MANY = "M:M"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: str) -> Cardinality:
        """Return the cardinality for its notation; unknown notations map to ONE_TO_ONE."""
        return cls._lenient(value, cls.ONE_TO_ONE)

    @classmethod
    def select_variants(cls) -> Dict[Id, str]:
        """All cardinalities, keyed by an id made of their notation, in declaration order."""
        return {Id(str(member)): str(member) for member in cls}


@dataclass
class EntityLinkDef(Item):
    """The definition of a link between entities of two entity definitions."""

    id: Id = field(default_factory=Id)
    name: str = ""
    description: Optional[str] = None
    cardinality: Cardinality = Cardinality.ONE_TO_ONE
    source_entity_def_id: Id = field(default_factory=Id)
    target_entity_def_id: Id = field(default_factory=Id)
    attributes: Optional[List[AttributeDef]] = None

    def item_type(self) -> ItemType:
        return ItemType.ENTITY_LINK_DEF

    def to_dict(self) -> dict:
        return _as_dict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> EntityLinkDef:
        return cls(
            id=Id(data["id"]),
            name=_field(data, "name", str),
            description=_optional(data, "description", str),
            cardinality=Cardinality.from_variant_name(data["cardinality"]),
            source_entity_def_id=Id(data["source_entity_def_id"]),
            target_entity_def_id=Id(data["target_entity_def_id"]),
            attributes=_list_field(
                data, "attributes", AttributeDef.from_dict, default=None
            ),
        )