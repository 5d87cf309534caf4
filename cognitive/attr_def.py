"""Attribute definitions, the value types of attributes and shared serialization helpers."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Callable, List, Mapping, Optional, TypeVar

from cognitive.ids import Id
from cognitive.item import Item, ItemType

T = TypeVar("T")

_REQUIRED = object()


class _VariantEnum(Enum):
    """An enum serialized by the CamelCase form of its member names."""

    @property
    def variant_name(self) -> str:
        """The name used for this member in serialized documents."""
        return "".join(part.capitalize() for part in self.name.split("_"))

    @classmethod
    def from_variant_name(cls, name: Any):
        """Return the member serialized as ``name``."""
        for member in cls:
            if member.variant_name == name:
                return member
        raise ValueError(f"unknown {cls.__name__}: {name!r}")

    @classmethod
    def _lenient(cls, value: Any, fallback):
        try:
            return cls(value)
        except ValueError:
            return fallback


def _plain(value: Any) -> Any:
    """Turn a model value into plain data."""
    if isinstance(value, Id):
        return str(value)
    if isinstance(value, _VariantEnum):
        return value.variant_name
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    if hasattr(value, "to_dict"):
        return value.to_dict()
    return value


def _as_dict(obj: Any) -> dict:
    """Serialize the fields of a dataclass instance, in declaration order."""
    return {f.name: _plain(getattr(obj, f.name)) for f in fields(obj)}


def _require(value: Any, kind: type, key: str) -> Any:
    if not isinstance(value, kind):
        raise TypeError(f"{key!r} must be of type {kind.__name__}")
    return value


def _field(data: Mapping[str, Any], key: str, kind: type) -> Any:
    return _require(data[key], kind, key)


def _optional(data: Mapping[str, Any], key: str, kind: type) -> Any:
    value = data.get(key)
    return None if value is None else _require(value, kind, key)


def _optional_id(data: Mapping[str, Any], key: str) -> Optional[Id]:
    value = data.get(key)
    return None if value is None else Id(value)


def _list_field(
    data: Mapping[str, Any],
    key: str,
    parse: Callable[[Any], T],
    default: Any = _REQUIRED,
) -> Optional[List[T]]:
    """Parse the list under ``key``; without a default the key is required."""
    items = data[key] if default is _REQUIRED else data.get(key, default)
    if items is None and default is None:
        return None
    if not isinstance(items, list):
        raise TypeError(f"{key!r} must be a list")
    return [parse(item) for item in items]


class AttributeValueType(_VariantEnum):
    """The type of an attribute's value; its value is the PostgreSQL type name."""

    TEXT = "text"
    SMALL_INTEGER = "smallint"
    INTEGER = "integer"
    BIG_INTEGER = "bigint"
    DECIMAL = "real"
    BOOLEAN = "boolean"
    DATE = "date"
    DATE_TIME = "timestamp"

    def label(self) -> str:
        """A human readable name."""
        return _LABELS[self]

    @classmethod
    def parse(cls, value: str) -> AttributeValueType:
        """Return the type for a PostgreSQL type name; unknown names map to TEXT."""
        return cls._lenient(value, cls.TEXT)

    def __str__(self) -> str:
        return self.value


_LABELS = {
    AttributeValueType.TEXT: "Text",
    AttributeValueType.SMALL_INTEGER: "Small Integer",
    AttributeValueType.INTEGER: "Integer",
    AttributeValueType.BIG_INTEGER: "Big Integer",
    AttributeValueType.DECIMAL: "Decimal",
    AttributeValueType.BOOLEAN: "Boolean",
    AttributeValueType.DATE: "Date",
    AttributeValueType.DATE_TIME: "DateTime",
}


@dataclass
class AttributeDef(Item):
    """The definition of an attribute."""

    id: Id = field(default_factory=Id)
    name: str = ""
    description: Optional[str] = None
    value_type: AttributeValueType = AttributeValueType.TEXT
    default_value: str = ""
    is_required: bool = False
    tag_id: Optional[Id] = None

    @classmethod
    def with_id_name(cls, id: Id, name: str) -> AttributeDef:
        """A text attribute definition with only an id and a name."""
        return cls(id=id, name=name)

    def item_type(self) -> ItemType:
        return ItemType.ATTRIBUTE_DEF

    def to_dict(self) -> dict:
        return _as_dict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> AttributeDef:
        return cls(
            id=Id(data["id"]),
            name=_field(data, "name", str),
            description=_optional(data, "description", str),
            value_type=AttributeValueType.from_variant_name(data["value_type"]),
            default_value=_field(data, "default_value", str),
            is_required=_field(data, "is_required", bool),
            tag_id=_optional_id(data, "tag_id"),
        )