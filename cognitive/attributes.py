"""Attribute instances and the generic attribute interface."""

from __future__ import annotations

import datetime
import logging
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Mapping

from cognitive.attr_def import AttributeDef, AttributeValueType
from cognitive.ids import Id
from cognitive.item import Item, ItemType

logger = logging.getLogger(__name__)

_SMALLINT_RANGE = (-(2**15), 2**15 - 1)
_INT_RANGE = (-(2**31), 2**31 - 1)
_INTEGER_TEXT = re.compile(r"[+-]?[0-9]+")


class Attribute(ABC):
    """A named value whose content can be read as any supported type."""

    @abstractmethod
    def name(self) -> str: ...

    @abstractmethod
    def value_type(self) -> AttributeValueType: ...

    @abstractmethod
    def text_value(self) -> str: ...

    @abstractmethod
    def smallint_value(self) -> int: ...

    @abstractmethod
    def int_value(self) -> int: ...

    @abstractmethod
    def bigint_value(self) -> int: ...

    @abstractmethod
    def decimal_value(self) -> float: ...

    @abstractmethod
    def bool_value(self) -> bool: ...

    @abstractmethod
    def date_value(self) -> datetime.date: ...

    @abstractmethod
    def datetime_value(self) -> datetime.datetime: ...

    def __repr__(self) -> str:
        return f"Attribute(name={self.name()!r}, value_type={self.value_type()})"


def _parse_int(text: str, low: int, high: int) -> int:
    if not _INTEGER_TEXT.fullmatch(text):
        raise ValueError("invalid digit found in string")
    number = int(text)
    if number < low:
        raise ValueError("number too small to fit in target type")
    if number > high:
        raise ValueError("number too large to fit in target type")
    return number


def _parse_bool(text: str) -> bool:
    if text == "true":
        return True
    if text == "false":
        return False
    raise ValueError("provided string was not `true` or `false`")


def _default_from(attr_def: AttributeDef, parse, fallback, kind: str):
    if not attr_def.default_value.strip():
        return fallback
    try:
        return parse(attr_def.default_value)
    except ValueError as err:
        logger.error(
            "Failed to parse attr def id: '%s' default value: '%s' as %s. Reason: '%s'.",
            attr_def.id,
            attr_def.default_value,
            kind,
            err,
        )
        return fallback


def _checked_int(value: Any, low: int, high: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError("'value' must be an integer")
    if not low <= value <= high:
        raise ValueError(f"'value' {value} is outside [{low}, {high}]")
    return value


def _checked(value: Any, kind: type, key: str) -> Any:
    if not isinstance(value, kind):
        raise TypeError(f"{key!r} must be of type {kind.__name__}")
    return value


def _common_dict(attr) -> dict:
    return {
        "id": str(attr.id),
        "name": attr.name,
        "value": attr.value,
        "def_id": str(attr.def_id),
        "owner_id": str(attr.owner_id),
    }


def _common_fields(data: Mapping[str, Any]) -> dict:
    return {
        "id": Id(data["id"]),
        "name": _checked(data["name"], str, "name"),
        "def_id": Id(data["def_id"]),
        "owner_id": Id(data["owner_id"]),
    }


@dataclass
class TextAttribute(Item):
    """An attribute instance holding text."""

    id: Id
    name: str
    value: str
    def_id: Id
    owner_id: Id

    @classmethod
    def from_attr_def(cls, attr_def: AttributeDef) -> TextAttribute:
        """A new instance whose value is the definition's default value."""
        return cls(Id(), attr_def.name, attr_def.default_value, attr_def.id, Id())

    def item_type(self) -> ItemType:
        return ItemType.TEXT_ATTRIBUTE

    def to_dict(self) -> dict:
        return _common_dict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TextAttribute:
        return cls(value=_checked(data["value"], str, "value"), **_common_fields(data))


@dataclass
class SmallintAttribute(Item):
    """An attribute instance holding a 16-bit signed integer."""

    id: Id
    name: str
    value: int
    def_id: Id
    owner_id: Id

    @classmethod
    def from_attr_def(cls, attr_def: AttributeDef) -> SmallintAttribute:
        """A new instance whose value is the parsed default value, or 0."""
        value = _default_from(attr_def, lambda s: _parse_int(s, *_SMALLINT_RANGE), 0, "i16")
        return cls(Id(), attr_def.name, value, attr_def.id, Id())

    def item_type(self) -> ItemType:
        return ItemType.SMALLINT_ATTRIBUTE

    def to_dict(self) -> dict:
        return _common_dict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SmallintAttribute:
        return cls(value=_checked_int(data["value"], *_SMALLINT_RANGE), **_common_fields(data))


@dataclass
class IntegerAttribute(Item):
    """An attribute instance holding a 32-bit signed integer."""

    id: Id
    name: str
    value: int
    def_id: Id
    owner_id: Id

    @classmethod
    def from_attr_def(cls, attr_def: AttributeDef) -> IntegerAttribute:
        """A new instance whose value is the parsed default value, or 0."""
        value = _default_from(attr_def, lambda s: _parse_int(s, *_INT_RANGE), 0, "i32")
        return cls(Id(), attr_def.name, value, attr_def.id, Id())

    def item_type(self) -> ItemType:
        return ItemType.SMALLINT_ATTRIBUTE

    def to_dict(self) -> dict:
        return _common_dict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> IntegerAttribute:
        return cls(value=_checked_int(data["value"], *_INT_RANGE), **_common_fields(data))


@dataclass
class BooleanAttribute(Item):
    """An attribute instance holding a boolean."""

    id: Id
    name: str
    value: bool
    def_id: Id
    owner_id: Id

    @classmethod
    def from_attr_def(cls, attr_def: AttributeDef) -> BooleanAttribute:
        """A new instance whose value is the parsed default value, or False."""
        value = _default_from(attr_def, _parse_bool, False, "boolean")
        return cls(Id(), attr_def.name, value, attr_def.id, Id())

    def item_type(self) -> ItemType:
        return ItemType.BOOLEAN_ATTRIBUTE

    def to_dict(self) -> dict:
        return _common_dict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> BooleanAttribute:
        return cls(value=_checked(data["value"], bool, "value"), **_common_fields(data))