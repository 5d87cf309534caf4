import datetime
import logging

import pytest

from cognitive.attr_def import AttributeDef, AttributeValueType
from cognitive.attributes import (
    Attribute,
    BooleanAttribute,
    IntegerAttribute,
    SmallintAttribute,
    TextAttribute,
)
from cognitive.ids import Id
from cognitive.item import ItemType

_SAMPLE_VALUES = [
    (TextAttribute, "v"),
    (SmallintAttribute, -12),
    (IntegerAttribute, 123456),
    (BooleanAttribute, True),
]

_VALUE_BY_CLASS = dict(_SAMPLE_VALUES)


def _sample(cls):
    return cls(Id("i"), "n", _VALUE_BY_CLASS[cls], Id("d"), Id("o"))


def _def(default_value):
    return AttributeDef(id=Id("def-1"), name="field", default_value=default_value)


def test_text_from_attr_def():
    attr = TextAttribute.from_attr_def(_def("hello"))
    assert attr == TextAttribute(Id(), "field", "hello", Id("def-1"), Id())


@pytest.mark.parametrize(
    "cls,text,expected,errors",
    [
        (SmallintAttribute, "42", 42, 0),
        (SmallintAttribute, "-32768", -32768, 0),
        (SmallintAttribute, "32767", 32767, 0),
        (SmallintAttribute, "+5", 5, 0),
        (SmallintAttribute, "", 0, 0),
        (SmallintAttribute, "   ", 0, 0),
        (SmallintAttribute, "abc", 0, 1),
        (SmallintAttribute, "40000", 0, 1),
        (SmallintAttribute, "-32769", 0, 1),
        (SmallintAttribute, " 7", 0, 1),
        (SmallintAttribute, "1.5", 0, 1),
        (SmallintAttribute, "1_0", 0, 1),
        (IntegerAttribute, "2147483647", 2147483647, 0),
        (IntegerAttribute, "-2147483648", -2147483648, 0),
        (IntegerAttribute, "40000", 40000, 0),
        (IntegerAttribute, "2147483648", 0, 1),
        (IntegerAttribute, "x", 0, 1),
        (IntegerAttribute, "-2147483649", 0, 1),
        (BooleanAttribute, "true", True, 0),
        (BooleanAttribute, "false", False, 0),
        (BooleanAttribute, "", False, 0),
        (BooleanAttribute, "True", False, 1),
        (BooleanAttribute, "yes", False, 1),
        (BooleanAttribute, "1", False, 1),
    ],
)
def test_default_value_parsing(cls, text, expected, errors, caplog):
    with caplog.at_level(logging.ERROR):
        value = cls.from_attr_def(_def(text)).value
    assert value == expected
    assert type(value) is type(expected)
    assert len([r for r in caplog.records if r.levelno == logging.ERROR]) == errors


def test_smallint_keeps_def_link():
    attr = SmallintAttribute.from_attr_def(_def("3"))
    assert attr.def_id == Id("def-1")
    assert attr.name == "field"
    assert attr.id.is_empty() and attr.owner_id.is_empty()


@pytest.mark.parametrize(
    "cls,expected",
    [
        (TextAttribute, ItemType.TEXT_ATTRIBUTE),
        (SmallintAttribute, ItemType.SMALLINT_ATTRIBUTE),
        (IntegerAttribute, ItemType.SMALLINT_ATTRIBUTE),
        (BooleanAttribute, ItemType.BOOLEAN_ATTRIBUTE),
    ],
)
def test_item_types(cls, expected):
    assert cls.from_attr_def(_def("")).item_type() is expected


@pytest.mark.parametrize("cls,value", _SAMPLE_VALUES)
def test_dict_round_trip(cls, value):
    attr = cls(Id("i"), "n", value, Id("d"), Id("o"))
    restored = cls.from_dict(attr.to_dict())
    assert restored == attr
    assert restored.value == value
    assert restored.def_id == Id("d")
    assert restored.owner_id == Id("o")


def test_to_dict_uses_plain_ids():
    attr = TextAttribute(Id("i"), "n", "v", Id("d"), Id("o"))
    data = attr.to_dict()
    assert data == {"id": "i", "name": "n", "value": "v", "def_id": "d", "owner_id": "o"}


@pytest.mark.parametrize(
    "cls,value,error",
    [
        (SmallintAttribute, 40000, ValueError),
        (IntegerAttribute, True, TypeError),
        (BooleanAttribute, "true", TypeError),
    ],
)
def test_from_dict_rejects_bad_value(cls, value, error):
    data = dict(_sample(cls).to_dict(), value=value)
    with pytest.raises(error):
        cls.from_dict(data)


def test_from_dict_missing_owner():
    data = _sample(TextAttribute).to_dict()
    del data["owner_id"]
    with pytest.raises(KeyError):
        TextAttribute.from_dict(data)


class _Size(Attribute):
    def name(self):
        return "size"

    def value_type(self):
        return AttributeValueType.INTEGER

    def text_value(self):
        return "7"

    def smallint_value(self):
        return 7

    def int_value(self):
        return 7

    def bigint_value(self):
        return 7

    def decimal_value(self):
        return 7.0

    def bool_value(self):
        return True

    def date_value(self):
        return datetime.date.min

    def datetime_value(self):
        return datetime.datetime.min.replace(tzinfo=datetime.timezone.utc)


def test_attribute_repr_shows_name_and_type():
    text = Attribute.__repr__(_Size())
    assert "size" in text
    assert AttributeValueType.__str__(AttributeValueType.INTEGER) in text


def test_attribute_is_abstract():
    with pytest.raises(TypeError):
        Attribute()