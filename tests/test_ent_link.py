import pytest

from cognitive.attributes import (
    BooleanAttribute,
    IntegerAttribute,
    SmallintAttribute,
    TextAttribute,
)
from cognitive.ent_link import EntityLink
from cognitive.ids import Id
from cognitive.item import ItemType

_OWNER = Id("l1")

_ATTRIBUTES = {
    "text_attributes": TextAttribute(Id("i1"), "role", "dev", Id("a1"), _OWNER),
    "smallint_attributes": SmallintAttribute(Id("i2"), "level", 2, Id("a2"), _OWNER),
    "int_attributes": IntegerAttribute(Id("i3"), "years", 5, Id("a3"), _OWNER),
    "boolean_attributes": BooleanAttribute(Id("i4"), "remote", False, Id("a4"), _OWNER),
}


def _sample() -> EntityLink:
    return EntityLink(
        id=_OWNER,
        kind="works for",
        def_id=Id("ld"),
        source_entity_id=Id("s"),
        target_entity_id=Id("t"),
        **{key: [attr] for key, attr in _ATTRIBUTES.items()},
    )


def test_defaults_leave_id_and_kind_empty():
    link = EntityLink(def_id=Id("d"), source_entity_id=Id("s"), target_entity_id=Id("t"))
    assert link.id.is_empty()
    assert link.kind == ""
    assert [getattr(link, key) for key in _ATTRIBUTES] == [[], [], [], []]


def test_item_type():
    assert _sample().item_type() is ItemType.ENTITY_LINK


def test_round_trip():
    link = _sample()
    assert EntityLink.from_dict(link.to_dict()) == link


def test_to_dict_endpoints():
    data = _sample().to_dict()
    assert (data["source_entity_id"], data["target_entity_id"]) == ("s", "t")
    assert data["boolean_attributes"] == [_ATTRIBUTES["boolean_attributes"].to_dict()]


@pytest.mark.parametrize("key", list(_ATTRIBUTES))
def test_missing_list_defaults_to_empty(key):
    data = _sample().to_dict()
    del data[key]
    link = EntityLink.from_dict(data)
    assert getattr(link, key) == []
    assert link.target_entity_id == Id("t")


def test_missing_target_raises():
    data = _sample().to_dict()
    del data["target_entity_id"]
    with pytest.raises(KeyError):
        EntityLink.from_dict(data)


def test_list_of_wrong_type_raises():
    data = dict(_sample().to_dict(), int_attributes={})
    with pytest.raises(TypeError):
        EntityLink.from_dict(data)