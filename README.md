# cognitive

A small domain model with no dependencies. It describes knowledge as typed
entities and the links between them. It is plain Python data classes and
enums, and every part can be turned into JSON-ready dictionaries.

## Modules

- `cognitive.ids`
  - `Id` is a frozen wrapper around a string. The empty string means that no
    id has been assigned yet.
  - `Id.generate()` returns a random id of 10 URL-safe characters.
  - `Id.from_opt(value)` returns `None` when `value` is empty.
  - `Id.is_empty()` tells whether an id is empty.
  - `str(id)` gives the plain string.
- `cognitive.item`
  - `ItemType` lists the kinds of item. Each member's value is a
    three-letter code: `tag`, `atd`, `end`, `eld`, `eni`, `enl`, `tea`,
    `sma`, `ina`, `boa` and `unk`.
  - `ItemType.from_code(code)` reads a code back. An unknown code gives
    `ItemType.TAG`.
  - `Item` is the abstract base of everything that has an `item_type()`.
- `cognitive.attr_def`
  - `AttributeValueType` has the members `TEXT`, `SMALL_INTEGER`, `INTEGER`,
    `BIG_INTEGER`, `DECIMAL`, `BOOLEAN`, `DATE` and `DATE_TIME`. Each
    member's value, which is also its `str()`, is a PostgreSQL type name:
    `text`, `smallint`, `integer`, `bigint`, `real`, `boolean`, `date` and
    `timestamp`.
  - `AttributeValueType.parse(value)` maps an unknown name to `TEXT`.
  - `label()` gives a readable name such as `"Small Integer"`.
  - `AttributeDef` is the definition of an attribute. It holds an id, a name,
    an optional description, a value type, a default value, an `is_required`
    flag and an optional tag id. `AttributeDef.with_id_name(id, name)` builds
    a text definition with every other field at its default.
- `cognitive.attributes`
  - `Attribute` is an abstract interface for reading a named value as any of
    the supported types.
  - `TextAttribute`, `SmallintAttribute`, `IntegerAttribute` and
    `BooleanAttribute` are attribute instances. Each holds an id, a name, a
    value, a definition id and an owner id.
  - `from_attr_def(attr_def)` builds an instance from a definition. The new
    instance takes its name and definition id from the definition, and its
    value from the definition's default value:
    - a smallint must fit in a signed 16-bit integer;
    - an integer must fit in a signed 32-bit integer;
    - a boolean must be exactly `true` or `false`.

    A blank default gives `0` or `False`. A default that cannot be parsed is
    logged as an error through the `cognitive.attributes` logger and also
    gives `0` or `False`.
- `cognitive.tag`
  - `Tag` holds an id, a name and an optional description.
- `cognitive.ent_def`
  - `EntityDef` holds a name, a description, a list of attribute definitions
    and the id of the attribute that is used for listing.
  - `EntityDef.with_attr_def_ids(...)` builds the attribute list from a
    mapping of id to name.
- `cognitive.ent_link_def`
  - `Cardinality` has the members `ONE_TO_ONE`, `ONE_TO_MANY` and
    `MANY_TO_MANY`, written `1:1`, `1:M` and `M:M`.
  - `Cardinality.parse(value)` maps an unknown notation to `ONE_TO_ONE`.
  - `Cardinality.select_variants()` returns every member, in order, keyed by
    an `Id` made from its notation.
  - `EntityLinkDef` links a source entity definition to a target entity
    definition. Its list of attribute definitions is optional.
- `cognitive.entity`
  - `Entity` is an instance of an entity definition. It holds its attribute
    values grouped by type, an `attributes_order` list of
    `(AttributeValueType, Id)` pairs, and the listing attribute's definition
    id, name and value.
- `cognitive.ent_link`
  - `EntityLink` is a link between a source entity and a target entity,
    together with its own attributes.
- `cognitive.user`
  - `UserAccount` holds an id, an email, a username, a bio, an anonymous flag
    and a list of permissions. `UserAccount.guest()` returns an anonymous
    `"Guest"` account with a fresh id.
  - `UserEntry` adds the stored password hash and salt to an account.
    `to_account()` returns the account.
  - `UserPasswordSalt` holds only the password hash and salt.

## Serialization

Every model class except `UserEntry` and `UserPasswordSalt` has `to_dict()`
and a `from_dict(data)` class method.

In the dictionaries:

- ids are plain strings;
- enum members are written by their CamelCase variant name, for example
  `"SmallInteger"` or `"OneToMany"`;
- nested items become nested dictionaries.

`from_dict` raises the following errors:

- `KeyError` when a required key is missing;
- `TypeError` when a value has the wrong type;
- `ValueError` when a variant name is unknown, or when a smallint or integer
  value is out of range.

The attribute lists of `Entity` and `EntityLink` may be left out, and then
they are empty. `Entity.attributes_order` may also be left out. The
`attributes` of an `EntityLinkDef` may be left out or `null`, and then they
are `None`.

## Example

```python
from cognitive.attr_def import AttributeDef, AttributeValueType
from cognitive.attributes import IntegerAttribute
from cognitive.ids import Id

age = AttributeDef(
    id=Id("age"),
    name="Age",
    value_type=AttributeValueType.parse("integer"),
    default_value="18",
)
attr = IntegerAttribute.from_attr_def(age)
assert attr.value == 18
assert attr.def_id == Id("age")
assert str(AttributeValueType.INTEGER) == "integer"
assert AttributeValueType.INTEGER.label() == "Integer"
assert IntegerAttribute.from_dict(attr.to_dict()) == attr
```

## What it does not do

This package is only the model. It has no storage or database access. It has
no web server or user interface, and it has no sign-in or password hashing:
`UserEntry` and `UserPasswordSalt` only carry values that were computed
elsewhere.

## Installing and testing

```
pip install .[test]
pytest
```