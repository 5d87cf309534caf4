"""User accounts and their stored credentials."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Mapping

from cognitive.attr_def import _as_dict, _field, _list_field, _require
from cognitive.ids import Id


@dataclass
class UserAccount:
    """The details of a user, without anything password related."""

    id: Id
    email: str
    username: str
    bio: str
    is_anonymous: bool
    permissions: List[str] = field(default_factory=list)

    @classmethod
    def guest(cls) -> UserAccount:
        """An anonymous account with a fresh id and no permissions."""
        return cls(
            id=Id.generate(),
            email="",
            username="Guest",
            bio="",
            is_anonymous=True,
        )

    def to_dict(self) -> dict:
        return _as_dict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> UserAccount:
        texts = {key: _field(data, key, str) for key in ("email", "username", "bio")}
        return cls(
            id=Id(data["id"]),
            is_anonymous=_field(data, "is_anonymous", bool),
            permissions=_list_field(
                data, "permissions", lambda item: _require(item, str, "permissions")
            ),
            **texts,
        )


@dataclass
class UserEntry:
    """A user account together with its stored password hash and salt."""

    user: UserAccount
    password: str
    salt: str

    def to_account(self) -> UserAccount:
        """The account part of the entry."""
        return self.user


@dataclass
class UserPasswordSalt:
    """A user's stored password hash and salt."""

    password: str
    salt: str