"""String identifiers for domain items."""

from __future__ import annotations

import secrets
import string
from dataclasses import dataclass
from typing import Optional

_ALPHABET = string.ascii_letters + string.digits + "_-"
_GENERATED_LENGTH = 10


@dataclass(frozen=True)
class Id:
    """An identifier. The empty string means that no id has been assigned yet."""

    value: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError(f"an id must be a string, not {type(self.value).__name__}")

    @classmethod
    def generate(cls) -> Id:
        """Create a new random id of ten URL-safe characters."""
        return cls("".join(secrets.choice(_ALPHABET) for _ in range(_GENERATED_LENGTH)))

    @classmethod
    def from_opt(cls, value: str) -> Optional[Id]:
        """Return an id for ``value``, or None when ``value`` is empty."""
        return cls(value) if value else None

    def is_empty(self) -> bool:
        return not self.value

    def __str__(self) -> str:
        return self.value