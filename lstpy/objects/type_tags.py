"""Type tag interning."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable, Literal, TypeAlias

TypePolicy: TypeAlias = Literal["open", "closed"]

_TYPE_NAME = re.compile(r"[A-Za-z0-9_](?:[A-Za-z0-9_ '\-]*[A-Za-z0-9_'\-])?")


class UnknownTypeError(ValueError):
    """Raised when a type segment cannot be interned."""


@dataclass(frozen=True, slots=True)
class TypeTag:
    """One segment of a dotted type path, e.g. `Natural` in `Weapon.Natural`."""

    name: str

    def __str__(self) -> str:
        return self.name


NATURAL = TypeTag("Natural")


@dataclass(slots=True)
class TypeRegistry:
    """Case-insensitive type tag interning.

    The first spelling seen for a name wins; later lookups with any casing
    return the same `TypeTag`. A closed registry only resolves names it was
    seeded with.
    """

    policy: TypePolicy = "open"
    _tags: dict[str, TypeTag] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self._tags.setdefault(NATURAL.name.casefold(), NATURAL)

    @classmethod
    def closed(cls, known: Iterable[str]) -> TypeRegistry:
        registry = cls(policy="closed")
        for name in known:
            registry._tags.setdefault(name.casefold(), TypeTag(name))
        return registry

    def __contains__(self, name: str) -> bool:
        return name.casefold() in self._tags

    def intern(self, name: str) -> TypeTag:
        existing = self._tags.get(name.casefold())
        if existing is not None:
            return existing
        if self.policy == "closed":
            raise UnknownTypeError(f"`{name}` is not a known type")
        if not _TYPE_NAME.fullmatch(name):
            raise UnknownTypeError(f"`{name}` is not a valid type name")
        tag = TypeTag(name)
        self._tags[name.casefold()] = tag
        return tag
