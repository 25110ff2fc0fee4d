"""Data objects that own tokens' output."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from lstpy.objects.keys import ListKey, ObjectKey


@dataclass(eq=False, slots=True)
class DataObject:
    """One named object loaded from an LST line (race, template, ...)."""

    key_name: str
    _lists: dict[ListKey, list[Any]] = field(default_factory=dict, repr=False)
    _values: dict[ObjectKey, Any] = field(default_factory=dict, repr=False)

    def add_to_list(self, key: ListKey, item: Any) -> None:
        self._lists.setdefault(key, []).append(item)

    def get_list(self, key: ListKey) -> tuple[Any, ...]:
        return tuple(self._lists.get(key, ()))

    def get(self, key: ObjectKey) -> Any | None:
        return self._values.get(key)

    def put(self, key: ObjectKey, value: Any) -> None:
        self._values[key] = value
