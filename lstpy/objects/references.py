"""Weapon proficiency registry shared across a load."""

from __future__ import annotations

from dataclasses import dataclass, field

from lstpy.objects.type_tags import TypeTag


@dataclass(eq=False, slots=True)
class WeaponProficiency:
    key_name: str
    types: list[TypeTag] = field(default_factory=list)

    def add_type(self, tag: TypeTag) -> None:
        self.types.append(tag)

    def is_type(self, tag: TypeTag) -> bool:
        return tag in self.types


@dataclass(frozen=True, slots=True)
class ProficiencyRef:
    """Non-owning reference to a `WeaponProficiency` by key."""

    key_name: str
    _context: ReferenceContext = field(compare=False, repr=False)

    def resolve(self) -> WeaponProficiency:
        proficiency = self._context.silently_get(self.key_name)
        if proficiency is None:
            raise KeyError(self.key_name)
        return proficiency


@dataclass(slots=True)
class ReferenceContext:
    """Case-insensitive get-or-insert store of weapon proficiencies."""

    _proficiencies: dict[str, WeaponProficiency] = field(default_factory=dict)
    _references: dict[str, ProficiencyRef] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self._proficiencies)

    def __contains__(self, key_name: str) -> bool:
        return key_name.casefold() in self._proficiencies

    def silently_get(self, key_name: str) -> WeaponProficiency | None:
        return self._proficiencies.get(key_name.casefold())

    def lookup_or_create(self, key_name: str) -> tuple[WeaponProficiency, bool]:
        """Return the proficiency for `key_name` and whether it was just created."""
        folded = key_name.casefold()
        existing = self._proficiencies.get(folded)
        if existing is not None:
            return existing, False
        created = WeaponProficiency(key_name=key_name)
        self._proficiencies[folded] = created
        return created, True

    def get_reference(self, key_name: str) -> ProficiencyRef:
        folded = key_name.casefold()
        reference = self._references.get(folded)
        if reference is None:
            reference = ProficiencyRef(key_name=key_name, _context=self)
            self._references[folded] = reference
        return reference

    def proficiencies(self) -> tuple[WeaponProficiency, ...]:
        return tuple(self._proficiencies.values())
