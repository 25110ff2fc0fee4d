"""Natural weapon records."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import TYPE_CHECKING

from lstpy.objects.bonus import AttackBonus
from lstpy.objects.references import ProficiencyRef
from lstpy.objects.sizes import SizeCategory
from lstpy.objects.type_tags import TypeTag

if TYPE_CHECKING:
    from lstpy.objects.model import DataObject

PRIMARY_LABEL = "Natural/Primary"
SECONDARY_LABEL = "Natural/Secondary"


@dataclass(frozen=True, slots=True)
class EquipmentHead:
    damage: str | None
    crit_range: int = 1
    crit_mult: int = 2


@dataclass(slots=True)
class NaturalWeapon:
    """One natural attack (bite, claw, ...) owned by a data object.

    Only `base_size` and `size` change after construction; they are filled
    in once the owner's SIZE is known. Fields are optional so that partially
    built weapons can be represented and rejected on write.
    """

    name: str | None
    types: tuple[TypeTag, ...] = ()
    attacks_progress: bool | None = None
    bonuses: tuple[AttackBonus, ...] = ()
    head: EquipmentHead | None = None
    hands_required: int = 0
    weight: Decimal = Decimal(0)
    weapon_prof: ProficiencyRef | None = None
    implied_weapon_profs: tuple[ProficiencyRef, ...] = ()
    slot_index: int = 1
    quantity: int = 1
    number_carried: int = 1
    parent: DataObject | None = field(default=None, compare=False, repr=False)
    base_size: SizeCategory | None = field(default=None, compare=False)
    size: SizeCategory | None = field(default=None, compare=False)

    @property
    def modified_name(self) -> str:
        return PRIMARY_LABEL if self.slot_index == 1 else SECONDARY_LABEL

    @property
    def output_index(self) -> int:
        return 0

    @property
    def output_subindex(self) -> int:
        return self.slot_index

    @property
    def damage(self) -> str | None:
        return None if self.head is None else self.head.damage

    @property
    def attack_count_delta(self) -> int:
        return sum(bonus.value for bonus in self.bonuses)

    def assign_size(self, size: SizeCategory) -> None:
        self.base_size = size
        self.size = size
