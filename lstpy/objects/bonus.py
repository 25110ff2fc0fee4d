"""Attack bonuses attached to natural weapons."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AttackBonus:
    """`WEAPON|ATTACKS|<value>`: extra attacks beyond the first."""

    value: int
    bonus_type: str = "WEAPON"
    bonus_name: str = "ATTACKS"

    def __str__(self) -> str:
        return f"{self.bonus_type}|{self.bonus_name}|{self.value}"


def build_attack_bonus(extra_attacks: int) -> AttackBonus | None:
    """Build the extra-attacks bonus, or `None` when the count is unusable."""
    if extra_attacks < 0:
        return None
    return AttackBonus(value=extra_attacks)
