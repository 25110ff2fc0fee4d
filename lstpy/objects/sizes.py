"""Size categories and SIZE formulas."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TypeAlias


class FormulaResolutionError(ValueError):
    """Raised when a formula needs character state to produce a value."""


@dataclass(frozen=True, slots=True)
class SizeCategory:
    abbreviation: str
    name: str
    order: int


@dataclass(frozen=True, slots=True)
class SizeTable:
    """Size categories indexed by their order."""

    categories: tuple[SizeCategory, ...]
    default_abbreviation: str = "M"

    def __post_init__(self) -> None:
        if self.by_abbreviation(self.default_abbreviation) is None:
            raise ValueError(f"Size table has no `{self.default_abbreviation}` category")

    def item_in_order(self, order: int) -> SizeCategory | None:
        for category in self.categories:
            if category.order == order:
                return category
        return None

    def by_abbreviation(self, text: str) -> SizeCategory | None:
        folded = text.casefold()
        for category in self.categories:
            if category.abbreviation.casefold() == folded:
                return category
        return None

    @property
    def default(self) -> SizeCategory:
        folded = self.default_abbreviation.casefold()
        return next(category for category in self.categories if category.abbreviation.casefold() == folded)


DEFAULT_SIZE_TABLE = SizeTable(
    categories=(
        SizeCategory("F", "Fine", 0),
        SizeCategory("D", "Diminutive", 1),
        SizeCategory("T", "Tiny", 2),
        SizeCategory("S", "Small", 3),
        SizeCategory("M", "Medium", 4),
        SizeCategory("L", "Large", 5),
        SizeCategory("H", "Huge", 6),
        SizeCategory("G", "Gargantuan", 7),
        SizeCategory("C", "Colossal", 8),
    )
)


@dataclass(frozen=True, slots=True)
class FixedSizeFormula:
    value: int
    text: str

    def resolve(self) -> int:
        return self.value


@dataclass(frozen=True, slots=True)
class VariableSizeFormula:
    """A formula that references variables; only a character can resolve it."""

    text: str

    def resolve(self) -> int:
        raise FormulaResolutionError(f"`{self.text}` depends on variables")


SizeFormula: TypeAlias = FixedSizeFormula | VariableSizeFormula

_INTEGER = re.compile(r"[+-]?\d+")
_FORMULA = re.compile(r"[A-Za-z0-9_.()+\-*/ ]+")


def parse_size_formula(text: str, table: SizeTable = DEFAULT_SIZE_TABLE) -> SizeFormula | None:
    stripped = text.strip()
    if not stripped:
        return None
    category = table.by_abbreviation(stripped)
    if category is not None:
        return FixedSizeFormula(value=category.order, text=stripped)
    if _INTEGER.fullmatch(stripped):
        return FixedSizeFormula(value=int(stripped), text=stripped)
    if _FORMULA.fullmatch(stripped):
        return VariableSizeFormula(text=stripped)
    return None


def default_size_formula(table: SizeTable = DEFAULT_SIZE_TABLE) -> FixedSizeFormula:
    category = table.default
    return FixedSizeFormula(value=category.order, text=category.abbreviation)
