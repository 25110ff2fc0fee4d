"""Object model the LST tokens write into."""

from lstpy.objects.bonus import AttackBonus, build_attack_bonus
from lstpy.objects.equipment import (
    PRIMARY_LABEL,
    SECONDARY_LABEL,
    EquipmentHead,
    NaturalWeapon,
)
from lstpy.objects.keys import ListKey, ObjectKey
from lstpy.objects.model import DataObject
from lstpy.objects.references import (
    ProficiencyRef,
    ReferenceContext,
    WeaponProficiency,
)
from lstpy.objects.sizes import (
    DEFAULT_SIZE_TABLE,
    FixedSizeFormula,
    FormulaResolutionError,
    SizeCategory,
    SizeFormula,
    SizeTable,
    VariableSizeFormula,
    default_size_formula,
    parse_size_formula,
)
from lstpy.objects.type_tags import (
    NATURAL,
    TypePolicy,
    TypeRegistry,
    TypeTag,
    UnknownTypeError,
)

__all__ = [
    "DEFAULT_SIZE_TABLE",
    "NATURAL",
    "PRIMARY_LABEL",
    "SECONDARY_LABEL",
    "AttackBonus",
    "DataObject",
    "EquipmentHead",
    "FixedSizeFormula",
    "FormulaResolutionError",
    "ListKey",
    "NaturalWeapon",
    "ObjectKey",
    "ProficiencyRef",
    "ReferenceContext",
    "SizeCategory",
    "SizeFormula",
    "SizeTable",
    "TypePolicy",
    "TypeRegistry",
    "TypeTag",
    "UnknownTypeError",
    "VariableSizeFormula",
    "WeaponProficiency",
    "build_attack_bonus",
    "default_size_formula",
    "parse_size_formula",
]
