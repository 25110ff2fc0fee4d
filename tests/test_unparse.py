import pytest

from lstpy.load import LoadContext
from lstpy.objects import AttackBonus, EquipmentHead, ListKey, NaturalWeapon, TypeTag
from lstpy.tokens import NaturalAttacksToken
from tests._shared_cases import VALID_CASES, NaturalAttacksCase, case_id

TOKEN = NaturalAttacksToken()


def _slam(**overrides: object) -> NaturalWeapon:
    fields: dict[str, object] = {
        "name": "Slam",
        "types": (TypeTag("Weapon"), TypeTag("Natural")),
        "attacks_progress": True,
        "bonuses": (AttackBonus(value=0),),
        "head": EquipmentHead(damage="1d8"),
    }
    fields.update(overrides)
    return NaturalWeapon(**fields)


@pytest.mark.parametrize("case", VALID_CASES, ids=case_id)
def test_unparse_reproduces_canonical_value(case: NaturalAttacksCase) -> None:
    ctx = LoadContext()
    obj = ctx.get_or_create_object("Wolf")
    assert TOKEN.parse(ctx, obj, case.value).ok

    assert TOKEN.unparse(ctx, obj) == (case.value,)


@pytest.mark.parametrize("case", VALID_CASES, ids=case_id)
def test_reparsed_unparse_yields_equal_weapons(case: NaturalAttacksCase) -> None:
    first = LoadContext()
    first_obj = first.get_or_create_object("Wolf")
    TOKEN.parse(first, first_obj, case.value)
    unparsed = TOKEN.unparse(first, first_obj)
    assert unparsed is not None

    second = LoadContext()
    second_obj = second.get_or_create_object("Wolf")
    assert TOKEN.parse(second, second_obj, unparsed[0]).ok

    assert second_obj.get_list(ListKey.NATURAL_WEAPON) == first_obj.get_list(ListKey.NATURAL_WEAPON)


def test_zero_hands_are_not_written() -> None:
    ctx = LoadContext()
    obj = ctx.get_or_create_object("Wolf")
    TOKEN.parse(ctx, obj, "Bite,Weapon.Natural,1,1d4,0")

    assert TOKEN.unparse(ctx, obj) == ("Bite,Weapon.Natural,1,1d4",)


def test_nothing_to_write_without_added_weapons() -> None:
    ctx = LoadContext()
    obj = ctx.get_or_create_object("Wolf")

    assert TOKEN.unparse(ctx, obj) is None
    assert ctx.diagnostics.diagnostics == ()


def test_weapons_added_outside_the_context_are_not_written() -> None:
    ctx = LoadContext()
    obj = ctx.get_or_create_object("Wolf")
    obj.add_to_list(ListKey.NATURAL_WEAPON, _slam())

    assert TOKEN.unparse(ctx, obj) is None


def test_missing_bonus_writes_a_single_attack() -> None:
    ctx = LoadContext()
    obj = ctx.get_or_create_object("Golem")
    ctx.objects.add_to_list(obj, ListKey.NATURAL_WEAPON, _slam(bonuses=(), attacks_progress=False))

    assert TOKEN.unparse(ctx, obj) == ("Slam,Weapon.Natural,*1,1d8",)


@pytest.mark.parametrize(
    "overrides",
    [
        {"name": None},
        {"name": ""},
        {"types": ()},
        {"attacks_progress": None},
        {"head": None},
        {"head": EquipmentHead(damage=None)},
        {"bonuses": (AttackBonus(value=0), AttackBonus(value=1))},
    ],
    ids=["no_name", "empty_name", "no_types", "no_progress_flag", "no_head", "no_damage", "two_bonuses"],
)
def test_incomplete_weapon_aborts_the_whole_write(overrides: dict[str, object]) -> None:
    ctx = LoadContext()
    obj = ctx.get_or_create_object("Golem")
    ctx.objects.add_to_list(obj, ListKey.NATURAL_WEAPON, _slam())
    ctx.objects.add_to_list(obj, ListKey.NATURAL_WEAPON, _slam(**overrides))

    assert TOKEN.unparse(ctx, obj) is None
    assert [d.code for d in ctx.diagnostics.diagnostics] == ["LST_UNPARSE_MISSING_FIELD"]
