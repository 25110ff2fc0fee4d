from decimal import Decimal

import pytest

from lstpy.load import LoadContext, LoadOptions
from lstpy.objects import NATURAL, DataObject, ListKey, NaturalWeapon
from lstpy.text import TextRange
from lstpy.tokens import NaturalAttacksToken, TokenParseResult
from tests._shared_cases import VALID_CASES, NaturalAttacksCase, case_id

EXAMPLE = "Bite,Weapon.Natural.Melee.Piercing,*1,1d4|Claw,Weapon.Natural.Melee.Slashing,2,1d3,1"


def _parse(
    value: str,
    *,
    context: LoadContext | None = None,
    owner: str = "Wolf",
) -> tuple[LoadContext, DataObject, TokenParseResult]:
    ctx = context if context is not None else LoadContext()
    obj = ctx.get_or_create_object(owner)
    result = NaturalAttacksToken().parse(ctx, obj, value)
    return ctx, obj, result


def _weapons(obj: DataObject) -> tuple[NaturalWeapon, ...]:
    return obj.get_list(ListKey.NATURAL_WEAPON)


def test_builds_primary_and_secondary_weapons() -> None:
    _, obj, result = _parse(EXAMPLE)

    assert result.ok
    assert result.diagnostics == ()
    bite, claw = _weapons(obj)

    assert bite.name == "Bite"
    assert [str(tag) for tag in bite.types] == ["Weapon", "Natural", "Melee", "Piercing"]
    assert bite.attacks_progress is False
    assert bite.attack_count_delta == 0
    assert bite.damage == "1d4"
    assert bite.hands_required == 0
    assert bite.slot_index == 1
    assert bite.modified_name == "Natural/Primary"

    assert claw.name == "Claw"
    assert [str(tag) for tag in claw.types] == ["Weapon", "Natural", "Melee", "Slashing"]
    assert claw.attacks_progress is True
    assert claw.attack_count_delta == 1
    assert claw.damage == "1d3"
    assert claw.hands_required == 1
    assert claw.slot_index == 2
    assert claw.modified_name == "Natural/Secondary"
    assert result.committed == (bite, claw)


def test_fixed_invariants_on_every_weapon() -> None:
    _, obj, _ = _parse(EXAMPLE)

    for weapon in _weapons(obj):
        assert weapon.weight == Decimal(0)
        assert weapon.head is not None
        assert weapon.head.crit_range == 1
        assert weapon.head.crit_mult == 2
        assert weapon.quantity == 1
        assert weapon.number_carried == 1
        assert weapon.output_index == 0
        assert weapon.output_subindex == weapon.slot_index
        assert weapon.parent is obj
        assert weapon.base_size is None
        assert weapon.size is None


@pytest.mark.parametrize("case", VALID_CASES, ids=case_id)
def test_one_weapon_per_group_in_input_order(case: NaturalAttacksCase) -> None:
    _, obj, result = _parse(case.value)

    assert result.ok
    weapons = _weapons(obj)
    assert tuple(weapon.name for weapon in weapons) == case.weapon_names
    assert [weapon.slot_index for weapon in weapons] == list(range(1, len(weapons) + 1))


@pytest.mark.parametrize(
    ("attacks", "progress", "delta"),
    [("*5", False, 4), ("5", True, 4), ("1", True, 0), ("*1", False, 0), ("+3", True, 2)],
)
def test_attack_count_and_fixed_marker(attacks: str, progress: bool, delta: int) -> None:
    _, obj, result = _parse(f"Tentacle,Weapon.Natural.Melee.Slashing,{attacks},1d6")

    assert result.ok
    (weapon,) = _weapons(obj)
    assert weapon.attacks_progress is progress
    assert weapon.attack_count_delta == delta
    assert str(weapon.bonuses[0]) == f"WEAPON|ATTACKS|{delta}"


@pytest.mark.parametrize(
    "value",
    [
        "none,Weapon.Natural,1,1d4",
        "NONE,Weapon.Natural,1,1d4",
        "None,Weapon..Natural,x,1d4,y",
    ],
)
def test_none_is_a_reserved_name(value: str) -> None:
    _, obj, result = _parse(value)

    assert not result.ok
    assert [d.code for d in result.diagnostics] == ["LST_RESERVED_NAME"]
    assert result.diagnostics[0].range == TextRange(0, 4)
    assert _weapons(obj) == ()


@pytest.mark.parametrize("value", ["Bite,Weapon..Natural,1,1d4", "Bite,.Weapon,1,1d4", "Bite,Weapon.,1,1d4"])
def test_rejects_misplaced_type_dots(value: str) -> None:
    _, _, result = _parse(value)

    assert [d.code for d in result.diagnostics] == ["LST_MALFORMED_GRAMMAR"]


def test_closed_type_registry_rejects_unknown_segment() -> None:
    ctx = LoadContext(
        options=LoadOptions(type_policy="closed", known_types=frozenset({"Weapon", "Melee"})),
    )

    _, obj, result = _parse("Bite,Weapon.Natural.Melee.Piercing,1,1d4", context=ctx)

    assert [d.code for d in result.diagnostics] == ["LST_UNKNOWN_TYPE"]
    assert result.diagnostics[0].range == TextRange(26, 34)
    assert _weapons(obj) == ()


def test_open_type_registry_rejects_unusable_names() -> None:
    _, _, result = _parse("Bite,Weapon.Nat?ural,1,1d4")

    assert [d.code for d in result.diagnostics] == ["LST_UNKNOWN_TYPE"]


def test_type_tags_are_interned_case_insensitively() -> None:
    _, obj, _ = _parse("Bite,Weapon.natural,1,1d4|Claw,WEAPON.Natural,1,1d3")

    bite, claw = _weapons(obj)
    assert bite.types[0] is claw.types[0]
    assert bite.types[1] is NATURAL
    assert claw.types[1] is NATURAL
    assert str(claw.types[0]) == "Weapon"


@pytest.mark.parametrize("attacks", ["two", "*", "1.5", " 2", "*x"])
def test_invalid_attack_count_reports_invalid_number(attacks: str) -> None:
    _, _, result = _parse(f"Bite,Weapon.Natural,{attacks},1d4")

    assert [d.code for d in result.diagnostics] == ["LST_INVALID_NUMBER"]


@pytest.mark.parametrize("attacks", ["0", "*0", "-2"])
def test_zero_or_negative_attack_count_is_an_invalid_bonus(attacks: str) -> None:
    _, _, result = _parse(f"Bite,Weapon.Natural,{attacks},1d4")

    assert [d.code for d in result.diagnostics] == ["LST_INVALID_BONUS"]


@pytest.mark.parametrize("hands", ["x", "-1", "1.0", "one"])
def test_rejects_invalid_hands(hands: str) -> None:
    _, obj, result = _parse(f"Bite,Weapon.Natural,1,1d4,{hands}")

    assert [d.code for d in result.diagnostics] == ["LST_INVALID_NUMBER"]
    assert _weapons(obj) == ()


def test_failing_group_discards_earlier_groups() -> None:
    ctx, obj, result = _parse("Bite,Weapon.Natural,1,1d4|Claw,Weapon.Natural,x,1d3")

    assert not result.ok
    assert result.committed == ()
    assert [d.code for d in result.diagnostics] == ["LST_INVALID_NUMBER"]
    assert _weapons(obj) == ()
    assert ctx.objects.list_changes(obj, ListKey.NATURAL_WEAPON) == ()
    assert len(ctx.deferred) == 0


def test_reports_the_first_failing_group_in_input_order() -> None:
    _, obj, result = _parse("None,Weapon,1,1d4|Claw,Weapon")

    assert not result.ok
    assert [d.code for d in result.diagnostics] == ["LST_RESERVED_NAME"]
    assert result.diagnostics[0].range == TextRange(0, 4)
    assert _weapons(obj) == ()


def test_failed_token_leaves_earlier_tokens_in_place() -> None:
    ctx, obj, _ = _parse("Bite,Weapon.Natural,1,1d4")
    _, _, second = _parse("Claw,Weapon.Natural,1,1d3,oops", context=ctx)

    assert not second.ok
    assert [weapon.name for weapon in _weapons(obj)] == ["Bite"]


def test_weapon_references_natural_proficiency() -> None:
    ctx, obj, _ = _parse("Bite,Weapon.Natural.Melee.Piercing,1,1d6")

    (weapon,) = _weapons(obj)
    proficiency = ctx.references.silently_get("Bite")
    assert proficiency is not None
    assert proficiency.is_type(NATURAL)
    assert weapon.weapon_prof is not None
    assert weapon.weapon_prof.resolve() is proficiency
    assert weapon.implied_weapon_profs == (weapon.weapon_prof,)


def test_deferred_action_registered_once_per_owner() -> None:
    ctx, obj, _ = _parse("Bite,Weapon.Natural,1,1d4")
    _parse("Claw,Weapon.Natural,1,1d3", context=ctx)

    assert len(ctx.deferred) == 1
    assert [weapon.name for weapon in _weapons(obj)] == ["Bite", "Claw"]
