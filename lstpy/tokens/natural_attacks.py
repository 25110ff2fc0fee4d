"""NATURALATTACKS: natural weapons granted by a race or template.

NATURALATTACKS:primary name,type,attacks,damage|secondary name,type,attacks,damage

The first weapon is primary, the rest are secondary. Type is a dotted path
such as `Weapon.Natural.Melee.Bludgeoning`. Attacks is the number of attacks
at full BAB (primary) or BAB - 5 (secondary); a leading `*` fixes the count so
it does not progress with BAB. An optional fifth field gives hands required.

Size is not resolved while parsing: SIZE may appear after this token in the
same line, so weapons are sized in a deferred pass once loading finishes.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING

from lstpy.diagnostics import (
    LST_DEFERRED_RESOLUTION,
    LST_INVALID_BONUS,
    LST_INVALID_NUMBER,
    LST_RESERVED_NAME,
    LST_UNKNOWN_TYPE,
    LST_UNPARSE_MISSING_FIELD,
)
from lstpy.objects import (
    NATURAL,
    AttackBonus,
    EquipmentHead,
    FormulaResolutionError,
    ListKey,
    NaturalWeapon,
    ObjectKey,
    TypeTag,
    UnknownTypeError,
    build_attack_bonus,
    default_size_formula,
)
from lstpy.tokens.base import TokenParseResult, has_illegal_separator
from lstpy.tokens.grammar import (
    FIELD_SEPARATOR,
    TYPE_SEPARATOR,
    WEAPON_SEPARATOR,
    RawFieldGroup,
    Segment,
    parse_field_group,
    split_segments,
    split_weapon_groups,
)

if TYPE_CHECKING:
    from lstpy.load.context import LoadContext
    from lstpy.objects import DataObject

NONE_SENTINEL = "NONE"
FIXED_ATTACKS_MARKER = "*"

# Optional sign and ASCII digits only; no whitespace or underscores.
_INTEGER = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True, slots=True)
class NaturalAttacksToken:
    token_name: str = "NATURALATTACKS"

    def parse(self, context: LoadContext, obj: DataObject, value: str) -> TokenParseResult:
        sink = context.diagnostics
        mark = len(sink)

        segments = split_weapon_groups(value, sink, token_name=self.token_name)
        if segments is None:
            return TokenParseResult(self.token_name, value, ok=False, diagnostics=sink.since(mark))

        # Nothing reaches the object until every group has built.
        built: list[NaturalWeapon] = []
        for slot_index, segment in enumerate(segments, start=1):
            group = parse_field_group(segment, sink, token_name=self.token_name)
            if group is None:
                return TokenParseResult(self.token_name, value, ok=False, diagnostics=sink.since(mark))
            weapon = self.build(context, obj, group, slot_index=slot_index)
            if weapon is None:
                return TokenParseResult(self.token_name, value, ok=False, diagnostics=sink.since(mark))
            built.append(weapon)

        for weapon in built:
            context.objects.add_to_list(obj, ListKey.NATURAL_WEAPON, weapon)
        source_path, line = sink.location
        context.deferred.register(self, obj, source_path=source_path, line=line)
        return TokenParseResult(
            self.token_name,
            value,
            ok=True,
            committed=tuple(built),
            diagnostics=sink.since(mark),
        )

    def build(
        self,
        context: LoadContext,
        obj: DataObject,
        group: RawFieldGroup,
        *,
        slot_index: int,
    ) -> NaturalWeapon | None:
        """Build one natural weapon from `name,type,attacks,damage[,hands]`."""
        name_field, type_field, attacks_field, damage_field = group.fields[:4]
        sink = context.diagnostics

        name = name_field.text
        if name.casefold() == NONE_SENTINEL.casefold():
            sink.report(
                LST_RESERVED_NAME,
                f"{self.token_name}: {group.text}",
                range=name_field.range,
            )
            return None

        types = self._parse_types(context, type_field)
        if types is None:
            return None

        attacks = self._parse_attacks(context, attacks_field)
        if attacks is None:
            return None
        attacks_progress, bonus = attacks

        hands_required = 0
        if group.hands is not None:
            parsed_hands = self._parse_hands(context, group.hands)
            if parsed_hands is None:
                return None
            hands_required = parsed_hands

        proficiency, created = context.references.lookup_or_create(name)
        if created:
            proficiency.add_type(NATURAL)
        reference = context.references.get_reference(name)

        return NaturalWeapon(
            name=name,
            types=types,
            attacks_progress=attacks_progress,
            bonuses=(bonus,),
            head=EquipmentHead(damage=damage_field.text, crit_range=1, crit_mult=2),
            hands_required=hands_required,
            weight=Decimal(0),
            weapon_prof=reference,
            implied_weapon_profs=(reference,),
            slot_index=slot_index,
            quantity=1,
            number_carried=1,
            parent=obj,
        )

    def _parse_types(self, context: LoadContext, field: Segment) -> tuple[TypeTag, ...] | None:
        sink = context.diagnostics
        if has_illegal_separator(
            TYPE_SEPARATOR,
            field.text,
            sink,
            token_name=self.token_name,
            offset=field.range.start,
        ):
            return None

        types: list[TypeTag] = []
        for segment in split_segments(field.text, TYPE_SEPARATOR, offset=field.range.start):
            try:
                types.append(context.types.intern(segment.text))
            except UnknownTypeError as exc:
                sink.report(LST_UNKNOWN_TYPE, f"{self.token_name}: {exc}.", range=segment.range)
                return None
        return tuple(types)

    def _parse_attacks(self, context: LoadContext, field: Segment) -> tuple[bool, AttackBonus] | None:
        sink = context.diagnostics
        text = field.text
        attacks_fixed = text.startswith(FIXED_ATTACKS_MARKER)
        if attacks_fixed:
            text = text[len(FIXED_ATTACKS_MARKER) :]

        if not _INTEGER.fullmatch(text):
            sink.report(
                LST_INVALID_NUMBER,
                f"Number of attacks in {self.token_name}: '{text}'",
                range=field.range,
            )
            return None

        extra_attacks = int(text) - 1
        bonus = build_attack_bonus(extra_attacks)
        if bonus is None:
            sink.report(
                LST_INVALID_BONUS,
                f"{self.token_name} was given invalid number of attacks: {extra_attacks}",
                range=field.range,
            )
            return None
        return not attacks_fixed, bonus

    def _parse_hands(self, context: LoadContext, field: Segment) -> int | None:
        if not _INTEGER.fullmatch(field.text) or int(field.text) < 0:
            context.diagnostics.report(
                LST_INVALID_NUMBER,
                f"Hands required in {self.token_name}: '{field.text}'",
                range=field.range,
            )
            return None
        return int(field.text)

    def process(self, context: LoadContext, obj: DataObject) -> bool:
        """Size every natural weapon of `obj` from its (now complete) SIZE."""
        weapons: tuple[NaturalWeapon, ...] = obj.get_list(ListKey.NATURAL_WEAPON)
        if not weapons:
            return True

        formula = obj.get(ObjectKey.SIZE) or default_size_formula(context.size_table)
        try:
            order = formula.resolve()
        except FormulaResolutionError as exc:
            context.diagnostics.report(
                LST_DEFERRED_RESOLUTION,
                f"Object `{obj.key_name}`: {exc}.",
            )
            return False

        size = context.size_table.item_in_order(order)
        if size is None:
            context.diagnostics.report(
                LST_DEFERRED_RESOLUTION,
                f"Object `{obj.key_name}`: no size category at position {order}.",
            )
            return False

        for weapon in weapons:
            weapon.assign_size(size)
        return True

    def unparse(self, context: LoadContext, obj: DataObject) -> tuple[str, ...] | None:
        added: tuple[NaturalWeapon, ...] = context.objects.list_changes(obj, ListKey.NATURAL_WEAPON)
        if not added:
            return None

        parts: list[str] = []
        for weapon in added:
            text = self._unparse_weapon(context, weapon)
            if text is None:
                return None
            parts.append(text)
        return (WEAPON_SEPARATOR.join(parts),)

    def _unparse_weapon(self, context: LoadContext, weapon: NaturalWeapon) -> str | None:
        sink = context.diagnostics

        if not weapon.name:
            sink.report(LST_UNPARSE_MISSING_FIELD, f"{self.token_name} expected a natural weapon name.")
            return None
        if not weapon.types:
            sink.report(LST_UNPARSE_MISSING_FIELD, f"{self.token_name} expected `{weapon.name}` to have a type.")
            return None
        if weapon.attacks_progress is None:
            sink.report(
                LST_UNPARSE_MISSING_FIELD,
                f"{self.token_name} expected `{weapon.name}` to know whether attacks progress.",
            )
            return None

        attacks = "" if weapon.attacks_progress else FIXED_ATTACKS_MARKER
        if not weapon.bonuses:
            attacks += "1"
        elif len(weapon.bonuses) != 1:
            sink.report(
                LST_UNPARSE_MISSING_FIELD,
                f"{self.token_name} expected only one bonus on `{weapon.name}`: "
                f"{', '.join(str(bonus) for bonus in weapon.bonuses)}",
            )
            return None
        else:
            attacks += str(weapon.bonuses[0].value + 1)

        if weapon.head is None:
            sink.report(LST_UNPARSE_MISSING_FIELD, f"{self.token_name} expected `{weapon.name}` to have a head.")
            return None
        if weapon.head.damage is None:
            sink.report(LST_UNPARSE_MISSING_FIELD, f"{self.token_name} expected `{weapon.name}` to have damage.")
            return None

        fields = [
            weapon.name,
            TYPE_SEPARATOR.join(str(tag) for tag in weapon.types),
            attacks,
            weapon.head.damage,
        ]
        if weapon.hands_required:
            fields.append(str(weapon.hands_required))
        return FIELD_SEPARATOR.join(fields)
