"""Splitting of delimited NATURALATTACKS values into field groups."""

from __future__ import annotations

from dataclasses import dataclass

from lstpy.diagnostics import LST_MALFORMED_GRAMMAR, DiagnosticSink
from lstpy.text import TextRange
from lstpy.tokens.base import has_illegal_separator, is_empty

WEAPON_SEPARATOR = "|"
FIELD_SEPARATOR = ","
TYPE_SEPARATOR = "."

MIN_FIELDS = 4
MAX_FIELDS = 5


@dataclass(frozen=True, slots=True)
class Segment:
    """A piece of the token value and where it sits in that value."""

    text: str
    range: TextRange


@dataclass(frozen=True, slots=True)
class RawFieldGroup:
    """One weapon's comma-separated fields, before any validation."""

    text: str
    range: TextRange
    fields: tuple[Segment, ...]

    @property
    def hands(self) -> Segment | None:
        return self.fields[4] if len(self.fields) == MAX_FIELDS else None


def split_segments(value: str, separator: str, *, offset: int = 0) -> tuple[Segment, ...]:
    """Split `value` on `separator`, keeping each piece's range."""
    segments: list[Segment] = []
    start = 0
    for piece in value.split(separator):
        segments.append(Segment(text=piece, range=TextRange.at(offset + start, len(piece))))
        start += len(piece) + len(separator)
    return tuple(segments)


def split_weapon_groups(
    value: str,
    sink: DiagnosticSink,
    *,
    token_name: str = "NATURALATTACKS",
) -> tuple[Segment, ...] | None:
    """Split a NATURALATTACKS value on `|`, or report and return None."""
    if is_empty(value):
        sink.report(LST_MALFORMED_GRAMMAR, f"{token_name} may not be empty")
        return None
    if has_illegal_separator(WEAPON_SEPARATOR, value, sink, token_name=token_name):
        return None
    return split_segments(value, WEAPON_SEPARATOR)


def parse_field_group(
    group: Segment,
    sink: DiagnosticSink,
    *,
    token_name: str = "NATURALATTACKS",
) -> RawFieldGroup | None:
    """Split one weapon group into its 4 or 5 fields, or report and return None."""
    if has_illegal_separator(
        FIELD_SEPARATOR,
        group.text,
        sink,
        token_name=token_name,
        offset=group.range.start,
    ):
        return None
    fields = split_segments(group.text, FIELD_SEPARATOR, offset=group.range.start)
    if not MIN_FIELDS <= len(fields) <= MAX_FIELDS:
        sink.report(
            LST_MALFORMED_GRAMMAR,
            f"Invalid build of natural weapon in {token_name}: {group.text} "
            f"(expected {MIN_FIELDS} or {MAX_FIELDS} fields, got {len(fields)})",
            range=group.range,
        )
        return None
    return RawFieldGroup(text=group.text, range=group.range, fields=fields)


def parse_natural_attacks_grammar(
    value: str,
    sink: DiagnosticSink,
    *,
    token_name: str = "NATURALATTACKS",
) -> tuple[RawFieldGroup, ...] | None:
    """Split a whole NATURALATTACKS value into field groups, or report and return None.

    The first malformed group aborts the whole value.
    """
    segments = split_weapon_groups(value, sink, token_name=token_name)
    if segments is None:
        return None

    groups: list[RawFieldGroup] = []
    for segment in segments:
        group = parse_field_group(segment, sink, token_name=token_name)
        if group is None:
            return None
        groups.append(group)
    return tuple(groups)
