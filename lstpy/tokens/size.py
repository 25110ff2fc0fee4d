"""SIZE: the size category of a race or template."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from lstpy.diagnostics import LST_INVALID_SIZE
from lstpy.objects import ObjectKey, parse_size_formula
from lstpy.tokens.base import TokenParseResult

if TYPE_CHECKING:
    from lstpy.load.context import LoadContext
    from lstpy.objects import DataObject


@dataclass(frozen=True, slots=True)
class SizeToken:
    token_name: str = "SIZE"

    def parse(self, context: LoadContext, obj: DataObject, value: str) -> TokenParseResult:
        sink = context.diagnostics
        mark = len(sink)
        formula = parse_size_formula(value, context.size_table)
        if formula is None:
            sink.report(LST_INVALID_SIZE, f"{self.token_name}: '{value}'")
            return TokenParseResult(self.token_name, value, ok=False, diagnostics=sink.since(mark))
        context.objects.put(obj, ObjectKey.SIZE, formula)
        return TokenParseResult(self.token_name, value, ok=True, committed=(formula,))

    def unparse(self, context: LoadContext, obj: DataObject) -> tuple[str, ...] | None:
        formula = context.objects.get_put(obj, ObjectKey.SIZE)
        if formula is None:
            return None
        return (formula.text,)
