"""Token contracts and shared value checks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from lstpy.diagnostics import LST_MALFORMED_GRAMMAR, Diagnostic, DiagnosticSink
from lstpy.text import TextRange

if TYPE_CHECKING:
    from lstpy.load.context import LoadContext
    from lstpy.objects import DataObject


@dataclass(frozen=True, slots=True)
class TokenParseResult:
    """Outcome of parsing one token value for one object."""

    token_name: str
    value: str
    ok: bool
    committed: tuple[Any, ...] = ()
    diagnostics: tuple[Diagnostic, ...] = ()


class LstToken(Protocol):
    """Contract for `TOKEN:value` handlers."""

    @property
    def token_name(self) -> str: ...

    def parse(self, context: LoadContext, obj: DataObject, value: str) -> TokenParseResult: ...

    def unparse(self, context: LoadContext, obj: DataObject) -> tuple[str, ...] | None: ...


@runtime_checkable
class DeferredToken(Protocol):
    """Token with a second phase that runs once per object after loading."""

    @property
    def token_name(self) -> str: ...

    def process(self, context: LoadContext, obj: DataObject) -> bool: ...


def is_empty(value: str | None) -> bool:
    return value is None or value == ""


def has_illegal_separator(
    separator: str,
    value: str,
    sink: DiagnosticSink,
    *,
    token_name: str,
    offset: int = 0,
) -> bool:
    """Report and return True when `separator` starts, ends or doubles in `value`."""
    if value.startswith(separator):
        sink.report(
            LST_MALFORMED_GRAMMAR,
            f"{token_name} arguments may not start with {separator}: {value}",
            range=TextRange.at(offset, len(separator)),
        )
        return True
    if value.endswith(separator):
        sink.report(
            LST_MALFORMED_GRAMMAR,
            f"{token_name} arguments may not end with {separator}: {value}",
            range=TextRange.at(offset + len(value) - len(separator), len(separator)),
        )
        return True
    doubled = value.find(separator * 2)
    if doubled >= 0:
        sink.report(
            LST_MALFORMED_GRAMMAR,
            f"{token_name} arguments uses double separator {separator * 2}: {value}",
            range=TextRange.at(offset + doubled, 2 * len(separator)),
        )
        return True
    return False


def validate_tokens(tokens: tuple[LstToken, ...]) -> None:
    seen: set[str] = set()
    for token in tokens:
        name = token.token_name
        if not name or name != name.upper() or ":" in name:
            raise ValueError(f"Token `{name}` must be an upper-case name without `:`.")
        if name in seen:
            raise ValueError(f"Token `{name}` is registered more than once.")
        seen.add(name)
