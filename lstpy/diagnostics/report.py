"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field

from lstpy.diagnostics.codes import DiagnosticSpec
from lstpy.diagnostics.diagnostic import Diagnostic
from lstpy.text import TextRange


def collect_diagnostics(*groups: Iterable[Diagnostic]) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    for group in groups:
        diagnostics.extend(group)
    return diagnostics


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.severity == "error" for d in diagnostics)


@dataclass(slots=True)
class DiagnosticSink:
    """Append-only collector shared by everything running inside one load."""

    _diagnostics: list[Diagnostic] = field(default_factory=list)
    _source_path: str | None = None
    _line: int | None = None

    @property
    def diagnostics(self) -> tuple[Diagnostic, ...]:
        return tuple(self._diagnostics)

    @property
    def has_errors(self) -> bool:
        return has_errors(self._diagnostics)

    @property
    def location(self) -> tuple[str | None, int | None]:
        return self._source_path, self._line

    def __len__(self) -> int:
        return len(self._diagnostics)

    def report(
        self,
        spec: DiagnosticSpec,
        detail: str | None = None,
        *,
        range: TextRange | None = None,
    ) -> Diagnostic:
        message = spec.message if detail is None else f"{spec.message} {detail}"
        diagnostic = Diagnostic(
            code=spec.code,
            message=message,
            range=range,
            severity=spec.severity,
            hint=spec.hint,
            category=spec.category,
            source_path=self._source_path,
            line=self._line,
        )
        self._diagnostics.append(diagnostic)
        return diagnostic

    def since(self, mark: int) -> tuple[Diagnostic, ...]:
        """Diagnostics reported after `mark`, a previous `len(sink)`."""
        return tuple(self._diagnostics[mark:])

    @contextmanager
    def located(self, source_path: str | None, line: int | None = None) -> Iterator[None]:
        """Stamp diagnostics reported inside the block with a source location."""
        previous = (self._source_path, self._line)
        self._source_path, self._line = source_path, line
        try:
            yield
        finally:
            self._source_path, self._line = previous
