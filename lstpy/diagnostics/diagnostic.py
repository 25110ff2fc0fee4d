"""Diagnostics core types."""

from dataclasses import dataclass

from lstpy.diagnostics.codes import Severity
from lstpy.text import TextRange


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by tokens, the loader and the writer."""

    code: str
    message: str
    range: TextRange | None = None
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None
    source_path: str | None = None
    line: int | None = None

    def format(self) -> str:
        location = self.source_path or "<memory>"
        if self.line is not None:
            location = f"{location}:{self.line}"
        return f"{location}: {self.severity} [{self.code}] {self.message}"
