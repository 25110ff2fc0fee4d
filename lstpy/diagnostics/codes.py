"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


LST_MALFORMED_GRAMMAR: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LST_MALFORMED_GRAMMAR",
    message="Malformed token value.",
    hint="Separate weapons with `|` and fields with `,`; never start, end or double a separator.",
    severity="error",
    category="lst/grammar",
)

LST_RESERVED_NAME: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LST_RESERVED_NAME",
    message="Attempt to build 'None' as a natural weapon.",
    hint="`NONE` is reserved; give the weapon a real name.",
    severity="error",
    category="lst/grammar",
)

LST_UNKNOWN_TYPE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LST_UNKNOWN_TYPE",
    message="Unknown type in natural weapon type path.",
    hint="Use known type names such as `Weapon.Natural.Melee.Piercing`.",
    severity="error",
    category="lst/grammar",
)

LST_INVALID_NUMBER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LST_INVALID_NUMBER",
    message="Non-numeric value.",
    severity="error",
    category="lst/grammar",
)

LST_INVALID_BONUS: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LST_INVALID_BONUS",
    message="Invalid number of attacks.",
    hint="A natural weapon needs at least one attack.",
    severity="error",
    category="lst/grammar",
)

LST_DEFERRED_RESOLUTION: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LST_DEFERRED_RESOLUTION",
    message="SIZE must not be a variable if the object contains a NATURALATTACKS token.",
    hint="Give the object a fixed SIZE such as `SIZE:M`.",
    severity="error",
    category="lst/deferred",
)

LST_UNPARSE_MISSING_FIELD: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LST_UNPARSE_MISSING_FIELD",
    message="Cannot write natural weapon.",
    severity="error",
    category="lst/write",
)

LST_INVALID_SIZE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LST_INVALID_SIZE",
    message="Invalid SIZE value.",
    hint="Use a size abbreviation (`F D T S M L H G C`), a number, or a formula.",
    severity="error",
    category="lst/grammar",
)

LST_UNKNOWN_TOKEN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LST_UNKNOWN_TOKEN",
    message="Unknown token.",
    severity="warning",
    category="lst/load",
)

LST_MALFORMED_COLUMN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LST_MALFORMED_COLUMN",
    message="Expected a `TOKEN:value` column.",
    severity="error",
    category="lst/load",
)
