"""Diagnostics."""

from lstpy.diagnostics.codes import (
    LST_DEFERRED_RESOLUTION,
    LST_INVALID_BONUS,
    LST_INVALID_NUMBER,
    LST_INVALID_SIZE,
    LST_MALFORMED_COLUMN,
    LST_MALFORMED_GRAMMAR,
    LST_RESERVED_NAME,
    LST_UNKNOWN_TOKEN,
    LST_UNKNOWN_TYPE,
    LST_UNPARSE_MISSING_FIELD,
    DiagnosticSpec,
    Severity,
)
from lstpy.diagnostics.diagnostic import Diagnostic
from lstpy.diagnostics.report import DiagnosticSink, collect_diagnostics, has_errors

__all__ = [
    "LST_DEFERRED_RESOLUTION",
    "LST_INVALID_BONUS",
    "LST_INVALID_NUMBER",
    "LST_INVALID_SIZE",
    "LST_MALFORMED_COLUMN",
    "LST_MALFORMED_GRAMMAR",
    "LST_RESERVED_NAME",
    "LST_UNKNOWN_TOKEN",
    "LST_UNKNOWN_TYPE",
    "LST_UNPARSE_MISSING_FIELD",
    "Diagnostic",
    "DiagnosticSink",
    "DiagnosticSpec",
    "Severity",
    "collect_diagnostics",
    "has_errors",
]
