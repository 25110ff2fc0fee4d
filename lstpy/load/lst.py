"""Two-phase loading of tab-separated LST lines, and writing them back."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from lstpy.diagnostics import LST_MALFORMED_COLUMN, Diagnostic, has_errors
from lstpy.load.context import DeferredRunResult, LoadContext
from lstpy.objects import DataObject
from lstpy.tokens import TokenParseResult

COLUMN_SEPARATOR = "\t"
TOKEN_SEPARATOR = ":"
COMMENT_PREFIX = "#"


@dataclass(frozen=True, slots=True)
class LoadLstResult:
    """Objects, per-token outcomes and diagnostics of one load."""

    context: LoadContext
    objects: tuple[DataObject, ...]
    token_results: tuple[TokenParseResult, ...]
    diagnostics: tuple[Diagnostic, ...]
    deferred: DeferredRunResult | None = None

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)


def load_lst_text(
    source_text: str,
    *,
    source_path: str = "<memory>",
    context: LoadContext | None = None,
    resolve: bool = True,
) -> LoadLstResult:
    """Parse every line of `source_text`, then run deferred actions.

    Pass `resolve=False` to leave deferred actions pending, e.g. when more
    files still have to be parsed into the same context.
    """
    ctx = context if context is not None else LoadContext()
    mark = len(ctx.diagnostics)
    objects: dict[str, DataObject] = {}
    token_results: list[TokenParseResult] = []

    for number, line in enumerate(source_text.splitlines(), start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith(COMMENT_PREFIX):
            continue
        with ctx.diagnostics.located(source_path, number):
            obj, results = _load_line(ctx, line)
        if obj is not None:
            objects.setdefault(obj.key_name, obj)
        token_results.extend(results)

    deferred = ctx.resolve_deferred() if resolve else None
    return LoadLstResult(
        context=ctx,
        objects=tuple(objects.values()),
        token_results=tuple(token_results),
        diagnostics=ctx.diagnostics.since(mark),
        deferred=deferred,
    )


def load_lst_file(path: str | Path, *, context: LoadContext | None = None) -> LoadLstResult:
    file_path = Path(path)
    return load_lst_text(
        file_path.read_text(encoding="utf-8-sig"),
        source_path=str(file_path).replace("\\", "/"),
        context=context,
    )


def load_lst_paths(paths: Iterable[str | Path], *, context: LoadContext | None = None) -> LoadLstResult:
    """Parse all files into one context, then resolve deferred actions once."""
    ctx = context if context is not None else LoadContext()
    mark = len(ctx.diagnostics)
    objects: dict[str, DataObject] = {}
    token_results: list[TokenParseResult] = []

    for path in sorted(Path(path_like) for path_like in paths):
        parsed = load_lst_text(
            path.read_text(encoding="utf-8-sig"),
            source_path=str(path).replace("\\", "/"),
            context=ctx,
            resolve=False,
        )
        for obj in parsed.objects:
            objects.setdefault(obj.key_name, obj)
        token_results.extend(parsed.token_results)

    deferred = ctx.resolve_deferred()
    return LoadLstResult(
        context=ctx,
        objects=tuple(objects.values()),
        token_results=tuple(token_results),
        diagnostics=ctx.diagnostics.since(mark),
        deferred=deferred,
    )


def load_lst_directory(
    root: str | Path,
    *,
    pattern: str = "**/*.lst",
    context: LoadContext | None = None,
) -> LoadLstResult:
    root_path = Path(root)
    paths = sorted(path for path in root_path.glob(pattern) if path.is_file())
    return load_lst_paths(paths, context=context)


def write_lst_object(context: LoadContext, obj: DataObject) -> str:
    """Write `obj` back as one LST line from what its tokens recorded."""
    columns = [obj.key_name]
    for token_name, token in context.tokens.items():
        values = token.unparse(context, obj)
        if not values:
            continue
        columns.extend(f"{token_name}{TOKEN_SEPARATOR}{value}" for value in values)
    return COLUMN_SEPARATOR.join(columns)


def _load_line(context: LoadContext, line: str) -> tuple[DataObject | None, list[TokenParseResult]]:
    columns = [column.strip() for column in line.split(COLUMN_SEPARATOR)]
    key_name = columns[0]
    if not key_name or TOKEN_SEPARATOR in key_name:
        context.diagnostics.report(LST_MALFORMED_COLUMN, f"No object name before `{line.strip()}`.")
        return None, []

    columns = [column for column in columns[1:] if column]
    obj = context.get_or_create_object(key_name)

    results: list[TokenParseResult] = []
    for column in columns:
        token_name, separator, value = column.partition(TOKEN_SEPARATOR)
        if not separator or not token_name:
            context.diagnostics.report(LST_MALFORMED_COLUMN, f"Got `{column}` on `{obj.key_name}`.")
            continue
        results.append(context.parse_token(obj, token_name, value))
    return obj, results
