"""Shared state for one load pass."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from lstpy.diagnostics import LST_UNKNOWN_TOKEN, DiagnosticSink
from lstpy.objects import (
    DEFAULT_SIZE_TABLE,
    DataObject,
    ListKey,
    ObjectKey,
    ReferenceContext,
    SizeTable,
    TypePolicy,
    TypeRegistry,
)
from lstpy.tokens import (
    DeferredToken,
    LstToken,
    TokenParseResult,
    default_tokens,
    validate_tokens,
)


@dataclass(frozen=True, slots=True)
class LoadOptions:
    """Knobs for a load pass.

    With `type_policy="closed"` only `known_types` (plus `Natural`) may appear
    in type paths; anything else is reported as an unknown type.
    """

    type_policy: TypePolicy = "open"
    known_types: frozenset[str] = frozenset()
    size_table: SizeTable = DEFAULT_SIZE_TABLE

    def build_type_registry(self) -> TypeRegistry:
        if self.type_policy == "closed":
            return TypeRegistry.closed(sorted(self.known_types))
        registry = TypeRegistry()
        for name in sorted(self.known_types):
            registry.intern(name)
        return registry


@dataclass(slots=True)
class ObjectContext:
    """Writes to data objects, remembering what each object was given.

    The writer only emits what was recorded here, so values that reach an
    object by other routes are not written back out.
    """

    _added: dict[tuple[DataObject, ListKey], list[Any]] = field(default_factory=dict)
    _put: dict[tuple[DataObject, ObjectKey], Any] = field(default_factory=dict)

    def add_to_list(self, obj: DataObject, key: ListKey, item: Any) -> None:
        obj.add_to_list(key, item)
        self._added.setdefault((obj, key), []).append(item)

    def list_changes(self, obj: DataObject, key: ListKey) -> tuple[Any, ...]:
        return tuple(self._added.get((obj, key), ()))

    def put(self, obj: DataObject, key: ObjectKey, value: Any) -> None:
        obj.put(key, value)
        self._put[(obj, key)] = value

    def get_put(self, obj: DataObject, key: ObjectKey) -> Any | None:
        return self._put.get((obj, key))


@dataclass(frozen=True, slots=True)
class _PendingAction:
    token: DeferredToken
    obj: DataObject
    source_path: str | None
    line: int | None


@dataclass(frozen=True, slots=True)
class DeferredRunResult:
    processed: int
    failed: tuple[str, ...]


@dataclass(slots=True)
class DeferredRegistry:
    """Per-object second-phase actions, each run once after loading."""

    _pending: dict[tuple[str, DataObject], _PendingAction] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self._pending)

    def register(
        self,
        token: DeferredToken,
        obj: DataObject,
        *,
        source_path: str | None = None,
        line: int | None = None,
    ) -> None:
        key = (token.token_name, obj)
        if key in self._pending:
            return
        self._pending[key] = _PendingAction(token=token, obj=obj, source_path=source_path, line=line)

    def run(self, context: LoadContext) -> DeferredRunResult:
        pending = tuple(self._pending.values())
        self._pending.clear()

        failed: list[str] = []
        for action in pending:
            with context.diagnostics.located(action.source_path, action.line):
                if not action.token.process(context, action.obj):
                    failed.append(action.obj.key_name)
        return DeferredRunResult(processed=len(pending), failed=tuple(failed))


@dataclass(slots=True)
class LoadContext:
    """Everything tokens read from and write to while loading."""

    options: LoadOptions = field(default_factory=LoadOptions)
    diagnostics: DiagnosticSink = field(default_factory=DiagnosticSink)
    objects: ObjectContext = field(default_factory=ObjectContext)
    references: ReferenceContext = field(default_factory=ReferenceContext)
    deferred: DeferredRegistry = field(default_factory=DeferredRegistry)
    types: TypeRegistry = field(init=False)
    tokens: Mapping[str, LstToken] = field(init=False)
    _data_objects: dict[str, DataObject] = field(default_factory=dict, init=False, repr=False)
    token_handlers: tuple[LstToken, ...] | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self.types = self.options.build_type_registry()
        token_list = self.token_handlers if self.token_handlers is not None else default_tokens()
        validate_tokens(token_list)
        self.tokens = MappingProxyType({token.token_name: token for token in token_list})

    @property
    def size_table(self) -> SizeTable:
        return self.options.size_table

    def get_or_create_object(self, key_name: str) -> DataObject:
        existing = self._data_objects.get(key_name)
        if existing is not None:
            return existing
        created = DataObject(key_name=key_name)
        self._data_objects[key_name] = created
        return created

    def data_objects(self) -> tuple[DataObject, ...]:
        return tuple(self._data_objects.values())

    def parse_token(self, obj: DataObject, token_name: str, value: str) -> TokenParseResult:
        """Dispatch `TOKEN:value` to its handler; unknown tokens only warn."""
        token = self.tokens.get(token_name)
        if token is None:
            mark = len(self.diagnostics)
            self.diagnostics.report(LST_UNKNOWN_TOKEN, f"`{token_name}` on `{obj.key_name}`")
            return TokenParseResult(token_name, value, ok=False, diagnostics=self.diagnostics.since(mark))
        return token.parse(self, obj, value)

    def resolve_deferred(self) -> DeferredRunResult:
        return self.deferred.run(self)
