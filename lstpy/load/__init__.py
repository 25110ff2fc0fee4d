"""Load passes over LST data."""

from lstpy.load.context import (
    DeferredRegistry,
    DeferredRunResult,
    LoadContext,
    LoadOptions,
    ObjectContext,
)
from lstpy.load.lst import (
    LoadLstResult,
    load_lst_directory,
    load_lst_file,
    load_lst_paths,
    load_lst_text,
    write_lst_object,
)

__all__ = [
    "DeferredRegistry",
    "DeferredRunResult",
    "LoadContext",
    "LoadLstResult",
    "LoadOptions",
    "ObjectContext",
    "load_lst_directory",
    "load_lst_file",
    "load_lst_paths",
    "load_lst_text",
    "write_lst_object",
]
