"""Shapes of the protocol-based compiler service."""

from .compiler import (
    CompileError,
    CompileOptions,
    CompileResult,
    Compiler,
    HostFunction,
    OutputStyle,
    ScriptError,
    SourceLocation,
    SourceSpan,
    Syntax,
    get_default_compiler,
    set_default_compiler,
)
from .importers import FileUrlImporter, ImporterResult, StylesheetImporter
from .values import (
    FALSE,
    NULL,
    TRUE,
    SassBoolean,
    SassColor,
    SassList,
    SassMap,
    SassNull,
    SassNumber,
    SassString,
    SassValue,
)


__all__ = [
    "FALSE",
    "NULL",
    "TRUE",
    "CompileError",
    "CompileOptions",
    "CompileResult",
    "Compiler",
    "FileUrlImporter",
    "HostFunction",
    "ImporterResult",
    "OutputStyle",
    "SassBoolean",
    "SassColor",
    "SassList",
    "SassMap",
    "SassNull",
    "SassNumber",
    "SassString",
    "SassValue",
    "ScriptError",
    "SourceLocation",
    "SourceSpan",
    "StylesheetImporter",
    "Syntax",
    "get_default_compiler",
    "set_default_compiler",
]
