"""Contract of the protocol-based compiler service.

The compiler itself lives outside this package. A backend implements
:class:`Compiler` and is either passed to the engine, registered with
:func:`set_default_compiler`, or advertised through the
``sassc_embedded.compilers`` entry point group.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from importlib.metadata import entry_points
from typing import Any, Literal, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field

from sassc_embedded.core.errors import CompilerNotFoundError
from sassc_embedded.core.logging import get_logger

from .values import SassValue


logger = get_logger(__name__)

Syntax = Literal["scss", "indented", "css"]
OutputStyle = Literal["expanded", "compressed"]
HostFunction = Callable[[Sequence[SassValue]], SassValue]

ENTRY_POINT_GROUP = "sassc_embedded.compilers"


class CompileOptions(BaseModel):
    """Everything a single ``compile_string`` request carries."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    source: str
    syntax: Syntax = "scss"
    url: str | None = None
    importer: Any = None
    load_paths: list[str] = Field(default_factory=list)
    style: OutputStyle = "expanded"

    source_map: bool = False
    source_map_include_sources: bool = False

    functions: dict[str, HostFunction] = Field(default_factory=dict)
    importers: list[Any] = Field(default_factory=list)

    alert_ascii: bool = False
    alert_color: bool | None = None
    logger: Any = None
    quiet_deps: bool = False
    verbose: bool = False


class CompileResult(BaseModel):
    css: str
    source_map: str | None = None
    loaded_urls: list[str] = Field(default_factory=list)


@dataclass(frozen=True, slots=True)
class SourceLocation:
    offset: int
    line: int  # 0-based
    column: int


@dataclass(frozen=True, slots=True)
class SourceSpan:
    start: SourceLocation
    end: SourceLocation | None = None
    url: str | None = None
    text: str = ""


class CompileError(Exception):
    """A stylesheet failed to compile."""

    def __init__(self, message: str, span: SourceSpan | None = None):
        super().__init__(message)
        self.message = message
        self.span = span


class ScriptError(Exception):
    """An error raised by a host callback, reported against the call site."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def full_message(self) -> str:
        return self.message


@runtime_checkable
class Compiler(Protocol):
    def compile_string(self, options: CompileOptions) -> CompileResult:
        """Compile ``options.source``; raise :class:`CompileError` on failure."""
        ...


_default_compiler: Compiler | None = None


def set_default_compiler(compiler: Compiler | None) -> None:
    """Replace the process-wide compiler (``None`` restores discovery)."""
    global _default_compiler
    _default_compiler = compiler


def get_default_compiler() -> Compiler:
    """Return the registered compiler, discovering one on first use."""
    global _default_compiler
    if _default_compiler is None:
        _default_compiler = _discover_compiler()
    return _default_compiler


def _discover_compiler() -> Compiler:
    for entry_point in entry_points(group=ENTRY_POINT_GROUP):
        factory_or_compiler = entry_point.load()
        compiler = (
            factory_or_compiler()
            if isinstance(factory_or_compiler, type)
            else factory_or_compiler
        )
        if isinstance(compiler, Compiler):
            logger.debug("compiler_discovered", entry_point=entry_point.name)
            return compiler
        logger.warning(
            "compiler_entry_point_ignored",
            entry_point=entry_point.name,
            reason="object does not implement compile_string",
        )

    raise CompilerNotFoundError(
        f"No compiler configured; call set_default_compiler() or install a "
        f"package providing the '{ENTRY_POINT_GROUP}' entry point"
    )
