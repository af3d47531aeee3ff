"""Legacy synchronous Sass API on top of a protocol-based compiler."""

from sassc_embedded.config.settings import load_paths
from sassc_embedded.engine import Engine
from sassc_embedded.legacy import values
from sassc_embedded.legacy.errors import (
    BaseError,
    InvalidStyleError,
    NotRenderedError,
    SassSyntaxError,
)
from sassc_embedded.legacy.functions import Functions
from sassc_embedded.legacy.importer import Import, Importer
from sassc_embedded.protocol.compiler import (
    CompileError,
    Compiler,
    get_default_compiler,
    set_default_compiler,
)


__version__ = "0.1.0"

__all__ = [
    "BaseError",
    "CompileError",
    "Compiler",
    "Engine",
    "Functions",
    "Import",
    "Importer",
    "InvalidStyleError",
    "NotRenderedError",
    "SassSyntaxError",
    "get_default_compiler",
    "load_paths",
    "set_default_compiler",
    "values",
]
