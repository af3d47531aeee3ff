"""Adapters translating between the legacy API and the protocol compiler."""

from .functions_handler import CustomFunctionError, FunctionContext, FunctionsHandler
from .import_handler import FileImporter, ImportHandler, Importer
from .value_conversion import from_native, to_native


__all__ = [
    "CustomFunctionError",
    "FileImporter",
    "FunctionContext",
    "FunctionsHandler",
    "ImportHandler",
    "Importer",
    "from_native",
    "to_native",
]
