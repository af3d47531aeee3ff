"""The legacy in-process API shapes this package imitates."""

from . import values
from .errors import (
    OUTPUT_STYLES,
    BaseError,
    InvalidStyleError,
    NotRenderedError,
    SassSyntaxError,
)
from .functions import Functions, custom_functions, formatted_function_name
from .importer import Import, Importer


__all__ = [
    "OUTPUT_STYLES",
    "BaseError",
    "Functions",
    "Import",
    "Importer",
    "InvalidStyleError",
    "NotRenderedError",
    "SassSyntaxError",
    "custom_functions",
    "formatted_function_name",
    "values",
]
