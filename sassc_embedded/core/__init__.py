"""Core abstractions shared by the compatibility layer."""

from sassc_embedded.core.errors import (
    CompilerNotFoundError,
    ImportSyntaxError,
    SasscEmbeddedError,
    TransformationError,
    ValueConversionError,
)
from sassc_embedded.core.logging import get_logger, setup_logging


__all__ = [
    "CompilerNotFoundError",
    "ImportSyntaxError",
    "SasscEmbeddedError",
    "TransformationError",
    "ValueConversionError",
    "get_logger",
    "setup_logging",
]
