"""Core error types for the compatibility layer."""

from typing import Any


class SasscEmbeddedError(Exception):
    """Root of the adapter's own failures.

    ``cause`` is kept as an attribute and as ``__cause__`` so tracebacks show
    the compiler or legacy-API error underneath.
    """

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message)
        self.message = message
        self.cause = cause
        if cause:
            self.__cause__ = cause


class TransformationError(SasscEmbeddedError):
    """A legacy object could not be mapped onto its protocol shape, or back.

    These are bugs in the caller's values or importer output, never compile
    errors. ``data`` holds the offending object.
    """

    def __init__(self, message: str, data: Any = None, cause: Exception | None = None):
        super().__init__(message, cause)
        self.data = data


class ValueConversionError(TransformationError, TypeError):
    """Raised for a value outside the supported legacy/protocol variants."""


class ImportSyntaxError(TransformationError, ValueError):
    """Raised when an imported path has no recognised stylesheet extension."""


class CompilerNotFoundError(SasscEmbeddedError):
    """Raised when no compiler backend is configured or discoverable."""
