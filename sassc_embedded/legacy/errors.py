"""Errors raised through the legacy API surface."""

from sassc_embedded.core.errors import SasscEmbeddedError


OUTPUT_STYLES = (
    "sass_style_nested",
    "sass_style_expanded",
    "sass_style_compact",
    "sass_style_compressed",
)


class BaseError(SasscEmbeddedError):
    """Base class for errors the legacy API exposes."""


class SassSyntaxError(BaseError):
    """A stylesheet failed to compile.

    Carries the legacy error shape: message, filename relative to the working
    directory and a 1-based line.
    """

    def __init__(
        self,
        message: str,
        filename: str | None = None,
        line: int | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message, cause)
        self.filename = filename
        self.line = line

    @property
    def location(self) -> str | None:
        if self.filename is None:
            return None
        if self.line is None:
            return self.filename
        return f"{self.filename}:{self.line}"


class InvalidStyleError(BaseError):
    """The configured output style is not one of ``OUTPUT_STYLES``."""

    def __init__(self, style: str):
        super().__init__(f"Invalid output style: {style}")
        self.style = style


class NotRenderedError(BaseError):
    """Render state was read before a successful render."""

    def __init__(self, attribute: str):
        super().__init__(f"{attribute} is only available after a successful render")
        self.attribute = attribute
