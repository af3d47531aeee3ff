"""Bidirectional conversion between legacy and protocol values.

``to_native`` turns a legacy value into its protocol counterpart and
``from_native`` goes the other way. Both are total over the supported
variants; anything else raises :class:`ValueConversionError`.
"""

from __future__ import annotations

from typing import Any

from sassc_embedded.core.errors import ValueConversionError
from sassc_embedded.legacy import values as legacy
from sassc_embedded.protocol import values as protocol


_LEGACY_TO_NATIVE_SEPARATOR = {
    legacy.List.COMMA: ",",
    legacy.List.SPACE: " ",
}
_NATIVE_TO_LEGACY_SEPARATOR = {
    native: name for name, native in _LEGACY_TO_NATIVE_SEPARATOR.items()
}


def to_native(value: Any) -> protocol.SassValue:
    """Convert a legacy value to a protocol value."""
    if value is None:
        return protocol.NULL

    if isinstance(value, legacy.Bool):
        return protocol.TRUE if value.to_bool() else protocol.FALSE

    if isinstance(value, legacy.Color):
        if value.rgba:
            return protocol.SassColor(
                red=value.red,
                green=value.green,
                blue=value.blue,
                alpha=value.alpha,
            )
        if value.hsla:
            return protocol.SassColor(
                hue=value.hue,
                saturation=value.saturation,
                lightness=value.lightness,
                alpha=value.alpha,
            )
        raise ValueConversionError("Color carries neither rgba nor hsla channels", data=value)

    if isinstance(value, legacy.List):
        separator = _LEGACY_TO_NATIVE_SEPARATOR.get(value.separator)
        if separator is None:
            raise ValueConversionError(
                f"Unsupported list separator: {value.separator!r}", data=value
            )
        return protocol.SassList(
            tuple(to_native(element) for element in value.to_a()),
            separator=separator,
            bracketed=bool(value.bracketed),
        )

    if isinstance(value, legacy.Map):
        return protocol.SassMap(
            {to_native(k): to_native(v) for k, v in value.value.items()}
        )

    if isinstance(value, legacy.Number):
        return protocol.SassNumber(
            value.value,
            numerator_units=tuple(value.numerator_units),
            denominator_units=tuple(value.denominator_units),
        )

    if isinstance(value, legacy.String):
        return protocol.SassString(value.value, quoted=value.type != legacy.String.IDENTIFIER)

    raise ValueConversionError(
        f"Cannot convert {type(value).__name__} to a protocol value", data=value
    )


def from_native(value: Any) -> Any:
    """Convert a protocol value to a legacy value (``None`` for null)."""
    if isinstance(value, protocol.SassNull):
        return None

    if isinstance(value, protocol.SassBoolean):
        return legacy.Bool(value.to_bool())

    if isinstance(value, protocol.SassColor):
        if value.has_hue:
            return legacy.Color(
                hue=value.hue,
                saturation=value.saturation,
                lightness=value.lightness,
                alpha=value.alpha,
            )
        return legacy.Color(
            red=value.red,
            green=value.green,
            blue=value.blue,
            alpha=value.alpha,
        )

    if isinstance(value, protocol.SassList):
        separator = _NATIVE_TO_LEGACY_SEPARATOR.get(value.separator)
        if separator is None:
            raise ValueConversionError(
                f"Unsupported list separator: {value.separator!r}", data=value
            )
        return legacy.List(
            [from_native(element) for element in value.contents],
            separator=separator,
            bracketed=value.bracketed,
        )

    if isinstance(value, protocol.SassMap):
        return legacy.Map(
            {from_native(k): from_native(v) for k, v in value.contents.items()}
        )

    if isinstance(value, protocol.SassNumber):
        return legacy.Number(
            value.value,
            list(value.numerator_units),
            list(value.denominator_units),
        )

    if isinstance(value, protocol.SassString):
        return legacy.String(
            value.text,
            legacy.String.STRING if value.quoted else legacy.String.IDENTIFIER,
        )

    raise ValueConversionError(
        f"Cannot convert {type(value).__name__} to a legacy value", data=value
    )


__all__ = ["from_native", "to_native"]
