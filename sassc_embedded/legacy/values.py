"""Value types of the legacy script API.

``None`` stands for the legacy null value. Every other variant is a small
hashable class that compares by content, so maps can key on them.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import Any


class Value:
    """Base class for legacy script values."""

    def _key(self) -> tuple[Any, ...]:
        raise NotImplementedError

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._key() == other._key()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._key()))

    def __repr__(self) -> str:
        return f"{type(self).__name__}{self._key()!r}"


class Bool(Value):
    def __init__(self, value: bool):
        self.value = bool(value)

    def to_bool(self) -> bool:
        return self.value

    def _key(self) -> tuple[Any, ...]:
        return (self.value,)


class Color(Value):
    """A color built from either RGBA or HSLA channels, never both."""

    def __init__(
        self,
        red: float | None = None,
        green: float | None = None,
        blue: float | None = None,
        hue: float | None = None,
        saturation: float | None = None,
        lightness: float | None = None,
        alpha: float = 1,
    ):
        rgb = (red, green, blue)
        hsl = (hue, saturation, lightness)
        if all(c is not None for c in rgb) and all(c is None for c in hsl):
            self._mode = "rgba"
        elif all(c is not None for c in hsl) and all(c is None for c in rgb):
            self._mode = "hsla"
        else:
            raise ValueError("Color needs either red/green/blue or hue/saturation/lightness")

        self.red = red
        self.green = green
        self.blue = blue
        self.hue = hue
        self.saturation = saturation
        self.lightness = lightness
        self.alpha = alpha

    @property
    def rgba(self) -> bool:
        return self._mode == "rgba"

    @property
    def hsla(self) -> bool:
        return self._mode == "hsla"

    def _key(self) -> tuple[Any, ...]:
        if self.rgba:
            return ("rgba", self.red, self.green, self.blue, self.alpha)
        return ("hsla", self.hue, self.saturation, self.lightness, self.alpha)


class List(Value):
    COMMA = "comma"
    SPACE = "space"

    def __init__(
        self,
        elements: Iterable[Any],
        separator: str = SPACE,
        bracketed: bool = False,
    ):
        self.elements = tuple(elements)
        self.separator = separator
        self.bracketed = bracketed

    def to_a(self) -> list[Any]:
        return list(self.elements)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.elements)

    def __len__(self) -> int:
        return len(self.elements)

    def _key(self) -> tuple[Any, ...]:
        return (self.elements, self.separator, self.bracketed)


class Map(Value):
    def __init__(self, value: Mapping[Any, Any]):
        self.value = dict(value)

    def _key(self) -> tuple[Any, ...]:
        return (tuple(self.value.items()),)


class Number(Value):
    def __init__(
        self,
        value: float,
        numerator_units: Sequence[str] | str = (),
        denominator_units: Sequence[str] | str = (),
    ):
        self.value = value
        self.numerator_units = _units(numerator_units)
        self.denominator_units = _units(denominator_units)

    @property
    def unitless(self) -> bool:
        return not self.numerator_units and not self.denominator_units

    def _key(self) -> tuple[Any, ...]:
        return (self.value, tuple(self.numerator_units), tuple(self.denominator_units))


class String(Value):
    STRING = "string"
    IDENTIFIER = "identifier"

    def __init__(self, value: str, type: str = IDENTIFIER):  # noqa: A002
        self.value = value
        self.type = type

    @property
    def quoted(self) -> bool:
        return self.type == self.STRING

    def _key(self) -> tuple[Any, ...]:
        return (self.value, self.type)


def _units(units: Sequence[str] | str) -> list[str]:
    if isinstance(units, str):
        return [units] if units else []
    return list(units)


__all__ = ["Bool", "Color", "List", "Map", "Number", "String", "Value"]
