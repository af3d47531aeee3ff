"""Value types exchanged with the protocol compiler."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Literal


ListSeparator = Literal[",", " ", "/"] | None


class SassValue:
    """Base class for protocol values."""


@dataclass(frozen=True, slots=True)
class SassNull(SassValue):
    pass


NULL = SassNull()


@dataclass(frozen=True, slots=True)
class SassBoolean(SassValue):
    value: bool

    def to_bool(self) -> bool:
        return self.value


TRUE = SassBoolean(True)
FALSE = SassBoolean(False)


@dataclass(frozen=True, slots=True, kw_only=True)
class SassColor(SassValue):
    """A color in either the RGB or the HSL space.

    Exactly one channel set must be given; ``has_hue`` tells which.
    """

    red: float | None = None
    green: float | None = None
    blue: float | None = None
    hue: float | None = None
    saturation: float | None = None
    lightness: float | None = None
    alpha: float = 1

    def __post_init__(self) -> None:
        rgb = (self.red, self.green, self.blue)
        hsl = (self.hue, self.saturation, self.lightness)
        rgb_set = all(c is not None for c in rgb) and all(c is None for c in hsl)
        hsl_set = all(c is not None for c in hsl) and all(c is None for c in rgb)
        if not (rgb_set or hsl_set):
            raise ValueError(
                "SassColor needs either red/green/blue or hue/saturation/lightness"
            )
        if not 0 <= self.alpha <= 1:
            raise ValueError(f"alpha must be between 0 and 1, got {self.alpha}")

    @property
    def has_hue(self) -> bool:
        return self.hue is not None


@dataclass(frozen=True, slots=True)
class SassList(SassValue):
    contents: tuple[SassValue, ...] = ()
    separator: ListSeparator = ","
    bracketed: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "contents", tuple(self.contents))

    def __iter__(self) -> Iterator[SassValue]:
        return iter(self.contents)

    def __len__(self) -> int:
        return len(self.contents)


@dataclass(frozen=True, slots=True, eq=False)
class SassMap(SassValue):
    contents: Mapping[SassValue, SassValue] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "contents", dict(self.contents))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SassMap):
            return NotImplemented
        return list(self.contents.items()) == list(other.contents.items())

    def __hash__(self) -> int:
        return hash(tuple(self.contents.items()))


@dataclass(frozen=True, slots=True)
class SassNumber(SassValue):
    value: float
    numerator_units: tuple[str, ...] = ()
    denominator_units: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "numerator_units", tuple(self.numerator_units))
        object.__setattr__(self, "denominator_units", tuple(self.denominator_units))


@dataclass(frozen=True, slots=True)
class SassString(SassValue):
    text: str
    quoted: bool = True


__all__ = [
    "FALSE",
    "NULL",
    "TRUE",
    "ListSeparator",
    "SassBoolean",
    "SassColor",
    "SassList",
    "SassMap",
    "SassNull",
    "SassNumber",
    "SassString",
    "SassValue",
]
