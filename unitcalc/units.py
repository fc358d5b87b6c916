"""Linear unit conversions."""

from __future__ import annotations

from dataclasses import dataclass


def _fmt(value: float) -> str:
    return f"{value:g}"


@dataclass(frozen=True)
class Conversion:
    """A linear conversion from one unit to another.

    By default the value is scaled, then shifted: ``value * factor + offset``.
    With ``shift_first`` the offset is applied first: ``(value + offset) * factor``.
    """

    first_unit: str
    second_unit: str
    factor: float = 1.0
    offset: float = 0.0
    shift_first: bool = False

    @property
    def label(self) -> str:
        return f"{self.first_unit} to {self.second_unit}"

    def apply(self, value: float) -> float:
        """Return the converted value."""
        if self.shift_first:
            return (value + self.offset) * self.factor
        return value * self.factor + self.offset

    def describe(self, value: float) -> str:
        """Return a line such as '1 Meter = 3.28084 Feet'."""
        result = self.apply(value)
        return f"{_fmt(value)} {self.first_unit} = {_fmt(result)} {self.second_unit}"


def convert(first_unit: str, second_unit: str, value: float, factor: float, offset: float) -> float:
    """Return ``value * factor + offset``."""
    return Conversion(first_unit, second_unit, factor, offset).apply(value)


def convert_by_offset(
    first_unit: str, second_unit: str, value: float, factor: float, offset: float
) -> float:
    """Return ``(value + offset) * factor``."""
    return Conversion(first_unit, second_unit, factor, offset, shift_first=True).apply(value)