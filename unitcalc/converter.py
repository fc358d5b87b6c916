"""Interactive physical unit converter with a fixed menu of conversions."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from dataclasses import dataclass

from unitcalc.units import Conversion


@dataclass(frozen=True)
class Category:
    """A named group of conversions offered together in the menu."""

    title: str
    conversions: tuple[Conversion, ...]


_CATEGORIES: tuple[Category, ...] = (
    Category(
        "Temperature",
        (
            Conversion("Celsius", "Fahrenheit", 1.8, 32),
            Conversion("Fahrenheit", "Celsius", 0.555556, -32, shift_first=True),
            Conversion("Celsius", "Kelvin", 1, 273),
            Conversion("Kelvin", "Celsius", 1, -273),
            Conversion("Kelvin", "Fahrenheit", 1.8, -459.4),
            Conversion("Fahrenheit", "Kelvin", 0.555556, -32, shift_first=True),
        ),
    ),
    Category(
        "Length",
        (
            Conversion("Meter", "Feet", 3.28084),
            Conversion("Feet", "Meter", 0.3048),
            Conversion("Meter", "Yard", 1.0936132983),
            Conversion("Yard", "Meter", 0.9144),
            Conversion("Kilometer", "Mile", 0.6214),
            Conversion("Mile", "Kilometer", 1.609344),
            Conversion("Centimeter", "Standard Reference Banana", 1 / 18.55236432),
        ),
    ),
    Category(
        "Area",
        (
            Conversion("Square Meter", "Square Feet", 10.7639),
            Conversion("Square Feet", "Square Meter", 0.092903),
            Conversion("Square Meter", "Square Yard", 1.19599),
            Conversion("Square Yard", "Square Meter", 0.83613),
            Conversion("Square Kilometer", "Square Mile", 0.386102),
            Conversion("Square Mile", "Square Kilometer", 2.5899),
            Conversion("Square Kilometer", "Hectare", 100),
            Conversion("Square Meter", "Football fields", 0.00714),
        ),
    ),
    Category(
        "Mass",
        (
            Conversion("Kilogram", "Pound", 2.2046226218),
            Conversion("Pound", "Kilogram", 1 / 2.2046226218),
            Conversion("Gram", "Ounce", 0.03527396195),
            Conversion("Ounce", "Gram", 1 / 0.03527396195),
        ),
    ),
    Category(
        "Velocity",
        (
            Conversion("m/s", "ft/s", 3.28084),
            Conversion("ft/s", "m/s", 1 / 3.28084),
            Conversion("km/h", "m/s", 5 / 18),
            Conversion("m/s", "km/h", 3.6),
            Conversion("Knot", "km/h", 1.852),
            Conversion("km/h", "Knot", 1 / 1.852),
        ),
    ),
    Category(
        "Pressure",
        (
            Conversion("atm", "Pa", 101325),
            Conversion("Pa", "atm", 0.000009869233),
            Conversion("kgf/cm2", "Pa", 98066.5),
            Conversion("Pa", "kgf/cm2", 1 / 98066.5),
        ),
    ),
    Category(
        "Energy",
        (
            Conversion("Joules", "Calories", 0.23900574),
            Conversion("Calories", "Joules", 1 / 0.23900574),
            Conversion("Joules", "Watt-Hour", 1 / 3600),
            Conversion("Watt-Hour", "Joules", 3600),
        ),
    ),
    Category(
        "Power",
        (
            Conversion("Horse power", "kiloWatt", 0.74569987),
            Conversion("kiloWatt", "Horse power", 1.34102209),
        ),
    ),
)


def categories() -> list[Category]:
    """Return the menu categories in display order."""
    return list(_CATEGORIES)


def find_conversion(category: int, choice: int) -> Conversion:
    """Return the conversion at 1-based menu positions; raise LookupError if absent."""
    if not 1 <= category <= len(_CATEGORIES):
        raise LookupError(f"no unit category {category}")
    conversions = _CATEGORIES[category - 1].conversions
    if not 1 <= choice <= len(conversions):
        raise LookupError(f"no conversion {choice} in category {category}")
    return conversions[choice - 1]


def _ask(prompt: str) -> str:
    print(prompt, end="")
    return input().strip()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the converter; values not given on the command line are asked for."""
    parser = argparse.ArgumentParser(description="Convert between physical units.")
    parser.add_argument("category", type=int, nargs="?")
    parser.add_argument("choice", type=int, nargs="?")
    parser.add_argument("value", type=float, nargs="?")
    args = parser.parse_args(sys.argv[1:] if argv is None else list(argv))

    try:
        category = args.category
        if category is None:
            print("Select the type of unit to convert:")
            for number, cat in enumerate(_CATEGORIES, start=1):
                print(f"{number}. {cat.title}")
            category = int(_ask(""))
        if not 1 <= category <= len(_CATEGORIES):
            print("Invalid selection.")
            return 1

        choice = args.choice
        if choice is None:
            print("Select the conversion: ")
            for number, conv in enumerate(_CATEGORIES[category - 1].conversions, start=1):
                print(f"{number}. {conv.label}")
            choice = int(_ask(""))
        conversion = find_conversion(category, choice)

        value = args.value
        if value is None:
            value = float(_ask("Enter the value to convert: "))
    except LookupError:
        print("Invalid selection.")
        return 1
    except (ValueError, EOFError):
        print("Invalid input.")
        return 1

    print(conversion.describe(value))
    return 0


if __name__ == "__main__":
    sys.exit(main())