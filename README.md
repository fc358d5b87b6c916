# unitcalc

Two small console calculators, and the library functions behind them:

- combinations C(n, k) and arrangements A(n, k);
- linear conversions between physical units from a fixed menu.

## Installation

```
pip install .
```

## Commands

### `unitcalc-combinatorics [n] [k] [option]`

Computes C(n, k) (option `1`) or A(n, k) (option `2`) and prints, for example:

```
combination C(5, 2) = 10
```

Any of `n`, `k` and `option` not given on the command line is asked for
interactively. The values must satisfy `n > 1`, `n > k` and `k > 0`; otherwise
the command prints `error` and exits with status 1. An unknown option or
input that is not an integer prints `error!` and exits with status 1.

### `unitcalc-convert [category] [choice] [value]`

Picks a kind of unit by its menu number:

1. Temperature
2. Length
3. Area
4. Mass
5. Velocity
6. Pressure
7. Energy
8. Power

then a conversion within it by its menu number, then the value, and prints a
line such as:

```
1 Meter = 3.28084 Feet
```

Anything not given on the command line is asked for, with the menu shown.
A category or conversion number that does not exist prints
`Invalid selection.`; a value that is not a number prints `Invalid input.`.
Both exit with status 1.

## Library use

```python
from unitcalc.combinatorics import combination, arrangement, factorial
from unitcalc.units import Conversion, convert, convert_by_offset
from unitcalc.converter import categories, find_conversion

combination(5, 2)    # 10
arrangement(5, 2)    # 20
factorial(5)         # 120

convert("Meter", "Feet", 2, 3.28084, 0)                  # value * factor + offset
convert_by_offset("Fahrenheit", "Celsius", 212, 5 / 9, -32)  # (value + offset) * factor

for category in categories():
    print(category.title, [c.label for c in category.conversions])

conversion = find_conversion(2, 1)        # Meter to Feet
conversion.apply(1)                       # 3.28084
conversion.describe(1)                    # '1 Meter = 3.28084 Feet'
```

- `combination` and `arrangement` raise `ValueError` unless `n > 1`,
  `n > k` and `k > 0`; `factorial` raises `ValueError` for negative `n`.
- `Conversion` is a frozen dataclass with `first_unit`, `second_unit`,
  `factor`, `offset` and `shift_first`. By default `apply` computes
  `value * factor + offset`; with `shift_first=True` it computes
  `(value + offset) * factor`, which suits scales that share a step but not a
  zero point. `label` gives `"<first> to <second>"`.
- `categories()` returns the menu categories in display order, each a
  `Category` with a `title` and a tuple of `conversions`.
- `find_conversion(category, choice)` takes 1-based menu numbers and raises
  `LookupError` when either does not exist.

## Limits

Only the conversions in the built-in menu are offered; there is no way to add
units from the command line, and only linear conversions (a factor and an
offset) are supported.

## Tests

```
pip install .[test]
pytest
```