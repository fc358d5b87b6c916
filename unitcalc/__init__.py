"""Combinations and arrangements, and linear physical unit conversions."""

__version__ = "0.1.0"
__all__ = ["combinatorics", "converter", "units"]