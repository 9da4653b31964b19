"""Classic algorithms and small exercises as plain Python functions."""

__version__ = "0.1.0"

__all__ = [
    "arithmetic",
    "bst",
    "calculator",
    "combinatorics",
    "conversions",
    "fifo",
    "games",
    "matrix",
    "misc",
    "roots",
    "searching",
    "sorting",
    "text",
]