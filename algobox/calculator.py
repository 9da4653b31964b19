"""The four basic arithmetic operations chosen by an operator symbol."""

from __future__ import annotations

import operator as _op

__all__ = ["calculate"]

_OPERATIONS = {
    "+": _op.add,
    "-": _op.sub,
    "*": _op.mul,
    "/": _op.truediv,
}


def calculate(operator: str, a: float, b: float) -> float:
    """Apply operator ('+', '-', '*' or '/') to a and b.

    Raises ZeroDivisionError when dividing by zero and ValueError for an
    operator it does not recognise.
    """
    try:
        operation = _OPERATIONS[operator]
    except KeyError:
        raise ValueError(f"Cannot recognise the operator {operator!r}") from None
    if operator == "/" and b == 0:
        raise ZeroDivisionError("division with denominator zero")
    return float(operation(float(a), float(b)))