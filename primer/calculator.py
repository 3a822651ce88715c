"""A four-operation calculator."""

from __future__ import annotations

import operator as _operator


class CalculatorError(ValueError):
    """Raised for an unknown operator or a division by zero."""


_OPERATIONS = {
    "+": _operator.add,
    "-": _operator.sub,
    "*": _operator.mul,
    "/": _operator.truediv,
}


def calculate(operator: str, a: float, b: float) -> float:
    """Apply one of ``+ - * /`` to ``a`` and ``b``."""
    operation = _OPERATIONS.get(operator)
    if operation is None:
        raise CalculatorError("Invalid operator")
    if operator == "/" and b == 0:
        raise CalculatorError("Division by zero not allowed")
    return float(operation(a, b))