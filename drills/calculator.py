"""Four-function arithmetic on two numbers."""

from __future__ import annotations

import operator

_OPERATIONS = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
}


def calculate(op: str, n1: float, n2: float) -> float:
    """Apply the operator ``op`` (one of ``+ - * /``) to ``n1`` and ``n2``.

    Raises ``ZeroDivisionError`` for division by zero and ``ValueError``
    for an unknown operator.
    """
    try:
        operation = _OPERATIONS[op]
    except KeyError:
        raise ValueError("Invalid Input!") from None
    if op == "/" and n2 == 0:
        raise ZeroDivisionError("Division by zero is not possible!")
    return operation(n1, n2)


def format_calculation(op: str, n1: float, n2: float) -> str:
    """Compute and render the result as ``'Result : a op b = r'``."""
    result = calculate(op, n1, n2)
    return f"Result : {n1:.2f} {op} {n2:.2f} = {result:.2f}"