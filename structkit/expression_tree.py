"""Expression trees built from single-digit postfix expressions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable


def _truncating_divide(left: int, right: int) -> int:
    if right == 0:
        raise ZeroDivisionError("division by zero in expression")
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


_OPERATORS: dict[str, Callable[[int, int], int]] = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": _truncating_divide,
}


@dataclass(eq=False)
class ExprNode:
    """A digit leaf or an operator with two operands."""

    symbol: str
    left: ExprNode | None = field(default=None, repr=False)
    right: ExprNode | None = field(default=None, repr=False)


def build_expression_tree(postfix: str) -> ExprNode:
    """Tree of a postfix expression of single digits and ``+ - * /``."""
    stack: list[ExprNode] = []
    for symbol in postfix:
        if symbol.isdigit():
            stack.append(ExprNode(symbol))
        elif symbol in _OPERATORS:
            if len(stack) < 2:
                raise ValueError(f"operator {symbol!r} lacks operands")
            right = stack.pop()
            left = stack.pop()
            stack.append(ExprNode(symbol, left, right))
        else:
            raise ValueError(f"unexpected symbol {symbol!r} in expression")
    if not stack:
        raise ValueError("empty expression")
    return stack.pop()


def evaluate_tree(node: ExprNode) -> int:
    """Integer value of the tree; division truncates toward zero."""
    operation = _OPERATORS.get(node.symbol)
    if operation is None:
        return int(node.symbol)
    if node.left is None or node.right is None:
        raise ValueError(f"operator {node.symbol!r} lacks operands")
    return operation(evaluate_tree(node.left), evaluate_tree(node.right))


def evaluate_postfix_tree(postfix: str) -> int:
    """Build the expression tree of ``postfix`` and evaluate it."""
    return evaluate_tree(build_expression_tree(postfix))