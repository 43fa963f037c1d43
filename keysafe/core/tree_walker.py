"""
Tree Walker — Pre-order traversal of typed expression trees.
"""

from __future__ import annotations

from typing import Iterator

from keysafe.models.tree_models import CompilationUnit, Expression, OtherExpression


def child_expressions(expr: Expression) -> list[Expression]:
    if isinstance(expr, OtherExpression):
        return expr.children
    return expr.arguments


def walk(expr: Expression) -> Iterator[Expression]:
    """Yield expr and every nested expression, parents before children."""
    stack = [expr]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(child_expressions(node)))


def walk_unit(unit: CompilationUnit) -> Iterator[Expression]:
    for expr in unit.expressions:
        yield from walk(expr)
