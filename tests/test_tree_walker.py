"""
Tests for pre-order walking of typed expression trees.
"""

from conftest import new_class, static_call
from keysafe.core.tree_walker import child_expressions, walk, walk_unit
from keysafe.models.tree_models import CompilationUnit, OtherExpression, SourcePosition


def test_walk_is_pre_order():
    inner = new_class("java.util.HashSet", None, line=3)
    middle = static_call("a.B", "wrap", None, line=2, arguments=[inner])
    sibling = OtherExpression(position=SourcePosition(line=4))
    root = OtherExpression(position=SourcePosition(line=1), children=[middle, sibling])
    assert [e.position.line for e in walk(root)] == [1, 2, 3, 4]


def test_walk_unit_visits_all_top_level_expressions():
    unit = CompilationUnit(
        file_path="A.java",
        expressions=[
            new_class("java.util.HashSet", None, line=1),
            new_class("java.util.HashMap", None, line=2, arguments=[new_class("x.Y", None, line=3)]),
        ],
    )
    assert [e.position.line for e in walk_unit(unit)] == [1, 2, 3]


def test_child_expressions_per_variant():
    leaf = new_class("java.util.HashSet", None, line=2)
    call = static_call("a.B", "wrap", None, arguments=[leaf])
    other = OtherExpression(position=SourcePosition(line=1), children=[call])
    assert child_expressions(other) == [call]
    assert child_expressions(call) == [leaf]
    assert child_expressions(leaf) == []
