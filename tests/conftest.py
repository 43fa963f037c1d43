"""
Test fixtures shared across all keysafe tests.
"""

import pytest

from keysafe.models.tree_models import (
    CompilationUnit,
    MethodInvocation,
    MethodSymbol,
    NewClass,
    OtherExpression,
    SourcePosition,
)
from keysafe.models.type_models import array_of, class_type, primitive

STRING = class_type("java.lang.String")
INTEGER = class_type("java.lang.Integer")


def new_class(name, result_type, line=1, **kwargs):
    return NewClass(
        constructed_class=name,
        result_type=result_type,
        position=SourcePosition(line=line),
        **kwargs,
    )


def static_call(owner, name, result_type, line=1, **kwargs):
    return MethodInvocation(
        method=MethodSymbol(owner=owner, name=name, is_static=True),
        result_type=result_type,
        position=SourcePosition(line=line),
        **kwargs,
    )


@pytest.fixture
def array_key_unit():
    """A unit with one array-keyed construction per recognized site."""
    return CompilationUnit(
        file_path="src/main/java/com/example/Cache.java",
        package="com.example",
        expressions=[
            static_call(
                "com.google.common.collect.Sets", "newHashSet",
                class_type("java.util.HashSet", array_of(primitive("byte"))),
                line=10, source="Sets.newHashSet()",
            ),
            static_call(
                "com.google.common.collect.Maps", "newHashMap",
                class_type("java.util.HashMap", array_of(STRING), INTEGER),
                line=11, source="Maps.newHashMap()",
            ),
            new_class(
                "java.util.HashMap",
                class_type("java.util.HashMap", array_of(primitive("int")), STRING),
                line=12, source="new HashMap<>()",
            ),
            new_class(
                "java.util.HashSet",
                class_type("java.util.HashSet", array_of(array_of(primitive("char")))),
                line=13, source="new HashSet<char[][]>()",
            ),
        ],
    )


@pytest.fixture
def clean_unit():
    """A unit with hash collections keyed by non-array types."""
    return CompilationUnit(
        file_path="src/main/java/com/example/Clean.java",
        package="com.example",
        expressions=[
            new_class(
                "java.util.HashMap",
                class_type("java.util.HashMap", STRING, array_of(primitive("int"))),
                line=5,
            ),
            new_class("java.util.HashSet", class_type("java.util.HashSet"), line=6),
            new_class(
                "java.util.ArrayList",
                class_type("java.util.ArrayList", array_of(primitive("byte"))),
                line=7,
            ),
            OtherExpression(
                result_type=STRING,
                position=SourcePosition(line=8),
                source="name",
            ),
        ],
    )
