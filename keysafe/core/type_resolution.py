"""
Type Resolution — Read-only queries over resolved static types.

Rules never inspect the host's type representation directly. They go
through a TypeResolver, which answers three questions: what is the
static result type of an expression, what are that type's generic
arguments, and is a given type an array type.
"""

from __future__ import annotations

from typing import Protocol

from keysafe.models.tree_models import Expression
from keysafe.models.type_models import TypeDescriptor, TypeKind


class TypeResolver(Protocol):
    def result_type(self, expr: Expression) -> TypeDescriptor | None: ...

    def type_arguments(self, type_: TypeDescriptor | None) -> list[TypeDescriptor]: ...

    def is_array(self, type_: TypeDescriptor) -> bool: ...


class DescriptorTypeResolver:
    """TypeResolver over the TypeDescriptor models shipped with each node."""

    def result_type(self, expr: Expression) -> TypeDescriptor | None:
        # Inferred arguments (diamond, factory inference) are already
        # folded into the result type by the host.
        return expr.result_type

    def type_arguments(self, type_: TypeDescriptor | None) -> list[TypeDescriptor]:
        if type_ is None:
            return []
        return list(type_.type_arguments)

    def is_array(self, type_: TypeDescriptor) -> bool:
        return type_.kind == TypeKind.ARRAY


DEFAULT_RESOLVER = DescriptorTypeResolver()


def get_result_type(expr: Expression) -> TypeDescriptor | None:
    return DEFAULT_RESOLVER.result_type(expr)


def get_type_arguments(type_: TypeDescriptor | None) -> list[TypeDescriptor]:
    return DEFAULT_RESOLVER.type_arguments(type_)


def is_array_type(type_: TypeDescriptor) -> bool:
    return DEFAULT_RESOLVER.is_array(type_)
