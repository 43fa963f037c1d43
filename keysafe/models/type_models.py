"""
Type Data Models — Resolved static types as reported by the host analyzer.

A TypeDescriptor is the only view of a type the rules consult. Only the
shape (kind) and the ordered generic type arguments matter; everything
else is carried for evidence and display.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class TypeKind(str, Enum):
    ARRAY = "array"
    CLASS = "class"
    INTERFACE = "interface"
    PRIMITIVE = "primitive"
    TYPE_VARIABLE = "type_variable"
    WILDCARD = "wildcard"


class TypeDescriptor(BaseModel):
    """A single fully resolved type."""

    kind: TypeKind
    name: str = Field(
        default="",
        description="FQN for class/interface, keyword for primitive, parameter name for type variables",
    )
    type_arguments: list[TypeDescriptor] = Field(
        default_factory=list,
        description="Resolved generic arguments in declaration order",
    )
    component_type: TypeDescriptor | None = Field(
        default=None, description="Element type, arrays only"
    )

    def display_name(self) -> str:
        """Render the type the way it would be written in source."""
        if self.kind == TypeKind.ARRAY:
            component = self.component_type.display_name() if self.component_type else "?"
            return f"{component}[]"
        if self.kind == TypeKind.WILDCARD:
            return "?"
        if self.type_arguments:
            args = ", ".join(arg.display_name() for arg in self.type_arguments)
            return f"{self.name}<{args}>"
        return self.name


TypeDescriptor.model_rebuild()


def array_of(component: TypeDescriptor) -> TypeDescriptor:
    return TypeDescriptor(kind=TypeKind.ARRAY, component_type=component)


def class_type(name: str, *type_arguments: TypeDescriptor) -> TypeDescriptor:
    return TypeDescriptor(kind=TypeKind.CLASS, name=name, type_arguments=list(type_arguments))


def interface_type(name: str, *type_arguments: TypeDescriptor) -> TypeDescriptor:
    return TypeDescriptor(kind=TypeKind.INTERFACE, name=name, type_arguments=list(type_arguments))


def primitive(name: str) -> TypeDescriptor:
    return TypeDescriptor(kind=TypeKind.PRIMITIVE, name=name)


def type_variable(name: str) -> TypeDescriptor:
    return TypeDescriptor(kind=TypeKind.TYPE_VARIABLE, name=name)


def wildcard() -> TypeDescriptor:
    return TypeDescriptor(kind=TypeKind.WILDCARD)
