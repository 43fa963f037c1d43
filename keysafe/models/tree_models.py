"""
Typed Tree Data Models — Expression nodes handed over by the host analyzer.

The host has already parsed, attributed and type-checked the source.
Each expression carries its resolved callee (or constructed class) and
its resolved static result type, so rules never look at source text.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from keysafe.models.type_models import TypeDescriptor


class SourcePosition(BaseModel):
    """Location of an expression in its compilation unit."""

    line: int = Field(..., ge=1, description="1-based start line")
    column: int = Field(default=1, ge=1, description="1-based start column")
    end_line: int | None = Field(default=None, description="End line of the expression")


class MethodSymbol(BaseModel):
    """The resolved target of a method invocation."""

    owner: str = Field(..., description="Fully qualified name of the declaring type")
    name: str = Field(..., description="Member name")
    is_static: bool = False


class MethodInvocation(BaseModel):
    """A call such as `Sets.newHashSet()`."""

    kind: Literal["method_invocation"] = "method_invocation"
    method: MethodSymbol
    result_type: TypeDescriptor | None = Field(
        default=None, description="Resolved static type of the call's value"
    )
    arguments: list[Expression] = Field(default_factory=list)
    position: SourcePosition
    source: str = Field(default="", description="Source text of the expression, if known")


class NewClass(BaseModel):
    """An instantiation such as `new HashMap<>()`."""

    kind: Literal["new_class"] = "new_class"
    constructed_class: str = Field(..., description="Fully qualified name of the instantiated class")
    result_type: TypeDescriptor | None = None
    arguments: list[Expression] = Field(default_factory=list)
    has_body: bool = Field(
        default=False, description="True for anonymous subclasses (`new T() { ... }`)"
    )
    position: SourcePosition
    source: str = ""


class OtherExpression(BaseModel):
    """Any expression that is neither a call nor an instantiation."""

    kind: Literal["other"] = "other"
    result_type: TypeDescriptor | None = None
    children: list[Expression] = Field(default_factory=list)
    position: SourcePosition
    source: str = ""


Expression = Annotated[
    Union[MethodInvocation, NewClass, OtherExpression],
    Field(discriminator="kind"),
]


class CompilationUnit(BaseModel):
    """One attributed source file."""

    file_path: str
    package: str = ""
    expressions: list[Expression] = Field(
        default_factory=list, description="Top-level expressions in source order"
    )


MethodInvocation.model_rebuild()
NewClass.model_rebuild()
OtherExpression.model_rebuild()
CompilationUnit.model_rebuild()
