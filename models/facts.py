from typing import Annotated, List, Literal, Union

import pydantic
from pydantic import field_validator

from .base import SyntaxBaseModel, validate_identifier, validate_segments
from .type_identifier import TypeIdentifier


class Import(SyntaxBaseModel):
    """An import declaration; the last segment is the imported type, member or '*'."""

    identifiers: List[str] = pydantic.Field(..., description="Dotted path segments")
    static: bool = pydantic.Field(default=False, description="import static ...")

    @field_validator("identifiers")
    @classmethod
    def validate_identifiers(cls, v: List[str]) -> List[str]:
        return validate_segments(v)

    @property
    def qualified_name(self) -> str:
        return ".".join(self.identifiers)

    @property
    def is_wildcard(self) -> bool:
        return self.identifiers[-1] == "*"

    def __str__(self) -> str:
        prefix = "import static" if self.static else "import"
        return f"{prefix} {self.qualified_name}"


class Field(SyntaxBaseModel):
    """A field declared in a type body. The initializer is not part of the field."""

    modifiers: str = pydantic.Field(..., description="Modifier text, e.g. 'private final'")
    identifier: str = pydantic.Field(..., description="Declared variable name")
    type_identifier: TypeIdentifier

    @field_validator("identifier")
    @classmethod
    def validate_field_identifier(cls, v: str) -> str:
        return validate_identifier(v)

    def __str__(self) -> str:
        return f"{self.modifiers} {self.identifier}: {self.type_identifier}"


class FunctionInvocation(SyntaxBaseModel):
    kind: Literal["function"] = "function"
    receiver: str = pydantic.Field(
        default="", description="Field-access receiver text such as 'this.repo'"
    )
    access_path: List[str] = pydantic.Field(
        ..., description="Plain identifiers in order: qualifiers, then method name"
    )
    arguments: str = pydantic.Field(..., description="Raw argument list text")

    @field_validator("access_path")
    @classmethod
    def validate_access_path(cls, v: List[str]) -> List[str]:
        return validate_segments(v)

    @property
    def method_name(self) -> str:
        return self.access_path[-1]

    def __str__(self) -> str:
        path = ".".join(self.access_path)
        if self.receiver:
            path = f"{self.receiver}.{path}"
        return f"{path}{self.arguments}"


class ObjectCreation(SyntaxBaseModel):
    kind: Literal["object_creation"] = "object_creation"
    type_identifier: TypeIdentifier
    arguments: str = pydantic.Field(..., description="Raw argument list text")

    def __str__(self) -> str:
        return f"new {self.type_identifier}{self.arguments}"


Invocation = Annotated[
    Union[FunctionInvocation, ObjectCreation],
    pydantic.Field(discriminator="kind"),
]
