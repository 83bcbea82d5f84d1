from typing import Annotated, List, Literal, Union

import pydantic
from pydantic import field_validator

from .base import SyntaxBaseModel, validate_identifier


class ConcreteTypeIdentifier(SyntaxBaseModel):
    """A type written without type arguments, e.g. ``String`` or ``int[]``."""

    kind: Literal["concrete"] = "concrete"
    name: str = pydantic.Field(..., description="Type name as written in source")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return validate_identifier(v)

    def __str__(self) -> str:
        return self.name


class GenericTypeIdentifier(SyntaxBaseModel):
    """A parameterized type such as ``Map<Int, List<String>>``."""

    kind: Literal["generic"] = "generic"
    name: str = pydantic.Field(..., description="Raw type name before '<'")
    type_parameters: List["TypeIdentifier"] = pydantic.Field(
        default_factory=list, description="Type arguments, left to right"
    )

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return validate_identifier(v)

    def __str__(self) -> str:
        parameters = ", ".join(str(parameter) for parameter in self.type_parameters)
        return f"{self.name}<{parameters}>"


TypeIdentifier = Annotated[
    Union[ConcreteTypeIdentifier, GenericTypeIdentifier],
    pydantic.Field(discriminator="kind"),
]

GenericTypeIdentifier.model_rebuild()
