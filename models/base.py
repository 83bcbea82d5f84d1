from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict


class ScopeKind(str, Enum):
    FILE = "file"
    PACKAGE = "package"
    CLASS = "class"
    INTERFACE = "interface"
    ENUM = "enum"
    RECORD = "record"
    FUNCTION = "function"
    CONSTRUCTOR = "constructor"


# Java's package-private access has no keyword; it is recorded under this name.
DEFAULT_MODIFIERS = "default"


class SyntaxBaseModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


def validate_identifier(value: str) -> str:
    if not value or not value.strip():
        raise ValueError("Identifier must be a non-empty string")
    return value


def validate_segments(segments: List[str]) -> List[str]:
    if not segments:
        raise ValueError("At least one identifier segment is required")
    for segment in segments:
        validate_identifier(segment)
    return segments
