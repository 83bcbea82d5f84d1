from .base import (
    DEFAULT_MODIFIERS,
    ScopeKind,
    SyntaxBaseModel,
    validate_identifier,
    validate_segments,
)
from .type_identifier import (
    ConcreteTypeIdentifier,
    GenericTypeIdentifier,
    TypeIdentifier,
)
from .facts import Field, FunctionInvocation, Import, Invocation, ObjectCreation
from .scope import (
    FileHeader,
    FunctionHeader,
    PackageHeader,
    RecordHeader,
    Scope,
    ScopeFrozenError,
    ScopeHeader,
    TypeDeclarationHeader,
)

__all__ = [
    # Base infrastructure
    "SyntaxBaseModel",
    "ScopeKind",
    "DEFAULT_MODIFIERS",
    "validate_identifier",
    "validate_segments",

    # Type identifiers
    "TypeIdentifier",
    "ConcreteTypeIdentifier",
    "GenericTypeIdentifier",

    # Facts
    "Import",
    "Field",
    "Invocation",
    "FunctionInvocation",
    "ObjectCreation",

    # Scope tree
    "Scope",
    "ScopeHeader",
    "ScopeFrozenError",
    "FileHeader",
    "PackageHeader",
    "TypeDeclarationHeader",
    "RecordHeader",
    "FunctionHeader",
]
