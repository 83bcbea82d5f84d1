# ABOUTME: Scope tree for one Java compilation unit: headers, ordered facts and child scopes
# ABOUTME: Offers the construction API used during traversal plus flattening queries and text rendering

from dataclasses import dataclass, field
from typing import Iterator, List, Literal, Union

import pydantic
from pydantic import field_validator

from .base import (
    DEFAULT_MODIFIERS,
    ScopeKind,
    SyntaxBaseModel,
    validate_identifier,
    validate_segments,
)
from .facts import Field, Import, Invocation


class FileHeader(SyntaxBaseModel):
    kind: Literal[ScopeKind.FILE] = ScopeKind.FILE

    @property
    def name(self) -> str:
        return ""

    def __str__(self) -> str:
        return "File"


class PackageHeader(SyntaxBaseModel):
    kind: Literal[ScopeKind.PACKAGE] = ScopeKind.PACKAGE
    identifiers: List[str] = pydantic.Field(..., description="Dotted package segments")

    @field_validator("identifiers")
    @classmethod
    def validate_identifiers(cls, v: List[str]) -> List[str]:
        return validate_segments(v)

    @property
    def qualified_name(self) -> str:
        return ".".join(self.identifiers)

    @property
    def name(self) -> str:
        return self.qualified_name

    def __str__(self) -> str:
        return f"Package {self.qualified_name}"


class TypeDeclarationHeader(SyntaxBaseModel):
    """Header shared by classes, interfaces and enums."""

    kind: Literal[ScopeKind.CLASS, ScopeKind.INTERFACE, ScopeKind.ENUM] = ScopeKind.CLASS
    modifiers: str = DEFAULT_MODIFIERS
    name: str

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return validate_identifier(v)

    def __str__(self) -> str:
        return f"{self.modifiers} {self.kind.value} {self.name}"


class RecordHeader(SyntaxBaseModel):
    kind: Literal[ScopeKind.RECORD] = ScopeKind.RECORD
    modifiers: str = DEFAULT_MODIFIERS
    name: str
    formal_parameters: str = pydantic.Field(
        default="()", description="Raw record component list text"
    )

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return validate_identifier(v)

    def __str__(self) -> str:
        return f"{self.modifiers} record {self.name}{self.formal_parameters}"


class FunctionHeader(SyntaxBaseModel):
    """Header for methods and constructors; constructors carry no return type."""

    kind: Literal[ScopeKind.FUNCTION, ScopeKind.CONSTRUCTOR] = ScopeKind.FUNCTION
    modifiers: str = DEFAULT_MODIFIERS
    name: str
    parameters: str = pydantic.Field(default="()", description="Raw parameter list text")
    return_type: str = pydantic.Field(default="", description="Raw return type text")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return validate_identifier(v)

    def __str__(self) -> str:
        signature = f"{self.modifiers} {self.name}{self.parameters}"
        if self.kind == ScopeKind.CONSTRUCTOR:
            return signature
        return f"{signature}: {self.return_type}"


ScopeHeader = Union[
    FileHeader, PackageHeader, TypeDeclarationHeader, RecordHeader, FunctionHeader
]


class ScopeFrozenError(RuntimeError):
    """Raised when a finished scope tree is mutated"""

    pass


@dataclass
class Scope:
    """
    One node of the scope tree.

    Every kind shares the same ordered fact lists and child list; what differs
    between a class and a function is only its header. Facts and children are
    exposed as tuples, mutation goes through the construction methods until
    freeze() is called.
    """

    header: ScopeHeader = field(default_factory=FileHeader)
    _imports: List[Import] = field(default_factory=list, init=False, repr=False)
    _fields: List[Field] = field(default_factory=list, init=False, repr=False)
    _invocations: List[Invocation] = field(default_factory=list, init=False, repr=False)
    _children: List["Scope"] = field(default_factory=list, init=False, repr=False)
    _frozen: bool = field(default=False, init=False, repr=False, compare=False)

    @property
    def kind(self) -> ScopeKind:
        return self.header.kind

    @property
    def name(self) -> str:
        return self.header.name

    @property
    def imports(self) -> tuple:
        return tuple(self._imports)

    @property
    def fields(self) -> tuple:
        return tuple(self._fields)

    @property
    def invocations(self) -> tuple:
        return tuple(self._invocations)

    @property
    def children(self) -> tuple:
        return tuple(self._children)

    @property
    def frozen(self) -> bool:
        return self._frozen

    # Construction

    def open_child(self, header: ScopeHeader) -> "Scope":
        """Append a new child scope and return it."""
        self._check_mutable()
        if isinstance(header, FileHeader):
            raise ValueError("A file scope can only be the root of a scope tree")
        child = Scope(header)
        self._children.append(child)
        return child

    def add_import(self, import_: Import) -> None:
        self._check_mutable()
        self._imports.append(import_)

    def add_field(self, field_: Field) -> None:
        self._check_mutable()
        self._fields.append(field_)

    def add_invocation(self, invocation: Invocation) -> None:
        self._check_mutable()
        self._invocations.append(invocation)

    def freeze(self) -> "Scope":
        """Freeze this scope and its whole subtree."""
        for scope in self.walk():
            scope._frozen = True
        return self

    def _check_mutable(self) -> None:
        if self._frozen:
            raise ScopeFrozenError(f"Scope '{self.header}' is frozen")

    # Queries

    def walk(self) -> Iterator["Scope"]:
        """Yield this scope and every descendant in depth-first preorder."""
        stack = [self]
        while stack:
            scope = stack.pop()
            yield scope
            stack.extend(reversed(scope._children))

    def descendants(self) -> Iterator["Scope"]:
        walker = self.walk()
        next(walker)
        return walker

    def _descendants_of_kind(self, kind: ScopeKind) -> List["Scope"]:
        return [scope for scope in self.descendants() if scope.kind == kind]

    def all_packages(self) -> List["Scope"]:
        return self._descendants_of_kind(ScopeKind.PACKAGE)

    def all_classes(self) -> List["Scope"]:
        return self._descendants_of_kind(ScopeKind.CLASS)

    def all_interfaces(self) -> List["Scope"]:
        return self._descendants_of_kind(ScopeKind.INTERFACE)

    def all_enums(self) -> List["Scope"]:
        return self._descendants_of_kind(ScopeKind.ENUM)

    def all_records(self) -> List["Scope"]:
        return self._descendants_of_kind(ScopeKind.RECORD)

    def all_functions(self) -> List["Scope"]:
        return self._descendants_of_kind(ScopeKind.FUNCTION)

    def all_constructors(self) -> List["Scope"]:
        return self._descendants_of_kind(ScopeKind.CONSTRUCTOR)

    def all_imports(self) -> List[Import]:
        return [import_ for scope in self.walk() for import_ in scope._imports]

    def all_fields(self) -> List[Field]:
        return [field_ for scope in self.walk() for field_ in scope._fields]

    def all_invocations(self) -> List[Invocation]:
        return [
            invocation for scope in self.walk() for invocation in scope._invocations
        ]

    # Rendering

    def format(self, indent: int = 0) -> str:
        """Render this subtree as indented text."""
        return "\n".join(self._format_lines(indent))

    def _format_lines(self, indent: int) -> List[str]:
        header_indent = " " * indent
        sub_indent = " " * (indent + 2)

        lines = [f"{header_indent}{self.header}"]
        lines.extend(f"{sub_indent}{import_}" for import_ in self._imports)
        lines.extend(f"{sub_indent}{field_}" for field_ in self._fields)
        lines.extend(
            f"{sub_indent}Invoke: {invocation}" for invocation in self._invocations
        )
        for child in self._children:
            lines.extend(child._format_lines(indent + 2))
        return lines
