# ABOUTME: Resolves type syntax nodes into concrete or generic type identifiers
# ABOUTME: Generic arguments are resolved recursively, so nesting depth follows the source

from typing import List, Optional

from analysis.errors import UnrecognizedTypeSyntax
from analysis.spans import SourceLines
from analysis.syntax import (
    COMMENTS,
    CONCRETE_TYPE_KINDS,
    GENERIC_TYPE,
    TYPE_ARGUMENT_PUNCTUATION,
    TYPE_ARGUMENTS,
    TYPE_NAME_KINDS,
    SyntaxNode,
    children_of,
)
from models import ConcreteTypeIdentifier, GenericTypeIdentifier, TypeIdentifier


class TypeResolver:
    """Turns type-bearing nodes into TypeIdentifier values."""

    def __init__(self, lines: SourceLines):
        self.lines = lines

    def resolve(self, node: SyntaxNode) -> TypeIdentifier:
        """
        Resolve a type node.

        ``Map<Int, List<String>>`` becomes
        Generic("Map", [Concrete("Int"), Generic("List", [Concrete("String")])]).

        Raises:
            UnrecognizedTypeSyntax: node kind is not type syntax
        """
        if node.type == GENERIC_TYPE:
            return self._resolve_generic(node)
        if node.type in CONCRETE_TYPE_KINDS:
            return ConcreteTypeIdentifier(name=self.lines.extract(node))
        raise self._unrecognized(node)

    def _resolve_generic(self, node: SyntaxNode) -> GenericTypeIdentifier:
        name: Optional[str] = None
        type_parameters: List[TypeIdentifier] = []

        for _, child in children_of(node):
            if child.type in TYPE_NAME_KINDS:
                name = self.lines.extract(child)
            elif child.type == TYPE_ARGUMENTS:
                type_parameters.extend(self._resolve_arguments(child))

        if name is None:
            raise self._unrecognized(node)

        return GenericTypeIdentifier(name=name, type_parameters=type_parameters)

    def _resolve_arguments(self, node: SyntaxNode) -> List[TypeIdentifier]:
        return [
            self.resolve(child)
            for _, child in children_of(node)
            if child.type not in TYPE_ARGUMENT_PUNCTUATION
            and child.type not in COMMENTS
        ]

    def _unrecognized(self, node: SyntaxNode) -> UnrecognizedTypeSyntax:
        return UnrecognizedTypeSyntax(
            node.type, self.lines.extract(node), node.start_point[0]
        )
