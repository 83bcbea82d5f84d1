# ABOUTME: Single-pass traversal of a Java syntax tree into the scope model
# ABOUTME: Dispatches on node kind to extract facts, open child scopes, or descend unchanged

import logging
from typing import Callable, Dict, List, Optional, Tuple

from analysis import syntax
from analysis.errors import UnrecognizedTypeSyntax
from analysis.spans import SourceLines
from analysis.syntax import SyntaxNode, children_of
from analysis.type_resolver import TypeResolver
from models import (
    DEFAULT_MODIFIERS,
    Field,
    FunctionHeader,
    FunctionInvocation,
    Import,
    ObjectCreation,
    PackageHeader,
    RecordHeader,
    Scope,
    ScopeKind,
    TypeDeclarationHeader,
)

logger = logging.getLogger(__name__)

# (scope for the node's children, index of the first child to visit); None means
# the node has been consumed completely.
Descent = Optional[Tuple[Scope, int]]
Handler = Callable[[SyntaxNode, Scope], Descent]

TYPE_DECLARATION_KINDS = {
    syntax.CLASS_DECLARATION: ScopeKind.CLASS,
    syntax.INTERFACE_DECLARATION: ScopeKind.INTERFACE,
    syntax.ENUM_DECLARATION: ScopeKind.ENUM,
}

RECEIVER_KINDS = frozenset({syntax.FIELD_ACCESS, syntax.THIS, syntax.SUPER})


class ScopeTraverser:
    """
    Walks a syntax tree once, depth-first and left to right, carrying the
    current scope. Uses an explicit work stack so long expression chains do
    not exhaust the interpreter stack.
    """

    def __init__(self, lines: SourceLines):
        self.lines = lines
        self.type_resolver = TypeResolver(lines)
        self._handlers: Dict[str, Handler] = {
            syntax.PACKAGE_DECLARATION: self._handle_package_declaration,
            syntax.IMPORT_DECLARATION: self._handle_import_declaration,
            syntax.CLASS_DECLARATION: self._handle_type_declaration,
            syntax.INTERFACE_DECLARATION: self._handle_type_declaration,
            syntax.ENUM_DECLARATION: self._handle_type_declaration,
            syntax.RECORD_DECLARATION: self._handle_record_declaration,
            syntax.FIELD_DECLARATION: self._handle_field_declaration,
            syntax.CONSTANT_DECLARATION: self._handle_field_declaration,
            syntax.METHOD_DECLARATION: self._handle_method_declaration,
            syntax.CONSTRUCTOR_DECLARATION: self._handle_constructor_declaration,
            syntax.METHOD_INVOCATION: self._handle_method_invocation,
            syntax.OBJECT_CREATION_EXPRESSION: self._handle_object_creation,
        }

    def traverse(self, root: SyntaxNode, scope: Scope) -> Scope:
        """Populate ``scope`` from the tree rooted at ``root`` and return it."""
        stack: List[Tuple[SyntaxNode, Scope]] = [(root, scope)]

        while stack:
            node, current_scope = stack.pop()

            handler = self._handlers.get(node.type)
            if handler is None:
                descent: Descent = (current_scope, 0)
            else:
                descent = handler(node, current_scope)
                if descent is None:
                    continue

            child_scope, first_child = descent
            for index in reversed(range(first_child, node.child_count)):
                stack.append((node.child(index), child_scope))

        return scope

    def _text(self, node: SyntaxNode) -> str:
        return self.lines.extract(node)

    def _qualified_segments(self, node: SyntaxNode) -> List[str]:
        """Split an identifier or scoped_identifier into its dotted segments."""
        if node.type == syntax.IDENTIFIER:
            return [self._text(node)]

        segments: List[str] = []
        for _, child in children_of(node):
            if child.type in (syntax.IDENTIFIER, syntax.SCOPED_IDENTIFIER):
                segments.extend(self._qualified_segments(child))
        return segments

    def _handle_package_declaration(self, node: SyntaxNode, scope: Scope) -> Descent:
        for _, child in children_of(node):
            if child.type in (syntax.IDENTIFIER, syntax.SCOPED_IDENTIFIER):
                header = PackageHeader(identifiers=self._qualified_segments(child))
                scope.open_child(header)
                logger.debug(f"Opened package scope {header.qualified_name}")
                break
        return None

    def _handle_import_declaration(self, node: SyntaxNode, scope: Scope) -> Descent:
        identifiers: List[str] = []
        static = False

        for _, child in children_of(node):
            if child.type == syntax.STATIC:
                static = True
            elif child.type in (syntax.IDENTIFIER, syntax.SCOPED_IDENTIFIER):
                identifiers = self._qualified_segments(child)
            elif child.type == syntax.ASTERISK:
                identifiers.append("*")

        import_ = Import(identifiers=identifiers, static=static)
        scope.add_import(import_)
        logger.debug(f"Recorded {import_}")
        return None

    def _handle_type_declaration(self, node: SyntaxNode, scope: Scope) -> Descent:
        modifiers = DEFAULT_MODIFIERS
        name = ""
        body_index = node.child_count

        for index, child in children_of(node):
            if child.type == syntax.MODIFIERS:
                modifiers = self._text(child)
            elif child.type == syntax.IDENTIFIER and not name:
                name = self._text(child)
            elif child.type in syntax.DECLARATION_BODIES:
                body_index = index
                break

        header = TypeDeclarationHeader(
            kind=TYPE_DECLARATION_KINDS[node.type], modifiers=modifiers, name=name
        )
        logger.debug(f"Opened {header.kind.value} scope {name}")
        return scope.open_child(header), body_index

    def _handle_record_declaration(self, node: SyntaxNode, scope: Scope) -> Descent:
        modifiers = DEFAULT_MODIFIERS
        name = ""
        formal_parameters = "()"
        body_index = node.child_count

        for index, child in children_of(node):
            if child.type == syntax.MODIFIERS:
                modifiers = self._text(child)
            elif child.type == syntax.IDENTIFIER and not name:
                name = self._text(child)
            elif child.type == syntax.FORMAL_PARAMETERS:
                formal_parameters = self._text(child)
            elif child.type in syntax.DECLARATION_BODIES:
                body_index = index
                break

        header = RecordHeader(
            modifiers=modifiers, name=name, formal_parameters=formal_parameters
        )
        logger.debug(f"Opened record scope {name}")
        return scope.open_child(header), body_index

    def _handle_field_declaration(self, node: SyntaxNode, scope: Scope) -> Descent:
        modifiers = DEFAULT_MODIFIERS
        type_node: Optional[SyntaxNode] = None
        declarators: List[SyntaxNode] = []
        first_declarator = node.child_count

        for index, child in children_of(node):
            if child.type == syntax.MODIFIERS:
                modifiers = self._text(child)
            elif child.type == syntax.VARIABLE_DECLARATOR:
                if not declarators:
                    first_declarator = index
                declarators.append(child)
            elif type_node is None and not declarators and child.type not in syntax.COMMENTS:
                type_node = child

        if type_node is None:
            raise UnrecognizedTypeSyntax(
                node.type, self._text(node), node.start_point[0]
            )
        type_identifier = self.type_resolver.resolve(type_node)

        for declarator in declarators:
            identifier = next(
                (
                    self._text(child)
                    for _, child in children_of(declarator)
                    if child.type == syntax.IDENTIFIER
                ),
                "",
            )
            field_ = Field(
                modifiers=modifiers,
                identifier=identifier,
                type_identifier=type_identifier,
            )
            scope.add_field(field_)
            logger.debug(f"Recorded field {field_}")

        # Initializers inside the declarators may still contain invocations.
        return scope, first_declarator

    def _function_header(self, node: SyntaxNode, kind: ScopeKind) -> FunctionHeader:
        modifiers = DEFAULT_MODIFIERS
        return_type = ""
        name = ""
        parameters = "()"

        for _, child in children_of(node):
            if child.type == syntax.MODIFIERS:
                modifiers = self._text(child)
            elif child.type in syntax.TYPE_KINDS and not name:
                return_type = self._text(child)
            elif child.type == syntax.IDENTIFIER and not name:
                name = self._text(child)
            elif child.type == syntax.FORMAL_PARAMETERS:
                parameters = self._text(child)
                break

        return FunctionHeader(
            kind=kind,
            modifiers=modifiers,
            name=name,
            parameters=parameters,
            return_type=return_type,
        )

    def _handle_method_declaration(self, node: SyntaxNode, scope: Scope) -> Descent:
        header = self._function_header(node, ScopeKind.FUNCTION)
        logger.debug(f"Opened function scope {header.name}")
        return scope.open_child(header), 0

    def _handle_constructor_declaration(
        self, node: SyntaxNode, scope: Scope
    ) -> Descent:
        header = self._function_header(node, ScopeKind.CONSTRUCTOR)
        logger.debug(f"Opened constructor scope {header.name}")
        return scope.open_child(header), 0

    def _handle_method_invocation(self, node: SyntaxNode, scope: Scope) -> Descent:
        receiver = ""
        access_path: List[str] = []
        arguments = ""

        for _, child in children_of(node):
            if child.type in RECEIVER_KINDS:
                receiver = self._text(child)
            elif child.type == syntax.IDENTIFIER:
                access_path.append(self._text(child))
            elif child.type == syntax.ARGUMENT_LIST:
                arguments = self._text(child)

        invocation = FunctionInvocation(
            receiver=receiver, access_path=access_path, arguments=arguments
        )
        scope.add_invocation(invocation)
        logger.debug(f"Recorded invocation {invocation}")
        return scope, 0

    def _handle_object_creation(self, node: SyntaxNode, scope: Scope) -> Descent:
        type_node: Optional[SyntaxNode] = None
        arguments = ""
        after_new = False

        for _, child in children_of(node):
            if child.type == syntax.NEW:
                after_new = True
            elif child.type == syntax.ARGUMENT_LIST:
                arguments = self._text(child)
            elif (
                after_new
                and type_node is None
                and child.type != syntax.TYPE_ARGUMENTS
                and child.type not in syntax.ANNOTATIONS
                and child.type not in syntax.COMMENTS
            ):
                type_node = child

        if type_node is None:
            raise UnrecognizedTypeSyntax(
                node.type, self._text(node), node.start_point[0]
            )

        invocation = ObjectCreation(
            type_identifier=self.type_resolver.resolve(type_node), arguments=arguments
        )
        scope.add_invocation(invocation)
        logger.debug(f"Recorded object creation {invocation}")
        return scope, 0
