# ABOUTME: Minimal syntax node contract and the tree-sitter-java node kinds the analysis reacts to
# ABOUTME: tree_sitter.Node satisfies the contract; tests can supply lightweight stand-ins

from typing import Optional, Protocol, Sequence


class SyntaxNode(Protocol):
    """The subset of tree_sitter.Node used by the analysis."""

    @property
    def type(self) -> str: ...

    @property
    def child_count(self) -> int: ...

    @property
    def start_point(self) -> Sequence[int]: ...

    @property
    def end_point(self) -> Sequence[int]: ...

    def child(self, index: int) -> Optional["SyntaxNode"]: ...


def children_of(node: SyntaxNode, start: int = 0):
    """Yield (index, child) pairs from ``start`` onward, left to right."""
    for index in range(start, node.child_count):
        yield index, node.child(index)


# Declarations
PACKAGE_DECLARATION = "package_declaration"
IMPORT_DECLARATION = "import_declaration"
CLASS_DECLARATION = "class_declaration"
INTERFACE_DECLARATION = "interface_declaration"
ENUM_DECLARATION = "enum_declaration"
RECORD_DECLARATION = "record_declaration"
FIELD_DECLARATION = "field_declaration"
CONSTANT_DECLARATION = "constant_declaration"
METHOD_DECLARATION = "method_declaration"
CONSTRUCTOR_DECLARATION = "constructor_declaration"

# Expressions
METHOD_INVOCATION = "method_invocation"
OBJECT_CREATION_EXPRESSION = "object_creation_expression"
FIELD_ACCESS = "field_access"
THIS = "this"
SUPER = "super"

# Declaration parts
MODIFIERS = "modifiers"
IDENTIFIER = "identifier"
SCOPED_IDENTIFIER = "scoped_identifier"
ASTERISK = "asterisk"
STATIC = "static"
NEW = "new"
FORMAL_PARAMETERS = "formal_parameters"
ARGUMENT_LIST = "argument_list"
VARIABLE_DECLARATOR = "variable_declarator"
TYPE_PARAMETERS = "type_parameters"

DECLARATION_BODIES = frozenset(
    {"class_body", "interface_body", "enum_body", "annotation_type_body"}
)

ANNOTATIONS = frozenset({"annotation", "marker_annotation"})

COMMENTS = frozenset({"line_comment", "block_comment"})

# Types
TYPE_IDENTIFIER = "type_identifier"
SCOPED_TYPE_IDENTIFIER = "scoped_type_identifier"
GENERIC_TYPE = "generic_type"
TYPE_ARGUMENTS = "type_arguments"

TYPE_NAME_KINDS = frozenset({TYPE_IDENTIFIER, SCOPED_TYPE_IDENTIFIER})

CONCRETE_TYPE_KINDS = frozenset(
    {
        TYPE_IDENTIFIER,
        SCOPED_TYPE_IDENTIFIER,
        "integral_type",
        "floating_point_type",
        "boolean_type",
        "void_type",
        "array_type",
        "wildcard",
    }
)

TYPE_KINDS = CONCRETE_TYPE_KINDS | {GENERIC_TYPE}

# Tokens inside type_arguments that carry no type
TYPE_ARGUMENT_PUNCTUATION = frozenset({"<", ">", ","})
