# ABOUTME: Error taxonomy for Java scope analysis
# ABOUTME: Every failure aborts the whole analysis; there are no partial results

from typing import Optional


class AnalysisError(Exception):
    """Base class for errors raised while analyzing a compilation unit"""

    pass


class UnrecognizedTypeSyntax(AnalysisError):
    """Raised when a type-bearing node has a kind the resolver does not know"""

    def __init__(self, kind: str, text: str, row: Optional[int] = None):
        self.kind = kind
        self.text = text
        self.row = row
        location = f" at line {row + 1}" if row is not None else ""
        super().__init__(f"Unrecognized type syntax '{kind}'{location}: {text}")


class MalformedSpan(AnalysisError):
    """Raised when a node's span does not fit the source it was parsed from"""

    pass


class GrammarUnavailableError(AnalysisError):
    """Raised when the tree-sitter Java grammar cannot be loaded"""

    pass
