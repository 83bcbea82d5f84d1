# ABOUTME: Java grammar management for Tree-sitter parsers
# ABOUTME: Loads tree-sitter-java once, tracks its status, and hands out fresh parsers per analysis

import logging
from enum import Enum
from typing import Optional

import tree_sitter as ts
import tree_sitter_java

from analysis.errors import GrammarUnavailableError

logger = logging.getLogger(__name__)


class GrammarStatus(Enum):
    """Status of grammar availability"""
    AVAILABLE = "available"
    UNAVAILABLE = "unavailable"
    ERROR = "error"


VALIDATION_SAMPLE = "package sample; public class Test { public void test() { } }"


class JavaGrammar:
    """
    Owns the tree-sitter Java language object.

    The language is immutable and shared; parsers are stateful, so every
    analysis asks for its own through new_parser().
    """

    def __init__(self) -> None:
        self._language: Optional[ts.Language] = None
        self._status = GrammarStatus.UNAVAILABLE
        self._load_grammar()

    def _load_grammar(self) -> None:
        """Load the tree-sitter-java grammar"""
        try:
            ts_language_capsule = tree_sitter_java.language()
            self._language = ts.Language(ts_language_capsule)
            self._status = GrammarStatus.AVAILABLE
        except Exception as e:
            logger.warning(f"Failed to load grammar for java: {e}")
            self._status = GrammarStatus.ERROR

    @property
    def status(self) -> GrammarStatus:
        return self._status

    def is_available(self) -> bool:
        """Check if the grammar is loaded and usable"""
        return self._status == GrammarStatus.AVAILABLE

    @property
    def language(self) -> ts.Language:
        if self._language is None:
            raise GrammarUnavailableError(
                f"Java grammar is not available (status: {self._status.value})"
            )
        return self._language

    def new_parser(self) -> ts.Parser:
        """Create a parser bound to the Java language"""
        parser = ts.Parser()
        parser.language = self.language
        return parser

    def validate_grammar(self) -> bool:
        """Validate that the grammar parses a small compilation unit cleanly"""
        if not self.is_available():
            return False

        tree = self.new_parser().parse(VALIDATION_SAMPLE.encode("utf-8"))
        return tree.root_node.has_error is False
