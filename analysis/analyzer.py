# ABOUTME: Entry points that turn Java source text into a frozen scope model
# ABOUTME: Each analysis gets a fresh parser and scope tree so calls stay independent

import logging
from typing import Optional

import tree_sitter as ts

from analysis.errors import AnalysisError
from analysis.grammar import JavaGrammar
from analysis.spans import SourceLines, format_node
from analysis.traverse import ScopeTraverser
from models import Scope

logger = logging.getLogger(__name__)


class JavaAnalyzer:
    """
    Summarizes one Java compilation unit into packages, imports, type
    declarations, fields, functions and invocations.

    Usage::

        analyzer = JavaAnalyzer()
        result = analyzer.analyze(source)
        print(result.format(0))
        print([cls.name for cls in result.all_classes()])
    """

    def __init__(self, grammar: Optional[JavaGrammar] = None) -> None:
        self.grammar = grammar or JavaGrammar()

    def parse(self, source: str) -> ts.Tree:
        """Parse source text with a parser created for this call only"""
        parser = self.grammar.new_parser()
        return parser.parse(source.encode("utf-8"))

    def analyze(self, source: str) -> Scope:
        """
        Build the scope model of ``source``.

        Returns:
            The frozen File scope at the root of the model

        Raises:
            UnrecognizedTypeSyntax: a field or construction uses unsupported type syntax
            MalformedSpan: the parser reported a span outside the source
        """
        tree = self.parse(source)
        if tree.root_node.has_error:
            logger.debug("Syntax tree contains error nodes; unrecognized parts are skipped")

        lines = SourceLines(source)
        file_scope = Scope()
        try:
            ScopeTraverser(lines).traverse(tree.root_node, file_scope)
        except AnalysisError as e:
            logger.error(f"Analysis aborted: {e}")
            raise

        return file_scope.freeze()

    def render_tree(self, source: str) -> str:
        """Render the raw syntax tree, one node kind and span per line"""
        return format_node(self.parse(source).root_node)


_default_analyzer: Optional[JavaAnalyzer] = None


def _analyzer() -> JavaAnalyzer:
    global _default_analyzer
    if _default_analyzer is None:
        _default_analyzer = JavaAnalyzer()
    return _default_analyzer


def analyze(source: str) -> Scope:
    """Analyze source text with a shared grammar and a fresh parser"""
    return _analyzer().analyze(source)


def render_tree(source: str) -> str:
    return _analyzer().render_tree(source)
