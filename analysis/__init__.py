# ABOUTME: Tree-sitter based analysis of Java compilation units into a scope model
# ABOUTME: Exposes the analyzer entry points, the grammar manager and the error taxonomy

from .analyzer import JavaAnalyzer, analyze, render_tree
from .errors import (
    AnalysisError,
    GrammarUnavailableError,
    MalformedSpan,
    UnrecognizedTypeSyntax,
)
from .grammar import GrammarStatus, JavaGrammar
from .settings import AnalyzerSettings, load_settings
from .spans import SourceLines, format_node
from .traverse import ScopeTraverser
from .type_resolver import TypeResolver

__all__ = [
    "JavaAnalyzer",
    "analyze",
    "render_tree",
    "JavaGrammar",
    "GrammarStatus",
    "ScopeTraverser",
    "TypeResolver",
    "SourceLines",
    "format_node",
    "AnalyzerSettings",
    "load_settings",
    "AnalysisError",
    "UnrecognizedTypeSyntax",
    "MalformedSpan",
    "GrammarUnavailableError",
]
