# ABOUTME: CLI entry point that summarizes a Java source file as an indented scope report
# ABOUTME: Optionally prints the raw Tree-sitter syntax tree for grammar debugging

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from analysis import AnalysisError, JavaAnalyzer, load_settings


def build_parser(show_tree: bool, indent: int, log_level: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Summarize packages, imports, types, fields, functions and calls of a Java file"
    )
    parser.add_argument("file", type=Path, help="Java source file to analyze")
    parser.add_argument(
        "--tree",
        action="store_true",
        default=show_tree,
        help="Print the raw syntax tree before the summary",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=indent,
        help="Indent of the top-level scope in the summary",
    )
    parser.add_argument(
        "--log-level",
        default=log_level,
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def check_source_file(path: Path) -> Optional[str]:
    """Return an error message when path cannot be analyzed"""
    if not path.exists():
        return f"File [{path}] does not exist"
    if not path.is_file():
        return f"File [{path}] is not a regular file"
    return None


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point"""
    try:
        settings = load_settings()
    except ValidationError as e:
        print(f"ERROR: Invalid JAVA_SCOPES_* settings: {e}")
        return 1

    parser = build_parser(settings.show_tree, settings.indent, settings.log_level)
    args = parser.parse_args(argv)

    log_level = args.log_level.strip().upper()
    if not isinstance(logging.getLevelName(log_level), int):
        print(f"ERROR: Unknown log level: {args.log_level}")
        return 1

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.indent < 0:
        print(f"ERROR: Indent must not be negative: {args.indent}")
        return 1

    problem = check_source_file(args.file)
    if problem:
        print(f"ERROR: {problem}")
        return 1

    source = args.file.read_text(encoding="utf-8")
    analyzer = JavaAnalyzer()

    if args.tree:
        print(analyzer.render_tree(source))
        print()

    try:
        result = analyzer.analyze(source)
    except AnalysisError as e:
        print(f"ERROR: Analysis of {args.file} failed: {e}")
        return 1

    print(result.format(args.indent))
    return 0


if __name__ == "__main__":
    sys.exit(main())
