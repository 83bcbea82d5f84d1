# ABOUTME: Source text addressed by tree-sitter points, and a raw syntax tree renderer
# ABOUTME: Points carry byte columns, so lines are kept UTF-8 encoded and decoded on extraction

from typing import List, Tuple

from analysis.errors import MalformedSpan
from analysis.syntax import SyntaxNode


class SourceLines:
    """Immutable line view of one compilation unit."""

    def __init__(self, text: str, encoding: str = "utf-8"):
        self.encoding = encoding
        self._lines: Tuple[bytes, ...] = tuple(text.encode(encoding).split(b"\n"))

    def __len__(self) -> int:
        return len(self._lines)

    def line(self, row: int) -> str:
        return self._lines[row].decode(self.encoding)

    def extract(self, node: SyntaxNode) -> str:
        """
        Return the exact text covered by ``node``.

        A span crossing line boundaries keeps the start column on its first
        line and the end column on its last line; lines in between are taken
        whole. Lines are re-joined with newlines.
        """
        start_row, start_column = node.start_point[0], node.start_point[1]
        end_row, end_column = node.end_point[0], node.end_point[1]
        self._check_span(node, start_row, start_column, end_row, end_column)

        if start_row == end_row:
            fragment = self._lines[start_row][start_column:end_column]
        else:
            parts: List[bytes] = [self._lines[start_row][start_column:]]
            parts.extend(self._lines[start_row + 1 : end_row])
            parts.append(self._lines[end_row][:end_column])
            fragment = b"\n".join(parts)

        return fragment.decode(self.encoding)

    def _check_span(
        self,
        node: SyntaxNode,
        start_row: int,
        start_column: int,
        end_row: int,
        end_column: int,
    ) -> None:
        if not 0 <= start_row <= end_row < len(self._lines):
            raise MalformedSpan(
                f"Span of '{node.type}' covers rows {start_row}-{end_row} "
                f"but the source has {len(self._lines)} lines"
            )
        if start_column < 0 or start_column > len(self._lines[start_row]):
            raise MalformedSpan(
                f"Span of '{node.type}' starts at column {start_column} "
                f"outside line {start_row}"
            )
        if end_column < 0 or end_column > len(self._lines[end_row]):
            raise MalformedSpan(
                f"Span of '{node.type}' ends at column {end_column} "
                f"outside line {end_row}"
            )
        if start_row == end_row and start_column > end_column:
            raise MalformedSpan(
                f"Span of '{node.type}' ends before it starts on line {start_row}"
            )


def format_node(node: SyntaxNode, indent: str = "") -> str:
    """Render a syntax tree with one ``kind [row, col] - [row, col]`` line per node."""
    lines: List[str] = []
    stack = [(node, indent)]
    while stack:
        current, prefix = stack.pop()
        start, end = current.start_point, current.end_point
        lines.append(
            f"{prefix}{current.type} [{start[0]}, {start[1]}] - [{end[0]}, {end[1]}]"
        )
        for index in reversed(range(current.child_count)):
            stack.append((current.child(index), f"  {prefix}"))
    return "\n".join(lines)
