# ABOUTME: Tests for resolving type syntax nodes into type identifiers
# ABOUTME: Parses real Java snippets and checks nested generic reconstruction and failures

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import pytest

from analysis import JavaAnalyzer, SourceLines, TypeResolver, UnrecognizedTypeSyntax
from models import ConcreteTypeIdentifier, GenericTypeIdentifier


def find_first(node, kind: str):
    """Return the first node of ``kind`` in preorder, or None"""
    stack = [node]
    while stack:
        current = stack.pop()
        if current.type == kind:
            return current
        stack.extend(reversed(current.children))
    return None


@pytest.fixture(scope="module")
def analyzer():
    return JavaAnalyzer()


def resolve_first(analyzer, source: str, kind: str):
    tree = analyzer.parse(source)
    node = find_first(tree.root_node, kind)
    assert node is not None, f"no {kind} in {source!r}"
    return TypeResolver(SourceLines(source)).resolve(node)


@dataclass
class FakeNode:
    type: str
    start_point: Tuple[int, int]
    end_point: Tuple[int, int]
    children: List["FakeNode"] = field(default_factory=list)

    @property
    def child_count(self) -> int:
        return len(self.children)

    def child(self, index: int) -> Optional["FakeNode"]:
        return self.children[index]


class TestConcreteTypes:
    """Test types without type arguments"""

    def test_type_identifier(self, analyzer):
        resolved = resolve_first(analyzer, "class A { String name; }", "type_identifier")
        assert resolved == ConcreteTypeIdentifier(name="String")

    def test_integral_type(self, analyzer):
        resolved = resolve_first(analyzer, "class A { int count; }", "integral_type")
        assert resolved == ConcreteTypeIdentifier(name="int")

    def test_boolean_and_floating_point(self, analyzer):
        assert resolve_first(
            analyzer, "class A { boolean done; }", "boolean_type"
        ) == ConcreteTypeIdentifier(name="boolean")
        assert resolve_first(
            analyzer, "class A { double ratio; }", "floating_point_type"
        ) == ConcreteTypeIdentifier(name="double")

    def test_array_type(self, analyzer):
        resolved = resolve_first(analyzer, "class A { byte[] data; }", "array_type")
        assert resolved == ConcreteTypeIdentifier(name="byte[]")

    def test_scoped_type(self, analyzer):
        resolved = resolve_first(
            analyzer, "class A { java.io.File file; }", "scoped_type_identifier"
        )
        assert resolved == ConcreteTypeIdentifier(name="java.io.File")


class TestGenericTypes:
    """Test recursive resolution of parameterized types"""

    def test_single_parameter(self, analyzer):
        resolved = resolve_first(analyzer, "class A { List<String> names; }", "generic_type")
        assert resolved == GenericTypeIdentifier(
            name="List", type_parameters=[ConcreteTypeIdentifier(name="String")]
        )

    def test_nested_parameters(self, analyzer):
        resolved = resolve_first(
            analyzer, "class A { Map<Int, List<String>> index; }", "generic_type"
        )
        assert resolved == GenericTypeIdentifier(
            name="Map",
            type_parameters=[
                ConcreteTypeIdentifier(name="Int"),
                GenericTypeIdentifier(
                    name="List", type_parameters=[ConcreteTypeIdentifier(name="String")]
                ),
            ],
        )
        assert str(resolved) == "Map<Int, List<String>>"

    def test_deep_nesting_keeps_order(self, analyzer):
        resolved = resolve_first(
            analyzer,
            "class A { Map<List<Set<Long>>, Optional<Map<String, Boolean>>> deep; }",
            "generic_type",
        )
        assert str(resolved) == "Map<List<Set<Long>>, Optional<Map<String, Boolean>>>"

    def test_scoped_generic_name(self, analyzer):
        resolved = resolve_first(
            analyzer, "class A { Map.Entry<String, Integer> entry; }", "generic_type"
        )
        assert resolved.name == "Map.Entry"
        assert [str(p) for p in resolved.type_parameters] == ["String", "Integer"]

    def test_wildcard_parameter(self, analyzer):
        resolved = resolve_first(
            analyzer, "class A { List<? extends Number> values; }", "generic_type"
        )
        assert resolved.type_parameters == [
            ConcreteTypeIdentifier(name="? extends Number")
        ]

    def test_diamond(self, analyzer):
        resolved = resolve_first(
            analyzer, "class A { Object m = new HashMap<>(); }", "generic_type"
        )
        assert resolved == GenericTypeIdentifier(name="HashMap", type_parameters=[])

    def test_resolution_is_repeatable(self, analyzer):
        source = "class A { Map<Int, List<String>> index; }"
        assert resolve_first(analyzer, source, "generic_type") == resolve_first(
            analyzer, source, "generic_type"
        )


class TestUnrecognizedTypes:
    """Test explicit failure on non-type syntax"""

    def test_identifier_is_not_a_type(self):
        lines = SourceLines("value")
        node = FakeNode("identifier", (0, 0), (0, 5))

        with pytest.raises(UnrecognizedTypeSyntax) as excinfo:
            TypeResolver(lines).resolve(node)

        assert excinfo.value.kind == "identifier"
        assert excinfo.value.text == "value"
        assert excinfo.value.row == 0
        assert "identifier" in str(excinfo.value)
        assert "line 1" in str(excinfo.value)

    def test_unknown_kind_inside_type_arguments(self):
        source = "List<x>"
        node = FakeNode(
            "generic_type",
            (0, 0),
            (0, 7),
            [
                FakeNode("type_identifier", (0, 0), (0, 4)),
                FakeNode(
                    "type_arguments",
                    (0, 4),
                    (0, 7),
                    [
                        FakeNode("<", (0, 4), (0, 5)),
                        FakeNode("mystery", (0, 5), (0, 6)),
                        FakeNode(">", (0, 6), (0, 7)),
                    ],
                ),
            ],
        )

        with pytest.raises(UnrecognizedTypeSyntax) as excinfo:
            TypeResolver(SourceLines(source)).resolve(node)

        assert excinfo.value.kind == "mystery"
        assert excinfo.value.text == "x"

    def test_generic_without_name(self):
        node = FakeNode(
            "generic_type",
            (0, 0),
            (0, 2),
            [FakeNode("type_arguments", (0, 0), (0, 2), [])],
        )

        with pytest.raises(UnrecognizedTypeSyntax):
            TypeResolver(SourceLines("<>")).resolve(node)
