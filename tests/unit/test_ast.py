#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_ast.py
"""Unit tests for AST nodes, visitors and utilities."""

import pytest

from org2tg.ast import (
    Code,
    CodeBlock,
    Document,
    Emphasis,
    Heading,
    Link,
    NodeKind,
    Paragraph,
    Strong,
    Table,
    TableCell,
    TableRow,
    Text,
    TraversingVisitor,
    Verbatim,
    extract_text,
    get_node_children,
    slugify,
)
from org2tg.source import SourceAccessor


class TextCollector(TraversingVisitor):
    """Collect text node contents in visiting order."""

    def __init__(self) -> None:
        self.seen: list[str] = []

    def visit_text(self, node: Text) -> None:
        self.seen.append(node.content)


@pytest.mark.unit
class TestNodes:
    """Tests for node classes."""

    @pytest.mark.parametrize(
        "node,kind",
        [
            (Document(), NodeKind.ROOT),
            (Heading(level=1), NodeKind.HEADING),
            (Paragraph(), NodeKind.PARAGRAPH),
            (CodeBlock(content=""), NodeKind.SRC_BLOCK),
            (Table(), NodeKind.TABLE),
            (Text(content=""), NodeKind.PLAIN_TEXT),
            (Emphasis(), NodeKind.ITALIC),
            (Verbatim(content=""), NodeKind.VERBATIM),
            (Link(link_type="https", path="//x"), NodeKind.LINK),
        ],
    )
    def test_node_kind(self, node, kind: NodeKind) -> None:
        """Each node class carries its kind."""
        assert node.kind is kind

    def test_link_raw_link(self) -> None:
        """The raw link rebuilds the target as written."""
        assert Link(link_type="https", path="//example.com").raw_link == "https://example.com"
        assert Link(link_type="fuzzy", path="*Intro").raw_link == "*Intro"

    def test_get_node_children(self) -> None:
        """A heading's title comes before its section."""
        title = Text(content="T")
        body = Paragraph()
        heading = Heading(level=1, content=[title], children=[body])

        assert get_node_children(heading) == [title, body]
        assert get_node_children(Code(content="x")) == []

    def test_table_children(self) -> None:
        """Tables contain rows, rows contain cells."""
        cell = TableCell()
        row = TableRow(cells=[cell])
        assert get_node_children(Table(rows=[row])) == [row]
        assert get_node_children(row) == [cell]


@pytest.mark.unit
class TestTraversingVisitor:
    """Tests for TraversingVisitor."""

    def test_visits_in_document_order(self) -> None:
        """Text is visited depth-first, title before section."""
        doc = Document(
            children=[
                Paragraph(content=[Text(content="a")]),
                Heading(
                    level=1,
                    content=[Text(content="b")],
                    children=[Paragraph(content=[Strong(content=[Text(content="c")])])],
                ),
            ]
        )
        collector = TextCollector()
        doc.accept(collector)

        assert collector.seen == ["a", "b", "c"]


@pytest.mark.unit
class TestExtractText:
    """Tests for extract_text."""

    def test_nested_markup(self) -> None:
        """Markup is dropped and text concatenated."""
        nodes = [Text(content="Hello "), Emphasis(content=[Text(content="world")]), Code(content="!")]
        assert extract_text(nodes) == "Hello world!"

    def test_joiner(self) -> None:
        """The joiner goes between sibling texts."""
        assert extract_text([Text(content="a"), Text(content="b")], joiner=" ") == "a b"

    def test_link_description(self) -> None:
        """Link text is its description."""
        link = Link(link_type="https", path="//x", content=[Text(content="desc")])
        assert extract_text(link) == "desc"

    def test_link_without_description(self) -> None:
        """A link without description contributes its written target."""
        nodes = [Text(content="see "), Link(link_type="https", path="//example.com")]
        assert extract_text(nodes) == "see https://example.com"


@pytest.mark.unit
class TestSlugify:
    """Tests for slugify."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("Getting Started: Part 1", "getting-started-part-1"),
            ("Version 1.0", "version-10"),
            ("Café au lait", "cafe-au-lait"),
            ("  spaced  out  ", "spaced-out"),
            ("snake_case", "snake-case"),
        ],
    )
    def test_slugify(self, text: str, expected: str) -> None:
        """Text becomes a lowercase hyphenated anchor."""
        assert slugify(text) == expected


@pytest.mark.unit
class TestSourceAccessor:
    """Tests for SourceAccessor."""

    def test_slice(self) -> None:
        """Offsets cut the exact substring."""
        assert SourceAccessor("abc\n| x |\n").slice(4, 10) == "| x |\n"

    @pytest.mark.parametrize(
        "begin,end",
        [(None, 3), (0, None), (-1, 2), (3, 2), (0, 99)],
    )
    def test_unusable_range(self, begin, end) -> None:
        """Missing or out-of-range offsets give None."""
        assert SourceAccessor("abcdef").slice(begin, end) is None

    def test_no_source(self) -> None:
        """Without source text nothing can be sliced."""
        assert SourceAccessor(None).slice(0, 1) is None

    def test_empty_range(self) -> None:
        """An empty range is an empty string."""
        assert SourceAccessor("abc").slice(1, 1) == ""
