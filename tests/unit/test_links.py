#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_links.py
"""Unit tests for link resolution."""

from pathlib import Path

import pytest

from org2tg.ast import Document, Heading, Link, Paragraph, Text
from org2tg.links import DefaultLinkResolver, HeadingIndexVisitor, LinkResolver


def _doc() -> Document:
    return Document(
        children=[
            Heading(
                level=1,
                content=[Text(content="Getting Started")],
                metadata={"org_properties": {"CUSTOM_ID": "start"}},
                children=[
                    Paragraph(content=[Text(content="text")]),
                    Heading(level=2, content=[Text(content="Install & Run")]),
                ],
            ),
            Heading(level=1, content=[Text(content="Getting Started")]),
        ]
    )


@pytest.mark.unit
class TestHeadingIndexVisitor:
    """Tests for the heading index."""

    def test_collects_nested_titles(self) -> None:
        """Titles at every depth are indexed."""
        index = HeadingIndexVisitor()
        _doc().accept(index)

        assert index.titles == {"Getting Started": "getting-started", "Install & Run": "install-run"}

    def test_collects_custom_ids(self) -> None:
        """CUSTOM_ID properties are indexed."""
        index = HeadingIndexVisitor()
        _doc().accept(index)

        assert index.custom_ids == {"start"}


@pytest.mark.unit
class TestDefaultLinkResolver:
    """Tests for DefaultLinkResolver."""

    def test_is_a_link_resolver(self) -> None:
        """The default resolver satisfies the protocol."""
        assert isinstance(DefaultLinkResolver(), LinkResolver)

    @pytest.mark.parametrize("path", ["*Getting Started", "Getting Started", "*Install & Run"])
    def test_fuzzy_heading_links(self, path: str) -> None:
        """Heading links resolve to the heading anchor."""
        resolver = DefaultLinkResolver(_doc())
        expected = "#install-run" if "Install" in path else "#getting-started"

        assert resolver.resolve(Link(link_type="fuzzy", path=path)) == expected

    def test_unknown_heading(self) -> None:
        """A heading that does not exist is unresolved."""
        resolver = DefaultLinkResolver(_doc())
        assert resolver.resolve(Link(link_type="fuzzy", path="*Missing")) is None

    def test_custom_id(self) -> None:
        """Declared custom IDs resolve to an anchor."""
        resolver = DefaultLinkResolver(_doc())
        assert resolver.resolve(Link(link_type="custom-id", path="start")) == "#start"
        assert resolver.resolve(Link(link_type="custom-id", path="nowhere")) is None

    def test_file_link_expands_home(self) -> None:
        """File links expand a leading tilde."""
        resolved = DefaultLinkResolver().resolve(Link(link_type="file", path="~/notes.org"))
        assert resolved == (Path.home() / "notes.org").as_posix()

    def test_relative_file_link(self) -> None:
        """Relative file links stay relative."""
        assert DefaultLinkResolver().resolve(Link(link_type="file", path="./a/b.org")) == "a/b.org"

    def test_empty_file_link(self) -> None:
        """A file link without a path is unresolved."""
        assert DefaultLinkResolver().resolve(Link(link_type="file", path="")) is None

    def test_id_links_unresolved(self) -> None:
        """Org ID links have no default target."""
        assert DefaultLinkResolver(_doc()).resolve(Link(link_type="id", path="abc")) is None

    def test_without_document(self) -> None:
        """Without a document, heading links are unresolved."""
        assert DefaultLinkResolver().resolve(Link(link_type="fuzzy", path="*Getting Started")) is None
