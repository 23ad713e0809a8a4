#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/renderers/test_telegram_renderer.py
"""Unit tests for the Telegram MarkdownV2 renderer.

The documents here are built by hand so that each test exercises the tree
walk without the Org parser.

"""

from typing import Optional

import pytest

from org2tg.ast import (
    Code,
    CodeBlock,
    Document,
    Emphasis,
    ExampleBlock,
    Heading,
    Link,
    Paragraph,
    Strikethrough,
    Strong,
    Table,
    TableCell,
    TableRow,
    Text,
    Underline,
    Verbatim,
)
from org2tg.exceptions import InvalidOptionsError
from org2tg.options import OrgParserOptions, TelegramRendererOptions
from org2tg.renderers.telegram import TelegramRenderer


def _render(*children, options: Optional[TelegramRendererOptions] = None, source: Optional[str] = None) -> str:
    return TelegramRenderer(options).render_to_string(Document(children=list(children), source=source))


def _para(*content) -> Paragraph:
    return Paragraph(content=list(content))


class RecordingResolver:
    """Resolver that answers from a fixed mapping and records its calls."""

    def __init__(self, targets: dict):
        self.targets = targets
        self.calls: list[str] = []

    def resolve(self, link: Link) -> Optional[str]:
        self.calls.append(link.path)
        return self.targets.get(link.path)


class NestedRenderResolver:
    """Resolver that renders a second document before answering."""

    def __init__(self):
        self.renderer: Optional[TelegramRenderer] = None
        self.outputs: list[str] = []

    def resolve(self, link: Link) -> Optional[str]:
        other = Document(children=[_para(Text(content="other"))], source="a different source text")
        self.outputs.append(self.renderer.render_to_string(other))
        return f"#{link.path}"


@pytest.mark.unit
class TestBasicRendering:
    """Tests for paragraphs and inline markup."""

    def test_empty_document(self) -> None:
        """An empty document renders to an empty string."""
        assert _render() == ""

    def test_paragraph_text_escaped(self) -> None:
        """Plain text is escaped once."""
        assert _render(_para(Text(content="Price: $5 (approx.)"))) == "Price: $5 \\(approx\\.\\)"

    def test_paragraphs_separated_by_blank_line(self) -> None:
        """Consecutive paragraphs are separated by one blank line."""
        result = _render(_para(Text(content="one")), _para(Text(content="two")))
        assert result == "one\n\ntwo"

    def test_empty_paragraph_dropped(self) -> None:
        """Whitespace-only paragraphs leave no trace."""
        result = _render(_para(Text(content="one")), _para(Text(content="  ")), _para(Text(content="two")))
        assert result == "one\n\ntwo"

    @pytest.mark.parametrize(
        "node,expected",
        [
            (Strong(content=[Text(content="b")]), "**b**"),
            (Emphasis(content=[Text(content="i")]), "__i__"),
            (Underline(content=[Text(content="u")]), "__u__"),
            (Strikethrough(content=[Text(content="s")]), "~~s~~"),
            (Code(content="x+1"), "`x\\+1`"),
            (Verbatim(content="a.b"), "`a\\.b`"),
        ],
    )
    def test_inline_markup(self, node, expected: str) -> None:
        """Each inline node uses its MarkdownV2 markers."""
        assert _render(_para(node)) == expected

    def test_nested_markup_escapes_once(self) -> None:
        """Reserved characters inside nested markup get one backslash."""
        node = Strong(content=[Text(content="a."), Emphasis(content=[Text(content="b!")])])
        assert _render(_para(node)) == "**a\\.__b\\!__**"

    def test_escape_disabled(self) -> None:
        """With escaping off, reserved characters are left alone."""
        options = TelegramRendererOptions(escape=False)
        result = _render(_para(Text(content="a.b "), Code(content="x_y")), options=options)
        assert result == "a.b `x_y`"

    def test_entities_normalized(self) -> None:
        """HTML entities become literal characters before escaping."""
        assert _render(_para(Text(content="&ldquo;quoted&rdquo; &amp; more"))) == '"quoted" & more'


@pytest.mark.unit
class TestHeadings:
    """Tests for heading rendering."""

    def test_heading_and_section(self) -> None:
        """A heading renders its title, then its section."""
        heading = Heading(
            level=1,
            content=[Text(content="Title")],
            children=[_para(Text(content="Body."))],
        )
        assert _render(heading) == "# **Title**\n\nBody\\."

    def test_nested_headings(self) -> None:
        """Sub-headings follow their parent's section content."""
        heading = Heading(
            level=1,
            content=[Text(content="A")],
            children=[
                _para(Text(content="intro")),
                Heading(level=2, content=[Text(content="B")], children=[_para(Text(content="inner"))]),
            ],
        )
        assert _render(heading) == "# **A**\n\nintro\n\n## **B**\n\ninner"

    def test_deep_heading_clamped(self) -> None:
        """Levels deeper than six use six hashes."""
        assert _render(Heading(level=8, content=[Text(content="Deep")])) == "###### **Deep**"

    def test_title_escaped(self) -> None:
        """Title text is escaped inside the bold markers."""
        assert _render(Heading(level=2, content=[Text(content="v1.0")])) == "## **v1\\.0**"

    def test_empty_title_has_no_bold_span(self) -> None:
        """A heading without title text renders only its hashes."""
        heading = Heading(level=2, content=[Text(content=" ")], children=[_para(Text(content="Body"))])
        assert _render(heading) == "##\n\nBody"


@pytest.mark.unit
class TestBlocks:
    """Tests for code blocks and tables."""

    def test_code_block(self) -> None:
        """Source blocks are fenced and escaped."""
        block = CodeBlock(content="print(1)\n", language="python")
        assert _render(block) == "```\nprint\\(1\\)\n```"

    def test_numbered_example_block(self) -> None:
        """Block switches are applied before escaping."""
        block = ExampleBlock(content="a\nb", switches="-n")
        assert _render(block) == "```\n1  a\n2  b\n```"

    def test_table_from_source(self) -> None:
        """Tables are exported from their source text without escaping."""
        source = "intro\n| a | b.c |\n|---+-----|\n| 1 | 2   |\nend\n"
        begin = source.index("|")
        end = source.index("end")
        table = Table(
            rows=[TableRow(cells=[TableCell(content=[Text(content="a")])])],
            begin=begin,
            end=end,
        )
        result = _render(table, source=source)
        assert result == "```\n| a | b.c |\n|---+-----|\n| 1 | 2   |\n```"

    def test_table_without_source_dropped(self) -> None:
        """A table whose source is unavailable produces no output."""
        table = Table(rows=[TableRow(cells=[TableCell(content=[Text(content="a")])])], begin=0, end=5)
        assert _render(_para(Text(content="x")), table) == "x"

    def test_table_with_bad_range_dropped(self) -> None:
        """Offsets outside the source are ignored."""
        table = Table(begin=3, end=100)
        assert _render(table, source="short") == ""

    def test_table_row_joins_cells(self) -> None:
        """Rows rendered outside a table join their cells with spaces."""
        row = TableRow(cells=[TableCell(content=[Text(content="a")]), TableCell(content=[Text(content="b")])])
        assert _render(row) == "a b"


@pytest.mark.unit
class TestLinks:
    """Tests for link rendering and resolution."""

    def test_network_link_with_description(self) -> None:
        """Description is escaped, URL is not."""
        link = Link(link_type="https", path="//example.com/a_b", content=[Text(content="the site!")])
        assert _render(_para(link)) == "[the site\\!](https://example.com/a_b)"

    def test_bare_network_link(self) -> None:
        """A link without description renders as its URL."""
        assert _render(_para(Link(link_type="https", path="//example.com"))) == "https://example.com"

    def test_description_equal_to_url(self) -> None:
        """A description identical to the URL is not repeated."""
        link = Link(link_type="https", path="//example.com", content=[Text(content="https://example.com")])
        assert _render(_para(link)) == "https://example.com"

    def test_network_link_skips_resolver(self) -> None:
        """Network links never reach the resolver."""
        resolver = RecordingResolver({"//example.com": "#hijacked"})
        options = TelegramRendererOptions(link_resolver=resolver)
        link = Link(link_type="https", path="//example.com", content=[Text(content="site")])

        assert _render(_para(link), options=options) == "[site](https://example.com)"
        assert resolver.calls == []

    def test_custom_resolver(self) -> None:
        """Non-network links use the configured resolver."""
        resolver = RecordingResolver({"abc": "https://wiki.example.com/abc"})
        options = TelegramRendererOptions(link_resolver=resolver)
        link = Link(link_type="id", path="abc", content=[Text(content="Other note")])

        assert _render(_para(link), options=options) == "[Other note](https://wiki.example.com/abc)"
        assert resolver.calls == ["abc"]

    def test_unresolved_link_uses_raw_path(self) -> None:
        """An unresolved link points at its raw path."""
        link = Link(link_type="id", path="abc-123", content=[Text(content="Other")])
        assert _render(_para(link)) == "[Other](abc-123)"

    def test_default_resolver_finds_headings(self) -> None:
        """Heading and custom-id links resolve within the document."""
        heading = Heading(
            level=1,
            content=[Text(content="Getting Started")],
            metadata={"org_properties": {"CUSTOM_ID": "start"}},
        )
        links = _para(
            Link(link_type="fuzzy", path="*Getting Started", content=[Text(content="here")]),
            Text(content=" "),
            Link(link_type="custom-id", path="start", content=[Text(content="there")]),
        )
        result = _render(links, heading)
        assert result.startswith("[here](#getting-started) [there](#start)")

    def test_file_link(self) -> None:
        """File links point at the file path."""
        link = Link(link_type="file", path="docs/notes.org", content=[Text(content="notes")])
        assert _render(_para(link)) == "[notes](docs/notes.org)"

    def test_url_description_distinct_from_target(self) -> None:
        """A description naming another URL is kept and escaped."""
        link = Link(link_type="https", path="//a.com", content=[Text(content="https://b.com")])
        assert _render(_para(link)) == "[https://b\\.com](https://a.com)"

    def test_markup_around_target_text_kept(self) -> None:
        """A styled description equal to the target keeps its markup."""
        link = Link(link_type="https", path="//a.com", content=[Strong(content=[Text(content="https://a.com")])])
        assert _render(_para(link)) == "[**https://a\\.com**](https://a.com)"


@pytest.mark.unit
class TestRendererOptions:
    """Tests for renderer construction."""

    def test_wrong_options_type(self) -> None:
        """Parser options are rejected by the renderer."""
        with pytest.raises(InvalidOptionsError):
            TelegramRenderer(OrgParserOptions())  # type: ignore[arg-type]

    def test_renderer_reusable(self) -> None:
        """One renderer can render several documents."""
        renderer = TelegramRenderer()
        first = Document(children=[_para(Text(content="one"))])
        second = Document(children=[_para(Text(content="two"))])

        assert renderer.render_to_string(first) == "one"
        assert renderer.render_to_string(second) == "two"

    def test_nested_render_keeps_document_state(self) -> None:
        """Rendering another document mid-pass leaves the outer pass intact."""
        resolver = NestedRenderResolver()
        renderer = TelegramRenderer(TelegramRendererOptions(link_resolver=resolver))
        resolver.renderer = renderer
        source = "| a.b |\n"
        outer = Document(
            children=[
                _para(Link(link_type="id", path="inner", content=[Text(content="see")])),
                Table(begin=0, end=len(source)),
            ],
            source=source,
        )

        assert renderer.render_to_string(outer) == "[see](#inner)\n\n```\n| a.b |\n```"
        assert resolver.outputs == ["other"]
