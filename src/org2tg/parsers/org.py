#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2tg/parsers/org.py
"""Org-Mode to AST converter.

This module provides conversion from Org-Mode documents to the org2tg AST.
The heading tree, TODO states, priorities and properties come from the
orgparse library. Section bodies are scanned line by line so that every
block keeps its position in the original text; tables record the character
range they occupy, which the Telegram renderer exports verbatim.

"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import IO, Any, NamedTuple, Optional, Union

from org2tg.ast import (
    Code,
    CodeBlock,
    Document,
    Emphasis,
    ExampleBlock,
    Heading,
    Link,
    Node,
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
from org2tg.constants import (
    DEPS_ORG,
    LINK_TYPE_CUSTOM_ID,
    LINK_TYPE_FILE,
    LINK_TYPE_FUZZY,
    ORG_LINK_TYPES,
    ORG_PLANNING_KEYWORDS,
)
from org2tg.exceptions import ParsingError
from org2tg.options.org import OrgParserOptions
from org2tg.parsers.base import BaseParser
from org2tg.utils.decorators import debug_timer, requires_dependencies

logger = logging.getLogger(__name__)

# Same header test orgparse uses, so both agree on where headings are
_HEADING_LINE = re.compile(r"^\*+ ")
_HEADING_TAGS = re.compile(r"\s(:(?:[\w@#%]+:)+)\s*$")
_HEADING_PRIORITY = re.compile(r"^\[#([A-Z0-9])\]\s*(.*)$")

_BLOCK_BEGIN = re.compile(r"^\s*#\+begin_(src|example)\b(.*)$", re.IGNORECASE)
_BLOCK_ESCAPED_LINE = re.compile(r"^(\s*),(\*|#\+)")
_DRAWER_BEGIN = re.compile(r"^\s*:[\w-]+:\s*$")
_DRAWER_END = re.compile(r"^\s*:END:\s*$", re.IGNORECASE)
_COMMENT_LINE = re.compile(r"^\s*#(?:\s|$)")
_TABLE_RULE = re.compile(r"^\|[-+=]")

# Emphasis markers need whitespace or punctuation on both sides
_PRE = r"(?<![^\s\-({'\"])"
_POST = r"(?=[\s\-.,;:!?')}\"]|$)"


def _markup(name: str, marker: str) -> str:
    m = re.escape(marker)
    return rf"{_PRE}{m}(?P<{name}>[^\s{m}](?:[^{m}\n]*?[^\s{m}])?){m}{_POST}"


_MARKUP_ALTERNATIVES = "|".join(
    [
        _markup("code", "~"),
        _markup("verbatim", "="),
        _markup("bold", "*"),
        _markup("italic", "/"),
        _markup("underline", "_"),
        _markup("strike", "+"),
    ]
)

_INLINE_PATTERN = re.compile(
    r"\[\[(?P<link>[^\]]+)\](?:\[(?P<link_desc>.+?)\])?\]"  # [[target]] or [[target][description]]
    r"|(?P<url>(?:https?|ftp)://[^\s<>\"{}|\\^`\[\]]*[^\s<>\"{}|\\^`\[\].,;:!?)'])"  # bare URL
    + "|"
    + _MARKUP_ALTERNATIVES
)

# Org does not nest links, so descriptions only carry emphasis and code
_DESCRIPTION_PATTERN = re.compile(_MARKUP_ALTERNATIVES)


class _SourceLine(NamedTuple):
    """One source line with its character range in the document."""

    text: str
    begin: int
    end: int


def _split_source_lines(content: str) -> list[_SourceLine]:
    lines = []
    offset = 0
    # splitlines() matches how orgparse splits its input
    for raw in content.splitlines(keepends=True):
        lines.append(_SourceLine(text=raw.splitlines()[0], begin=offset, end=offset + len(raw)))
        offset += len(raw)
    return lines


def classify_link(target: str) -> tuple[str, str]:
    """Split an Org link target into link type and path.

    Parameters
    ----------
    target : str
        Target as written between ``[[`` and ``]]``

    Returns
    -------
    tuple[str, str]
        ``(link_type, path)``; the path has the type prefix removed

    Examples
    --------
        >>> classify_link("https://example.com")
        ('https', '//example.com')
        >>> classify_link("#intro")
        ('custom-id', 'intro')
        >>> classify_link("./notes.org")
        ('file', './notes.org')
        >>> classify_link("*Some heading")
        ('fuzzy', '*Some heading')

    """
    target = target.strip()
    if target.startswith("#"):
        return LINK_TYPE_CUSTOM_ID, target[1:]

    scheme, sep, rest = target.partition(":")
    if sep and scheme.lower() in ORG_LINK_TYPES:
        return scheme.lower(), rest

    if target.startswith(("/", "./", "../", "~/")):
        return LINK_TYPE_FILE, target

    return LINK_TYPE_FUZZY, target


class OrgParser(BaseParser):
    r"""Convert Org-Mode to AST representation.

    Parameters
    ----------
    options : OrgParserOptions or None, default = None
        Parser configuration options

    Notes
    -----
    Supported elements:

    - headings, nested by level, with TODO keyword, priority, tags and
      properties drawer stored in heading metadata
    - ``#+BEGIN_SRC`` and ``#+BEGIN_EXAMPLE`` blocks with their switches
    - tables (rule lines are kept in the source range but are not rows)
    - paragraphs with ``*bold*``, ``/italic/``, ``_underline_``,
      ``+strike+``, ``~code~``, ``=verbatim=``, bracket links and bare URLs

    Keyword lines (``#+TITLE:``), comments, planning lines and drawers are
    not exported. Lists, quotes and other block types are read as
    paragraphs.

    Examples
    --------
    Basic parsing:

        >>> parser = OrgParser()
        >>> doc = parser.parse("* Heading\n\nThis is *bold*.")

    With options:

        >>> options = OrgParserOptions(
        ...     todo_keywords=["TODO", "NEXT", "DONE"],
        ...     parse_tags=False
        ... )
        >>> doc = OrgParser(options).parse(org_text)

    """

    def __init__(self, options: OrgParserOptions | None = None):
        """Initialize the Org parser with options."""
        BaseParser._validate_options_type(options, OrgParserOptions, "org")
        options = options or OrgParserOptions()
        super().__init__(options)
        self.options: OrgParserOptions = options

    @requires_dependencies("org", DEPS_ORG)
    def parse(self, input_data: Union[str, Path, IO[bytes], IO[str], bytes]) -> Document:
        """Parse Org-Mode input into AST Document.

        Parameters
        ----------
        input_data : str, Path, IO[bytes], IO[str] or bytes
            Org-Mode input to parse. Can be:
            - File path (str or Path)
            - File-like object
            - Raw Org bytes
            - Org string

        Returns
        -------
        Document
            AST document node; ``Document.source`` holds the decoded text

        Raises
        ------
        DependencyError
            If orgparse is not installed
        ParsingError
            If parsing fails

        """
        org_content = self._load_text_content(input_data)

        import orgparse

        with debug_timer(logger, "Parsing (org)"):
            try:
                root = orgparse.loads(org_content)
            except Exception as e:
                raise ParsingError(
                    f"Failed to parse Org-Mode: {e}", parsing_stage="orgparse", original_error=e
                ) from e

            lines = _split_source_lines(org_content)
            heading_positions = [n for n, line in enumerate(lines) if _HEADING_LINE.match(line.text)]
            nodes = list(root)[1:]
            if len(nodes) != len(heading_positions):
                raise ParsingError(
                    f"Found {len(heading_positions)} heading lines but orgparse built {len(nodes)} nodes",
                    parsing_stage="heading_scan",
                )

            # Each node's section runs from its heading line to the next heading line
            sections: dict[int, tuple[_SourceLine, list[_SourceLine]]] = {}
            bounds = heading_positions + [len(lines)]
            for node, start, stop in zip(nodes, bounds, bounds[1:]):
                sections[id(node)] = (lines[start], lines[start + 1 : stop])

            children: list[Node] = self._process_body(lines[: bounds[0]])
            for node in root.children:
                children.append(self._process_node(node, sections))

            metadata = self.extract_metadata(root) if self.options.extract_metadata else {}

        return Document(children=children, metadata=metadata, source=org_content)

    def _process_node(self, node: Any, sections: dict[int, tuple[_SourceLine, list[_SourceLine]]]) -> Heading:
        """Process an orgparse node and its subtree into a Heading."""
        heading_line, body_lines = sections[id(node)]
        heading = self._process_headline(node, heading_line.text)
        heading.children.extend(self._process_body(body_lines))
        for child in node.children:
            heading.children.append(self._process_node(child, sections))
        return heading

    def _process_headline(self, node: Any, raw_line: str) -> Heading:
        """Build a Heading from an orgparse node.

        Parameters
        ----------
        node : orgparse.OrgNode
            Orgparse node representing a headline
        raw_line : str
            The heading line as written, used for tag order

        Returns
        -------
        Heading
            Heading with title content and metadata, without children

        """
        heading_text = node.heading or ""

        # orgparse only knows TODO and DONE; other keywords are still in the text
        todo_state = None
        if node.todo:
            if node.todo in self.options.todo_keywords:
                todo_state = node.todo
            else:
                heading_text = f"{node.todo} {heading_text}".strip()
        else:
            parts = heading_text.split(None, 1)
            if parts and parts[0] in self.options.todo_keywords:
                todo_state = parts[0]
                heading_text = parts[1] if len(parts) > 1 else ""

        priority = getattr(node, "priority", None)
        if not priority:
            priority_match = _HEADING_PRIORITY.match(heading_text)
            if priority_match:
                priority = priority_match.group(1)
                heading_text = priority_match.group(2)

        tags: list[str] = []
        tags_match = _HEADING_TAGS.search(raw_line)
        if tags_match:
            if self.options.parse_tags:
                tags = [tag for tag in tags_match.group(1).split(":") if tag]
            elif not heading_text.endswith(tags_match.group(1)):
                heading_text = f"{heading_text} {tags_match.group(1)}".strip()

        heading_metadata: dict[str, Any] = {}
        if todo_state:
            heading_metadata["org_todo_state"] = todo_state
        if priority:
            heading_metadata["org_priority"] = priority
        if tags:
            heading_metadata["org_tags"] = tags
        if getattr(node, "properties", None):
            heading_metadata["org_properties"] = dict(node.properties)

        return Heading(level=node.level, content=self._parse_inline(heading_text), metadata=heading_metadata)

    def _process_body(self, lines: list[_SourceLine]) -> list[Node]:
        """Scan section lines into block nodes.

        Parameters
        ----------
        lines : list[_SourceLine]
            Lines of one section body, in order

        Returns
        -------
        list[Node]
            Paragraphs, code blocks, example blocks and tables

        """
        result: list[Node] = []
        paragraph: list[str] = []
        i = 0

        while i < len(lines):
            text = lines[i].text
            stripped = text.strip()

            if not stripped:
                self._flush_paragraph(paragraph, result)
                i += 1
                continue

            block_match = _BLOCK_BEGIN.match(text)
            if block_match:
                block_type = block_match.group(1).lower()
                end = self._find_line(lines, i + 1, re.compile(rf"^\s*#\+end_{block_type}\b", re.IGNORECASE))
                if end is not None:
                    self._flush_paragraph(paragraph, result)
                    result.append(self._parse_block(block_type, block_match.group(2), lines[i + 1 : end]))
                    i = end + 1
                    continue

            if stripped.startswith("|"):
                self._flush_paragraph(paragraph, result)
                j = i
                while j < len(lines) and lines[j].text.lstrip().startswith("|"):
                    j += 1
                result.append(self._parse_table(lines[i:j]))
                i = j
                continue

            if _DRAWER_BEGIN.match(text):
                end = self._find_line(lines, i + 1, _DRAWER_END)
                if end is not None:
                    self._flush_paragraph(paragraph, result)
                    i = end + 1
                    continue

            if stripped.startswith("#+") or _COMMENT_LINE.match(text) or stripped.startswith(ORG_PLANNING_KEYWORDS):
                self._flush_paragraph(paragraph, result)
                i += 1
                continue

            paragraph.append(stripped)
            i += 1

        self._flush_paragraph(paragraph, result)
        return result

    @staticmethod
    def _find_line(lines: list[_SourceLine], start: int, pattern: re.Pattern[str]) -> Optional[int]:
        for index in range(start, len(lines)):
            if pattern.match(lines[index].text):
                return index
        return None

    def _flush_paragraph(self, paragraph: list[str], result: list[Node]) -> None:
        if paragraph:
            result.append(Paragraph(content=self._parse_inline("\n".join(paragraph))))
            paragraph.clear()

    def _parse_block(self, block_type: str, header: str, lines: list[_SourceLine]) -> Node:
        """Parse a src or example block.

        Parameters
        ----------
        block_type : str
            ``"src"`` or ``"example"``
        header : str
            Text after ``#+BEGIN_SRC`` / ``#+BEGIN_EXAMPLE``
        lines : list[_SourceLine]
            Lines between the begin and end lines

        Returns
        -------
        Node
            CodeBlock or ExampleBlock

        """
        tokens = header.split()
        language = None
        if block_type == "src" and tokens and not tokens[0].startswith(("-", "+", ":")):
            language = tokens.pop(0)

        switches = []
        while tokens and not tokens[0].startswith(":"):
            switches.append(tokens.pop(0))
        header_args = " ".join(tokens)

        # ",*" and ",#+" protect lines that would otherwise start a heading or keyword
        content = "\n".join(_BLOCK_ESCAPED_LINE.sub(r"\1\2", line.text) for line in lines)

        if block_type == "example":
            return ExampleBlock(content=content, switches=" ".join(switches))

        metadata = {"org_header_args": header_args} if header_args else {}
        return CodeBlock(content=content, language=language, switches=" ".join(switches), metadata=metadata)

    def _parse_table(self, lines: list[_SourceLine]) -> Table:
        """Parse consecutive table lines.

        The table's ``begin``/``end`` cover the lines exactly, including the
        final line break, so slicing the document source gives back the
        table as written.

        """
        rows: list[TableRow] = []
        for line in lines:
            stripped = line.text.strip()
            if _TABLE_RULE.match(stripped):
                continue
            cells_text = stripped[1:]
            if cells_text.endswith("|"):
                cells_text = cells_text[:-1]
            cells = [TableCell(content=self._parse_inline(cell.strip())) for cell in cells_text.split("|")]
            rows.append(TableRow(cells=cells))

        return Table(rows=rows, begin=lines[0].begin, end=lines[-1].end)

    def _parse_inline(self, text: str, pattern: re.Pattern[str] = _INLINE_PATTERN) -> list[Node]:
        r"""Parse inline formatting in text.

        Handles Org-Mode inline formatting:
        - *bold* -> Strong
        - /italic/ -> Emphasis
        - _underline_ -> Underline
        - +strike+ -> Strikethrough
        - ~code~ -> Code
        - =verbatim= -> Verbatim
        - [[target][description]] and [[target]] -> Link
        - bare http(s)/ftp URLs -> Link without description

        Emphasis may nest; code and verbatim contents are literal.

        Parameters
        ----------
        text : str
            Text with inline formatting
        pattern : re.Pattern, default _INLINE_PATTERN
            Inline pattern to scan with. Link descriptions use one without
            link and URL alternatives.

        Returns
        -------
        list[Node]
            List of inline AST nodes

        """
        result: list[Node] = []
        pos = 0

        for match in pattern.finditer(text):
            if match.start() > pos:
                result.append(Text(content=text[pos : match.start()]))

            groups = match.groupdict()
            if groups.get("link") is not None:
                link_type, path = classify_link(groups["link"])
                description = groups["link_desc"]
                content = self._parse_inline(description, _DESCRIPTION_PATTERN) if description else []
                result.append(Link(link_type=link_type, path=path, content=content))
            elif groups.get("url") is not None:
                link_type, path = classify_link(groups["url"])
                result.append(Link(link_type=link_type, path=path))
            elif groups["code"] is not None:
                result.append(Code(content=groups["code"]))
            elif groups["verbatim"] is not None:
                result.append(Verbatim(content=groups["verbatim"]))
            elif groups["bold"] is not None:
                result.append(Strong(content=self._parse_inline(groups["bold"], pattern)))
            elif groups["italic"] is not None:
                result.append(Emphasis(content=self._parse_inline(groups["italic"], pattern)))
            elif groups["underline"] is not None:
                result.append(Underline(content=self._parse_inline(groups["underline"], pattern)))
            else:
                result.append(Strikethrough(content=self._parse_inline(groups["strike"], pattern)))

            pos = match.end()

        if pos < len(text):
            result.append(Text(content=text[pos:]))

        return result if result else [Text(content=text)]

    def extract_metadata(self, document: Any) -> dict[str, Any]:
        """Extract metadata from an orgparse document.

        Parameters
        ----------
        document : orgparse.OrgNode
            Parsed orgparse root node

        Returns
        -------
        dict
            ``title``, ``author`` and ``date`` where available. The title
            falls back to the first heading.

        """
        metadata: dict[str, Any] = {}

        if hasattr(document, "get_file_property"):
            for key in ("TITLE", "AUTHOR", "DATE"):
                value = document.get_file_property(key)
                if value:
                    metadata[key.lower()] = value

        if "title" not in metadata and document.children:
            first_child = document.children[0]
            if getattr(first_child, "heading", None):
                metadata["title"] = first_child.heading

        return metadata
