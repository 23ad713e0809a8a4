#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2tg/renderers/telegram.py
"""Telegram MarkdownV2 rendering from AST.

This module provides the TelegramRenderer class and the tree walker of the
export. It visits the AST depth-first, renders every node's children before
the node itself, gathers the node's metadata (asking the link resolver, the
code formatter and the source accessor where needed) and passes everything
to :func:`org2tg.translator.translate`.

"""

from __future__ import annotations

import logging
from typing import Any, Optional

from org2tg.ast.nodes import (
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
from org2tg.ast.utils import extract_text
from org2tg.ast.visitors import NodeVisitor
from org2tg.codeblocks import format_code_block
from org2tg.constants import NETWORK_LINK_TYPES
from org2tg.links import DefaultLinkResolver, LinkResolver
from org2tg.options.telegram import TelegramRendererOptions
from org2tg.renderers.base import BaseRenderer
from org2tg.source import SourceAccessor
from org2tg.translator import translate
from org2tg.utils.decorators import debug_timer
from org2tg.utils.escape import EscapeConfig

logger = logging.getLogger(__name__)


class _MarkdownV2Walker(NodeVisitor):
    """Depth-first walk of one document.

    Each render pass gets its own walker, so the escaping config, the link
    resolver and the document source belong to exactly one document.
    Every ``visit_*`` method returns the node's fragment as a string.

    """

    def __init__(self, config: EscapeConfig, resolver: LinkResolver, source: SourceAccessor):
        self.config = config
        self.resolver = resolver
        self.source = source

    def _translate(self, node: Node, rendered: str = "", **metadata: Any) -> str:
        return translate(node.kind, metadata, rendered, self.config)

    def _render_all(self, nodes: list[Node], joiner: str = "") -> str:
        return joiner.join(node.accept(self) for node in nodes)

    def visit_document(self, node: Document) -> str:
        """Render a Document node."""
        return self._translate(node, self._render_all(node.children))

    def visit_heading(self, node: Heading) -> str:
        """Render a Heading node and its section."""
        title = self._render_all(node.content)
        return self._translate(node, self._render_all(node.children), level=node.level, title=title)

    def visit_paragraph(self, node: Paragraph) -> str:
        """Render a Paragraph node."""
        return self._translate(node, self._render_all(node.content))

    def visit_code_block(self, node: CodeBlock) -> str:
        """Render a source block."""
        return self._translate(node, code=format_code_block(node))

    def visit_example_block(self, node: ExampleBlock) -> str:
        """Render an example block."""
        return self._translate(node, code=format_code_block(node))

    def visit_table(self, node: Table) -> str:
        """Render a Table node from its source text."""
        raw_source = self.source.slice(node.begin, node.end)
        if raw_source is None:
            logger.debug("Table without usable source range (%s, %s) dropped", node.begin, node.end)
        return self._translate(node, raw_source=raw_source)

    def visit_table_row(self, node: TableRow) -> str:
        """Render a TableRow node."""
        return self._translate(node, self._render_all(list(node.cells), joiner=" "))

    def visit_table_cell(self, node: TableCell) -> str:
        """Render a TableCell node."""
        return self._translate(node, self._render_all(node.content))

    def visit_text(self, node: Text) -> str:
        """Render a Text node."""
        return self._translate(node, value=node.content)

    def visit_strong(self, node: Strong) -> str:
        """Render a Strong node."""
        return self._translate(node, self._render_all(node.content))

    def visit_emphasis(self, node: Emphasis) -> str:
        """Render an Emphasis node."""
        return self._translate(node, self._render_all(node.content))

    def visit_underline(self, node: Underline) -> str:
        """Render an Underline node."""
        return self._translate(node, self._render_all(node.content))

    def visit_strikethrough(self, node: Strikethrough) -> str:
        """Render a Strikethrough node."""
        return self._translate(node, self._render_all(node.content))

    def visit_code(self, node: Code) -> str:
        """Render an inline Code node."""
        return self._translate(node, value=node.content)

    def visit_verbatim(self, node: Verbatim) -> str:
        """Render an inline Verbatim node."""
        return self._translate(node, value=node.content)

    def visit_link(self, node: Link) -> str:
        """Render a Link node.

        A description made only of text is compared with the target as plain
        text. Descriptions with markup are compared in rendered form, so the
        markup is never dropped.

        """
        resolved_path: Optional[str] = None
        if node.link_type not in NETWORK_LINK_TYPES:
            resolved_path = self.resolver.resolve(node)

        description: Optional[str] = None
        if node.content and all(isinstance(child, Text) for child in node.content):
            description = extract_text(node.content)
        return self._translate(
            node,
            self._render_all(node.content),
            link_type=node.link_type,
            path=node.path,
            resolved_path=resolved_path,
            description=description,
        )


class TelegramRenderer(BaseRenderer):
    r"""Render AST nodes to Telegram MarkdownV2.

    Parameters
    ----------
    options : TelegramRendererOptions or None, default = None
        MarkdownV2 rendering options

    Examples
    --------
        >>> from org2tg.ast import Document, Paragraph, Strong, Text
        >>> doc = Document(children=[
        ...     Paragraph(content=[Text(content="Hi "), Strong(content=[Text(content="there!")])])
        ... ])
        >>> TelegramRenderer().render_to_string(doc)
        'Hi **there\\!**'

    Notes
    -----
    Tables are exported from their source text, so table rows and cells are
    not visited when rendering a whole table.

    """

    def __init__(self, options: TelegramRendererOptions | None = None):
        """Initialize the renderer with options."""
        BaseRenderer._validate_options_type(options, TelegramRendererOptions, "telegram")
        options = options or TelegramRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: TelegramRendererOptions = options

    def render_to_string(self, doc: Document) -> str:
        """Render a document AST to a MarkdownV2 string.

        Parameters
        ----------
        doc : Document
            The document node to render

        Returns
        -------
        str
            MarkdownV2 text without leading or trailing blank lines

        """
        walker = _MarkdownV2Walker(
            config=self.options.escape_config,
            resolver=self.options.link_resolver or DefaultLinkResolver(doc),
            source=SourceAccessor(doc.source),
        )

        with debug_timer(logger, "Rendering (telegram)"):
            return doc.accept(walker)


__all__ = ["TelegramRenderer"]
