#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2tg/ast/__init__.py
"""Abstract Syntax Tree (AST) module for exported Org documents.

The parser builds this tree from Org source; the Telegram renderer walks it
bottom-up and hands every node to the MarkdownV2 translator.

- nodes: AST node classes and the closed ``NodeKind`` enumeration
- visitors: visitor pattern base classes
- utils: text extraction and anchor helpers

Examples
--------
    >>> from org2tg.ast import Document, Heading, Paragraph, Text
    >>> from org2tg.renderers.telegram import TelegramRenderer
    >>>
    >>> doc = Document(children=[
    ...     Heading(level=1, content=[Text(content="Title")], children=[
    ...         Paragraph(content=[Text(content="Hello world")])
    ...     ])
    ... ])
    >>> print(TelegramRenderer().render_to_string(doc))
    # **Title**
    <BLANKLINE>
    Hello world

"""

from __future__ import annotations

from org2tg.ast.nodes import (
    Code,
    CodeBlock,
    Document,
    Emphasis,
    ExampleBlock,
    Heading,
    Link,
    Node,
    NodeKind,
    Paragraph,
    Strikethrough,
    Strong,
    Table,
    TableCell,
    TableRow,
    Text,
    Underline,
    Verbatim,
    get_node_children,
)
from org2tg.ast.utils import extract_text, slugify
from org2tg.ast.visitors import NodeVisitor, TraversingVisitor

__all__ = [
    "Code",
    "CodeBlock",
    "Document",
    "Emphasis",
    "ExampleBlock",
    "Heading",
    "Link",
    "Node",
    "NodeKind",
    "NodeVisitor",
    "Paragraph",
    "Strikethrough",
    "Strong",
    "Table",
    "TableCell",
    "TableRow",
    "Text",
    "TraversingVisitor",
    "Underline",
    "Verbatim",
    "extract_text",
    "get_node_children",
    "slugify",
]
