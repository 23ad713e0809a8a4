#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2tg/ast/visitors.py
"""Visitor pattern implementation for AST traversal.

Visitors separate algorithms (rendering, indexing) from the node classes.
Each node's ``accept`` method calls the matching ``visit_*`` method.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

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
    get_node_children,
)


class NodeVisitor(ABC):
    """Abstract base class for AST node visitors.

    Subclasses implement a ``visit_*`` method for every node class.

    Examples
    --------
    Counting text nodes with a traversing visitor:

        >>> class TextCounter(TraversingVisitor):
        ...     def __init__(self):
        ...         self.count = 0
        ...
        ...     def visit_text(self, node):
        ...         self.count += 1
        ...
        >>> counter = TextCounter()
        >>> document.accept(counter)

    """

    @abstractmethod
    def visit_document(self, node: Document) -> Any:
        """Visit a Document node."""

    @abstractmethod
    def visit_heading(self, node: Heading) -> Any:
        """Visit a Heading node."""

    @abstractmethod
    def visit_paragraph(self, node: Paragraph) -> Any:
        """Visit a Paragraph node."""

    @abstractmethod
    def visit_code_block(self, node: CodeBlock) -> Any:
        """Visit a CodeBlock node."""

    @abstractmethod
    def visit_example_block(self, node: ExampleBlock) -> Any:
        """Visit an ExampleBlock node."""

    @abstractmethod
    def visit_table(self, node: Table) -> Any:
        """Visit a Table node."""

    @abstractmethod
    def visit_table_row(self, node: TableRow) -> Any:
        """Visit a TableRow node."""

    @abstractmethod
    def visit_table_cell(self, node: TableCell) -> Any:
        """Visit a TableCell node."""

    @abstractmethod
    def visit_text(self, node: Text) -> Any:
        """Visit a Text node."""

    @abstractmethod
    def visit_strong(self, node: Strong) -> Any:
        """Visit a Strong node."""

    @abstractmethod
    def visit_emphasis(self, node: Emphasis) -> Any:
        """Visit an Emphasis node."""

    @abstractmethod
    def visit_underline(self, node: Underline) -> Any:
        """Visit an Underline node."""

    @abstractmethod
    def visit_strikethrough(self, node: Strikethrough) -> Any:
        """Visit a Strikethrough node."""

    @abstractmethod
    def visit_code(self, node: Code) -> Any:
        """Visit a Code node."""

    @abstractmethod
    def visit_verbatim(self, node: Verbatim) -> Any:
        """Visit a Verbatim node."""

    @abstractmethod
    def visit_link(self, node: Link) -> Any:
        """Visit a Link node."""


class TraversingVisitor(NodeVisitor):
    """Visitor that walks the whole tree and does nothing by default.

    Override individual ``visit_*`` methods to act on specific nodes; call
    :meth:`generic_visit` from an override to keep descending.

    """

    def generic_visit(self, node: Node) -> None:
        """Visit every child of ``node`` in document order."""
        for child in get_node_children(node):
            child.accept(self)

    def visit_document(self, node: Document) -> None:
        """Visit a Document node."""
        self.generic_visit(node)

    def visit_heading(self, node: Heading) -> None:
        """Visit a Heading node."""
        self.generic_visit(node)

    def visit_paragraph(self, node: Paragraph) -> None:
        """Visit a Paragraph node."""
        self.generic_visit(node)

    def visit_code_block(self, node: CodeBlock) -> None:
        """Visit a CodeBlock node."""

    def visit_example_block(self, node: ExampleBlock) -> None:
        """Visit an ExampleBlock node."""

    def visit_table(self, node: Table) -> None:
        """Visit a Table node."""
        self.generic_visit(node)

    def visit_table_row(self, node: TableRow) -> None:
        """Visit a TableRow node."""
        self.generic_visit(node)

    def visit_table_cell(self, node: TableCell) -> None:
        """Visit a TableCell node."""
        self.generic_visit(node)

    def visit_text(self, node: Text) -> None:
        """Visit a Text node."""

    def visit_strong(self, node: Strong) -> None:
        """Visit a Strong node."""
        self.generic_visit(node)

    def visit_emphasis(self, node: Emphasis) -> None:
        """Visit an Emphasis node."""
        self.generic_visit(node)

    def visit_underline(self, node: Underline) -> None:
        """Visit an Underline node."""
        self.generic_visit(node)

    def visit_strikethrough(self, node: Strikethrough) -> None:
        """Visit a Strikethrough node."""
        self.generic_visit(node)

    def visit_code(self, node: Code) -> None:
        """Visit a Code node."""

    def visit_verbatim(self, node: Verbatim) -> None:
        """Visit a Verbatim node."""

    def visit_link(self, node: Link) -> None:
        """Visit a Link node."""
        self.generic_visit(node)
