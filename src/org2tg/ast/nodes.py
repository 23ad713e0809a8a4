#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2tg/ast/nodes.py
"""AST node classes for exported Org documents.

Each node class represents one semantic element of an Org document and is
tagged with a :class:`NodeKind`. The kind is the dispatch key of the
MarkdownV2 translator, so the set of kinds is closed: adding a node class
means adding a kind and a translation rule.

Node Hierarchy
--------------
Block-level nodes:
    - Document, Heading, Paragraph
    - CodeBlock (``#+BEGIN_SRC``), ExampleBlock (``#+BEGIN_EXAMPLE``)
    - Table, TableRow, TableCell

Inline nodes:
    - Text, Strong, Emphasis, Underline, Strikethrough
    - Code (``~code~``), Verbatim (``=verbatim=``)
    - Link

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Optional


class NodeKind(str, Enum):
    """Semantic category of a document node."""

    PLAIN_TEXT = "plain-text"
    PARAGRAPH = "paragraph"
    BOLD = "bold"
    ITALIC = "italic"
    UNDERLINE = "underline"
    STRIKE_THROUGH = "strike-through"
    CODE = "code"
    VERBATIM = "verbatim"
    SRC_BLOCK = "src-block"
    EXAMPLE_BLOCK = "example-block"
    TABLE = "table"
    TABLE_ROW = "table-row"
    TABLE_CELL = "table-cell"
    LINK = "link"
    HEADING = "heading"
    ROOT = "root"


class Node(ABC):
    """Base class for all AST nodes.

    Parameters
    ----------
    metadata : dict, default = empty dict
        Arbitrary metadata associated with this node

    """

    kind: ClassVar[NodeKind]
    metadata: dict[str, Any]

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass
class Document(Node):
    """Root document node.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes before the first heading, followed by top-level
        headings
    metadata : dict, default = empty dict
        Document-level metadata (title, author, date)
    source : str or None, default = None
        Original Org text the tree was parsed from. Table nodes refer to it
        through character offsets.

    """

    kind: ClassVar[NodeKind] = NodeKind.ROOT

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source: Optional[str] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this document."""
        return visitor.visit_document(self)


@dataclass
class Heading(Node):
    """Heading node with its section.

    Unlike flat Markdown headings, an Org heading owns the section below it:
    body blocks and sub-headings are its ``children``.

    Parameters
    ----------
    level : int
        Heading depth (number of stars). Not validated here; out-of-range
        values are clamped when rendered.
    content : list of Node, default = empty list
        Inline nodes representing the heading title
    children : list of Node, default = empty list
        Section content and nested headings
    metadata : dict, default = empty dict
        Heading metadata (``org_todo_state``, ``org_priority``, ``org_tags``)

    """

    kind: ClassVar[NodeKind] = NodeKind.HEADING

    level: int
    content: list[Node] = field(default_factory=list)
    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this heading."""
        return visitor.visit_heading(self)


@dataclass
class Paragraph(Node):
    """Paragraph node containing inline content."""

    kind: ClassVar[NodeKind] = NodeKind.PARAGRAPH

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this paragraph."""
        return visitor.visit_paragraph(self)


@dataclass
class CodeBlock(Node):
    """Source block node (``#+BEGIN_SRC``).

    Parameters
    ----------
    content : str
        Code content (not parsed for markup)
    language : str or None, default = None
        Language named on the ``#+BEGIN_SRC`` line
    switches : str, default = ""
        Block switches such as ``-n 10``
    metadata : dict, default = empty dict
        Code block metadata (``org_header_args``)

    """

    kind: ClassVar[NodeKind] = NodeKind.SRC_BLOCK

    content: str
    language: Optional[str] = None
    switches: str = ""
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this code block."""
        return visitor.visit_code_block(self)


@dataclass
class ExampleBlock(Node):
    """Example block node (``#+BEGIN_EXAMPLE``)."""

    kind: ClassVar[NodeKind] = NodeKind.EXAMPLE_BLOCK

    content: str
    switches: str = ""
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this example block."""
        return visitor.visit_example_block(self)


@dataclass
class Table(Node):
    """Table node.

    Parameters
    ----------
    rows : list of TableRow, default = empty list
        Table rows; rule lines (``|---+---|``) are not rows
    begin : int or None, default = None
        Offset of the first table character in ``Document.source``
    end : int or None, default = None
        Offset just past the last table character in ``Document.source``
    metadata : dict, default = empty dict
        Table metadata

    """

    kind: ClassVar[NodeKind] = NodeKind.TABLE

    rows: list[TableRow] = field(default_factory=list)
    begin: Optional[int] = None
    end: Optional[int] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this table."""
        return visitor.visit_table(self)


@dataclass
class TableRow(Node):
    """Table row node containing cells."""

    kind: ClassVar[NodeKind] = NodeKind.TABLE_ROW

    cells: list[TableCell] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this table row."""
        return visitor.visit_table_row(self)


@dataclass
class TableCell(Node):
    """Table cell node with inline content."""

    kind: ClassVar[NodeKind] = NodeKind.TABLE_CELL

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this table cell."""
        return visitor.visit_table_cell(self)


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass
class Text(Node):
    """Plain text node."""

    kind: ClassVar[NodeKind] = NodeKind.PLAIN_TEXT

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this text."""
        return visitor.visit_text(self)


@dataclass
class Strong(Node):
    """Bold node (``*bold*``)."""

    kind: ClassVar[NodeKind] = NodeKind.BOLD

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this bold text."""
        return visitor.visit_strong(self)


@dataclass
class Emphasis(Node):
    """Italic node (``/italic/``)."""

    kind: ClassVar[NodeKind] = NodeKind.ITALIC

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this emphasis."""
        return visitor.visit_emphasis(self)


@dataclass
class Underline(Node):
    """Underline node (``_underline_``)."""

    kind: ClassVar[NodeKind] = NodeKind.UNDERLINE

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this underline."""
        return visitor.visit_underline(self)


@dataclass
class Strikethrough(Node):
    """Strike-through node (``+strike+``)."""

    kind: ClassVar[NodeKind] = NodeKind.STRIKE_THROUGH

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this strikethrough."""
        return visitor.visit_strikethrough(self)


@dataclass
class Code(Node):
    """Inline code node (``~code~``)."""

    kind: ClassVar[NodeKind] = NodeKind.CODE

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this inline code."""
        return visitor.visit_code(self)


@dataclass
class Verbatim(Node):
    """Inline verbatim node (``=verbatim=``)."""

    kind: ClassVar[NodeKind] = NodeKind.VERBATIM

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this verbatim text."""
        return visitor.visit_verbatim(self)


@dataclass
class Link(Node):
    """Link node.

    Parameters
    ----------
    link_type : str
        Org link type: a URL scheme (``https``), ``file``, ``custom-id``,
        ``id`` or ``fuzzy``
    path : str
        Raw path with the type prefix removed (``//example.com`` for
        ``https://example.com``)
    content : list of Node, default = empty list
        Inline nodes of the description; empty for ``[[target]]`` links
    metadata : dict, default = empty dict
        Link metadata

    """

    kind: ClassVar[NodeKind] = NodeKind.LINK

    link_type: str
    path: str
    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def raw_link(self) -> str:
        """Return the link target as written in the source."""
        if self.link_type == "fuzzy":
            return self.path
        return f"{self.link_type}:{self.path}"

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this link."""
        return visitor.visit_link(self)


def get_node_children(node: Node) -> list[Node]:
    """Get all child nodes from a node.

    Parameters
    ----------
    node : Node
        The node to get children from

    Returns
    -------
    list of Node
        Child nodes in document order; a heading's title comes before its
        section. Empty for leaf nodes.

    """
    if isinstance(node, Document):
        return list(node.children)
    if isinstance(node, Heading):
        return list(node.content) + list(node.children)
    if isinstance(node, (Paragraph, Strong, Emphasis, Underline, Strikethrough, TableCell, Link)):
        return list(node.content)
    if isinstance(node, Table):
        return list(node.rows)
    if isinstance(node, TableRow):
        return list(node.cells)
    return []
