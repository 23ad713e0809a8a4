#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2tg/ast/utils.py
"""Utility functions for working with AST nodes.

Functions
---------
extract_text : Extract plain text from a node or list of nodes
slugify : Turn heading text into an anchor identifier

Examples
--------
    >>> from org2tg.ast import Heading, Text, Emphasis
    >>> heading = Heading(level=1, content=[
    ...     Text(content="Hello "),
    ...     Emphasis(content=[Text(content="world")])
    ... ])
    >>> extract_text(heading.content)
    'Hello world'

"""

from __future__ import annotations

import re
import unicodedata
from typing import TYPE_CHECKING, Union

from org2tg.ast.nodes import Code, Link, Text, Verbatim, get_node_children

if TYPE_CHECKING:
    from org2tg.ast.nodes import Node


def extract_text(node_or_nodes: Union[Node, list[Node]], joiner: str = "") -> str:
    """Extract plain text from a node or list of nodes.

    Text, inline code and verbatim content is concatenated in document order
    without markup. A link without description contributes its target as
    written. Link descriptions are compared against link targets using this
    text, so the default joiner adds nothing between nodes.

    Parameters
    ----------
    node_or_nodes : Node or list of Node
        A single node or list of nodes to extract text from
    joiner : str, default = ""
        String used to join the text of sibling nodes

    Returns
    -------
    str
        Concatenated text content

    """
    if isinstance(node_or_nodes, list):
        return joiner.join(part for part in (extract_text(n, joiner) for n in node_or_nodes) if part)

    node = node_or_nodes
    if isinstance(node, (Text, Code, Verbatim)):
        return node.content
    if isinstance(node, Link) and not node.content:
        return node.raw_link

    return joiner.join(part for part in (extract_text(c, joiner) for c in get_node_children(node)) if part)


def slugify(text: str) -> str:
    """Turn heading text into a lowercase, hyphen-separated anchor.

    Parameters
    ----------
    text : str
        Heading text

    Returns
    -------
    str
        Anchor identifier

    Examples
    --------
        >>> slugify("Getting Started: Part 1")
        'getting-started-part-1'

    """
    normalized = unicodedata.normalize("NFKD", text)
    normalized = "".join(ch for ch in normalized if not unicodedata.combining(ch))
    normalized = re.sub(r"[^\w\s-]", "", normalized.lower())
    return re.sub(r"[\s_-]+", "-", normalized).strip("-")


__all__ = [
    "extract_text",
    "slugify",
]
