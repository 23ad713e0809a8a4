#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2tg/links.py
"""Link resolution for non-network Org links.

Network links (``https:``, ``mailto:``, ...) are exported as written. Every
other link type is handed to a :class:`LinkResolver`, which may map it to a
concrete target or return None to keep the raw path.

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Protocol, runtime_checkable

from org2tg.ast.nodes import Document, Heading, Link
from org2tg.ast.utils import extract_text, slugify
from org2tg.ast.visitors import TraversingVisitor
from org2tg.constants import LINK_TYPE_CUSTOM_ID, LINK_TYPE_FILE, LINK_TYPE_FUZZY

logger = logging.getLogger(__name__)


@runtime_checkable
class LinkResolver(Protocol):
    """Protocol for link resolvers.

    A resolver receives a link node and returns the exported target, or None
    when the link cannot be resolved.
    """

    def resolve(self, link: Link) -> Optional[str]:
        """Return the target for ``link`` or None if it is unresolved."""
        ...


class HeadingIndexVisitor(TraversingVisitor):
    """Collect heading titles and custom IDs of a document.

    Attributes
    ----------
    titles : dict[str, str]
        Plain heading title mapped to its anchor slug; the first heading with
        a given title wins
    custom_ids : set[str]
        ``CUSTOM_ID`` property values found on headings

    """

    def __init__(self) -> None:
        """Initialize empty indexes."""
        self.titles: dict[str, str] = {}
        self.custom_ids: set[str] = set()

    def visit_heading(self, node: Heading) -> None:
        """Record the heading and descend into its section."""
        title = extract_text(node.content).strip()
        if title and title not in self.titles:
            self.titles[title] = slugify(title)

        custom_id = node.metadata.get("org_properties", {}).get("CUSTOM_ID")
        if custom_id:
            self.custom_ids.add(str(custom_id))

        for child in node.children:
            child.accept(self)


class DefaultLinkResolver:
    """Resolve file, custom-id and heading links against one document.

    Parameters
    ----------
    document : Document or None, default None
        Document whose headings are valid targets for ``fuzzy`` and
        ``custom-id`` links. Without a document, only file links resolve.

    Notes
    -----
    - ``file`` links resolve to the path with ``~`` expanded
    - ``custom-id`` links resolve to ``#<id>`` when a heading declares the ID
    - ``fuzzy`` links (``[[*Heading]]`` or ``[[Heading]]``) resolve to
      ``#<slug>`` when a heading with that title exists
    - everything else (``id`` links, unknown types) is unresolved

    """

    def __init__(self, document: Document | None = None):
        """Build the heading index for ``document``."""
        self._index = HeadingIndexVisitor()
        if document is not None:
            document.accept(self._index)

    def resolve(self, link: Link) -> Optional[str]:
        """Resolve ``link`` to an exported target.

        Parameters
        ----------
        link : Link
            Link node to resolve

        Returns
        -------
        str or None
            Target string, or None if the link cannot be resolved

        """
        if link.link_type == LINK_TYPE_FILE:
            return Path(link.path).expanduser().as_posix() if link.path else None

        if link.link_type == LINK_TYPE_CUSTOM_ID:
            if link.path in self._index.custom_ids:
                return f"#{link.path}"
            return None

        if link.link_type == LINK_TYPE_FUZZY:
            title = link.path[1:] if link.path.startswith("*") else link.path
            slug = self._index.titles.get(title.strip())
            if slug:
                return f"#{slug}"
            return None

        logger.debug("No resolver for link type %r", link.link_type)
        return None


__all__ = [
    "DefaultLinkResolver",
    "HeadingIndexVisitor",
    "LinkResolver",
]
