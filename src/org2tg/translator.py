#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2tg/translator.py
"""Per-node translation rules for Telegram MarkdownV2.

The translator is a pure function of the node kind, the node's metadata,
its already rendered children and the escaping configuration::

    translate(kind, metadata, rendered, config) -> str

The tree walker (:class:`org2tg.renderers.telegram.TelegramRenderer`) calls
it bottom-up, so ``rendered`` is always final MarkdownV2 text. Plain text is
escaped exactly once, by the ``PLAIN_TEXT`` rule; container rules only wrap.

Metadata keys read by each rule
-------------------------------
============== ==============================================================
Kind           Keys
============== ==============================================================
PLAIN_TEXT     ``value`` (str or None)
CODE/VERBATIM  ``value`` (str or None)
SRC_BLOCK      ``code``: formatted block text (str or None)
EXAMPLE_BLOCK  ``code``
HEADING        ``level`` (int), ``title`` (rendered title)
TABLE          ``raw_source`` (str or None)
LINK           ``link_type``, ``path``, ``resolved_path`` (str or None),
               ``description`` (plain description text or None)
============== ==============================================================

"""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, Optional

from org2tg.ast.nodes import NodeKind
from org2tg.constants import CODE_FENCE, MAX_HEADING_LEVEL, MIN_HEADING_LEVEL, NETWORK_LINK_TYPES
from org2tg.utils.escape import EscapeConfig, escape_markdown_v2

logger = logging.getLogger(__name__)

Rule = Callable[[Mapping[str, Any], str, EscapeConfig], str]


def _wrap(marker: str) -> Rule:
    def rule(metadata: Mapping[str, Any], rendered: str, config: EscapeConfig) -> str:
        return f"{marker}{rendered}{marker}"

    return rule


def _passthrough(metadata: Mapping[str, Any], rendered: str, config: EscapeConfig) -> str:
    return rendered


def _plain_text(metadata: Mapping[str, Any], rendered: str, config: EscapeConfig) -> str:
    return escape_markdown_v2(metadata.get("value"), config)


def _paragraph(metadata: Mapping[str, Any], rendered: str, config: EscapeConfig) -> str:
    content = rendered.strip()
    if not content:
        return ""
    return f"{content}\n\n"


def _inline_code(metadata: Mapping[str, Any], rendered: str, config: EscapeConfig) -> str:
    # Literal value, not rendered children
    return f"`{escape_markdown_v2(metadata.get('value'), config)}`"


def _code_block(metadata: Mapping[str, Any], rendered: str, config: EscapeConfig) -> str:
    code = escape_markdown_v2(metadata.get("code"), config).rstrip("\n")
    return f"{CODE_FENCE}\n{code}\n{CODE_FENCE}\n\n"


def clamp_heading_level(level: Any) -> int:
    """Clamp a heading level into the range MarkdownV2 headings support.

    Parameters
    ----------
    level : Any
        Heading level from node metadata. Non-integers count as level 1.

    Returns
    -------
    int
        Level between 1 and 6 inclusive

    """
    try:
        value = int(level)
    except (TypeError, ValueError):
        return MIN_HEADING_LEVEL
    return max(MIN_HEADING_LEVEL, min(value, MAX_HEADING_LEVEL))


def _heading(metadata: Mapping[str, Any], rendered: str, config: EscapeConfig) -> str:
    hashes = "#" * clamp_heading_level(metadata.get("level"))
    title = metadata.get("title") or ""
    if not title.strip():
        # MarkdownV2 rejects an empty bold span
        return f"{hashes}\n\n{rendered}"
    return f"{hashes} **{title}**\n\n{rendered}"


def _table(metadata: Mapping[str, Any], rendered: str, config: EscapeConfig) -> str:
    raw_source = metadata.get("raw_source")
    if not isinstance(raw_source, str):
        return ""
    # Org tables have no MarkdownV2 equivalent; ship the source layout as-is
    return f"{CODE_FENCE}\n{raw_source.strip()}\n{CODE_FENCE}\n\n"


def compute_full_path(link_type: str, raw_path: str, resolved_path: Optional[str] = None) -> str:
    """Compute the target a link points to in the exported text.

    Parameters
    ----------
    link_type : str
        Org link type (``https``, ``file``, ``fuzzy``, ...)
    raw_path : str
        Link path without the type prefix
    resolved_path : str or None, default None
        Target returned by a link resolver. Ignored for network links.

    Returns
    -------
    str
        ``type:path`` for network links, else the resolved path when it is a
        non-empty string, else the raw path

    Examples
    --------
        >>> compute_full_path("https", "//example.com")
        'https://example.com'
        >>> compute_full_path("fuzzy", "Intro", None)
        'Intro'

    """
    if link_type in NETWORK_LINK_TYPES:
        return f"{link_type}:{raw_path}"
    if isinstance(resolved_path, str) and resolved_path:
        return resolved_path
    logger.debug("Link %s:%s is unresolved, using the raw path", link_type, raw_path)
    return raw_path


def _link(metadata: Mapping[str, Any], rendered: str, config: EscapeConfig) -> str:
    full_path = compute_full_path(
        metadata.get("link_type") or "",
        metadata.get("path") or "",
        metadata.get("resolved_path"),
    )

    description = metadata.get("description")
    if description is None:
        description = rendered

    if not description or not rendered:
        return full_path
    if description == full_path:
        return full_path
    # The target stays unescaped so the URL remains valid
    return f"[{rendered}]({full_path})"


def _root(metadata: Mapping[str, Any], rendered: str, config: EscapeConfig) -> str:
    return rendered.strip()


_RULES: dict[NodeKind, Rule] = {
    NodeKind.PLAIN_TEXT: _plain_text,
    NodeKind.PARAGRAPH: _paragraph,
    NodeKind.BOLD: _wrap("**"),
    # MarkdownV2 has no italic glyph distinct from underline
    NodeKind.ITALIC: _wrap("__"),
    NodeKind.UNDERLINE: _wrap("__"),
    NodeKind.STRIKE_THROUGH: _wrap("~~"),
    NodeKind.CODE: _inline_code,
    NodeKind.VERBATIM: _inline_code,
    NodeKind.SRC_BLOCK: _code_block,
    NodeKind.EXAMPLE_BLOCK: _code_block,
    NodeKind.TABLE: _table,
    NodeKind.TABLE_ROW: _passthrough,
    NodeKind.TABLE_CELL: _passthrough,
    NodeKind.LINK: _link,
    NodeKind.HEADING: _heading,
    NodeKind.ROOT: _root,
}

_missing_rules = set(NodeKind) - set(_RULES)
if _missing_rules:
    raise RuntimeError(f"No translation rule for node kinds: {sorted(k.value for k in _missing_rules)}")


def translate(
    kind: NodeKind,
    metadata: Optional[Mapping[str, Any]] = None,
    rendered: Optional[str] = None,
    config: Optional[EscapeConfig] = None,
) -> str:
    r"""Translate one node into its MarkdownV2 fragment.

    Parameters
    ----------
    kind : NodeKind
        Semantic kind of the node
    metadata : Mapping or None, default None
        Kind-specific metadata; see the module docstring for the keys
    rendered : str or None, default None
        Already translated children. None is treated as empty.
    config : EscapeConfig or None, default None
        Escaping configuration for this export pass. Defaults to escaping
        enabled.

    Returns
    -------
    str
        The fragment; may be empty (an empty paragraph, a table without
        source)

    Examples
    --------
        >>> translate(NodeKind.BOLD, {}, "hi")
        '**hi**'
        >>> translate(NodeKind.HEADING, {"level": 9, "title": "T"}, "")
        '###### **T**\n\n'
        >>> translate(NodeKind.LINK, {"link_type": "https", "path": "//example.com"}, "")
        'https://example.com'

    """
    return _RULES[NodeKind(kind)](metadata or {}, rendered or "", config or EscapeConfig())


__all__ = [
    "clamp_heading_level",
    "compute_full_path",
    "translate",
]
