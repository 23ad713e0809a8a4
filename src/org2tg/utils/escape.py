#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2tg/utils/escape.py
"""Telegram MarkdownV2 text escaping.

MarkdownV2 reserves a set of punctuation characters that must be preceded by
a backslash wherever they appear as literal text. Org export backends hand
plain text over with typographic quotes and a few characters already turned
into HTML entities, so entities are folded back to literal characters before
escaping.

"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from org2tg.constants import DEFAULT_ESCAPE_ENABLED, HTML_ENTITY_REPLACEMENTS, MARKDOWN_V2_RESERVED_CHARS

_ENTITY_PATTERN = re.compile("|".join(re.escape(entity) for entity in HTML_ENTITY_REPLACEMENTS))
_RESERVED_PATTERN = re.compile(f"([{re.escape(MARKDOWN_V2_RESERVED_CHARS)}])")


@dataclass(frozen=True)
class EscapeConfig:
    """Escaping switch for one export pass.

    Parameters
    ----------
    enabled : bool, default True
        Whether reserved MarkdownV2 characters are backslash-escaped. When
        False, only entity normalization is applied.

    """

    enabled: bool = field(
        default=DEFAULT_ESCAPE_ENABLED,
        metadata={"help": "Backslash-escape reserved MarkdownV2 characters", "importance": "core"},
    )


def normalize_entities(text: str) -> str:
    """Replace known HTML named entities with their literal characters.

    Replacement is a single left-to-right pass, so ``&amp;lt;`` becomes
    ``&lt;`` rather than ``<``.

    Parameters
    ----------
    text : str
        Text that may contain entities

    Returns
    -------
    str
        Text with entities replaced

    Examples
    --------
        >>> normalize_entities("&ldquo;hi&rdquo; &amp; bye")
        '"hi" & bye'

    """
    return _ENTITY_PATTERN.sub(lambda match: HTML_ENTITY_REPLACEMENTS[match.group(0)], text)


def escape_markdown_v2(text: str | None, config: EscapeConfig | None = None) -> str:
    r"""Escape text for Telegram MarkdownV2.

    The function is not idempotent: escaping already escaped text adds a
    second backslash before every reserved character. Apply it once per
    text span.

    Parameters
    ----------
    text : str or None
        Text to escape. None is treated as the empty string.
    config : EscapeConfig or None, default None
        Escaping configuration. Defaults to escaping enabled.

    Returns
    -------
    str
        Normalized and (if enabled) escaped text

    Examples
    --------
        >>> escape_markdown_v2("a.b!c")
        'a\\.b\\!c'
        >>> escape_markdown_v2("a.b!c", EscapeConfig(enabled=False))
        'a.b!c'

    """
    if not text:
        return ""

    config = config or EscapeConfig()
    normalized = normalize_entities(text)
    if not config.enabled:
        return normalized
    return _RESERVED_PATTERN.sub(r"\\\1", normalized)
