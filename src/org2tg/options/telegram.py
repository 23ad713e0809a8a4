#  Copyright (c) 2025 Tom Villani, Ph.D.

# org2tg/options/telegram.py
"""Configuration options for Telegram MarkdownV2 rendering."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from org2tg.constants import DEFAULT_ESCAPE_ENABLED
from org2tg.options.base import BaseRendererOptions
from org2tg.utils.escape import EscapeConfig

if TYPE_CHECKING:
    from org2tg.links import LinkResolver


@dataclass(frozen=True)
class TelegramRendererOptions(BaseRendererOptions):
    r"""Configuration options for AST-to-MarkdownV2 rendering.

    Parameters
    ----------
    escape : bool, default True
        Whether reserved MarkdownV2 characters in plain text, inline code and
        code blocks are backslash-escaped. Turn it off when the output is
        post-processed by another escaper.
    link_resolver : LinkResolver or None, default None
        Resolver for non-network links (files, custom IDs, headings). When
        None, a ``DefaultLinkResolver`` is built for each document.

    Examples
    --------
        >>> options = TelegramRendererOptions(escape=False)
        >>> renderer = TelegramRenderer(options)

    """

    escape: bool = field(
        default=DEFAULT_ESCAPE_ENABLED,
        metadata={
            "help": "Backslash-escape reserved MarkdownV2 characters",
            "cli_name": "no-escape",
            "importance": "core",
        },
    )
    link_resolver: Optional["LinkResolver"] = field(
        default=None,
        compare=False,
        metadata={"help": "Resolver for file and internal links", "exclude_from_cli": True, "importance": "advanced"},
    )

    @property
    def escape_config(self) -> EscapeConfig:
        """Return the escaping snapshot for one export pass."""
        return EscapeConfig(enabled=self.escape)
