#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for the org2tg parser and renderer.

Each stage has its own frozen Options dataclass.
"""

from __future__ import annotations

from org2tg.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from org2tg.options.org import OrgParserOptions
from org2tg.options.telegram import TelegramRendererOptions

__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "OrgParserOptions",
    "TelegramRendererOptions",
]
