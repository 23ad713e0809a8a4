#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/org2tg/renderers/__init__.py
"""AST renderers producing Telegram MarkdownV2.

Examples
--------
Render a document AST:

    >>> from org2tg.ast import Document, Heading, Text
    >>> from org2tg.renderers import TelegramRenderer
    >>> from org2tg.options import TelegramRendererOptions
    >>> doc = Document(children=[
    ...     Heading(level=1, content=[Text(content="Title")])
    ... ])
    >>> renderer = TelegramRenderer(TelegramRendererOptions())
    >>> text = renderer.render_to_string(doc)

"""

from org2tg.renderers.base import BaseRenderer
from org2tg.renderers.telegram import TelegramRenderer

__all__ = ["BaseRenderer", "TelegramRenderer"]
