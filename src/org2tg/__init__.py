r"""org2tg - export Org-Mode documents as Telegram MarkdownV2.

org2tg parses Org files with orgparse into a small AST and renders that tree
to the MarkdownV2 dialect accepted by the Telegram Bot API. Reserved
characters in plain text are backslash-escaped exactly once, headings become
bold lines prefixed with hashes, and tables are shipped as fenced blocks of
their original source.

Examples
--------
Convert Org text:

    >>> from org2tg import to_telegram
    >>> to_telegram("* Release 1.0\n\nSee [[https://example.com][the notes]].")
    '# **Release 1\\.0**\n\nSee [the notes](https://example.com)\\.'

Publish a directory of Org files:

    >>> from org2tg import publish_directory
    >>> written = publish_directory("notes/", "out/")

Work with the AST:

    >>> from org2tg import to_ast
    >>> from org2tg.renderers import TelegramRenderer
    >>> doc = to_ast("notes.org")
    >>> text = TelegramRenderer().render_to_string(doc)

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import sys

if sys.version_info < (3, 10):
    raise RuntimeError(
        "org2tg requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "0.1.0"

from org2tg.api import from_ast, publish_directory, to_ast, to_telegram  # noqa: E402
from org2tg.ast import Document  # noqa: E402
from org2tg.exceptions import (  # noqa: E402
    DependencyError,
    FileError,
    Org2TgError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from org2tg.options import OrgParserOptions, TelegramRendererOptions  # noqa: E402
from org2tg.utils.escape import EscapeConfig, escape_markdown_v2  # noqa: E402

__all__ = [
    "__version__",
    "DependencyError",
    "Document",
    "EscapeConfig",
    "FileError",
    "Org2TgError",
    "OrgParserOptions",
    "ParsingError",
    "RenderingError",
    "TelegramRendererOptions",
    "ValidationError",
    "escape_markdown_v2",
    "from_ast",
    "publish_directory",
    "to_ast",
    "to_telegram",
]
