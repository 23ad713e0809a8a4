#  Copyright (c) 2025 Tom Villani, Ph.D.

# org2tg/options/org.py
"""Configuration options for Org-Mode parsing."""

from __future__ import annotations

from dataclasses import dataclass, field

from org2tg.constants import DEFAULT_ORG_PARSE_TAGS, DEFAULT_ORG_TODO_KEYWORDS
from org2tg.options.base import BaseParserOptions


@dataclass(frozen=True)
class OrgParserOptions(BaseParserOptions):
    """Configuration options for Org-Mode-to-AST parsing.

    Parameters
    ----------
    parse_tags : bool, default True
        Whether to parse heading tags (e.g., :work:urgent:).
        When True, tags are stored in heading metadata and removed from the
        title. When False, they stay in the title text.
    todo_keywords : list[str], default ["TODO", "DONE"]
        TODO keywords recognized at the start of headings. Recognized
        keywords move from the title into heading metadata.

    Examples
    --------
        >>> options = OrgParserOptions(
        ...     todo_keywords=["TODO", "IN-PROGRESS", "DONE", "CANCELLED"]
        ... )
        >>> parser = OrgParser(options)

    """

    parse_tags: bool = field(
        default=DEFAULT_ORG_PARSE_TAGS,
        metadata={
            "help": "Parse heading tags (e.g., :work:urgent:)",
            "cli_name": "no-parse-tags",
            "importance": "core",
        },
    )
    todo_keywords: list[str] = field(
        default_factory=lambda: list(DEFAULT_ORG_TODO_KEYWORDS),
        metadata={"help": "List of TODO keywords to recognize", "cli_name": "todo-keywords", "importance": "core"},
    )
