#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the org2tg library.

This module centralizes hardcoded values and default configuration constants
used across org2tg.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Telegram MarkdownV2 - Reserved characters, entities and markup
3. Link Handling - Link type classification
4. Org-Mode Parsing - Parser defaults
5. Dependencies and Configuration Files
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

OrgBlockType = Literal["src", "example"]
LogLevelName = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# =============================================================================
# Telegram MarkdownV2
# =============================================================================

# Characters with syntactic meaning in MarkdownV2 plain text
MARKDOWN_V2_RESERVED_CHARS = "_*[]()~`>#+-=|{}.!"

# Named HTML entities folded back to literal characters before escaping
HTML_ENTITY_REPLACEMENTS: dict[str, str] = {
    "&ldquo;": '"',
    "&rdquo;": '"',
    "&lsquo;": "'",
    "&rsquo;": "'",
    "&quot;": '"',
    "&amp;": "&",
    "&lt;": "<",
    "&gt;": ">",
}

DEFAULT_ESCAPE_ENABLED = True

MIN_HEADING_LEVEL = 1
MAX_HEADING_LEVEL = 6

CODE_FENCE = "```"

# =============================================================================
# Link Handling
# =============================================================================

# Link types exported as "<type>:<path>" without consulting a resolver
NETWORK_LINK_TYPES = frozenset({"http", "https", "ftp", "mailto", "news"})

LINK_TYPE_FILE = "file"
LINK_TYPE_CUSTOM_ID = "custom-id"
LINK_TYPE_FUZZY = "fuzzy"
LINK_TYPE_ID = "id"

# Prefixes recognized as "<type>:" in bracket links; anything else is fuzzy
ORG_LINK_TYPES = NETWORK_LINK_TYPES | {LINK_TYPE_FILE, LINK_TYPE_ID, "doi", "attachment"}

# =============================================================================
# Org-Mode Parsing
# =============================================================================

DEFAULT_ORG_TODO_KEYWORDS = ["TODO", "DONE"]
DEFAULT_ORG_PARSE_TAGS = True
DEFAULT_EXTRACT_METADATA = True

ORG_EXTENSIONS = [".org"]

# Drawers and planning lines carry heading data, not exportable text
ORG_PLANNING_KEYWORDS = ("SCHEDULED:", "DEADLINE:", "CLOSED:")

# =============================================================================
# Dependencies and Configuration Files
# =============================================================================

DEPS_ORG = [("orgparse", "orgparse", "")]

CONFIG_FILENAMES = [".org2tg.toml", ".org2tg.yaml", ".org2tg.yml", ".org2tg.json", "pyproject.toml"]
CONFIG_ENV_VAR = "ORG2TG_CONFIG"

DEFAULT_OUTPUT_EXTENSION = ".md"
