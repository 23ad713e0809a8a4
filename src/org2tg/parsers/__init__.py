#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2tg/parsers/__init__.py
"""Parsers turning source documents into the org2tg AST.

Only Org-Mode is supported; the parser needs the ``orgparse`` package.
"""

from org2tg.parsers.base import BaseParser
from org2tg.parsers.org import OrgParser, classify_link

__all__ = ["BaseParser", "OrgParser", "classify_link"]
