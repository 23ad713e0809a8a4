#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2tg/codeblocks.py
"""Formatting of source and example block contents before export.

Org blocks carry switches on their ``#+BEGIN_`` line. The ones that affect
exported text are handled here:

- ``-n [start]`` / ``+n [start]``: number lines (``+n`` is treated like ``-n``)
- ``-k``: keep ``(ref:label)`` coderef labels, which are removed otherwise

"""

from __future__ import annotations

import re
import textwrap
from typing import Optional, Union

from org2tg.ast.nodes import CodeBlock, ExampleBlock

_NUMBER_SWITCH = re.compile(r"(?:^|\s)[-+]n(?:\s+(\d+))?(?=\s|$)")
_KEEP_LABELS_SWITCH = re.compile(r"(?:^|\s)-k(?=\s|$)")
_CODEREF_LABEL = re.compile(r"\s*\(ref:[-\w]+\)\s*$")


def parse_line_number_start(switches: str) -> Optional[int]:
    """Return the first line number requested by ``switches``.

    Parameters
    ----------
    switches : str
        Switches from the block's begin line

    Returns
    -------
    int or None
        Starting line number, or None when lines are not numbered

    Examples
    --------
        >>> parse_line_number_start("-n 10")
        10
        >>> parse_line_number_start("-n")
        1
        >>> parse_line_number_start("-i") is None
        True

    """
    match = _NUMBER_SWITCH.search(switches or "")
    if not match:
        return None
    return int(match.group(1)) if match.group(1) else 1


def format_code_block(node: Union[CodeBlock, ExampleBlock]) -> str:
    """Format the contents of a source or example block for export.

    Common indentation is removed, trailing blank lines are dropped, coderef
    labels are stripped unless ``-k`` is given, and lines are numbered when
    the block has a ``-n`` switch.

    Parameters
    ----------
    node : CodeBlock or ExampleBlock
        Block to format

    Returns
    -------
    str
        Formatted block text without a trailing newline

    """
    lines = textwrap.dedent(node.content.expandtabs()).rstrip().split("\n")
    while lines and not lines[0].strip():
        lines.pop(0)

    if not _KEEP_LABELS_SWITCH.search(node.switches or ""):
        lines = [_CODEREF_LABEL.sub("", line) for line in lines]

    start = parse_line_number_start(node.switches)
    if start is not None and lines:
        width = len(str(start + len(lines) - 1))
        lines = [f"{number:>{width}}  {line}".rstrip() for number, line in enumerate(lines, start)]

    return "\n".join(lines)


__all__ = [
    "format_code_block",
    "parse_line_number_start",
]
