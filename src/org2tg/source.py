#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2tg/source.py
"""Access to the original Org text of a parsed document."""

from __future__ import annotations

from typing import Optional


class SourceAccessor:
    """Slice the original source text by character offsets.

    Parameters
    ----------
    source : str or None
        Full Org text the document was parsed from

    Examples
    --------
        >>> accessor = SourceAccessor("before\\n| a |\\nafter")
        >>> accessor.slice(7, 13)
        '| a |\\n'

    """

    def __init__(self, source: Optional[str]):
        """Store the source text."""
        self._source = source

    def slice(self, begin: Optional[int], end: Optional[int]) -> Optional[str]:
        """Return ``source[begin:end]``, or None when the range is unusable.

        Parameters
        ----------
        begin : int or None
            Start offset (inclusive)
        end : int or None
            End offset (exclusive)

        Returns
        -------
        str or None
            The exact substring, or None if there is no source, an offset is
            missing, or the range falls outside the source

        """
        if self._source is None or begin is None or end is None:
            return None
        if begin < 0 or end < begin or end > len(self._source):
            return None
        return self._source[begin:end]
