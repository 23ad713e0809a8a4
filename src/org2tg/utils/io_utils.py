#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2tg/utils/io_utils.py
"""Output helpers for writing exported text to paths and streams."""

from __future__ import annotations

import io
from io import BytesIO, StringIO
from pathlib import Path
from typing import IO, Union, cast

from org2tg.exceptions import OutputWriteError


def write_content(text: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
    """Write exported text to a file path or file-like object.

    Parameters
    ----------
    text : str
        Text to write
    output : str, Path, IO[bytes], or IO[str]
        Output destination. Paths are written as UTF-8 and parent directories
        are created. Binary streams receive UTF-8 bytes.

    Raises
    ------
    OutputWriteError
        If the destination path cannot be written
    TypeError
        If output is neither a path nor a writable stream

    Examples
    --------
        >>> buffer = StringIO()
        >>> write_content("hello", buffer)
        >>> buffer.getvalue()
        'hello'

    """
    if isinstance(output, (str, Path)):
        output_path = Path(output)
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(text, encoding="utf-8")
        except OSError as e:
            raise OutputWriteError(str(output_path), original_error=e) from e
        return

    if not hasattr(output, "write"):
        raise TypeError(f"Unsupported output type: {type(output).__name__}")

    if isinstance(output, BytesIO):
        is_binary_mode = True
    elif isinstance(output, StringIO):
        is_binary_mode = False
    elif isinstance(output, io.TextIOBase):
        is_binary_mode = False
    elif isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
        is_binary_mode = True
    else:
        mode = getattr(output, "mode", "")
        is_binary_mode = isinstance(mode, str) and "b" in mode

    if is_binary_mode:
        cast(IO[bytes], output).write(text.encode("utf-8"))
    else:
        cast(IO[str], output).write(text)
