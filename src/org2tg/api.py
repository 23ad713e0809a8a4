#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2tg/api.py
"""High-level conversion functions.

``to_ast`` parses Org source, ``from_ast`` renders an AST to MarkdownV2,
``to_telegram`` does both, and ``publish_directory`` exports a whole tree of
Org files.
"""

from __future__ import annotations

import logging
from dataclasses import fields
from pathlib import Path
from typing import IO, Any, Optional, Union

from org2tg.ast import Document
from org2tg.constants import DEFAULT_OUTPUT_EXTENSION, ORG_EXTENSIONS
from org2tg.exceptions import FileNotFoundError as Org2TgFileNotFoundError
from org2tg.exceptions import Org2TgError, ParsingError, RenderingError, ValidationError
from org2tg.options.org import OrgParserOptions
from org2tg.options.telegram import TelegramRendererOptions
from org2tg.parsers.org import OrgParser
from org2tg.renderers.telegram import TelegramRenderer

logger = logging.getLogger(__name__)


def _split_kwargs_for_parser_and_renderer(kwargs: dict[str, Any]) -> tuple[dict[str, Any], dict[str, Any]]:
    """Split kwargs between parser and renderer options by field name.

    Raises
    ------
    ValidationError
        If a keyword names no field of either options class

    """
    parser_fields = {f.name for f in fields(OrgParserOptions)}
    renderer_fields = {f.name for f in fields(TelegramRendererOptions)}

    parser_kwargs: dict[str, Any] = {}
    renderer_kwargs: dict[str, Any] = {}
    for key, value in kwargs.items():
        if key in parser_fields:
            parser_kwargs[key] = value
        elif key in renderer_fields:
            renderer_kwargs[key] = value
        else:
            raise ValidationError(f"Unknown option: {key}", parameter_name=key, parameter_value=value)

    return parser_kwargs, renderer_kwargs


def to_ast(
    source: Union[str, Path, IO[bytes], IO[str], bytes],
    parser_options: Optional[OrgParserOptions] = None,
    **kwargs: Any,
) -> Document:
    r"""Parse Org source into an AST.

    Parameters
    ----------
    source : str, Path, IO[bytes], IO[str] or bytes
        Path to an Org file, an open stream, raw bytes or the Org text itself
    parser_options : OrgParserOptions, optional
        Parser settings
    kwargs : Any
        Individual parser options that override settings in parser_options

    Returns
    -------
    Document
        AST Document node

    Raises
    ------
    DependencyError
        If orgparse is not installed
    ParsingError
        If parsing fails

    Examples
    --------
        >>> doc = to_ast("* Title\n\nSome /text/.")
        >>> doc.children[0].level
        1

    """
    if kwargs:
        parser_options = (parser_options or OrgParserOptions()).create_updated(**kwargs)

    try:
        return OrgParser(parser_options).parse(source)
    except Org2TgError:
        raise
    except Exception as e:
        raise ParsingError(f"AST conversion failed: {e!r}", parsing_stage="ast_conversion", original_error=e) from e


def from_ast(
    ast_doc: Document,
    output: Union[str, Path, IO[bytes], IO[str], None] = None,
    renderer_options: Optional[TelegramRendererOptions] = None,
    **kwargs: Any,
) -> str:
    """Render an AST to Telegram MarkdownV2.

    Parameters
    ----------
    ast_doc : Document
        Document to render
    output : str, Path, IO[bytes], IO[str] or None, default None
        Optional destination; the text is returned either way
    renderer_options : TelegramRendererOptions, optional
        Renderer settings
    kwargs : Any
        Individual renderer options that override settings in renderer_options

    Returns
    -------
    str
        MarkdownV2 text

    """
    if kwargs:
        renderer_options = (renderer_options or TelegramRendererOptions()).create_updated(**kwargs)

    renderer = TelegramRenderer(renderer_options)
    try:
        text = renderer.render_to_string(ast_doc)
    except Org2TgError:
        raise
    except Exception as e:
        raise RenderingError(f"Rendering failed: {e!r}", rendering_stage="render", original_error=e) from e

    if output is not None:
        renderer.write_text_output(text, output)
    return text


def to_telegram(
    source: Union[str, Path, IO[bytes], IO[str], bytes],
    parser_options: Optional[OrgParserOptions] = None,
    renderer_options: Optional[TelegramRendererOptions] = None,
    output: Union[str, Path, IO[bytes], IO[str], None] = None,
    **kwargs: Any,
) -> str:
    r"""Convert Org source to Telegram MarkdownV2.

    Parameters
    ----------
    source : str, Path, IO[bytes], IO[str] or bytes
        Path to an Org file, an open stream, raw bytes or the Org text itself
    parser_options : OrgParserOptions, optional
        Parser settings
    renderer_options : TelegramRendererOptions, optional
        Renderer settings
    output : str, Path, IO[bytes], IO[str] or None, default None
        Optional destination; the text is returned either way
    kwargs : Any
        Individual parser or renderer options (``escape=False``,
        ``todo_keywords=[...]``)

    Returns
    -------
    str
        MarkdownV2 text without leading or trailing blank lines

    Examples
    --------
        >>> to_telegram("* Hello\n\nWorld!")
        '# **Hello**\n\nWorld\\!'

    """
    parser_kwargs, renderer_kwargs = _split_kwargs_for_parser_and_renderer(kwargs)
    doc = to_ast(source, parser_options, **parser_kwargs)
    return from_ast(doc, output, renderer_options, **renderer_kwargs)


def _normalize_extension(extension: str) -> str:
    """Return ``extension`` as a file suffix with a leading dot."""
    suffix = extension.strip()
    if suffix and not suffix.startswith("."):
        suffix = f".{suffix}"
    if len(suffix) < 2 or "/" in suffix or "\\" in suffix:
        raise ValidationError(
            f"Invalid output extension: {extension!r}", parameter_name="extension", parameter_value=extension
        )
    return suffix


def publish_directory(
    source_dir: Union[str, Path],
    output_dir: Union[str, Path],
    parser_options: Optional[OrgParserOptions] = None,
    renderer_options: Optional[TelegramRendererOptions] = None,
    extension: str = DEFAULT_OUTPUT_EXTENSION,
) -> list[Path]:
    """Export every Org file below a directory.

    The directory tree is mirrored under ``output_dir``; each ``.org`` file
    becomes a file with the same stem and ``extension``.

    Parameters
    ----------
    source_dir : str or Path
        Directory searched recursively for Org files
    output_dir : str or Path
        Directory receiving the exported files; created when missing
    parser_options : OrgParserOptions, optional
        Parser settings shared by all files
    renderer_options : TelegramRendererOptions, optional
        Renderer settings shared by all files
    extension : str, default ".md"
        Suffix of the exported files; the leading dot may be omitted

    Returns
    -------
    list[Path]
        Written files, in sorted source order

    Raises
    ------
    FileNotFoundError
        If ``source_dir`` is not a directory
    ValidationError
        If ``extension`` cannot be used as a file suffix

    """
    suffix = _normalize_extension(extension)
    source_root = Path(source_dir)
    output_root = Path(output_dir)
    if not source_root.is_dir():
        raise Org2TgFileNotFoundError(str(source_root), message=f"Source directory not found: {source_root}")

    sources = sorted(
        path for path in source_root.rglob("*") if path.is_file() and path.suffix.lower() in ORG_EXTENSIONS
    )
    logger.info("Publishing %d Org file(s) from %s to %s", len(sources), source_root, output_root)

    written: list[Path] = []
    for path in sources:
        target = (output_root / path.relative_to(source_root)).with_suffix(suffix)
        logger.debug("Exporting %s -> %s", path, target)
        to_telegram(path, parser_options, renderer_options, output=target)
        written.append(target)

    return written


__all__ = [
    "from_ast",
    "publish_directory",
    "to_ast",
    "to_telegram",
]
