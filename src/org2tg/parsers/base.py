#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2tg/parsers/base.py
"""Base classes for document parsers.

This module defines the abstract base class that parsers inherit from. The
BaseParser provides a consistent interface for turning source documents into
the org2tg AST (Abstract Syntax Tree).

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Any, Union

from org2tg.ast import Document
from org2tg.exceptions import FileNotFoundError as Org2TgFileNotFoundError
from org2tg.exceptions import InvalidOptionsError
from org2tg.options.base import BaseParserOptions
from org2tg.utils.encoding import normalize_stream_to_text, read_text_with_encoding_detection

logger = logging.getLogger(__name__)


class BaseParser(ABC):
    """Abstract base class for document parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Format-specific parsing options

    Notes
    -----
    The parse() method should handle all supported input types:
    - str: File path to read, or the document text itself
    - Path: File path to read
    - IO[bytes] or IO[str]: File-like object
    - bytes: Raw document bytes

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with optional configuration."""
        self.options: BaseParserOptions | None = options

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Parameters
        ----------
        options : BaseParserOptions or None
            The options object to validate
        expected_type : type
            The expected options class type
        parser_name : str
            Name of the parser (for error messages)

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def parse(self, input_data: Union[str, Path, IO[bytes], IO[str], bytes]) -> Document:
        """Parse the input document into an AST.

        Parameters
        ----------
        input_data : str, Path, IO[bytes], IO[str] or bytes
            The input document to parse

        Returns
        -------
        Document
            AST Document node representing the parsed document structure

        Raises
        ------
        ParsingError
            If parsing fails due to invalid input
        DependencyError
            If required dependencies are not installed
        FileNotFoundError
            If a Path input does not exist

        """
        raise NotImplementedError

    @abstractmethod
    def extract_metadata(self, document: Any) -> dict[str, Any]:
        """Extract document-level metadata (title, author, date).

        Parameters
        ----------
        document : Any
            The loaded, format-specific document object

        Returns
        -------
        dict
            Metadata values keyed by name; empty when nothing is available

        """
        raise NotImplementedError

    @staticmethod
    def _load_text_content(input_data: Union[str, Path, IO[bytes], IO[str], bytes]) -> str:
        """Load content from various input types with encoding detection.

        Parameters
        ----------
        input_data : str, Path, IO[bytes], IO[str] or bytes
            Input data to load

        Returns
        -------
        str
            Document text

        Raises
        ------
        FileNotFoundError
            If ``input_data`` is a Path that does not point to a file

        """
        if isinstance(input_data, bytes):
            return read_text_with_encoding_detection(input_data)
        elif isinstance(input_data, Path):
            if not input_data.is_file():
                raise Org2TgFileNotFoundError(str(input_data))
            with open(input_data, "rb") as f:
                return read_text_with_encoding_detection(f.read())
        elif isinstance(input_data, str):
            # Could be file path or content.
            # Long strings would make path.exists() raise OSError on Linux
            if len(input_data) <= 260 and "\n" not in input_data:
                try:
                    path = Path(input_data)
                    if path.exists() and path.is_file():
                        with open(path, "rb") as f:
                            return read_text_with_encoding_detection(f.read())
                except OSError:
                    # Path too long or invalid - treat as content
                    pass
            return input_data
        else:
            if hasattr(input_data, "seek"):
                input_data.seek(0)
            return normalize_stream_to_text(input_data)
