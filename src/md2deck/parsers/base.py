#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2deck/parsers/base.py
"""Base classes for document parsers.

This module defines the abstract base class parsers inherit from. A parser
turns its input format into the md2deck AST, which renderers then walk.

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from md2deck.ast import Document
from md2deck.exceptions import FileNotFoundError as Md2DeckFileNotFoundError
from md2deck.exceptions import InvalidOptionsError, ValidationError
from md2deck.options.base import BaseParserOptions
from md2deck.utils.encoding import normalize_stream_to_text, read_text_with_encoding_detection

logger = logging.getLogger(__name__)

# Strings at most this long without a newline are tried as file paths first.
MAX_PATH_LIKE_LENGTH = 260


class BaseParser(ABC):
    """Abstract base class for all document parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Format-specific parsing options

    Notes
    -----
    The parse() method should handle all supported input types:
    - str or Path: File path to read (a str that is not an existing file is
      treated as document text)
    - IO[bytes] or IO[str]: File-like object
    - bytes: Raw document bytes

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with optional configuration."""
        self.options: BaseParserOptions | None = options

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

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
            AST Document node

        Raises
        ------
        ParsingError
            If the document cannot be parsed
        DependencyError
            If a required dependency is not installed

        """
        pass

    @staticmethod
    def _load_text_content(input_data: Union[str, Path, IO[bytes], IO[str], bytes]) -> str:
        """Load text from various input types with encoding detection.

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
            If a Path does not exist
        ValidationError
            If the input type is not supported

        """
        if isinstance(input_data, bytes):
            return read_text_with_encoding_detection(input_data)
        elif isinstance(input_data, Path):
            if not input_data.is_file():
                raise Md2DeckFileNotFoundError(file_path=str(input_data))
            with open(input_data, "rb") as f:
                return read_text_with_encoding_detection(f.read())
        elif isinstance(input_data, str):
            # Path.exists() raises OSError on overlong names
            if len(input_data) <= MAX_PATH_LIKE_LENGTH and "\n" not in input_data:
                try:
                    path = Path(input_data)
                    if path.exists() and path.is_file():
                        logger.debug("Reading input from file %s", path)
                        with open(path, "rb") as f:
                            return read_text_with_encoding_detection(f.read())
                except OSError:
                    pass
            return input_data
        elif hasattr(input_data, "read"):
            if hasattr(input_data, "seekable") and input_data.seekable():
                input_data.seek(0)
            return normalize_stream_to_text(input_data)
        else:
            raise ValidationError(
                f"Unsupported input type: {type(input_data).__name__}",
                parameter_name="input_data",
                parameter_value=input_data,
            )
