#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2deck/utils/io_utils.py
"""I/O utilities for handling output destinations."""

from __future__ import annotations

import io
from io import BytesIO, StringIO
from pathlib import Path
from typing import IO, Union, cast


def write_content(
    content: Union[str, bytes], output: Union[str, Path, IO[bytes], IO[str], None]
) -> Union[StringIO, BytesIO, None]:
    """Write content to an output destination or return it as a file-like object.

    Parameters
    ----------
    content : str or bytes
        Content to write.
    output : str, Path, IO[bytes], IO[str], or None
        Output destination. Can be:
        - None: Returns content as StringIO (for str) or BytesIO (for bytes)
        - str or Path: Writes content to file at that path (UTF-8 for text)
        - IO[bytes]: Writes content to binary file-like object
        - IO[str]: Writes content to text file-like object

    Returns
    -------
    StringIO, BytesIO, or None
        A file-like object when output is None, otherwise None

    Raises
    ------
    TypeError
        If output type is not supported or content is neither str nor bytes

    Examples
    --------
        >>> buffer = BytesIO()
        >>> write_content("<deck>\\n</deck>\\n", buffer)
        >>> buffer.getvalue()
        b'<deck>\\n</deck>\\n'

    """
    if not isinstance(content, (str, bytes)):
        raise TypeError(f"Content must be str or bytes, got {type(content)}")

    if output is None:
        if isinstance(content, str):
            return StringIO(content)
        return BytesIO(content)

    if isinstance(output, (str, Path)):
        output_path = Path(output)
        if isinstance(content, str):
            output_path.write_text(content, encoding="utf-8")
        else:
            output_path.write_bytes(content)
        return None

    if hasattr(output, "write"):
        # Concrete types first, then io base classes, then the mode attribute.
        if isinstance(output, BytesIO):
            is_binary_mode = True
        elif isinstance(output, StringIO):
            is_binary_mode = False
        elif isinstance(output, io.TextIOBase):
            is_binary_mode = False
        elif isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
            is_binary_mode = True
        elif hasattr(output, "mode"):
            mode = getattr(output, "mode", "")
            is_binary_mode = isinstance(mode, str) and "b" in mode
        else:
            is_binary_mode = False

        if is_binary_mode:
            binary_output = cast(IO[bytes], output)
            binary_output.write(content.encode("utf-8") if isinstance(content, str) else content)
        else:
            text_output = cast(IO[str], output)
            text_output.write(content.decode("utf-8") if isinstance(content, bytes) else content)
        return None

    raise TypeError(f"Unsupported output type: {type(output)}")


__all__ = ["write_content"]
