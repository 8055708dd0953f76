#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Output helpers shared by the renderer and the CLI."""

from __future__ import annotations

import io
from io import BytesIO, StringIO
from pathlib import Path
from typing import IO, Union, cast


def write_content(content: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
    """Write rendered text to a path or to a text or binary stream.

    Parameters
    ----------
    content : str
        Text to write; encoded as UTF-8 for binary destinations
    output : str, Path, IO[bytes], or IO[str]
        Destination

    Raises
    ------
    TypeError
        If the destination type is not supported

    Examples
    --------
        >>> buffer = BytesIO()
        >>> write_content("<p>hi</p>", buffer)
        >>> buffer.getvalue()
        b'<p>hi</p>'

    """
    if isinstance(output, (str, Path)):
        Path(output).write_text(content, encoding="utf-8")
        return

    if not hasattr(output, "write"):
        raise TypeError(f"Unsupported output type: {type(output)}")

    # Concrete types first, then io base classes, then the mode attribute
    if isinstance(output, BytesIO):
        is_binary_mode = True
    elif isinstance(output, StringIO) or isinstance(output, io.TextIOBase):
        is_binary_mode = False
    elif isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
        is_binary_mode = True
    else:
        mode = getattr(output, "mode", "")
        is_binary_mode = isinstance(mode, str) and "b" in mode

    if is_binary_mode:
        cast(IO[bytes], output).write(content.encode("utf-8"))
    else:
        cast(IO[str], output).write(content)


__all__ = ["write_content"]
