"""Async file helpers for reading sources and writing compiled output."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def ensure_output_dir(path: PathLike) -> Path:
    """Create the directory at path if it does not exist and return it.

    Parameters
    ----------
    path : PathLike
        Directory path to create.

    Returns
    -------
    Path
        The created/existing directory path.
    """
    directory = Path(path)
    directory.mkdir(parents=True, exist_ok=True)
    return directory


def _write_text(path: Path, content: str, encoding: str) -> None:
    ensure_output_dir(path.parent)
    with open(path, "w", encoding=encoding, newline="") as handle:
        handle.write(content)


async def read_text(path: PathLike, encoding: str = "utf-8") -> str:
    """Read a whole text file without blocking the event loop.

    Raises
    ------
    OSError
        If the file cannot be opened or read.
    UnicodeDecodeError
        If the content is not valid in ``encoding``.
    """
    return await asyncio.to_thread(Path(path).read_text, encoding=encoding)


async def mkfile(path: PathLike, content: str, encoding: str = "utf-8") -> Path:
    """Write ``content`` to ``path``, creating missing parent directories first.

    Parameters
    ----------
    path : PathLike
        Destination file.
    content : str
        Text to write.
    encoding : str
        Text encoding (default: utf-8).

    Returns
    -------
    Path
        The written path.

    Raises
    ------
    OSError
        If a directory cannot be created or the file cannot be written.
    """
    path = Path(path)
    await asyncio.to_thread(_write_text, path, content, encoding)
    logger.debug("Wrote %d characters to %s", len(content), path)
    return path
