"""I/O utilities for less-compiler.

Provides async file reading/writing and logging setup.
"""

from .files import ensure_output_dir, mkfile, read_text
from .logging import ColoredFormatter, setup_logging

__all__ = [
    # Files
    "ensure_output_dir",
    "mkfile",
    "read_text",
    # Logging
    "ColoredFormatter",
    "setup_logging",
]
