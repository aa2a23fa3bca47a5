"""Errors raised while compiling a LESS file."""

from pathlib import Path
from typing import Optional, Union


class LessCompilerError(Exception):
    """Base class for compile failures.

    Parameters
    ----------
    message : str
        Human-readable description
    path : str or Path, optional
        File the failure relates to
    """

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class ReadError(LessCompilerError):
    """Raised when a source file cannot be read."""

    pass


class CompileError(LessCompilerError):
    """Raised when the compilation service rejects a source file."""

    pass


class WriteError(LessCompilerError):
    """Raised when a stylesheet or source map cannot be written."""

    pass


class RedirectCycleError(LessCompilerError):
    """Raised when ``main`` directives redirect back to a file already visited."""

    pass
