"""less-compiler: compile LESS stylesheets driven by first-line directives.

This package provides:
- A directive parser for ``// key: value, ...`` comments on a file's first line
- An async compile orchestrator that resolves output and source map paths,
  follows ``main`` redirects and writes results
- A pluggable compilation service (lesscpy by default)
- An editor command domain and a command-line interface

Example usage:
    >>> import asyncio
    >>> from less_compiler import LessCompiler
    >>>
    >>> result = asyncio.run(LessCompiler().compile("styles/site.less"))
    >>> print(result.filepath)
"""

__version__ = "1.0.0"

from .config import CompilerConfig
from .core import (
    CompileError,
    CompileResult,
    LessCompiler,
    LessCompilerError,
    ReadError,
    RedirectCycleError,
    WriteError,
    compile_less,
    read_options,
)

__all__ = [
    "__version__",
    "CompilerConfig",
    "CompileError",
    "CompileResult",
    "LessCompiler",
    "LessCompilerError",
    "ReadError",
    "RedirectCycleError",
    "WriteError",
    "compile_less",
    "read_options",
]
