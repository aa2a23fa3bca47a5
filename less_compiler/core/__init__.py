"""Core compile logic: directive parsing, orchestration and the service boundary."""

from .compiler import (
    CompileResult,
    LessCompiler,
    build_plugins,
    build_source_map_options,
    compile_less,
    resolve_output_path,
)
from .directives import UNDEFINED, coerce_value, read_options
from .errors import (
    CompileError,
    LessCompilerError,
    ReadError,
    RedirectCycleError,
    WriteError,
)
from .service import (
    AutoprefixPlugin,
    CleanCSSPlugin,
    CompilationService,
    LesscpyService,
    RenderOutput,
)

__all__ = [
    # Directives
    "UNDEFINED",
    "coerce_value",
    "read_options",
    # Orchestration
    "CompileResult",
    "LessCompiler",
    "build_plugins",
    "build_source_map_options",
    "compile_less",
    "resolve_output_path",
    # Service
    "AutoprefixPlugin",
    "CleanCSSPlugin",
    "CompilationService",
    "LesscpyService",
    "RenderOutput",
    # Errors
    "CompileError",
    "LessCompilerError",
    "ReadError",
    "RedirectCycleError",
    "WriteError",
]
