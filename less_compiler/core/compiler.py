"""Compile orchestration for a single LESS file.

Reads the file, applies its directive, resolves output and source map paths,
renders through the compilation service and writes the results.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from ..config import CompilerConfig
from ..io.files import mkfile, read_text
from .directives import UNDEFINED, read_options
from .errors import CompileError, LessCompilerError, ReadError, RedirectCycleError, WriteError
from .service import AutoprefixPlugin, CleanCSSPlugin, CompilationService, LesscpyService

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


@dataclass(frozen=True)
class CompileResult:
    """Outcome of a successful compile.

    Attributes
    ----------
    filepath : Path
        Absolute path of the written stylesheet
    output : str
        Stylesheet text as written
    source_map_path : Path, optional
        Absolute path of the written source map, if any
    """

    filepath: Path
    output: str
    source_map_path: Optional[Path] = None

    def to_dict(self) -> Dict[str, str]:
        """Payload returned to editor commands."""
        return {"filepath": str(self.filepath), "output": self.output}


def _resolve(base: Path, target: Union[str, Path]) -> Path:
    # Lexical resolution; symlinks are left alone
    return Path(os.path.abspath(os.path.join(base, target)))


def resolve_output_path(source: Path, options: Dict[str, Any]) -> Path:
    """Work out where the stylesheet for ``source`` goes.

    A truthy ``out`` names the file (``.css`` is appended when it has no
    extension; a trailing dot counts as one); otherwise the source name with
    its extension swapped for ``.css`` is used. Either way the name is
    resolved against the source directory. ``out`` is removed from
    ``options``.
    """
    out = options.pop("out", None)
    if out:
        filename = str(out)
        if not os.path.splitext(filename)[1]:
            filename += ".css"
    else:
        filename = os.path.splitext(source.name)[0] + ".css"
    return _resolve(source.parent, filename)


def build_source_map_options(
    options: Dict[str, Any], source_dir: Path, css_file: Path
) -> Optional[Path]:
    """Fill ``options["sourceMap"]`` from the flat directive keys.

    Returns the resolved map file path, or None for inline maps.
    """
    source_map = {
        "sourceMapURL": options.get("sourceMapURL"),
        "sourceMapBasepath": options.get("sourceMapBasepath") or str(source_dir),
        "sourceMapRootpath": options.get("sourceMapRootpath"),
        "outputSourceFiles": options.get("outputSourceFiles"),
        "sourceMapFileInline": options.get("sourceMapFileInline"),
    }
    options["sourceMap"] = source_map

    if options.get("sourceMapFileInline"):
        source_map["sourceMapFileInline"] = True
        return None

    if options.get("sourceMapFilename"):
        map_file = _resolve(source_dir, options["sourceMapFilename"])
    else:
        map_file = Path(str(css_file) + ".map")
    options["sourceMapFilename"] = str(map_file)

    if not source_map["sourceMapURL"]:
        source_map["sourceMapURL"] = Path(
            os.path.relpath(map_file, css_file.parent)
        ).as_posix()
    return map_file


def build_plugins(options: Dict[str, Any]) -> List[Any]:
    """Assemble the post-pass plugins requested by the directive."""
    plugins = []

    autoprefixer = options.get("autoprefixer")
    if autoprefixer:
        autoprefix_options = {}
        if isinstance(autoprefixer, str):
            autoprefix_options["browsers"] = [autoprefixer]
        plugins.append(AutoprefixPlugin(autoprefix_options))

    cleancss = options.get("cleancss")
    if cleancss:
        cleancss_options = {}
        if isinstance(cleancss, str):
            cleancss_options["compatibility"] = cleancss
        plugins.append(CleanCSSPlugin(cleancss_options))

    return plugins


class LessCompiler:
    """Compiles LESS files according to their first-line directive.

    Parameters
    ----------
    service : CompilationService, optional
        Backend used to render LESS. Default: LesscpyService
    config : CompilerConfig, optional
        Session settings. Default: CompilerConfig()

    Example
    -------
    >>> compiler = LessCompiler()
    >>> result = asyncio.run(compiler.compile("styles/site.less"))
    >>> result.filepath
    PosixPath('/project/styles/site.css')
    """

    def __init__(
        self,
        service: Optional[CompilationService] = None,
        config: Optional[CompilerConfig] = None,
    ):
        self.service = service or LesscpyService()
        self.config = config or CompilerConfig()

    async def compile(self, less_file: PathLike) -> Optional[CompileResult]:
        """Compile ``less_file``, following ``main`` redirects.

        Parameters
        ----------
        less_file : PathLike
            Source file to compile

        Returns
        -------
        CompileResult or None
            None when the directive suppresses output (``out: null`` or
            ``out: false``)

        Raises
        ------
        ReadError
            If a source file cannot be read
        CompileError
            If the compilation service rejects the source
        WriteError
            If the stylesheet or source map cannot be written
        RedirectCycleError
            If ``main`` directives loop and cycle detection is enabled
        """
        return await self._compile(Path(os.path.abspath(less_file)), ())

    def _version_header(self) -> str:
        label = " ".join(
            part
            for part in (self.service.name, ".".join(str(v) for v in self.service.version))
            if part
        )
        return f"/* Generated by {label} */\n"

    async def _compile(
        self, less_file: Path, chain: Tuple[Path, ...]
    ) -> Optional[CompileResult]:
        if self.config.detect_redirect_cycles and less_file in chain:
            trail = " -> ".join(str(p) for p in chain + (less_file,))
            raise RedirectCycleError(f"Redirect cycle: {trail}", less_file)

        try:
            content = await read_text(less_file, self.config.encoding)
        except (OSError, UnicodeDecodeError) as exc:
            raise ReadError(f"Cannot read {less_file}: {exc}", less_file) from exc

        options = read_options(content)
        less_path = less_file.parent

        # main is set: compile the referenced file instead
        if options.get("main"):
            target = _resolve(less_path, str(options["main"]))
            logger.debug("%s redirects to %s", less_file, target)
            return await self._compile(target, chain + (less_file,))

        # out is null or false: do not compile
        out = options.get("out", UNDEFINED)
        if out is None or out is False:
            logger.debug("Output suppressed for %s", less_file)
            return None

        css_file = resolve_output_path(less_file, options)

        # source maps are not supported together with clean-css
        map_file = None
        if not options.get("cleancss") and options.get("sourceMap"):
            map_file = build_source_map_options(options, less_path, css_file)

        options["paths"] = [str(less_path)]
        options["filename"] = str(less_file)
        options["plugins"] = build_plugins(options)
        logger.debug("Compiling %s -> %s", less_file, css_file)

        try:
            output = await self.service.render(content, options)
        except LessCompilerError:
            raise
        except Exception as exc:
            raise CompileError(f"{less_file}: {exc}", less_file) from exc

        css = output.css
        minified = options.get("compress") or options.get("cleancss")
        if self.config.version_header and not minified:
            css = self._version_header() + css

        try:
            await mkfile(css_file, css, self.config.encoding)
        except OSError as exc:
            raise WriteError(f"Cannot write {css_file}: {exc}", css_file) from exc
        logger.info("Wrote %s", css_file)

        written_map = None
        if output.map and map_file is not None:
            try:
                await mkfile(map_file, output.map, self.config.encoding)
            except OSError as exc:
                raise WriteError(f"Cannot write {map_file}: {exc}", map_file) from exc
            written_map = map_file
            logger.info("Wrote %s", map_file)

        return CompileResult(filepath=css_file, output=css, source_map_path=written_map)


async def compile_less(
    less_file: PathLike,
    service: Optional[CompilationService] = None,
    config: Optional[CompilerConfig] = None,
) -> Optional[CompileResult]:
    """Compile one file with a throwaway :class:`LessCompiler`."""
    return await LessCompiler(service, config).compile(less_file)
