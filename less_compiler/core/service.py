"""Compilation service boundary.

The orchestrator hands raw LESS source plus an options mapping to a
:class:`CompilationService` and gets back CSS and, optionally, a source map.
:class:`LesscpyService` is the default backend.
"""

import asyncio
import io
import logging
import re
from dataclasses import dataclass, field
from importlib import metadata
from typing import Any, Dict, List, Optional, Protocol, Tuple

import lesscpy
import rcssmin

from .errors import CompileError

logger = logging.getLogger(__name__)


@dataclass
class RenderOutput:
    """Result of rendering one stylesheet.

    Attributes
    ----------
    css : str
        Generated stylesheet text
    map : str, optional
        Source map JSON, when the backend produced one
    """

    css: str
    map: Optional[str] = None


@dataclass
class AutoprefixPlugin:
    """Vendor-prefix post-pass.

    Options are carried through untouched (``browsers`` holds a single query
    when the directive gave one). No Python prefixer is wired in, so
    :meth:`process` leaves the CSS as it is.
    """

    options: Dict[str, Any] = field(default_factory=dict)
    name: str = "autoprefix"
    _warned: bool = field(default=False, init=False, repr=False, compare=False)

    def process(self, css: str) -> str:
        if not self._warned:
            logger.warning(
                "autoprefixer requested (%s) but no prefixer backend is available; "
                "CSS left unprefixed",
                self.options or "defaults",
            )
            self._warned = True
        return css


@dataclass
class CleanCSSPlugin:
    """Minification post-pass using rcssmin.

    ``compatibility`` is kept in :attr:`options` for backends that
    understand clean-css compatibility modes; rcssmin ignores it.
    """

    options: Dict[str, Any] = field(default_factory=dict)
    name: str = "clean-css"

    def process(self, css: str) -> str:
        return rcssmin.cssmin(css)


class CompilationService(Protocol):
    """Anything that can turn LESS source into CSS."""

    name: str
    version: Tuple[int, ...]

    async def render(self, content: str, options: Dict[str, Any]) -> RenderOutput:
        ...


class _SourceStream(io.StringIO):
    """In-memory source that can carry the file name it was read from."""

    pass


def _distribution_version(dist_name: str) -> Tuple[int, ...]:
    try:
        raw = metadata.version(dist_name)
    except metadata.PackageNotFoundError:
        return ()
    return tuple(int(part) for part in re.findall(r"\d+", raw)[:3])


class LesscpyService:
    """Render LESS with lesscpy, then apply post-pass plugins in order.

    lesscpy cannot emit source maps, so a requested ``sourceMap`` is skipped
    and :attr:`RenderOutput.map` is always ``None``. The ``compress``
    option selects lesscpy's minified output.
    """

    name = "lesscpy"

    def __init__(self):
        self.version = _distribution_version("lesscpy")

    def _render_sync(self, content: str, options: Dict[str, Any]) -> str:
        stream = _SourceStream(content)
        # lesscpy resolves relative @import against the stream name
        if options.get("filename"):
            stream.name = options["filename"]
        css = lesscpy.compile(
            stream,
            minify=bool(options.get("compress")),
        )
        plugins: List[Any] = options.get("plugins") or []
        for plugin in plugins:
            css = plugin.process(css)
        return css

    async def render(self, content: str, options: Dict[str, Any]) -> RenderOutput:
        filename = options.get("filename")
        if options.get("sourceMap"):
            logger.debug("Source maps are not supported by lesscpy; skipping for %s", filename)
        try:
            css = await asyncio.to_thread(self._render_sync, content, options)
        except Exception as exc:
            raise CompileError(f"{filename}: {exc}", filename) from exc
        return RenderOutput(css=css)
