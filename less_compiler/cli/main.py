"""Command-line interface for less-compiler.

Compiles LESS files the same way the editor command does, honoring each
file's first-line directive.
"""

import asyncio
import logging
from pathlib import Path
from typing import Optional, Tuple

import click
import yaml

from less_compiler import __version__
from less_compiler.config import CompilerConfig
from less_compiler.core import UNDEFINED, LessCompiler, LessCompilerError, read_options
from less_compiler.io.logging import setup_logging


def _resolve_level(config: CompilerConfig, verbose: bool, debug: bool) -> int:
    if debug:
        return logging.DEBUG
    if verbose:
        return logging.INFO
    return getattr(logging, config.log_level.upper())


@click.group()
@click.version_option(version=__version__, prog_name="less-compiler")
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output")
@click.option("--debug", is_flag=True, help="Enable debug output")
@click.option("--config", "-c", "config_path", type=click.Path(exists=True, dir_okay=False),
              help="Compiler configuration file (YAML)")
@click.option("--log-file", type=click.Path(dir_okay=False),
              help="Also write logs to this file")
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    debug: bool,
    config_path: Optional[str],
    log_file: Optional[str],
) -> None:
    """less-compiler: compile LESS files using first-line directives.

    The first line of a source file may carry options, for example:

        // out: ../css/site.css, sourceMap: true, cleancss: true

    Examples:

        # Compile one file next to its source
        less-compiler compile styles/site.less

        # Show the options a file's directive sets
        less-compiler options styles/site.less
    """
    try:
        config = CompilerConfig.from_yaml(Path(config_path)) if config_path else CompilerConfig()
    except (TypeError, yaml.YAMLError) as exc:
        raise click.BadParameter(str(exc), param_hint="'--config'") from exc
    if log_file:
        config.log_file = log_file

    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["logger"] = setup_logging(
        _resolve_level(config, verbose, debug), config.log_file
    )


@cli.command("compile")
@click.argument("paths", nargs=-1, required=True, type=click.Path(dir_okay=False))
@click.pass_context
def compile_command(ctx: click.Context, paths: Tuple[str, ...]) -> None:
    """Compile one or more LESS files.

    Files are compiled in order; the first failure stops the run.
    """
    logger = ctx.obj["logger"]
    compiler = LessCompiler(config=ctx.obj["config"])

    for path in paths:
        logger.info(f"Compiling {path}")
        try:
            result = asyncio.run(compiler.compile(path))
        except LessCompilerError as exc:
            logger.debug("Compile failed", exc_info=True)
            raise click.ClickException(str(exc)) from exc

        if result is None:
            click.echo(f"{path}: output suppressed")
        else:
            click.echo(f"{path} -> {result.filepath}")
            if result.source_map_path is not None:
                click.echo(f"{path} -> {result.source_map_path}")


@cli.command("options")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def options_command(ctx: click.Context, path: str) -> None:
    """Print the directive options of a LESS file as YAML."""
    encoding = ctx.obj["config"].encoding
    try:
        content = Path(path).read_text(encoding=encoding)
    except UnicodeDecodeError as exc:
        raise click.ClickException(f"Cannot read {path}: {exc}") from exc
    options = {
        key: ("undefined" if value is UNDEFINED else value)
        for key, value in read_options(content).items()
    }
    click.echo(yaml.safe_dump(options, sort_keys=False).rstrip("\n"))


def main() -> None:
    """Entry point for CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
