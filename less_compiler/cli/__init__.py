"""Command-line interface for less-compiler.

Example Usage
-------------
    # From command line:
    less-compiler --help
    less-compiler compile styles/site.less
    less-compiler --config compiler.yaml -v compile a.less b.less
    less-compiler options styles/site.less
"""

from .main import cli, main

__all__ = [
    "cli",
    "main",
]
