"""Editor-facing command domain for the LESS compiler.

Example Usage
-------------
>>> from less_compiler.domain import DomainManager, init
>>> manager = DomainManager()
>>> init(manager)
>>> payload = await manager.exec_command("LessCompiler", "compile", "site.less")
"""

from typing import Any, Dict, Optional

from ..core.compiler import LessCompiler
from .manager import Command, Domain, DomainManager

DOMAIN_NAME = "LessCompiler"
DOMAIN_VERSION = {"major": 1, "minor": 0}


def init(domain_manager: DomainManager, compiler: Optional[LessCompiler] = None) -> None:
    """Register the ``LessCompiler.compile`` command.

    Parameters
    ----------
    domain_manager : DomainManager
        Registry to register with
    compiler : LessCompiler, optional
        Compiler serving the command. Default: LessCompiler()
    """
    compiler = compiler or LessCompiler()

    async def compile_command(less_path: str) -> Optional[Dict[str, Any]]:
        result = await compiler.compile(less_path)
        return result.to_dict() if result is not None else None

    if not domain_manager.has_domain(DOMAIN_NAME):
        domain_manager.register_domain(DOMAIN_NAME, DOMAIN_VERSION)
    domain_manager.register_command(
        DOMAIN_NAME,
        "compile",
        compile_command,
        True,
        "Compiles a less file",
        ["lessPath"],
        None,
    )


__all__ = [
    "Command",
    "Domain",
    "DomainManager",
    "DOMAIN_NAME",
    "DOMAIN_VERSION",
    "init",
]
