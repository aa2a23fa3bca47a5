"""Command registry for editor integrations.

Editors talk to the compiler through named domains holding named commands,
each domain carrying a version tag.
"""

import inspect
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional


@dataclass
class Command:
    """A registered command.

    Attributes
    ----------
    name : str
        Command name within its domain
    handler : Callable
        Function (or coroutine function) invoked with the command arguments
    is_async : bool
        Whether the handler must be awaited
    description : str
        Human-readable description
    parameters : List[str]
        Parameter names, in call order
    returns : Any
        Optional description of the return value
    """

    name: str
    handler: Callable[..., Any]
    is_async: bool = False
    description: str = ""
    parameters: List[str] = field(default_factory=list)
    returns: Any = None


@dataclass
class Domain:
    """A named, versioned group of commands."""

    name: str
    version: Dict[str, int]
    commands: Dict[str, Command] = field(default_factory=dict)


class DomainManager:
    """Registry of domains and their commands.

    Example
    -------
    >>> manager = DomainManager()
    >>> manager.register_domain("LessCompiler", {"major": 1, "minor": 0})
    >>> manager.register_command("LessCompiler", "compile", handler, True)
    >>> result = await manager.exec_command("LessCompiler", "compile", "site.less")
    """

    def __init__(self):
        self._domains: Dict[str, Domain] = {}

    def has_domain(self, name: str) -> bool:
        return name in self._domains

    def register_domain(self, name: str, version: Dict[str, int]) -> Domain:
        """Register (or replace) a domain."""
        domain = Domain(name=name, version=dict(version))
        self._domains[name] = domain
        return domain

    def get_domain(self, name: str) -> Optional[Domain]:
        return self._domains.get(name)

    def register_command(
        self,
        domain_name: str,
        command_name: str,
        handler: Callable[..., Any],
        is_async: bool = False,
        description: str = "",
        parameters: Optional[List[str]] = None,
        returns: Any = None,
    ) -> Command:
        """Register a command on an existing domain.

        Raises
        ------
        KeyError
            If the domain has not been registered
        """
        if domain_name not in self._domains:
            raise KeyError(f"Unknown domain: {domain_name}")

        command = Command(
            name=command_name,
            handler=handler,
            is_async=is_async,
            description=description,
            parameters=list(parameters or []),
            returns=returns,
        )
        self._domains[domain_name].commands[command_name] = command
        return command

    def get_command(self, domain_name: str, command_name: str) -> Optional[Command]:
        domain = self._domains.get(domain_name)
        if domain is None:
            return None
        return domain.commands.get(command_name)

    async def exec_command(self, domain_name: str, command_name: str, *args: Any) -> Any:
        """Run a command and return its result.

        Raises
        ------
        KeyError
            If the domain or command is unknown
        """
        command = self.get_command(domain_name, command_name)
        if command is None:
            raise KeyError(f"Unknown command: {domain_name}.{command_name}")

        result = command.handler(*args)
        if command.is_async or inspect.isawaitable(result):
            result = await result
        return result
