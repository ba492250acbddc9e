"""
Console command registry with native dispatch.

Commands are registered by name; `exec("name", *args)` calls the command's `native`
handler with every argument (the name included) and returns whatever it returns.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional


class UnknownCommandError(LookupError):
    pass


class NativeCommandError(RuntimeError):
    pass


@dataclass
class Command:
    name: str
    native: Optional[Callable[..., Any]] = None
    help: str = ""


class CommandRegistry:
    """Commands available to the agent's console."""

    def __init__(self):
        self._commands: dict[str, Command] = {}

    def register(self, name: str, native: Optional[Callable[..., Any]] = None, *, help: str = "") -> Command:
        cmd = Command(name=name, native=native, help=help)
        self._commands[name] = cmd
        return cmd

    def get(self, name: str) -> Optional[Command]:
        return self._commands.get(name)

    def names(self) -> list[str]:
        return sorted(self._commands)

    def exec(self, *args: Any) -> Any:
        if not args:
            raise TypeError("Expected at least 1 parameter to execute a function")

        name = args[0]
        cmd = self._commands.get(name)
        if cmd is None:
            raise UnknownCommandError(f"Command {name} doesn't exist")

        if not callable(cmd.native):
            raise NativeCommandError(f"Can't execute command {name} natively")
        return cmd.native(*args)
