"""Command descriptors and the name/alias registry."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Awaitable, Callable, Iterable, Iterator, Literal, Optional

from ..errors import RegistryError
from .context import CommandContext
from .types import CommandResult


CommandKind = Literal["built_in", "user_defined"]

CommandAction = Callable[[CommandContext, str], Awaitable[CommandResult]]


@dataclass(frozen=True, slots=True)
class SlashCommand:
    """One invocable command: static metadata plus its action."""

    name: str
    description: str
    action: CommandAction
    alt_names: tuple[str, ...] = ()
    kind: CommandKind = "built_in"

    def names(self) -> tuple[str, ...]:
        return (self.name, *self.alt_names)


class CommandRegistry:
    """Ordered command registry resolvable by name or alternate name."""

    def __init__(self, commands: Iterable[SlashCommand] = ()) -> None:
        self._commands: list[SlashCommand] = []
        self._by_name: dict[str, SlashCommand] = {}
        for command in commands:
            self.register(command)

    def register(self, command: SlashCommand) -> None:
        """Add a command; every name and alternate name must be unused."""
        if not command.name:
            raise RegistryError("Command name must not be empty")

        for name in command.names():
            existing = self._by_name.get(name)
            if existing is not None:
                raise RegistryError(
                    f"Command name '/{name}' already registered by '/{existing.name}'"
                )

        self._commands.append(command)
        for name in command.names():
            self._by_name[name] = command

    def resolve(self, name: str) -> Optional[SlashCommand]:
        return self._by_name.get(name)

    @property
    def commands(self) -> tuple[SlashCommand, ...]:
        return tuple(self._commands)

    def __iter__(self) -> Iterator[SlashCommand]:
        return iter(self._commands)

    def __len__(self) -> int:
        return len(self._commands)
