"""Built-in command set."""

from __future__ import annotations

from .misc import help_command, quit_command
from .model import model_command
from .model_delete import model_delete_command
from .registry import CommandRegistry, SlashCommand

BUILTIN_COMMANDS: tuple[SlashCommand, ...] = (
    model_command,
    model_delete_command,
    help_command,
    quit_command,
)


def build_builtin_registry() -> CommandRegistry:
    return CommandRegistry(BUILTIN_COMMANDS)
