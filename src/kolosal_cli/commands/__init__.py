"""Slash-command system: descriptors, results, guard and dispatch."""

from .builtins import BUILTIN_COMMANDS, build_builtin_registry
from .context import CommandContext, CommandServices, read_saved_models
from .dispatch import CommandDispatcher, is_command, parse_command
from .guard import filter_deletable_models, is_kolosal_cloud_model, protection_reason
from .registry import CommandKind, CommandRegistry, SlashCommand
from .types import CommandResult, DialogResult, MessageResult, QuitResult

__all__ = [
    "BUILTIN_COMMANDS",
    "CommandContext",
    "CommandDispatcher",
    "CommandKind",
    "CommandRegistry",
    "CommandResult",
    "CommandServices",
    "DialogResult",
    "MessageResult",
    "QuitResult",
    "SlashCommand",
    "build_builtin_registry",
    "filter_deletable_models",
    "is_command",
    "is_kolosal_cloud_model",
    "parse_command",
    "protection_reason",
    "read_saved_models",
]
