"""Help and quit commands."""

from __future__ import annotations

from .context import CommandContext
from .types import CommandResult, MessageResult, QuitResult
from .registry import SlashCommand


def render_help_text(commands: tuple[SlashCommand, ...]) -> str:
    """Render one line per command in registration order."""
    if not commands:
        return "No commands available."

    labels = []
    for command in commands:
        label = f"/{command.name}"
        if command.alt_names:
            label += " (" + ", ".join(f"/{alt}" for alt in command.alt_names) + ")"
        labels.append(label)

    width = max(len(label) for label in labels)
    lines = ["Commands:"]
    for label, command in zip(labels, commands):
        lines.append(f"  {label.ljust(width)}  {command.description}")
    return "\n".join(lines)


async def show_help_action(context: CommandContext, args: str) -> CommandResult:
    commands = context.registry.commands if context.registry is not None else ()
    return MessageResult.info(render_help_text(commands))


async def quit_action(context: CommandContext, args: str) -> CommandResult:
    return QuitResult()


help_command = SlashCommand(
    name="help",
    alt_names=("?",),
    description="Show available commands",
    action=show_help_action,
)

quit_command = SlashCommand(
    name="quit",
    alt_names=("exit",),
    description="Exit the CLI",
    action=quit_action,
)
