"""Command resolution and action invocation."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Optional

from ..logging import log_event, summarize_command_args
from ..phrases import PhraseCycler
from .context import CommandContext
from .registry import CommandRegistry
from .types import CommandResult, MessageResult


def is_command(text: str) -> bool:
    """Return True when text starts with /."""
    return text.strip().startswith("/")


def parse_command(text: str) -> tuple[str, str]:
    """Parse command text into command and arguments.

    Args:
        text: Command text (e.g., "/model-delete")

    Returns:
        Tuple of (command, args) where command is without / and args is the rest
    """
    text = text.strip()
    if not text.startswith("/"):
        return "", ""

    parts = text[1:].split(None, 1)
    command = parts[0] if parts else ""
    args = parts[1] if len(parts) > 1 else ""

    return command, args


@dataclass(slots=True)
class CommandDispatcher:
    """Resolve ``/name args`` input and run the matching action.

    Exceptions never escape ``execute``; they come back as error messages.
    """

    registry: CommandRegistry
    context: CommandContext
    cycler: Optional[PhraseCycler] = None

    async def execute(self, text: str) -> CommandResult:
        command_name, args = parse_command(text)
        if not command_name:
            return MessageResult.error("Empty command")

        command = self.registry.resolve(command_name)
        if command is None:
            return MessageResult.error(f"Unknown command: /{command_name}")

        started = time.perf_counter()
        if self.cycler is not None:
            self.cycler.update(active=True, waiting=False)
        try:
            result = await command.action(self.context, args)
        except Exception as e:
            log_event(
                "command_error",
                level=logging.ERROR,
                command=command.name,
                args_summary=summarize_command_args(command.name, args),
                error_type=type(e).__name__,
                error=str(e),
            )
            return MessageResult.error(f"Command failed: {e}")
        finally:
            if self.cycler is not None:
                self.cycler.update(active=False, waiting=False)

        log_event(
            "command_exec",
            command=command.name,
            args_summary=summarize_command_args(command.name, args),
            result=result.type,
            elapsed_ms=round((time.perf_counter() - started) * 1000, 1),
        )
        return result
