"""Host-side interpretation of command results."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal, Mapping, Optional, TypeAlias, assert_never

from .commands.context import CommandContext
from .commands.types import CommandResult, DialogName, DialogResult, MessageResult, QuitResult
from .dialogs import Dialog
from .logging import log_event
from .phrases import PhraseCycler


@dataclass(slots=True, frozen=True)
class PrintAction:
    """Print a user-facing message and continue."""

    message: str
    is_error: bool = False
    kind: Literal["print"] = "print"


@dataclass(slots=True, frozen=True)
class BreakAction:
    """Stop the REPL loop."""

    kind: Literal["break"] = "break"


HostAction: TypeAlias = PrintAction | BreakAction


class CommandHost:
    """Turn each ``CommandResult`` into the matching side effect."""

    def __init__(
        self,
        context: CommandContext,
        dialogs: Mapping[DialogName, Dialog],
        cycler: Optional[PhraseCycler] = None,
    ) -> None:
        self.context = context
        self.dialogs = dialogs
        self.cycler = cycler

    async def handle_result(self, result: CommandResult) -> HostAction:
        if isinstance(result, MessageResult):
            return PrintAction(message=result.content, is_error=result.message_type == "error")

        if isinstance(result, DialogResult):
            return await self._open_dialog(result)

        if isinstance(result, QuitResult):
            return BreakAction()

        assert_never(result)

    async def _open_dialog(self, result: DialogResult) -> HostAction:
        dialog = self.dialogs.get(result.dialog)
        if dialog is None:
            return PrintAction(message=f"Unknown dialog: {result.dialog}", is_error=True)

        log_event("dialog_open", dialog=result.dialog)
        if self.cycler is not None:
            self.cycler.update(active=False, waiting=True)
        try:
            outcome = await dialog.run(self.context)
        except Exception as e:
            log_event(
                "command_error",
                level=logging.ERROR,
                command=f"dialog:{result.dialog}",
                error_type=type(e).__name__,
                error=str(e),
            )
            return PrintAction(message=f"Dialog failed: {e}", is_error=True)
        finally:
            if self.cycler is not None:
                self.cycler.update(active=False, waiting=False)

        return PrintAction(message=outcome.content, is_error=outcome.message_type == "error")
