"""Typed command results exchanged between command actions and the host."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, TypeAlias


MessageType = Literal["info", "error"]

DialogName = Literal["model", "model_delete"]


@dataclass(slots=True, frozen=True)
class MessageResult:
    """Text for the host to display; nothing else follows."""

    content: str
    message_type: MessageType = "info"
    type: Literal["message"] = "message"

    @classmethod
    def info(cls, content: str) -> MessageResult:
        return cls(content=content, message_type="info")

    @classmethod
    def error(cls, content: str) -> MessageResult:
        return cls(content=content, message_type="error")


@dataclass(slots=True, frozen=True)
class DialogResult:
    """Ask the host to open an interactive dialog.

    The dialog owns selection, confirmation and any mutation that follows.
    """

    dialog: DialogName
    type: Literal["dialog"] = "dialog"


@dataclass(slots=True, frozen=True)
class QuitResult:
    """Ask the host to leave its input loop."""

    type: Literal["quit"] = "quit"


CommandResult: TypeAlias = MessageResult | DialogResult | QuitResult
