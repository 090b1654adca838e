"""Dialog contract shared by host-opened dialogs."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..commands.context import CommandContext, SettingsAccessor
from ..commands.types import MessageResult
from ..domain.models import SavedModelEntry


class Dialog(Protocol):
    """Interactive flow opened by a ``DialogResult``."""

    async def run(self, context: CommandContext) -> MessageResult:
        ...


@runtime_checkable
class SavedModelStore(SettingsAccessor, Protocol):
    """Settings accessor that can persist the saved-model list."""

    async def save_saved_models(self, entries: list[SavedModelEntry]) -> None:
        ...


def format_model_option(entry: SavedModelEntry, *, active: bool = False) -> str:
    """Render one saved model for a numbered list."""
    label = entry.display_name
    if entry.label and entry.label != entry.id:
        label += f" [{entry.id}]"
    if entry.base_url:
        label += f" - {entry.base_url}"
    if active:
        label += " (active)"
    return label
