"""Host-owned dialogs opened by ``DialogResult`` values."""

from __future__ import annotations

from ..commands.types import DialogName
from .base import Dialog, SavedModelStore, format_model_option
from .model_delete import ModelDeleteDialog
from .model_select import ModelSelectDialog


def build_dialogs() -> dict[DialogName, Dialog]:
    """Map every dialog name to its implementation."""
    return {
        "model": ModelSelectDialog(),
        "model_delete": ModelDeleteDialog(),
    }


__all__ = [
    "Dialog",
    "ModelDeleteDialog",
    "ModelSelectDialog",
    "SavedModelStore",
    "build_dialogs",
    "format_model_option",
]
