"""Command execution context for explicit dependency wiring."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Mapping, Optional, Protocol

from ..constants import SETTINGS_MODEL_KEY, SETTINGS_SAVED_MODELS_KEY
from ..domain.models import SavedModelEntry, parse_saved_models
from ..ui.interaction import UserInteractionPort

if TYPE_CHECKING:
    from .registry import CommandRegistry


class ConfigAccessor(Protocol):
    """Read access to the active model."""

    def get_model(self) -> str:
        ...


class SettingsAccessor(Protocol):
    """Read access to merged user/workspace settings."""

    @property
    def merged(self) -> Mapping[str, Any]:
        ...


@dataclass(slots=True)
class CommandServices:
    """Services reachable from a command action.

    ``config`` is None until the configuration service has been wired up.
    """

    settings: SettingsAccessor
    config: Optional[ConfigAccessor] = None


@dataclass(slots=True)
class CommandContext:
    """Shared command runtime dependencies."""

    services: CommandServices
    interaction: Optional[UserInteractionPort] = None
    registry: Optional["CommandRegistry"] = None


def read_saved_models(settings: SettingsAccessor) -> list[SavedModelEntry]:
    """Return saved-model entries from ``merged["model"]["savedModels"]``.

    Raises:
        ValueError: If the persisted list is malformed
    """
    model_section = settings.merged.get(SETTINGS_MODEL_KEY) or {}
    if not isinstance(model_section, Mapping):
        raise ValueError(f"'{SETTINGS_MODEL_KEY}' settings must be an object")
    return parse_saved_models(model_section.get(SETTINGS_SAVED_MODELS_KEY))
