"""Active-model configuration service."""

from __future__ import annotations

from typing import Optional

from .constants import SETTINGS_MODEL_KEY, SETTINGS_MODEL_NAME_KEY
from .logging import log_event
from .settings import LoadedSettings


class ConfigService:
    """Holds the model currently selected for serving requests."""

    def __init__(self, model: str) -> None:
        self._model = model

    def get_model(self) -> str:
        return self._model

    def set_model(self, model: str) -> None:
        previous = self._model
        self._model = model
        log_event("model_switched", previous_model=previous, model=model)


def resolve_initial_model(settings: LoadedSettings, cli_model: Optional[str] = None) -> str:
    """Pick the startup model: CLI flag, settings name, first saved model, or empty."""
    if cli_model:
        return cli_model

    model_section = settings.merged.get(SETTINGS_MODEL_KEY) or {}
    configured = model_section.get(SETTINGS_MODEL_NAME_KEY)
    if isinstance(configured, str) and configured:
        return configured

    saved = settings.saved_models()
    if saved:
        return saved[0].runtime_id
    return ""
