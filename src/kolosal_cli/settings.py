"""User/workspace settings scopes with merged read access."""

from __future__ import annotations

import copy
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

import aiofiles  # type: ignore[import-untyped]

from .constants import SETTINGS_MODEL_KEY, SETTINGS_SAVED_MODELS_KEY
from .domain.models import SavedModelEntry, parse_saved_models
from .errors import ConfigError, StorageError
from .logging import log_event


def merge_settings(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Merge two settings mappings.

    Nested mappings merge recursively; any other value (lists included) in
    ``override`` replaces the value in ``base``.
    """
    merged: dict[str, Any] = copy.deepcopy(dict(base))
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = merge_settings(current, value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


@dataclass(slots=True)
class SettingsFile:
    """One settings scope backed by an optional JSON file."""

    scope: str
    path: str | None = None
    data: dict[str, Any] = field(default_factory=dict)

    def defines_saved_models(self) -> bool:
        model_section = self.data.get(SETTINGS_MODEL_KEY)
        return isinstance(model_section, Mapping) and SETTINGS_SAVED_MODELS_KEY in model_section


def load_settings_file(scope: str, path: str | None) -> SettingsFile:
    """Load one settings scope; a missing file yields an empty scope."""
    if path is None:
        return SettingsFile(scope=scope)

    settings_path = Path(path)
    if not settings_path.exists():
        return SettingsFile(scope=scope, path=path)

    try:
        with open(settings_path, "r", encoding="utf-8") as f:
            data: Any = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {scope} settings file: {e}")
    except OSError as e:
        raise StorageError(f"Could not read {scope} settings file: {e}")

    if not isinstance(data, dict):
        raise ConfigError(f"{scope.capitalize()} settings must be a JSON object")

    model_section = data.get(SETTINGS_MODEL_KEY)
    if model_section is not None and not isinstance(model_section, dict):
        raise ConfigError(f"'{SETTINGS_MODEL_KEY}' in {scope} settings must be an object")

    return SettingsFile(scope=scope, path=path, data=data)


@dataclass(slots=True)
class LoadedSettings:
    """Settings accessor handed to commands and dialogs.

    ``merged`` is recomputed on every access so writes to either scope are
    visible immediately.
    """

    user: SettingsFile
    workspace: SettingsFile = field(default_factory=lambda: SettingsFile(scope="workspace"))

    @property
    def merged(self) -> dict[str, Any]:
        return merge_settings(self.user.data, self.workspace.data)

    def saved_models(self) -> list[SavedModelEntry]:
        """Return typed saved-model entries from merged settings."""
        model_section = self.merged.get(SETTINGS_MODEL_KEY) or {}
        try:
            return parse_saved_models(model_section.get(SETTINGS_SAVED_MODELS_KEY))
        except ValueError as e:
            raise ConfigError(f"Invalid saved models: {e}")

    def _saved_models_scope(self) -> SettingsFile:
        """Scope that owns ``model.savedModels`` (workspace wins)."""
        if self.workspace.defines_saved_models():
            return self.workspace
        return self.user

    async def save_saved_models(self, entries: list[SavedModelEntry]) -> None:
        """Replace the saved-model list in its owning scope and persist it.

        In-memory data changes only after the file write succeeds.
        """
        target = self._saved_models_scope()
        updated = copy.deepcopy(target.data)
        model_section = updated.setdefault(SETTINGS_MODEL_KEY, {})
        model_section[SETTINGS_SAVED_MODELS_KEY] = [entry.to_dict() for entry in entries]
        await save_settings_file(SettingsFile(scope=target.scope, path=target.path, data=updated))
        target.data = updated
        log_event(
            "settings_saved",
            scope=target.scope,
            settings_file=target.path,
            saved_model_count=len(entries),
        )


async def save_settings_file(settings_file: SettingsFile) -> None:
    """Write one settings scope to disk; in-memory scopes are left as-is."""
    if settings_file.path is None:
        return

    settings_path = Path(settings_file.path)
    try:
        settings_path.parent.mkdir(parents=True, exist_ok=True)
        async with aiofiles.open(settings_path, "w", encoding="utf-8") as f:
            await f.write(json.dumps(settings_file.data, indent=2, ensure_ascii=False))
            await f.write("\n")
    except OSError as e:
        raise StorageError(f"Could not write {settings_file.scope} settings file: {e}")


def load_settings(user_path: str | None, workspace_path: str | None = None) -> LoadedSettings:
    """Load user and workspace settings scopes."""
    return LoadedSettings(
        user=load_settings_file("user", user_path),
        workspace=load_settings_file("workspace", workspace_path),
    )
