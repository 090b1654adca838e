"""Typed saved-model entry used at settings I/O boundaries."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


_KNOWN_ENTRY_KEYS = {"id", "label", "baseUrl", "runtimeModelId"}


def _optional_str(raw: Mapping[str, Any], key: str) -> str | None:
    value = raw.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"Saved model '{key}' must be a string")
    return value


@dataclass(slots=True, frozen=True)
class SavedModelEntry:
    """One user-configured model alias."""

    id: str
    label: str | None = None
    base_url: str | None = None
    runtime_model_id: str | None = None
    extras: dict[str, Any] = field(default_factory=dict, compare=False)

    @property
    def runtime_id(self) -> str:
        """Identifier compared against the active model."""
        return self.runtime_model_id if self.runtime_model_id is not None else self.id

    @property
    def display_name(self) -> str:
        return self.label or self.id

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> SavedModelEntry:
        """Create a typed entry from one persisted ``savedModels`` item."""
        if not isinstance(raw, Mapping):
            raise ValueError("Saved model entry must be a dictionary")

        entry_id = raw.get("id")
        if not isinstance(entry_id, str) or not entry_id.strip():
            raise ValueError("Saved model 'id' must be a non-empty string")

        return cls(
            id=entry_id,
            label=_optional_str(raw, "label"),
            base_url=_optional_str(raw, "baseUrl"),
            runtime_model_id=_optional_str(raw, "runtimeModelId"),
            extras={
                str(key): value
                for key, value in raw.items()
                if key not in _KNOWN_ENTRY_KEYS
            },
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the persisted camelCase form, preserving unknown keys."""
        data: dict[str, Any] = {"id": self.id}
        if self.label is not None:
            data["label"] = self.label
        if self.base_url is not None:
            data["baseUrl"] = self.base_url
        if self.runtime_model_id is not None:
            data["runtimeModelId"] = self.runtime_model_id
        data.update(self.extras)
        return data


def parse_saved_models(raw: Any) -> list[SavedModelEntry]:
    """Parse a raw ``savedModels`` list, rejecting duplicate ids."""
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise ValueError("'savedModels' must be a list")

    entries: list[SavedModelEntry] = []
    seen: set[str] = set()
    for item in raw:
        entry = SavedModelEntry.from_dict(item)
        if entry.id in seen:
            raise ValueError(f"Duplicate saved model id: {entry.id}")
        seen.add(entry.id)
        entries.append(entry)
    return entries
