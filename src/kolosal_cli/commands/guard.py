"""Deletion guard for saved model entries.

An entry is protected when it is managed by Kolosal Cloud or when it is the
model currently serving requests. Either condition alone is enough.
"""

from __future__ import annotations

from typing import Literal, Optional, Sequence

from ..constants import KOLOSAL_API_BASE_URL, KOLOSAL_LABEL_SUFFIX, KOLOSAL_MODEL_ID_PREFIX
from ..domain.models import SavedModelEntry


ProtectionReason = Literal["reserved_provider", "active_model"]


def is_kolosal_cloud_model(entry: SavedModelEntry) -> bool:
    """Return True when any reserved-provider marker matches.

    The id prefix, label suffix and base URL are checked independently.
    """
    return (
        entry.id.startswith(KOLOSAL_MODEL_ID_PREFIX)
        or (entry.label is not None and entry.label.endswith(KOLOSAL_LABEL_SUFFIX))
        or entry.base_url == KOLOSAL_API_BASE_URL
    )


def protection_reason(entry: SavedModelEntry, active_model: str) -> Optional[ProtectionReason]:
    """Return why ``entry`` must not be deleted, or None when it may be."""
    if is_kolosal_cloud_model(entry):
        return "reserved_provider"
    if entry.runtime_id == active_model:
        return "active_model"
    return None


def filter_deletable_models(
    entries: Sequence[SavedModelEntry],
    active_model: str,
) -> list[SavedModelEntry]:
    """Return the deletable entries, in their original order."""
    return [entry for entry in entries if protection_reason(entry, active_model) is None]
