"""Typed domain models shared by settings, commands and dialogs."""

from .models import SavedModelEntry, parse_saved_models

__all__ = ["SavedModelEntry", "parse_saved_models"]
