"""Model-delete dialog: pick, confirm, re-check and remove one saved model."""

from __future__ import annotations

import logging

from ..commands.context import CommandContext, read_saved_models
from ..commands.guard import filter_deletable_models, protection_reason
from ..commands.model_delete import CONFIG_UNAVAILABLE_MESSAGE
from ..commands.types import MessageResult
from ..logging import log_event
from .base import SavedModelStore, format_model_option

_BLOCKED_MESSAGES = {
    "reserved_provider": "Model '{name}' is managed by Kolosal Cloud and cannot be deleted.",
    "active_model": "Model '{name}' is now the active model and cannot be deleted.",
}


class ModelDeleteDialog:
    """Deletion flow behind the ``model_delete`` dialog.

    Protection is evaluated again after confirmation against freshly read
    settings and the current active model.
    """

    async def run(self, context: CommandContext) -> MessageResult:
        config = context.services.config
        settings = context.services.settings
        interaction = context.interaction
        if config is None:
            return MessageResult.error(CONFIG_UNAVAILABLE_MESSAGE)
        if interaction is None:
            return MessageResult.error("Interactive input not available.")
        if not isinstance(settings, SavedModelStore):
            return MessageResult.error("Settings store is read-only.")

        deletable = filter_deletable_models(read_saved_models(settings), config.get_model())
        if not deletable:
            return MessageResult.error("No deletable models found.")

        selected_id = await interaction.prompt_selection(
            "Saved models that can be deleted:",
            [(entry.id, format_model_option(entry)) for entry in deletable],
            action="delete",
        )
        if selected_id is None:
            return MessageResult.info("Model deletion cancelled.")

        answer = await interaction.prompt_text(
            f"Type 'yes' to delete model '{selected_id}': "
        )
        if answer.strip().lower() != "yes":
            return MessageResult.info("Model deletion cancelled.")

        current = read_saved_models(settings)
        target = next((entry for entry in current if entry.id == selected_id), None)
        if target is None:
            return MessageResult.error(f"Model '{selected_id}' no longer exists.")

        reason = protection_reason(target, config.get_model())
        if reason is not None:
            log_event(
                "model_delete_blocked",
                level=logging.WARNING,
                model_id=target.id,
                reason=reason,
            )
            return MessageResult.error(_BLOCKED_MESSAGES[reason].format(name=target.display_name))

        remaining = [entry for entry in current if entry.id != target.id]
        await settings.save_saved_models(remaining)
        log_event("model_deleted", model_id=target.id, remaining_count=len(remaining))
        return MessageResult.info(f"Deleted model '{target.display_name}'.")
