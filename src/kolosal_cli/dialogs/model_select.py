"""Model picker dialog: switch the active model to a saved entry."""

from __future__ import annotations

from ..commands.context import CommandContext, read_saved_models
from ..commands.model_delete import CONFIG_UNAVAILABLE_MESSAGE
from ..commands.types import MessageResult
from .base import format_model_option


class ModelSelectDialog:
    async def run(self, context: CommandContext) -> MessageResult:
        config = context.services.config
        interaction = context.interaction
        if config is None:
            return MessageResult.error(CONFIG_UNAVAILABLE_MESSAGE)
        if interaction is None:
            return MessageResult.error("Interactive input not available.")
        set_model = getattr(config, "set_model", None)
        if set_model is None:
            return MessageResult.error("Active model cannot be changed.")

        saved_models = read_saved_models(context.services.settings)
        if not saved_models:
            return MessageResult.error("No saved models found.")

        active_model = config.get_model()
        selected_id = await interaction.prompt_selection(
            "Saved models:",
            [
                (entry.id, format_model_option(entry, active=entry.runtime_id == active_model))
                for entry in saved_models
            ],
            action="switch to",
        )
        if selected_id is None:
            return MessageResult.info("Model selection cancelled.")

        entry = next((entry for entry in saved_models if entry.id == selected_id), None)
        if entry is None:
            return MessageResult.error(f"Model '{selected_id}' no longer exists.")
        if entry.runtime_id == active_model:
            return MessageResult.info(f"Already using {entry.display_name}")

        set_model(entry.runtime_id)
        return MessageResult.info(f"Switched to {entry.display_name} ({entry.runtime_id})")
