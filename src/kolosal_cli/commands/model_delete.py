"""Delete-model command: checks preconditions, then hands off to the dialog."""

from __future__ import annotations

from .context import CommandContext, read_saved_models
from .guard import filter_deletable_models
from .registry import SlashCommand
from .types import CommandResult, DialogResult, MessageResult


CONFIG_UNAVAILABLE_MESSAGE = "Configuration not available."
NO_SAVED_MODELS_MESSAGE = "No saved models found. Nothing to delete."
NO_DELETABLE_MODELS_MESSAGE = (
    "No deletable models found. The currently active model cannot be deleted. "
    "Switch to a different model first."
)


async def delete_model_action(context: CommandContext, args: str) -> CommandResult:
    """Open the model-delete dialog when at least one entry is deletable."""
    config = context.services.config
    if config is None:
        return MessageResult.error(CONFIG_UNAVAILABLE_MESSAGE)

    try:
        saved_models = read_saved_models(context.services.settings)
    except ValueError as e:
        return MessageResult.error(f"Could not read saved models: {e}")

    if not saved_models:
        return MessageResult.error(NO_SAVED_MODELS_MESSAGE)

    deletable = filter_deletable_models(saved_models, config.get_model())
    if not deletable:
        return MessageResult.error(NO_DELETABLE_MODELS_MESSAGE)

    return DialogResult(dialog="model_delete")


model_delete_command = SlashCommand(
    name="model-delete",
    alt_names=("delete-model",),
    description="Delete a saved custom model",
    kind="built_in",
    action=delete_model_action,
)
