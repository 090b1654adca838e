"""Model command: show the active model or open the model picker."""

from __future__ import annotations

from ..constants import DISPLAY_NONE
from .context import CommandContext, read_saved_models
from .model_delete import CONFIG_UNAVAILABLE_MESSAGE
from .registry import SlashCommand
from .types import CommandResult, DialogResult, MessageResult


async def select_model_action(context: CommandContext, args: str) -> CommandResult:
    config = context.services.config
    if config is None:
        return MessageResult.error(CONFIG_UNAVAILABLE_MESSAGE)

    try:
        saved_models = read_saved_models(context.services.settings)
    except ValueError as e:
        return MessageResult.error(f"Could not read saved models: {e}")

    if not saved_models:
        current = config.get_model() or DISPLAY_NONE
        return MessageResult.info(f"Current model: {current} (no saved models to switch to)")

    return DialogResult(dialog="model")


model_command = SlashCommand(
    name="model",
    alt_names=("models",),
    description="Switch the active model",
    kind="built_in",
    action=select_model_action,
)
