"""Tests for the /model command action."""

from types import SimpleNamespace

import pytest

from kolosal_cli.commands import CommandContext, CommandServices, DialogResult, MessageResult
from kolosal_cli.commands.model import select_model_action


@pytest.mark.asyncio
async def test_model_without_config_is_error():
    context = CommandContext(services=CommandServices(settings=SimpleNamespace(merged={})))

    result = await select_model_action(context, "")

    assert result == MessageResult.error("Configuration not available.")


@pytest.mark.asyncio
async def test_model_without_saved_models_shows_current(config):
    context = CommandContext(
        services=CommandServices(settings=SimpleNamespace(merged={}), config=config)
    )

    result = await select_model_action(context, "")

    assert result == MessageResult.info(
        "Current model: llama-3-8b (no saved models to switch to)"
    )


@pytest.mark.asyncio
async def test_model_with_saved_models_opens_picker(command_context):
    result = await select_model_action(command_context, "")

    assert result == DialogResult(dialog="model")
