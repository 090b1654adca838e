"""Tests for the /model-delete command action."""

from types import SimpleNamespace

import pytest

from kolosal_cli.commands import CommandContext, CommandServices, DialogResult, MessageResult
from kolosal_cli.commands.model_delete import (
    CONFIG_UNAVAILABLE_MESSAGE,
    NO_DELETABLE_MODELS_MESSAGE,
    NO_SAVED_MODELS_MESSAGE,
    delete_model_action,
    model_delete_command,
)


class _ConfigStub:
    def __init__(self, model: str):
        self.model = model
        self.calls = 0

    def get_model(self) -> str:
        self.calls += 1
        return self.model


def _context(saved_models, active="z", with_config=True):
    settings = SimpleNamespace(merged={"model": {"savedModels": saved_models}})
    config = _ConfigStub(active) if with_config else None
    return CommandContext(services=CommandServices(settings=settings, config=config))


def test_descriptor_metadata():
    assert model_delete_command.name == "model-delete"
    assert model_delete_command.alt_names == ("delete-model",)
    assert model_delete_command.kind == "built_in"
    assert model_delete_command.description == "Delete a saved custom model"


@pytest.mark.asyncio
async def test_missing_config_short_circuits_before_reading_collection():
    context = _context([], with_config=False)
    context.services.settings = SimpleNamespace()  # no merged attribute at all

    result = await delete_model_action(context, "")

    assert result == MessageResult.error(CONFIG_UNAVAILABLE_MESSAGE)


@pytest.mark.asyncio
async def test_empty_collection_reports_no_saved_models_without_guard():
    context = _context([])

    result = await delete_model_action(context, "")

    assert result == MessageResult(content=NO_SAVED_MODELS_MESSAGE, message_type="error")
    assert context.services.config.calls == 0


@pytest.mark.asyncio
async def test_missing_model_section_counts_as_empty():
    context = CommandContext(
        services=CommandServices(settings=SimpleNamespace(merged={}), config=_ConfigStub("a"))
    )

    result = await delete_model_action(context, "")

    assert result.content == NO_SAVED_MODELS_MESSAGE


@pytest.mark.asyncio
async def test_all_protected_reports_distinct_message():
    context = _context([{"id": "kolosal-x"}], active="kolosal-x")

    result = await delete_model_action(context, "")

    assert isinstance(result, MessageResult)
    assert result.message_type == "error"
    assert result.content == NO_DELETABLE_MODELS_MESSAGE
    assert result.content != NO_SAVED_MODELS_MESSAGE


@pytest.mark.asyncio
async def test_happy_path_opens_delete_dialog():
    context = _context([{"id": "a"}, {"id": "kolosal-b"}], active="z")

    result = await delete_model_action(context, "")

    assert result == DialogResult(dialog="model_delete")
    assert result.type == "dialog"


@pytest.mark.asyncio
async def test_only_active_model_saved_is_not_deletable():
    context = _context([{"id": "a", "runtimeModelId": "live"}], active="live")

    result = await delete_model_action(context, "")

    assert result.content == NO_DELETABLE_MODELS_MESSAGE


@pytest.mark.asyncio
async def test_malformed_saved_models_become_error_message():
    context = _context([{"label": "no id"}])

    result = await delete_model_action(context, "")

    assert isinstance(result, MessageResult)
    assert result.message_type == "error"
    assert result.content.startswith("Could not read saved models:")


@pytest.mark.asyncio
async def test_action_does_not_mutate_settings():
    saved = [{"id": "a"}, {"id": "b"}]
    context = _context(saved, active="a")

    await delete_model_action(context, "")

    assert saved == [{"id": "a"}, {"id": "b"}]
