"""Tests for the model-delete and model-select dialogs."""

import json
from types import SimpleNamespace

import pytest

from kolosal_cli.commands import CommandContext, CommandServices, MessageResult
from kolosal_cli.config import ConfigService
from kolosal_cli.dialogs import (
    ModelDeleteDialog,
    ModelSelectDialog,
    build_dialogs,
    format_model_option,
)
from kolosal_cli.domain.models import SavedModelEntry
from kolosal_cli.settings import load_settings

from conftest import InteractionStub


def _file_context(path, interaction, active="llama-3-8b"):
    settings = load_settings(str(path))
    config = ConfigService(active)
    return CommandContext(
        services=CommandServices(settings=settings, config=config),
        interaction=interaction,
    )


def _persisted_ids(path):
    data = json.loads(path.read_text(encoding="utf-8"))
    return [entry["id"] for entry in data["model"]["savedModels"]]


def test_build_dialogs_covers_every_dialog_name():
    dialogs = build_dialogs()
    assert isinstance(dialogs["model_delete"], ModelDeleteDialog)
    assert isinstance(dialogs["model"], ModelSelectDialog)


def test_format_model_option():
    entry = SavedModelEntry(id="m", label="Model", base_url="http://h/v1")
    assert format_model_option(entry) == "Model [m] - http://h/v1"
    assert format_model_option(SavedModelEntry(id="m"), active=True) == "m (active)"


@pytest.mark.asyncio
async def test_delete_offers_only_deletable_models_and_persists(user_settings_path):
    interaction = InteractionStub(selection="mistral-local", text="yes")
    context = _file_context(user_settings_path, interaction)

    result = await ModelDeleteDialog().run(context)

    assert result == MessageResult.info("Deleted model 'mistral-local'.")
    offered = interaction.prompt_selection.await_args.args[1]
    assert [key for key, _label in offered] == ["mistral-local"]
    assert _persisted_ids(user_settings_path) == ["llama-3-8b", "kolosal-qwen"]


@pytest.mark.asyncio
async def test_delete_preserves_unknown_entry_keys(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(
        json.dumps(
            {
                "theme": "dark",
                "model": {
                    "savedModels": [
                        {"id": "a", "provider": "openai-compatible", "apiKey": "k"},
                        {"id": "b"},
                    ]
                },
            }
        ),
        encoding="utf-8",
    )
    context = _file_context(path, InteractionStub(selection="b", text="YES"), active="z")

    await ModelDeleteDialog().run(context)

    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["theme"] == "dark"
    assert data["model"]["savedModels"] == [
        {"id": "a", "provider": "openai-compatible", "apiKey": "k"}
    ]


@pytest.mark.asyncio
async def test_delete_cancelled_at_selection(user_settings_path):
    context = _file_context(user_settings_path, InteractionStub(selection=None))

    result = await ModelDeleteDialog().run(context)

    assert result == MessageResult.info("Model deletion cancelled.")
    assert len(_persisted_ids(user_settings_path)) == 3


@pytest.mark.asyncio
async def test_delete_requires_yes(user_settings_path):
    context = _file_context(
        user_settings_path, InteractionStub(selection="mistral-local", text="y")
    )

    result = await ModelDeleteDialog().run(context)

    assert result.content == "Model deletion cancelled."
    assert len(_persisted_ids(user_settings_path)) == 3


@pytest.mark.asyncio
async def test_delete_revalidates_active_model_after_confirmation(user_settings_path):
    interaction = InteractionStub(selection="mistral-local")
    context = _file_context(user_settings_path, interaction)

    async def _switch_then_confirm(_prompt):
        context.services.config.set_model("mistral-7b-instruct")
        return "yes"

    interaction.prompt_text.side_effect = _switch_then_confirm

    result = await ModelDeleteDialog().run(context)

    assert result.message_type == "error"
    assert "now the active model" in result.content
    assert len(_persisted_ids(user_settings_path)) == 3


@pytest.mark.asyncio
async def test_delete_reports_entry_removed_meanwhile(user_settings_path):
    interaction = InteractionStub(selection="mistral-local")
    context = _file_context(user_settings_path, interaction)

    async def _remove_then_confirm(_prompt):
        saved = context.services.settings.user.data["model"]["savedModels"]
        saved[:] = [entry for entry in saved if entry["id"] != "mistral-local"]
        return "yes"

    interaction.prompt_text.side_effect = _remove_then_confirm

    result = await ModelDeleteDialog().run(context)

    assert result == MessageResult.error("Model 'mistral-local' no longer exists.")


@pytest.mark.asyncio
async def test_delete_needs_writable_store(config, interaction):
    context = CommandContext(
        services=CommandServices(
            settings=SimpleNamespace(merged={"model": {"savedModels": [{"id": "a"}]}}),
            config=config,
        ),
        interaction=interaction,
    )

    result = await ModelDeleteDialog().run(context)

    assert result == MessageResult.error("Settings store is read-only.")


@pytest.mark.asyncio
async def test_delete_without_config(settings, interaction):
    context = CommandContext(
        services=CommandServices(settings=settings), interaction=interaction
    )

    result = await ModelDeleteDialog().run(context)

    assert result == MessageResult.error("Configuration not available.")


@pytest.mark.asyncio
async def test_select_switches_active_model(command_context):
    command_context.interaction.prompt_selection.return_value = "mistral-local"

    result = await ModelSelectDialog().run(command_context)

    assert result == MessageResult.info("Switched to mistral-local (mistral-7b-instruct)")
    assert command_context.services.config.get_model() == "mistral-7b-instruct"
    options = command_context.interaction.prompt_selection.await_args.args[1]
    assert options[0] == ("llama-3-8b", "Llama 3 8B [llama-3-8b] - http://localhost:8080/v1 (active)")


@pytest.mark.asyncio
async def test_select_same_model_is_noop(command_context):
    command_context.interaction.prompt_selection.return_value = "llama-3-8b"

    result = await ModelSelectDialog().run(command_context)

    assert result == MessageResult.info("Already using Llama 3 8B")


@pytest.mark.asyncio
async def test_select_cancelled(command_context):
    result = await ModelSelectDialog().run(command_context)

    assert result == MessageResult.info("Model selection cancelled.")
    assert command_context.services.config.get_model() == "llama-3-8b"
