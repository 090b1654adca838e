"""Pytest configuration and fixtures for kolosal-cli tests."""

import json
from unittest.mock import AsyncMock

import pytest

from kolosal_cli.commands import CommandContext, CommandServices, build_builtin_registry
from kolosal_cli.config import ConfigService
from kolosal_cli.settings import LoadedSettings, SettingsFile


class InteractionStub:
    """Scripted interaction port: fixed selection and text answers."""

    def __init__(self, selection=None, text: str = ""):
        self.prompt_selection = AsyncMock(return_value=selection)
        self.prompt_text = AsyncMock(return_value=text)


@pytest.fixture
def saved_models_raw():
    return [
        {"id": "llama-3-8b", "label": "Llama 3 8B", "baseUrl": "http://localhost:8080/v1"},
        {"id": "kolosal-qwen", "label": "Qwen (Kolosal Cloud)"},
        {"id": "mistral-local", "runtimeModelId": "mistral-7b-instruct"},
    ]


@pytest.fixture
def user_settings_path(tmp_path, saved_models_raw):
    path = tmp_path / "settings.json"
    path.write_text(
        json.dumps({"model": {"name": "llama-3-8b", "savedModels": saved_models_raw}}),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def settings(saved_models_raw):
    return LoadedSettings(
        user=SettingsFile(scope="user", data={"model": {"savedModels": saved_models_raw}})
    )


@pytest.fixture
def config():
    return ConfigService("llama-3-8b")


@pytest.fixture
def interaction():
    return InteractionStub()


@pytest.fixture
def command_context(settings, config, interaction):
    context = CommandContext(
        services=CommandServices(settings=settings, config=config),
        interaction=interaction,
    )
    context.registry = build_builtin_registry()
    return context
