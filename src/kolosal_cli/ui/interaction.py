"""Async user interaction adapters for dialog flows."""

from __future__ import annotations

import asyncio
from typing import Optional, Protocol, Sequence

from prompt_toolkit import prompt as pt_prompt

from .model_picker import prompt_option_selection


class UserInteractionPort(Protocol):
    """Minimal async interaction contract used by the host and dialogs."""

    async def prompt_text(self, prompt: str) -> str:
        """Prompt for free-form text input."""

    async def prompt_selection(
        self,
        title: str,
        options: Sequence[tuple[str, str]],
        *,
        action: str = "select",
    ) -> Optional[str]:
        """Prompt for one ``(key, label)`` option; None when cancelled."""


class ThreadedConsoleInteraction:
    """Console adapter that runs blocking prompts in worker threads."""

    async def prompt_text(self, prompt: str) -> str:
        return await asyncio.to_thread(pt_prompt, prompt)

    async def prompt_selection(
        self,
        title: str,
        options: Sequence[tuple[str, str]],
        *,
        action: str = "select",
    ) -> Optional[str]:
        return await asyncio.to_thread(prompt_option_selection, title, options, action)
