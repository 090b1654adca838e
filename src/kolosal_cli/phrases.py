"""Loading-phrase rotation shown while the host is busy."""

from __future__ import annotations

import asyncio
import random
from typing import Callable, Literal, Optional, Sequence


LOADING_PHRASES: tuple[str, ...] = (
    "Warming up the tensors...",
    "Counting parameters, one at a time...",
    "Quantizing my patience to 4-bit...",
    "Asking the attention heads to focus...",
    "Defragmenting the context window...",
    "Shuffling embeddings into place...",
    "Rebalancing the KV cache...",
    "Loading weights... mostly the heavy ones.",
    "Negotiating with the GPU scheduler...",
    "Sampling at a sensible temperature...",
    "Top-k filtering the punchlines...",
    "Polishing the logits...",
    "Checking the tokenizer for loose change...",
    "Reticulating transformer splines...",
    "Convincing the gradients to settle down...",
    "Consulting the model card...",
)

WAITING_PHRASE = "Waiting for user confirmation..."

PHRASE_CHANGE_INTERVAL_SEC = 15.0

CyclerState = Literal["idle", "active", "waiting"]


class PhraseCycler:
    """Current loading phrase derived from ``active`` and ``waiting`` flags.

    While active (and not waiting) the phrase is re-rolled immediately and
    then every ``interval`` seconds on an asyncio task. Any state change or
    ``close()`` cancels that task.
    """

    def __init__(
        self,
        phrases: Sequence[str] = LOADING_PHRASES,
        *,
        interval: float = PHRASE_CHANGE_INTERVAL_SEC,
        rng: Optional[random.Random] = None,
        on_change: Optional[Callable[[str], None]] = None,
    ) -> None:
        if not phrases:
            raise ValueError("Phrase list must not be empty")
        if interval <= 0:
            raise ValueError("Interval must be positive")
        self._phrases = tuple(phrases)
        self._interval = interval
        self._rng = rng or random.Random()
        self._on_change = on_change
        self._task: Optional[asyncio.Task[None]] = None
        self._current = self._phrases[0]
        self._state: CyclerState = "idle"

    @property
    def current_phrase(self) -> str:
        return self._current

    @property
    def state(self) -> CyclerState:
        return self._state

    @property
    def is_rotating(self) -> bool:
        return self._task is not None and not self._task.done()

    def update(self, *, active: bool, waiting: bool) -> None:
        """Apply new input flags. Rotation requires a running event loop."""
        self._cancel()

        if waiting:
            self._state = "waiting"
            self._set(WAITING_PHRASE)
        elif active:
            self._state = "active"
            self._set(self._pick())
            self._task = asyncio.get_running_loop().create_task(self._rotate())
        else:
            self._state = "idle"
            self._set(self._phrases[0])

    def close(self) -> None:
        self._cancel()

    def _pick(self) -> str:
        return self._rng.choice(self._phrases)

    def _set(self, phrase: str) -> None:
        self._current = phrase
        if self._on_change is not None:
            self._on_change(phrase)

    def _cancel(self) -> None:
        if self._task is not None:
            self._task.cancel()
            self._task = None

    async def _rotate(self) -> None:
        while True:
            await asyncio.sleep(self._interval)
            self._set(self._pick())
