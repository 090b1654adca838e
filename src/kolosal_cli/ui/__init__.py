"""Console interaction adapters."""

from .interaction import ThreadedConsoleInteraction, UserInteractionPort

__all__ = ["ThreadedConsoleInteraction", "UserInteractionPort"]
