"""kolosal-cli: slash-command action layer for the Kolosal assistant shell."""

__version__ = "0.1.0"
