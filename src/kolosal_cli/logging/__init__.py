"""Structured logging primitives for kolosal-cli."""

from .events import (
    build_run_log_path,
    log_event,
    setup_logging,
    summarize_command_args,
    summarize_text,
)
from .formatter import StructuredTextFormatter
from .schema import DEFAULT_EVENT_KEY_ORDER, EVENT_KEY_ORDER, LOG_PATH_FIELDS

__all__ = [
    "DEFAULT_EVENT_KEY_ORDER",
    "EVENT_KEY_ORDER",
    "LOG_PATH_FIELDS",
    "StructuredTextFormatter",
    "build_run_log_path",
    "log_event",
    "setup_logging",
    "summarize_command_args",
    "summarize_text",
]
