"""Preferred key ordering for structured log blocks."""

from __future__ import annotations

LOG_PATH_FIELDS = frozenset(
    {
        "settings_file",
        "workspace_settings_file",
        "log_file",
    }
)

DEFAULT_EVENT_KEY_ORDER: tuple[str, ...] = ("ts_utc", "level", "logger", "ts", "message")

EVENT_KEY_ORDER: dict[str, tuple[str, ...]] = {
    "app_start": (
        "ts_utc",
        "level",
        "logger",
        "ts",
        "settings_file",
        "workspace_settings_file",
        "model",
        "saved_model_count",
        "log_file",
    ),
    "app_stop": ("ts_utc", "level", "logger", "ts", "reason", "uptime_ms"),
    "command_exec": (
        "ts_utc",
        "level",
        "logger",
        "ts",
        "command",
        "args_summary",
        "result",
        "elapsed_ms",
    ),
    "command_error": (
        "ts_utc",
        "level",
        "logger",
        "ts",
        "command",
        "args_summary",
        "error_type",
        "error",
    ),
    "dialog_open": ("ts_utc", "level", "logger", "ts", "dialog"),
    "model_deleted": ("ts_utc", "level", "logger", "ts", "model_id", "remaining_count"),
    "model_delete_blocked": ("ts_utc", "level", "logger", "ts", "model_id", "reason"),
    "model_switched": ("ts_utc", "level", "logger", "ts", "previous_model", "model"),
    "settings_saved": (
        "ts_utc",
        "level",
        "logger",
        "ts",
        "scope",
        "settings_file",
        "saved_model_count",
    ),
}
