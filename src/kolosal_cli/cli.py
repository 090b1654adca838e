"""CLI bootstrap entry point for kolosal-cli."""

import argparse
import asyncio
import logging
import os
import sys
import time
from typing import Optional

from .config import ConfigService, resolve_initial_model
from .constants import DEFAULT_LOGS_DIR, DEFAULT_USER_SETTINGS_FILE
from .logging import build_run_log_path, log_event, setup_logging
from .path_utils import map_path
from .repl import repl_loop
from .settings import load_settings


def _map_cli_arg(
    path: Optional[str], arg_name: str, base_dir: Optional[str] = None
) -> Optional[str]:
    """Map CLI path argument with descriptive error messages.

    Raises:
        ValueError: With descriptive message including arg_name
    """
    if path is None:
        return None
    try:
        return map_path(path, base_dir=base_dir)
    except ValueError as e:
        raise ValueError(f"Invalid {arg_name} path: {e}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kolosal-cli",
        description="kolosal-cli - saved model management shell",
    )
    parser.add_argument(
        "-s",
        "--settings",
        default=DEFAULT_USER_SETTINGS_FILE,
        help=f"Path to user settings file (default: {DEFAULT_USER_SETTINGS_FILE})",
    )
    parser.add_argument(
        "-w",
        "--workspace-settings",
        help=(
            "Path to workspace settings file overriding user settings "
            "(optional; relative paths resolve against the current directory)"
        ),
    )
    parser.add_argument("-m", "--model", help="Active model id for this session (optional)")
    parser.add_argument(
        "-l",
        "--log",
        help="Path to log file (optional; defaults to a new file under ~/.kolosal/logs)",
    )
    parser.add_argument(
        "--no-log",
        action="store_true",
        help="Disable logging entirely",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> None:
    """Main entry point for kolosal-cli."""
    args = build_parser().parse_args(argv)
    app_started = time.perf_counter()

    try:
        settings_path = _map_cli_arg(args.settings, "settings")
        workspace_path = _map_cli_arg(
            args.workspace_settings, "workspace settings", base_dir=os.getcwd()
        )
        log_path = _map_cli_arg(args.log, "log")

        if args.no_log:
            effective_log_path = None
        else:
            effective_log_path = log_path or build_run_log_path(map_path(DEFAULT_LOGS_DIR))
        setup_logging(effective_log_path)

        settings = load_settings(settings_path, workspace_path)
        config = ConfigService(resolve_initial_model(settings, args.model))

        log_event(
            "app_start",
            settings_file=settings_path,
            workspace_settings_file=workspace_path,
            model=config.get_model(),
            saved_model_count=len(settings.saved_models()),
            log_file=effective_log_path,
        )

        reason = asyncio.run(repl_loop(config, settings))
        log_event(
            "app_stop",
            reason=reason,
            uptime_ms=round((time.perf_counter() - app_started) * 1000, 1),
        )

    except KeyboardInterrupt:
        log_event(
            "app_stop",
            reason="keyboard_interrupt",
            uptime_ms=round((time.perf_counter() - app_started) * 1000, 1),
        )
        print("\nInterrupted")
        sys.exit(0)
    except Exception as e:
        print(f"Error: {e}")
        log_event(
            "app_stop",
            level=logging.ERROR,
            reason="fatal_error",
            error_type=type(e).__name__,
            error=str(e),
            uptime_ms=round((time.perf_counter() - app_started) * 1000, 1),
        )
        logging.error("Fatal error: %s", e, exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
