"""Interactive REPL loop for kolosal-cli."""

from __future__ import annotations

from pathlib import Path

from prompt_toolkit import PromptSession, print_formatted_text
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.history import FileHistory

from . import __version__
from .commands import CommandDispatcher, build_builtin_registry, is_command
from .commands.context import CommandContext, CommandServices
from .config import ConfigService
from .constants import DISPLAY_NONE, REPL_HISTORY_FILE
from .dialogs import build_dialogs
from .host import BreakAction, CommandHost, PrintAction
from .path_utils import map_path
from .phrases import PhraseCycler
from .settings import LoadedSettings
from .ui.interaction import ThreadedConsoleInteraction

BORDERLINE = "=" * 60


def create_prompt_session() -> PromptSession:
    """Create prompt-toolkit session for REPL input."""
    history_path = Path(map_path(REPL_HISTORY_FILE))
    history_path.parent.mkdir(parents=True, exist_ok=True)
    return PromptSession(history=FileHistory(str(history_path)))


def show_phrase(phrase: str) -> None:
    """Print a loading/waiting phrase as a dimmed status line."""
    print_formatted_text(FormattedText([("italic ansibrightblack", phrase)]))


def print_startup_banner(config: ConfigService, settings: LoadedSettings) -> None:
    print(BORDERLINE)
    print(f"kolosal-cli {__version__}")
    print(BORDERLINE)
    print(f"Current Model:  {config.get_model() or DISPLAY_NONE}")
    print(f"Saved Models:   {len(settings.saved_models())}")
    print("Type /help for commands • /quit or Ctrl-D to quit")
    print(BORDERLINE)


async def repl_loop(config: ConfigService, settings: LoadedSettings) -> str:
    """Read commands until quit/EOF; return the stop reason."""
    def _on_phrase_change(phrase: str) -> None:
        # Idle resets are not shown.
        if cycler.state != "idle":
            show_phrase(phrase)

    cycler = PhraseCycler(on_change=_on_phrase_change)
    context = CommandContext(
        services=CommandServices(settings=settings, config=config),
        interaction=ThreadedConsoleInteraction(),
    )
    registry = build_builtin_registry()
    context.registry = registry
    dispatcher = CommandDispatcher(registry=registry, context=context, cycler=cycler)
    host = CommandHost(context, build_dialogs(), cycler=cycler)

    prompt_session = create_prompt_session()
    print_startup_banner(config, settings)

    try:
        while True:
            try:
                user_input = await prompt_session.prompt_async("> ")
            except EOFError:
                print("Goodbye!")
                return "eof"
            except KeyboardInterrupt:
                continue

            if not user_input.strip():
                continue

            if not is_command(user_input):
                print("Commands start with '/'. Type /help for a list.")
                continue

            result = await dispatcher.execute(user_input)
            action = await host.handle_result(result)

            if isinstance(action, BreakAction):
                print("Goodbye!")
                return "quit_command"

            if isinstance(action, PrintAction):
                print(f"Error: {action.message}" if action.is_error else action.message)
    finally:
        cycler.close()
