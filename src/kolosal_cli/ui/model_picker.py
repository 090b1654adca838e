"""Numbered-list selection prompt for saved models."""

from typing import Optional, Sequence

from prompt_toolkit import prompt as pt_prompt


def make_borderline(width: int = 60) -> str:
    return "-" * width


def prompt_option_selection(
    title: str,
    options: Sequence[tuple[str, str]],
    action: str = "select",
) -> Optional[str]:
    """Show a numbered list of ``(key, label)`` options and read a choice.

    User selects by number only; an empty answer cancels.

    Returns:
        Key of the selected option, or None if cancelled
    """
    if not options:
        print("Nothing to choose from.")
        return None

    print()
    print(title)
    print(make_borderline())
    for index, (_key, label) in enumerate(options, 1):
        print(f"  {index}. {label}")
    print(make_borderline())
    print()

    prompt = f"Select number to {action} [Enter to cancel]: "
    while True:
        selection = pt_prompt(prompt).strip()
        if not selection:
            return None

        try:
            index = int(selection)
        except ValueError:
            print("Invalid input. Enter a number.")
            continue

        if 1 <= index <= len(options):
            return options[index - 1][0]
        print(f"Invalid number. Choose 1-{len(options)}")
