# cli/menu_helpers.py

"""
Helper functions for the records manager CLI.

This module provides utilities for:
- Displaying the numbered main menu
- Reading lines from the terminal on behalf of record workflows
- Displaying workflow outcomes, record listings, and error feedback

Record workflows never touch the terminal directly; they receive `read_console_line`
as their input provider and hand back a `Response` for these helpers to print.
"""

from enum import Enum
from typing import Any, Callable

import core.formatters as formatters
from core.response import ErrorCode, Response
from core.utils import try_parse_int


class MenuSignal(Enum):
    EXIT = "EXIT"


# === display methods ===


def display_menu(
    title: str,
    options: list[tuple[str, Callable[..., Any]]],
    zero_option: str = "Exit",
) -> MenuSignal | Callable[..., Any]:
    """
    Displays a numbered CLI menu and returns the selected action.

    Args:
        title (str): The heading displayed above the menu options.
        options (list[tuple[str, Callable[..., Any]]]): A list of (label, action) pairs to present.
        zero_option (str, optional): The label for the exit option. Defaults to "Exit".

    Returns:
        MenuSignal.EXIT if the user selects the zero option or input runs out.
        Callable[..., Any]: The function associated with the selected menu item.

    Notes:
        - Menu selection is repeated until a valid choice is made.
        - User input is matched by menu index, not by label.
    """
    while True:
        print(f"\n{title}\n")

        for i, (label, _) in enumerate(options, 1):
            print(f"{i}. {label}")

        print(f"0. {zero_option}")

        choice = read_console_line(f"\nSelect an option (0-{len(options)}): ")

        if choice is None or choice.strip() == "0":
            return MenuSignal.EXIT

        selection = try_parse_int(choice)

        if selection is not None and 1 <= selection <= len(options):
            # retrieves action from the (label, action) tuple
            return options[selection - 1][1]

        print(
            f"Invalid selection. Please try again (Allowed Options: 0-{len(options)})."
        )


def display_listing(lines: list[str]) -> None:
    for line in lines:
        print(line)


def display_response(response: Response) -> None:
    """
    Prints the listing and outcome of a workflow `Response`.

    Notes:
        - Failed responses are routed through `display_response_failure()`,
          except a cancellation, which is a user decision and prints like an outcome.
        - The listing, when present, is printed before the outcome line.
    """
    if response.error is ErrorCode.CANCELLED:
        print(f"\n{response.detail}")
        return

    if not response.success:
        display_response_failure(response)
        return

    if response.listing:
        print()
        display_listing(response.listing)

    else:
        print(f"\n{response.detail}")


def display_response_failure(response: Response) -> None:
    """
    Displays a formatted error message based on a failed `Response`.

    Args:
        response (Response): The response object to inspect.

    Notes:
        - Does nothing if the response was successful.
        - Enum error codes are printed by name; string errors are printed as-is.
    """
    if response.success:
        return

    error_label = (
        response.error.name if isinstance(response.error, Enum) else str(response.error)
    )

    print(f"\n[ERROR: {error_label}] {response.detail}")


def exit_banner() -> None:
    print(f"\n{formatters.format_banner_text('Exiting System... Goodbye!')}\n")


# === prompt user input methods ===


def read_console_line(prompt: str) -> str | None:
    """
    Input provider backed by the terminal.

    Returns:
        The line typed by the user, or None once standard input is closed.
    """
    try:
        return input(prompt)

    except EOFError:
        return None
