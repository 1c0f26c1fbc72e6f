# cli/main.py

"""
Main Menu for the records manager CLI.

Starts a session with an empty `RecordStore` and dispatches the five record
workflows until the user exits. The store is discarded when the session ends.
"""

import logging

import cli.menu_helpers as helpers
import core.formatters as formatters
from cli.menu_helpers import MenuSignal
from core.config import APP_NAME
from core.logger import configure_logging
from models.record_store import RecordStore
from services import record_operations

logger = logging.getLogger(__name__)


def run_cli() -> None:
    """
    Top-level loop with dispatch for the Main menu.

    Raises:
        RuntimeError: If the menu response is unrecognized.
        SystemExit: Raised by `exit_program()` when the user exits.
    """
    configure_logging()

    store = RecordStore()
    logger.debug("Session started")

    title = formatters.format_banner_text(APP_NAME, width=len(APP_NAME) + 4)
    read_line = helpers.read_console_line
    options = [
        ("Add New record", lambda: record_operations.add_record(store, read_line)),
        ("View All records", lambda: record_operations.view_all_records(store)),
        (
            "View records by Role",
            lambda: record_operations.view_records_by_role(store, read_line),
        ),
        ("Edit existing record", lambda: record_operations.edit_record(store, read_line)),
        (
            "Delete existing record",
            lambda: record_operations.delete_record(store, read_line),
        ),
    ]
    zero_option = "Exit"

    while True:
        menu_response = helpers.display_menu(title, options, zero_option)

        if menu_response is MenuSignal.EXIT:
            exit_program(store)

        elif callable(menu_response):
            helpers.display_response(menu_response())

        else:
            raise RuntimeError(f"Unexpected MenuResponse received: {menu_response}")


def exit_program(store: RecordStore) -> None:
    """
    Displays an exit banner, sounds the terminal bell, and terminates the CLI program.

    Raises:
        SystemExit: Always raised to immediately terminate execution.

    Notes:
        - Records are not persisted; the session's store is discarded here.
    """
    logger.debug("Session ended with %d records discarded", store.count)

    helpers.exit_banner()
    print("\a", end="", flush=True)

    raise SystemExit


if __name__ == "__main__":
    run_cli()
