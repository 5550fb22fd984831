# cli/main.py

"""
Entry point for the Student Roster CLI.

Binds a `Roster` to its data file, loads it, runs the Main menu, and saves on exit.
"""

import logging
import sys

import cli.menu_helpers as helpers
import core.formatters as formatters
from cli.menus import roster_menu
from cli.path_utils import resolve_data_path
from models.record_store import RecordStore
from models.roster import Roster


def run_cli(data_path: str | None = None) -> None:
    """
    Runs one session of the Student Roster CLI.

    Args:
        data_path (str | None): Optional path to the data file. Defaults to `students.dat` in the working directory.

    Notes:
        - A missing data file is a fresh start; a corrupt or unreadable one is reported and the session starts empty.
        - The roster is saved when the menu exits, even if the menu loop raised. A failed save is reported, not raised.
    """
    roster = Roster(RecordStore(resolve_data_path(data_path)))

    title = formatters.format_banner_text("STUDENT MANAGEMENT SYSTEM")
    print(f"\n{title}")

    load_response = roster.initialize()

    if not load_response.success:
        helpers.display_response_failure(load_response)
    else:
        print(f"\n{load_response.detail}")

    try:
        roster_menu.run(roster)

    finally:
        save_response = roster.shutdown()

        if not save_response.success:
            helpers.display_response_failure(save_response)
        else:
            print(f"\n{save_response.detail}")

    exit_program()


def exit_program() -> None:
    exit_banner = formatters.format_banner_text("Exiting Program")
    print(f"\n{exit_banner}")
    print("Thank you for using the system!\n")


def main() -> None:
    logging.basicConfig(
        level=logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    run_cli(sys.argv[1] if len(sys.argv) > 1 else None)


if __name__ == "__main__":
    main()
