# cli/menus/roster_menu.py

"""
Main menu for the Student Roster CLI.

This module defines the interface for managing `Record` objects, including:
- Adding new students
- Displaying every student on the roster
- Searching, updating, and deleting by roll number
- Showing summary statistics for marks

All operations are routed through the `Roster` API for validation and state tracking.
Input is parsed and validated here; the `Roster` only ever receives typed values.
"""

from typing import cast

import cli.menu_helpers as helpers
import cli.model_formatters as model_formatters
import core.formatters as formatters
from cli.menu_helpers import MenuSignal
from models.record import Record
from models.roster import Roster


def run(roster: Roster) -> None:
    """
    Top-level loop with dispatch for the Main menu.

    Args:
        roster (Roster): The active `Roster`.

    Raises:
        RuntimeError: If the menu response is unrecognized.
    """
    title = formatters.format_banner_text("Main Menu")
    options = [
        ("Add Student", add_student),
        ("Display All Students", display_all_students),
        ("Search Student", search_student),
        ("Update Student", update_student),
        ("Delete Student", delete_student),
        ("Show Statistics", show_statistics),
    ]
    zero_option = "Exit"

    while True:
        menu_response = helpers.display_menu(title, options, zero_option)

        if menu_response is MenuSignal.EXIT:
            break

        elif callable(menu_response):
            menu_response(roster)

        else:
            raise RuntimeError(f"Unexpected MenuResponse received: {menu_response}")


# === add student ===


def add_student(roster: Roster) -> None:
    """
    Prompts for a new student's details and adds the resulting `Record` to the roster.

    Notes:
        - Each prompt is cancellable with blank input.
        - Name, roll number, and marks are validated as they are entered; the duplicate roll number check is left to `Roster.add_record()`.
    """
    print("\nEnter Student Details:")

    name = helpers.prompt_name_or_cancel("Name (leave blank to cancel):")

    if name is MenuSignal.CANCEL:
        helpers.returning_without_changes()
        return
    name = cast(str, name)

    roll_number = helpers.prompt_roll_number_or_cancel(
        "Roll No (leave blank to cancel):"
    )

    if roll_number is MenuSignal.CANCEL:
        helpers.returning_without_changes()
        return
    roll_number = cast(int, roll_number)

    marks = helpers.prompt_marks_or_cancel("Marks (leave blank to cancel):")

    if marks is MenuSignal.CANCEL:
        helpers.returning_without_changes()
        return
    marks = cast(float, marks)

    try:
        new_record = Record(name, roll_number, marks)

    except ValueError as e:
        print(f"\n[ERROR] Could not create student: {e}")
        return

    roster_response = roster.add_record(new_record)

    if not roster_response.success:
        helpers.display_response_failure(roster_response)
        print(f"\n{new_record.name} was not added.")

    else:
        print(f"\n{roster_response.detail}")


# === view students ===


def display_all_students(roster: Roster) -> None:
    roster_response = roster.list_records()
    records = roster_response.data["records"]

    if not records:
        print("\nNo students found!")
        return

    helpers.display_records(
        records,
        formatter=model_formatters.format_record_oneline,
        header=model_formatters.format_record_table_header(),
    )


def search_student(roster: Roster) -> None:
    record = prompt_find_record(roster, "Enter Roll No to search (leave blank to cancel):")

    if record is MenuSignal.CANCEL:
        return
    record = cast(Record, record)

    print("\nStudent Found:")
    helpers.display_records(
        [record],
        formatter=model_formatters.format_record_oneline,
        header=model_formatters.format_record_table_header(),
    )


def prompt_find_record(roster: Roster, prompt: str) -> Record | MenuSignal:
    """
    Prompts for a roll number and looks up the matching `Record`.

    Returns:
        The matching `Record`, or `MenuSignal.CANCEL` if the user cancels or no record matches.

    Notes:
        - A failed lookup is reported to the user before returning.
    """
    roll_number = helpers.prompt_roll_number_or_cancel(prompt)

    if roll_number is MenuSignal.CANCEL:
        return MenuSignal.CANCEL
    roll_number = cast(int, roll_number)

    roster_response = roster.find_record(roll_number)

    if not roster_response.success:
        helpers.display_response_failure(roster_response)
        return MenuSignal.CANCEL

    return roster_response.data["record"]


# === update student ===


def update_student(roster: Roster) -> None:
    """
    Prompts for a roll number, then a new name and new marks, and applies both through `Roster.update_record()`.

    Notes:
        - Cancelling either field prompt leaves the record unchanged.
    """
    record = prompt_find_record(roster, "Enter Roll No to update (leave blank to cancel):")

    if record is MenuSignal.CANCEL:
        return
    record = cast(Record, record)

    print("\nYou are updating the following student:")
    print(model_formatters.format_record_multiline(record))

    name = helpers.prompt_name_or_cancel("Enter new Name (leave blank to cancel):")

    if name is MenuSignal.CANCEL:
        helpers.returning_without_changes()
        return
    name = cast(str, name)

    marks = helpers.prompt_marks_or_cancel("Enter new Marks (leave blank to cancel):")

    if marks is MenuSignal.CANCEL:
        helpers.returning_without_changes()
        return
    marks = cast(float, marks)

    roster_response = roster.update_record(record.roll_number, name, marks)

    if not roster_response.success:
        helpers.display_response_failure(roster_response)

    else:
        print(f"\n{roster_response.detail}")


# === delete student ===


def delete_student(roster: Roster) -> None:
    record = prompt_find_record(roster, "Enter Roll No to delete (leave blank to cancel):")

    if record is MenuSignal.CANCEL:
        return
    record = cast(Record, record)

    print("\nYou are about to delete the following student:")
    print(model_formatters.format_record_multiline(record))

    if not helpers.confirm_action("Do you want to delete this student?"):
        helpers.returning_without_changes()
        return

    roster_response = roster.remove_record(record.roll_number)

    if not roster_response.success:
        helpers.display_response_failure(roster_response)

    else:
        print(f"\n{roster_response.detail}")


# === statistics ===


def show_statistics(roster: Roster) -> None:
    roster_response = roster.statistics()

    if not roster_response.success:
        print(f"\n{roster_response.detail}")
        return

    print(f"\n{model_formatters.format_statistics(roster_response.data)}")
