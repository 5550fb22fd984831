# cli/menu_helpers.py

"""
Helper functions for CLI menus and user interaction in the Student Roster application.

This module provides utilities for:
- Displaying interactive menus and record listings
- Prompting for and validating user input
- Handling confirmation flows
- Displaying standard system messages and error feedback

These functions are shared across menu modules to keep behavior consistent.
"""

from enum import Enum
from typing import Any, Callable, Iterable

import core.formatters as formatters
from core.response import Response
from models.record import Record


class MenuSignal(Enum):
    CANCEL = "CANCEL"
    EXIT = "EXIT"


# === display methods ===


def display_menu(
    title: str,
    options: list[tuple[str, Callable[..., Any]]],
    zero_option: str = "Return",
) -> MenuSignal | Callable[..., Any]:
    """
    Displays a numbered CLI menu and returns the selected action.

    Args:
        title (str): The heading displayed above the menu options.
        options (list[tuple[str, Callable[..., Any]]]): A list of (label, action) pairs to present.
        zero_option (str, optional): The label for the "exit" option. Defaults to "Return".

    Returns:
        MenuSignal.EXIT if the user selects the zero option.
        Callable[..., Any]: The function associated with the selected menu item.

    Notes:
        - Menu selection is repeated until a valid choice is made.
        - User input is matched by menu index, not by label.
    """
    while True:
        print(f"\n{title}")

        for i, (label, _) in enumerate(options, 1):
            print(f"{i}. {label}")

        print(f"0. {zero_option}")

        choice = prompt_user_input(f"Enter your choice (0-{len(options)}):")

        if choice == "0":
            return MenuSignal.EXIT

        try:
            index = int(choice) - 1
            if index < 0:
                raise IndexError(index)

            # adjusts for zero-index, retrieves action from tuple
            return options[index][1]

        except (ValueError, IndexError):
            print(f"Invalid choice! Please enter 0-{len(options)}.")


def display_records(
    records: Iterable[Record],
    formatter: Callable[[Record], str] = lambda x: str(x),
    header: str | None = None,
) -> None:
    """
    Prints records to the console one per line, under an optional header.

    Args:
        records (Iterable[Record]): The records to display, in display order.
        formatter (Callable[[Record], str], optional): Converts each record to a display string. Defaults to str().
        header (str | None, optional): A heading printed before the records, followed by a rule line.
    """
    if header is not None:
        print(f"\n{header}")
        print(formatters.format_rule())

    for record in records:
        print(formatter(record))


# === user input ===

# Prompt Helpers
#
# `prompt_user_input()` is the base function, used by all others to standardize the UI format.
# Blank input is read as `MenuSignal.CANCEL` by the `_or_cancel` variants.
# Typed variants loop until the input parses, printing the reason for each rejection.


def confirm_action(prompt: str) -> bool:
    while True:
        choice = prompt_user_input(f"{prompt} (y/n): ").lower()

        if choice == "y" or choice == "yes":
            return True

        elif choice == "n" or choice == "no":
            return False

        else:
            print("Invalid selection. Please try again.")


def prompt_user_input(prompt: str) -> str:
    return input(f"\n{prompt}\n  >> ").strip()


def prompt_user_input_or_cancel(prompt: str) -> str | MenuSignal:
    response = prompt_user_input(prompt)
    return MenuSignal.CANCEL if response == "" else response


def prompt_parsed_input_or_cancel(
    prompt: str, parse_fn: Callable[[str], Any]
) -> Any | MenuSignal:
    while True:
        response = prompt_user_input_or_cancel(prompt)

        if response is MenuSignal.CANCEL:
            return response

        try:
            return parse_fn(response)

        except ValueError as e:
            print(f"\n[ERROR] {e}")
            print("Please try again.")


def parse_roll_number(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise ValueError("Invalid input for roll number.")

    return Record.validate_roll_number_input(value)


def parse_marks(text: str) -> float:
    try:
        value = float(text)
    except ValueError:
        raise ValueError("Invalid input for marks.")

    return Record.validate_marks_input(value)


def prompt_roll_number_or_cancel(prompt: str) -> int | MenuSignal:
    return prompt_parsed_input_or_cancel(prompt, parse_roll_number)


def prompt_marks_or_cancel(prompt: str) -> float | MenuSignal:
    return prompt_parsed_input_or_cancel(prompt, parse_marks)


def prompt_name_or_cancel(prompt: str) -> str | MenuSignal:
    return prompt_parsed_input_or_cancel(prompt, Record.validate_name_input)


# === often used messages ===


def returning_without_changes() -> None:
    print("\nReturning without changes.")


def display_response_failure(response: Response) -> None:
    """
    Displays a formatted error message based on a failed `Response`.

    Notes:
        - Does nothing if the response was successful.
    """
    if response.success:
        return

    error_label = response.error.name if response.error else "UNKNOWN"

    print(f"\n[ERROR: {error_label}] {response.detail}")
