# cli/main.py

"""
Start Menu for the Student Records CLI.

Provides functions for creating, editing, and viewing `Student` records held in memory
for the current session.
"""

from typing import cast

import cli.menu_helpers as helpers
import cli.model_formatters as model_formatters
import core.formatters as formatters
from cli.menu_helpers import MenuSignal
from models.student import Student
from models.student_updates import add_student, update_student_field


def run_cli() -> None:
    """
    Top-level loop with dispatch for the Start menu.

    Raises:
        RuntimeError: If the menu response is unrecognized.
    """
    title = formatters.format_banner_text("STUDENT RECORDS")
    options = [
        ("Create a Student", create_student),
        ("Edit a Student", edit_student),
        ("View a Student", view_student),
    ]
    zero_option = "Exit Program"

    students: dict[str, Student] = {}

    while True:
        menu_response = helpers.display_menu(title, options, zero_option)

        if menu_response is MenuSignal.EXIT:
            exit_program()

        elif callable(menu_response):
            menu_response(students)

        else:
            raise RuntimeError(f"Unexpected MenuResponse received: {menu_response}")


# === create student ===


def create_student(students: dict[str, Student]) -> Student | None:
    """
    Prompts the user for a username and optional names, then adds the new `Student`.

    Args:
        students (dict[str, Student]): The session's records, keyed by username.

    Returns:
        Student: The new record if it was added.
        None: If the user cancels or the username is already taken.

    Notes:
        - If both names are left blank, the record is built with `Student.from_username()`.
    """
    username = helpers.prompt_user_input_or_cancel(
        "Enter the username (leave blank to cancel):"
    )

    if username is MenuSignal.CANCEL:
        return None
    username = cast(str, username)

    first_name = helpers.prompt_user_input_or_none(
        "Enter the first name (leave blank to skip):"
    )
    last_name = helpers.prompt_user_input_or_none(
        "Enter the last name (leave blank to skip):"
    )

    if first_name is None and last_name is None:
        student = Student.from_username(username)
    else:
        student = Student(username, first_name, last_name)

    add_response = add_student(students, student)

    if not add_response.success:
        helpers.display_response_failure(add_response)
        return None

    print(f"\n{add_response.detail}")

    return student


# === edit student ===


def edit_student(students: dict[str, Student]) -> None:
    """
    Prompts the user to select a `Student`, pick a field, and enter a new value.

    Args:
        students (dict[str, Student]): The session's records, keyed by username.

    Notes:
        - A blank value clears the field.
        - Invalid field choices re-prompt until a field is chosen or the user cancels with "0".
        - Selecting the username shows the refusal straight away without asking for a value.
    """
    student = helpers.prompt_student_selection(
        students, model_formatters.format_student_oneline
    )

    if student is None:
        return

    field_names = ("username",) + Student.MUTABLE_FIELDS
    options = [
        (
            f"{model_formatters.format_student_field_label(field_name)}"
            f" ({model_formatters.format_student_field_value(student, field_name)})",
            field_name,
        )
        for field_name in field_names
    ]

    while True:
        print(f"\nEditing {student.username}:")

        for i, (label, _) in enumerate(options, 1):
            print(f"{i}. {label}")

        choice = helpers.prompt_user_input("Select a field (0 to cancel):")

        if choice == "0":
            return

        try:
            index = int(choice) - 1
            if index < 0:
                raise IndexError(index)
            field_name = options[index][1]
            break

        except (ValueError, IndexError):
            print("\nInvalid selection. Please try again.")

    if field_name in Student.MUTABLE_FIELDS:
        value = helpers.prompt_user_input_or_none(
            f"Enter the new {model_formatters.format_student_field_label(field_name).lower()}"
            " (leave blank to clear):"
        )
    else:
        # fixed fields are refused before asking for a value
        value = None

    update_response = update_student_field(student, field_name, value)

    if not update_response.success:
        helpers.display_response_failure(update_response)
        return

    print(f"\n{update_response.detail}")


# === view student ===


def view_student(students: dict[str, Student]) -> None:
    student = helpers.prompt_student_selection(
        students, model_formatters.format_student_oneline
    )

    if student is None:
        return

    print(f"\n{model_formatters.format_student_multiline(student)}")


def exit_program():
    """
    Displays an exit banner and terminates the CLI program.

    Raises:
        SystemExit: Always raised to immediately terminate execution.
    """
    exit_banner = formatters.format_banner_text("Exiting Program")
    print(f"\n{exit_banner}\n")

    raise SystemExit


if __name__ == "__main__":
    run_cli()
