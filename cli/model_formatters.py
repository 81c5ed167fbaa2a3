# cli/model_formatters.py

# anything that renders domain objects for the console
from textwrap import dedent

import core.formatters as formatters
from models.student import Student

# === student formatters ===


def format_student_oneline(student: Student) -> str:
    full_name = student.full_name or "[NO NAME]"

    return f"{student.username:<20} | {full_name}"


def format_student_multiline(student: Student) -> str:
    full_name = student.full_name or "[NO NAME]"
    fields = "\n".join(f"... {line}" for line in student.field_lines())

    return dedent(
        f"""\
        Student {student.username}:
        ... Full Name: {full_name}
        """
    ) + fields


def format_student_field_label(field_name: str) -> str:
    return field_name.replace("_", " ").title()


def format_student_field_value(student: Student, field_name: str) -> str:
    return formatters.format_optional_text(getattr(student, field_name))
