# tests/test_formatters.py

import core.formatters as formatters
import cli.model_formatters as model_formatters


def test_format_optional_text():
    assert formatters.format_optional_text("Mark") == "Mark"
    assert formatters.format_optional_text("") == ""
    assert formatters.format_optional_text(None) == "nil"


def test_format_field_line():
    assert formatters.format_field_line("phone", None) == "phone: nil"
    assert formatters.format_field_line("firstName", "Mark") == "firstName: Mark"


def test_format_banner_text():
    banner = formatters.format_banner_text("TITLE", width=10)

    assert banner == "==========\n  TITLE   \n=========="


def test_format_student_oneline(sample_student, sample_defaulted_student):
    assert model_formatters.format_student_oneline(sample_student) == (
        f"{'mmurray':<20} | Mark Murray"
    )
    assert model_formatters.format_student_oneline(sample_defaulted_student).endswith(
        "| [NO NAME]"
    )


def test_format_student_multiline(sample_student):
    assert model_formatters.format_student_multiline(sample_student) == (
        "Student mmurray:\n"
        "... Full Name: Mark Murray\n"
        "... username: mmurray\n"
        "... firstName: Mark\n"
        "... lastName: Murray\n"
        "... email: nil\n"
        "... phone: nil"
    )


def test_format_student_field_label_and_value(sample_student):
    assert model_formatters.format_student_field_label("first_name") == "First Name"
    assert model_formatters.format_student_field_value(sample_student, "phone") == "nil"
