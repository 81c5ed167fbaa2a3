# tests/test_student_updates.py

from core.response import ErrorCode
from models.student import Student
from models.student_updates import add_student, update_student_field


def test_add_student(sample_student):
    students = {}

    response = add_student(students, sample_student)

    assert response.success
    assert response.data["record"] is sample_student
    assert students == {"mmurray": sample_student}


def test_add_student_rejects_duplicate_username(sample_student):
    students = {"mmurray": sample_student}

    response = add_student(students, Student.from_username("mmurray"))

    assert not response.success
    assert response.error is ErrorCode.DUPLICATE_USERNAME
    assert students["mmurray"] is sample_student


def test_update_student_field(sample_student):
    response = update_student_field(sample_student, "email", "mark@example.com")

    assert response.success
    assert response.data["record"] is sample_student
    assert sample_student.email == "mark@example.com"
    assert sample_student.phone is None


def test_update_student_field_clears_value(sample_student):
    response = update_student_field(sample_student, "first_name", None)

    assert response.success
    assert sample_student.first_name is None
    assert sample_student.full_name == "Murray"


def test_update_student_field_no_change(sample_student):
    response = update_student_field(sample_student, "last_name", "Murray")

    assert response.success
    assert "No changes made" in response.detail


def test_update_student_field_rejects_username(sample_student):
    response = update_student_field(sample_student, "username", "other")

    assert not response.success
    assert response.error is ErrorCode.IMMUTABLE_FIELD_WRITE
    assert response.status_code == 400
    assert sample_student.username == "mmurray"


def test_update_student_field_rejects_unknown_field(sample_student):
    response = update_student_field(sample_student, "middle_name", "J")

    assert not response.success
    assert response.error is ErrorCode.INVALID_INPUT
    assert str(response) == "Error: INVALID_INPUT"
