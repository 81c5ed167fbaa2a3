# models/student_updates.py

"""
Manipulator functions for `Student` records that report their outcome as a `Response`.

Callers branch on `response.success` instead of catching exceptions. Faults raised by
the model itself, such as `ImmutableFieldError`, are translated into a failed response
with a matching `ErrorCode`.
"""

from core.response import ErrorCode, Response
from models.student import ImmutableFieldError, Student


def add_student(students: dict[str, Student], student: Student) -> Response:
    """
    Adds a `Student` to a collection keyed by username.

    Args:
        students (dict[str, Student]): The collection to add to. Mutated on success.
        student (Student): The record to add.

    Returns:
        Response: A structured response with the following contract:
            - success (bool):
                - True if the record was added.
                - False if another record already uses the same username.
            - error (ErrorCode | None):
                - `ErrorCode.DUPLICATE_USERNAME` if the username is taken.
            - data (dict):
                - On success:
                    - "record" (Student): The added `Student` object.
    """
    if student.username in students:
        return Response.fail(
            detail=f"A student with the username '{student.username}' already exists.",
            error=ErrorCode.DUPLICATE_USERNAME,
        )

    students[student.username] = student

    return Response.succeed(
        detail=f"Student '{student.username}' successfully added.",
        data={
            "record": student,
        },
    )


def update_student_field(
    student: Student, field_name: str, value: str | None
) -> Response:
    """
    Updates a single field on a given `Student` object.

    Args:
        student (Student): The student whose attribute is updated.
        field_name (str): The attribute name, e.g. "first_name" or "phone".
        value (str | None): The new value. `None` clears the field.

    Returns:
        Response: A structured response with the following contract:
            - success (bool):
                - True if the field was updated or the value was unchanged.
                - False if the field is fixed or unknown.
            - detail (str | None):
                - On failure, a human-readable description of the error.
                - On success, a confirmation message.
            - error (ErrorCode | str | None):
                - `ErrorCode.IMMUTABLE_FIELD_WRITE` for fields fixed at construction.
                - `ErrorCode.INVALID_INPUT` for unknown field names.
            - data (dict):
                - On success:
                    - "record" (Student): The updated `Student` object.

    Notes:
        - If the value matches the current one, the method returns early with a success response indicating no changes were made.
    """
    if field_name == "username":
        try:
            student.username = value

        except ImmutableFieldError as e:
            return Response.fail(
                detail=str(e),
                error=ErrorCode.IMMUTABLE_FIELD_WRITE,
            )

    if field_name not in Student.MUTABLE_FIELDS:
        return Response.fail(
            detail=f"Unknown student field: '{field_name}'.",
            error=ErrorCode.INVALID_INPUT,
        )

    if getattr(student, field_name) == value:
        return Response.succeed(
            detail="The value provided matches the current one. No changes made.",
            data={
                "record": student,
            },
        )

    setattr(student, field_name, value)

    return Response.succeed(
        detail=f"Student {field_name} successfully updated.",
        data={
            "record": student,
        },
    )
