# models/student.py

"""
Represents a single student record.

Stores the student's username alongside optional identity and contact details.
The username is fixed when the record is created; every other field may be
reassigned, or cleared to `None`, at any time.

Includes functionality for:
- Creating a record from a full set of names or from a username alone
- Deriving a display name from the first and last names
- Rendering each field on its own line
- Serializing to and from JSON-compatible dictionaries
"""

from __future__ import annotations

import core.formatters as formatters


class ImmutableFieldError(AttributeError):
    """Raised when a field that is fixed at construction is reassigned."""

    def __init__(self, field_name: str):
        super().__init__(
            f"'{field_name}' is fixed when the record is created and cannot be changed."
        )
        self.field_name = field_name


class Student:

    MUTABLE_FIELDS = ("first_name", "last_name", "email", "phone")

    def __init__(
        self,
        username: str,
        first_name: str | None,
        last_name: str | None,
        email: str | None = None,
        phone: str | None = None,
    ):
        # re-running __init__ on a live record must not rebind the username
        if hasattr(self, "_username"):
            raise ImmutableFieldError("username")

        self._username: str = username
        self._first_name: str | None = first_name
        self._last_name: str | None = last_name
        self._email: str | None = email
        self._phone: str | None = phone

    @classmethod
    def from_username(cls, username: str) -> Student:
        return cls(username, None, None)

    # === properties ===

    @property
    def username(self) -> str:
        return self._username

    @username.setter
    def username(self, username: str) -> None:
        raise ImmutableFieldError("username")

    @username.deleter
    def username(self) -> None:
        raise ImmutableFieldError("username")

    @property
    def first_name(self) -> str | None:
        return self._first_name

    @first_name.setter
    def first_name(self, first_name: str | None) -> None:
        self._first_name = first_name

    @property
    def last_name(self) -> str | None:
        return self._last_name

    @last_name.setter
    def last_name(self, last_name: str | None) -> None:
        self._last_name = last_name

    @property
    def full_name(self) -> str:
        # absent and blank names are left out rather than rendered
        return " ".join(name for name in (self._first_name, self._last_name) if name)

    @property
    def email(self) -> str | None:
        return self._email

    @email.setter
    def email(self, email: str | None) -> None:
        self._email = email

    @property
    def phone(self) -> str | None:
        return self._phone

    @phone.setter
    def phone(self, phone: str | None) -> None:
        self._phone = phone

    # === rendering ===

    def field_lines(self) -> list[str]:
        """
        Renders each field as a `fieldName: value` line.

        Returns:
            A list of five lines in the order username, firstName, lastName, email, phone.
            Absent fields are shown with `formatters.ABSENT_MARKER`.
        """
        return [
            formatters.format_field_line("username", self._username),
            formatters.format_field_line("firstName", self._first_name),
            formatters.format_field_line("lastName", self._last_name),
            formatters.format_field_line("email", self._email),
            formatters.format_field_line("phone", self._phone),
        ]

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            "username": self._username,
            "first_name": self._first_name,
            "last_name": self._last_name,
            "email": self._email,
            "phone": self._phone,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Student:
        return cls(
            username=data["username"],
            first_name=data.get("first_name"),
            last_name=data.get("last_name"),
            email=data.get("email"),
            phone=data.get("phone"),
        )

    # === dunder methods ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Student):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return f"Student({self._username!r}, {self._first_name!r}, {self._last_name!r}, {self._email!r}, {self._phone!r})"

    def __str__(self) -> str:
        return "\n".join(self.field_lines())
