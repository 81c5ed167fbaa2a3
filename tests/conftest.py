# tests/conftest.py

import pytest

from models.student import Student


@pytest.fixture
def sample_student():
    return Student("mmurray", "Mark", "Murray")


@pytest.fixture
def sample_defaulted_student():
    return Student.from_username("jsmith")


@pytest.fixture
def sample_contact_student():
    return Student(
        username="scameron",
        first_name="Sean",
        last_name="Cameron",
        email="scameron@mmm.edu",
        phone="555-0100",
    )


@pytest.fixture
def scripted_input(monkeypatch):
    def feed(*answers):
        responses = iter(answers)
        monkeypatch.setattr("builtins.input", lambda _prompt="": next(responses))

    return feed
