# tests/conftest.py

import pytest

from models.admin import Admin
from models.record_store import RecordStore
from models.student import Student
from models.teacher import Teacher


@pytest.fixture
def record_store():
    return RecordStore()


@pytest.fixture
def scripted_input():
    """
    Factory for `read_line` providers that answer prompts from a fixed script.

    The returned provider records every prompt it receives in `.prompts` and
    returns None once the script is exhausted, like a closed terminal.
    """

    def make(*lines):
        queue = list(lines)
        prompts = []

        def read_line(prompt):
            prompts.append(prompt)
            return queue.pop(0) if queue else None

        read_line.prompts = prompts
        return read_line

    return make


@pytest.fixture
def sample_teacher():
    teacher = Teacher(1)
    teacher.name = "Ada Lovelace"
    teacher.telephone = "0123"
    teacher.email = "ada@centre.edu"
    teacher.salary = 2500.0
    teacher.subject1 = "Math"
    teacher.subject2 = "Computing"
    return teacher


@pytest.fixture
def sample_admin():
    admin = Admin(2)
    admin.name = "Grace Hopper"
    admin.telephone = "0456"
    admin.email = "grace@centre.edu"
    admin.salary = 1800.5
    admin.employment_type = "Full-time"
    admin.working_hours = 37
    return admin


@pytest.fixture
def sample_student():
    student = Student(3)
    student.name = "Alan Turing"
    student.telephone = "0789"
    student.email = "alan@centre.edu"
    student.subject1 = "Logic"
    student.subject2 = "Physics"
    student.subject3 = "Chemistry"
    return student


@pytest.fixture
def populated_store(record_store):
    """
    A store holding, in order: Teacher (1), Student (2), Admin (3), Teacher (4).
    """
    for role, name in [
        ("Teacher", "Ada"),
        ("Student", "Alan"),
        ("Admin", "Grace"),
        ("Teacher", "Edsger"),
    ]:
        record = record_store.create_record(role).data["record"]
        record.name = name
        record_store.add_record(record)

    return record_store
