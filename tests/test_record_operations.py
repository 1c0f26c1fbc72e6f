# tests/test_record_operations.py

import pytest

from core.response import ErrorCode
from models.admin import Admin
from models.student import Student
from models.teacher import Teacher
from services import record_operations


# === add ===


def test_add_teacher_end_to_end(record_store, scripted_input):
    read_line = scripted_input("1", "Ada", "123", "a@x.com", "-10", "Math", "CS")

    response = record_operations.add_record(record_store, read_line)

    assert response.success
    assert response.detail == "Record added successfully! Assigned ID: 1"

    teacher = record_store.find_record_by_id(1).data["record"]
    assert isinstance(teacher, Teacher)
    assert teacher.name == "Ada"
    assert teacher.salary == 0
    assert "Ada" in teacher.display()
    assert "Unknown" not in teacher.display()
    assert "$0.00" in teacher.display()


def test_add_student_with_blank_fields(record_store, scripted_input):
    read_line = scripted_input("3", "", " ", "", "Art", "Music", "Drama")

    response = record_operations.add_record(record_store, read_line)

    student = response.data["record"]
    assert isinstance(student, Student)
    assert student.name == "Unknown"
    assert student.telephone == ""
    assert student.email == ""


def test_add_admin(record_store, scripted_input):
    read_line = scripted_input(
        "2", "Grace", "0456", "grace@centre.edu", "1500", "Full-time", "37"
    )

    response = record_operations.add_record(record_store, read_line)

    admin = response.data["record"]
    assert isinstance(admin, Admin)
    assert admin.working_hours == 37
    assert read_line.prompts[0].startswith("Select User Group:\n1. Teacher")


@pytest.mark.parametrize("choice", ["4", "0", "Teacher", "", None])
def test_add_with_invalid_role_choice(record_store, scripted_input, choice):
    read_line = scripted_input(choice, "Ada")

    response = record_operations.add_record(record_store, read_line)

    assert not response.success
    assert response.error is ErrorCode.INVALID_ROLE
    assert response.detail.startswith("Invalid role selected.")
    assert record_store.count == 0
    assert len(read_line.prompts) == 1
    assert record_store.create_record("Admin").data["record"].id == 1


def test_add_assigns_ids_across_roles(record_store, scripted_input):
    for choice in ["3", "1", "2"]:
        record_operations.add_record(record_store, scripted_input(choice))

    assert [(r.id, r.role) for r in record_store.records] == [
        (1, "Student"),
        (2, "Teacher"),
        (3, "Admin"),
    ]


# === view ===


def test_view_all_with_empty_store(record_store):
    response = record_operations.view_all_records(record_store)

    assert not response.success
    assert response.error is ErrorCode.NO_RECORDS
    assert response.detail == "No records found."
    assert record_store.count == 0


def test_view_all_lists_records_in_order(populated_store):
    response = record_operations.view_all_records(populated_store)

    assert response.success
    listing = response.data["listing"]
    assert listing[0] == "All Records:"
    assert listing[2].startswith("ID    | Role       | Name")

    rows = [line for line in listing if line[:1].isdigit()]
    assert [row.split("|")[2].strip() for row in rows] == [
        "Ada",
        "Alan",
        "Grace",
        "Edsger",
    ]


def test_view_by_role(populated_store, scripted_input):
    response = record_operations.view_records_by_role(
        populated_store, scripted_input(" teacher ")
    )

    assert response.success
    assert [r.id for r in response.data["records"]] == [1, 4]
    assert response.listing[0] == "Records for teacher:"


@pytest.mark.parametrize("role", ["Janitor", "", None])
def test_view_by_invalid_role(populated_store, scripted_input, role):
    response = record_operations.view_records_by_role(
        populated_store, scripted_input(role)
    )

    assert not response.success
    assert response.error is ErrorCode.INVALID_ROLE
    assert response.listing == []


def test_view_by_role_with_no_matches(record_store, scripted_input):
    response = record_operations.view_records_by_role(
        record_store, scripted_input("Admin")
    )

    assert not response.success
    assert response.error is ErrorCode.NO_RECORDS
    assert response.detail == "No records found for role: Admin"


# === edit ===


def test_edit_record(populated_store, scripted_input):
    read_line = scripted_input("2", "Alan Turing", "", "alan@centre.edu", "Logic")

    response = record_operations.edit_record(populated_store, read_line)

    assert response.success
    assert response.detail == "Record updated successfully."

    student = populated_store.find_record_by_id(2).data["record"]
    assert student.name == "Alan Turing"
    assert student.email == "alan@centre.edu"
    assert student.subject1 == "Logic"


def test_edit_with_all_blank_responses_changes_nothing(populated_store, scripted_input):
    teacher = populated_store.find_record_by_id(1).data["record"]
    teacher.salary = 1200
    before = vars(teacher).copy()

    response = record_operations.edit_record(
        populated_store, scripted_input("1", "", "", "", "", "", "")
    )

    assert response.success
    assert vars(teacher) == before


@pytest.mark.parametrize("record_id", ["one", "0_1", "1_0", "1.0"])
def test_edit_with_invalid_id(populated_store, scripted_input, record_id):
    response = record_operations.edit_record(populated_store, scripted_input(record_id))

    assert not response.success
    assert response.error is ErrorCode.INVALID_ID
    assert response.detail == "Invalid ID."


def test_edit_with_unknown_id(populated_store, scripted_input):
    response = record_operations.edit_record(populated_store, scripted_input("42"))

    assert not response.success
    assert response.error is ErrorCode.NOT_FOUND
    assert response.detail == "Record not found."


# === delete ===


def test_delete_confirmed(populated_store, scripted_input):
    read_line = scripted_input("3", "1")

    response = record_operations.delete_record(populated_store, read_line)

    assert response.success
    assert response.detail == "Record deleted successfully."
    assert populated_store.count == 3
    assert not populated_store.find_record_by_id(3).success
    assert "Grace" in read_line.prompts[1]


def test_delete_cancelled(populated_store, scripted_input):
    response = record_operations.delete_record(populated_store, scripted_input("3", "2"))

    assert not response.success
    assert response.error is ErrorCode.CANCELLED
    assert response.detail == "Operation cancelled. Record not deleted."
    assert populated_store.count == 4


@pytest.mark.parametrize("choice", ["yes", "3", "", None])
def test_delete_with_invalid_confirmation(populated_store, scripted_input, choice):
    response = record_operations.delete_record(
        populated_store, scripted_input("3", choice)
    )

    assert not response.success
    assert response.error is ErrorCode.INVALID_CHOICE
    assert response.detail == "Invalid choice. Operation aborted."
    assert populated_store.count == 4


@pytest.mark.parametrize("record_id", ["x", "0_3"])
def test_delete_with_invalid_id(populated_store, scripted_input, record_id):
    response = record_operations.delete_record(populated_store, scripted_input(record_id))

    assert response.error is ErrorCode.INVALID_ID
    assert populated_store.count == 4


def test_delete_with_unknown_id(populated_store, scripted_input):
    read_line = scripted_input("17", "1")

    response = record_operations.delete_record(populated_store, read_line)

    assert response.error is ErrorCode.NOT_FOUND
    assert response.detail == "Record with ID 17 not found."
    assert len(read_line.prompts) == 1
    assert populated_store.count == 4


# === unexpected failures ===


def test_view_all_reports_render_errors(populated_store, monkeypatch):
    def broken_display():
        raise RuntimeError("cannot render")

    record = populated_store.find_record_by_id(2).data["record"]
    monkeypatch.setattr(record, "display", broken_display)

    response = record_operations.view_all_records(populated_store)

    assert not response.success
    assert response.error is ErrorCode.INTERNAL_ERROR
    assert "cannot render" in response.detail


def test_delete_reports_confirmation_errors(populated_store):
    answers = iter(["2"])

    def read_line(prompt):
        if prompt.startswith("Record found:"):
            raise OSError("terminal closed")
        return next(answers)

    response = record_operations.delete_record(populated_store, read_line)

    assert not response.success
    assert response.error is ErrorCode.INTERNAL_ERROR
    assert populated_store.count == 4
