# models/teacher.py

"""
Represents a member of teaching staff.

Adds a salary and two taught subjects to the shared `Person` identity fields.
The salary is never negative: negative input is clamped to 0.0, and input that
is not a finite number leaves the salary unchanged. Subjects are trimmed, and
missing subjects are stored as empty strings.
"""

from __future__ import annotations

import core.formatters as formatters
from core.utils import InputProvider, try_parse_float
from models.person import (
    Person,
    Role,
    edit_common_fields,
    edit_salary_field,
    edit_text_field,
    format_common_fields,
    format_details_line,
    populate_common_fields,
    populate_parsed_field,
)


class Teacher(Person):

    def __init__(self, id: int):
        super().__init__(id, Role.TEACHER)
        self._salary: float = 0.0
        self._subject1: str = ""
        self._subject2: str = ""

    # === properties ===

    @property
    def salary(self) -> float:
        return self._salary

    @salary.setter
    def salary(self, salary: float | str) -> None:
        amount = Person.validate_salary_input(salary)

        if amount is not None:
            self._salary = amount

    @property
    def subject1(self) -> str:
        return self._subject1

    @subject1.setter
    def subject1(self, subject: str | None) -> None:
        self._subject1 = Person.validate_text_input(subject)

    @property
    def subject2(self) -> str:
        return self._subject2

    @subject2.setter
    def subject2(self, subject: str | None) -> None:
        self._subject2 = Person.validate_text_input(subject)

    @property
    def subjects(self) -> list[str]:
        return [self._subject1, self._subject2]

    # === record behavior ===

    def display(self) -> str:
        details = (
            f"Salary: {formatters.format_salary(self._salary)}"
            f" | Subjects: {formatters.format_list_with_commas(self.subjects)}"
        )

        return f"{format_common_fields(self)}\n{format_details_line(details)}"

    def populate_fields(self, read_line: InputProvider) -> None:
        populate_common_fields(self, read_line)
        populate_parsed_field(self, "salary", "Enter Salary: ", try_parse_float, read_line)
        self.subject1 = read_line("Enter Subject 1: ")
        self.subject2 = read_line("Enter Subject 2: ")

    def edit_fields(self, read_line: InputProvider) -> None:
        edit_common_fields(self, read_line)
        edit_salary_field(self, read_line)
        edit_text_field(self, "subject1", "subject 1", read_line)
        edit_text_field(self, "subject2", "subject 2", read_line)
