# models/student.py

"""
Represents a student enrolled at the education centre.

Adds three enrolled subjects to the shared `Person` identity fields. Subjects are
normalized the same way as a teacher's: trimmed, with missing values stored as
empty strings.
"""

from __future__ import annotations

import core.formatters as formatters
from core.utils import InputProvider
from models.person import (
    Person,
    Role,
    edit_common_fields,
    edit_text_field,
    format_common_fields,
    format_details_line,
    populate_common_fields,
)


class Student(Person):

    def __init__(self, id: int):
        super().__init__(id, Role.STUDENT)
        self._subject1: str = ""
        self._subject2: str = ""
        self._subject3: str = ""

    # === properties ===

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
    def subject3(self) -> str:
        return self._subject3

    @subject3.setter
    def subject3(self, subject: str | None) -> None:
        self._subject3 = Person.validate_text_input(subject)

    @property
    def subjects(self) -> list[str]:
        return [self._subject1, self._subject2, self._subject3]

    # === record behavior ===

    def display(self) -> str:
        details = f"Subjects: {formatters.format_list_with_commas(self.subjects)}"

        return f"{format_common_fields(self)}\n{format_details_line(details)}"

    def populate_fields(self, read_line: InputProvider) -> None:
        populate_common_fields(self, read_line)
        self.subject1 = read_line("Enter Subject 1: ")
        self.subject2 = read_line("Enter Subject 2: ")
        self.subject3 = read_line("Enter Subject 3: ")

    def edit_fields(self, read_line: InputProvider) -> None:
        edit_common_fields(self, read_line)
        edit_text_field(self, "subject1", "subject 1", read_line)
        edit_text_field(self, "subject2", "subject 2", read_line)
        edit_text_field(self, "subject3", "subject 3", read_line)
