# models/admin.py

"""
Represents a member of administrative staff.

Adds a salary, an employment type (e.g. Full-time, Part-time), and weekly working
hours to the shared `Person` identity fields. Salary follows the same
non-negative rule as `Teacher`. Working hours are whole numbers and are only
updated from whole-number input: 7.9 or "abc" leaves the current hours in place.
"""

from __future__ import annotations

import core.formatters as formatters
from core.utils import InputProvider, try_parse_float, try_parse_int
from models.person import (
    Person,
    Role,
    edit_common_fields,
    edit_parsed_field,
    edit_salary_field,
    edit_text_field,
    format_common_fields,
    format_details_line,
    populate_common_fields,
    populate_parsed_field,
)


class Admin(Person):

    def __init__(self, id: int):
        super().__init__(id, Role.ADMIN)
        self._salary: float = 0.0
        self._employment_type: str = ""
        self._working_hours: int = 0

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
    def employment_type(self) -> str:
        return self._employment_type

    @employment_type.setter
    def employment_type(self, employment_type: str | None) -> None:
        self._employment_type = Person.validate_text_input(employment_type)

    @property
    def working_hours(self) -> int:
        return self._working_hours

    @working_hours.setter
    def working_hours(self, working_hours: int | str) -> None:
        hours = try_parse_int(working_hours)

        if hours is not None:
            self._working_hours = hours

    # === record behavior ===

    def display(self) -> str:
        details = (
            f"Salary: {formatters.format_salary(self._salary)}"
            f" | Type: {self._employment_type}"
            f" | Hours: {self._working_hours}"
        )

        return f"{format_common_fields(self)}\n{format_details_line(details)}"

    def populate_fields(self, read_line: InputProvider) -> None:
        populate_common_fields(self, read_line)
        populate_parsed_field(self, "salary", "Enter Salary: ", try_parse_float, read_line)
        self.employment_type = read_line("Employment type (Full-time/Part-time): ")
        populate_parsed_field(
            self, "working_hours", "Working Hours: ", try_parse_int, read_line
        )

    def edit_fields(self, read_line: InputProvider) -> None:
        edit_common_fields(self, read_line)
        edit_salary_field(self, read_line)
        edit_text_field(self, "employment_type", "employment type", read_line)
        edit_parsed_field(
            self, "working_hours", "working hours", try_parse_int, read_line
        )
