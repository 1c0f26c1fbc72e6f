# models/person.py

"""
Shared identity for every person record in the education centre.

A `Person` carries the fields common to all roles: a numeric id assigned by the
`RecordStore`, a name, a telephone number, an email address, and a fixed role.
The id and role are set once at construction and are read-only afterwards.

The concrete roles (`Teacher`, `Admin`, `Student`) build on this class and supply
their own `display()`, `edit_fields()`, and `populate_fields()` implementations.
Common rendering and editing live in the module-level helpers
`format_common_fields()` and `edit_common_fields()`, which every role calls
explicitly before handling its own fields.

All setters are corrective rather than rejecting: blank names become "Unknown",
missing contact details become empty strings.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Any

import core.formatters as formatters
from core.config import DETAILS_INDENT, UNKNOWN_NAME
from core.utils import InputProvider, is_blank, try_parse_float


class Role(str, Enum):
    TEACHER = "Teacher"
    ADMIN = "Admin"
    STUDENT = "Student"

    @classmethod
    def from_input(cls, role: Role | str | None) -> Role | None:
        """
        Resolves a role token case-insensitively.

        Returns:
            The matching `Role`, or None if the token is not a known role.
        """
        if isinstance(role, Role):
            return role

        if not isinstance(role, str):
            return None

        token = role.strip().lower()

        for member in cls:
            if member.value.lower() == token:
                return member

        return None


def list_roles() -> list[str]:
    return [role.value for role in Role]


class Person:

    def __init__(self, id: int, role: Role):
        self._id: int = id
        self._role: Role = role
        self._name: str = UNKNOWN_NAME
        self._telephone: str = ""
        self._email: str = ""

    # === properties ===

    @property
    def id(self) -> int:
        return self._id

    @property
    def role(self) -> str:
        return self._role.value

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, name: str | None) -> None:
        self._name = Person.validate_name_input(name)

    @property
    def telephone(self) -> str:
        return self._telephone

    @telephone.setter
    def telephone(self, telephone: str | None) -> None:
        self._telephone = Person.validate_text_input(telephone)

    @property
    def email(self) -> str:
        return self._email

    @email.setter
    def email(self, email: str | None) -> None:
        self._email = Person.validate_text_input(email)

    def is_role(self, role: Role | str) -> bool:
        return Role.from_input(role) is self._role

    # === dunder methods ===

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._id}, {self._name}, {self._telephone}, {self._email})"

    def __str__(self) -> str:
        return f"{self.role.upper()}: name: {self._name}, email: {self._email}, id: {self._id}"

    # === data validators ===

    @staticmethod
    def validate_name_input(name: str | None) -> str:
        return UNKNOWN_NAME if is_blank(name) else name.strip()

    @staticmethod
    def validate_text_input(text: str | None) -> str:
        return "" if text is None else text.strip()

    @staticmethod
    def validate_salary_input(salary: Any) -> float | None:
        """
        Normalizes a salary amount.

        Negative amounts are clamped to 0.0 rather than rejected.

        Args:
            salary (Any): The amount to normalize, as a number or numeric text.

        Returns:
            The salary as a non-negative float, or None if it is not a finite number.
            Setters keep the current salary when None is returned.
        """
        amount = try_parse_float(salary)

        if amount is None:
            return None

        return 0.0 if amount < 0 else amount


# === shared record helpers ===


def format_common_fields(person: Person) -> str:
    return formatters.format_table_row(
        person.id, person.role, person.name, person.telephone, person.email
    )


def format_details_line(details: str) -> str:
    return f"{DETAILS_INDENT}└──Details: {details}"


def prompt_keep_current(label: str, current: object) -> str:
    return f"Enter {label} (OR Leave blank and press Enter to keep as '{current}'): "


def edit_text_field(
    person: Person, attribute: str, label: str, read_line: InputProvider
) -> None:
    """
    Prompts for one text field and overwrites it only when the response is not blank.
    """
    response = read_line(prompt_keep_current(label, getattr(person, attribute)))

    if not is_blank(response):
        setattr(person, attribute, response)


def edit_parsed_field(
    person: Person,
    attribute: str,
    label: str,
    parse: Callable[[str | None], Any],
    read_line: InputProvider,
) -> None:
    """
    Prompts for one numeric field and overwrites it only when the response parses.
    """
    # blank input never parses, so it also keeps the current value
    value = parse(read_line(prompt_keep_current(label, getattr(person, attribute))))

    if value is not None:
        setattr(person, attribute, value)


def populate_parsed_field(
    person: Person,
    attribute: str,
    prompt: str,
    parse: Callable[[str | None], Any],
    read_line: InputProvider,
) -> None:
    value = parse(read_line(prompt))

    if value is not None:
        setattr(person, attribute, value)


def edit_salary_field(person: Person, read_line: InputProvider) -> None:
    edit_parsed_field(person, "salary", "new salary", try_parse_float, read_line)


def edit_common_fields(person: Person, read_line: InputProvider) -> None:
    """
    Prompts for the identity fields shared by every role, in order: name, telephone, email.

    Args:
        person (Person): The record being edited.
        read_line (InputProvider): Supplies one response per prompt.

    Notes:
        - A blank response keeps the current value of that field only.
        - Each role calls this before editing its own fields.
    """
    edit_text_field(person, "name", "new name", read_line)
    edit_text_field(person, "telephone", "new telephone", read_line)
    edit_text_field(person, "email", "new email", read_line)


def populate_common_fields(person: Person, read_line: InputProvider) -> None:
    """
    Collects the identity fields for a newly created record.

    Blank responses are stored through the normalizing setters, so a blank name
    becomes "Unknown" and blank contact details become empty strings.
    """
    role = person.role

    person.name = read_line(f"Enter {role}'s Name: ")
    person.telephone = read_line(f"Enter {role}'s Telephone No.: ")
    person.email = read_line(f"Enter {role}'s Email: ")
