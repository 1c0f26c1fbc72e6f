# models/types.py

"""
Holds the closed set of person record types and their role lookup.
"""

from typing import Union

from .admin import Admin
from .person import Role
from .student import Student
from .teacher import Teacher

PersonType = Union[Teacher, Admin, Student]

RECORD_CLASSES: dict[Role, type[PersonType]] = {
    Role.TEACHER: Teacher,
    Role.ADMIN: Admin,
    Role.STUDENT: Student,
}
