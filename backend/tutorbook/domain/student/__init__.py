"""Student domain model.

Contains the Student entity, its scalar value objects and the Lesson
value object.
"""

from .lesson import Lesson
from .student import Student
from .value_objects import (
    Address,
    Email,
    FeeStatus,
    Name,
    Phone,
    Remark,
    Subject,
    ValueObject,
)

__all__ = [
    "Address",
    "Email",
    "FeeStatus",
    "Lesson",
    "Name",
    "Phone",
    "Remark",
    "Student",
    "Subject",
    "ValueObject",
]
