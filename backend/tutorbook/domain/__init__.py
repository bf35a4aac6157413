"""Domain layer.

Contains pure business logic without external dependencies:
- student: Student entity and its value objects
- tutor_book: The in-memory collection of students
"""

from .student import Student
from .tutor_book import TutorBook

__all__ = [
    "Student",
    "TutorBook",
]
