"""TutorBook collection.

Holds the ordered list of students owned by the application once they have
been loaded from (or before they are saved to) the data file.
"""

from collections.abc import Iterable, Iterator

from ..core.constants import ErrorMessages
from ..core.exceptions import DuplicateStudentError, StudentNotFoundError
from .student import Student


class TutorBook:
    """Ordered collection of students with no two students sharing a name.

    Usage:
        book = TutorBook()
        book.add_student(student)
        book.has_student(student)  # True
    """

    def __init__(self, students: Iterable[Student] | None = None):
        self._students: list[Student] = []
        if students is not None:
            self.set_students(students)

    @property
    def students(self) -> tuple[Student, ...]:
        """Read-only view of the students, in insertion order."""
        return tuple(self._students)

    def has_student(self, student: Student) -> bool:
        """Check if a student with the same identity is already present."""
        return any(existing.is_same_student(student) for existing in self._students)

    def add_student(self, student: Student) -> None:
        """Append a student.

        Raises:
            DuplicateStudentError: If a student with the same name exists
        """
        if self.has_student(student):
            raise DuplicateStudentError(
                ErrorMessages.STUDENT_ALREADY_EXISTS.format(name=student.name)
            )
        self._students.append(student)

    def remove_student(self, student: Student) -> None:
        """Remove a student equal to the given one.

        Raises:
            StudentNotFoundError: If the student is not present
        """
        try:
            self._students.remove(student)
        except ValueError as e:
            raise StudentNotFoundError(
                ErrorMessages.STUDENT_NOT_FOUND.format(name=student.name)
            ) from e

    def set_students(self, students: Iterable[Student]) -> None:
        """Replace the contents with the given students.

        The replacement is all-or-nothing: if the new list contains
        duplicates, the current contents are left untouched.

        Raises:
            DuplicateStudentError: If the given students contain duplicates
        """
        replacement = TutorBook()
        for student in students:
            replacement.add_student(student)
        self._students = replacement._students

    def __iter__(self) -> Iterator[Student]:
        return iter(self.students)

    def __len__(self) -> int:
        return len(self._students)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TutorBook):
            return NotImplemented
        return self._students == other._students

    def __repr__(self) -> str:
        return f"<TutorBook(students={len(self._students)})>"
