"""JSON-friendly version of the whole TutorBook, i.e. the data file root."""

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from ..core.constants import ErrorMessages
from ..core.exceptions import IllegalValueError
from ..core.logging import get_logger
from ..domain import TutorBook
from ..utils import sanitize_log_data
from .json_adapted_student import JsonAdaptedStudent

logger = get_logger(__name__)


class JsonSerializableTutorBook(BaseModel):
    """Root object of the data file: ``{"students": [...]}``."""

    model_config = ConfigDict(frozen=True)

    students: tuple[JsonAdaptedStudent, ...] = ()

    @field_validator('students', mode='before')
    @classmethod
    def default_students(cls, v):
        return () if v is None else v

    @classmethod
    def from_model(cls, source: TutorBook) -> "JsonSerializableTutorBook":
        """Convert a given TutorBook into this class for JSON use."""
        return cls(students=tuple(JsonAdaptedStudent.from_model(student) for student in source))

    def to_json_value(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)

    def to_model_type(self) -> TutorBook:
        """Convert the stored students into a TutorBook.

        Raises:
            IllegalValueError: If a student is invalid or two students share a name
        """
        tutor_book = TutorBook()

        for index, adapted in enumerate(self.students):
            try:
                student = adapted.to_model_type()
            except ValueError as e:
                logger.warning(
                    "Student record rejected",
                    extra={
                        'index': index,
                        'error': str(e),
                        'error_type': type(e).__name__,
                        'record': sanitize_log_data(adapted.to_json_value()),
                    }
                )
                raise

            if tutor_book.has_student(student):
                raise IllegalValueError(ErrorMessages.DUPLICATE_STUDENT)
            tutor_book.add_student(student)

        return tutor_book
