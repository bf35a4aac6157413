"""JSON-friendly version of a Student.

JsonAdaptedStudent is the unvalidated dual of Student: every scalar field is
an optional raw string and lessons are raw lesson snapshots. It can be built
from raw data read from the data file or by snapshotting a live Student, and
it is turned back into a Student only through to_model_type(), which
enforces every domain constraint.
"""

from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..core.logging import get_logger
from ..domain.student import Lesson, Student
from .field_rules import STUDENT_FIELD_RULES, apply_field_rules
from .json_adapted_lesson import JsonAdaptedLesson

logger = get_logger(__name__)


def convert_lessons(lessons: Iterable[JsonAdaptedLesson]) -> tuple[Lesson, ...]:
    """Convert raw lesson snapshots into lessons, preserving order.

    Conversion stops at the first invalid lesson and its violation is raised
    unchanged; no partial result is returned.
    """
    return tuple(lesson.to_model_type() for lesson in lessons)


class JsonAdaptedStudent(BaseModel):
    """Unvalidated snapshot of one student, as stored in the data file."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str | None = None
    phone: str | None = None
    email: str | None = None
    address: str | None = None
    subject: str | None = None
    remark: str | None = None
    fee_status: str | None = Field(default=None, alias="feeStatus")
    lessons: tuple[JsonAdaptedLesson, ...] = ()

    @field_validator('lessons', mode='before')
    @classmethod
    def default_lessons(cls, v):
        """A null lesson list is stored the same way as an empty one."""
        return () if v is None else v

    @classmethod
    def from_model(cls, source: Student) -> "JsonAdaptedStudent":
        """Convert a given Student into this class for JSON use."""
        return cls(
            name=source.name.value,
            phone=source.phone.value,
            email=source.email.value,
            address=source.address.value,
            subject=source.subject.value,
            remark=source.remark.value,
            fee_status=source.fee_status.value,
            lessons=tuple(JsonAdaptedLesson.from_model(lesson) for lesson in source.lessons),
        )

    def to_json_value(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)

    def to_model_type(self) -> Student:
        """Convert this adapted student into the model's Student object.

        Lessons are converted first, then the scalar fields in the order of
        STUDENT_FIELD_RULES. The first violation aborts the conversion.

        Raises:
            IllegalValueError: If any data constraint is violated
        """
        model_lessons = convert_lessons(self.lessons)

        raw_values = {rule.attribute: getattr(self, rule.attribute) for rule in STUDENT_FIELD_RULES}
        values = apply_field_rules(raw_values)

        logger.debug(
            "Student record converted",
            extra={'lessons': len(model_lessons)}
        )

        return Student(**values, lessons=model_lessons)
