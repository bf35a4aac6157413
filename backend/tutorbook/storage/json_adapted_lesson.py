"""JSON-friendly version of a Lesson.

This is the lesson conversion contract used by the student adapter: a raw
lesson snapshot either converts into a valid Lesson or raises an
IllegalValueError describing the first problem found.
"""

import re
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..core.constants import ConstraintMessages, ErrorMessages, FieldPatterns
from ..core.exceptions import InvalidFormatError, MissingFieldError
from ..domain.student import Lesson


def _require(raw: str | None, field: str) -> str:
    if raw is None:
        raise MissingFieldError(ErrorMessages.LESSON_MISSING_FIELD.format(field=field))
    return raw


def _parse(raw: str, pattern: str, format_str: str, message: str) -> datetime:
    if re.fullmatch(pattern, raw) is None:
        raise InvalidFormatError(message)
    try:
        return datetime.strptime(raw, format_str)
    except ValueError as e:
        raise InvalidFormatError(message) from e


class JsonAdaptedLesson(BaseModel):
    """Unvalidated snapshot of one lesson, as stored in the data file."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    date: str | None = None
    start_time: str | None = Field(default=None, alias="startTime")
    end_time: str | None = Field(default=None, alias="endTime")

    @classmethod
    def from_model(cls, source: Lesson) -> "JsonAdaptedLesson":
        """Convert a given Lesson into this class for JSON use."""
        return cls.model_validate(source.to_json_value())

    def to_json_value(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)

    def to_model_type(self) -> Lesson:
        """Convert this adapted lesson into the model's Lesson object.

        Fields are checked in order (date, startTime, endTime), presence
        before format, and the time ordering last.

        Raises:
            IllegalValueError: If any data constraint is violated
        """
        lesson_date = _parse(
            _require(self.date, "date"),
            FieldPatterns.LESSON_DATE,
            FieldPatterns.LESSON_DATE_FORMAT,
            ConstraintMessages.LESSON_DATE,
        ).date()
        start_time = _parse(
            _require(self.start_time, "startTime"),
            FieldPatterns.LESSON_TIME,
            FieldPatterns.LESSON_TIME_FORMAT,
            ConstraintMessages.LESSON_TIME,
        ).time()
        end_time = _parse(
            _require(self.end_time, "endTime"),
            FieldPatterns.LESSON_TIME,
            FieldPatterns.LESSON_TIME_FORMAT,
            ConstraintMessages.LESSON_TIME,
        ).time()

        if end_time <= start_time:
            raise InvalidFormatError(ConstraintMessages.LESSON_ORDER)

        return Lesson(date=lesson_date, start_time=start_time, end_time=end_time)
