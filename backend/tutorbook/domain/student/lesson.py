"""Lesson value object.

A lesson is one scheduled tutoring session for a student: a calendar date
and a start and end time on that date.
"""

import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator

from ...core.constants import ConstraintMessages, FieldPatterns


class Lesson(BaseModel):
    """A single tutoring session."""

    model_config = ConfigDict(frozen=True)

    date: datetime.date
    start_time: datetime.time
    end_time: datetime.time

    @model_validator(mode='after')
    def check_order(self):
        if self.end_time <= self.start_time:
            raise ValueError(ConstraintMessages.LESSON_ORDER)
        return self

    def to_json_value(self) -> dict[str, Any]:
        """Return the canonical snapshot of this lesson, as stored on disk."""
        return {
            "date": self.date.isoformat(),
            "startTime": self.start_time.strftime(FieldPatterns.LESSON_TIME_FORMAT),
            "endTime": self.end_time.strftime(FieldPatterns.LESSON_TIME_FORMAT),
        }

    def __str__(self) -> str:
        value = self.to_json_value()
        return f"{value['date']} {value['startTime']}-{value['endTime']}"
