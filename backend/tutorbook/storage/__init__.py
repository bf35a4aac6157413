"""Storage Layer.

Converts between the JSON data file and the domain model. The adapters
(JsonAdapted*) hold unvalidated snapshots; their to_model_type() methods are
the only way back to validated domain objects.
"""

from .base import TutorBookStorage
from .field_rules import STUDENT_FIELD_RULES, FieldRule, apply_field_rules
from .json_adapted_lesson import JsonAdaptedLesson
from .json_adapted_student import JsonAdaptedStudent, convert_lessons
from .json_serializable_tutor_book import JsonSerializableTutorBook
from .json_tutor_book_storage import JsonTutorBookStorage

__all__ = [
    "FieldRule",
    "JsonAdaptedLesson",
    "JsonAdaptedStudent",
    "JsonSerializableTutorBook",
    "JsonTutorBookStorage",
    "STUDENT_FIELD_RULES",
    "TutorBookStorage",
    "apply_field_rules",
    "convert_lessons",
]
