"""Student value objects.

Each value object wraps one scalar attribute of a student. It exposes the
format predicate for that attribute (``is_valid``), the description of the
constraint (``MESSAGE_CONSTRAINTS``) and its canonical string form
(``str(obj)`` or ``obj.value``).

Usage:
    Name("Amy")            # Valid, creates instance
    Name("")               # Raises ValueError with Name.MESSAGE_CONSTRAINTS
    Name.is_valid("Amy")   # True
"""

import re
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, field_validator

from ...core.constants import ConstraintMessages, FeeStatusValues, FieldPatterns


class ValueObject(BaseModel):
    """Immutable wrapper around a single validated string."""

    model_config = ConfigDict(frozen=True)

    MESSAGE_CONSTRAINTS: ClassVar[str] = ""
    PATTERN: ClassVar[str | None] = None

    value: str

    def __init__(self, value: Any, **data: Any):
        super().__init__(value=value, **data)

    @classmethod
    def is_valid(cls, test: Any) -> bool:
        """Return True if the given value satisfies this type's format."""
        if not isinstance(test, str):
            return False
        if cls.PATTERN is None:
            return True
        return re.fullmatch(cls.PATTERN, test) is not None

    @field_validator('value', mode='after')
    @classmethod
    def check_format(cls, v):
        if not cls.is_valid(v):
            raise ValueError(cls.MESSAGE_CONSTRAINTS)
        return v

    def __str__(self) -> str:
        return self.value


class Name(ValueObject):
    """Student's name."""
    MESSAGE_CONSTRAINTS: ClassVar[str] = ConstraintMessages.NAME
    PATTERN: ClassVar[str | None] = FieldPatterns.NAME


class Phone(ValueObject):
    """Student's phone number."""
    MESSAGE_CONSTRAINTS: ClassVar[str] = ConstraintMessages.PHONE
    PATTERN: ClassVar[str | None] = FieldPatterns.PHONE


class Email(ValueObject):
    """Student's email address."""
    MESSAGE_CONSTRAINTS: ClassVar[str] = ConstraintMessages.EMAIL
    PATTERN: ClassVar[str | None] = FieldPatterns.EMAIL


class Address(ValueObject):
    """Student's home address."""
    MESSAGE_CONSTRAINTS: ClassVar[str] = ConstraintMessages.ADDRESS
    PATTERN: ClassVar[str | None] = FieldPatterns.ADDRESS


class Subject(ValueObject):
    """Subject the student is tutored in. Free-form text."""
    MESSAGE_CONSTRAINTS: ClassVar[str] = ConstraintMessages.SUBJECT


class Remark(ValueObject):
    """Tutor's remark about the student. May be empty or absent."""
    MESSAGE_CONSTRAINTS: ClassVar[str] = ConstraintMessages.REMARK

    value: str | None = None

    @classmethod
    def is_valid(cls, test: Any) -> bool:
        return test is None or isinstance(test, str)

    def __str__(self) -> str:
        return self.value or ""


class FeeStatus(ValueObject):
    """Whether the student's fees for the current term are paid."""
    MESSAGE_CONSTRAINTS: ClassVar[str] = ConstraintMessages.FEE_STATUS

    @classmethod
    def is_valid(cls, test: Any) -> bool:
        return test in FeeStatusValues.ALL_STATUSES

    @property
    def is_paid(self) -> bool:
        return self.value == FeeStatusValues.PAID
