"""Declarative validation rules for the scalar fields of a stored student.

Each FieldRule states whether the raw value must be present and which format
predicate, if any, it must satisfy before its value object is built. The
rules are applied in table order and the first violation aborts the
conversion.

The table deliberately mirrors the stored data's historical behaviour:
- name, phone, email and address are checked for presence and format
- subject is checked for presence only
- fee status is checked for presence; FeeStatus enforces its own format
- remark is neither required nor format checked, so null is kept as-is
"""

from collections.abc import Callable, Iterable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict

from ..core.constants import ErrorMessages
from ..core.exceptions import InvalidFormatError, MissingFieldError
from ..domain.student import (
    Address,
    Email,
    FeeStatus,
    Name,
    Phone,
    Remark,
    Subject,
    ValueObject,
)


def _require_present(raw: str | None, field_name: str) -> str:
    """Presence check, kept separate from format checking."""
    if raw is None:
        raise MissingFieldError(ErrorMessages.STUDENT_MISSING_FIELD.format(field=field_name))
    return raw


class FieldRule(BaseModel):
    """Validation metadata for one scalar student field."""

    model_config = ConfigDict(frozen=True)

    attribute: str
    value_type: type[ValueObject]
    required: bool = True
    predicate: Callable[[Any], bool] | None = None

    @property
    def field_name(self) -> str:
        """Name used in missing field messages, e.g. 'Name'."""
        return self.value_type.__name__

    @property
    def constraint_message(self) -> str:
        return self.value_type.MESSAGE_CONSTRAINTS

    def apply(self, raw: str | None) -> ValueObject:
        """Validate one raw value and build its value object.

        Raises:
            MissingFieldError: If the field is required and absent
            InvalidFormatError: If the field fails its format predicate
        """
        if self.required:
            raw = _require_present(raw, self.field_name)
        if self.predicate is not None and not self.predicate(raw):
            raise InvalidFormatError(self.constraint_message)
        return self.value_type(raw)


STUDENT_FIELD_RULES: tuple[FieldRule, ...] = (
    FieldRule(attribute="name", value_type=Name, predicate=Name.is_valid),
    FieldRule(attribute="phone", value_type=Phone, predicate=Phone.is_valid),
    FieldRule(attribute="email", value_type=Email, predicate=Email.is_valid),
    FieldRule(attribute="address", value_type=Address, predicate=Address.is_valid),
    FieldRule(attribute="subject", value_type=Subject),
    FieldRule(attribute="fee_status", value_type=FeeStatus),
    FieldRule(attribute="remark", value_type=Remark, required=False),
)


def apply_field_rules(
    raw_values: Mapping[str, str | None],
    rules: Iterable[FieldRule] = STUDENT_FIELD_RULES
) -> dict[str, ValueObject]:
    """Apply rules in order, stopping at the first violation.

    Args:
        raw_values: Raw string per attribute name (missing keys count as absent)
        rules: Ordered field rules

    Returns:
        Value object per attribute name
    """
    values: dict[str, ValueObject] = {}
    for rule in rules:
        values[rule.attribute] = rule.apply(raw_values.get(rule.attribute))
    return values
