"""Student entity."""

from pydantic import BaseModel, ConfigDict

from .lesson import Lesson
from .value_objects import Address, Email, FeeStatus, Name, Phone, Remark, Subject


class Student(BaseModel):
    """A student in the tutor book.

    Every field is a validated value object, so a constructed Student always
    satisfies the format constraints of its attributes. Students are
    immutable and compare by value.
    """

    model_config = ConfigDict(frozen=True)

    name: Name
    phone: Phone
    email: Email
    address: Address
    subject: Subject
    remark: Remark
    fee_status: FeeStatus
    lessons: tuple[Lesson, ...] = ()

    def is_same_student(self, other: "Student | None") -> bool:
        """Return True if both students have the same name.

        This is a weaker notion of equality than ``==`` and is used to
        detect duplicate entries in the tutor book.
        """
        if other is self:
            return True
        return other is not None and other.name == self.name

    def __str__(self) -> str:
        return (
            f"{self.name}; Phone: {self.phone}; Email: {self.email}; "
            f"Address: {self.address}; Subject: {self.subject}; "
            f"Remark: {self.remark}; Fee status: {self.fee_status}; "
            f"Lessons: {', '.join(str(lesson) for lesson in self.lessons)}"
        )
