"""Custom Exceptions for Student Data Handling.

This module defines the exception classes raised while converting between
the JSON data file and the in-memory student list.

Conversion errors are raised by the storage adapters when stored data
violates a domain constraint:
- A required field is missing
- A field does not match its format
- A nested lesson is invalid

Loading errors are raised by the file storage when the data file cannot be
turned into a tutor book at all. They wrap the conversion error (or the I/O
or JSON error) that caused them.
"""


class TutorBookError(Exception):
    """Base exception for all TutorBook errors."""
    pass


class DataConversionError(TutorBookError):
    """Error raised while converting stored data into domain objects."""
    pass


class IllegalValueError(DataConversionError, ValueError):
    """Stored data violates a domain constraint.

    This is the single error kind surfaced by the adapters. The message
    describes the violation and is suitable for showing to the user.
    """
    pass


class MissingFieldError(IllegalValueError):
    """A required field is absent from the stored record."""
    pass


class InvalidFormatError(IllegalValueError):
    """A present field does not satisfy its format constraint."""
    pass


class DataLoadingError(TutorBookError):
    """The data file could not be loaded into a tutor book."""
    pass


class DuplicateStudentError(TutorBookError):
    """Adding a student that is already in the tutor book."""
    pass


class StudentNotFoundError(TutorBookError):
    """Removing a student that is not in the tutor book."""
    pass
