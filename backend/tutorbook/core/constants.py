"""Application Constants.

Centralized constants used throughout the application.
This file contains all hardcoded values that should be maintained in one place.
"""

# ============================================================================
# FEE STATUS CONSTANTS
# ============================================================================

class FeeStatusValues:
    """Fee status values."""
    PAID = "PAID"
    UNPAID = "UNPAID"

    # List of all statuses
    ALL_STATUSES = [
        PAID,
        UNPAID,
    ]


# ============================================================================
# FIELD FORMAT CONSTANTS
# ============================================================================

class FieldPatterns:
    """Regular expressions for student and lesson field formats."""
    NAME = r"^[A-Za-z0-9][A-Za-z0-9 ]*$"
    PHONE = r"^[0-9]{3,}$"
    ADDRESS = r"^[^\s].*$"

    # Email is split into local-part and domain for readable error messages
    EMAIL_SPECIAL_CHARACTERS = "+_.-"
    EMAIL_LOCAL_PART = r"[A-Za-z0-9]+(?:[+_.\-][A-Za-z0-9]+)*"
    EMAIL_DOMAIN_LABEL = r"[A-Za-z0-9]+(?:-[A-Za-z0-9]+)*"
    EMAIL_DOMAIN_LAST_LABEL = r"[A-Za-z0-9](?:-?[A-Za-z0-9])+"
    EMAIL = (
        rf"^{EMAIL_LOCAL_PART}@(?:{EMAIL_DOMAIN_LABEL}\.)*{EMAIL_DOMAIN_LAST_LABEL}$"
    )

    LESSON_DATE_FORMAT = "%Y-%m-%d"
    LESSON_TIME_FORMAT = "%H:%M"
    LESSON_DATE = r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$"
    LESSON_TIME = r"^[0-9]{2}:[0-9]{2}$"


# ============================================================================
# ERROR MESSAGES
# ============================================================================

class ErrorMessages:
    """Standard error messages."""
    STUDENT_MISSING_FIELD = "Student's {field} field is missing!"
    LESSON_MISSING_FIELD = "Lesson's {field} field is missing!"
    DUPLICATE_STUDENT = "Students list contains duplicate student(s)."
    STUDENT_ALREADY_EXISTS = "Student '{name}' already exists in the tutor book"
    STUDENT_NOT_FOUND = "Student '{name}' is not in the tutor book"
    DATA_FILE_UNREADABLE = "Data file '{path}' could not be read: {error}"
    DATA_FILE_MALFORMED = "Data file '{path}' is not in the correct format: {error}"


class ConstraintMessages:
    """Format constraint descriptions, one per value type."""
    NAME = (
        "Names should only contain alphanumeric characters and spaces, "
        "and it should not be blank"
    )
    PHONE = (
        "Phone numbers should only contain numbers, "
        "and it should be at least 3 digits long"
    )
    EMAIL = (
        "Emails should be of the format local-part@domain "
        "and adhere to the following constraints:\n"
        "1. The local-part should only contain alphanumeric characters and these "
        f"special characters, excluding the parentheses, ({FieldPatterns.EMAIL_SPECIAL_CHARACTERS}). "
        "The local-part may not start or end with any special characters.\n"
        "2. This is followed by a '@' and then a domain name. The domain name is made up "
        "of domain labels separated by periods.\n"
        "The domain name must:\n"
        "    - end with a domain label at least 2 characters long\n"
        "    - have each domain label start and end with alphanumeric characters\n"
        "    - have each domain label consist of alphanumeric characters, "
        "separated only by hyphens, if any."
    )
    ADDRESS = "Addresses can take any values, and it should not be blank"
    SUBJECT = "Subjects can take any values"
    REMARK = "Remarks can take any values, including none"
    FEE_STATUS = (
        f"Fee status should be either {FeeStatusValues.PAID} or {FeeStatusValues.UNPAID}"
    )
    LESSON_DATE = "Lesson dates should be in the format YYYY-MM-DD"
    LESSON_TIME = "Lesson times should be in the 24-hour format HH:MM"
    LESSON_ORDER = "Lesson end time must be after its start time"


# ============================================================================
# LOGGING
# ============================================================================

class Logging:
    """Logging related constants."""
    OPERATION_ID_PREFIX_LOAD = "load"
    OPERATION_ID_PREFIX_SAVE = "save"
    DEFAULT_OPERATION_ID = "no-operation-id"
    VALID_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


# ============================================================================
# SECURITY CONSTANTS
# ============================================================================

class Security:
    """PII masking constants."""
    MASK_CHAR = "*"
    VISIBLE_CHARS = 4  # Show last 4 characters
    MASK_FULL = "****"  # When value is too short
    PII_FIELDS = ["phone", "email", "address"]
