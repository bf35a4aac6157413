"""String manipulation utilities."""

from typing import Any

from ..core.constants import Security


def mask_value(value: str | None, visible_chars: int | None = None) -> str:
    """Mask a personal value for logging (PII protection).

    Shows only the last N characters, masking the rest with asterisks.

    Args:
        value: The string to mask
        visible_chars: Number of characters to show at the end (default from Security constants)

    Returns:
        Masked string

    Examples:
        >>> mask_value("98765432")
        "****5432"
        >>> mask_value("123")
        "****"
    """
    if not value:
        return Security.MASK_FULL

    visible = visible_chars or Security.VISIBLE_CHARS

    if len(value) <= visible:
        return Security.MASK_FULL

    masked_length = len(value) - visible
    return Security.MASK_CHAR * masked_length + value[-visible:]


def sanitize_log_data(data: dict[str, Any]) -> dict[str, Any]:
    """Sanitize log data by masking PII (Personally Identifiable Information).

    Phone, email and address values are masked with mask_value(). Nested
    dictionaries and lists of dictionaries are sanitized recursively.

    Args:
        data: Dictionary containing log data that may include PII

    Returns:
        Dictionary with PII fields masked

    Examples:
        >>> sanitize_log_data({'name': 'Amy', 'phone': '98765432'})
        {'name': 'Amy', 'phone': '****5432'}
    """
    if not data or not isinstance(data, dict):
        return data

    sanitized = data.copy()

    for key in Security.PII_FIELDS:
        if key in sanitized and sanitized[key] is not None:
            sanitized[key] = mask_value(str(sanitized[key]))

    for key, value in sanitized.items():
        if isinstance(value, dict):
            sanitized[key] = sanitize_log_data(value)
        elif isinstance(value, list):
            sanitized[key] = [
                sanitize_log_data(item) if isinstance(item, dict) else item
                for item in value
            ]

    return sanitized
