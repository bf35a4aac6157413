"""ID generation utilities."""

import uuid


def generate_operation_id(prefix: str | None = None) -> str:
    """Generate a unique operation ID.

    Args:
        prefix: Optional prefix for the operation ID (e.g., "load", "save")

    Returns:
        Operation ID string (UUID)

    Examples:
        >>> generate_operation_id()
        "a1b2c3d4-e5f6-7890-abcd-ef1234567890"
        >>> generate_operation_id("load")
        "load-a1b2c3d4-e5f6-7890-abcd-ef1234567890"
    """
    operation_id = str(uuid.uuid4())
    if prefix:
        return f"{prefix}-{operation_id}"
    return operation_id
