"""Utility functions organized by domain.

All functions are re-exported here. Prefer importing from specific modules
for better clarity:
    from tutorbook.utils.strings import mask_value
    from tutorbook.utils.generators import generate_operation_id
"""

# Generators
from .generators import generate_operation_id

# Strings
from .strings import mask_value, sanitize_log_data

__all__ = [
    # Generators
    "generate_operation_id",
    # Strings
    "mask_value",
    "sanitize_log_data",
]
