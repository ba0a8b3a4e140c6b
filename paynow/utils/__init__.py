"""
Utils Package
Codec, hashing, validation and logging helpers
"""

from paynow.utils.logger import get_logger
from paynow.utils.validators import (
    validate_phone_number,
    validate_amount,
    validate_email
)

__all__ = [
    'get_logger',
    'validate_phone_number',
    'validate_amount',
    'validate_email'
]
