"""
Custom Validators
Validation functions for the fields Paynow checks on its side
"""

import re
from decimal import Decimal, InvalidOperation
from typing import Optional


def validate_phone_number(phone: str) -> tuple[bool, Optional[str]]:
    """
    Validate a mobile money phone number

    Args:
        phone: Phone number to validate (e.g. '0771234567' or '+263771234567')

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not phone:
        return False, "Phone number is required"

    # Remove spaces and special characters
    phone_clean = re.sub(r'[\s\-\(\)]', '', phone)

    if not re.match(r'^\+?\d+$', phone_clean):
        return False, "Phone number must contain only digits and optional leading +"

    phone_digits = phone_clean.lstrip('+')

    if len(phone_digits) < 7 or len(phone_digits) > 15:
        return False, "Phone number should be between 7 and 15 digits"

    return True, None


def validate_amount(amount: object, max_amount: float = 1000000000.00) -> tuple[bool, Optional[str]]:
    """
    Validate a line item amount

    Args:
        amount: Amount to validate; zero is allowed, negatives are not
        max_amount: Maximum allowed unit amount

    Returns:
        Tuple of (is_valid, error_message)
    """
    try:
        if isinstance(amount, bool):
            return False, "Amount must be a number, got bool"
        if isinstance(amount, Decimal):
            amount_decimal = amount
        elif isinstance(amount, (str, int, float)):
            amount_decimal = Decimal(str(amount))
        else:
            return False, f"Amount must be a number, got {type(amount).__name__}"

        if not amount_decimal.is_finite():
            return False, "Amount must be a finite number"

        if amount_decimal < 0:
            return False, "Amount cannot be negative"

        if amount_decimal > Decimal(str(max_amount)):
            return False, f"Amount must not exceed {max_amount}"

        return True, None

    except (InvalidOperation, ValueError) as e:
        return False, f"Invalid amount format: {str(e)}"


def validate_email(email: str) -> tuple[bool, Optional[str]]:
    """
    Validate email address format

    Args:
        email: Email address to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not email:
        return False, "Email is required"

    if not isinstance(email, str):
        return False, f"Email must be a string, got {type(email).__name__}"

    email_pattern = r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$'

    if not re.match(email_pattern, email):
        return False, "Invalid email format"

    if len(email) > 254:  # RFC 5321
        return False, "Email address is too long (max 254 characters)"

    local_part = email.split('@')[0]
    if len(local_part) > 64:  # RFC 5321
        return False, "Email local part is too long (max 64 characters)"

    return True, None
