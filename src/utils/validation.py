"""Data validation utilities."""
import re
from datetime import date, datetime
from typing import Any, Tuple

EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,6}")

# Characters up to and including the ASCII space are trimmed
_TRIM_CHARS = "".join(chr(code) for code in range(0x21))


def _is_blank(value: str) -> bool:
    return not value.strip(_TRIM_CHARS)


def validate_name(name: Any) -> Tuple[bool, str]:
    """
    Validate a person's name.

    Args:
        name: Name to validate

    Returns:
        Tuple of (is_valid: bool, error_message: str)
        - (True, "") if valid
        - (False, "Name cannot be empty") if missing, empty or whitespace only
    """
    if not isinstance(name, str) or _is_blank(name):
        return False, "Name cannot be empty"
    return True, ""


def validate_date_of_birth(date_of_birth: Any) -> Tuple[bool, str]:
    """
    Validate a date of birth.

    Args:
        date_of_birth: Calendar date to validate

    Returns:
        Tuple of (is_valid: bool, error_message: str)
        - (True, "") if valid
        - (False, "Date of birth is required") if missing, a datetime or not a date
    """
    if not isinstance(date_of_birth, date) or isinstance(date_of_birth, datetime):
        return False, "Date of birth is required"
    return True, ""


def validate_email_address(email_address: Any) -> Tuple[bool, str]:
    """
    Validate an email address.

    The whole string must match EMAIL_PATTERN: local part, "@", domain and
    a 2 to 6 letter suffix.

    Args:
        email_address: Email address to validate

    Returns:
        Tuple of (is_valid: bool, error_message: str)
        - (True, "") if valid
        - (False, "Email address is invalid") otherwise
    """
    if not isinstance(email_address, str) or _is_blank(email_address):
        return False, "Email address is invalid"
    if EMAIL_PATTERN.fullmatch(email_address) is None:
        return False, "Email address is invalid"
    return True, ""
