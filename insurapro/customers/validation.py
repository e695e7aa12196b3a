"""
Customer field validation.

Pure predicates over the contact fields entered for a customer. Names are
single tokens: letters, optionally joined by one of ' , . - _
"""

import re
from typing import Any, List

# Letters, with ' , . - _ allowed only between letter runs
NAME_PATTERN = re.compile(r"^[A-Za-z]+([',.\-_][A-Za-z]+)*$")

# local@label.label.tld: dotted local part, TLD of 2-7 letters
EMAIL_PATTERN = re.compile(
    r"[A-Za-z0-9_+&*-]+(?:\.[A-Za-z0-9_+&*-]+)*@(?:[A-Za-z0-9-]+\.)+[A-Za-z]{2,7}"
)

# Optional leading +, then 10-15 digits
PHONE_PATTERN = re.compile(r"^\+?[0-9]{10,15}$")


def _full_match(pattern: "re.Pattern[str]", value: Any) -> bool:
    if not isinstance(value, str):
        return False
    return pattern.fullmatch(value) is not None


def is_valid_name(name: str) -> bool:
    """True if *name* is a valid first or last name."""
    return _full_match(NAME_PATTERN, name)


is_valid_first_name = is_valid_name
is_valid_last_name = is_valid_name


def is_valid_email(email: str) -> bool:
    return _full_match(EMAIL_PATTERN, email)


def is_valid_phone(phone: str) -> bool:
    """
    True for 10-15 digits with an optional leading '+'.

    Examples:
        '+12345678901' -> True
        '555-1234'     -> False
    """
    return _full_match(PHONE_PATTERN, phone)


def validate_customer_fields(
    first_name: str,
    last_name: str,
    email: str,
    phone: str,
) -> List[str]:
    """
    Validate all contact fields at once.

    Returns:
        List of error messages (empty = valid)
    """
    errors: List[str] = []
    if not is_valid_first_name(first_name):
        errors.append(f"Invalid first name format: {first_name!r}")
    if not is_valid_last_name(last_name):
        errors.append(f"Invalid last name format: {last_name!r}")
    if not is_valid_email(email):
        errors.append(f"Invalid email format: {email!r}")
    if not is_valid_phone(phone):
        errors.append(f"Invalid phone number format: {phone!r} (10-15 digits, optional leading +)")
    return errors
