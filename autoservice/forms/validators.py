"""Client-side field validators shared by the booking and auth forms."""

import re

from autoservice.utils import digits_only

CONTACT_PATTERN = re.compile(r"^[0-9()+\- ]+$")
EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")

MIN_CONTACT_DIGITS = 10
MAX_CONTACT_DIGITS = 15
MIN_PASSWORD_LENGTH = 6


def is_contact_number_valid(value: str) -> bool:
    """Digits, spaces, ``()+-`` only, with 10-15 digits in total."""
    if not value or not CONTACT_PATTERN.match(value):
        return False
    return MIN_CONTACT_DIGITS <= len(digits_only(value)) <= MAX_CONTACT_DIGITS


def is_email_valid(value: str) -> bool:
    return bool(value) and EMAIL_PATTERN.search(value) is not None


def is_password_long_enough(value: str) -> bool:
    return len(value) >= MIN_PASSWORD_LENGTH


def is_filled(value: str) -> bool:
    return bool(value and value.strip())
