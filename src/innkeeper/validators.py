"""
Input validation for the interactive menu

Validators never raise: they return a ValidationResult carrying either the
cleaned value or the reason it was rejected.
"""

import re
from typing import Any, NamedTuple, Optional

EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")

# Characters that would break the comma-delimited stores
FORBIDDEN_CHARS = (",", "\n", "\r")


class ValidationResult(NamedTuple):
    value: Any = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _digits(value: str, length: int, label: str) -> ValidationResult:
    value = value.strip()
    if len(value) == length and value.isdigit():
        return ValidationResult(value)
    return ValidationResult(error=f"Invalid {label}. Please enter exactly {length} digits.")


def validate_email(value: str) -> ValidationResult:
    value = value.strip()
    if EMAIL_PATTERN.fullmatch(value):
        return ValidationResult(value)
    return ValidationResult(error="Invalid email format. Please try again.")


def validate_phone(value: str) -> ValidationResult:
    return _digits(value, 10, "phone number")


def validate_national_id(value: str) -> ValidationResult:
    return _digits(value, 12, "national ID number")


def validate_text(value: str, label: str) -> ValidationResult:
    """Free text stored in a record: must be non-empty, without commas or line breaks"""
    if not value.strip():
        return ValidationResult(error=f"{label} cannot be empty.")
    if any(char in value for char in FORBIDDEN_CHARS):
        return ValidationResult(error=f"{label} cannot contain commas or line breaks.")
    return ValidationResult(value)


def validate_room_number(value: str) -> ValidationResult:
    """Parse a room number, ignoring any whitespace around or inside it"""
    cleaned = "".join(value.split())
    try:
        number = int(cleaned)
    except ValueError:
        return ValidationResult(error="Invalid input. Please enter a valid numeric room number.")
    if number <= 0:
        return ValidationResult(error="Room numbers are positive. Please try again.")
    return ValidationResult(number)
