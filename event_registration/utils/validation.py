"""Data validation utilities for registration forms."""
import re
from typing import Any, Dict, List, Tuple

from event_registration.models.registration import TEXT_FIELDS

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MIN_PHONE_DIGITS = 10


def trim_fields(form_data: Dict[str, Any]) -> Dict[str, str]:
    """
    Trim every registration text field.

    Args:
        form_data: Raw submitted values (missing keys or None become "")

    Returns:
        Dictionary with exactly the registration text fields, trimmed
    """
    cleaned = {}
    for field in TEXT_FIELDS:
        value = form_data.get(field)
        cleaned[field] = "" if value is None else str(value).strip()
    return cleaned


def find_missing_fields(form_data: Dict[str, str]) -> List[str]:
    """Return required fields that are absent or blank, in form order."""
    return [
        field for field in TEXT_FIELDS
        if not form_data.get(field) or not form_data[field].strip()
    ]


def validate_email(email: str) -> Tuple[bool, str]:
    """
    Validate email address shape.

    Args:
        email: Email to validate

    Returns:
        Tuple of (is_valid: bool, error_message: str)
        - (True, "") if valid
        - (False, "Please enter a valid email address.") otherwise
    """
    if not email or not EMAIL_PATTERN.match(email.strip()):
        return False, "Please enter a valid email address."
    return True, ""


def validate_phone(phone: str) -> Tuple[bool, str]:
    """
    Validate phone number by counting digits.

    Separators such as spaces, dashes, dots and a leading "+" are ignored;
    at least 10 ASCII digits must remain.
    """
    digits = re.sub(r"[^0-9]", "", phone or "")
    if len(digits) < MIN_PHONE_DIGITS:
        return False, "Please enter a valid phone number."
    return True, ""


def normalize_email(email: str) -> str:
    """
    Normalize email for storage and duplicate comparison.

    Behavior:
        - Trims leading/trailing whitespace
        - Converts to lowercase
        - Example: " Alice@X.com " → "alice@x.com"
    """
    return email.strip().lower()
