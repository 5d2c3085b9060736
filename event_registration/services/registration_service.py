"""Registration service for handling event sign-ups."""
import logging
from typing import Any, Dict

from event_registration.models.registration import Registration
from event_registration.services.record_store import insert_record
from event_registration.utils.exceptions import ValidationError
from event_registration.utils.validation import (
    find_missing_fields,
    trim_fields,
    validate_email,
    validate_phone,
)

logger = logging.getLogger(__name__)


def register(form_data: Dict[str, Any]) -> Registration:
    """
    Register an attendee.

    Args:
        form_data: Submitted values for name, email, phone, college,
            branch, year and interest

    Returns:
        The stored Registration (id and created_at assigned)

    Raises:
        ValidationError: reason "missing_fields" (with ``fields``),
            "invalid_email" or "invalid_phone"
        DuplicateEmailError: If the email is already registered
        StorageError: If the store cannot be written

    Behavior:
        - Trims every field before validation and storage
        - Checks are applied in order: required fields, email, phone
        - Nothing reaches the record store unless all checks pass
    """
    cleaned = trim_fields(form_data)

    missing = find_missing_fields(cleaned)
    if missing:
        raise ValidationError(
            "missing_fields",
            "Please fill in all fields.",
            fields=missing
        )

    is_valid, error_msg = validate_email(cleaned["email"])
    if not is_valid:
        raise ValidationError("invalid_email", error_msg, fields=["email"])

    is_valid, error_msg = validate_phone(cleaned["phone"])
    if not is_valid:
        raise ValidationError("invalid_phone", error_msg, fields=["phone"])

    registration = insert_record(cleaned)
    logger.info(f"New registration {registration.id} ({registration.branch}, {registration.year})")
    return registration
