"""Custom exception classes."""
from typing import List, Optional


class RegistrationError(Exception):
    """Base class for registration domain errors."""
    pass


class ValidationError(RegistrationError):
    """Raised when submitted registration data fails validation."""

    def __init__(self, reason: str, message: str, fields: Optional[List[str]] = None):
        super().__init__(message)
        self.reason = reason
        self.fields = fields or []


class DuplicateEmailError(RegistrationError):
    """Raised when an email is already registered."""

    def __init__(self, email: str):
        super().__init__(f"Email already registered: {email}")
        self.email = email


class AuthenticationError(RegistrationError):
    """Raised when login credentials or a session token are invalid."""
    pass


class StorageError(RegistrationError):
    """Raised when the registration store cannot be read or written."""
    pass


class DuplicateIdError(RegistrationError):
    """Raised when a registration id is already in use."""

    def __init__(self, registration_id: str):
        super().__init__(f"Registration id already exists: {registration_id}")
        self.registration_id = registration_id
