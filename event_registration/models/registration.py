"""Registration data model for event sign-ups."""
from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Any, Dict

from event_registration.utils.date_utils import parse_timestamp

TEXT_FIELDS = ("name", "email", "phone", "college", "branch", "year", "interest")


@dataclass
class Registration:
    """One attendee submission as stored in the registration file."""

    id: str
    name: str
    email: str
    phone: str
    college: str
    branch: str
    year: str
    interest: str
    created_at: str  # ISO 8601 format

    def __post_init__(self):
        """Validate stored registration data."""
        if not self.id or not str(self.id).strip():
            raise ValueError("Registration id cannot be empty")

        # Raises ValueError for malformed ISO 8601 timestamps
        parse_timestamp(self.created_at)

    @property
    def created_at_datetime(self) -> datetime:
        """Timestamp as an aware datetime (naive values are taken as local time)."""
        return parse_timestamp(self.created_at)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Registration":
        """Build a registration from a stored dictionary, ignoring unknown keys."""
        return cls(
            id=str(data["id"]),
            created_at=data["created_at"],
            **{field: str(data.get(field, "")) for field in TEXT_FIELDS}
        )
