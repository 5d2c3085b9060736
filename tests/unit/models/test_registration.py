"""Unit tests for Registration model."""
import pytest

from event_registration.models.registration import Registration


def _row(**overrides):
    row = {
        "id": "a1b2c3",
        "name": "Alice",
        "email": "alice@x.com",
        "phone": "9876543210",
        "college": "RVCE",
        "branch": "CSE",
        "year": "2nd Year",
        "interest": "Robotics",
        "created_at": "2026-10-19T10:15:30+05:30",
    }
    row.update(overrides)
    return row


class TestRegistrationModel:
    """Test Registration dataclass."""

    def test_from_dict_round_trip(self):
        """Test from_dict and to_dict are inverse."""
        registration = Registration.from_dict(_row())
        assert registration.to_dict() == _row()

    def test_from_dict_ignores_unknown_keys(self):
        """Test extra stored keys are ignored."""
        registration = Registration.from_dict(_row(_v=0, extra="x"))
        assert "extra" not in registration.to_dict()

    def test_numeric_id_is_stringified(self):
        """Test numeric ids are stored as strings."""
        registration = Registration.from_dict(_row(id=1729000000000))
        assert registration.id == "1729000000000"

    def test_empty_id_rejected(self):
        """Test a blank id is rejected."""
        with pytest.raises(ValueError, match="id cannot be empty"):
            Registration.from_dict(_row(id=" "))

    def test_invalid_timestamp_rejected(self):
        """Test a malformed created_at is rejected."""
        with pytest.raises(ValueError, match="Invalid timestamp format"):
            Registration.from_dict(_row(created_at="19/10/2026"))

    def test_zulu_timestamp_accepted(self):
        """Test a UTC timestamp ending in Z is accepted."""
        registration = Registration.from_dict(_row(created_at="2026-10-19T04:45:30.000Z"))
        assert registration.created_at_datetime.utcoffset().total_seconds() == 0
