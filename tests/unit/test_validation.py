"""Unit tests for registration validation utilities."""
import pytest

from event_registration.utils.validation import (
    find_missing_fields,
    normalize_email,
    trim_fields,
    validate_email,
    validate_phone,
)


class TestTrimFields:
    """Test trim_fields function."""

    def test_trims_whitespace(self):
        """Test surrounding whitespace is removed."""
        result = trim_fields({"name": "  Alice  ", "email": "\talice@x.com\n"})
        assert result["name"] == "Alice"
        assert result["email"] == "alice@x.com"

    def test_missing_and_none_become_empty(self):
        """Test missing and None values become empty strings."""
        result = trim_fields({"name": None})
        assert result["name"] == ""
        assert result["interest"] == ""

    def test_drops_unknown_keys(self):
        """Test keys outside the registration fields are dropped."""
        result = trim_fields({"name": "Alice", "id": "injected"})
        assert "id" not in result
        assert set(result) == {"name", "email", "phone", "college", "branch", "year", "interest"}


class TestFindMissingFields:
    """Test find_missing_fields function."""

    def test_all_present(self):
        """Test no fields are reported when everything is filled in."""
        data = {f: "x" for f in ("name", "email", "phone", "college", "branch", "year", "interest")}
        assert find_missing_fields(data) == []

    def test_reports_blank_fields_in_form_order(self):
        """Test blank fields are reported in form order."""
        data = {"name": "Alice", "email": "   ", "college": ""}
        assert find_missing_fields(data) == ["email", "phone", "college", "branch", "year", "interest"]


class TestValidateEmail:
    """Test validate_email function."""

    @pytest.mark.parametrize("email", [
        "alice@x.com",
        "first.last@college.edu.in",
        "user+tag@sub.domain.org",
    ])
    def test_valid_emails(self, email):
        """Test well-formed email addresses are accepted."""
        is_valid, error = validate_email(email)
        assert is_valid is True
        assert error == ""

    @pytest.mark.parametrize("email", [
        "",
        "alice",
        "alice@",
        "alice@x",
        "@x.com",
        "alice smith@x.com",
        "alice@@x.com",
    ])
    def test_invalid_emails(self, email):
        """Test malformed email addresses are rejected."""
        is_valid, error = validate_email(email)
        assert is_valid is False
        assert error == "Please enter a valid email address."


class TestValidatePhone:
    """Test validate_phone function."""

    @pytest.mark.parametrize("phone", [
        "9876543210",
        "123-456-7890",
        "+91 98765 43210",
        "(080) 2345-6789",
    ])
    def test_valid_phones(self, phone):
        """Test phone numbers with separators are accepted."""
        is_valid, error = validate_phone(phone)
        assert is_valid is True
        assert error == ""

    @pytest.mark.parametrize("phone", [
        "",
        "12345",
        "987-654-321",
        "phone number",
        "\u0661\u0662\u0663\u0664\u0665\u0666\u0667\u0668\u0669\u0660",  # Arabic-Indic digits
    ])
    def test_invalid_phones(self, phone):
        """Test phone numbers with fewer than 10 ASCII digits are rejected."""
        is_valid, error = validate_phone(phone)
        assert is_valid is False
        assert error == "Please enter a valid phone number."


class TestNormalizeEmail:
    """Test normalize_email function."""

    def test_lowercases_and_trims(self):
        """Test email is lowercased and trimmed."""
        assert normalize_email("  Alice@X.COM ") == "alice@x.com"

    def test_normalized_is_idempotent(self):
        """Test normalizing twice changes nothing."""
        assert normalize_email(normalize_email("Bob@Y.org")) == "bob@y.org"
