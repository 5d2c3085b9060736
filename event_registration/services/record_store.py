"""Registration record store backed by a single JSON document."""
import json
import logging
import uuid
from contextlib import contextmanager
from datetime import datetime
from typing import Any, Dict, List, Optional

from event_registration.config import get_registrations_file
from event_registration.models.registration import TEXT_FIELDS, Registration
from event_registration.services.storage_service import (
    ensure_json_file,
    load_json,
    lock_file,
    save_json,
)
from event_registration.utils.date_utils import now_iso
from event_registration.utils.exceptions import (
    DuplicateEmailError,
    DuplicateIdError,
    StorageError,
)
from event_registration.utils.validation import normalize_email

logger = logging.getLogger(__name__)

# Overrides the configured path when set
REGISTRATIONS_FILE: Optional[str] = None

EMPTY_DOCUMENT = {"registrations": []}


def _store_path() -> str:
    return REGISTRATIONS_FILE or get_registrations_file()


@contextmanager
def _storage_errors(action: str):
    """Translate low-level I/O failures into StorageError."""
    try:
        yield
    except (OSError, json.JSONDecodeError, TimeoutError, KeyError, ValueError) as e:
        logger.error(f"Registration store failed to {action}: {e}")
        raise StorageError(f"Failed to {action}") from e


def _load_rows(path: str) -> List[Dict[str, Any]]:
    ensure_json_file(path, EMPTY_DOCUMENT)
    data = load_json(path)
    return data.get("registrations", [])


def _load_records() -> List[Registration]:
    path = _store_path()
    with _storage_errors("read registrations"):
        return [Registration.from_dict(row) for row in _load_rows(path)]


def insert_record(record: Dict[str, Any]) -> Registration:
    """
    Persist a new registration.

    Args:
        record: Trimmed and validated registration fields; ``id`` and
            ``created_at`` are generated when absent

    Returns:
        The stored Registration

    Raises:
        DuplicateEmailError: If a record with the same normalized email exists
        DuplicateIdError: If a caller-supplied id is already stored
        StorageError: If the store cannot be read or written

    Behavior:
        - Email is stored normalized (trimmed, lowercased)
        - The duplicate check and the write run under one exclusive lock,
          so at most one insert per email or id succeeds
    """
    registration_data = {field: record.get(field, "") for field in TEXT_FIELDS}
    registration_data["email"] = normalize_email(registration_data["email"])
    registration_data["id"] = str(record.get("id") or uuid.uuid4().hex)
    registration_data["created_at"] = record.get("created_at") or now_iso()

    registration = Registration.from_dict(registration_data)
    path = _store_path()

    with _storage_errors("insert registration"):
        ensure_json_file(path, EMPTY_DOCUMENT)
        with lock_file(path):
            data = load_json(path)
            rows = data.setdefault("registrations", [])

            for row in rows:
                if normalize_email(row.get("email", "")) == registration.email:
                    logger.warning(f"Duplicate registration rejected for {registration.email}")
                    raise DuplicateEmailError(registration.email)
                if str(row.get("id")) == registration.id:
                    raise DuplicateIdError(registration.id)

            rows.append(registration.to_dict())
            save_json(path, data, backup=True)

    return registration


def list_records() -> List[Registration]:
    """
    Load all registrations.

    Returns:
        List[Registration]: newest first by created_at; records sharing a
        timestamp are ordered by most recent insert first
    """
    records = list(reversed(_load_records()))
    records.sort(key=lambda r: r.created_at_datetime, reverse=True)
    return records


def find_record_by_id(record_id: str) -> Optional[Registration]:
    """
    Look up a registration by id.

    Returns:
        Registration if found, otherwise None
    """
    for registration in _load_records():
        if registration.id == str(record_id):
            return registration
    return None


def delete_record_by_id(record_id: str) -> bool:
    """
    Delete a registration.

    Returns:
        bool: True if a record was removed, False if none had this id
    """
    path = _store_path()

    with _storage_errors("delete registration"):
        ensure_json_file(path, EMPTY_DOCUMENT)
        with lock_file(path):
            data = load_json(path)
            rows = data.get("registrations", [])

            remaining = [r for r in rows if str(r.get("id")) != str(record_id)]
            if len(remaining) == len(rows):
                return False

            data["registrations"] = remaining
            save_json(path, data, backup=True)

    logger.info(f"Deleted registration {record_id}")
    return True


def count_all() -> int:
    return len(_load_records())


def count_since(since: datetime) -> int:
    """Count registrations with created_at at or after ``since``."""
    if since.tzinfo is None:
        since = since.astimezone()
    return sum(1 for r in _load_records() if r.created_at_datetime >= since)


def count_by_field(field: str) -> Dict[str, int]:
    """
    Group registrations by a text field.

    Args:
        field: One of the registration text fields, e.g. "branch"

    Returns:
        Mapping of field value to count, in order of first appearance

    Raises:
        ValueError: If ``field`` is not a registration text field
    """
    if field not in TEXT_FIELDS:
        raise ValueError(f"Unknown registration field: {field}")

    counts: Dict[str, int] = {}
    for registration in _load_records():
        value = getattr(registration, field)
        counts[value] = counts.get(value, 0) + 1
    return counts
