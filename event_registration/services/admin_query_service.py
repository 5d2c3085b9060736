"""Admin queries over stored registrations: listing, stats and export."""
import csv
import io
import logging
from datetime import date
from typing import Dict, List, Optional, Union

from event_registration.models.registration import Registration
from event_registration.services.admin_service import require_admin
from event_registration.services.record_store import (
    count_all,
    count_by_field,
    count_since,
    delete_record_by_id,
    find_record_by_id,
    list_records,
)
from event_registration.utils.date_utils import start_of_today, today_str

logger = logging.getLogger(__name__)

EXPORT_HEADERS = [
    "ID", "Name", "Email", "Phone", "College",
    "Branch", "Year", "Reason", "Registered At"
]
NO_TOP_BRANCH = "—"


def list_registrations(token: str, query: Optional[str] = None) -> List[Registration]:
    """
    List registrations, optionally filtered.

    Args:
        token: Admin session token
        query: Case-insensitive substring matched against name or email

    Returns:
        List[Registration]: newest first

    Raises:
        AuthenticationError: If the token is not authorized
    """
    require_admin(token)

    registrations = list_records()
    needle = (query or "").strip().lower()
    if not needle:
        return registrations

    return [
        r for r in registrations
        if needle in r.name.lower() or needle in r.email.lower()
    ]


def get_registration(token: str, registration_id: str) -> Optional[Registration]:
    require_admin(token)
    return find_record_by_id(registration_id)


def pick_top_branch(counts: Dict[str, int]) -> str:
    """
    Branch with the highest count.

    Ties go to the lexicographically smallest branch name; an empty mapping
    yields the "—" placeholder.
    """
    if not counts:
        return NO_TOP_BRANCH
    return min(counts.items(), key=lambda item: (-item[1], item[0]))[0]


def get_stats(token: str) -> Dict[str, Union[int, str]]:
    """
    Compute dashboard statistics.

    Returns:
        {"total": int, "today": int, "top_branch": str}
        - today counts registrations since local midnight
    """
    require_admin(token)

    return {
        "total": count_all(),
        "today": count_since(start_of_today()),
        "top_branch": pick_top_branch(count_by_field("branch")),
    }


def delete_registration(token: str, registration_id: str) -> Dict[str, bool]:
    """
    Delete a registration by id.

    Returns:
        {"deleted": bool}; deleting an unknown id reports False
    """
    require_admin(token)

    deleted = delete_record_by_id(registration_id)
    if not deleted:
        logger.info(f"Delete requested for unknown registration {registration_id}")
    return {"deleted": deleted}


def export_table(token: str) -> List[List[str]]:
    """
    Build the export table.

    Returns:
        Header row followed by one row per registration, newest first
    """
    require_admin(token)

    rows = [list(EXPORT_HEADERS)]
    for r in list_records():
        rows.append([
            r.id, r.name, r.email, r.phone, r.college,
            r.branch, r.year, r.interest, r.created_at
        ])
    return rows


def export_csv(token: str) -> str:
    """
    Serialize the export table as CSV text.

    Every field is wrapped in double quotes and each embedded double
    quote is written twice, e.g. a quote around a word becomes ""word"".
    """
    table = export_table(token)

    output = io.StringIO()
    writer = csv.writer(output, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerows(table)
    return output.getvalue()


def export_filename(today: Optional[date] = None) -> str:
    return f"registrations_{today_str(today)}.csv"
