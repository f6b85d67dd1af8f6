"""
Read-only filters for searching tasks by category or deadline.
"""

from datetime import datetime
from typing import List, Optional

from dateutil import parser as date_parser

from .data_models import Task


def parse_deadline(value: Optional[str]) -> Optional[datetime]:
    """
    Parse an ISO deadline string ("2024-03-01") into a datetime.

    Returns None when the value is empty or not an ISO date. Words such
    as "Friday" or "March" and the "No deadline" sentinel never parse.
    """
    if not value or not value.strip():
        return None
    try:
        parsed = date_parser.isoparse(value.strip())
    except (ValueError, OverflowError):
        return None
    # Compare everything as naive local dates.
    return parsed.replace(tzinfo=None)


def filter_by_category(tasks: List[Task], category: str) -> List[Task]:
    """Return tasks whose category equals `category`, ignoring case."""
    wanted = category.lower()
    return [t for t in tasks if t.category.lower() == wanted]


def filter_by_deadline(tasks: List[Task], date_str: str) -> List[Task]:
    """
    Return tasks due on or before `date_str`.

    Tasks whose deadline does not parse are never included. An
    unparsable query matches nothing.
    """
    limit = parse_deadline(date_str)
    if limit is None:
        return []
    results = []
    for task in tasks:
        due = parse_deadline(task.deadline)
        if due is not None and due <= limit:
            results.append(task)
    return results
