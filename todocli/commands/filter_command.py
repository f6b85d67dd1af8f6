"""
Handles the two filter menu choices. Neither changes the task list.
"""
from ..utils.format_utils import format_task_list


def _print_matches(session, tasks, empty_notice: str) -> None:
    if not tasks:
        session.say(empty_notice, style="yellow")
        return
    for line in format_task_list(tasks):
        session.console.print(line)


def handle_filter_category(session) -> None:
    """List tasks in one category (case-insensitive), numbered from 1."""
    category = session.ask("\n📂 Enter category to filter: ")
    matches = session.store.filter_by_category(category)
    _print_matches(session, matches, f"⚠️ No tasks found in category: {category}")


def handle_filter_deadline(session) -> None:
    """List tasks due on or before a date, numbered from 1.

    Tasks without a deadline never match.
    """
    date_str = session.ask("\n📅 Enter deadline (YYYY-MM-DD): ")
    matches = session.store.filter_by_deadline(date_str)
    _print_matches(session, matches, f"⚠️ No tasks due on/before {date_str}")
