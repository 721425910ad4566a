"""Prefix-based event classification."""
from typing import Optional

from processor.models import Sport


def find_category(sport: Sport, name: str) -> Optional[str]:
    """
    Find the category an event name belongs to.

    Categories are checked in the order they were declared and the first
    one whose name is a literal, case-sensitive prefix of the event name
    wins, even when a later category would match more characters.

    Args:
        sport: Sport whose categories are searched
        name: Raw event name from the schedule page

    Returns:
        Matching category name, or None if no category matches
    """
    for category_name in sport.categories:
        if name.startswith(category_name):
            return category_name
    return None
