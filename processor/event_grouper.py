"""Grouping of parsed events into calendar-entry sized groups."""
import re

from processor.models import GroupKey, Groups, Sport

MAIN_EVENT = "Main Event"

# one separator character left behind once the category prefix is removed
LEADING_SEPARATOR = re.compile(r"^[^\w\s] ")


def clean_event_name(name: str, label: str, category_name: str) -> str:
    """
    Remove the category from the front of an event name.

    Args:
        name: Raw event name
        label: Canonical label of the event's category
        category_name: Name of the category the event was classified into

    Returns:
        Remaining event title, or "Main Event" if nothing remains
    """
    if name.startswith(label):
        name = name[len(label):]
    elif name.startswith(category_name):
        name = name[len(category_name):]

    name = LEADING_SEPARATOR.sub("", name.strip())
    return name or MAIN_EVENT


def group_events(sport: Sport) -> Groups:
    """
    Group a sport's events by start, end and location.

    Within each group, cleaned event names are collected under the
    canonical label of their category, in the order they are encountered.
    Repeated names are kept.

    Args:
        sport: Sport whose categories have been populated by the parser

    Returns:
        Mapping of GroupKey to {label: [event names]}
    """
    groups: Groups = {}
    for category in sport.categories.values():
        label = category.label
        for event in category.events:
            key = GroupKey(event.start, event.end, event.location)
            labels = groups.setdefault(key, {})
            labels.setdefault(label, []).append(
                clean_event_name(event.name, label, category.name)
            )
    return groups
