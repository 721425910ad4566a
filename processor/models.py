"""Data models for schedule processing."""
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Dict, List, NamedTuple, Optional

SCHEDULE_BASE_URL = "https://olympics.com/tokyo-2020/en/schedule/"


@dataclass(frozen=True)
class Event:
    """Single scheduled event extracted from a schedule page."""
    name: str
    location: str
    start: datetime
    end: datetime
    category: Optional[str] = None


@dataclass
class Category:
    """Named classification target within a sport."""
    name: str
    redirect: Optional[str] = None
    events: List[Event] = field(default_factory=list)

    @property
    def label(self) -> str:
        """Canonical label used when grouping events for output."""
        return self.redirect or self.name

    def add_event(self, event: Event) -> Event:
        """
        Assign the event to this category and store it.

        Args:
            event: Event without an assigned category

        Returns:
            The stored Event, stamped with this category's name
        """
        stored = replace(event, category=self.name)
        self.events.append(stored)
        return stored


@dataclass
class Sport:
    """Competition discipline with its own schedule page and categories."""
    name: str
    icon: str
    categories: Dict[str, Category] = field(default_factory=dict)

    @property
    def url(self) -> str:
        slug = self.name.lower().replace(" ", "-").split("/")[0]
        return f"{SCHEDULE_BASE_URL}{slug}-schedule/"

    def event_count(self) -> int:
        return sum(len(category.events) for category in self.categories.values())


class GroupKey(NamedTuple):
    """Grouping key shared by events emitted as one calendar entry."""
    start: datetime
    end: datetime
    location: str


# label -> cleaned event names, per (start, end, location)
Groups = Dict[GroupKey, Dict[str, List[str]]]


@dataclass
class CalendarEntry:
    """One calendar event handed to the exporter."""
    title: str
    description: str
    location: str
    start: datetime
    end: datetime
    url: str


@dataclass
class ParseResult:
    """Outcome of parsing one schedule page."""
    events_added: int = 0
    blocks_skipped: int = 0
    unclassified: List[str] = field(default_factory=list)
