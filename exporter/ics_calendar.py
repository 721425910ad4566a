"""iCalendar export of calendar entries."""
import hashlib
import logging
from datetime import datetime, timezone
from typing import List

from icalendar import Calendar, Event

from processor.description import LINE_BREAK
from processor.models import CalendarEntry

logger = logging.getLogger(__name__)

PRODID = "-//tokyo-2020-schedule-ics//EN"
UID_DOMAIN = "tokyo-2020-schedule-ics"


class IcsCalendar:
    """Named calendar collecting entries for serialization."""

    def __init__(self, name: str):
        self.name = name
        self.entries: List[CalendarEntry] = []

    @property
    def filename(self) -> str:
        return f"{self.name}.ics"

    def add_entries(self, entries: List[CalendarEntry]) -> None:
        self.entries.extend(entries)

    def to_ical(self) -> bytes:
        """
        Serialize all entries as an iCalendar document.

        Returns:
            iCalendar document as bytes
        """
        cal = Calendar()
        cal.add("prodid", PRODID)
        cal.add("version", "2.0")
        cal.add("x-wr-calname", self.name)

        dtstamp = datetime.now(timezone.utc)
        for entry in self.entries:
            cal.add_component(self._build_event(entry, dtstamp))

        logger.info(f"Serialized {len(self.entries)} entries into '{self.filename}'")
        return cal.to_ical()

    def _build_event(self, entry: CalendarEntry, dtstamp: datetime) -> Event:
        event = Event()
        event.add("uid", self.generate_uid(entry))
        event.add("dtstamp", dtstamp)
        event.add("summary", entry.title)
        event.add("dtstart", entry.start)
        event.add("dtend", entry.end)
        if entry.location:
            event.add("location", entry.location)
        if entry.description:
            # icalendar escapes newlines itself
            event.add("description", entry.description.replace(LINE_BREAK, "\n"))
        if entry.url:
            event.add("url", entry.url)
        return event

    @staticmethod
    def generate_uid(entry: CalendarEntry) -> str:
        """
        Generate a stable identifier from title, start, end and location.

        Args:
            entry: Calendar entry

        Returns:
            SHA256 based UID
        """
        composite = (
            f"{entry.title}|{entry.start.isoformat()}|"
            f"{entry.end.isoformat()}|{entry.location}"
        )
        digest = hashlib.sha256(composite.encode('utf-8')).hexdigest()
        return f"{digest}@{UID_DOMAIN}"
