"""Builds calendar entries for a sport from its schedule page."""
import logging
from typing import Dict, List, Sequence

from processor.description import assemble_description
from processor.event_grouper import group_events
from processor.models import CalendarEntry, ParseResult, Sport
from processor.schedule_parser import ScheduleParser
from scraper.olympics_schedule import OlympicsScheduleScraper

logger = logging.getLogger(__name__)

CALENDAR_TITLE = "Tokyo 2020"


def calendar_name(sport_names: Sequence[str]) -> str:
    """Name of the calendar produced for the selected sports."""
    if len(sport_names) == 1:
        return f"{CALENDAR_TITLE} - {sport_names[0]}"
    return CALENDAR_TITLE


def build_calendar_entries(sport: Sport) -> List[CalendarEntry]:
    """
    Turn a parsed sport into one calendar entry per event group.

    Args:
        sport: Sport whose categories hold parsed events

    Returns:
        CalendarEntry list in order of first appearance of each group
    """
    entries = []
    for key, labels in group_events(sport).items():
        entries.append(CalendarEntry(
            title=sport.name,
            description=assemble_description(labels),
            location=key.location,
            start=key.start,
            end=key.end,
            url=sport.url
        ))
    return entries


class CalendarBuilder:
    """Runs the fetch, parse, group and describe cycle for sports."""

    def __init__(self, scraper: OlympicsScheduleScraper, parser: ScheduleParser):
        self.scraper = scraper
        self.parser = parser
        self.parse_results: Dict[str, ParseResult] = {}

    def build_entries(self, sport: Sport) -> List[CalendarEntry]:
        """
        Fetch and parse a sport's schedule, then build its calendar entries.

        Args:
            sport: Sport to process

        Returns:
            List of CalendarEntry objects

        Raises:
            requests.RequestException: If the schedule page cannot be fetched
        """
        html_content = self.scraper.fetch_schedule(sport)
        result: ParseResult = self.parser.parse(sport, html_content)
        self.parse_results[sport.name] = result

        entries = build_calendar_entries(sport)
        logger.info(
            f"Built {len(entries)} calendar entries from "
            f"{result.events_added} events for {sport.name}"
        )
        return entries
