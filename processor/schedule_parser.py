"""Parser turning a sport's schedule page into categorised events."""
import logging
import re
from datetime import datetime
from typing import List, Optional, Tuple

from bs4 import BeautifulSoup
from dateutil import parser as dateparser

from processor.classifier import find_category
from processor.models import Event, ParseResult, Sport

logger = logging.getLogger(__name__)

DEFAULT_REFERENCE_YEAR = 2021

BLOCK_SELECTOR = ".tk-article__part.markdown"

DATE_TIME_PATTERN = re.compile(
    r"Date and Time: (.+(?= \d{1,2}:\d{1,2} -)) (\d{1,2}:\d{2}) - (\d{1,2}:\d{2})"
)
VENUE_PATTERN = re.compile(r"Venues: (.+)")


class ScheduleParser:
    """
    Parser for schedule pages.

    Each schedule block holds alternating headings: a "Date and Time"
    heading followed by a "Venues" heading, with one list of event names
    per heading pair. The venue heading is taken to be the one directly
    after the date heading; a stray heading in between shifts the pairing.
    """

    def __init__(self, reference_year: int = DEFAULT_REFERENCE_YEAR):
        """
        Initialize the schedule parser.

        Args:
            reference_year: Year combined with the day and month phrases
                found on the page (default: 2021)
        """
        self.reference_year = reference_year

    def parse(self, sport: Sport, html_content: str) -> ParseResult:
        """
        Parse a schedule page and append its events to the sport.

        Args:
            sport: Sport receiving the parsed events
            html_content: Raw HTML of the sport's schedule page

        Returns:
            ParseResult with counts of added events and skipped input
        """
        result = ParseResult()
        soup = BeautifulSoup(html_content, 'html.parser')

        for block in soup.select(BLOCK_SELECTOR):
            headings = [self._text(h4) for h4 in block.find_all('h4')]
            lists = block.find_all('ul')
            self._parse_block(sport, headings, lists, result)

        if result.unclassified:
            logger.warning(
                f"Skipped {len(result.unclassified)} unclassified events "
                f"for {sport.name}"
            )
        logger.info(
            f"Parsed {result.events_added} events for {sport.name} "
            f"({result.blocks_skipped} blocks skipped)"
        )
        return result

    def _parse_block(self, sport: Sport, headings: List[str], lists, result: ParseResult) -> None:
        i = 0
        while i < len(headings):
            times = self._parse_date_time(headings[i])
            if times is None:
                logger.debug(f"Skipping heading without date and time: {headings[i]!r}")
                result.blocks_skipped += 1
                i += 2
                continue

            location = self._parse_venue(headings[i + 1] if i + 1 < len(headings) else None)
            if location is None:
                logger.warning(
                    f"Skipping block without venue heading after {headings[i]!r}"
                )
                result.blocks_skipped += 1
                i += 2
                continue

            start, end = times
            item_list = lists[i // 2] if i // 2 < len(lists) else None
            names = [self._text(li) for li in item_list.find_all('li')] if item_list else []

            for name in names:
                self._add_event(sport, name, location, start, end, result)

            i += 2

    def _add_event(self, sport: Sport, name: str, location: str,
                   start: datetime, end: datetime, result: ParseResult) -> None:
        category_name = find_category(sport, name)
        if category_name is None:
            logger.warning(f"No category matches event '{name}' in {sport.name}")
            result.unclassified.append(name)
            return

        sport.categories[category_name].add_event(
            Event(name=name, location=location, start=start, end=end)
        )
        result.events_added += 1

    def _parse_date_time(self, text: str) -> Optional[Tuple[datetime, datetime]]:
        """
        Parse a "Date and Time" heading into start and end datetimes.

        Args:
            text: Heading text (e.g., "Date and Time: 24 July 10:00 - 13:00")

        Returns:
            Tuple of (start, end), or None if the heading does not match
        """
        match = DATE_TIME_PATTERN.search(text)
        if not match:
            return None

        date_phrase, start_time, end_time = match.groups()
        try:
            start = self._build_datetime(date_phrase, start_time)
            end = self._build_datetime(date_phrase, end_time)
        except (ValueError, OverflowError) as e:
            logger.warning(f"Invalid date in heading {text!r}: {e}")
            return None
        return start, end

    def _build_datetime(self, date_phrase: str, time_text: str) -> datetime:
        return dateparser.parse(f"{date_phrase} {self.reference_year} {time_text}")

    def _parse_venue(self, text: Optional[str]) -> Optional[str]:
        if text is None:
            return None
        match = VENUE_PATTERN.search(text)
        return match.group(1) if match else None

    @staticmethod
    def _text(element) -> str:
        # inline markup such as <sup> must not split words
        return " ".join(element.get_text().split())
