"""Unit tests for CalendarBuilder."""
from datetime import datetime
from unittest.mock import Mock

import pytest
import requests

from processor.calendar_builder import CalendarBuilder, build_calendar_entries, calendar_name
from processor.models import Category, Event, Sport
from processor.schedule_parser import ScheduleParser

SCHEDULE_HTML = """
<html>
    <body>
        <div class="tk-article__part markdown">
            <h4>Date and Time: 24 July 10:00 - 13:00</h4>
            <h4>Venues: Tokyo Stadium</h4>
            <ul>
                <li>Men's 100m Heats</li>
                <li>Women's 100m Heats</li>
                <li>Men's 100m Repechage</li>
            </ul>
            <h4>Date and Time: 25 July 19:00 - 21:00</h4>
            <h4>Venues: Tokyo Stadium</h4>
            <ul>
                <li>Men's 100m</li>
            </ul>
        </div>
    </body>
</html>
"""


@pytest.fixture
def sport():
    sport = Sport("Athletics", "/picto-ath.svg")
    for name in ["Men's 100m", "Women's 100m"]:
        sport.categories[name] = Category(name)
    return sport


class TestCalendarName:
    """Test cases for calendar_name."""

    def test_single_sport(self):
        assert calendar_name(["Archery"]) == "Tokyo 2020 - Archery"

    def test_several_sports(self):
        assert calendar_name(["Archery", "Rowing"]) == "Tokyo 2020"


class TestBuildCalendarEntries:
    """Test cases for build_calendar_entries."""

    def test_one_entry_per_group(self, sport):
        """Test that events sharing start, end and location form one entry."""
        start, end = datetime(2021, 7, 24, 10, 0), datetime(2021, 7, 24, 13, 0)
        sport.categories["Men's 100m"].add_event(Event("Men's 100m Heats", "Tokyo Stadium", start, end))
        sport.categories["Women's 100m"].add_event(Event("Women's 100m Heats", "Tokyo Stadium", start, end))

        entries = build_calendar_entries(sport)

        assert len(entries) == 1
        entry = entries[0]
        assert entry.title == "Athletics"
        assert entry.description == "Men's 100m\\n- Heats\\n\\nWomen's 100m\\n- Heats"
        assert entry.location == "Tokyo Stadium"
        assert entry.start == start
        assert entry.end == end
        assert entry.url == "https://olympics.com/tokyo-2020/en/schedule/athletics-schedule/"

    def test_no_events(self, sport):
        assert build_calendar_entries(sport) == []


class TestCalendarBuilder:
    """Test cases for CalendarBuilder class."""

    def test_build_entries(self, sport):
        """Test the full fetch, parse, group and describe cycle."""
        scraper = Mock()
        scraper.fetch_schedule.return_value = SCHEDULE_HTML
        builder = CalendarBuilder(scraper, ScheduleParser())

        entries = builder.build_entries(sport)

        scraper.fetch_schedule.assert_called_once_with(sport)
        assert len(entries) == 2
        assert entries[0].description == (
            "Men's 100m\\n- Heats\\n- Repechage\\n\\nWomen's 100m\\n- Heats"
        )
        assert entries[0].start == datetime(2021, 7, 24, 10, 0)
        assert entries[1].description == "Men's 100m\\n- Main Event"
        assert entries[1].end == datetime(2021, 7, 25, 21, 0)

        result = builder.parse_results["Athletics"]
        assert result.events_added == 4
        assert result.unclassified == []

    def test_fetch_failure_propagates(self, sport):
        """Test that retrieval errors are not swallowed."""
        scraper = Mock()
        scraper.fetch_schedule.side_effect = requests.ConnectionError("Network error")
        builder = CalendarBuilder(scraper, ScheduleParser())

        with pytest.raises(requests.ConnectionError):
            builder.build_entries(sport)

        assert sport.event_count() == 0
        assert "Athletics" not in builder.parse_results
