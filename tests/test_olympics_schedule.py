"""Unit tests for OlympicsScheduleScraper."""
from unittest.mock import patch

import pytest
import responses
from requests.exceptions import RequestException, Timeout

from processor.models import Sport
from scraper.olympics_schedule import OlympicsScheduleScraper

ATHLETICS_URL = "https://olympics.com/tokyo-2020/en/schedule/athletics-schedule/"


@pytest.fixture
def athletics():
    return Sport("Athletics", "/tokyo-2020/en/d3images/pictograms/olympics/picto-ath.svg")


@pytest.fixture(autouse=True)
def no_sleep():
    with patch('scraper.olympics_schedule.time.sleep') as mock_sleep:
        yield mock_sleep


class TestOlympicsScheduleScraper:
    """Test cases for OlympicsScheduleScraper class."""

    @responses.activate
    def test_fetch_schedule_success(self, athletics):
        """Test successful schedule fetching."""
        responses.add(responses.GET, ATHLETICS_URL, body="<html>schedule</html>", status=200)

        scraper = OlympicsScheduleScraper(timeout=30)
        html = scraper.fetch_schedule(athletics)

        assert html == "<html>schedule</html>"
        assert len(responses.calls) == 1
        assert responses.calls[0].request.url == ATHLETICS_URL

    @responses.activate
    def test_fetch_schedule_with_retry_success(self, athletics, no_sleep):
        """Test retry logic succeeds after initial failures."""
        responses.add(responses.GET, ATHLETICS_URL, body="Server Error", status=500)
        responses.add(responses.GET, ATHLETICS_URL, body="Server Error", status=503)
        responses.add(responses.GET, ATHLETICS_URL, body="<html>ok</html>", status=200)

        scraper = OlympicsScheduleScraper(timeout=30)
        html = scraper.fetch_schedule(athletics)

        assert html == "<html>ok</html>"
        assert len(responses.calls) == 3
        assert [c.args[0] for c in no_sleep.call_args_list] == [1, 2]

    @responses.activate
    def test_fetch_schedule_all_retries_fail(self, athletics):
        """Test that the last error is raised when all retries fail."""
        for _ in range(3):
            responses.add(responses.GET, ATHLETICS_URL, body="Not Found", status=404)

        scraper = OlympicsScheduleScraper(timeout=30)

        with pytest.raises(RequestException):
            scraper.fetch_schedule(athletics)

        assert len(responses.calls) == 3

    @responses.activate
    def test_fetch_schedule_timeout(self, athletics):
        """Test timeout handling."""
        for _ in range(3):
            responses.add(responses.GET, ATHLETICS_URL, body=Timeout("Request timed out"))

        scraper = OlympicsScheduleScraper(timeout=5)

        with pytest.raises(Timeout):
            scraper.fetch_schedule(athletics)

        assert len(responses.calls) == 3

    @responses.activate
    def test_fetch_uses_sport_url(self):
        """Test that the request goes to the URL derived from the sport name."""
        url = "https://olympics.com/tokyo-2020/en/schedule/baseball-schedule/"
        responses.add(responses.GET, url, body="<html></html>", status=200)

        scraper = OlympicsScheduleScraper()
        scraper.fetch_schedule(Sport("Baseball/Softball", "/picto-bsb.svg"))

        assert responses.calls[0].request.url == url
