"""Schedule page fetcher for Tokyo 2020 sports."""
import logging
import time

import requests

from processor.models import Sport

logger = logging.getLogger(__name__)


class OlympicsScheduleScraper:
    """Fetches the raw schedule page of a sport."""

    MAX_RETRIES = 3
    BASE_DELAY = 1  # seconds

    def __init__(self, timeout: int = 30):
        """
        Initialize the schedule scraper.

        Args:
            timeout: HTTP request timeout in seconds (default: 30)
        """
        self.timeout = timeout

    def fetch_schedule(self, sport: Sport) -> str:
        """
        Fetch a sport's schedule page with retry logic.

        Args:
            sport: Sport whose schedule page is requested

        Returns:
            HTML content as string

        Raises:
            requests.RequestException: If all retry attempts fail
        """
        url = sport.url
        logger.info(f"Fetching schedule for {sport.name} from {url}")

        for attempt in range(self.MAX_RETRIES):
            try:
                response = requests.get(url, timeout=self.timeout)
                response.raise_for_status()
                return response.text

            except requests.RequestException as e:
                if attempt < self.MAX_RETRIES - 1:
                    delay = self.BASE_DELAY * (2 ** attempt)
                    logger.warning(
                        f"Request for {sport.name} failed "
                        f"(attempt {attempt + 1}/{self.MAX_RETRIES}): {e}. "
                        f"Retrying in {delay} seconds..."
                    )
                    time.sleep(delay)
                else:
                    logger.error(
                        f"All {self.MAX_RETRIES} attempts to fetch {sport.name} "
                        f"failed. Last error: {e}"
                    )
                    raise
