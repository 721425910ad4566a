"""AWS Lambda handler for the Tokyo 2020 schedule calendar generator."""
import json
import logging
import os
import time
from typing import Any, Dict, List

import requests

from exporter.ics_calendar import IcsCalendar
from processor.calendar_builder import CalendarBuilder, calendar_name
from processor.registry import SportRegistry, UnknownSportError
from processor.schedule_parser import DEFAULT_REFERENCE_YEAR, ScheduleParser
from scraper.olympics_schedule import OlympicsScheduleScraper
from storage.s3_calendar_store import S3CalendarStore

# Attributes present on every LogRecord; anything else came from extra=
_RESERVED_ATTRS = set(vars(logging.makeLogRecord({}))) | {'message', 'asctime'}


class JsonFormatter(logging.Formatter):
    """Custom JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data = {
            'timestamp': self.formatTime(record),
            'level': record.levelname,
            'message': record.getMessage(),
            'logger': record.name
        }

        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS and key not in log_data:
                log_data[key] = value

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


def setup_logging(log_level: str = 'INFO') -> None:
    """
    Configure logging with JSON formatter.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    root_logger = logging.getLogger()

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    root_logger.addHandler(handler)

    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))


def requested_sports(event: Dict[str, Any]) -> List[str]:
    """
    Read the sport selection from the invocation payload.

    Falls back to the comma-separated SPORTS environment variable when the
    payload does not name any sports. Non-string items are ignored and a
    sport named more than once is kept only at its first position.
    """
    sports = event.get('sports') if isinstance(event, dict) else None
    if isinstance(sports, str):
        sports = [sports]
    if not sports:
        sports = os.environ.get('SPORTS', '').split(',')

    names = [name.strip() for name in sports if isinstance(name, str) and name.strip()]
    return list(dict.fromkeys(names))


def _response(status_code: int, body: Dict[str, Any]) -> Dict[str, Any]:
    return {'statusCode': status_code, 'body': json.dumps(body)}


def lambda_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Build a calendar for the selected sports and publish it to S3.

    Args:
        event: Invocation payload, e.g. {"sports": ["Archery", "Rowing"]}
        context: Lambda context object

    Returns:
        Response dict with statusCode and summary statistics
    """
    # Read configuration from environment variables
    log_level = os.environ.get('LOG_LEVEL', 'INFO')
    timeout_seconds = int(os.environ.get('TIMEOUT_SECONDS', '30'))
    reference_year = int(os.environ.get('REFERENCE_YEAR', str(DEFAULT_REFERENCE_YEAR)))
    bucket_name = os.environ.get('CALENDAR_BUCKET', 'olympics-calendars')
    key_prefix = os.environ.get('CALENDAR_PREFIX', '')

    # Initialize logging
    setup_logging(log_level)
    logger = logging.getLogger(__name__)

    # Log Lambda execution start
    start_time = time.time()
    sport_names = requested_sports(event)
    logger.info(
        "Lambda execution started",
        extra={
            'sports': sport_names,
            'reference_year': reference_year,
            'bucket_name': bucket_name
        }
    )

    if not sport_names:
        logger.error("No sports selected")
        return _response(400, {'message': 'No sports selected'})

    # Resolve requested sports against a fresh registry
    registry = SportRegistry()
    try:
        sports = registry.select(sport_names)
    except UnknownSportError as e:
        logger.error(str(e))
        return _response(400, {
            'message': 'Unknown sports requested',
            'unknown_sports': e.names
        })

    try:
        # Instantiate components
        scraper = OlympicsScheduleScraper(timeout=timeout_seconds)
        parser = ScheduleParser(reference_year=reference_year)
        builder = CalendarBuilder(scraper, parser)
        store = S3CalendarStore(bucket_name=bucket_name, prefix=key_prefix)
        calendar = IcsCalendar(calendar_name(sport_names))

        # Fetch, parse and group each sport in turn
        statistics = {}
        for sport in sports:
            try:
                entries = builder.build_entries(sport)
            except requests.RequestException as e:
                # no calendar is published when any sport is missing
                logger.error(
                    f"Failed to fetch schedule for {sport.name}: {str(e)}",
                    extra={'error_type': type(e).__name__},
                    exc_info=True
                )
                duration = time.time() - start_time
                return _response(500, {
                    'message': 'Failed to fetch sport schedule',
                    'sport': sport.name,
                    'error': str(e),
                    'error_type': type(e).__name__,
                    'duration_seconds': round(duration, 2)
                })

            # Record per-sport parse statistics
            calendar.add_entries(entries)
            result = builder.parse_results[sport.name]
            statistics[sport.name] = {
                'events_parsed': result.events_added,
                'blocks_skipped': result.blocks_skipped,
                'unclassified_events': len(result.unclassified),
                'calendar_entries': len(entries)
            }

        # Publish the calendar to S3
        try:
            logger.info(f"Storing calendar '{calendar.name}'")
            key = store.save(calendar)
        except Exception as e:
            logger.error(
                f"Error storing calendar: {str(e)}",
                extra={'error_type': type(e).__name__},
                exc_info=True
            )
            duration = time.time() - start_time
            return _response(500, {
                'message': 'Failed to store calendar',
                'error': str(e),
                'error_type': type(e).__name__,
                'duration_seconds': round(duration, 2)
            })

        # Calculate execution duration
        duration = time.time() - start_time
        logger.info(
            "Lambda execution completed successfully",
            extra={
                'duration_seconds': round(duration, 2),
                'calendar_entries': len(calendar.entries),
                'key': key
            }
        )

        # Return success response
        return _response(200, {
            'message': 'Calendar generated successfully',
            'calendar_name': calendar.name,
            'bucket': bucket_name,
            'key': key,
            'statistics': {
                'sports': statistics,
                'calendar_entries': len(calendar.entries),
                'duration_seconds': round(duration, 2)
            }
        })

    except Exception as e:
        duration = time.time() - start_time
        logger.error(
            f"Lambda execution failed: {str(e)}",
            extra={
                'duration_seconds': round(duration, 2),
                'error_type': type(e).__name__
            },
            exc_info=True
        )
        return _response(500, {
            'message': 'Calendar generation failed',
            'error': str(e),
            'error_type': type(e).__name__,
            'duration_seconds': round(duration, 2)
        })
