"""S3 storage for generated calendar files."""
import logging

import boto3
from botocore.exceptions import ClientError

from exporter.ics_calendar import IcsCalendar

logger = logging.getLogger(__name__)


class S3CalendarStore:
    """Publishes serialized calendars to an S3 bucket."""

    CONTENT_TYPE = "text/calendar; charset=utf-8"

    def __init__(self, bucket_name: str, prefix: str = ""):
        """
        Initialize S3 client and bucket settings.

        Args:
            bucket_name: Name of the S3 bucket
            prefix: Key prefix for stored calendars (default: none)
        """
        self.bucket_name = bucket_name
        self.prefix = prefix
        self.s3 = boto3.client('s3')
        logger.info(f"Initialized S3CalendarStore for bucket: {bucket_name}")

    def key_for(self, calendar: IcsCalendar) -> str:
        return f"{self.prefix}{calendar.filename}"

    def save(self, calendar: IcsCalendar) -> str:
        """
        Upload a calendar, replacing any previous file with the same name.

        Args:
            calendar: Calendar to serialize and upload

        Returns:
            S3 object key of the stored calendar

        Raises:
            ClientError: If the upload fails
        """
        key = self.key_for(calendar)
        body = calendar.to_ical()

        try:
            self.s3.put_object(
                Bucket=self.bucket_name,
                Key=key,
                Body=body,
                ContentType=self.CONTENT_TYPE
            )
        except ClientError as e:
            logger.error(f"Error uploading calendar to s3://{self.bucket_name}/{key}: {e}")
            raise

        logger.info(f"Stored calendar ({len(body)} bytes) at s3://{self.bucket_name}/{key}")
        return key
