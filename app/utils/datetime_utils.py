"""
Datetime utility functions.
"""
from typing import Optional, Union
from datetime import datetime, timezone, timedelta
import logging

logger = logging.getLogger(__name__)

# Fire-watch answers stay valid for a fixed 24 hours, independent of DST
VALIDITY_WINDOW = timedelta(days=1)


def utc_now() -> datetime:
	"""Current time as an aware UTC datetime."""
	return datetime.now(timezone.utc)


def parse_timestamp_ms(timestamp_ms: Optional[Union[int, float]]) -> Optional[datetime]:
	"""
	Convert milliseconds timestamp to datetime.

	Args:
		timestamp_ms: Timestamp in milliseconds

	Returns:
		datetime object in UTC, or None if timestamp is None
	"""
	if timestamp_ms is None:
		return None
	return datetime.fromtimestamp(timestamp_ms / 1000.0, tz=timezone.utc)


def parse_datetime_to_utc(dt_string: Optional[str]) -> Optional[datetime]:
	"""
	Parse a datetime string to a datetime object in UTC.

	Handles formats like:
	- 2025-12-09T04:45:00-08:00 (with timezone offset)
	- 2025-12-09T04:45:00Z (Zulu/UTC)
	- 2025-12-09 (date only, midnight UTC)

	Args:
		dt_string: ISO format datetime string or None

	Returns:
		datetime object in UTC timezone or None
	"""
	if dt_string is None:
		return None
	try:
		if dt_string.endswith('Z'):
			dt_string = dt_string[:-1] + '+00:00'

		dt = datetime.fromisoformat(dt_string)

		# Naive values are taken as UTC
		if dt.tzinfo is not None:
			dt = dt.astimezone(timezone.utc)
		else:
			dt = dt.replace(tzinfo=timezone.utc)

		return dt
	except (ValueError, AttributeError) as e:
		logger.warning(f"Failed to parse datetime string '{dt_string}': {str(e)}")
		return None


def parse_arcgis_date(value: Optional[Union[int, float, str]]) -> datetime:
	"""
	Parse an ArcGIS date attribute into an aware UTC datetime.

	ArcGIS returns date fields as epoch milliseconds. Numeric strings are
	treated the same way; any other string must be ISO-8601.

	Raises:
		ValueError: value is missing or cannot be interpreted as a date
	"""
	if value is None or isinstance(value, bool):
		raise ValueError("ArcGIS date value is missing")
	if isinstance(value, (int, float)):
		try:
			return parse_timestamp_ms(value)
		except (OverflowError, OSError) as e:
			raise ValueError(f"ArcGIS date value out of range: {value}") from e
	text = str(value).strip()
	try:
		return parse_arcgis_date(float(text))
	except ValueError:
		pass
	parsed = parse_datetime_to_utc(text)
	if parsed is None:
		raise ValueError(f"Unrecognized ArcGIS date value: {value!r}")
	return parsed


def validity_window(valid_from: datetime) -> tuple[datetime, datetime]:
	"""Return (valid_from, valid_to) with valid_to exactly 24 hours later."""
	return valid_from, valid_from + VALIDITY_WINDOW
