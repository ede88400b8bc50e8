"""
Request parameter validation. Runs before any outbound call.
"""
import math
from typing import Any, Optional
from app.exceptions import (
	EmptyLocationError,
	LatitudeOutOfRangeError,
	LongitudeOutOfRangeError,
	MissingParameterError,
	NotANumberError,
)
from app.schemas.location import Coordinates


def _is_missing(value: Any) -> bool:
	return value is None or value == ""


def parse_finite_float(value: Any) -> float:
	"""
	Parse a query parameter or number as a finite float.

	Raises:
		NotANumberError: value is not numeric, or is nan/inf
	"""
	if isinstance(value, bool):
		raise NotANumberError()
	try:
		number = float(value.strip() if isinstance(value, str) else value)
	except (TypeError, ValueError):
		raise NotANumberError()
	if not math.isfinite(number):
		raise NotANumberError()
	return number


def validate_coordinates(latitude: Any, longitude: Any) -> Coordinates:
	"""
	Validate a latitude/longitude pair. Range bounds are inclusive.

	Args:
		latitude: Latitude as a string or number
		longitude: Longitude as a string or number

	Returns:
		Coordinates

	Raises:
		MissingParameterError, NotANumberError,
		LatitudeOutOfRangeError, LongitudeOutOfRangeError
	"""
	if _is_missing(latitude) or _is_missing(longitude):
		raise MissingParameterError("Both lat and lng query parameters are required")

	lat = parse_finite_float(latitude)
	lng = parse_finite_float(longitude)

	if lat < -90 or lat > 90:
		raise LatitudeOutOfRangeError()
	if lng < -180 or lng > 180:
		raise LongitudeOutOfRangeError()

	return Coordinates(latitude=lat, longitude=lng)


def validate_location(location: Optional[str]) -> str:
	"""Return the trimmed location text, rejecting missing or blank input."""
	if location is None or location == "":
		raise MissingParameterError(
			"location query parameter is required",
			error="Missing required parameter"
		)
	if not isinstance(location, str) or location.strip() == "":
		raise EmptyLocationError()
	return location.strip()
