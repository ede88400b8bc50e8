"""
Unit tests for request parameter validators.
"""
import pytest
from app.exceptions import (
	EmptyLocationError,
	LatitudeOutOfRangeError,
	LongitudeOutOfRangeError,
	MissingParameterError,
	NotANumberError,
	ValidationError,
)
from app.schemas.location import Coordinates
from app.utils.validators import validate_coordinates, validate_location


class TestValidateCoordinates:
	"""Test cases for validate_coordinates."""

	def test_valid_strings(self):
		"""Query-string values are parsed into Coordinates."""
		result = validate_coordinates("45.9636", "-66.6431")
		assert isinstance(result, Coordinates)
		assert result.latitude == 45.9636
		assert result.longitude == -66.6431

	def test_valid_numbers(self):
		result = validate_coordinates(45.5, -66)
		assert result.latitude == 45.5
		assert result.longitude == -66.0

	@pytest.mark.parametrize("lat,lng", [
		("-90", "0"),
		("90", "0"),
		("0", "-180"),
		("0", "180"),
		("-90", "-180"),
		("90", "180"),
	])
	def test_boundaries_are_inclusive(self, lat, lng):
		"""Range bounds themselves are valid."""
		result = validate_coordinates(lat, lng)
		assert result.latitude == float(lat)
		assert result.longitude == float(lng)

	@pytest.mark.parametrize("lat", ["-90.0001", "90.0001", "180", "-1000"])
	def test_latitude_out_of_range(self, lat):
		with pytest.raises(LatitudeOutOfRangeError) as exc_info:
			validate_coordinates(lat, "0")
		assert exc_info.value.status_code == 400
		assert exc_info.value.message == "Latitude must be between -90 and 90"

	@pytest.mark.parametrize("lng", ["-180.0001", "180.0001", "360"])
	def test_longitude_out_of_range(self, lng):
		with pytest.raises(LongitudeOutOfRangeError) as exc_info:
			validate_coordinates("0", lng)
		assert exc_info.value.message == "Longitude must be between -180 and 180"

	def test_latitude_checked_before_longitude(self):
		"""When both are out of range the latitude error wins."""
		with pytest.raises(LatitudeOutOfRangeError):
			validate_coordinates("100", "200")

	@pytest.mark.parametrize("lat,lng", [
		("abc", "0"),
		("0", "abc"),
		("nan", "0"),
		("0", "inf"),
		("-Infinity", "0"),
		("  ", "0"),
		("45.5,66", "0"),
	])
	def test_not_a_number(self, lat, lng):
		with pytest.raises(NotANumberError) as exc_info:
			validate_coordinates(lat, lng)
		assert exc_info.value.error == "Invalid coordinates"

	@pytest.mark.parametrize("lat,lng", [
		(None, "0"),
		("0", None),
		("", "0"),
		(None, None),
	])
	def test_missing_parameter(self, lat, lng):
		with pytest.raises(MissingParameterError) as exc_info:
			validate_coordinates(lat, lng)
		assert exc_info.value.message == "Both lat and lng query parameters are required"

	def test_all_errors_are_validation_errors(self):
		"""Every coordinate failure maps to a 400."""
		for lat, lng in [(None, "0"), ("x", "0"), ("91", "0"), ("0", "181")]:
			with pytest.raises(ValidationError) as exc_info:
				validate_coordinates(lat, lng)
			assert exc_info.value.status_code == 400


class TestValidateLocation:
	"""Test cases for validate_location."""

	def test_trims_whitespace(self):
		assert validate_location("  Montreal  ") == "Montreal"

	def test_preserves_non_ascii(self):
		assert validate_location("Café de Flore, Paris") == "Café de Flore, Paris"

	@pytest.mark.parametrize("location", [None, ""])
	def test_missing(self, location):
		with pytest.raises(MissingParameterError) as exc_info:
			validate_location(location)
		assert exc_info.value.error == "Missing required parameter"
		assert exc_info.value.message == "location query parameter is required"

	@pytest.mark.parametrize("location", [" ", "   \t ", "\n"])
	def test_whitespace_only(self, location):
		with pytest.raises(EmptyLocationError) as exc_info:
			validate_location(location)
		assert exc_info.value.error == "Invalid location"
		assert exc_info.value.message == "location must be a non-empty string"
