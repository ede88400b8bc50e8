"""
Unit tests for BurnCategoryParser.
"""
import pytest
from datetime import datetime, timezone, timedelta
from app.schemas.fire_watch import BurnCategoryRecord, FireStatus, PublicCategory
from app.utils.burn_category_parser import BurnCategoryParser, DEFAULT_RESTRICTIONS


class TestMapStatus:
	"""Test cases for BurnCategoryParser.map_status."""

	@pytest.mark.parametrize("code,expected", [
		(0, FireStatus.NO_BURN),
		(1, FireStatus.NO_BURN),
		(2, FireStatus.RESTRICTED_BURN),
		(3, FireStatus.RESTRICTED_BURN),
		(4, FireStatus.OPEN_BURN),
	])
	def test_known_codes(self, code, expected):
		assert BurnCategoryParser.map_status(code) == expected

	@pytest.mark.parametrize("code", [5, -1, 99, None])
	def test_unknown_codes_default_to_open(self, code):
		assert BurnCategoryParser.map_status(code) == FireStatus.OPEN_BURN

	def test_enum_members_accepted(self):
		assert BurnCategoryParser.map_status(PublicCategory.PATROLLED) == FireStatus.RESTRICTED_BURN

	def test_deterministic(self):
		for code in range(-2, 8):
			assert BurnCategoryParser.map_status(code) == BurnCategoryParser.map_status(code)

	def test_status_ordering(self):
		"""NO_BURN is the strictest status."""
		assert FireStatus.NO_BURN < FireStatus.RESTRICTED_BURN < FireStatus.OPEN_BURN


class TestGetRestrictions:
	"""Test cases for BurnCategoryParser.get_restrictions."""

	def test_out_of_control(self):
		restrictions = BurnCategoryParser.get_restrictions(0)
		assert restrictions[0] == "No burning permitted - active uncontrolled fires in area"
		assert len(restrictions) == 3

	def test_contained(self):
		assert "Fire crews actively working in area" in BurnCategoryParser.get_restrictions(1)

	def test_under_control(self):
		assert BurnCategoryParser.get_restrictions(2)[0] == "Restricted burning only"

	def test_patrolled(self):
		assert "Notify local fire department of burning activities" in BurnCategoryParser.get_restrictions(3)

	@pytest.mark.parametrize("code", [4, 7, None])
	def test_default(self, code):
		assert BurnCategoryParser.get_restrictions(code) == DEFAULT_RESTRICTIONS

	def test_returns_copy(self):
		"""Callers cannot mutate the shared table."""
		restrictions = BurnCategoryParser.get_restrictions(4)
		restrictions.append("extra")
		assert "extra" not in DEFAULT_RESTRICTIONS


class TestBuildResponse:
	"""Test cases for BurnCategoryParser.build_response."""

	def test_maps_record(self, fredericton):
		record = BurnCategoryRecord.model_validate({
			"NAME": "York",
			"PUBLICCATEGORY": 2,
			"VALIDDATE": 1718280000000
		})

		result = BurnCategoryParser.build_response(record, fredericton)

		assert result.status == FireStatus.RESTRICTED_BURN
		assert result.valid_from == datetime(2024, 6, 13, 12, 0, tzinfo=timezone.utc)
		assert result.valid_to - result.valid_from == timedelta(days=1)
		assert result.location.county == "York"
		assert result.location.province == "New Brunswick"
		assert result.location.state == "New Brunswick"
		assert result.location.country == "Canada"
		assert result.coordinates == fredericton
		assert result.jurisdiction == "New Brunswick Department of Natural Resources and Energy Development"
		assert result.restrictions[0] == "Restricted burning only"

	def test_missing_name_is_unknown(self, fredericton):
		record = BurnCategoryRecord.model_validate({"PUBLICCATEGORY": 0, "VALIDDATE": 1718280000000})
		result = BurnCategoryParser.build_response(record, fredericton)
		assert result.location.county == "Unknown"
		assert result.status == FireStatus.NO_BURN

	def test_missing_valid_date_raises(self, fredericton):
		record = BurnCategoryRecord.model_validate({"NAME": "York", "PUBLICCATEGORY": 0})
		with pytest.raises(ValueError):
			BurnCategoryParser.build_response(record, fredericton)

	def test_serializes_status_as_integer(self, fredericton):
		record = BurnCategoryRecord.model_validate({"NAME": "York", "PUBLICCATEGORY": 1, "VALIDDATE": 1718280000000})
		data = BurnCategoryParser.build_response(record, fredericton).to_dict()
		assert data["status"] == 0
		assert data["valid_from"].startswith("2024-06-13T12:00:00")
		assert data["valid_to"].startswith("2024-06-14T12:00:00")


class TestBuildDefaultResponse:
	"""Test cases for BurnCategoryParser.build_default_response."""

	def test_outside_jurisdiction(self, montreal):
		now = datetime(2024, 6, 13, 12, 0, tzinfo=timezone.utc)

		result = BurnCategoryParser.build_default_response(montreal, now=now)

		assert result.status == FireStatus.OPEN_BURN
		assert result.valid_from == now
		assert result.valid_to == now + timedelta(days=1)
		assert result.jurisdiction == "Outside New Brunswick jurisdiction"
		assert result.location.province == "Unknown"
		assert result.location.county == "Unknown"
		assert result.location.country == "Canada"
		assert result.coordinates == montreal
		assert result.restrictions == [
			"Location outside New Brunswick",
			"Contact local fire authorities for burning restrictions",
			"Follow provincial and municipal fire regulations",
		]

	def test_defaults_to_current_time(self, montreal):
		before = datetime.now(timezone.utc)
		result = BurnCategoryParser.build_default_response(montreal)
		after = datetime.now(timezone.utc)
		assert before <= result.valid_from <= after
		assert result.valid_to - result.valid_from == timedelta(days=1)
