"""
Parser for NBDNR burn category records.
"""
import logging
from typing import Dict, List, Optional
from datetime import datetime
from app.config import settings
from app.schemas.fire_watch import (
	BurnCategoryRecord,
	FireLocation,
	FireStatus,
	FireWatchResponse,
	PublicCategory,
)
from app.schemas.location import Coordinates
from app.utils.datetime_utils import parse_arcgis_date, utc_now, validity_window

logger = logging.getLogger(__name__)


CATEGORY_TO_STATUS: Dict[int, FireStatus] = {
	PublicCategory.OUT_OF_CONTROL: FireStatus.NO_BURN,
	PublicCategory.CONTAINED: FireStatus.NO_BURN,
	PublicCategory.UNDER_CONTROL: FireStatus.RESTRICTED_BURN,
	PublicCategory.PATROLLED: FireStatus.RESTRICTED_BURN,
	PublicCategory.OUT: FireStatus.OPEN_BURN,
}

DEFAULT_RESTRICTIONS: List[str] = [
	"Follow standard fire safety practices",
	"Check current fire weather conditions",
	"Obtain required permits",
	"Have suppression equipment available",
]

CATEGORY_RESTRICTIONS: Dict[int, List[str]] = {
	PublicCategory.OUT_OF_CONTROL: [
		"No burning permitted - active uncontrolled fires in area",
		"High fire danger conditions",
		"Contact local authorities before any outdoor activities",
	],
	PublicCategory.CONTAINED: [
		"No burning permitted - active contained fires in area",
		"Fire crews actively working in area",
		"Elevated fire danger conditions",
	],
	PublicCategory.UNDER_CONTROL: [
		"Restricted burning only",
		"Fires under control but still active",
		"Check local fire weather conditions",
		"Have suppression equipment ready",
	],
	PublicCategory.PATROLLED: [
		"Restricted burning - area under fire patrol",
		"Monitor weather conditions closely",
		"Have suppression equipment ready",
		"Notify local fire department of burning activities",
	],
	PublicCategory.OUT: DEFAULT_RESTRICTIONS,
}

UNKNOWN = "Unknown"


class BurnCategoryParser:
	"""Maps NBDNR burn category records onto fire-watch responses."""

	@staticmethod
	def map_status(public_category: Optional[int]) -> FireStatus:
		"""
		Map a public category code to a burn status.

		Args:
			public_category: NBDNR code (0-4); anything else is treated as "out"

		Returns:
			FireStatus, OPEN_BURN for unknown codes
		"""
		status = CATEGORY_TO_STATUS.get(public_category)
		if status is None:
			logger.warning(f"Unknown public category: {public_category}, defaulting to OPEN_BURN")
			return FireStatus.OPEN_BURN
		return status

	@staticmethod
	def get_restrictions(public_category: Optional[int]) -> List[str]:
		return list(CATEGORY_RESTRICTIONS.get(public_category, DEFAULT_RESTRICTIONS))

	@staticmethod
	def build_response(record: BurnCategoryRecord, coordinates: Coordinates) -> FireWatchResponse:
		"""
		Build the response for a point inside the NBDNR layer.

		Raises:
			ValueError: VALIDDATE is missing or unparseable
		"""
		valid_from, valid_to = validity_window(parse_arcgis_date(record.valid_date))
		return FireWatchResponse(
			status=BurnCategoryParser.map_status(record.public_category),
			valid_from=valid_from,
			valid_to=valid_to,
			location=FireLocation(
				province=settings.region_name,
				state=settings.region_name,
				county=record.name or UNKNOWN,
				country=settings.region_country
			),
			coordinates=coordinates,
			jurisdiction=settings.region_jurisdiction,
			restrictions=BurnCategoryParser.get_restrictions(record.public_category)
		)

	@staticmethod
	def build_default_response(coordinates: Coordinates, now: Optional[datetime] = None) -> FireWatchResponse:
		"""
		Response for points the layer does not cover (outside the province).
		Open burning, subject to whatever local authority applies there.
		"""
		valid_from, valid_to = validity_window(now or utc_now())
		return FireWatchResponse(
			status=FireStatus.OPEN_BURN,
			valid_from=valid_from,
			valid_to=valid_to,
			location=FireLocation(
				province=UNKNOWN,
				state=UNKNOWN,
				county=UNKNOWN,
				country=settings.region_country
			),
			coordinates=coordinates,
			jurisdiction=settings.outside_jurisdiction,
			restrictions=[
				f"Location outside {settings.region_name}",
				"Contact local fire authorities for burning restrictions",
				"Follow provincial and municipal fire regulations",
			]
		)
