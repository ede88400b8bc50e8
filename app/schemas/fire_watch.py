from enum import IntEnum
from typing import Any, List, Optional, Union
from datetime import datetime
from pydantic import Field, field_validator
from app.schemas.base import BaseSchema
from app.schemas.location import Coordinates

class FireStatus(IntEnum):
	"""
	Burn status returned to callers, ordered by severity.
	NO_BURN is the strictest and compares lowest.
	"""
	NO_BURN = 0
	RESTRICTED_BURN = 1
	OPEN_BURN = 2

class PublicCategory(IntEnum):
	"""NBDNR public category codes, as published on the fire-watch dashboard."""
	OUT_OF_CONTROL = 0
	CONTAINED = 1
	UNDER_CONTROL = 2
	PATROLLED = 3
	OUT = 4

class BurnCategoryRecord(BaseSchema):
	"""
	Attributes of one feature from the NBDNR BurnCategories layer.
	VALIDDATE is an ArcGIS date field: epoch milliseconds (UTC).
	"""
	name: Optional[str] = Field(default=None, alias="NAME")
	public_category: Optional[int] = Field(default=None, alias="PUBLICCATEGORY")
	valid_date: Optional[Union[int, float, str]] = Field(default=None, alias="VALIDDATE")

	@field_validator("public_category", mode="before")
	@classmethod
	def coerce_public_category(cls, value: Any) -> Optional[int]:
		"""
		Integral codes (3, 3.0, "3") become ints; anything else becomes None
		so it falls through to the default (open burn) mapping.
		"""
		if value is None or isinstance(value, bool):
			return None
		if isinstance(value, int):
			return value
		try:
			number = float(value)
		except (TypeError, ValueError):
			return None
		if not number.is_integer():
			return None
		return int(number)

class FireLocation(BaseSchema):
	province: str
	state: str
	county: str
	country: str

class FireWatchResponse(BaseSchema):
	"""
	Fire-watch answer for one point.

	valid_to is always valid_from plus exactly 24 hours.
	"""
	status: FireStatus
	valid_from: datetime
	valid_to: datetime
	location: FireLocation
	coordinates: Coordinates
	jurisdiction: str
	restrictions: List[str]
