from typing import Any, Dict, Optional
from pydantic import Field
from app.schemas.base import BaseSchema
from app.schemas.location import Coordinates

# Messages distinguishing the non-success outcomes of a geocode lookup
MESSAGE_NOT_RESOLVED = "Location could not be resolved"
MESSAGE_FAILED = "Failed to resolve location"
MESSAGE_NO_COORDINATES = "Location found but coordinates unavailable"

class GeocodeCandidate(BaseSchema):
	"""
	One provider match, normalized across providers.
	latitude/longitude are None when the provider gave nothing usable.
	"""
	latitude: Optional[float] = None
	longitude: Optional[float] = None
	formatted_address: Optional[str] = None
	country: Optional[str] = None
	city: Optional[str] = None
	state: Optional[str] = None

	@property
	def has_coordinates(self) -> bool:
		return self.latitude is not None and self.longitude is not None

class GeocodeResult(BaseSchema):
	"""
	Outcome of a geocode lookup. Always a 200 response.

	Either coordinates are set (success, no message) or coordinates are
	None and message explains why.
	"""
	location: str
	coordinates: Optional[Coordinates] = None
	formatted_address: Optional[str] = Field(default=None, alias="formattedAddress")
	country: Optional[str] = None
	city: Optional[str] = None
	state: Optional[str] = None
	source: Optional[str] = None
	message: Optional[str] = None

	@classmethod
	def unresolved(cls, location: str, message: str) -> "GeocodeResult":
		return cls(location=location, coordinates=None, message=message)

	@classmethod
	def from_candidate(cls, location: str, candidate: GeocodeCandidate) -> "GeocodeResult":
		return cls(
			location=location,
			coordinates=Coordinates(latitude=candidate.latitude, longitude=candidate.longitude),
			formatted_address=candidate.formatted_address,
			country=candidate.country,
			city=candidate.city,
			state=candidate.state,
			source="geocoding"
		)

	def to_response(self) -> Dict[str, Any]:
		"""
		Response body. Success carries every address field (null when
		unknown) and no message; other outcomes carry only location,
		coordinates and message.
		"""
		if self.message is not None:
			return {
				"location": self.location,
				"coordinates": None,
				"message": self.message
			}
		body = self.to_dict()
		body.pop("message", None)
		return body
