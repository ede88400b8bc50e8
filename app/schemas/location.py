from pydantic import ConfigDict, Field
from app.schemas.base import BaseSchema

class Coordinates(BaseSchema):
	"""WGS84 point. Range-checked by the validators before construction."""
	model_config = ConfigDict(frozen=True, populate_by_name=True)

	latitude: float = Field(ge=-90, le=90)
	longitude: float = Field(ge=-180, le=180)
