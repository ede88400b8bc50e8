from fastapi import APIRouter, Query
from typing import Optional
from app.exceptions import handle_service_exceptions
from app.services.geocoding_service import GeocodingService
from app.utils.validators import validate_location
import logging

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["geocoding"])


@router.get("/geocode")
@handle_service_exceptions
async def geocode(
	location: Optional[str] = Query(default=None, description="Free-text place name or address")
):
	"""
	Resolve a location name to coordinates.

	Always answers 200 once the parameter is valid; lookups that find
	nothing, or whose providers all fail, carry a `message` instead of
	coordinates.
	"""
	query = validate_location(location)
	result = await GeocodingService().geocode(query)
	return result.to_response()
