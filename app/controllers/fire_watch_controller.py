from fastapi import APIRouter, Query
from typing import Optional
from app.exceptions import handle_service_exceptions
from app.schemas.fire_watch import FireWatchResponse
from app.services.fire_watch_service import FireWatchService
from app.utils.validators import validate_coordinates
import logging

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["fire-watch"])


@router.get("/fire-watch", response_model=FireWatchResponse)
@handle_service_exceptions
async def get_fire_watch(
	lat: Optional[str] = Query(default=None, description="Latitude in decimal degrees (-90 to 90)"),
	lng: Optional[str] = Query(default=None, description="Longitude in decimal degrees (-180 to 180)")
):
	"""
	Get the burn status for a point.

	Args:
		lat: Latitude
		lng: Longitude

	Returns:
		FireWatchResponse; points outside New Brunswick get the default open-burn answer
	"""
	coordinates = validate_coordinates(lat, lng)
	logger.info(f"Fire watch lookup for ({coordinates.latitude}, {coordinates.longitude})")
	return await FireWatchService.get_fire_watch_status(coordinates)
