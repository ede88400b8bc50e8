"""
Service for fire-watch (burn status) lookups.
"""
import logging
import httpx
from app.exceptions import UpstreamUnavailableError
from app.http_client.nbdnr_client import NBDNRClient
from app.schemas.fire_watch import FireWatchResponse
from app.schemas.location import Coordinates
from app.utils.burn_category_parser import BurnCategoryParser

logger = logging.getLogger(__name__)


class FireWatchService:
	"""Service for resolving the burn status at a point."""

	@staticmethod
	async def get_fire_watch_status(coordinates: Coordinates) -> FireWatchResponse:
		"""
		Resolve the fire-watch status for already validated coordinates.

		Algorithm:
		1. Query the NBDNR burn category layer for the feature containing the point
		2. No feature: the point is outside New Brunswick, return the default (open burn) response
		3. Otherwise map the first feature's public category to a status and restrictions

		Args:
			coordinates: Validated WGS84 point

		Returns:
			FireWatchResponse

		Raises:
			UpstreamUnavailableError: NBDNR unreachable, timed out, or answered with an error/malformed payload
		"""
		try:
			async with NBDNRClient() as client:
				record = await client.query_burn_category(coordinates)

			if record is None:
				logger.info(
					"No burn category at point, using default response",
					extra={"extra_fields": {"latitude": coordinates.latitude, "longitude": coordinates.longitude}}
				)
				return BurnCategoryParser.build_default_response(coordinates)

			return BurnCategoryParser.build_response(record, coordinates)
		except (httpx.HTTPError, ValueError) as e:
			logger.error(
				f"Error fetching NBDNR fire watch data: {e}",
				exc_info=True,
				extra={"extra_fields": {"latitude": coordinates.latitude, "longitude": coordinates.longitude}}
			)
			raise UpstreamUnavailableError("Failed to fetch fire watch data from NBDNR service") from e
