"""
HTTP client for the NBDNR BurnCategories ArcGIS layer.
"""
import logging
from typing import Optional, Dict, Any
import httpx
from app.config import settings
from app.http_client.base_client import BaseHTTPClient
from app.schemas.fire_watch import BurnCategoryRecord
from app.schemas.location import Coordinates

logger = logging.getLogger(__name__)


class ArcGISResponseError(ValueError):
	"""The layer answered 200 but with an error object or an unexpected shape."""


class NBDNRClient(BaseHTTPClient):
	"""Client for point queries against the NBDNR burn category layer."""

	OUT_FIELDS = "NAME,PUBLICCATEGORY,VALIDDATE"

	def __init__(
		self,
		base_url: Optional[str] = None,
		transport: Optional[httpx.AsyncBaseTransport] = None
	):
		default_headers = {
			"User-Agent": settings.api_user_agent
		}
		super().__init__(
			base_url or settings.nbdnr_base_url,
			default_headers=default_headers,
			timeout=settings.http_timeout_seconds,
			transport=transport
		)

	@classmethod
	def build_query_params(cls, coordinates: Coordinates) -> Dict[str, str]:
		"""
		Point-intersection query parameters.
		ArcGIS expects WGS84 points as "x,y", i.e. longitude first.
		"""
		return {
			"geometry": f"{coordinates.longitude},{coordinates.latitude}",
			"geometryType": "esriGeometryPoint",
			"spatialRel": "esriSpatialRelIntersects",
			"inSR": "4326",
			"outFields": cls.OUT_FIELDS,
			"f": "json"
		}

	async def query_burn_category(self, coordinates: Coordinates) -> Optional[BurnCategoryRecord]:
		"""
		Fetch the burn category covering a point.

		Args:
			coordinates: Validated WGS84 point

		Returns:
			Attributes of the first intersecting feature, or None when the
			point is not covered by the layer

		Raises:
			httpx.HTTPError: transport failure, timeout or non-2xx status
			ArcGISResponseError: error payload or malformed body
		"""
		data = await self.get("/query", params=self.build_query_params(coordinates))
		return self.parse_query_response(data)

	@staticmethod
	def parse_query_response(data: Any) -> Optional[BurnCategoryRecord]:
		if not isinstance(data, dict):
			raise ArcGISResponseError(f"Expected a JSON object, got {type(data).__name__}")

		error = data.get("error")
		if error:
			message = error.get("message") if isinstance(error, dict) else error
			raise ArcGISResponseError(f"NBDNR service error: {message}")

		features = data.get("features")
		if not isinstance(features, list):
			raise ArcGISResponseError("NBDNR response has no features array")

		logger.info(f"NBDNR query returned {len(features)} feature(s)")
		if not features:
			return None

		first = features[0]
		attributes = first.get("attributes") if isinstance(first, dict) else None
		if not isinstance(attributes, dict):
			raise ArcGISResponseError("NBDNR feature has no attributes")

		return BurnCategoryRecord.model_validate(attributes)
