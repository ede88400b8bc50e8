"""
Forward-geocoding providers (LocationIQ, OpenStreetMap Nominatim).

Both providers answer with a JSON array of OSM-style places:
	[{"lat": "45.5017", "lon": "-73.5673", "display_name": "...", "address": {...}}]
Each client normalizes that into GeocodeCandidate objects so the geocoding
service never sees provider-specific field names.
"""
import math
import logging
from abc import abstractmethod
from typing import Optional, Dict, Any, List
import httpx
from app.config import settings
from app.http_client.base_client import BaseHTTPClient
from app.schemas.geocoding import GeocodeCandidate

logger = logging.getLogger(__name__)

NO_MATCH_ERROR = "Unable to geocode"


class GeocodingProviderError(ValueError):
	"""Provider is misconfigured or answered with a malformed payload."""


def _coerce_coordinate(value: Any, limit: float) -> Optional[float]:
	"""Float within [-limit, limit], or None when missing or unusable."""
	if value is None or isinstance(value, bool):
		return None
	try:
		number = float(value)
	except (TypeError, ValueError):
		return None
	if not math.isfinite(number) or abs(number) > limit:
		return None
	return number


class GeocodingProvider(BaseHTTPClient):
	"""Base class for providers returning OSM-style search results."""

	name: str = "geocoding"

	def __init__(
		self,
		base_url: str,
		transport: Optional[httpx.AsyncBaseTransport] = None
	):
		default_headers = {
			"User-Agent": settings.api_user_agent
		}
		super().__init__(
			base_url,
			default_headers=default_headers,
			timeout=settings.http_timeout_seconds,
			transport=transport
		)

	@abstractmethod
	def search_params(self, query: str) -> Dict[str, Any]:
		raise NotImplementedError

	async def geocode(self, query: str) -> List[GeocodeCandidate]:
		"""
		Search for a free-text location.

		Returns:
			Normalized matches, most relevant first (possibly empty)

		Raises:
			httpx.HTTPError: transport failure, timeout or non-2xx status
			GeocodingProviderError: misconfiguration or malformed payload
		"""
		data = await self.get("/search", params=self.search_params(query))
		if not isinstance(data, list):
			raise GeocodingProviderError(f"{self.name} returned {type(data).__name__}, expected a list")
		candidates = [self.normalize(item) for item in data if isinstance(item, dict)]
		logger.info(f"{self.name} returned {len(candidates)} candidate(s)")
		return candidates

	@staticmethod
	def normalize(item: Dict[str, Any]) -> GeocodeCandidate:
		address = item.get("address") or {}
		city = (
			address.get("city")
			or address.get("town")
			or address.get("village")
			or address.get("hamlet")
		)
		return GeocodeCandidate(
			latitude=_coerce_coordinate(item.get("lat"), 90),
			longitude=_coerce_coordinate(item.get("lon"), 180),
			formatted_address=item.get("display_name"),
			country=address.get("country"),
			city=city,
			state=address.get("state")
		)


class LocationIQClient(GeocodingProvider):
	"""LocationIQ forward geocoding. Requires LOCATIONIQ_API_KEY."""

	name = "locationiq"

	def __init__(
		self,
		api_key: Optional[str] = None,
		base_url: Optional[str] = None,
		transport: Optional[httpx.AsyncBaseTransport] = None
	):
		self.api_key = api_key or settings.locationiq_api_key
		super().__init__(base_url or settings.locationiq_base_url, transport=transport)

	def search_params(self, query: str) -> Dict[str, Any]:
		if not self.api_key:
			raise GeocodingProviderError("LOCATIONIQ_API_KEY is not configured")
		return {
			"key": self.api_key,
			"q": query,
			"format": "json",
			"addressdetails": 1
		}

	async def geocode(self, query: str) -> List[GeocodeCandidate]:
		try:
			return await super().geocode(query)
		except httpx.HTTPStatusError as e:
			if self._is_no_match(e.response):
				return []
			raise

	@staticmethod
	def _is_no_match(response: httpx.Response) -> bool:
		"""LocationIQ answers a search with no matches as 404 {"error": "Unable to geocode"}."""
		if response.status_code != 404:
			return False
		try:
			body = response.json()
		except ValueError:
			return False
		return isinstance(body, dict) and body.get("error") == NO_MATCH_ERROR


class NominatimClient(GeocodingProvider):
	"""OpenStreetMap Nominatim search. No API key; User-Agent is mandatory."""

	name = "nominatim"

	def __init__(
		self,
		base_url: Optional[str] = None,
		transport: Optional[httpx.AsyncBaseTransport] = None
	):
		super().__init__(base_url or settings.nominatim_base_url, transport=transport)

	def search_params(self, query: str) -> Dict[str, Any]:
		return {
			"q": query,
			"format": "json",
			"addressdetails": 1,
			"limit": 5
		}
