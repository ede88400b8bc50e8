"""
Service for forward geocoding with provider fallback.
"""
import logging
from typing import Callable, List, Optional, Sequence
from app.http_client.geocoding_client import GeocodingProvider, LocationIQClient, NominatimClient
from app.schemas.geocoding import (
	GeocodeCandidate,
	GeocodeResult,
	MESSAGE_FAILED,
	MESSAGE_NO_COORDINATES,
	MESSAGE_NOT_RESOLVED,
)

logger = logging.getLogger(__name__)

ProviderFactory = Callable[[], GeocodingProvider]


class GeocodingService:
	"""
	Resolves free-text locations to coordinates.

	Providers are tried in order; the first one that answers without error
	wins, even with zero matches. Lookups never raise: every failure mode
	becomes a GeocodeResult carrying a message.
	"""

	DEFAULT_PROVIDERS: Sequence[ProviderFactory] = (LocationIQClient, NominatimClient)

	def __init__(self, providers: Optional[Sequence[ProviderFactory]] = None):
		self.providers = tuple(providers) if providers is not None else tuple(self.DEFAULT_PROVIDERS)

	async def geocode(self, location: str) -> GeocodeResult:
		"""
		Args:
			location: Non-empty location text (trimmed here before use)

		Returns:
			GeocodeResult echoing the trimmed text
		"""
		query = location.strip()
		candidates = await self._search(query)

		if candidates is None:
			return GeocodeResult.unresolved(query, MESSAGE_FAILED)
		if not candidates:
			return GeocodeResult.unresolved(query, MESSAGE_NOT_RESOLVED)

		best = candidates[0]
		if not best.has_coordinates:
			logger.info(f"Best match for '{query}' has no usable coordinates")
			return GeocodeResult.unresolved(query, MESSAGE_NO_COORDINATES)

		return GeocodeResult.from_candidate(query, best)

	async def _search(self, query: str) -> Optional[List[GeocodeCandidate]]:
		"""Candidates from the first provider that succeeds, or None if all fail."""
		for factory in self.providers:
			name = getattr(factory, "name", repr(factory))
			try:
				async with factory() as provider:
					return await provider.geocode(query)
			except Exception as e:
				# Any provider failure falls through to the next one
				logger.warning(f"Geocoding provider {name} failed: {e}", extra={"extra_fields": {"provider": name}})
		logger.error("All geocoding providers failed", extra={"extra_fields": {"location": query}})
		return None
