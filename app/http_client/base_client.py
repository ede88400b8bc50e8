from typing import Optional, Dict, Any
import httpx
from abc import ABC

class BaseHTTPClient(ABC):
	"""
	Base HTTP client for the upstream services this API depends on.
	One instance per outbound lookup; use as an async context manager so the
	underlying connection pool is always closed.
	"""

	def __init__(
		self,
		base_url: str,
		default_headers: Optional[Dict[str, str]] = None,
		timeout: float = 10.0,
		transport: Optional[httpx.AsyncBaseTransport] = None
	):
		self.base_url = base_url.rstrip('/')
		self.default_headers = default_headers or {}
		self.timeout = timeout
		self.client = httpx.AsyncClient(
			base_url=self.base_url,
			headers=self.default_headers,
			timeout=self.timeout,
			transport=transport
		)

	async def get(
		self,
		endpoint: str,
		params: Optional[Dict[str, Any]] = None,
		headers: Optional[Dict[str, str]] = None
	) -> Any:
		"""
		Perform a single GET request. No retries.

		Args:
			endpoint: API endpoint (relative to base_url)
			params: Query parameters
			headers: Additional headers (merged with default_headers)

		Returns:
			Decoded JSON body

		Raises:
			httpx.HTTPStatusError: non-2xx response
			httpx.TransportError: connection failure or timeout
			ValueError: body is not JSON
		"""
		merged_headers = {**self.default_headers, **(headers or {})}
		response = await self.client.get(
			endpoint,
			params=params,
			headers=merged_headers
		)
		response.raise_for_status()
		return response.json()

	async def close(self):
		"""Close the HTTP client."""
		await self.client.aclose()

	async def __aenter__(self):
		return self

	async def __aexit__(self, exc_type, exc_val, exc_tb):
		await self.close()
