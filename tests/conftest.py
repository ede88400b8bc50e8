"""
Pytest configuration and fixtures.
"""
import pytest
from unittest.mock import AsyncMock, MagicMock
from app.schemas.location import Coordinates


@pytest.fixture
def fredericton():
	"""A point inside New Brunswick."""
	return Coordinates(latitude=45.9636, longitude=-66.6431)


@pytest.fixture
def montreal():
	"""A point outside New Brunswick."""
	return Coordinates(latitude=45.5017, longitude=-73.5673)


@pytest.fixture
def sample_arcgis_response():
	"""NBDNR BurnCategories query response with one feature."""
	return {
		"displayFieldName": "NAME",
		"fieldAliases": {
			"NAME": "NAME",
			"PUBLICCATEGORY": "PUBLICCATEGORY",
			"VALIDDATE": "VALIDDATE"
		},
		"features": [
			{
				"attributes": {
					"NAME": "York",
					"PUBLICCATEGORY": 2,
					"VALIDDATE": 1718280000000
				}
			}
		]
	}


@pytest.fixture
def sample_place():
	"""One LocationIQ / Nominatim search result."""
	return {
		"place_id": "12345",
		"lat": "45.5017",
		"lon": "-73.5673",
		"display_name": "Montreal, QC, Canada",
		"address": {
			"city": "Montreal",
			"state": "Quebec",
			"country": "Canada",
			"country_code": "ca"
		}
	}


def _make_provider_factory(name, result=None, error=None):
	"""
	Build a provider factory usable by GeocodingService.

	The returned factory is a Mock (so calls can be asserted) producing an
	async context manager whose geocode() returns `result` or raises `error`.
	"""
	provider = MagicMock()
	provider.geocode = AsyncMock(return_value=result, side_effect=error)
	provider.__aenter__ = AsyncMock(return_value=provider)
	provider.__aexit__ = AsyncMock(return_value=False)
	factory = MagicMock(return_value=provider)
	factory.name = name
	factory.provider = provider
	return factory


@pytest.fixture
def make_provider_factory():
	"""Factory fixture: make_provider_factory(name, result=..., error=...)."""
	return _make_provider_factory
