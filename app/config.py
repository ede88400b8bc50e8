import os
from typing import Optional
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

class Settings:
	# Server configuration
	log_level: str = os.getenv("LOG_LEVEL", "INFO")
	port: int = int(os.getenv("PORT", "3001"))
	service_name: str = os.getenv("SERVICE_NAME", "can-i-burn-api")

	# Outbound HTTP configuration
	api_user_agent: str = os.getenv("API_USER_AGENT", "CanIBurnAPI/1.0")
	http_timeout_seconds: float = float(os.getenv("HTTP_TIMEOUT_SECONDS", "10"))

	# NBDNR ArcGIS BurnCategories layer
	nbdnr_base_url: str = os.getenv("NBDNR_BASE_URL", "https://gis-erd-der.gnb.ca/gisserver/rest/services/FireWeather/BurnCategories/MapServer/0")

	# Serviced region
	region_name: str = os.getenv("REGION_NAME", "New Brunswick")
	region_country: str = os.getenv("REGION_COUNTRY", "Canada")
	region_jurisdiction: str = os.getenv("REGION_JURISDICTION", "New Brunswick Department of Natural Resources and Energy Development")

	# Geocoding providers (LocationIQ first, Nominatim as fallback)
	locationiq_api_key: Optional[str] = os.getenv("LOCATIONIQ_API_KEY", None)
	locationiq_base_url: str = os.getenv("LOCATIONIQ_BASE_URL", "https://us1.locationiq.com/v1")
	nominatim_base_url: str = os.getenv("NOMINATIM_BASE_URL", "https://nominatim.openstreetmap.org")

	@property
	def outside_jurisdiction(self) -> str:
		"""Jurisdiction text for points the NBDNR layer does not cover."""
		return f"Outside {self.region_name} jurisdiction"

settings = Settings()
