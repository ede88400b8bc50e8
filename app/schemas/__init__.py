from app.schemas.location import Coordinates
from app.schemas.fire_watch import FireStatus, PublicCategory, BurnCategoryRecord, FireLocation, FireWatchResponse
from app.schemas.geocoding import GeocodeCandidate, GeocodeResult

__all__ = [
	"Coordinates",
	"FireStatus",
	"PublicCategory",
	"BurnCategoryRecord",
	"FireLocation",
	"FireWatchResponse",
	"GeocodeCandidate",
	"GeocodeResult",
]
