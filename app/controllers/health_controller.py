from fastapi import APIRouter
from app.config import settings
from app.utils.datetime_utils import utc_now

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health")
async def health():
	"""Health check endpoint."""
	return {
		"status": "ok",
		"timestamp": utc_now().isoformat().replace("+00:00", "Z"),
		"service": settings.service_name
	}
