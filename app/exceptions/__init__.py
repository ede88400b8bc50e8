from app.exceptions.base import (
	CanIBurnException,
	ValidationError,
	MissingParameterError,
	NotANumberError,
	LatitudeOutOfRangeError,
	LongitudeOutOfRangeError,
	EmptyLocationError,
	UpstreamUnavailableError,
)
from app.exceptions.handler import handle_service_exceptions

__all__ = [
	"CanIBurnException",
	"ValidationError",
	"MissingParameterError",
	"NotANumberError",
	"LatitudeOutOfRangeError",
	"LongitudeOutOfRangeError",
	"EmptyLocationError",
	"UpstreamUnavailableError",
	"handle_service_exceptions"
]
