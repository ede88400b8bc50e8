from fastapi import status
from typing import Optional

class CanIBurnException(Exception):
	"""
	Base exception class for all Can I Burn custom exceptions.
	All service and validation exceptions inherit from this.

	`error` is the short title returned to the caller, `message` the
	human-readable explanation.
	"""
	def __init__(
		self,
		message: str,
		status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
		error: Optional[str] = None
	):
		self.message = message
		self.status_code = status_code
		self.error = error or "Request failed"
		super().__init__(self.message)

	@property
	def detail(self) -> dict:
		return {"error": self.error, "message": self.message}

class ValidationError(CanIBurnException):
	"""
	Exception raised when request parameters are invalid.
	Maps to HTTP 400.
	"""
	def __init__(self, message: str, error: str = "Invalid request"):
		super().__init__(
			message=message,
			status_code=status.HTTP_400_BAD_REQUEST,
			error=error
		)

class MissingParameterError(ValidationError):
	"""A required query parameter was not supplied."""
	def __init__(self, message: str, error: str = "Missing required parameters"):
		super().__init__(message=message, error=error)

class NotANumberError(ValidationError):
	"""Latitude or longitude did not parse as a finite number."""
	def __init__(self, message: str = "lat and lng must be valid numbers"):
		super().__init__(message=message, error="Invalid coordinates")

class LatitudeOutOfRangeError(ValidationError):
	def __init__(self, message: str = "Latitude must be between -90 and 90"):
		super().__init__(message=message, error="Invalid latitude")

class LongitudeOutOfRangeError(ValidationError):
	def __init__(self, message: str = "Longitude must be between -180 and 180"):
		super().__init__(message=message, error="Invalid longitude")

class EmptyLocationError(ValidationError):
	def __init__(self, message: str = "location must be a non-empty string"):
		super().__init__(message=message, error="Invalid location")

class UpstreamUnavailableError(CanIBurnException):
	"""
	Exception raised when an upstream service is unreachable or answers
	with an error or malformed payload.
	Maps to HTTP 500. The message is generic; the cause is only logged.
	"""
	def __init__(self, message: str = "Failed to fetch data from upstream service", status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR):
		super().__init__(
			message=message,
			status_code=status_code,
			error="Request failed"
		)
