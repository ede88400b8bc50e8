import logging
from functools import wraps
from fastapi import HTTPException, status
from fastapi.responses import JSONResponse
from app.exceptions.base import CanIBurnException

logger = logging.getLogger(__name__)

def handle_service_exceptions(func):
    """
    Decorator to handle service layer exceptions uniformly.
    Converts CanIBurnException into a JSON response with the exception's
    status code and a top-level {"error": ..., "message": ...} body.

    Usage:
        @router.get("/fire-watch")
        @handle_service_exceptions
        async def my_endpoint():
            # Service calls that may raise CanIBurnException
            return await SomeService().do_something()
    """
    @wraps(func)
    async def wrapper(*args, **kwargs):
        try:
            return await func(*args, **kwargs)
        except CanIBurnException as e:
            return JSONResponse(
                status_code=e.status_code,
                content=e.detail
            )
        except HTTPException:
            raise
        except Exception:
            # Internal error text stays in the logs
            logger.exception(f"Unhandled error in {func.__name__}")
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"error": "Request failed", "message": "Internal server error"}
            )
    return wrapper
