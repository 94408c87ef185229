import logging
from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from storefront.errors import ErrorType, ERROR_STATUS_MAP

logger = logging.getLogger(__name__)


class AppException(Exception):
    """Custom exception that routes can raise."""

    def __init__(self, error_type: ErrorType, message: str, errors: list | None = None):
        self.error_type = error_type
        self.message = message
        self.errors = errors
        super().__init__(message)


async def app_exception_handler(_request: Request, exc: AppException) -> JSONResponse:
    """Global handler for AppException - converts to proper HTTP response."""
    status_code = ERROR_STATUS_MAP.get(exc.error_type, 500)
    content = {"message": exc.message}
    if exc.errors is not None:
        content["errors"] = exc.errors
    return JSONResponse(status_code=status_code, content=jsonable_encoder(content))


async def validation_exception_handler(_request: Request, exc: RequestValidationError) -> JSONResponse:
    """Bad path or query parameter types are reported as 400, not 422."""
    return JSONResponse(
        status_code=400,
        content=jsonable_encoder({"message": "Invalid request", "errors": exc.errors()})
    )


async def generic_exception_handler(_request: Request, exc: Exception) -> JSONResponse:
    """Global handler for unhandled exceptions - returns 500."""
    logger.error(f"Unhandled exception: {exc}")
    return JSONResponse(
        status_code=500,
        content={"message": "Internal server error"}
    )
