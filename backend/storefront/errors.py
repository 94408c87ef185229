from enum import Enum


class ErrorType(Enum):
    VALIDATION_ERROR = "validation_error"
    BAD_REQUEST = "bad_request"
    NOT_FOUND = "not_found"
    INTERNAL_ERROR = "internal_error"


# Map error types to HTTP status codes
ERROR_STATUS_MAP = {
    ErrorType.VALIDATION_ERROR: 400,
    ErrorType.BAD_REQUEST: 400,
    ErrorType.NOT_FOUND: 404,
    ErrorType.INTERNAL_ERROR: 500,
}
