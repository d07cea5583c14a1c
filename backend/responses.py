"""Standardized response infrastructure for API endpoints.

Errors are returned as ``{"error": message}`` with the HTTP status mapped
from a ResponseCode; successes as ``{"success": true, ...}``.
"""

from enum import Enum
from typing import Any

from fastapi.responses import JSONResponse


class ResponseCode(str, Enum):
    """Response codes for API responses."""

    SUCCESS = "success"

    # Client errors
    BAD_REQUEST = "bad_request"
    UNAUTHENTICATED = "unauthenticated"
    INVALID_AUTH = "invalid_auth"
    NOT_FOUND = "not_found"
    METHOD_NOT_ALLOWED = "method_not_allowed"

    # Server errors
    INTERNAL_ERROR = "internal_error"


# Default messages mapped to codes
RESPONSE_MESSAGES: dict[ResponseCode, str] = {
    ResponseCode.SUCCESS: "Operation completed successfully",
    ResponseCode.BAD_REQUEST: "Bad request",
    ResponseCode.UNAUTHENTICATED: "Not authenticated",
    ResponseCode.INVALID_AUTH: "Invalid authentication",
    ResponseCode.NOT_FOUND: "Not found",
    ResponseCode.METHOD_NOT_ALLOWED: "Method not allowed",
    ResponseCode.INTERNAL_ERROR: "An internal error occurred",
}

# HTTP status codes for each response code
HTTP_STATUS_MAP: dict[ResponseCode, int] = {
    ResponseCode.SUCCESS: 200,
    ResponseCode.BAD_REQUEST: 400,
    ResponseCode.UNAUTHENTICATED: 401,
    ResponseCode.INVALID_AUTH: 401,
    ResponseCode.NOT_FOUND: 404,
    ResponseCode.METHOD_NOT_ALLOWED: 405,
    ResponseCode.INTERNAL_ERROR: 500,
}


def get_message(code: ResponseCode) -> str:
    """Get the message for a response code."""
    return RESPONSE_MESSAGES.get(code, "Unknown error")


def get_http_status(code: ResponseCode) -> int:
    """Get HTTP status code for a response code."""
    return HTTP_STATUS_MAP.get(code, 500)


def code_for_status(status_code: int) -> ResponseCode:
    """Map a raw HTTP status back onto the closest response code."""
    for code, status in HTTP_STATUS_MAP.items():
        if status == status_code and code is not ResponseCode.INVALID_AUTH:
            return code
    if 400 <= status_code < 500:
        return ResponseCode.BAD_REQUEST
    return ResponseCode.INTERNAL_ERROR


def success_dict(**data: Any) -> dict[str, Any]:
    """Build a success response dictionary."""
    return {"success": True, **data}


def error_dict(code: ResponseCode, custom_message: str | None = None) -> dict[str, Any]:
    """Build an error response dictionary."""
    return {"error": custom_message or get_message(code)}


# --- JSONResponse helpers ---


def success_response(**data: Any) -> JSONResponse:
    """Create a 200 JSONResponse with success format."""
    return JSONResponse(
        content=success_dict(**data),
        status_code=get_http_status(ResponseCode.SUCCESS),
    )


def error_response(
    code: ResponseCode,
    custom_message: str | None = None,
) -> JSONResponse:
    """Create a JSONResponse with error format."""
    return JSONResponse(
        content=error_dict(code, custom_message),
        status_code=get_http_status(code),
    )
