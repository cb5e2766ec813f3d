"""Standard error bodies and ready-made error responses."""

import copy
from http import HTTPStatus

from api_opener.builder.responses import status_key
from api_opener.constants import JSON_MEDIA_TYPE

EXAMPLE_TIMESTAMP = "2025-07-14T12:00:00Z"
EXAMPLE_REQUEST_ID = "req-123"

ERROR_RESPONSE_SCHEMA = {
    "type": "object",
    "properties": {
        "error": {
            "type": "object",
            "properties": {
                "code": {"type": "string", "description": "Error code for programmatic handling"},
                "message": {"type": "string", "description": "Human-readable error message"},
                "details": {
                    "type": "array",
                    "items": {
                        "type": "object",
                        "properties": {
                            "field": {"type": "string"},
                            "message": {"type": "string"},
                        },
                    },
                    "description": "Detailed error information (optional)",
                },
                "timestamp": {"type": "string", "format": "date-time", "description": "When the error occurred"},
                "requestId": {"type": "string", "description": "Request identifier for debugging"},
            },
            "required": ["code", "message"],
        },
    },
    "required": ["error"],
}

VALIDATION_ERROR_RESPONSE_SCHEMA = {
    "type": "object",
    "properties": {
        "error": {
            "type": "object",
            "properties": {
                "code": {"type": "string", "enum": ["VALIDATION_ERROR"]},
                "message": {"type": "string", "example": "Validation failed"},
                "details": {
                    "type": "array",
                    "items": {
                        "type": "object",
                        "properties": {
                            "field": {"type": "string", "description": "Field that failed validation"},
                            "message": {"type": "string", "description": "Validation error message"},
                            "code": {"type": "string", "description": "Validation error code"},
                        },
                        "required": ["field", "message"],
                    },
                },
                "timestamp": {"type": "string", "format": "date-time"},
                "requestId": {"type": "string"},
            },
            "required": ["code", "message", "details"],
        },
    },
    "required": ["error"],
}


def create_error_response_template(
    status_code: int,
    description: str,
    error_code: str | None = None,
    use_validation_schema: bool = False,
) -> dict:
    """Error response with the standard error body and a matching example.

    With ``use_validation_schema`` the body lists per-field validation
    failures instead of a single error.
    """
    if use_validation_schema:
        schema = VALIDATION_ERROR_RESPONSE_SCHEMA
        example = {
            "error": {
                "code": "VALIDATION_ERROR",
                "message": "Validation failed",
                "details": [{"field": "email", "message": "Invalid email format", "code": "INVALID_FORMAT"}],
                "timestamp": EXAMPLE_TIMESTAMP,
                "requestId": EXAMPLE_REQUEST_ID,
            }
        }
    else:
        schema = ERROR_RESPONSE_SCHEMA
        example = {
            "error": {
                "code": error_code or "UNKNOWN_ERROR",
                "message": description,
                "timestamp": EXAMPLE_TIMESTAMP,
                "requestId": EXAMPLE_REQUEST_ID,
            }
        }

    return {
        status_key(int(status_code)): {
            "description": description,
            "content": {JSON_MEDIA_TYPE: {"schema": copy.deepcopy(schema), "example": example}},
        }
    }


def create_common_error_templates() -> dict[str, dict]:
    return {
        "bad_request": create_error_response_template(
            HTTPStatus.BAD_REQUEST, "Bad Request - Invalid input data", "BAD_REQUEST"
        ),
        "unauthorized": create_error_response_template(
            HTTPStatus.UNAUTHORIZED, "Unauthorized - Authentication required", "UNAUTHORIZED"
        ),
        "forbidden": create_error_response_template(HTTPStatus.FORBIDDEN, "Forbidden - Access denied", "FORBIDDEN"),
        "not_found": create_error_response_template(
            HTTPStatus.NOT_FOUND, "Not Found - Resource not found", "NOT_FOUND"
        ),
        "conflict": create_error_response_template(
            HTTPStatus.CONFLICT, "Conflict - Resource already exists", "CONFLICT"
        ),
        "validation_error": create_error_response_template(
            HTTPStatus.UNPROCESSABLE_ENTITY,
            "Unprocessable Entity - Validation failed",
            "VALIDATION_ERROR",
            use_validation_schema=True,
        ),
        "too_many_requests": create_error_response_template(
            HTTPStatus.TOO_MANY_REQUESTS, "Too Many Requests - Rate limit exceeded", "RATE_LIMIT_EXCEEDED"
        ),
        "internal_server_error": create_error_response_template(
            HTTPStatus.INTERNAL_SERVER_ERROR, "Internal Server Error", "INTERNAL_SERVER_ERROR"
        ),
        "service_unavailable": create_error_response_template(
            HTTPStatus.SERVICE_UNAVAILABLE,
            "Service Unavailable - Server temporarily unavailable",
            "SERVICE_UNAVAILABLE",
        ),
    }
