"""Shared constants and per-builder default tables.

Builders read their defaults from here so tests can assert them in one place.
"""

from http import HTTPStatus

OPENAPI_VERSION = "3.1.0"

JSON_MEDIA_TYPE = "application/json"
FORM_MEDIA_TYPE = "application/x-www-form-urlencoded"

# Every schema-bearing body/response is documented under both media types.
MEDIA_TYPES = (JSON_MEDIA_TYPE, FORM_MEDIA_TYPE)

HTTP_METHODS = ("get", "post", "put", "patch", "delete")

DEFAULT_STATUS = "default"
MIN_STATUS_CODE = 100
MAX_STATUS_CODE = 599

DEFAULT_TAG = "Rest"

COMPONENT_CATEGORIES = ("schemas", "parameters", "responses", "requestBodies", "securitySchemes")

# Parameter builders
ID_PARAM_DEFAULTS = {
    "description": "ID of the resource",
    "schema": {"type": "string"},
}

PAGE_PARAM_DEFAULTS = {
    "description": "Num of page",
    "minimum": 1,
}

LIMIT_PARAM_DEFAULTS = {
    "description": "Maximum number of results to return",
    "default_value": 10,
    "minimum": 1,
    "maximum": 100,
}

OFFSET_PARAM_DEFAULTS = {
    "description": "Number of results to skip",
    "default_value": 0,
    "minimum": 0,
}

SORT_PARAM_DEFAULTS = {
    "description": "Field to sort by",
    "allow_descending": True,
    "descending_hint": ' (use "-" prefix for descending order)',
}

AUTHORIZATION_HEADER_DEFAULTS = {
    "name": "Authorization",
    "description": "Bearer token for authentication",
    "pattern": "^Bearer [A-Za-z0-9\\-\\._~\\+\\/]+=*$",
    "example": "Bearer eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
}

API_KEY_HEADER_DEFAULTS = {
    "name": "x-api-key",
    "description": "API key for authentication",
    "example": "abc123def456",
}

CONTENT_TYPE_HEADER_DEFAULTS = {
    "name": "Content-Type",
    "description": "Media type of the request body",
    "example": JSON_MEDIA_TYPE,
}

PAGINATION_STYLES = ("page-limit", "offset-limit")

# Response builders: status -> default description (None means the caller must supply one)
FIXED_RESPONSE_DEFAULTS = {
    HTTPStatus.OK: None,
    HTTPStatus.CREATED: None,
    HTTPStatus.NO_CONTENT: "No Content",
    HTTPStatus.BAD_REQUEST: "Bad Request",
    HTTPStatus.UNAUTHORIZED: "Unauthorized",
    HTTPStatus.FORBIDDEN: "Forbidden",
    HTTPStatus.NOT_FOUND: "Not Found",
    HTTPStatus.CONFLICT: "Conflict",
    HTTPStatus.UNPROCESSABLE_ENTITY: "Unprocessable Entity",
    HTTPStatus.TOO_MANY_REQUESTS: "Too Many Requests",
    HTTPStatus.INTERNAL_SERVER_ERROR: "Internal Server Error",
}

# Document assembler
DOCS_DEFAULTS = {
    "title": "API Documentation",
    "description": "API documentation generated with api-opener",
    "version": "1.0.0",
    "server_description": "API Server",
}
