"""Single-status response builders and the shallow response merge.

Status code keys are emitted as strings ("200", "default") so a response map
survives a JSON round-trip unchanged.
"""

from http import HTTPStatus

from api_opener.constants import (
    DEFAULT_STATUS,
    FIXED_RESPONSE_DEFAULTS,
    MAX_STATUS_CODE,
    MEDIA_TYPES,
    MIN_STATUS_CODE,
)
from api_opener.errors import ResponseStatusValidationError


def status_key(status_code: int | str) -> str:
    """Validate ``status_code`` and return its key in a response map."""
    if status_code is None:
        raise ResponseStatusValidationError("Status code cannot be undefined or null", "statusCode")
    if status_code == DEFAULT_STATUS:
        return DEFAULT_STATUS
    if isinstance(status_code, bool) or not isinstance(status_code, int):
        raise ResponseStatusValidationError(
            f"Invalid HTTP status code {status_code!r}. Must be an integer or 'default'", "statusCode"
        )
    if not MIN_STATUS_CODE <= status_code <= MAX_STATUS_CODE:
        raise ResponseStatusValidationError(
            f"Invalid HTTP status code {int(status_code)}. Must be between 100-599 or 'default'", "statusCode"
        )
    return str(int(status_code))


def _validate_description(description: str) -> None:
    if not description or not description.strip():
        raise ResponseStatusValidationError("Description cannot be empty", "description")


def _content(schema: dict, media_types=MEDIA_TYPES) -> dict:
    return {media_type: {"schema": schema} for media_type in media_types}


def add_response_status(status_code: int | str, description: str, schema: dict | None = None) -> dict:
    """Build ``{status: {description, content?}}`` for one status code.

    Raises ResponseStatusValidationError for a missing or out-of-range status
    code (100-599 or "default") and for an empty description.
    """
    key = status_key(status_code)
    _validate_description(description)

    response: dict = {"description": description}
    if schema is not None:
        response["content"] = _content(schema)
    return {key: response}


def create_response(
    status_code: int | str,
    description: str,
    schema: dict | None = None,
    content_types: list[str] | None = None,
    headers: dict | None = None,
    examples: dict | None = None,
) -> dict:
    """Generic response builder with custom media types, headers and examples.

    ``examples`` maps a media type to the example shown for it.
    """
    key = status_key(status_code)
    _validate_description(description)

    response: dict = {"description": description}
    if headers is not None:
        response["headers"] = headers
    if schema is not None:
        response["content"] = {}
        for content_type in content_types or MEDIA_TYPES:
            entry = {"schema": schema}
            if examples and examples.get(content_type) is not None:
                entry["example"] = examples[content_type]
            response["content"][content_type] = entry
    return {key: response}


def _fixed(status: HTTPStatus, description: str | None, schema: dict | None) -> dict:
    if description is None:
        description = FIXED_RESPONSE_DEFAULTS[status]
    return add_response_status(int(status), description, schema)


def create_success_response(description: str, schema: dict | None = None) -> dict:
    return _fixed(HTTPStatus.OK, description, schema)


def create_created_response(description: str, schema: dict | None = None) -> dict:
    return _fixed(HTTPStatus.CREATED, description, schema)


def create_no_content_response(description: str | None = None) -> dict:
    return _fixed(HTTPStatus.NO_CONTENT, description, None)


def create_bad_request_response(description: str | None = None, schema: dict | None = None) -> dict:
    return _fixed(HTTPStatus.BAD_REQUEST, description, schema)


def create_unauthorized_response(description: str | None = None, schema: dict | None = None) -> dict:
    return _fixed(HTTPStatus.UNAUTHORIZED, description, schema)


def create_forbidden_response(description: str | None = None, schema: dict | None = None) -> dict:
    return _fixed(HTTPStatus.FORBIDDEN, description, schema)


def create_not_found_response(description: str | None = None, schema: dict | None = None) -> dict:
    return _fixed(HTTPStatus.NOT_FOUND, description, schema)


def create_conflict_response(description: str | None = None, schema: dict | None = None) -> dict:
    return _fixed(HTTPStatus.CONFLICT, description, schema)


def create_unprocessable_entity_response(description: str | None = None, schema: dict | None = None) -> dict:
    return _fixed(HTTPStatus.UNPROCESSABLE_ENTITY, description, schema)


def create_too_many_requests_response(description: str | None = None, schema: dict | None = None) -> dict:
    return _fixed(HTTPStatus.TOO_MANY_REQUESTS, description, schema)


def create_internal_server_error_response(description: str | None = None, schema: dict | None = None) -> dict:
    return _fixed(HTTPStatus.INTERNAL_SERVER_ERROR, description, schema)


def merge_responses(*responses: dict) -> dict:
    """Shallow right-biased merge of response maps.

    A later map replaces an earlier one's entry for the same status code
    wholesale; entries are not merged key by key.
    """
    merged: dict = {}
    for response in responses:
        merged.update(response)
    return merged
