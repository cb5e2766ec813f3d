"""Route assembler: one path + one method -> one route fragment."""

import logging
import re

from api_opener.constants import DEFAULT_TAG, HTTP_METHODS
from api_opener.errors import ApiRouteValidationError

logger = logging.getLogger(__name__)

_INVALID_CHARS = re.compile(r"[<>]")
_PATH_PARAM = re.compile(r"\{([^}]*)\}")
_PARAM_NAME = re.compile(r"^[a-zA-Z0-9_-]+$")


def validate_route(route: str) -> None:
    """Check a route path such as ``/users/{id}``.

    Raises ApiRouteValidationError (field ``route``) for an empty path, a
    path without the leading slash, ``<``/``>`` characters, or a malformed
    ``{param}`` placeholder.
    """
    if not route:
        raise ApiRouteValidationError("Route cannot be empty", "route")
    if not route.startswith("/"):
        raise ApiRouteValidationError('Route must start with a forward slash "/"', "route")
    if _INVALID_CHARS.search(route):
        raise ApiRouteValidationError(
            "Route contains invalid characters. Use {paramName} for path parameters", "route"
        )

    for param_name in _PATH_PARAM.findall(route):
        if not param_name.strip():
            raise ApiRouteValidationError("Path parameter name cannot be empty", "route")
        if not _PARAM_NAME.fullmatch(param_name):
            raise ApiRouteValidationError(
                f'Invalid path parameter name "{param_name}". '
                "Use only alphanumeric characters, underscores, and hyphens",
                "route",
            )


def validate_method(method: str) -> None:
    if method not in HTTP_METHODS:
        raise ApiRouteValidationError(
            f'Invalid HTTP method "{method}". Must be one of: {", ".join(HTTP_METHODS)}', "method"
        )


def create_api_route(
    route: str,
    method: str,
    tag: str | dict | None = None,
    summary: str | None = None,
    description: str | None = None,
    operation_id: str | None = None,
    parameters: list[dict] | None = None,
    request_body: dict | None = None,
    responses: dict | None = None,
    security: list[dict] | None = None,
) -> dict:
    """Build ``{route: {method: operation}}`` for a single operation.

    ``tags`` is always present (``["Rest"]`` when no tag is given). Text
    fields are attached only when non-empty, structured fields whenever they
    are given, so absent keys are omitted rather than emitted as null.
    """
    validate_route(route)
    validate_method(method)

    operation: dict = {"tags": [tag if tag is not None else DEFAULT_TAG]}
    if summary:
        operation["summary"] = summary
    if description:
        operation["description"] = description
    if operation_id:
        operation["operationId"] = operation_id
    if parameters is not None:
        operation["parameters"] = list(parameters)
    if request_body is not None:
        operation["requestBody"] = request_body
    if responses is not None:
        operation["responses"] = responses
    if security is not None:
        operation["security"] = security

    logger.debug("Created route %s %s", method.upper(), route)
    return {route: {method: operation}}
