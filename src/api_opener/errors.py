"""Validation errors raised by the OpenAPI builders.

Every error carries the name of the offending input in ``field`` so callers
(build scripts, the CLI) can report it without parsing the message.
"""


class OpenApiBuilderError(ValueError):
    """Base class for all builder validation errors."""

    def __init__(self, message: str, field: str):
        super().__init__(message)
        self.field = field


class RequestBodyValidationError(OpenApiBuilderError):
    """Invalid request body definition (source, properties or required fields)."""


class ResponseStatusValidationError(OpenApiBuilderError):
    """Invalid response status code or empty description."""


class ApiRouteValidationError(OpenApiBuilderError):
    """Invalid route path or HTTP method."""
