"""``$ref`` builders and the canonical reference-validity predicate."""

import re

from api_opener.constants import COMPONENT_CATEGORIES

REFERENCE_PATTERN = re.compile(
    r"^#/components/(" + "|".join(COMPONENT_CATEGORIES) + r")/[a-zA-Z0-9_-]+$"
)

_COMPONENT_NAME = re.compile(r"^#/components/\w+/(.+)$")
_COMPONENT_TYPE = re.compile(r"^#/components/(\w+)/.+$")


def _component_reference(category: str, name: str) -> dict:
    return {"$ref": f"#/components/{category}/{name}"}


def create_schema_reference(schema_name: str) -> dict:
    return _component_reference("schemas", schema_name)


def create_parameter_reference(parameter_name: str) -> dict:
    return _component_reference("parameters", parameter_name)


def create_response_reference(response_name: str) -> dict:
    return _component_reference("responses", response_name)


def create_request_body_reference(request_body_name: str) -> dict:
    return _component_reference("requestBodies", request_body_name)


def create_security_scheme_reference(scheme_name: str) -> dict:
    return _component_reference("securitySchemes", scheme_name)


def is_valid_schema_reference(reference: str) -> bool:
    """Check ``reference`` against ``#/components/{category}/{Name}``."""
    return isinstance(reference, str) and REFERENCE_PATTERN.fullmatch(reference) is not None


def get_component_name_from_reference(reference: str) -> str | None:
    match = _COMPONENT_NAME.match(reference)
    return match.group(1) if match else None


def get_component_type_from_reference(reference: str) -> str | None:
    match = _COMPONENT_TYPE.match(reference)
    return match.group(1) if match else None


COMMON_SCHEMA_REFERENCES = {
    "User": create_schema_reference("User"),
    "Product": create_schema_reference("Product"),
    "Order": create_schema_reference("Order"),
    "Category": create_schema_reference("Category"),
    "Address": create_schema_reference("Address"),
    "ErrorResponse": create_schema_reference("ErrorResponse"),
    "ValidationErrorResponse": create_schema_reference("ValidationErrorResponse"),
    "PageParam": create_parameter_reference("PageParam"),
    "LimitParam": create_parameter_reference("LimitParam"),
    "SortParam": create_parameter_reference("SortParam"),
    "SuccessResponse": create_response_reference("SuccessResponse"),
    "CreatedResponse": create_response_reference("CreatedResponse"),
    "NotFoundResponse": create_response_reference("NotFoundResponse"),
    "UnauthorizedResponse": create_response_reference("UnauthorizedResponse"),
    "BearerAuth": create_security_scheme_reference("BearerAuth"),
    "ApiKeyAuth": create_security_scheme_reference("ApiKeyAuth"),
    "OAuth2": create_security_scheme_reference("OAuth2"),
}


def common_reference(name: str) -> dict:
    """Return a copy of a well-known reference such as ``"BearerAuth"``.

    Raises KeyError for an unknown name.
    """
    return dict(COMMON_SCHEMA_REFERENCES[name])
