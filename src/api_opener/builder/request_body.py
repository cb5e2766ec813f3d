"""Request body builder.

OpenAPI itself performs no per-property validation of a body: the only things
it checks are presence of the whole body (``required``) and, for form
encoding, existence of each required field. So the builder only guarantees a
well-formed source and that ``required_fields`` name real properties.
"""

import re
from collections.abc import Mapping
from typing import Literal, Union

from pydantic import BaseModel, ConfigDict

from api_opener.constants import MEDIA_TYPES
from api_opener.errors import RequestBodyValidationError
from api_opener.schemas.reference import get_component_type_from_reference, is_valid_schema_reference

_DEFINITIONS_REFERENCE = re.compile(r"^#/definitions/[a-zA-Z0-9_-]+$")


class InlineProperties(BaseModel):
    """Body described inline as an object schema."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["properties"] = "properties"
    properties: dict[str, dict]
    required_fields: list[str] | None = None

    def to_schema(self) -> dict:
        schema: dict = {"type": "object"}
        if self.required_fields is not None:
            schema["required"] = list(self.required_fields)
        schema["properties"] = dict(self.properties)
        return schema


class SchemaRef(BaseModel):
    """Body described by a reference to a component schema."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["ref"] = "ref"
    ref: str

    def to_schema(self) -> dict:
        return {"$ref": self.ref}


RequestBodySource = Union[InlineProperties, SchemaRef]


def request_body_source(
    properties: Mapping | None = None,
    ref_string: str | None = None,
    required_fields: list[str] | None = None,
) -> RequestBodySource:
    """Validate the raw inputs and return exactly one body source.

    Raises RequestBodyValidationError on the first violated rule.
    """
    if properties is None and ref_string is None:
        raise RequestBodyValidationError("Either properties or refString must be provided", "properties")
    if properties is not None and ref_string is not None:
        raise RequestBodyValidationError("Cannot use both properties and refString. Choose one", "refString")

    if ref_string is not None:
        _validate_ref_string(ref_string)
        return SchemaRef(ref=ref_string)

    _validate_properties(properties)
    if required_fields is not None:
        _validate_required_fields(required_fields, properties)
    return InlineProperties(properties=dict(properties), required_fields=required_fields)


def _validate_ref_string(ref_string) -> None:
    if not isinstance(ref_string, str) or not ref_string.startswith("#/"):
        raise RequestBodyValidationError('refString must start with "#/" for local references', "refString")

    is_component_schema = (
        is_valid_schema_reference(ref_string) and get_component_type_from_reference(ref_string) == "schemas"
    )
    if not is_component_schema and not _DEFINITIONS_REFERENCE.fullmatch(ref_string):
        raise RequestBodyValidationError(
            "refString must follow OpenAPI reference format: "
            "#/components/schemas/SchemaName or #/definitions/SchemaName",
            "refString",
        )


def _validate_properties(properties) -> None:
    if not isinstance(properties, Mapping):
        raise RequestBodyValidationError("Properties must be an object", "properties")
    if not properties:
        raise RequestBodyValidationError("Properties object cannot be empty", "properties")
    for key, value in properties.items():
        if not isinstance(key, str) or not key.strip():
            raise RequestBodyValidationError("Property names cannot be empty", "properties")
        if not isinstance(value, Mapping):
            raise RequestBodyValidationError(f'Property "{key}" must be an object', "properties")


def _validate_required_fields(required_fields, properties: Mapping) -> None:
    if not isinstance(required_fields, (list, tuple)) or not all(isinstance(f, str) for f in required_fields):
        raise RequestBodyValidationError("requiredFields must be an array", "requiredFields")
    missing = [field for field in required_fields if field not in properties]
    if missing:
        raise RequestBodyValidationError(
            f"Required fields [{', '.join(map(str, missing))}] not found in properties",
            "requiredFields",
        )


def add_request_body(
    description: str | None = None,
    is_required: bool | None = None,
    required_fields: list[str] | None = None,
    properties: Mapping | None = None,
    ref_string: str | None = None,
) -> dict:
    """Build a request body from inline ``properties`` or a ``ref_string``.

    The resulting schema is documented under both JSON and form encodings.
    ``description`` and ``required`` are only emitted when given.
    """
    source = request_body_source(properties, ref_string, required_fields)
    schema = source.to_schema()

    body: dict = {}
    if description is not None:
        body["description"] = description
    body["content"] = {media_type: {"schema": schema} for media_type in MEDIA_TYPES}
    if is_required is not None:
        body["required"] = is_required
    return body
