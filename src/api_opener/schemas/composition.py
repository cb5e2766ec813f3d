"""Composition keywords (allOf / oneOf / anyOf / not / if-then-else / discriminator)."""

from api_opener.schemas.primitives import create_object_schema


def _with_description(schema: dict, description: str | None) -> dict:
    if description:
        schema["description"] = description
    return schema


def create_all_of_schema(schemas: list[dict], description: str | None = None) -> dict:
    return _with_description({"allOf": list(schemas)}, description)


def create_one_of_schema(schemas: list[dict], description: str | None = None) -> dict:
    return _with_description({"oneOf": list(schemas)}, description)


def create_any_of_schema(schemas: list[dict], description: str | None = None) -> dict:
    return _with_description({"anyOf": list(schemas)}, description)


def create_not_schema(schema: dict, description: str | None = None) -> dict:
    return _with_description({"not": schema}, description)


def create_conditional_schema(
    if_schema: dict,
    then_schema: dict,
    else_schema: dict | None = None,
    description: str | None = None,
) -> dict:
    """Build an ``if``/``then``/``else`` schema. ``else`` is omitted when not given."""
    schema = {"if": if_schema, "then": then_schema}
    if else_schema is not None:
        schema["else"] = else_schema
    return _with_description(schema, description)


def create_discriminator_schema(
    property_name: str,
    mapping: dict[str, str],
    description: str | None = None,
) -> dict:
    schema = {"discriminator": {"propertyName": property_name, "mapping": dict(mapping)}}
    return _with_description(schema, description)


def nullable(schema: dict, description: str | None = None) -> dict:
    return create_one_of_schema([schema, {"type": "null"}], description or "Nullable value")


def paginated(item_schema: dict, description: str | None = None) -> dict:
    """Wrap an item schema in a ``data`` + ``meta`` page envelope."""
    return create_object_schema(
        properties={
            "data": {"type": "array", "items": item_schema},
            "meta": {
                "type": "object",
                "properties": {
                    "page": {"type": "integer", "minimum": 1},
                    "limit": {"type": "integer", "minimum": 1},
                    "total": {"type": "integer", "minimum": 0},
                    "totalPages": {"type": "integer", "minimum": 0},
                },
                "required": ["page", "limit", "total"],
            },
        },
        required=["data", "meta"],
        description=description or "Paginated response",
    )


def api_response(data_schema: dict, description: str | None = None) -> dict:
    return create_object_schema(
        properties={
            "success": {"type": "boolean", "description": "Whether request was successful"},
            "data": data_schema,
            "message": {"type": "string", "description": "Response message"},
            "timestamp": {"type": "string", "format": "date-time", "description": "Response timestamp"},
        },
        required=["success", "data"],
        description=description or "API response wrapper",
    )


def timestamped(base_schema: dict, description: str | None = None) -> dict:
    return create_all_of_schema(
        [
            base_schema,
            {
                "type": "object",
                "properties": {
                    "createdAt": {"type": "string", "format": "date-time"},
                    "updatedAt": {"type": "string", "format": "date-time"},
                },
                "required": ["createdAt", "updatedAt"],
            },
        ],
        description or "Timestamped entity",
    )
