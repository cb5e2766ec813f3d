"""Schema templates for primitive, array and object types.

These are templates, not validators: each builder copies the constraints it
was given into a fresh schema dict and leaves out the ones it was not given.
"""

from typing import Any


def _schema(schema_type: str, **constraints: Any) -> dict:
    schema = {"type": schema_type}
    schema.update({key: value for key, value in constraints.items() if value is not None})
    return schema


def create_string_schema(
    min_length: int | None = None,
    max_length: int | None = None,
    pattern: str | None = None,
    format: str | None = None,
    enum: list[str] | None = None,
    default: str | None = None,
    example: str | None = None,
    description: str | None = None,
) -> dict:
    return _schema(
        "string",
        minLength=min_length,
        maxLength=max_length,
        pattern=pattern,
        format=format,
        enum=list(enum) if enum is not None else None,
        default=default,
        example=example,
        description=description or None,
    )


def create_number_schema(
    minimum: float | None = None,
    maximum: float | None = None,
    exclusive_minimum: float | None = None,
    exclusive_maximum: float | None = None,
    multiple_of: float | None = None,
    format: str | None = None,
    default: float | None = None,
    example: float | None = None,
    description: str | None = None,
) -> dict:
    """Build a ``number`` schema (``format`` is ``float`` or ``double``)."""
    return _schema(
        "number",
        minimum=minimum,
        maximum=maximum,
        exclusiveMinimum=exclusive_minimum,
        exclusiveMaximum=exclusive_maximum,
        multipleOf=multiple_of,
        format=format,
        default=default,
        example=example,
        description=description or None,
    )


def create_integer_schema(
    minimum: int | None = None,
    maximum: int | None = None,
    exclusive_minimum: int | None = None,
    exclusive_maximum: int | None = None,
    multiple_of: int | None = None,
    format: str | None = None,
    default: int | None = None,
    example: int | None = None,
    description: str | None = None,
) -> dict:
    """Build an ``integer`` schema (``format`` is ``int32`` or ``int64``)."""
    return _schema(
        "integer",
        minimum=minimum,
        maximum=maximum,
        exclusiveMinimum=exclusive_minimum,
        exclusiveMaximum=exclusive_maximum,
        multipleOf=multiple_of,
        format=format,
        default=default,
        example=example,
        description=description or None,
    )


def create_boolean_schema(
    default: bool | None = None,
    example: bool | None = None,
    description: str | None = None,
) -> dict:
    return _schema("boolean", default=default, example=example, description=description or None)


def create_array_schema(
    items: dict,
    min_items: int | None = None,
    max_items: int | None = None,
    unique_items: bool | None = None,
    default: list | None = None,
    example: list | None = None,
    description: str | None = None,
) -> dict:
    return _schema(
        "array",
        items=items,
        minItems=min_items,
        maxItems=max_items,
        uniqueItems=unique_items,
        default=default,
        example=example,
        description=description or None,
    )


def create_object_schema(
    properties: dict,
    required: list[str] | None = None,
    additional_properties: bool | dict | None = None,
    min_properties: int | None = None,
    max_properties: int | None = None,
    example: dict | None = None,
    description: str | None = None,
) -> dict:
    """Build an ``object`` schema.

    ``required`` is only emitted when it lists at least one property.
    """
    return _schema(
        "object",
        properties=properties,
        required=list(required) if required else None,
        additionalProperties=additional_properties,
        minProperties=min_properties,
        maxProperties=max_properties,
        example=example,
        description=description or None,
    )
