"""Ready-made schemas for common fields.

Use ``get_preset("string", "email")``; it returns a fresh copy so callers can
extend the schema without touching the shared table.
"""

import copy

from api_opener.schemas.primitives import (
    create_array_schema,
    create_integer_schema,
    create_number_schema,
    create_object_schema,
    create_string_schema,
)

STRING_PRESETS = {
    "email": create_string_schema(format="email", description="Email address", example="user@example.com"),
    "password": create_string_schema(
        format="password", min_length=8, max_length=128, description="Password with minimum 8 characters"
    ),
    "uuid": create_string_schema(
        format="uuid", description="UUID identifier", example="123e4567-e89b-12d3-a456-426614174000"
    ),
    "url": create_string_schema(pattern="^https?://.*", description="URL string", example="https://example.com"),
    "slug": create_string_schema(
        pattern="^[a-z0-9]+(?:-[a-z0-9]+)*$", description="URL-friendly slug", example="my-blog-post"
    ),
    "phone_number": create_string_schema(
        pattern="^\\+?[1-9]\\d{1,14}$", description="Phone number", example="+1234567890"
    ),
    "date": create_string_schema(format="date", description="Date in YYYY-MM-DD format", example="2025-07-14"),
    "date_time": create_string_schema(
        format="date-time", description="Date and time in ISO 8601 format", example="2025-07-14T12:00:00Z"
    ),
    "username": create_string_schema(
        min_length=3,
        max_length=30,
        pattern="^[a-zA-Z0-9_]+$",
        description="Username with alphanumeric characters and underscores",
        example="user_123",
    ),
    "color": create_string_schema(pattern="^#[0-9A-Fa-f]{6}$", description="Hex color code", example="#FF5733"),
}

NUMBER_PRESETS = {
    "price": create_number_schema(minimum=0, multiple_of=0.01, description="Price in currency units", example=29.99),
    "percentage": create_number_schema(minimum=0, maximum=100, description="Percentage value", example=75.5),
    "rating": create_number_schema(minimum=1, maximum=5, description="Rating from 1 to 5", example=4.2),
    "latitude": create_number_schema(minimum=-90, maximum=90, description="Latitude coordinate", example=40.7128),
    "longitude": create_number_schema(minimum=-180, maximum=180, description="Longitude coordinate", example=-74.006),
    "weight": create_number_schema(minimum=0, description="Weight in kilograms", example=70.5),
    "temperature": create_number_schema(description="Temperature in Celsius", example=22.5),
}

INTEGER_PRESETS = {
    "id": create_integer_schema(minimum=1, description="Unique identifier", example=123),
    "age": create_integer_schema(minimum=0, maximum=150, description="Age in years", example=25),
    "page": create_integer_schema(minimum=1, default=1, description="Page number for pagination", example=1),
    "limit": create_integer_schema(
        minimum=1, maximum=100, default=10, description="Number of items per page", example=10
    ),
    "count": create_integer_schema(minimum=0, description="Count of items", example=42),
    "port": create_integer_schema(minimum=1, maximum=65535, description="Network port number", example=8080),
    "http_status": create_integer_schema(minimum=100, maximum=599, description="HTTP status code", example=200),
}

ARRAY_PRESETS = {
    "strings": create_array_schema(items={"type": "string"}, description="Array of strings", example=["item1", "item2"]),
    "numbers": create_array_schema(items={"type": "number"}, description="Array of numbers", example=[1, 2, 3.5]),
    "integers": create_array_schema(items={"type": "integer"}, description="Array of integers", example=[1, 2, 3]),
    "tags": create_array_schema(
        items={"type": "string", "minLength": 1},
        unique_items=True,
        min_items=1,
        max_items=20,
        description="Array of unique tags",
        example=["frontend", "javascript", "react"],
    ),
    "ids": create_array_schema(
        items={"type": "integer", "minimum": 1},
        unique_items=True,
        min_items=1,
        description="Array of unique IDs",
        example=[1, 2, 3],
    ),
    "emails": create_array_schema(
        items={"type": "string", "format": "email"},
        unique_items=True,
        description="Array of email addresses",
        example=["user1@example.com", "user2@example.com"],
    ),
    "urls": create_array_schema(
        items={"type": "string", "pattern": "^https?://.*"},
        description="Array of URLs",
        example=["https://example.com", "https://another.com"],
    ),
    "coordinates": create_array_schema(
        items={"type": "number"},
        min_items=2,
        max_items=2,
        description="Latitude and longitude coordinates",
        example=[40.7128, -74.006],
    ),
}

OBJECT_PRESETS = {
    "user": create_object_schema(
        properties={
            "id": {"type": "integer", "minimum": 1, "description": "Unique user identifier"},
            "email": {"type": "string", "format": "email", "description": "User email address"},
            "name": {"type": "string", "minLength": 2, "maxLength": 100, "description": "User full name"},
            "createdAt": {"type": "string", "format": "date-time", "description": "User creation timestamp"},
            "isActive": {"type": "boolean", "description": "Whether user is active"},
        },
        required=["id", "email", "name"],
        description="User object",
    ),
    "address": create_object_schema(
        properties={
            "street": {"type": "string", "minLength": 5, "description": "Street address"},
            "city": {"type": "string", "minLength": 2, "description": "City name"},
            "state": {"type": "string", "minLength": 2, "description": "State or province"},
            "zipCode": {"type": "string", "pattern": "^\\d{5}(-\\d{4})?$", "description": "ZIP or postal code"},
            "country": {"type": "string", "minLength": 2, "description": "Country name"},
        },
        required=["street", "city", "state", "zipCode", "country"],
        description="Address object",
        example={"street": "123 Main St", "city": "New York", "state": "NY", "zipCode": "10001", "country": "USA"},
    ),
    "product": create_object_schema(
        properties={
            "id": {"type": "integer", "minimum": 1, "description": "Product ID"},
            "name": {"type": "string", "minLength": 2, "description": "Product name"},
            "price": {"type": "number", "minimum": 0, "description": "Product price"},
            "category": {"type": "string", "description": "Product category"},
            "inStock": {"type": "boolean", "description": "Whether product is in stock"},
            "tags": {"type": "array", "items": {"type": "string"}, "description": "Product tags"},
        },
        required=["id", "name", "price"],
        description="Product object",
        example={
            "id": 1,
            "name": "Laptop",
            "price": 999.99,
            "category": "Electronics",
            "inStock": True,
            "tags": ["computer", "electronics"],
        },
    ),
    "error": create_object_schema(
        properties={
            "code": {"type": "string", "description": "Error code"},
            "message": {"type": "string", "description": "Error message"},
            "details": {"type": "array", "items": {"type": "string"}, "description": "Error details"},
            "timestamp": {"type": "string", "format": "date-time", "description": "Error timestamp"},
        },
        required=["code", "message"],
        description="Error object",
    ),
    "pagination": create_object_schema(
        properties={
            "page": {"type": "integer", "minimum": 1, "description": "Current page number"},
            "limit": {"type": "integer", "minimum": 1, "description": "Items per page"},
            "total": {"type": "integer", "minimum": 0, "description": "Total number of items"},
            "totalPages": {"type": "integer", "minimum": 0, "description": "Total number of pages"},
            "hasNext": {"type": "boolean", "description": "Whether there are more pages"},
            "hasPrevious": {"type": "boolean", "description": "Whether there are previous pages"},
        },
        required=["page", "limit", "total"],
        description="Pagination metadata",
    ),
}

PRESETS = {
    "string": STRING_PRESETS,
    "number": NUMBER_PRESETS,
    "integer": INTEGER_PRESETS,
    "array": ARRAY_PRESETS,
    "object": OBJECT_PRESETS,
}


def get_preset(kind: str, name: str) -> dict:
    """Return a copy of the named preset schema.

    Raises KeyError for an unknown kind or name.
    """
    return copy.deepcopy(PRESETS[kind][name])


def list_presets() -> dict[str, list[str]]:
    return {kind: sorted(table) for kind, table in PRESETS.items()}
