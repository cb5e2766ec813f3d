"""Validation-flavoured field schemas.

Each builder takes an optional ``message`` that replaces the default
description, so generated docs can carry the wording of the API's own
validation errors. ``VALIDATION_SCHEMAS`` maps a short name to its builder.
"""

from api_opener.schemas.primitives import (
    create_array_schema,
    create_integer_schema,
    create_number_schema,
    create_string_schema,
)

PASSWORD_PATTERN = "^(?=.*[a-z])(?=.*[A-Z])(?=.*\\d)(?=.*[@$!%*?&])[A-Za-z\\d@$!%*?&]"
UUID_PATTERN = "^[0-9a-f]{8}-[0-9a-f]{4}-[1-5][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$"
IPV4_PATTERN = (
    "^(?:(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)\\.){3}"
    "(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)$"
)


def email(message: str | None = None) -> dict:
    return create_string_schema(
        format="email", description=message or "Valid email address required", example="user@example.com"
    )


def password(message: str | None = None, min_length: int = 8) -> dict:
    return create_string_schema(
        format="password",
        min_length=min_length,
        pattern=PASSWORD_PATTERN,
        description=message
        or "Password must contain at least 8 characters with uppercase, lowercase, number, and special character",
    )


def phone_number(message: str | None = None) -> dict:
    return create_string_schema(
        pattern="^\\+?[1-9]\\d{1,14}$",
        description=message or "Valid phone number in international format",
        example="+1234567890",
    )


def url(message: str | None = None) -> dict:
    return create_string_schema(
        pattern="^https?://[^\\s/$.?#].[^\\s]*$",
        description=message or "Valid URL starting with http:// or https://",
        example="https://example.com",
    )


def credit_card(message: str | None = None) -> dict:
    return create_string_schema(
        pattern="^\\d{13,19}$",
        description=message or "Valid credit card number (13-19 digits)",
        example="4111111111111111",
    )


def zip_code(message: str | None = None) -> dict:
    return create_string_schema(
        pattern="^\\d{5}(-\\d{4})?$", description=message or "Valid ZIP code (5 digits or 5+4 format)", example="12345"
    )


def date(message: str | None = None) -> dict:
    return create_string_schema(format="date", description=message or "Date in YYYY-MM-DD format", example="2025-07-14")


def date_time(message: str | None = None) -> dict:
    return create_string_schema(
        format="date-time", description=message or "Date and time in ISO 8601 format", example="2025-07-14T12:00:00Z"
    )


def uuid(message: str | None = None) -> dict:
    return create_string_schema(
        format="uuid",
        pattern=UUID_PATTERN,
        description=message or "Valid UUID in standard format",
        example="123e4567-e89b-12d3-a456-426614174000",
    )


def username(message: str | None = None, min_length: int = 3, max_length: int = 30) -> dict:
    return create_string_schema(
        min_length=min_length,
        max_length=max_length,
        pattern="^[a-zA-Z0-9_.-]+$",
        description=message or "Username with alphanumeric characters, underscores, dots, and hyphens",
        example="user_123",
    )


def slug(message: str | None = None) -> dict:
    return create_string_schema(
        pattern="^[a-z0-9]+(?:-[a-z0-9]+)*$",
        description=message or "URL-friendly slug with lowercase letters, numbers, and hyphens",
        example="my-blog-post",
    )


def hex_color(message: str | None = None) -> dict:
    return create_string_schema(
        pattern="^#[0-9A-Fa-f]{6}$", description=message or "Hex color code in #RRGGBB format", example="#FF5733"
    )


def ip_address(message: str | None = None) -> dict:
    return create_string_schema(pattern=IPV4_PATTERN, description=message or "Valid IPv4 address", example="192.168.1.1")


def mac_address(message: str | None = None) -> dict:
    return create_string_schema(
        pattern="^([0-9A-Fa-f]{2}[:-]){5}([0-9A-Fa-f]{2})$",
        description=message or "Valid MAC address in xx:xx:xx:xx:xx:xx format",
        example="00:1B:44:11:3A:B7",
    )


def ssn(message: str | None = None) -> dict:
    return create_string_schema(
        pattern="^\\d{3}-\\d{2}-\\d{4}$",
        description=message or "Social Security Number in xxx-xx-xxxx format",
        example="123-45-6789",
    )


def positive_integer(message: str | None = None) -> dict:
    return create_integer_schema(minimum=1, description=message or "Positive integer (greater than 0)", example=42)


def non_negative_integer(message: str | None = None) -> dict:
    return create_integer_schema(minimum=0, description=message or "Non-negative integer (0 or greater)", example=0)


def positive_number(message: str | None = None) -> dict:
    # 3.1 spelling: exclusiveMinimum is the bound itself, not a boolean flag
    return create_number_schema(
        exclusive_minimum=0, description=message or "Positive number (greater than 0)", example=42.5
    )


def price(message: str | None = None) -> dict:
    return create_number_schema(
        minimum=0, multiple_of=0.01, description=message or "Price with up to 2 decimal places", example=29.99
    )


def percentage(message: str | None = None) -> dict:
    return create_number_schema(
        minimum=0, maximum=100, description=message or "Percentage value between 0 and 100", example=75.5
    )


def rating(message: str | None = None, minimum: float = 1, maximum: float = 5) -> dict:
    return create_number_schema(
        minimum=minimum,
        maximum=maximum,
        description=message or f"Rating between {minimum} and {maximum}",
        example=4.2,
    )


VALIDATION_SCHEMAS = {
    "email": email,
    "password": password,
    "phone_number": phone_number,
    "url": url,
    "credit_card": credit_card,
    "zip_code": zip_code,
    "date": date,
    "date_time": date_time,
    "uuid": uuid,
    "username": username,
    "slug": slug,
    "hex_color": hex_color,
    "ip_address": ip_address,
    "mac_address": mac_address,
    "ssn": ssn,
    "positive_integer": positive_integer,
    "non_negative_integer": non_negative_integer,
    "positive_number": positive_number,
    "price": price,
    "percentage": percentage,
    "rating": rating,
}


def create_enum_validation_schema(values: list[str | int | float], message: str | None = None) -> dict:
    """Enum schema whose ``type`` is inferred from the values.

    All strings give ``string``, all numbers give ``number``; a mix falls back
    to ``string``.
    """
    is_number_enum = bool(values) and all(
        isinstance(value, (int, float)) and not isinstance(value, bool) for value in values
    )
    schema = {
        "type": "number" if is_number_enum else "string",
        "enum": list(values),
        "description": message or f"Must be one of: {', '.join(map(str, values))}",
    }
    if values:
        schema["example"] = values[0]
    return schema


def create_array_validation_schema(
    item_schema: dict,
    message: str | None = None,
    min_items: int | None = None,
    max_items: int | None = None,
    unique_items: bool | None = None,
) -> dict:
    return create_array_schema(
        item_schema,
        min_items=min_items,
        max_items=max_items,
        unique_items=unique_items,
        description=message or "Array of items",
    )


def create_string_length_validation_schema(min_length: int, max_length: int, message: str | None = None) -> dict:
    """String bounded in length; the example is ``min_length`` repetitions of ``a``."""
    return create_string_schema(
        min_length=min_length,
        max_length=max_length,
        description=message or f"String between {min_length} and {max_length} characters",
        example="a" * min_length,
    )


def create_number_range_validation_schema(minimum: float, maximum: float, message: str | None = None) -> dict:
    """Number bounded on both sides; the example is the midpoint of the range."""
    return create_number_schema(
        minimum=minimum,
        maximum=maximum,
        description=message or f"Number between {minimum} and {maximum}",
        example=(minimum + maximum) / 2,
    )
