"""Query, path and header parameter builders."""

from api_opener.constants import (
    API_KEY_HEADER_DEFAULTS,
    AUTHORIZATION_HEADER_DEFAULTS,
    CONTENT_TYPE_HEADER_DEFAULTS,
    ID_PARAM_DEFAULTS,
    LIMIT_PARAM_DEFAULTS,
    OFFSET_PARAM_DEFAULTS,
    PAGE_PARAM_DEFAULTS,
    PAGINATION_STYLES,
    SORT_PARAM_DEFAULTS,
)


def _parameter(name: str, location: str, description: str, required: bool, schema: dict) -> dict:
    return {
        "name": name,
        "in": location,
        "description": description,
        "required": required,
        "schema": schema,
    }


def add_id_param_to_path(description: str | None = None, schema: dict | None = None) -> dict:
    """Required ``id`` path parameter. An empty description falls back to the default."""
    return _parameter(
        "id",
        "path",
        description or ID_PARAM_DEFAULTS["description"],
        True,
        schema if schema is not None else dict(ID_PARAM_DEFAULTS["schema"]),
    )


def add_page_param_to_query() -> dict:
    return _parameter(
        "page",
        "query",
        PAGE_PARAM_DEFAULTS["description"],
        False,
        {"type": "integer", "minimum": PAGE_PARAM_DEFAULTS["minimum"]},
    )


def add_limit_param_to_query(
    description: str | None = None,
    default_value: int | None = None,
    minimum: int | None = None,
    maximum: int | None = None,
) -> dict:
    defaults = LIMIT_PARAM_DEFAULTS
    return _parameter(
        "limit",
        "query",
        description or defaults["description"],
        False,
        {
            "type": "integer",
            "minimum": minimum if minimum is not None else defaults["minimum"],
            "maximum": maximum if maximum is not None else defaults["maximum"],
            "default": default_value if default_value is not None else defaults["default_value"],
        },
    )


def add_offset_param_to_query(
    description: str | None = None,
    default_value: int | None = None,
    minimum: int | None = None,
) -> dict:
    defaults = OFFSET_PARAM_DEFAULTS
    return _parameter(
        "offset",
        "query",
        description or defaults["description"],
        False,
        {
            "type": "integer",
            "minimum": minimum if minimum is not None else defaults["minimum"],
            "default": default_value if default_value is not None else defaults["default_value"],
        },
    )


def add_sort_param_to_query(
    description: str | None = None,
    allowed_fields: list[str] | None = None,
    default_value: str | None = None,
    allow_descending: bool | None = None,
) -> dict:
    """Build the ``sort`` query parameter.

    With ``allowed_fields`` the schema gets an ``enum`` of those fields,
    followed by their ``-``-prefixed descending variants when descending
    order is allowed (the default).
    """
    description = description or SORT_PARAM_DEFAULTS["description"]
    if allow_descending is None:
        allow_descending = SORT_PARAM_DEFAULTS["allow_descending"]

    schema: dict = {"type": "string"}
    if allowed_fields:
        options = list(allowed_fields)
        if allow_descending:
            options += [f"-{field}" for field in allowed_fields]
        schema["enum"] = options
        schema["example"] = allowed_fields[0]
    if default_value:
        schema["default"] = default_value

    if allow_descending:
        description += SORT_PARAM_DEFAULTS["descending_hint"]

    return _parameter("sort", "query", description, False, schema)


def add_filter_param_to_query(
    field_name: str,
    description: str | None = None,
    schema: dict | None = None,
    required: bool = False,
) -> dict:
    return _parameter(
        field_name,
        "query",
        description or f"Filter by {field_name}",
        required,
        schema if schema is not None else {"type": "string"},
    )


def add_header_param(
    name: str,
    description: str | None = None,
    required: bool = False,
    schema: dict | None = None,
) -> dict:
    return _parameter(
        name,
        "header",
        description or f"{name} header",
        required,
        schema if schema is not None else {"type": "string"},
    )


def add_authorization_header(description: str | None = None, required: bool = True) -> dict:
    defaults = AUTHORIZATION_HEADER_DEFAULTS
    return add_header_param(
        defaults["name"],
        description=description or defaults["description"],
        required=required,
        schema={"type": "string", "pattern": defaults["pattern"], "example": defaults["example"]},
    )


def add_api_key_header(description: str | None = None, required: bool = True) -> dict:
    defaults = API_KEY_HEADER_DEFAULTS
    return add_header_param(
        defaults["name"],
        description=description or defaults["description"],
        required=required,
        schema={"type": "string", "minLength": 1, "example": defaults["example"]},
    )


def add_content_type_header(
    allowed_types: list[str] | None = None,
    description: str | None = None,
    required: bool = False,
) -> dict:
    defaults = CONTENT_TYPE_HEADER_DEFAULTS
    schema: dict = {"type": "string"}
    if allowed_types:
        schema["enum"] = list(allowed_types)
        schema["example"] = allowed_types[0]
    else:
        schema["example"] = defaults["example"]
    return add_header_param(
        defaults["name"],
        description=description or defaults["description"],
        required=required,
        schema=schema,
    )


def add_pagination_params(
    style: str = "page-limit",
    limit_config: dict | None = None,
    offset_config: dict | None = None,
    sort_config: dict | None = None,
    include_sort: bool = False,
) -> list[dict]:
    """Compose pagination parameters in order: page/offset, limit, then sort.

    The ``*_config`` dicts are passed as keyword arguments to the matching
    single-parameter builder.
    """
    if style not in PAGINATION_STYLES:
        raise ValueError(f"Unknown pagination style {style!r}. Must be one of: {', '.join(PAGINATION_STYLES)}")

    if style == "page-limit":
        parameters = [add_page_param_to_query()]
    else:
        parameters = [add_offset_param_to_query(**(offset_config or {}))]
    parameters.append(add_limit_param_to_query(**(limit_config or {})))

    if include_sort:
        parameters.append(add_sort_param_to_query(**(sort_config or {})))

    return parameters
