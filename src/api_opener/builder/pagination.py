"""Paginated list responses (page/offset envelope and cursor envelope)."""

import copy
from http import HTTPStatus

from api_opener.constants import FORM_MEDIA_TYPE, JSON_MEDIA_TYPE

EXAMPLE_ITEMS = [{"id": 1, "name": "Item 1"}, {"id": 2, "name": "Item 2"}]

DEFAULT_METADATA_SCHEMA = {
    "type": "object",
    "properties": {
        "totalCount": {"type": "integer", "description": "Total number of items across all pages"},
        "page": {"type": "integer", "description": "Current page number"},
        "limit": {"type": "integer", "description": "Number of items per page"},
        "totalPages": {"type": "integer", "description": "Total number of pages"},
        "hasNext": {"type": "boolean", "description": "Whether there are more pages"},
        "hasPrevious": {"type": "boolean", "description": "Whether there are previous pages"},
    },
}


def _data_array(item_schema: dict) -> dict:
    return {"type": "array", "items": item_schema, "description": "Array of items for the current page"}


def _ok(description: str, schema: dict, example: dict) -> dict:
    return {
        str(int(HTTPStatus.OK)): {
            "description": description,
            "content": {
                JSON_MEDIA_TYPE: {"schema": schema, "example": example},
                FORM_MEDIA_TYPE: {"schema": schema},
            },
        }
    }


def create_paginated_response(
    item_schema: dict,
    description: str = "Paginated results",
    include_metadata: bool = True,
    metadata_schema: dict | None = None,
) -> dict:
    properties = {"data": _data_array(item_schema)}
    required = ["data"]
    example: dict = {"data": copy.deepcopy(EXAMPLE_ITEMS)}
    if include_metadata:
        properties["meta"] = metadata_schema or copy.deepcopy(DEFAULT_METADATA_SCHEMA)
        required.append("meta")
        example["meta"] = {
            "totalCount": 100,
            "page": 1,
            "limit": 10,
            "totalPages": 10,
            "hasNext": True,
            "hasPrevious": False,
        }

    schema = {"type": "object", "properties": properties, "required": required}
    return _ok(description, schema, example)


def create_cursor_paginated_response(
    item_schema: dict,
    description: str = "Cursor-based paginated results",
) -> dict:
    schema = {
        "type": "object",
        "properties": {
            "data": _data_array(item_schema),
            "pagination": {
                "type": "object",
                "properties": {
                    "nextCursor": {
                        "type": ["string", "null"],
                        "description": "Cursor for the next page, null if no more pages",
                    },
                    "prevCursor": {
                        "type": ["string", "null"],
                        "description": "Cursor for the previous page, null if first page",
                    },
                    "hasNext": {"type": "boolean", "description": "Whether there are more pages"},
                    "hasPrevious": {"type": "boolean", "description": "Whether there are previous pages"},
                },
                "required": ["nextCursor", "prevCursor", "hasNext", "hasPrevious"],
            },
        },
        "required": ["data", "pagination"],
    }
    example = {
        "data": copy.deepcopy(EXAMPLE_ITEMS),
        "pagination": {"nextCursor": "eyJpZCI6Mn0=", "prevCursor": None, "hasNext": True, "hasPrevious": False},
    }
    return _ok(description, schema, example)
