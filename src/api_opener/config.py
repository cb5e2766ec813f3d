"""Data models for document definition files.

A definition file (YAML or JSON) describes a whole API document: metadata,
component schemas and a list of routes. Field names follow the OpenAPI
camelCase spelling; snake_case names are accepted as well.
"""

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _Model(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")


class Contact(_Model):
    name: str | None = None
    url: str | None = None
    email: str | None = None


class License(_Model):
    name: str | None = None
    url: str | None = None


class ExternalDocs(_Model):
    url: str
    description: str | None = None


class Tag(_Model):
    name: str
    description: str | None = None
    external_docs: ExternalDocs | None = None


class RequestBodyConfig(_Model):
    """Input of ``add_request_body``; properties XOR ref_string is checked there."""

    description: str | None = None
    is_required: bool | None = None
    required_fields: list[str] | None = None
    properties: dict[str, Any] | None = None
    ref_string: str | None = None


class ResponseConfig(_Model):
    status_code: int | Literal["default"]
    description: str
    schema_: dict[str, Any] | None = Field(default=None, alias="schema")


class LimitConfig(_Model):
    description: str | None = None
    default_value: int | None = None
    minimum: int | None = None
    maximum: int | None = None


class OffsetConfig(_Model):
    description: str | None = None
    default_value: int | None = None
    minimum: int | None = None


class SortConfig(_Model):
    description: str | None = None
    allowed_fields: list[str] | None = None
    default_value: str | None = None
    allow_descending: bool | None = None


class PaginationConfig(_Model):
    style: Literal["page-limit", "offset-limit"] = "page-limit"
    limit_config: LimitConfig = LimitConfig()
    offset_config: OffsetConfig = OffsetConfig()
    sort_config: SortConfig = SortConfig()
    include_sort: bool = False


class RouteConfig(_Model):
    """One operation. ``pagination`` parameters are appended after ``parameters``."""

    route: str
    method: str
    tag: str | Tag | None = None
    summary: str | None = None
    description: str | None = None
    operation_id: str | None = None
    parameters: list[dict[str, Any]] | None = None
    pagination: PaginationConfig | None = None
    request_body: RequestBodyConfig | None = None
    responses: list[ResponseConfig] | None = None
    security: list[dict[str, list[str]]] | None = None


class DocsConfig(_Model):
    title: str | None = None
    description: str | None = None
    version: str | None = None
    base_url: str
    tags: list[Tag] = []
    definitions: dict[str, Any] | None = None
    responses: dict[str, Any] | None = None
    contact: Contact | None = None
    license: License | None = None
    terms_of_service: str | None = None
    routes: list[RouteConfig] = []


def load_docs_config(file_path: Path) -> DocsConfig:
    """Read a YAML or JSON definition file into a DocsConfig.

    Raises yaml.YAMLError when the file is not well-formed YAML or JSON,
    pydantic.ValidationError when the content does not match the models, and
    ValueError when the file is not a mapping at the top level.
    """
    text = file_path.read_text(encoding="utf-8")
    data = yaml.safe_load(text)
    if not isinstance(data, dict):
        raise ValueError(f"{file_path}: definition file must contain a mapping at the top level")
    return DocsConfig.model_validate(data)
