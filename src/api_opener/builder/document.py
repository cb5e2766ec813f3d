"""Document assembler: merges route fragments into one OpenAPI document."""

import logging
from collections.abc import Iterable, Mapping

from pydantic import BaseModel

from api_opener.constants import DOCS_DEFAULTS, OPENAPI_VERSION
from api_opener.merge import deep_merge

logger = logging.getLogger(__name__)


def merge_routes(routes: Iterable[Mapping]) -> dict:
    """Fold route fragments left to right with a deep merge.

    Fragments sharing a path keep all of their methods; on a conflicting
    scalar or list the later fragment wins.
    """
    merged: dict = {}
    for route in routes:
        merged = deep_merge(merged, route)
    return merged


def normalize_base_url(base_url: str) -> str:
    return base_url if base_url.startswith("http") else f"https://{base_url}"


def _as_dict(value: Mapping | BaseModel) -> dict:
    if isinstance(value, BaseModel):
        return value.model_dump(by_alias=True, exclude_none=True)
    return dict(value)


def create_swagger_api_docs(
    base_url: str,
    routes: Iterable[Mapping],
    title: str = DOCS_DEFAULTS["title"],
    description: str = DOCS_DEFAULTS["description"],
    version: str = DOCS_DEFAULTS["version"],
    extended_tags: list | None = None,
    definitions: dict | None = None,
    responses: dict | None = None,
    contact: Mapping | BaseModel | None = None,
    license: Mapping | BaseModel | None = None,
    terms_of_service: str | None = None,
) -> dict:
    """Assemble a complete OpenAPI 3.1.0 document.

    ``routes`` are fragments from ``create_api_route``; they are deep-merged
    into ``paths``. A ``base_url`` without scheme gets ``https://``.
    ``components`` is only emitted when ``definitions`` is given, and then
    carries ``responses`` too when those are given.
    """
    paths = merge_routes(routes)

    info: dict = {"title": title, "description": description, "version": version}
    if contact is not None:
        info["contact"] = _as_dict(contact)
    if license is not None:
        info["license"] = _as_dict(license)
    if terms_of_service:
        info["termsOfService"] = terms_of_service

    document: dict = {
        "openapi": OPENAPI_VERSION,
        "info": info,
        "servers": [{"url": normalize_base_url(base_url), "description": DOCS_DEFAULTS["server_description"]}],
        "tags": [_as_dict(tag) if isinstance(tag, BaseModel) else tag for tag in extended_tags or []],
        "paths": paths,
    }
    if definitions is not None:
        components: dict = {"schemas": definitions}
        if responses is not None:
            components["responses"] = responses
        document["components"] = components

    logger.debug(
        "Assembled document %r with %d paths and %d operations",
        title,
        len(paths),
        sum(len(methods) for methods in paths.values()),
    )
    return document
