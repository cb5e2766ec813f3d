"""Turns a DocsConfig into builder calls and an assembled document."""

import fnmatch
import logging

from api_opener.builder.document import create_swagger_api_docs
from api_opener.builder.parameters import add_pagination_params
from api_opener.builder.request_body import add_request_body
from api_opener.builder.responses import add_response_status, merge_responses
from api_opener.builder.route import create_api_route
from api_opener.config import DocsConfig, RouteConfig, Tag

logger = logging.getLogger(__name__)


def _tag(tag: str | Tag | None):
    if isinstance(tag, Tag):
        return tag.model_dump(by_alias=True, exclude_none=True)
    return tag


def _parameters(config: RouteConfig) -> list[dict] | None:
    if config.parameters is None and config.pagination is None:
        return None
    parameters = list(config.parameters or [])
    if config.pagination is not None:
        pagination = config.pagination
        parameters.extend(
            add_pagination_params(
                style=pagination.style,
                limit_config=pagination.limit_config.model_dump(exclude_none=True),
                offset_config=pagination.offset_config.model_dump(exclude_none=True),
                sort_config=pagination.sort_config.model_dump(exclude_none=True),
                include_sort=pagination.include_sort,
            )
        )
    return parameters


def build_route(config: RouteConfig) -> dict:
    """Build one route fragment from its definition."""
    request_body = None
    if config.request_body is not None:
        request_body = add_request_body(**config.request_body.model_dump())

    responses = None
    if config.responses is not None:
        responses = merge_responses(
            *(add_response_status(r.status_code, r.description, r.schema_) for r in config.responses)
        )

    return create_api_route(
        route=config.route,
        method=config.method,
        tag=_tag(config.tag),
        summary=config.summary,
        description=config.description,
        operation_id=config.operation_id,
        parameters=_parameters(config),
        request_body=request_body,
        responses=responses,
        security=config.security,
    )


def filter_routes(routes: list[RouteConfig], patterns: tuple[str, ...]) -> list[RouteConfig]:
    """Keep routes matching any pattern.

    A pattern is either ``"METHOD /path"`` or just ``"/path"``; the path part
    uses fnmatch wildcards (``/pets/*``). No patterns keeps everything.
    """
    if not patterns:
        return list(routes)

    selected = []
    for route in routes:
        for pattern in patterns:
            parts = pattern.split()
            method, path = (parts[0], parts[-1]) if len(parts) > 1 else (None, pattern.strip())
            if method and method.lower() != route.method.lower():
                continue
            if fnmatch.fnmatchcase(route.route, path):
                selected.append(route)
                break
    return selected


def build_document(config: DocsConfig, only: tuple[str, ...] = ()) -> dict:
    """Build every (selected) route and assemble the full document."""
    route_configs = filter_routes(config.routes, only)
    logger.debug("Building %d of %d routes", len(route_configs), len(config.routes))
    routes = [build_route(route_config) for route_config in route_configs]

    metadata = config.model_dump(
        include={"title", "description", "version"},
        exclude_none=True,
    )
    return create_swagger_api_docs(
        base_url=config.base_url,
        routes=routes,
        extended_tags=config.tags,
        definitions=config.definitions,
        responses=config.responses,
        contact=config.contact,
        license=config.license,
        terms_of_service=config.terms_of_service,
        **metadata,
    )
