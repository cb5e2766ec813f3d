import json

import pytest

from api_opener.builder.error_templates import (
    ERROR_RESPONSE_SCHEMA,
    create_common_error_templates,
    create_error_response_template,
)
from api_opener.builder.pagination import create_cursor_paginated_response, create_paginated_response
from api_opener.builder.responses import (
    add_response_status,
    create_bad_request_response,
    create_created_response,
    create_internal_server_error_response,
    create_no_content_response,
    create_not_found_response,
    create_response,
    create_success_response,
    create_too_many_requests_response,
    merge_responses,
    status_key,
)
from api_opener.constants import FORM_MEDIA_TYPE, JSON_MEDIA_TYPE
from api_opener.errors import ResponseStatusValidationError

USER = {"type": "object", "properties": {"id": {"type": "integer"}}}


class TestStatusKey:
    def test_int_becomes_string_key(self):
        assert status_key(200) == "200"

    def test_default(self):
        assert status_key("default") == "default"

    @pytest.mark.parametrize("code", [100, 599])
    def test_range_bounds_accepted(self, code):
        assert status_key(code) == str(code)

    @pytest.mark.parametrize("code", [99, 600, 0, -1])
    def test_out_of_range(self, code):
        with pytest.raises(ResponseStatusValidationError, match=f"Invalid HTTP status code {code}"):
            status_key(code)

    def test_none(self):
        with pytest.raises(ResponseStatusValidationError, match="cannot be undefined or null") as exc:
            status_key(None)
        assert exc.value.field == "statusCode"

    @pytest.mark.parametrize("code", ["200", True, 200.0])
    def test_non_integer(self, code):
        with pytest.raises(ResponseStatusValidationError, match="Must be an integer or 'default'"):
            status_key(code)


class TestAddResponseStatus:
    def test_without_schema(self):
        assert add_response_status(204, "No Content") == {"204": {"description": "No Content"}}

    def test_with_schema_both_media_types(self):
        assert add_response_status(200, "User", USER) == {
            "200": {
                "description": "User",
                "content": {
                    JSON_MEDIA_TYPE: {"schema": USER},
                    FORM_MEDIA_TYPE: {"schema": USER},
                },
            }
        }

    def test_default_status(self):
        assert list(add_response_status("default", "Unexpected error")) == ["default"]

    @pytest.mark.parametrize("description", ["", "   "])
    def test_empty_description(self, description):
        with pytest.raises(ResponseStatusValidationError, match="Description cannot be empty") as exc:
            add_response_status(200, description)
        assert exc.value.field == "description"

    def test_status_checked_before_description(self):
        with pytest.raises(ResponseStatusValidationError) as exc:
            add_response_status(700, "")
        assert exc.value.field == "statusCode"

    def test_json_round_trip(self):
        response = add_response_status(201, "Created", USER)
        assert json.loads(json.dumps(response)) == response


class TestCreateResponse:
    def test_custom_content_types_and_examples(self):
        response = create_response(
            200,
            "CSV export",
            schema={"type": "string"},
            content_types=["text/csv"],
            examples={"text/csv": "id,name\n1,Bob"},
        )
        assert response["200"]["content"] == {"text/csv": {"schema": {"type": "string"}, "example": "id,name\n1,Bob"}}

    def test_headers(self):
        headers = {"X-Rate-Limit": {"schema": {"type": "integer"}}}
        response = create_response(200, "OK", headers=headers)
        assert response == {"200": {"description": "OK", "headers": headers}}

    def test_validates_status(self):
        with pytest.raises(ResponseStatusValidationError):
            create_response(42, "Odd")


class TestFixedStatusResponses:
    def test_success_and_created(self):
        assert list(create_success_response("Fetched", USER)) == ["200"]
        assert create_created_response("Created")["201"] == {"description": "Created"}

    def test_default_descriptions(self):
        assert create_no_content_response() == {"204": {"description": "No Content"}}
        assert create_bad_request_response()["400"]["description"] == "Bad Request"
        assert create_not_found_response()["404"]["description"] == "Not Found"
        assert create_too_many_requests_response()["429"]["description"] == "Too Many Requests"
        assert create_internal_server_error_response()["500"]["description"] == "Internal Server Error"

    def test_override_description(self):
        assert create_not_found_response("User not found")["404"]["description"] == "User not found"


class TestMergeResponses:
    def test_union(self):
        merged = merge_responses(create_success_response("OK"), create_not_found_response())
        assert list(merged) == ["200", "404"]

    def test_right_biased_and_shallow(self):
        first = add_response_status(200, "First", USER)
        second = add_response_status(200, "Second")
        merged = merge_responses(first, second)
        assert merged == {"200": {"description": "Second"}}

    def test_empty(self):
        assert merge_responses() == {}


class TestErrorTemplates:
    def test_template_shape(self):
        response = create_error_response_template(404, "Not Found", "USER_NOT_FOUND")
        content = response["404"]["content"]
        assert list(content) == [JSON_MEDIA_TYPE]
        assert content[JSON_MEDIA_TYPE]["schema"] == ERROR_RESPONSE_SCHEMA
        assert content[JSON_MEDIA_TYPE]["example"]["error"]["code"] == "USER_NOT_FOUND"

    def test_unknown_error_code(self):
        example = create_error_response_template(500, "Boom")["500"]["content"][JSON_MEDIA_TYPE]["example"]
        assert example["error"]["code"] == "UNKNOWN_ERROR"
        assert example["error"]["message"] == "Boom"

    def test_schema_is_a_copy(self):
        response = create_error_response_template(400, "Bad")
        response["400"]["content"][JSON_MEDIA_TYPE]["schema"]["required"].append("extra")
        assert ERROR_RESPONSE_SCHEMA["required"] == ["error"]

    def test_common_templates(self):
        templates = create_common_error_templates()
        assert list(templates["validation_error"]) == ["422"]
        assert list(templates["service_unavailable"]) == ["503"]
        validation = templates["validation_error"]["422"]["content"][JSON_MEDIA_TYPE]
        assert validation["schema"]["properties"]["error"]["required"] == ["code", "message", "details"]
        assert len(templates) == 9


class TestPaginatedResponses:
    def test_paginated_with_metadata(self):
        response = create_paginated_response(USER)["200"]
        schema = response["content"][JSON_MEDIA_TYPE]["schema"]
        assert response["description"] == "Paginated results"
        assert schema["required"] == ["data", "meta"]
        assert schema["properties"]["data"]["items"] == USER
        assert "example" not in response["content"][FORM_MEDIA_TYPE]

    def test_paginated_without_metadata(self):
        response = create_paginated_response(USER, include_metadata=False)["200"]
        schema = response["content"][JSON_MEDIA_TYPE]["schema"]
        assert schema["required"] == ["data"]
        assert "meta" not in response["content"][JSON_MEDIA_TYPE]["example"]

    def test_custom_metadata_schema(self):
        meta = {"type": "object", "properties": {"total": {"type": "integer"}}}
        schema = create_paginated_response(USER, metadata_schema=meta)["200"]["content"][JSON_MEDIA_TYPE]["schema"]
        assert schema["properties"]["meta"] == meta

    def test_cursor_paginated(self):
        response = create_cursor_paginated_response(USER)["200"]
        pagination = response["content"][JSON_MEDIA_TYPE]["schema"]["properties"]["pagination"]
        assert pagination["properties"]["nextCursor"]["type"] == ["string", "null"]
        assert response["content"][JSON_MEDIA_TYPE]["example"]["pagination"]["prevCursor"] is None

    def test_json_round_trip(self):
        response = create_cursor_paginated_response(USER)
        assert json.loads(json.dumps(response)) == response
