import pytest

from api_opener.schemas.composition import (
    api_response,
    create_all_of_schema,
    create_any_of_schema,
    create_conditional_schema,
    create_discriminator_schema,
    create_not_schema,
    create_one_of_schema,
    nullable,
    paginated,
    timestamped,
)
from api_opener.schemas.presets import get_preset, list_presets
from api_opener.schemas.primitives import (
    create_array_schema,
    create_boolean_schema,
    create_integer_schema,
    create_number_schema,
    create_object_schema,
    create_string_schema,
)
from api_opener.schemas.reference import (
    COMMON_SCHEMA_REFERENCES,
    common_reference,
    create_parameter_reference,
    create_request_body_reference,
    create_response_reference,
    create_schema_reference,
    create_security_scheme_reference,
    get_component_name_from_reference,
    get_component_type_from_reference,
    is_valid_schema_reference,
)


class TestPrimitiveSchemas:
    def test_bare_string(self):
        assert create_string_schema() == {"type": "string"}

    def test_string_constraints_use_openapi_keys(self):
        schema = create_string_schema(min_length=2, max_length=10, pattern="^a", format="email", example="a@b.c")
        assert schema == {
            "type": "string",
            "minLength": 2,
            "maxLength": 10,
            "pattern": "^a",
            "format": "email",
            "example": "a@b.c",
        }

    def test_zero_constraints_are_kept(self):
        assert create_integer_schema(minimum=0, default=0) == {"type": "integer", "minimum": 0, "default": 0}

    def test_number_exclusive_bounds(self):
        schema = create_number_schema(exclusive_minimum=0, multiple_of=0.5, format="double")
        assert schema == {"type": "number", "exclusiveMinimum": 0, "multipleOf": 0.5, "format": "double"}

    def test_boolean_false_default_kept(self):
        assert create_boolean_schema(default=False) == {"type": "boolean", "default": False}

    def test_array(self):
        schema = create_array_schema({"type": "string"}, min_items=1, unique_items=True)
        assert schema == {"type": "array", "items": {"type": "string"}, "minItems": 1, "uniqueItems": True}

    def test_object_without_required(self):
        schema = create_object_schema({"name": {"type": "string"}})
        assert "required" not in schema
        assert schema["properties"] == {"name": {"type": "string"}}

    def test_object_empty_required_omitted(self):
        assert "required" not in create_object_schema({"a": {}}, required=[])

    def test_object_additional_properties_false(self):
        schema = create_object_schema({"a": {}}, required=["a"], additional_properties=False)
        assert schema["required"] == ["a"]
        assert schema["additionalProperties"] is False


class TestCompositionSchemas:
    def test_combinators(self):
        a, b = {"type": "string"}, {"type": "integer"}
        assert create_all_of_schema([a, b]) == {"allOf": [a, b]}
        assert create_one_of_schema([a, b]) == {"oneOf": [a, b]}
        assert create_any_of_schema([a, b], description="Either") == {"anyOf": [a, b], "description": "Either"}
        assert create_not_schema(a) == {"not": a}

    def test_conditional_without_else(self):
        schema = create_conditional_schema({"properties": {"kind": {"const": "a"}}}, {"required": ["a"]})
        assert set(schema) == {"if", "then"}

    def test_conditional_with_else(self):
        schema = create_conditional_schema({}, {}, {"required": ["b"]})
        assert schema["else"] == {"required": ["b"]}

    def test_discriminator(self):
        schema = create_discriminator_schema("petType", {"cat": "#/components/schemas/Cat"})
        assert schema == {
            "discriminator": {"propertyName": "petType", "mapping": {"cat": "#/components/schemas/Cat"}},
        }

    def test_nullable(self):
        schema = nullable({"type": "string"})
        assert schema["oneOf"] == [{"type": "string"}, {"type": "null"}]
        assert schema["description"] == "Nullable value"

    def test_paginated_envelope(self):
        schema = paginated({"type": "string"})
        assert schema["required"] == ["data", "meta"]
        assert schema["properties"]["data"]["items"] == {"type": "string"}

    def test_api_response_wrapper(self):
        schema = api_response({"type": "object"})
        assert schema["required"] == ["success", "data"]

    def test_timestamped(self):
        schema = timestamped({"type": "object"})
        assert schema["allOf"][0] == {"type": "object"}
        assert schema["allOf"][1]["required"] == ["createdAt", "updatedAt"]


class TestReferences:
    def test_reference_builders(self):
        assert create_schema_reference("User") == {"$ref": "#/components/schemas/User"}
        assert create_parameter_reference("Page") == {"$ref": "#/components/parameters/Page"}
        assert create_response_reference("NotFound") == {"$ref": "#/components/responses/NotFound"}
        assert create_request_body_reference("NewUser") == {"$ref": "#/components/requestBodies/NewUser"}
        assert create_security_scheme_reference("bearer") == {"$ref": "#/components/securitySchemes/bearer"}

    @pytest.mark.parametrize(
        "reference",
        [
            "#/components/schemas/User",
            "#/components/parameters/page-size",
            "#/components/securitySchemes/bearer_auth",
        ],
    )
    def test_valid_references(self, reference):
        assert is_valid_schema_reference(reference) is True

    @pytest.mark.parametrize(
        "reference",
        [
            "#/components/models/User",
            "#/components/schemas/User.Name",
            "#/components/schemas/",
            "components/schemas/User",
            "#/components/schemas/User\n",
            None,
        ],
    )
    def test_invalid_references(self, reference):
        assert is_valid_schema_reference(reference) is False

    def test_component_name_and_type(self):
        assert get_component_name_from_reference("#/components/schemas/User") == "User"
        assert get_component_type_from_reference("#/components/responses/NotFound") == "responses"

    def test_common_references(self):
        assert COMMON_SCHEMA_REFERENCES["User"] == {"$ref": "#/components/schemas/User"}
        assert common_reference("BearerAuth") == {"$ref": "#/components/securitySchemes/BearerAuth"}
        assert common_reference("PageParam") == {"$ref": "#/components/parameters/PageParam"}
        assert all(is_valid_schema_reference(ref["$ref"]) for ref in COMMON_SCHEMA_REFERENCES.values())

    def test_common_reference_is_a_copy(self):
        common_reference("User")["$ref"] = "changed"
        assert COMMON_SCHEMA_REFERENCES["User"]["$ref"] == "#/components/schemas/User"

    def test_unknown_common_reference(self):
        with pytest.raises(KeyError):
            common_reference("Nope")

    def test_component_parts_of_non_reference(self):
        assert get_component_name_from_reference("#/definitions/User") is None
        assert get_component_type_from_reference("User") is None


class TestPresets:
    def test_get_preset(self):
        assert get_preset("string", "email")["format"] == "email"
        assert get_preset("integer", "port")["maximum"] == 65535

    def test_extended_presets(self):
        assert get_preset("number", "weight")["minimum"] == 0
        assert get_preset("number", "temperature") == {
            "type": "number",
            "description": "Temperature in Celsius",
            "example": 22.5,
        }
        coordinates = get_preset("array", "coordinates")
        assert (coordinates["minItems"], coordinates["maxItems"]) == (2, 2)
        assert get_preset("array", "urls")["items"]["pattern"] == "^https?://.*"
        assert get_preset("array", "numbers")["items"] == {"type": "number"}
        assert get_preset("array", "integers")["items"] == {"type": "integer"}
        assert get_preset("object", "address")["required"] == ["street", "city", "state", "zipCode", "country"]
        assert get_preset("object", "product")["required"] == ["id", "name", "price"]

    def test_get_preset_returns_copy(self):
        schema = get_preset("object", "user")
        schema["properties"]["extra"] = {"type": "string"}
        assert "extra" not in get_preset("object", "user")["properties"]

    def test_unknown_preset(self):
        with pytest.raises(KeyError):
            get_preset("string", "nope")

    def test_list_presets(self):
        listing = list_presets()
        assert set(listing) == {"string", "number", "integer", "array", "object"}
        assert listing["string"] == sorted(listing["string"])
        assert "uuid" in listing["string"]
