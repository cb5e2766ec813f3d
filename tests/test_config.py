from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from api_opener.config import DocsConfig, ResponseConfig, RouteConfig, Tag, load_docs_config

FIXTURES = Path(__file__).parent / "fixtures"


class TestLoadDocsConfig:
    def test_load_petstore(self):
        config = load_docs_config(FIXTURES / "petstore.yaml")
        assert config.title == "Petstore"
        assert config.base_url == "petstore.example.com/v1"
        assert config.contact.email == "pets@example.com"
        assert config.tags == [Tag(name="pets", description="Everything about pets")]
        assert set(config.definitions) == {"Pet", "NewPet"}
        assert len(config.routes) == 3

    def test_route_fields(self):
        config = load_docs_config(FIXTURES / "petstore.yaml")
        list_pets, create_pet, get_pet = config.routes
        assert list_pets.operation_id == "listPets"
        assert list_pets.pagination.style == "offset-limit"
        assert list_pets.pagination.sort_config.allowed_fields == ["name", "createdAt"]
        assert create_pet.request_body.ref_string == "#/components/schemas/NewPet"
        assert create_pet.request_body.is_required is True
        assert create_pet.responses[1].status_code == "default"
        assert get_pet.tag == Tag(name="pets")
        assert get_pet.responses[0].schema_ == {"$ref": "#/components/schemas/Pet"}

    def test_malformed_yaml(self, tmp_path):
        f = tmp_path / "docs.yaml"
        f.write_text("baseUrl: x\nroutes: [\n")
        with pytest.raises(yaml.YAMLError):
            load_docs_config(f)

    def test_load_json(self, tmp_path):
        f = tmp_path / "docs.json"
        f.write_text('{"baseUrl": "api.example.com", "routes": [{"route": "/ping", "method": "get"}]}')
        config = load_docs_config(f)
        assert config.routes[0].route == "/ping"
        assert config.title is None

    def test_top_level_not_a_mapping(self, tmp_path):
        f = tmp_path / "docs.yaml"
        f.write_text("- just\n- a list\n")
        with pytest.raises(ValueError, match="mapping at the top level"):
            load_docs_config(f)

    def test_unknown_field_rejected(self, tmp_path):
        f = tmp_path / "docs.yaml"
        f.write_text("baseUrl: api.example.com\nroutez: []\n")
        with pytest.raises(ValidationError):
            load_docs_config(f)

    def test_missing_base_url(self, tmp_path):
        f = tmp_path / "docs.yaml"
        f.write_text("title: No server\n")
        with pytest.raises(ValidationError):
            load_docs_config(f)


class TestConfigModels:
    def test_snake_case_names_accepted(self):
        config = DocsConfig(base_url="api.example.com", terms_of_service="https://example.com/tos")
        assert config.terms_of_service == "https://example.com/tos"

    def test_response_schema_alias(self):
        response = ResponseConfig.model_validate({"statusCode": 200, "description": "OK", "schema": {"type": "string"}})
        assert response.schema_ == {"type": "string"}

    def test_response_status_must_be_int_or_default(self):
        with pytest.raises(ValidationError):
            ResponseConfig.model_validate({"statusCode": "teapot", "description": "?"})

    def test_route_defaults(self):
        route = RouteConfig(route="/ping", method="get")
        assert route.parameters is None
        assert route.pagination is None
        assert route.responses is None

    def test_invalid_pagination_style(self):
        with pytest.raises(ValidationError):
            RouteConfig.model_validate({"route": "/x", "method": "get", "pagination": {"style": "cursor"}})
