"""Unit tests for the payload JSON Schema."""

import json

import jsonschema
import pytest

from gopages.models.payload import Payload


@pytest.fixture
def schema(schemas_dir):
    with open(schemas_dir / "payload.schema.json") as f:
        return json.load(f)


def _validate(schema, data):
    jsonschema.validate(instance=data, schema=schema)


def _payload(**overrides):
    data = {
        "owner": "example",
        "repoName": "repo",
        "goModInfo": {"Module": {"Path": "example.com/repo"}, "Imports": ["example.com/repo/pkg"]},
    }
    data.update(overrides)
    return data


class TestSchemaValidation:
    def test_minimal_valid(self, schema):
        _validate(schema, _payload())

    def test_empty_imports(self, schema):
        _validate(schema, _payload(goModInfo={"Module": {"Path": "example.com/repo"}, "Imports": []}))

    def test_missing_owner(self, schema):
        data = _payload()
        del data["owner"]
        with pytest.raises(jsonschema.ValidationError):
            _validate(schema, data)

    def test_empty_repo_name(self, schema):
        with pytest.raises(jsonschema.ValidationError):
            _validate(schema, _payload(repoName=""))

    def test_missing_module(self, schema):
        with pytest.raises(jsonschema.ValidationError):
            _validate(schema, _payload(goModInfo={"Imports": []}))

    def test_empty_import_string(self, schema):
        with pytest.raises(jsonschema.ValidationError):
            _validate(schema, _payload(goModInfo={"Module": {"Path": "example.com/repo"}, "Imports": [""]}))

    def test_schema_agrees_with_model(self, schema):
        """Whatever the model serialises must satisfy the published schema."""
        p = Payload.model_validate(_payload())
        _validate(schema, json.loads(p.to_wire_json()))
