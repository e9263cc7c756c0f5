"""Tests for op2_schema_wrappers: array, primitive and common response wrappers."""

import pytest

from onein.config import OneinConfig
from onein.errors import SchemaNameConflictError
from onein.transformers.context import TransformContext
from onein.transformers.op2_schema_wrappers import (
    create_array_wrappers,
    create_common_response,
    create_primitive_wrappers,
)


class TestCreateArrayWrappers:
    def test_wrapper_created_for_array_schema(self):
        ctx = TransformContext(schemas={"Tags": {"type": "array", "items": {"type": "string"}}})

        create_array_wrappers(ctx)

        assert ctx.schemas["_array_Tags"] == {
            "type": "object",
            "properties": {"_v": {"$ref": "#/components/schemas/Tags"}},
            "required": ["_v"],
        }

    def test_non_array_schemas_not_wrapped(self):
        ctx = TransformContext(
            schemas={
                "Pet": {"type": "object", "properties": {}},
                "Name": {"type": "string"},
                "Dog": {"allOf": [{"$ref": "#/components/schemas/Pet"}]},
            }
        )

        create_array_wrappers(ctx)

        assert set(ctx.schemas) == {"Pet", "Name", "Dog"}

    def test_one_wrapper_per_array(self):
        ctx = TransformContext(
            schemas={
                "Tags": {"type": "array", "items": {"type": "string"}},
                "Pets": {"type": "array", "items": {"$ref": "#/components/schemas/Pet"}},
                "Pet": {"type": "object", "properties": {}},
            }
        )

        create_array_wrappers(ctx)

        assert {"_array_Tags", "_array_Pets"} <= set(ctx.schemas)
        assert len(ctx.schemas) == 5

    def test_name_conflict_raises(self):
        ctx = TransformContext(
            schemas={
                "Tags": {"type": "array", "items": {"type": "string"}},
                "_array_Tags": {"type": "object"},
            }
        )

        with pytest.raises(SchemaNameConflictError):
            create_array_wrappers(ctx)


class TestCreatePrimitiveWrappers:
    def test_one_wrapper_per_primitive_type(self):
        ctx = TransformContext(schemas={})

        create_primitive_wrappers(ctx)

        assert set(ctx.schemas) == {
            "_primitive_integer",
            "_primitive_number",
            "_primitive_string",
            "_primitive_boolean",
        }
        assert ctx.schemas["_primitive_boolean"] == {
            "type": "object",
            "properties": {"_v": {"type": "boolean"}},
            "required": ["_v"],
        }


class TestCreateCommonResponse:
    def test_empty_by_default(self):
        ctx = TransformContext(schemas={})

        create_common_response(ctx)

        assert ctx.schemas["_commonResponse"] == {"type": "object", "properties": {}}

    def test_configured_fields(self):
        config = OneinConfig(commonResponse={"code": {"type": "integer"}})
        ctx = TransformContext(schemas={}, config=config)

        create_common_response(ctx)

        assert ctx.schemas["_commonResponse"]["properties"] == {"code": {"type": "integer"}}

    def test_config_not_shared_with_document(self):
        config = OneinConfig(commonResponse={"code": {"type": "integer"}})
        ctx = TransformContext(schemas={}, config=config)

        create_common_response(ctx)
        ctx.schemas["_commonResponse"]["properties"]["code"]["description"] = "changed"

        assert config.common_response == {"code": {"type": "integer"}}
