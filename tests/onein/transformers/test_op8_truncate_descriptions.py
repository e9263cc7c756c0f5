"""Tests for op8_truncate_descriptions: descriptions cut to 64 characters."""

from onein.transformers.context import TransformContext
from onein.transformers.op8_truncate_descriptions import (
    MAX_DESCRIPTION_LENGTH,
    truncate_description,
    truncate_descriptions,
)

LONG = "x" * 100


def test_long_description_truncated_with_ellipsis():
    schema = {"description": LONG}

    truncate_description(schema)

    assert schema["description"] == "x" * 61 + "..."
    assert len(schema["description"]) == MAX_DESCRIPTION_LENGTH


def test_description_at_limit_unchanged():
    schema = {"description": "y" * 64}

    truncate_description(schema)

    assert schema["description"] == "y" * 64


def test_short_description_unchanged():
    schema = {"description": "short"}

    truncate_description(schema)

    assert schema["description"] == "short"


def test_schema_and_direct_properties_truncated():
    ctx = TransformContext(
        schemas={
            "Pet": {
                "type": "object",
                "description": LONG,
                "properties": {
                    "name": {"type": "string", "description": LONG},
                    "owner": {
                        "type": "object",
                        "properties": {"email": {"type": "string", "description": LONG}},
                    },
                },
            }
        }
    )

    truncate_descriptions(ctx)

    pet = ctx.schemas["Pet"]
    assert pet["description"].endswith("...")
    assert len(pet["properties"]["name"]["description"]) == 64
    # only one level deep
    assert pet["properties"]["owner"]["properties"]["email"]["description"] == LONG


def test_schemas_without_descriptions_untouched():
    ctx = TransformContext(schemas={"Pet": {"type": "object", "properties": {"a": {"type": "string"}}}})

    truncate_descriptions(ctx)

    assert ctx.schemas["Pet"] == {"type": "object", "properties": {"a": {"type": "string"}}}
