"""Operation 3: Point primitive array items at primitive wrappers.

The target platform cannot represent arrays of primitives or arrays of
arrays. Primitive items are replaced by a reference to the matching
``_primitive_<type>`` wrapper; nested arrays are rejected.

Before:
    Tags:
      type: array
      items: {type: string}

After:
    Tags:
      type: array
      items: {$ref: '#/components/schemas/_primitive_string'}
"""

from collections.abc import Iterator

from onein.errors import UnsupportedNestedArrayError
from onein.transformers.context import TransformContext
from onein.transformers.ops_base import (
    PRIMITIVE_WRAPPER_PREFIX,
    SchemaKind,
    ref_to,
    schema_kind,
)


def _wrap_primitive_items(ctx: TransformContext, schema: dict, location: str) -> None:
    """
    Rewrite the items of one array schema.

    Args:
        ctx: The transformation context
        schema: An array Schema Object (mutated in place)
        location: ``<schema>`` or ``<schema>.<property>``, used in errors

    Raises:
        UnsupportedNestedArrayError: If the items are an array
    """
    items = schema.get("items")
    if not isinstance(items, dict):
        return
    item_schema = ctx.resolve(items)
    kind = schema_kind(item_schema)
    if kind == SchemaKind.ARRAY:
        raise UnsupportedNestedArrayError(location)
    if kind == SchemaKind.PRIMITIVE:
        schema["items"] = ref_to(PRIMITIVE_WRAPPER_PREFIX + item_schema["type"])


def catalog_arrays(ctx: TransformContext) -> Iterator[tuple[str, dict]]:
    """
    Yield ``(location, schema)`` for every array of the catalog.

    Both top-level array entries and array-typed direct properties of object
    entries are yielded. Properties that are references are skipped: their
    targets are catalog entries and get yielded on their own.
    """
    for name, schema in list(ctx.schemas.items()):
        kind = schema_kind(schema)
        if kind == SchemaKind.OBJECT:
            properties = schema.get("properties") or {}
            for prop_name, prop_schema in properties.items():
                if not isinstance(prop_schema, dict):
                    continue
                if schema_kind(prop_schema) == SchemaKind.ARRAY:
                    yield f"{name}.{prop_name}", prop_schema
        elif kind == SchemaKind.ARRAY:
            yield name, schema


def wrap_primitive_arrays(ctx: TransformContext) -> None:
    """Check every array of the catalog, top-level or as a direct property."""
    for location, schema in catalog_arrays(ctx):
        _wrap_primitive_items(ctx, schema, location)
