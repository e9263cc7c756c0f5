"""Operation 7: Flatten allOf/anyOf compositions into plain objects.

Before:
    Dog:
      allOf:
        - $ref: '#/components/schemas/Pet'     # properties: name, required: [name]
        - type: object
          properties:
            breed: {type: string}

After:
    Dog:
      type: object
      properties:
        name: {type: string}
        breed: {type: string}
      required: [name]

For anyOf only the properties are merged; a property required by one branch
is not required by the union.
"""

from onein.errors import CyclicCompositionError
from onein.transformers.context import TransformContext
from onein.transformers.ops_base import (
    SchemaKind,
    add_required,
    composition_of,
    object_schema,
    schema_kind,
    schema_name_from_ref,
)

# Annotations of the composition itself that survive flattening
_KEPT_KEYS = ("title", "description")


def flatten_composition(ctx: TransformContext, schema: dict, trail: tuple[str, ...] = ()) -> dict:
    """
    Return the flattened form of a schema.

    Args:
        ctx: The transformation context
        schema: A Schema Object; it is not modified
        trail: Names of the catalog entries being flattened, outermost first

    Returns:
        A new object schema for compositions, the schema itself otherwise

    Raises:
        CyclicCompositionError: If a branch refers back to a schema on the trail
    """
    if schema_kind(schema) != SchemaKind.COMPOSITION:
        return schema

    keyword, branches = composition_of(schema)
    flat = object_schema()
    for key in _KEPT_KEYS:
        if key in schema:
            flat[key] = schema[key]

    for branch in branches:
        branch_trail = trail
        if schema_kind(branch) == SchemaKind.REFERENCE:
            name = schema_name_from_ref(branch["$ref"])
            if name in trail:
                raise CyclicCompositionError([*trail, name])
            branch_trail = (*trail, name)

        flat_branch = flatten_composition(ctx, ctx.resolve(branch, wrap=True), branch_trail)
        flat["properties"].update(flat_branch.get("properties") or {})
        if keyword == "allOf":
            add_required(flat, *(flat_branch.get("required") or []))

    return flat


def flatten_compositions(ctx: TransformContext) -> None:
    """Replace every catalog entry by its flattened form."""
    for name in list(ctx.schemas):
        ctx.schemas[name] = flatten_composition(ctx, ctx.schemas[name], (name,))
