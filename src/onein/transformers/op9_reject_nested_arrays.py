"""Operation 9: Reject arrays of arrays anywhere in the final catalog.

op3 only sees the catalog as it was read. Later passes add arrays of their
own: inline parameter schemas in ``_req_<operationId>``, inline response
schemas under ``_jsonBody`` in ``_res_<operationId>``, and properties of
``allOf``/``anyOf`` branches that op7 lifts into the flattened object. This
pass checks the finished catalog once more and rewrites nothing.
"""

from onein.errors import UnsupportedNestedArrayError
from onein.transformers.context import TransformContext
from onein.transformers.op3_nested_arrays import catalog_arrays
from onein.transformers.ops_base import SchemaKind, schema_kind


def reject_nested_arrays(ctx: TransformContext) -> None:
    """
    Fail on any catalog array whose items resolve to an array.

    Raises:
        UnsupportedNestedArrayError: Naming ``<schema>`` or ``<schema>.<property>``
    """
    for location, schema in catalog_arrays(ctx):
        items = schema.get("items")
        if isinstance(items, dict) and schema_kind(ctx.resolve(items)) == SchemaKind.ARRAY:
            raise UnsupportedNestedArrayError(location)
