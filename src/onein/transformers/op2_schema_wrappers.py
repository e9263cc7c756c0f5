"""Operation 2: Synthesize wrapper schemas for arrays and primitives.

The target platform only accepts object-shaped bodies. Every array schema in
the catalog gets a named wrapper, and each primitive type gets one shared
wrapper, so that any non-object schema can be referenced as an object:

    _array_Tags:
      type: object
      properties:
        _v: {$ref: '#/components/schemas/Tags'}
      required: [_v]

    _primitive_string:
      type: object
      properties:
        _v: {type: string}
      required: [_v]

The shared default response envelope ``_commonResponse`` is created here too.
"""

import copy

from onein.transformers.context import TransformContext
from onein.transformers.ops_base import (
    ARRAY_WRAPPER_PREFIX,
    COMMON_RESPONSE_NAME,
    PRIMITIVE_TYPES,
    PRIMITIVE_WRAPPER_PREFIX,
    WRAPPED_VALUE_KEY,
    SchemaKind,
    object_schema,
    ref_to,
    schema_kind,
)


def create_array_wrappers(ctx: TransformContext) -> None:
    """Register ``_array_<name>`` for every array schema of the catalog."""
    array_names = [
        name for name, schema in ctx.schemas.items() if schema_kind(schema) == SchemaKind.ARRAY
    ]
    for name in array_names:
        ctx.register(
            ARRAY_WRAPPER_PREFIX + name,
            object_schema({WRAPPED_VALUE_KEY: ref_to(name)}, required=[WRAPPED_VALUE_KEY]),
        )


def create_primitive_wrappers(ctx: TransformContext) -> None:
    """Register one ``_primitive_<type>`` wrapper per primitive type."""
    for primitive_type in PRIMITIVE_TYPES:
        ctx.register(
            PRIMITIVE_WRAPPER_PREFIX + primitive_type,
            object_schema({WRAPPED_VALUE_KEY: {"type": primitive_type}}, required=[WRAPPED_VALUE_KEY]),
        )


def create_common_response(ctx: TransformContext) -> None:
    """Register the envelope used by responses that have no JSON body."""
    ctx.register(COMMON_RESPONSE_NAME, object_schema(copy.deepcopy(ctx.config.common_response)))
