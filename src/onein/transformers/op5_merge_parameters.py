"""Operation 5: Merge parameters and the request body into one JSON body.

Every flattened operation is a POST, so path, query, header and cookie
parameters have nowhere to go but the request body. Each parameter becomes
a property named ``_<in>_<name>`` of a synthesized object schema, which is
then merged with the original JSON request body and registered as
``_req_<operationId>``.

Before:
    parameters:
      - {name: id, in: path, required: true, schema: {type: integer}}
    requestBody:
      content:
        application/json:
          schema: {$ref: '#/components/schemas/Pet'}

After:
    requestBody:
      content:
        application/json:
          schema: {$ref: '#/components/schemas/_req_updatePet'}

    _req_updatePet:
      type: object
      properties:
        _path_id: {type: integer}
        name: {type: string}        # from Pet
      required: [_path_id, name]
"""

import copy
from typing import Any

from onein.errors import UnsupportedReferenceFormError
from onein.transformers.context import TransformContext
from onein.transformers.ops_base import (
    JSON_MEDIA_TYPE,
    REQUEST_SCHEMA_PREFIX,
    WRAPPED_VALUE_KEY,
    SchemaKind,
    add_required,
    composition_of,
    object_schema,
    ref_to,
    schema_kind,
)


def _collect_parameters(ctx: TransformContext, path_item: dict, operation: dict) -> list[dict]:
    """Return common, path-level and operation parameters, in that order."""
    parameters = [p.to_parameter() for p in ctx.config.common_parameters]
    parameters.extend(path_item.get("parameters") or [])
    parameters.extend(operation.get("parameters") or [])
    for parameter in parameters:
        if "$ref" in parameter:
            raise UnsupportedReferenceFormError(parameter["$ref"])
    return parameters


def _parameters_schema(parameters: list[dict]) -> dict:
    """Build the object schema holding one property per parameter."""
    schema = object_schema()
    for parameter in parameters:
        prop_name = f"_{parameter['in']}_{parameter['name']}"
        prop_schema: dict[str, Any] = copy.deepcopy(parameter.get("schema") or {"type": "string"})
        if parameter.get("description") is not None:
            prop_schema["description"] = parameter["description"]
        schema["properties"][prop_name] = prop_schema
        if parameter.get("required"):
            add_required(schema, prop_name)
    return schema


def _original_body_schema(ctx: TransformContext, operation: dict) -> dict | None:
    """Return the JSON schema of the operation's request body, if any."""
    request_body = operation.get("requestBody")
    if not request_body:
        return None
    if "$ref" in request_body:
        raise UnsupportedReferenceFormError(request_body["$ref"])
    content = request_body.get("content") or {}
    media = content.get(JSON_MEDIA_TYPE)
    if not media or not media.get("schema"):
        if content:
            ctx.warn(
                f"dropping non-JSON request body of operation [{operation['operationId']}]: "
                f"{', '.join(content)}"
            )
        return None
    return media["schema"]


def _merge_body(ctx: TransformContext, params_schema: dict, body: dict) -> dict:
    """
    Merge the parameters schema with the original body schema.

    Parameter properties win over body properties of the same name.
    """
    resolved = ctx.resolve(body, wrap=True)
    kind = schema_kind(resolved)

    if kind == SchemaKind.COMPOSITION:
        keyword, branches = composition_of(resolved)
        if keyword == "anyOf":
            return {"anyOf": [body, params_schema]}
        return {"allOf": [*branches, params_schema]}

    if kind in (SchemaKind.ARRAY, SchemaKind.PRIMITIVE):
        # Only inline bodies get here, referenced ones were wrapped
        params_schema["properties"].setdefault(WRAPPED_VALUE_KEY, body)
        add_required(params_schema, WRAPPED_VALUE_KEY)
        return params_schema

    properties = params_schema["properties"]
    for prop_name, prop_schema in (resolved.get("properties") or {}).items():
        properties.setdefault(prop_name, prop_schema)
    add_required(params_schema, *(resolved.get("required") or []))
    return params_schema


def merge_parameters_and_request_body(ctx: TransformContext, path_item: dict, operation: dict) -> None:
    """
    Replace an operation's parameters and request body by a single JSON body.

    The operation is left untouched when it has neither parameters nor a
    request body.

    Args:
        ctx: The transformation context
        path_item: The Path Item owning the operation (for shared parameters)
        operation: The Operation Object (mutated in place)

    Raises:
        UnsupportedReferenceFormError: If a parameter or the request body is
            a reference
        BrokenReferenceError: If the body schema reference does not resolve
    """
    parameters = _collect_parameters(ctx, path_item, operation)
    if not parameters and not operation.get("requestBody"):
        operation.pop("parameters", None)
        return

    operation_id = operation["operationId"]
    ctx.log(f"merge parameters and requestBody for operation [{operation_id}]")

    final_schema = _parameters_schema(parameters)
    body = _original_body_schema(ctx, operation)
    if body is not None:
        final_schema = _merge_body(ctx, final_schema, body)

    schema_name = REQUEST_SCHEMA_PREFIX + operation_id
    ctx.register(schema_name, final_schema)
    operation.pop("parameters", None)
    operation["requestBody"] = {"content": {JSON_MEDIA_TYPE: {"schema": ref_to(schema_name)}}}
