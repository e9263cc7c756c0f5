"""Operation 6: Wrap each success response body in an envelope.

Before:
    responses:
      '200':
        content:
          application/json:
            schema: {type: array, items: {$ref: '#/components/schemas/Pet'}}

After:
    responses:
      '200':
        content:
          application/json:
            schema: {$ref: '#/components/schemas/_res_listPets'}

    _res_listPets:
      type: object
      properties:
        code: {type: integer}      # from commonResponse
        _jsonBody: {type: array, items: {$ref: '#/components/schemas/Pet'}}

Responses without a JSON body point at the shared ``_commonResponse``.
"""

import copy

from onein.errors import MissingOkResponseError, UnsupportedReferenceFormError
from onein.transformers.context import TransformContext
from onein.transformers.ops_base import (
    COMMON_RESPONSE_NAME,
    JSON_BODY_KEY,
    JSON_MEDIA_TYPE,
    RESPONSE_SCHEMA_PREFIX,
    object_schema,
    ref_to,
)


def _ok_response(operation: dict) -> dict | None:
    responses = operation.get("responses") or {}
    # YAML parses an unquoted 200 as an int
    return responses.get("200", responses.get(200))


def wrap_response_body(ctx: TransformContext, operation: dict) -> None:
    """
    Point the 200 JSON response of an operation at an envelope schema.

    Args:
        ctx: The transformation context
        operation: The Operation Object (mutated in place)

    Raises:
        MissingOkResponseError: If the operation has no 200 response
        UnsupportedReferenceFormError: If the 200 response is a reference
    """
    operation_id = operation["operationId"]
    ctx.log(f"wrapping response body for operation [{operation_id}]")

    ok_response = _ok_response(operation)
    if ok_response is None:
        raise MissingOkResponseError(operation_id)
    if "$ref" in ok_response:
        raise UnsupportedReferenceFormError(ok_response["$ref"])

    content = ok_response.get("content")
    if content is None:
        content = ok_response["content"] = {}

    json_response = content.get(JSON_MEDIA_TYPE)
    if json_response and json_response.get("schema"):
        schema_name = RESPONSE_SCHEMA_PREFIX + operation_id
        properties = copy.deepcopy(ctx.config.common_response)
        properties[JSON_BODY_KEY] = json_response["schema"]
        ctx.register(schema_name, object_schema(properties))
        json_response["schema"] = ref_to(schema_name)
    else:
        json_response = content[JSON_MEDIA_TYPE] = json_response or {}
        json_response["schema"] = ref_to(COMMON_RESPONSE_NAME)
