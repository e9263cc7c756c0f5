"""Operation 4: Turn every operation into a POST on its own path.

The HTTP method becomes the last path segment and path-parameter
placeholders are switched to brackets, since the new key is a literal
path and curly braces would still read as templating:

    /onein/pets/{petId}:
      get: {...}
      delete: {...}

becomes

    /onein/pets/[petId]/get:
      post: {...}
    /onein/pets/[petId]/delete:
      post: {...}

Each operation's parameters and body are merged (op5) and its response
wrapped (op6) as it is moved.
"""

import re

from onein.transformers.context import TransformContext
from onein.transformers.op5_merge_parameters import merge_parameters_and_request_body
from onein.transformers.op6_wrap_response import wrap_response_body
from onein.transformers.ops_base import HTTP_METHODS

_PLACEHOLDER_RE = re.compile(r"\{([^{}]*)\}")
_NON_IDENTIFIER_RE = re.compile(r"[^0-9A-Za-z]+")


def flattened_path(path: str, method: str) -> str:
    """
    Return the key an operation is stored under after flattening.

    Example:
        >>> flattened_path("/pets/{petId}", "get")
        '/pets/[petId]/get'
    """
    return _PLACEHOLDER_RE.sub(r"[\1]", f"{path}/{method}")


def _derive_operation_id(new_path: str) -> str:
    return _NON_IDENTIFIER_RE.sub("_", new_path).strip("_")


def flatten_operations(ctx: TransformContext, spec: dict) -> dict:
    """
    Move every operation of ``spec["paths"]`` to a flattened POST path.

    Operations without an ``operationId`` get one derived from their new
    path, so the names of their synthesized schemas are deterministic.

    Args:
        ctx: The transformation context
        spec: The OpenAPI document as a dictionary

    Returns:
        The transformed document

    Raises:
        MissingOkResponseError: If an operation has no 200 response
        BrokenReferenceError: If a request body reference does not resolve
    """
    new_paths: dict[str, dict] = {}
    for path, path_item in (spec.get("paths") or {}).items():
        if not isinstance(path_item, dict):
            continue
        for method in HTTP_METHODS:
            operation = path_item.get(method)
            if not isinstance(operation, dict):
                continue

            new_path = flattened_path(path, method)
            if not operation.get("operationId"):
                operation["operationId"] = _derive_operation_id(new_path)
            if new_path in new_paths:
                ctx.warn(f"operation [{operation['operationId']}] replaces an existing path: {new_path}")

            new_paths[new_path] = {"post": operation}
            merge_parameters_and_request_body(ctx, path_item, operation)
            wrap_response_body(ctx, operation)

    spec["paths"] = new_paths
    return spec
