"""Base utilities for onein transformation operations."""

from enum import Enum
from typing import Any

from onein.errors import UnsupportedReferenceFormError

SCHEMA_REF_PREFIX = "#/components/schemas/"
JSON_MEDIA_TYPE = "application/json"
HTTP_METHODS = ("get", "put", "post", "delete", "head", "options", "trace", "patch")
PRIMITIVE_TYPES = ("integer", "number", "string", "boolean")

# Names of synthesized schemas and of the single property of a wrapper
ARRAY_WRAPPER_PREFIX = "_array_"
PRIMITIVE_WRAPPER_PREFIX = "_primitive_"
REQUEST_SCHEMA_PREFIX = "_req_"
RESPONSE_SCHEMA_PREFIX = "_res_"
COMMON_RESPONSE_NAME = "_commonResponse"
WRAPPED_VALUE_KEY = "_v"
JSON_BODY_KEY = "_jsonBody"


class SchemaKind(Enum):
    """The shape a Schema Object describes."""

    OBJECT = "object"
    ARRAY = "array"
    PRIMITIVE = "primitive"
    COMPOSITION = "composition"
    REFERENCE = "reference"
    UNTYPED = "untyped"


def schema_kind(schema: dict) -> SchemaKind:
    """
    Classify a Schema Object.

    A declared ``array`` or primitive type wins over composition keywords so
    that wrap-mode resolution follows the declared type. A composition with
    ``type: object`` is still a composition.

    Args:
        schema: A Schema Object or Reference Object

    Returns:
        The SchemaKind of the schema
    """
    if "$ref" in schema:
        return SchemaKind.REFERENCE
    declared = schema.get("type")
    if not isinstance(declared, str):
        declared = None
    if declared == "array":
        return SchemaKind.ARRAY
    if declared in PRIMITIVE_TYPES:
        return SchemaKind.PRIMITIVE
    if composition_of(schema) is not None:
        return SchemaKind.COMPOSITION
    if declared == "object" or "properties" in schema:
        return SchemaKind.OBJECT
    return SchemaKind.UNTYPED


def composition_of(schema: dict) -> tuple[str, list] | None:
    """Return ``(keyword, branches)`` for a non-empty allOf/anyOf, else None."""
    for keyword in ("allOf", "anyOf"):
        branches = schema.get(keyword)
        if isinstance(branches, list) and branches:
            return keyword, branches
    return None


def ref_path(name: str) -> str:
    """Return the local reference string for a catalog entry."""
    return SCHEMA_REF_PREFIX + name


def ref_to(name: str) -> dict:
    """Return a Reference Object pointing at a catalog entry."""
    return {"$ref": ref_path(name)}


def schema_name_from_ref(ref: str) -> str:
    """
    Extract the catalog name from a local reference string.

    Raises:
        UnsupportedReferenceFormError: If the reference is not of the form
            ``#/components/schemas/<name>``
    """
    if isinstance(ref, str) and ref.startswith(SCHEMA_REF_PREFIX):
        name = ref[len(SCHEMA_REF_PREFIX) :]
        if name and "/" not in name:
            return name
    raise UnsupportedReferenceFormError(str(ref))


def object_schema(properties: dict[str, Any] | None = None, required: list[str] | None = None) -> dict:
    """Build an object Schema Object; ``required`` is omitted when empty."""
    schema: dict[str, Any] = {"type": "object", "properties": properties or {}}
    if required:
        schema["required"] = list(required)
    return schema


def add_required(schema: dict, *names: str) -> None:
    """Append property names to a schema's required list, skipping duplicates."""
    if not names:
        return
    required = schema.setdefault("required", [])
    for name in names:
        if name not in required:
            required.append(name)
