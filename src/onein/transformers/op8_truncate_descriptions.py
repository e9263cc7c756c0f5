"""Operation 8: Cut descriptions down to the platform's length limit.

Only catalog schemas and their direct properties are checked; descriptions
of deeper nested schemas are kept as they are.
"""

from onein.transformers.context import TransformContext

MAX_DESCRIPTION_LENGTH = 64
ELLIPSIS = "..."


def truncate_description(schema: dict, max_length: int = MAX_DESCRIPTION_LENGTH) -> None:
    """Shorten ``schema["description"]`` in place if it exceeds ``max_length``."""
    description = schema.get("description")
    if isinstance(description, str) and len(description) > max_length:
        schema["description"] = description[: max_length - len(ELLIPSIS)] + ELLIPSIS


def truncate_descriptions(ctx: TransformContext) -> None:
    for schema in ctx.schemas.values():
        truncate_description(schema)
        for prop_schema in (schema.get("properties") or {}).values():
            if isinstance(prop_schema, dict):
                truncate_description(prop_schema)
