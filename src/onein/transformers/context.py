"""State shared by the transformation passes of one conversion run."""

from dataclasses import dataclass, field

from rich.console import Console
from rich.markup import escape

from onein.config import OneinConfig
from onein.errors import BrokenReferenceError, SchemaNameConflictError
from onein.transformers.ops_base import (
    ARRAY_WRAPPER_PREFIX,
    PRIMITIVE_WRAPPER_PREFIX,
    SchemaKind,
    schema_kind,
    schema_name_from_ref,
)


@dataclass
class TransformContext:
    """
    The schema catalog and configuration threaded through every pass.

    Passes only talk to each other through the catalog: schemas registered
    by an earlier pass (wrappers, merged request bodies) are visible to every
    later one. Nothing here outlives a single call to ``transform_document``.
    """

    schemas: dict[str, dict]
    config: OneinConfig = field(default_factory=OneinConfig)
    console: Console | None = None

    def log(self, message: str) -> None:
        if self.console:
            self.console.print(f"    [dim]{escape(message)}[/dim]", highlight=False)

    def warn(self, message: str) -> None:
        if self.console:
            self.console.print(f"    [bold yellow]![/bold yellow] {escape(message)}", highlight=False)

    def register(self, name: str, schema: dict) -> dict:
        """
        Add a synthesized schema to the catalog.

        Raises:
            SchemaNameConflictError: If the name is already taken
        """
        if name in self.schemas:
            raise SchemaNameConflictError(name)
        self.schemas[name] = schema
        return schema

    def get_schema(self, ref: str, wrap: bool = False) -> dict:
        """
        Return the catalog entry a reference string points at.

        Args:
            ref: A ``#/components/schemas/<name>`` reference
            wrap: Return the synthesized wrapper instead of an array or
                primitive schema, so the result always has an object shape

        Raises:
            UnsupportedReferenceFormError: If the reference is not local
            BrokenReferenceError: If the target is not in the catalog
        """
        name = schema_name_from_ref(ref)
        schema = self.schemas.get(name)
        if schema is None:
            raise BrokenReferenceError(ref)
        if not wrap:
            return schema

        kind = schema_kind(schema)
        if kind == SchemaKind.ARRAY:
            wrapper_name = ARRAY_WRAPPER_PREFIX + name
        elif kind == SchemaKind.PRIMITIVE:
            wrapper_name = PRIMITIVE_WRAPPER_PREFIX + schema["type"]
        else:
            return schema

        wrapper = self.schemas.get(wrapper_name)
        if wrapper is None:
            raise BrokenReferenceError(ref, f"wrapper schema not found for ref: {ref}")
        return wrapper

    def resolve(self, item: dict, wrap: bool = False) -> dict:
        """
        Unwrap a Reference Object to its Schema Object.

        Inline schemas are returned unchanged. Composition targets are returned
        as they are; flattening them is the composition pass's job.
        """
        if schema_kind(item) == SchemaKind.REFERENCE:
            return self.get_schema(item["$ref"], wrap=wrap)
        return item
