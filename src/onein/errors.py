"""Errors raised by the onein transformation engine.

Every error aborts the whole conversion; no partial output is written.
"""


class OneinError(ValueError):
    """Base class for all conversion failures."""


class BrokenReferenceError(OneinError):
    """A reference does not resolve to an entry of ``components.schemas``."""

    def __init__(self, ref: str, message: str | None = None):
        self.ref = ref
        super().__init__(message or f"ref target not found: {ref}")


class UnsupportedReferenceFormError(BrokenReferenceError):
    """A reference is not a local ``#/components/schemas/<name>`` pointer."""

    def __init__(self, ref: str):
        super().__init__(ref, f"unsupported non-local ref: {ref}")


class UnsupportedNestedArrayError(OneinError):
    """An array schema whose items are themselves an array."""

    def __init__(self, location: str):
        self.location = location
        super().__init__(f"unsupported nested array type: [{location}]")


class MissingOkResponseError(OneinError):
    """An operation without a ``200`` response."""

    def __init__(self, operation_id: str):
        self.operation_id = operation_id
        super().__init__(f"200 response not found for operation: {operation_id}")


class CyclicCompositionError(OneinError):
    """An ``allOf``/``anyOf`` composition that transitively refers to itself."""

    def __init__(self, cycle: list[str]):
        self.cycle = cycle
        super().__init__(f"cyclic composition: {' -> '.join(cycle)}")


class SchemaNameConflictError(OneinError):
    """A synthesized schema name is already taken in ``components.schemas``."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"schema name already in use: {name}")
