"""Manager to orchestrate all onein transformation operations.

This module coordinates the complete conversion:
1. Load the OpenAPI document and the onein config
2. Apply all transformation operations in sequence
3. Save the converted document as ``<name>.onein.json``

Running the conversion on its own output is not supported: the synthesized
``_array_``/``_primitive_``/``_req_``/``_res_`` names assume untransformed input.
"""

from pathlib import Path
from typing import Callable

from rich.console import Console
from rich.markup import escape

from onein.config import CONFIG_FILENAME, OneinConfig, load_config, resolve_config_path
from onein.core.loader import load_spec, resolve_input_path
from onein.core.writer import output_path_for, write_spec
from onein.transformers.context import TransformContext
from onein.transformers.op1_path_prefix import add_path_prefix
from onein.transformers.op2_schema_wrappers import (
    create_array_wrappers,
    create_common_response,
    create_primitive_wrappers,
)
from onein.transformers.op3_nested_arrays import wrap_primitive_arrays
from onein.transformers.op4_flatten_operations import flatten_operations
from onein.transformers.op7_flatten_compositions import flatten_compositions
from onein.transformers.op8_truncate_descriptions import truncate_descriptions
from onein.transformers.op9_reject_nested_arrays import reject_nested_arrays

_PIPELINE: list[tuple[str, Callable[[TransformContext, dict], object]]] = [
    ("op1: add path prefix", lambda ctx, spec: add_path_prefix(spec, ctx.config.prefix)),
    ("op2: create array wrappers", lambda ctx, spec: create_array_wrappers(ctx)),
    ("op2: create primitive wrappers", lambda ctx, spec: create_primitive_wrappers(ctx)),
    ("op2: create common response", lambda ctx, spec: create_common_response(ctx)),
    ("op3: wrap primitive array items", lambda ctx, spec: wrap_primitive_arrays(ctx)),
    ("op4: flatten operations to POST", flatten_operations),
    ("op7: flatten allOf/anyOf compositions", lambda ctx, spec: flatten_compositions(ctx)),
    ("op8: cut long descriptions", lambda ctx, spec: truncate_descriptions(ctx)),
    ("op9: reject nested arrays", lambda ctx, spec: reject_nested_arrays(ctx)),
]


def transform_document(
    spec: dict, config: OneinConfig | None = None, console: Console | None = None
) -> dict:
    """
    Apply all transformations to an in-memory OpenAPI document.

    Args:
        spec: The OpenAPI document as a dictionary (mutated in place)
        config: The onein configuration; defaults are used when omitted
        console: Optional Rich Console for progress output

    Returns:
        The converted document

    Raises:
        OneinError: If the document cannot be converted
    """
    components = spec.get("components") or {}
    schemas = components.get("schemas") or {}
    ctx = TransformContext(schemas=schemas, config=config or OneinConfig(), console=console)

    for label, transformer in _PIPELINE:
        if console:
            console.print(f"  [dim]→ {label}[/dim]")
        transformer(ctx, spec)

    components["schemas"] = ctx.schemas
    spec["components"] = components
    return spec


def convert(
    input_path: Path = Path("."),
    config_path: Path = Path(CONFIG_FILENAME),
    output_dir: Path | None = None,
    console: Console | None = None,
) -> Path:
    """
    Convert an OpenAPI file to the onein dialect and write the result.

    Args:
        input_path: OpenAPI file, or a directory containing ``openapi.yaml``
        config_path: onein config file; relative to ``input_path`` when that
            is a directory. A missing file means default settings.
        output_dir: Directory for the output file (current directory by default)
        console: Optional Rich Console for progress output

    Returns:
        Path of the written ``<name>.onein.json`` file

    Raises:
        FileNotFoundError: If the input file doesn't exist
        ValueError: If the input file has an unsupported extension
        pydantic.ValidationError: If the config file is invalid
        OneinError: If the document cannot be converted
    """
    input_path = Path(input_path)
    output_path = output_path_for(input_path, Path(output_dir) if output_dir else Path.cwd())
    config_file = resolve_config_path(input_path, Path(config_path))
    spec_file = resolve_input_path(input_path)

    if console:
        console.print(f"  [dim]reading input file: {escape(str(spec_file))}[/dim]")
    spec, file_format = load_spec(spec_file)

    if console:
        console.print(f"  [dim]reading config file: {escape(str(config_file))}[/dim]")
    config = load_config(config_file)

    if console:
        console.print(
            f"  [dim]loaded {file_format.value} document, prefix: {escape(repr(config.prefix))}[/dim]"
        )
    transform_document(spec, config, console)

    if console:
        console.print(f"  [dim]writing output file: {escape(str(output_path))}[/dim]")
    write_spec(spec, output_path)
    return output_path
