"""Module for writing converted OpenAPI documents."""

import json
from pathlib import Path

from onein.config import OUTPUT_SUFFIX


def output_path_for(input_path: Path, output_dir: Path) -> Path:
    """
    Derive the output file path from the input path.

    The output is named after the input's base name without its extension,
    e.g. ``api/openapi.yaml`` -> ``<output_dir>/openapi.onein.json`` and the
    directory ``my-api`` -> ``<output_dir>/my-api.onein.json``.
    """
    resolved = input_path.resolve()
    stem = resolved.name if input_path.is_dir() else resolved.stem
    return output_dir / f"{stem}{OUTPUT_SUFFIX}"


def write_spec(data: dict, path: Path) -> None:
    """
    Write a converted OpenAPI document as indented JSON.

    Values JSON cannot represent natively (e.g. dates parsed from YAML) are
    written as strings.

    Args:
        data: The OpenAPI document as a Python dictionary
        path: Path where the file should be written

    Raises:
        IOError: If writing to the file fails
    """
    # Ensure parent directory exists
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False, default=str)
        f.write("\n")  # Add trailing newline
