"""Module for loading OpenAPI documents."""

import json
from pathlib import Path

import yaml

from onein.config import DEFAULT_INPUT_FILENAME, FileFormat


def resolve_input_path(input_path: Path) -> Path:
    """
    Return the OpenAPI file for an input path.

    A directory is taken to contain an ``openapi.yaml`` file.
    """
    if input_path.is_dir():
        return input_path / DEFAULT_INPUT_FILENAME
    return input_path


def load_spec(path: Path) -> tuple[dict, FileFormat]:
    """
    Load an OpenAPI document from a JSON or YAML file.

    The returned FileFormat only feeds the progress output of
    ``manager.convert``; the converted document is always written as JSON,
    whatever the input format.

    Args:
        path: Path to the OpenAPI document (.json, .yaml, or .yml)

    Returns:
        A tuple of (parsed_dict, FileFormat) where:
        - parsed_dict is the OpenAPI document as a Python dictionary
        - FileFormat tells which parser read the file

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file extension is not .json, .yaml, or .yml,
            or the file does not hold a mapping
        json.JSONDecodeError: If JSON parsing fails
        yaml.YAMLError: If YAML parsing fails
    """
    if not path.exists():
        raise FileNotFoundError(f"OpenAPI file not found: {path}")

    suffix = path.suffix.lower()

    if suffix == ".json":
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        file_format = FileFormat.JSON

    elif suffix in (".yaml", ".yml"):
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
        file_format = FileFormat.YAML

    else:
        raise ValueError(f"Unsupported file format: {suffix}. Expected .json, .yaml, or .yml")

    if not isinstance(data, dict):
        raise ValueError(f"OpenAPI document must be a mapping: {path}")

    return data, file_format
