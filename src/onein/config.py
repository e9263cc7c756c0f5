"""Configuration constants and models for the onein converter."""

import copy
from enum import Enum
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

CONFIG_FILENAME = "onein.yaml"
DEFAULT_INPUT_FILENAME = "openapi.yaml"
OUTPUT_SUFFIX = ".onein.json"
DEFAULT_PREFIX = "/onein"

# Values used when a config key is present but null; `prefix: null` means no prefix
_EMPTY_VALUES: dict[str, Any] = {"prefix": "", "common_parameters": (), "common_response": {}}


class FileFormat(Enum):
    """Enum representing the format of an OpenAPI specification file."""

    JSON = "json"
    YAML = "yaml"


class ParameterConfig(BaseModel):
    """A parameter added to the request body of every operation."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    name: str
    location: Literal["path", "query", "header", "cookie"] = Field(alias="in")
    required: bool = False
    description: str | None = None
    param_schema: dict[str, Any] | None = Field(default=None, alias="schema")

    def to_parameter(self) -> dict[str, Any]:
        """Return the parameter as an OpenAPI Parameter Object."""
        return self.model_dump(by_alias=True, exclude_none=True)


class OneinConfig(BaseModel):
    """Configuration model for the onein converter."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    prefix: str = Field(default=DEFAULT_PREFIX, description="Prefix prepended to every path")
    common_parameters: tuple[ParameterConfig, ...] = Field(
        default=(),
        alias="commonParameters",
        description="Parameters merged into every request body",
    )
    common_response: dict[str, dict[str, Any]] = Field(
        default_factory=dict,
        alias="commonResponse",
        description="Fields added to every response envelope",
    )

    @field_validator("prefix", "common_parameters", "common_response", mode="before")
    @classmethod
    def _null_is_empty(cls, value: Any, info: ValidationInfo) -> Any:
        if value is not None:
            return value
        return copy.copy(_EMPTY_VALUES[info.field_name])


def resolve_config_path(input_path: Path, config_path: Path) -> Path:
    """
    Resolve the config file location for an input path.

    When the input is a directory the config path is taken relative to it.
    """
    if input_path.is_dir():
        return input_path / config_path
    return config_path


def load_config(config_path: Path) -> OneinConfig:
    """
    Load configuration from a onein YAML file.
    Returns the default config if the file doesn't exist or is empty.
    """
    if not config_path.exists():
        return OneinConfig()
    with open(config_path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return OneinConfig(**data)
