"""Plugin metadata schema - where and how to obtain a plugin build.

JSON documents use camelCase field names (``fileNameRegex``); the models expose
snake_case attributes and accept/emit the camelCase aliases.
"""

import re
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import AnyUrl, BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from api.errors import PluginValidationError, format_issues

# Semantic version pattern stored as repository configuration, never evaluated here
DEFAULT_VERSION_MODIFIER = r"^(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)$"

_URL_ADAPTER = TypeAdapter(AnyUrl)


class RepositoryType(str, Enum):
    """Distribution channels known to the plugin manager."""

    GITHUB = "github"
    SPIGOTMC = "spigotmc"
    HANGAR = "hangar"
    MODRINTH = "modrinth"


def _check_url(value: str) -> str:
    try:
        _URL_ADAPTER.validate_python(value)
    except ValidationError:
        raise ValueError("must be a valid URL") from None
    return value


def _check_pattern(value: str) -> str:
    try:
        re.compile(value)
    except re.error as e:
        raise ValueError(f"must be a valid regular expression ({e})") from None
    return value


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, frozen=True)


class RepositoryDescriptor(_CamelModel):
    """One source from which a plugin build can be obtained."""

    type: str = Field(
        ...,
        description="Repository kind",
        examples=[t.value for t in RepositoryType],
    )
    id: str = Field(..., description="Identifier within the repository, e.g. owner/repo on GitHub")
    file_name_regex: str = Field(
        ...,
        description="Pattern recognizing the release asset",
        json_schema_extra={"format": "regex"},
    )
    version_modifier: str = Field(
        default=DEFAULT_VERSION_MODIFIER,
        description="Pattern matching usable version strings",
        json_schema_extra={"format": "regex"},
    )
    download_url: Optional[str] = Field(default=None, description="Direct download URL")
    file_name_template: Optional[str] = Field(default=None, description="Template for the saved file name")

    @field_validator("file_name_regex", "version_modifier")
    @classmethod
    def pattern_compiles(cls, v: str) -> str:
        return _check_pattern(v)


class PluginInfo(_CamelModel):
    """Full metadata record for one plugin."""

    id: str = Field(..., description="Canonical plugin identifier")
    website: str = Field(..., description="Project website", json_schema_extra={"format": "uri"})
    source: str = Field(..., description="Source code location", json_schema_extra={"format": "uri"})
    license: str = Field(..., description="License identifier or name")
    repositories: List[RepositoryDescriptor] = Field(
        ...,
        description="Download sources in order of preference",
    )

    @field_validator("website", "source")
    @classmethod
    def well_formed_url(cls, v: str) -> str:
        return _check_url(v)


def validate_plugin_info(raw: Any, source: Optional[str] = None) -> PluginInfo:
    """Validate a JSON-like value against the PluginInfo schema.

    Args:
        raw: Decoded JSON value (usually a dict)
        source: Optional label (file name) carried on the raised error

    Returns:
        Normalized PluginInfo with ``versionModifier`` defaulted where omitted

    Raises:
        PluginValidationError: one issue per offending field; nested repository
            issues carry their index, e.g. ``repositories.2.fileNameRegex``
    """
    try:
        return PluginInfo.model_validate(raw)
    except ValidationError as e:
        raise PluginValidationError(format_issues(e.errors()), source=source) from e


def dump_plugin_info(info: PluginInfo) -> Dict[str, Any]:
    """Serialize to a JSON-ready dict with camelCase names, omitting unset optionals."""
    return info.model_dump(mode="json", by_alias=True, exclude_none=True)


def describe_plugin_info() -> Dict[str, Any]:
    """JSON Schema of PluginInfo for documentation."""
    return PluginInfo.model_json_schema(by_alias=True)
