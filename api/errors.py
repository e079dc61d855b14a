"""Domain exceptions for the catalog and plugin metadata."""

from pathlib import Path
from typing import Any, Dict, List, Optional


class CatalogError(Exception):
    """Base class for catalog errors."""


class CatalogLoadError(CatalogError):
    """The build-time plugin list could not be loaded."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot load plugin list from {path}: {reason}")


class MetadataLoadError(CatalogError):
    """A plugin metadata file exists but cannot be read as JSON."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read plugin metadata {path}: {reason}")


class PluginValidationError(CatalogError):
    """A raw value does not conform to the plugin metadata schema.

    ``issues`` holds one entry per offending field::

        {"field": "repositories.0.id", "message": "Field required", "type": "missing"}
    """

    def __init__(self, issues: List[Dict[str, Any]], source: Optional[str] = None):
        self.issues = issues
        self.source = source
        fields = ", ".join(issue["field"] for issue in issues)
        prefix = f"{source}: " if source else ""
        super().__init__(f"{prefix}{len(issues)} invalid field(s): {fields}")


def format_issues(errors: List[Dict[str, Any]], skip: int = 0) -> List[Dict[str, Any]]:
    """Convert pydantic ``errors()`` output to field-indexed issues.

    Args:
        errors: Error dicts as returned by ``ValidationError.errors()``
        skip: Number of leading ``loc`` entries to drop (e.g. 1 for "path")

    Returns:
        List of ``{"field", "message", "type"}`` dicts
    """
    issues = []
    for error in errors:
        field_path = ".".join(str(loc) for loc in error["loc"][skip:])
        issues.append({
            "field": field_path or "(root)",
            "message": error["msg"],
            "type": error["type"],
        })
    return issues
