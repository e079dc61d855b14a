"""Response models for API endpoints."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """Fixed-shape error body."""

    model_config = ConfigDict(json_schema_extra={"examples": [{"error": "Plugin not found"}]})

    error: str = Field(..., description="Error message")


class ValidationIssue(BaseModel):
    """One offending request field."""

    field: str = Field(..., description="Dotted path of the field, e.g. path.plugin_id")
    message: str = Field(..., description="Human-readable reason")
    type: str = Field(..., description="Machine-readable error code")


class ValidationErrorResponse(BaseModel):
    """Body returned when request validation fails."""

    error: str = Field(default="Validation failed")
    issues: List[ValidationIssue] = Field(default_factory=list)
