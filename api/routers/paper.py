"""Paper plugin catalog REST API endpoints."""

import logging
from typing import List

from fastapi import APIRouter, Path
from fastapi.responses import JSONResponse

from api.constants import DEFAULT_PLUGIN_ID, PLUGIN_NOT_FOUND
from api.dependencies import get_metadata_discovery, get_plugin_catalog
from api.errors import MetadataLoadError, PluginValidationError
from api.models.responses import ErrorResponse, ValidationErrorResponse
from api.plugins.metadata import PluginInfo

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/paper", tags=["paper"])

_NOT_FOUND_RESPONSE = {"model": ErrorResponse, "description": "Plugin not found"}
_VALIDATION_RESPONSE = {"model": ValidationErrorResponse, "description": "Invalid request parameters"}


def _plugin_not_found() -> JSONResponse:
    return JSONResponse(status_code=404, content={"error": PLUGIN_NOT_FOUND})


@router.get(
    "/list",
    response_model=List[str],
    summary="List plugins",
    description="Return every known plugin identifier in catalog order.",
)
async def list_plugins():
    """List all plugin identifiers in the catalog."""
    catalog = get_plugin_catalog()
    return catalog.list()


@router.get(
    "/plugins/{plugin_id}",
    response_model=str,
    summary="Look up a plugin",
    description="Return the plugin identifier if it is present in the catalog.",
    responses={404: _NOT_FOUND_RESPONSE, 400: _VALIDATION_RESPONSE},
)
async def get_plugin(
    plugin_id: str = Path(
        ...,
        description="Plugin identifier as listed by /paper/list",
        json_schema_extra={"default": DEFAULT_PLUGIN_ID},
    ),
):
    """Look up a plugin identifier in the catalog."""
    catalog = get_plugin_catalog()
    plugin = catalog.find(plugin_id)
    if plugin is None:
        logger.debug(f"Plugin lookup miss: {plugin_id!r}")
        return _plugin_not_found()
    return plugin


@router.get(
    "/plugins/{plugin_id}/metadata",
    response_model=PluginInfo,
    response_model_exclude_none=True,
    summary="Get plugin metadata",
    description="Return the validated metadata record (download sources, license, links) for a catalog plugin.",
    responses={
        404: _NOT_FOUND_RESPONSE,
        400: _VALIDATION_RESPONSE,
        500: {"model": ErrorResponse, "description": "Stored metadata is invalid"},
    },
)
async def get_plugin_metadata(
    plugin_id: str = Path(..., description="Plugin identifier as listed by /paper/list"),
):
    """Resolve a catalog plugin to its metadata file."""
    catalog = get_plugin_catalog()
    if not catalog.has(plugin_id):
        return _plugin_not_found()

    discovery = get_metadata_discovery()
    try:
        info = discovery.load(plugin_id)
    except (PluginValidationError, MetadataLoadError) as e:
        logger.error(f"Invalid metadata for plugin '{plugin_id}': {e}")
        return JSONResponse(status_code=500, content={"error": "Invalid plugin metadata"})

    if info is None:
        logger.warning(f"Plugin '{plugin_id}' is in the catalog but has no metadata file")
        return _plugin_not_found()
    return info
