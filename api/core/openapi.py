"""OpenAPI document generation."""

from fastapi import FastAPI
from fastapi.openapi.docs import get_swagger_ui_html
from fastapi.openapi.utils import get_openapi

API_TITLE = "morinoparty mpm API"
API_VERSION = "1.0.0"
API_DESCRIPTION = "mpm repository for morinoparty"

# FastAPI's default request-validation response; this service answers 400 instead
_DEFAULT_VALIDATION_STATUS = "422"
_DEFAULT_VALIDATION_SCHEMAS = ("HTTPValidationError", "ValidationError")


def create_openapi_schema(app: FastAPI) -> dict:
    """Build the OpenAPI 3.1 document for every registered route."""
    schema = get_openapi(
        title=API_TITLE,
        version=API_VERSION,
        description=API_DESCRIPTION,
        routes=app.routes,
    )

    for path_item in schema.get("paths", {}).values():
        for operation in path_item.values():
            operation.get("responses", {}).pop(_DEFAULT_VALIDATION_STATUS, None)

    component_schemas = schema.get("components", {}).get("schemas", {})
    for name in _DEFAULT_VALIDATION_SCHEMAS:
        component_schemas.pop(name, None)

    return schema


def setup_openapi(app: FastAPI) -> None:
    """Replace ``app.openapi`` with the cached custom generator and add the /scalar reference page."""

    def custom_openapi():
        if app.openapi_schema:
            return app.openapi_schema
        app.openapi_schema = create_openapi_schema(app)
        return app.openapi_schema

    app.openapi = custom_openapi

    @app.get("/scalar", include_in_schema=False)
    async def api_reference():
        return get_swagger_ui_html(openapi_url=app.openapi_url, title=f"{API_TITLE} - Reference")
