"""Main FastAPI application for the mpm plugin repository."""

import logging
import os
from dotenv import load_dotenv

# Load environment variables from .env.prod
load_dotenv('.env.prod')

# Configure logging BEFORE importing any modules that use logger
log_level = os.getenv('LOG_LEVEL', 'INFO')
logging.basicConfig(
    level=getattr(logging, log_level.upper()),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Import after logging is configured
from fastapi import FastAPI
from api.constants import DEFAULT_PORT, PAPER_LIST_FILE
from api.core.exception_handlers import register_exception_handlers
from api.core.openapi import API_DESCRIPTION, API_TITLE, API_VERSION, setup_openapi
from api.routers import paper_router

# Create FastAPI app
app = FastAPI(
    title=API_TITLE,
    description=API_DESCRIPTION,
    version=API_VERSION,
    openapi_url="/openapi",
    docs_url="/docs",
    redoc_url=None,
)

register_exception_handlers(app)
setup_openapi(app)

# Include API routers
app.include_router(paper_router)  # /paper/* endpoints


@app.on_event("startup")
async def startup_event():
    """Application startup event. Loads the catalog; a broken list aborts startup."""
    from api.dependencies import get_plugin_catalog

    logger.info("Starting mpm repository service")
    logger.info(f"Plugin list: {PAPER_LIST_FILE}")

    catalog = get_plugin_catalog()
    logger.info(f"Serving {len(catalog)} plugin(s)")


@app.on_event("shutdown")
async def shutdown_event():
    """Application shutdown event."""
    logger.info("Shutting down mpm repository service")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app:app", host="0.0.0.0", port=DEFAULT_PORT, reload=True)
