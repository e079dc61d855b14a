"""API routers package."""

from .paper import router as paper_router

__all__ = ["paper_router"]
