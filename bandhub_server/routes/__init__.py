"""Register all route modules on the FastAPI app."""

from fastapi import FastAPI

from .batch import router as batch_router
from .matching import router as matching_router
from .organizations import router as organizations_router
from .root import router as root_router
from .videos import router as videos_router


def register_routes(app: FastAPI) -> None:
    """Attach all API routers to the app."""
    app.include_router(root_router)
    app.include_router(videos_router, prefix="/api/videos", tags=["videos"])
    app.include_router(matching_router, prefix="/api/matching", tags=["matching"])
    app.include_router(batch_router, prefix="/api/batch", tags=["batch"])
    app.include_router(organizations_router, prefix="/api/organizations", tags=["organizations"])
