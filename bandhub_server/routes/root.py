"""Root and health endpoints."""

from typing import Tuple

from fastapi import APIRouter

from ..state import get_state

router = APIRouter()


def _cache_available(state) -> Tuple[bool, str]:
    """Return (available, message) for the response cache."""
    check = getattr(state.cache, "is_available", None)
    if check is None:
        return True, "in-process"
    ok = check()
    return ok, "connected" if ok else "not reachable"


@router.get("/")
def root():
    state = get_state()
    return {
        "name": "BandHub Discovery API",
        "version": "1.0.0",
        "organizations": len(state.store.get_organizations()),
        "endpoints": {
            "videos": ["/api/videos/{id}/related"],
            "matching": ["/api/matching/preview"],
            "batch": ["/api/batch/run"],
            "organizations": [
                "/api/organizations",
                "/api/organizations/{id}",
                "/api/organizations/{id}/aliases",
            ],
        },
    }


@router.get("/api/health")
def health():
    state = get_state()
    cache_ok, cache_msg = _cache_available(state)
    return {
        "status": "healthy",
        "store": type(state.store).__name__,
        "cache": {"available": cache_ok, "message": cache_msg},
    }
