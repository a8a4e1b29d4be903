"""
API v1 Router

All space-scoped endpoints are prefixed with /spaces/{spaceSlug}.
"""

from fastapi import APIRouter
from . import groups, posts, spaces, users

router = APIRouter()

# Account routes (not space-scoped)
router.include_router(users.router, tags=["Users"])
router.include_router(spaces.router_global, tags=["Spaces"])

# Space-scoped routes
router.include_router(spaces.router_scoped, prefix="/spaces/{spaceSlug}", tags=["Spaces"])
router.include_router(groups.router, prefix="/spaces/{spaceSlug}/groups", tags=["Groups"])
router.include_router(posts.router, prefix="/spaces/{spaceSlug}/posts", tags=["Posts"])


@router.get("/", tags=["API"])
async def api_root():
    """API root: returns version and available endpoints."""
    return {
        "api": "v1",
        "version": "0.1.0",
        "endpoints": [
            "/users",
            "/user_tokens",
            "/spaces",
            "/spaces/{spaceSlug}/members",
            "/spaces/{spaceSlug}/groups",
            "/spaces/{spaceSlug}/posts",
        ],
    }
