"""System-level routes for service discovery and health checks."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter, Depends

from ..config import Settings, get_settings

router = APIRouter(tags=["system"])


@router.get("/")
def api_info(settings: Settings = Depends(get_settings)) -> dict[str, Any]:
    return {
        "success": True,
        "message": settings.app_name,
        "version": settings.api_version,
        "endpoints": {
            "health": "GET /health",
            "auth": {
                "register": "POST /auth/register",
                "login": "POST /auth/login",
                "logout": "POST /auth/logout",
                "me": "GET /auth/me",
            },
            "users": {
                "searchByUsername": "GET /users/search/username?username=xxx",
                "searchByEmail": "GET /users/search/email?email=xxx",
                "get": "GET /users/:userId",
            },
            "follow": {
                "follow": "POST /follow/:userId",
                "unfollow": "DELETE /follow/:userId",
                "getFollowers": "GET /follow/followers/:userId",
                "getFollowing": "GET /follow/following/:userId",
                "stats": "GET /follow/stats/:userId",
            },
            "posts": {
                "create": "POST /posts",
                "getByUser": "GET /posts/:userId?page=1&limit=10",
                "getFeed": "GET /feed?page=1&limit=10",
            },
        },
    }


@router.get("/health")
async def healthcheck() -> dict[str, Any]:
    return {
        "success": True,
        "message": "Server is healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


__all__ = ["router"]
