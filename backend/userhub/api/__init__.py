"""FastAPI routers for the user surfaces."""

from __future__ import annotations

from fastapi import APIRouter

from userhub.api import user_resource, users

router = APIRouter()

router.include_router(users.router)
router.include_router(user_resource.router)

__all__ = ["router"]
