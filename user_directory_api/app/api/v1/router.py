"""
Top‑level router for version 1 of the API.

This router aggregates domain‑specific routers under a unified
prefix.  When new domains are introduced, update this file to include
their routers.
"""

from fastapi import APIRouter

from .endpoints import health, users


router = APIRouter()

router.include_router(users.router, prefix="/user", tags=["users"])
router.include_router(health.router, prefix="/health", tags=["health"])
