"""
Top-level router for version 1 of the API.

Endpoint routers are included here under their prefixes.
"""

from fastapi import APIRouter

from .endpoints import accounts, health

router = APIRouter()

router.include_router(accounts.router, prefix="/accounts", tags=["accounts"])
router.include_router(health.router, tags=["health"])
