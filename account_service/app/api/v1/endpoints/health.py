"""Liveness endpoint."""

from typing import Dict

from fastapi import APIRouter

from account_service.app.core.config import settings

router = APIRouter()


@router.get("/health", response_model=Dict[str, str])
async def health() -> Dict[str, str]:
    return {"status": "ok", "version": settings.api_version}
