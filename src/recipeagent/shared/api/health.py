from __future__ import annotations
from fastapi import APIRouter

from recipeagent.shared.config.settings import settings

router = APIRouter(tags=["health"])

@router.get("/health")
def health():
    return {"status": "ok", "service": settings.SERVICE_NAME, "version": settings.SERVICE_VERSION}
