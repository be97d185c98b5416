from __future__ import annotations

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from recipeagent.features.recipes.app.use_cases import RecipeOrchestrator
from recipeagent.shared.errors import BothSourcesUnavailable, InvalidQuery
from .schemas import RecipePayload, RecipeResponse

router = APIRouter(tags=["recipes"])
log = logging.getLogger("api")


def _failure(status_code: int, message: str) -> JSONResponse:
    body = RecipeResponse(success=False, message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json", by_alias=True, exclude_none=True))


@router.post("/recipes")
async def get_recipes(payload: RecipePayload, request: Request):
    orchestrator: RecipeOrchestrator = request.app.state.orchestrator
    try:
        outcome = await orchestrator.run(payload.to_query())
    except InvalidQuery as e:
        return _failure(400, str(e))
    except BothSourcesUnavailable:
        log.error("Both sources unavailable for %s request", payload.query_type.value)
        return _failure(503, "服务处理失败，请稍后重试")

    body = RecipeResponse(
        result=outcome.result,
        type=outcome.query_type.value,
        timestamp=outcome.timestamp,
        supplementary_data=outcome.supplementary_data,
        success=True,
    )
    return body.model_dump(mode="json", by_alias=True, exclude_none=True)


@router.get("/cache/status")
async def cache_status(request: Request):
    return {name: cache.status() for name, cache in request.app.state.caches.items()}


@router.post("/cache/sweep")
async def cache_sweep(request: Request):
    return {"removed": request.app.state.sweeper.sweep_all()}
