from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Dict, Optional

import httpx
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from recipeagent.shared.config.settings import settings
from recipeagent.shared.logging.logger import setup_logging
from recipeagent.shared.cache.ttl_cache import TTLCache
from recipeagent.shared.cache.sweeper import CacheSweeper
from recipeagent.shared.llm.openai_client import ChatClient

from recipeagent.shared.api.health import router as health_router
from recipeagent.features.recipes.api.routes import router as recipes_router
from recipeagent.features.recipes.app.analysis import CulinaryAnalysisClient
from recipeagent.features.recipes.app.use_cases import RecipeOrchestrator
from recipeagent.features.recipes.infra.name_resolver import NameResolver
from recipeagent.features.recipes.infra.recipe_search import RecipeSearchClient

log = logging.getLogger("app")


@dataclass
class Services:
    caches: Dict[str, TTLCache]
    sweeper: CacheSweeper
    orchestrator: RecipeOrchestrator
    http_client: Optional[httpx.AsyncClient] = None


def build_services(http_client: Optional[httpx.AsyncClient] = None) -> Services:
    """
    Wire the dependency graph from settings. One cache holds recipe search
    bodies, the other holds generated translations.
    """
    recipe_cache = TTLCache("recipes")
    translation_cache = TTLCache("translations")

    chat_client = ChatClient.from_settings(http_client=http_client)
    resolver = NameResolver(
        translation_cache,
        chat_client,
        translation_ttl=settings.TRANSLATION_CACHE_TTL,
        translation_timeout=settings.TRANSLATION_TIMEOUT,
    )
    search = RecipeSearchClient.from_settings(recipe_cache, resolver, http_client=http_client)
    orchestrator = RecipeOrchestrator(
        CulinaryAnalysisClient(chat_client),
        search,
        timeout=settings.ORCHESTRATION_TIMEOUT,
    )
    caches = {"recipes": recipe_cache, "translations": translation_cache}
    return Services(
        caches=caches,
        sweeper=CacheSweeper(caches, settings.CACHE_SWEEP_INTERVAL),
        orchestrator=orchestrator,
        http_client=http_client,
    )


def _split(value: str) -> list:
    if value and value != "*":
        return [v.strip() for v in value.split(",")]
    return ["*"]


def create_app(services: Optional[Services] = None) -> FastAPI:
    setup_logging()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        svc = services
        owns_http_client = svc is None
        if svc is None:
            svc = build_services(httpx.AsyncClient(timeout=httpx.Timeout(settings.LLM_REQUEST_TIMEOUT)))
        app.state.caches = svc.caches
        app.state.sweeper = svc.sweeper
        app.state.orchestrator = svc.orchestrator
        svc.sweeper.start()
        log.info(
            "Startup complete. llm_configured=%s search_configured=%s",
            svc.orchestrator.analysis.chat_client.configured,
            svc.orchestrator.search.configured,
        )
        try:
            yield
        finally:
            await svc.sweeper.stop()
            if owns_http_client and svc.http_client is not None:
                await svc.http_client.aclose()

    app = FastAPI(title="Recipe Agent", version=settings.SERVICE_VERSION, lifespan=lifespan)

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=_split(settings.CORS_ALLOW_ORIGINS),
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=_split(settings.CORS_ALLOW_METHODS),
        allow_headers=_split(settings.CORS_ALLOW_HEADERS),
    )

    # Routers
    app.include_router(health_router,  prefix="/api")
    app.include_router(recipes_router, prefix="/api")

    @app.exception_handler(RequestValidationError)
    async def _on_validation_error(request: Request, exc: RequestValidationError):
        messages = [str(e.get("msg", "")).removeprefix("Value error, ") for e in exc.errors()]
        return JSONResponse(
            status_code=400,
            content={"success": False, "message": "请求格式错误: " + "; ".join(messages)},
        )

    return app

# Uvicorn/Gunicorn entry point
app = create_app()
