from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Dict, List, Optional, Sequence

from recipeagent.features.recipes.app.analysis import CulinaryAnalysisClient
from recipeagent.features.recipes.domain.formatting import fallback_answer, join_ingredients, merged_answer
from recipeagent.features.recipes.domain.models import (
    OrchestrationOutcome,
    QueryType,
    Recipe,
    RecipeQuery,
    SourceResult,
)
from recipeagent.features.recipes.domain.templates import NUTRITION_TIPS_UNAVAILABLE
from recipeagent.features.recipes.infra.recipe_search import RecipeSearchClient
from recipeagent.shared.errors import BothSourcesUnavailable, InvalidQuery

log = logging.getLogger("recipes")

AI_SOURCE = "llm"
API_SOURCE = "spoonacular"


async def _capture(source: str, call: Awaitable[Any]) -> SourceResult:
    """
    Run one upstream call and fold any failure into a ``SourceResult``.
    """
    try:
        return SourceResult.success(await call)
    except Exception as e:
        log.warning("%s unavailable: %s: %s", source, type(e).__name__, e)
        return SourceResult.failure(str(e) or type(e).__name__)


def _task_result(task: "asyncio.Task[SourceResult]", source: str, timeout: Optional[float]) -> SourceResult:
    if task.done() and not task.cancelled():
        return task.result()
    log.warning("%s did not answer within %ss", source, timeout)
    return SourceResult.failure(f"no answer within {timeout}s")


def normalize_query(query: RecipeQuery) -> RecipeQuery:
    """
    Trim the input and drop blank ingredients. Raises ``InvalidQuery`` when
    nothing usable is left.
    """
    if query.query_type is QueryType.INGREDIENTS:
        ingredients = [i.strip() for i in query.ingredients if i and i.strip()]
        if not ingredients:
            raise InvalidQuery("食材列表不能为空")
        return RecipeQuery(query_type=query.query_type, ingredients=ingredients)

    dish_name = (query.dish_name or "").strip()
    if not dish_name:
        raise InvalidQuery("按菜名查询时必须提供菜名")
    return RecipeQuery(query_type=query.query_type, dish_name=dish_name)


class RecipeOrchestrator:
    """
    Asks the generative source and the recipe search concurrently, then
    combines whatever came back:

    - both failed: ``BothSourcesUnavailable``
    - generative only: generated text as is
    - search only: fallback template around the reference recipes
    - both: generated text with the reference recipes appended
    """

    def __init__(
        self,
        analysis: CulinaryAnalysisClient,
        search: RecipeSearchClient,
        *,
        timeout: Optional[float] = 120.0,
    ) -> None:
        self.analysis = analysis
        self.search = search
        self.timeout = timeout

    async def run(self, query: RecipeQuery) -> OrchestrationOutcome:
        query = normalize_query(query)
        if query.query_type is QueryType.INGREDIENTS:
            log.info("Ingredients request: %s", query.ingredients)
            ai_call = self.analysis.analyze_ingredients(query.ingredients)
            api_call = self.search.search_by_ingredients(query.ingredients)
        else:
            log.info("Dish request: %s", query.dish_name)
            ai_call = self.analysis.dish_details(query.dish_name)
            api_call = self.search.search_by_dish_name(query.dish_name)

        ai, api = await self._gather(ai_call, api_call)
        outcome = self._combine(query, ai, api)
        log.info(
            "Request resolved: type=%s ai_available=%s api_available=%s",
            query.query_type.value, outcome.ai_available, outcome.api_available,
        )
        return outcome

    async def _gather(self, ai_call: Awaitable[str], api_call: Awaitable[List[Recipe]]):
        ai_task = asyncio.create_task(_capture(AI_SOURCE, ai_call))
        api_task = asyncio.create_task(_capture(API_SOURCE, api_call))

        _, pending = await asyncio.wait({ai_task, api_task}, timeout=self.timeout)
        for task in pending:
            task.cancel()
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)

        return (
            _task_result(ai_task, AI_SOURCE, self.timeout),
            _task_result(api_task, API_SOURCE, self.timeout),
        )

    @staticmethod
    def _combine(
        query: RecipeQuery,
        ai: "SourceResult[str]",
        api: "SourceResult[List[Recipe]]",
    ) -> OrchestrationOutcome:
        if not ai.ok and not api.ok:
            raise BothSourcesUnavailable("所有服务都不可用")

        is_ingredients = query.query_type is QueryType.INGREDIENTS
        recipes: Sequence[Recipe] = api.payload or []
        count = len(recipes)
        data: Dict[str, Any] = {
            "ai_available": ai.ok,
            "api_available": api.ok,
            "reference_count": count,
        }
        if api.ok:
            data["api_recipes"] = [r.model_dump(by_alias=True) for r in recipes]

        if ai.ok and not api.ok:
            result = ai.payload or ""
            tips = NUTRITION_TIPS_UNAVAILABLE
        elif api.ok and not ai.ok:
            subject = join_ingredients(query.ingredients) if is_ingredients else query.dish_name
            result = fallback_answer(query.query_type, subject, recipes)
            tips = f"获得{count}个食谱参考"
        else:
            result = merged_answer(query.query_type, ai.payload or "", recipes)
            tips = f"AI分析完成，包含{count}个食谱参考"

        if is_ingredients:
            data["nutrition_tips"] = tips

        return OrchestrationOutcome(
            query_type=query.query_type,
            result=result,
            supplementary_data=data,
            ai_available=ai.ok,
            api_available=api.ok,
        )
