from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional, Sequence

import httpx
from pydantic import ValidationError

from recipeagent.features.recipes.domain.models import Recipe
from recipeagent.features.recipes.infra.name_resolver import NameResolver
from recipeagent.shared.cache.ttl_cache import TTLCache
from recipeagent.shared.config.settings import settings
from recipeagent.shared.errors import (
    ConfigurationAbsent,
    UpstreamParseFailure,
    UpstreamStatusFailure,
    UpstreamTransportFailure,
)

log = logging.getLogger("spoonacular")

PROVIDER = "spoonacular"


def _cache_key(prefix: str, items: Sequence[str]) -> str:
    return f"{prefix}:{'|'.join(items)}"


class RecipeSearchClient:
    """
    Spoonacular recipe search, with results cached by the untranslated input.
    Without an API key both searches return [] instead of failing.
    """

    def __init__(
        self,
        cache: TTLCache,
        resolver: NameResolver,
        *,
        api_key: str,
        base_url: str = "https://api.spoonacular.com/recipes",
        number: int = 5,
        request_timeout: float = 30,
        ingredients_ttl: float = 30 * 60,
        dish_ttl: float = 60 * 60,
        info_ttl: float = 60 * 60,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.cache = cache
        self.resolver = resolver
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.number = number
        self.request_timeout = request_timeout
        self.ingredients_ttl = ingredients_ttl
        self.dish_ttl = dish_ttl
        self.info_ttl = info_ttl
        self._http_client = http_client

    @classmethod
    def from_settings(
        cls,
        cache: TTLCache,
        resolver: NameResolver,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> "RecipeSearchClient":
        return cls(
            cache,
            resolver,
            api_key=settings.SPOONACULAR_API_KEY,
            base_url=settings.SPOONACULAR_BASE_URL,
            number=settings.RECIPE_SEARCH_RESULTS,
            request_timeout=settings.RECIPE_REQUEST_TIMEOUT,
            ingredients_ttl=settings.RECIPE_CACHE_TTL_INGREDIENTS,
            dish_ttl=settings.RECIPE_CACHE_TTL_DISH,
            info_ttl=settings.RECIPE_CACHE_TTL_INFO,
            http_client=http_client,
        )

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    async def search_by_ingredients(self, ingredients: Sequence[str]) -> List[Recipe]:
        if not self.configured:
            return []

        translated = await self.resolver.translate_ingredients(ingredients)
        if not translated:
            log.info("No searchable ingredient in %s", list(ingredients))
            return []

        cache_key = _cache_key("ingredients", ingredients)
        cached = self._cached_recipes(cache_key, results_key=None)
        if cached is not None:
            return cached

        body = await self._get(
            "/findByIngredients",
            {"ingredients": ",".join(translated), "number": self.number},
        )
        recipes = self._parse_recipes(body, results_key=None)
        self.cache.put(cache_key, body, self.ingredients_ttl)
        return recipes

    async def search_by_dish_name(self, dish_name: str) -> List[Recipe]:
        if not self.configured:
            return []

        query = await self.resolver.translate_dish_name(dish_name)
        if not query:
            log.info("Dish name %r is not searchable", dish_name)
            return []

        cache_key = _cache_key("dish", [dish_name])
        cached = self._cached_recipes(cache_key, results_key="results")
        if cached is not None:
            return cached

        body = await self._get(
            "/complexSearch",
            {"query": query, "number": self.number, "addRecipeInformation": "true"},
        )
        recipes = self._parse_recipes(body, results_key="results")
        self.cache.put(cache_key, body, self.dish_ttl)
        return recipes

    async def get_recipe_information(self, recipe_id: int) -> Recipe:
        if not self.configured:
            raise ConfigurationAbsent(PROVIDER, "API key is not configured")

        cache_key = f"recipe_info_{recipe_id}"
        cached = self.cache.get(cache_key)
        if cached is not None:
            try:
                return Recipe.model_validate_json(cached)
            except ValidationError:
                log.warning("Dropping unreadable cache entry %s", cache_key)

        body = await self._get(f"/{recipe_id}/information", {"includeNutrition": "false"})
        try:
            recipe = Recipe.model_validate_json(body)
        except ValidationError as e:
            raise UpstreamParseFailure(PROVIDER, f"bad recipe information: {e}") from e
        self.cache.put(cache_key, body, self.info_ttl)
        return recipe

    def _cached_recipes(self, cache_key: str, *, results_key: Optional[str]) -> Optional[List[Recipe]]:
        cached = self.cache.get(cache_key)
        if cached is None:
            return None
        try:
            return self._parse_recipes(cached, results_key=results_key)
        except UpstreamParseFailure:
            log.warning("Dropping unreadable cache entry %s", cache_key)
            return None

    @staticmethod
    def _parse_recipes(body: str, *, results_key: Optional[str]) -> List[Recipe]:
        try:
            data: Any = json.loads(body)
            if results_key is not None:
                data = data[results_key]
            if not isinstance(data, list):
                raise TypeError(f"expected a list, got {type(data).__name__}")
            return [Recipe.model_validate(item) for item in data]
        except (ValueError, KeyError, TypeError, ValidationError) as e:
            raise UpstreamParseFailure(PROVIDER, f"unexpected response body: {e}") from e

    async def _get(self, path: str, params: Dict[str, Any]) -> str:
        url = f"{self.base_url}{path}"
        params = {**params, "apiKey": self.api_key}
        timeout = httpx.Timeout(self.request_timeout)
        try:
            if self._http_client is not None:
                resp = await self._http_client.get(url, params=params, timeout=timeout)
            else:
                async with httpx.AsyncClient(timeout=timeout) as client:
                    resp = await client.get(url, params=params)
            resp.raise_for_status()
        except httpx.TimeoutException as e:
            raise UpstreamTransportFailure(PROVIDER, f"timed out: {e}") from e
        except httpx.HTTPStatusError as e:
            raise UpstreamStatusFailure(PROVIDER, e.response.status_code, e.response.text) from e
        except httpx.RequestError as e:
            raise UpstreamTransportFailure(PROVIDER, str(e)) from e
        return resp.text
