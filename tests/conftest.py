from __future__ import annotations

from typing import Any, Callable

import httpx
import pytest

from recipeagent.features.recipes.infra.name_resolver import NameResolver
from recipeagent.features.recipes.infra.recipe_search import RecipeSearchClient
from recipeagent.shared.cache.ttl_cache import TTLCache
from recipeagent.shared.llm.openai_client import ChatClient

from helpers import FakeClock, Recorder


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def recipe_cache(clock: FakeClock) -> TTLCache:
    return TTLCache("recipes", clock=clock)


@pytest.fixture
def translation_cache(clock: FakeClock) -> TTLCache:
    return TTLCache("translations", clock=clock)


@pytest.fixture
def make_chat_client():
    def _make(handler: Callable[[httpx.Request], Any], *, api_key: str = "test-llm-key"):
        recorder = Recorder(handler)
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(recorder))
        client = ChatClient(
            api_key=api_key,
            base_url="https://llm.test/v1",
            model="test-model",
            request_timeout=5,
            http_client=http_client,
        )
        return client, recorder
    return _make


@pytest.fixture
def make_search_client(recipe_cache: TTLCache):
    def _make(handler: Callable[[httpx.Request], Any], resolver: NameResolver, *, api_key: str = "test-search-key"):
        recorder = Recorder(handler)
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(recorder))
        client = RecipeSearchClient(
            recipe_cache,
            resolver,
            api_key=api_key,
            base_url="https://search.test/recipes",
            http_client=http_client,
        )
        return client, recorder
    return _make


@pytest.fixture
def offline_resolver(translation_cache: TTLCache, make_chat_client) -> NameResolver:
    """Resolver whose generative step is never configured."""
    chat, _ = make_chat_client(lambda r: httpx.Response(500), api_key="")
    return NameResolver(translation_cache, chat)
