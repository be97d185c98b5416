from __future__ import annotations

import asyncio
import logging
from typing import Dict, Iterable, List, Mapping

from recipeagent.features.recipes.domain.prompts import TRANSLATE_DISH_PROMPT, TRANSLATE_INGREDIENT_PROMPT
from recipeagent.features.recipes.domain.vocabulary import (
    COMMON_TRANSLATIONS,
    KEYWORD_FALLBACKS,
    SOURCE_SCRIPT_RANGE,
)
from recipeagent.shared.cache.ttl_cache import TTLCache
from recipeagent.shared.errors import UpstreamError
from recipeagent.shared.llm.openai_client import ChatClient

log = logging.getLogger("translation")

INGREDIENT = "ingredient"
DISH = "dish"

_PROMPTS: Dict[str, str] = {
    INGREDIENT: TRANSLATE_INGREDIENT_PROMPT,
    DISH: TRANSLATE_DISH_PROMPT,
}
_QUOTES = "\"'“”‘’`"


def contains_source_script(text: str) -> bool:
    lo, hi = SOURCE_SCRIPT_RANGE
    return any(lo <= ch <= hi for ch in text)


def normalize_translation(raw: str) -> str:
    return raw.strip().strip(_QUOTES).strip().lower()


def fallback_translation(text: str) -> str:
    """
    Keyword match used when the generative translation is unavailable.
    Returns "" when nothing matches; callers skip the item.
    """
    for keywords, term in KEYWORD_FALLBACKS:
        if any(k in text for k in keywords):
            return term
    return ""


class NameResolver:
    """
    Resolves Chinese ingredient / dish names to the English query terms the
    recipe search expects. Tried in order, first hit wins:

    1. text without Chinese characters is returned unchanged
    2. static table of common terms
    3. translation cache (``ingredient:<text>`` / ``dish:<text>``)
    4. generative translation, cached on success
    5. keyword fallback, "" when nothing matches
    """

    def __init__(
        self,
        cache: TTLCache,
        chat_client: ChatClient,
        *,
        translation_ttl: float = 24 * 60 * 60,
        translation_timeout: float = 10,
        common_translations: Mapping[str, str] = COMMON_TRANSLATIONS,
    ) -> None:
        self.cache = cache
        self.chat_client = chat_client
        self.translation_ttl = translation_ttl
        self.translation_timeout = translation_timeout
        self.common_translations = dict(common_translations)

    async def translate_ingredient(self, ingredient: str) -> str:
        return await self._resolve(ingredient, INGREDIENT)

    async def translate_dish_name(self, dish_name: str) -> str:
        return await self._resolve(dish_name, DISH)

    async def translate_ingredients(self, ingredients: Iterable[str]) -> List[str]:
        translated: List[str] = []
        for ingredient in ingredients:
            term = await self.translate_ingredient(ingredient)
            if term:
                translated.append(term)
        return translated

    async def _resolve(self, text: str, kind: str) -> str:
        if not contains_source_script(text):
            return text

        common = self.common_translations.get(text)
        if common:
            return common

        cache_key = f"{kind}:{text}"
        cached = self.cache.get(cache_key)
        if cached:
            return cached

        try:
            translation = await self._translate_with_llm(text, kind)
        except (UpstreamError, asyncio.TimeoutError) as e:
            fallback = fallback_translation(text)
            log.info("Translation of %r unavailable (%s), keyword fallback -> %r", text, str(e) or "timeout", fallback)
            return fallback

        self.cache.put(cache_key, translation, self.translation_ttl)
        return translation

    async def _translate_with_llm(self, text: str, kind: str) -> str:
        messages = [{"role": "user", "content": _PROMPTS[kind].format(text=text)}]
        raw = await asyncio.wait_for(
            self.chat_client.complete_chat(messages, temperature=0.0, max_tokens=50, request_timeout=self.translation_timeout),
            timeout=self.translation_timeout,
        )
        translation = normalize_translation(raw)
        if not translation:
            raise UpstreamError("llm", "empty translation")
        return translation
