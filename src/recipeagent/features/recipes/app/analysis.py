from __future__ import annotations

from typing import Dict, List, Sequence

from recipeagent.features.recipes.domain.formatting import join_ingredients
from recipeagent.features.recipes.domain.prompts import DISH_GUIDE_PROMPT, INGREDIENTS_ANALYSIS_PROMPT
from recipeagent.shared.llm.openai_client import ChatClient


class CulinaryAnalysisClient:
    """
    Asks the generative provider for a free-form culinary answer.
    """

    def __init__(self, chat_client: ChatClient) -> None:
        self.chat_client = chat_client

    @staticmethod
    def _messages(prompt: str) -> List[Dict[str, str]]:
        return [{"role": "user", "content": prompt}]

    async def analyze_ingredients(self, ingredients: Sequence[str]) -> str:
        prompt = INGREDIENTS_ANALYSIS_PROMPT.format(ingredients=join_ingredients(ingredients))
        return await self.chat_client.complete_chat(self._messages(prompt))

    async def dish_details(self, dish_name: str) -> str:
        prompt = DISH_GUIDE_PROMPT.format(dish_name=dish_name)
        return await self.chat_client.complete_chat(self._messages(prompt))
