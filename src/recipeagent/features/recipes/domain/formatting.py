from __future__ import annotations

from typing import List, Sequence

from recipeagent.features.recipes.domain.models import Recipe, QueryType
from recipeagent.features.recipes.domain.templates import (
    DISH_GUIDE_TEMPLATE,
    DISH_REFERENCES_HEADING,
    INGREDIENT_OVERVIEW_TEMPLATE,
    INGREDIENT_REFERENCES_HEADING,
    INGREDIENT_SEPARATOR,
    NO_REFERENCES_TEXT,
)


def _format_amount(amount: float) -> str:
    return f"{amount:.1f}"


def format_recipes(recipes: Sequence[Recipe]) -> str:
    """
    Render reference recipes as Markdown prose. Preparation text from the
    provider is not reproduced, only a placeholder marks that it exists.
    """
    if not recipes:
        return NO_REFERENCES_TEXT

    lines: List[str] = []
    for i, recipe in enumerate(recipes, 1):
        lines.append(f"### 参考食谱 {i}: {recipe.title}")
        if (recipe.ready_in_minutes or 0) > 0:
            lines.append(f"- **制作时间**: {recipe.ready_in_minutes}分钟")
        if (recipe.servings or 0) > 0:
            lines.append(f"- **份量**: {recipe.servings}人份")
        if recipe.extended_ingredients:
            lines.append("- **食材**:")
            for ing in recipe.extended_ingredients:
                lines.append(f"  - {ing.name}: {_format_amount(ing.amount)} {ing.unit}".rstrip())
        if recipe.instructions:
            lines.append("- **制作说明**: <制作步骤参考>")
        lines.append("")
    return "\n".join(lines).strip() + "\n"


def fallback_answer(query_type: QueryType, subject: str, recipes: Sequence[Recipe]) -> str:
    """
    Answer built only from search results, used when the generative source
    is unavailable. ``subject`` is the original request text.
    """
    references = format_recipes(recipes)
    if query_type is QueryType.INGREDIENTS:
        return INGREDIENT_OVERVIEW_TEMPLATE.format(ingredients=subject, references=references)
    return DISH_GUIDE_TEMPLATE.format(dish_name=subject, references=references)


def merged_answer(query_type: QueryType, generated: str, recipes: Sequence[Recipe]) -> str:
    heading = INGREDIENT_REFERENCES_HEADING if query_type is QueryType.INGREDIENTS else DISH_REFERENCES_HEADING
    return f"{generated}\n\n{heading}\n\n{format_recipes(recipes)}"


def join_ingredients(ingredients: Sequence[str]) -> str:
    return INGREDIENT_SEPARATOR.join(ingredients)
