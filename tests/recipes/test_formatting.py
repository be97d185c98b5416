from recipeagent.features.recipes.domain.formatting import (
    fallback_answer,
    format_recipes,
    merged_answer,
)
from recipeagent.features.recipes.domain.models import QueryType, Recipe
from recipeagent.features.recipes.domain.templates import (
    DISH_REFERENCES_HEADING,
    INGREDIENT_OVERVIEW_HEADING,
    INGREDIENT_REFERENCES_HEADING,
    NO_REFERENCES_TEXT,
)


def _recipe(**kw):
    data = {
        "id": 1,
        "title": "Tomato Egg Stir Fry",
        "servings": 2,
        "readyInMinutes": 15,
        "instructions": "Beat the eggs. Fry the tomatoes.",
        "extendedIngredients": [
            {"name": "eggs", "amount": 3, "unit": "large"},
            {"name": "tomato", "amount": 2.5, "unit": ""},
        ],
    }
    data.update(kw)
    return Recipe.model_validate(data)


def test_empty_list_gives_fixed_sentence():
    assert format_recipes([]) == NO_REFERENCES_TEXT


def test_recipe_section_contents():
    text = format_recipes([_recipe()])

    assert "### 参考食谱 1: Tomato Egg Stir Fry" in text
    assert "15分钟" in text
    assert "2人份" in text
    assert "  - eggs: 3.0 large" in text
    assert "  - tomato: 2.5\n" in text
    assert "<制作步骤参考>" in text
    assert "Beat the eggs" not in text


def test_optional_fields_are_omitted():
    text = format_recipes([_recipe(servings=0, readyInMinutes=0, instructions="", extendedIngredients=[])])

    assert "分钟" not in text
    assert "人份" not in text
    assert "<制作步骤参考>" not in text


def test_null_counts_are_omitted():
    text = format_recipes([_recipe(servings=None, readyInMinutes=None)])

    assert "### 参考食谱 1: Tomato Egg Stir Fry" in text
    assert "分钟" not in text
    assert "人份" not in text


def test_recipes_are_numbered():
    text = format_recipes([_recipe(), _recipe(id=2, title="Shakshuka")])
    assert "### 参考食谱 2: Shakshuka" in text


def test_ingredient_fallback_answer():
    text = fallback_answer(QueryType.INGREDIENTS, "鸡蛋、西红柿", [_recipe()])

    assert text.startswith(INGREDIENT_OVERVIEW_HEADING)
    assert "鸡蛋、西红柿" in text
    assert "Tomato Egg Stir Fry" in text


def test_dish_fallback_answer_without_references():
    text = fallback_answer(QueryType.DISH, "红烧肉", [])

    assert text.startswith("# 红烧肉 制作指南")
    assert NO_REFERENCES_TEXT in text


def test_merged_answer_labels():
    ingredients = merged_answer(QueryType.INGREDIENTS, "AI TEXT", [_recipe()])
    dish = merged_answer(QueryType.DISH, "AI TEXT", [_recipe()])

    assert ingredients.startswith("AI TEXT\n\n" + INGREDIENT_REFERENCES_HEADING)
    assert dish.startswith("AI TEXT\n\n" + DISH_REFERENCES_HEADING)
