from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from recipeagent.features.recipes.domain.models import QueryType, RecipeQuery


class RecipePayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    query_type: QueryType = Field(alias="queryType")
    ingredients: List[str] = Field(default_factory=list)
    dish_name: str = Field(default="", alias="dishName")

    @field_validator("ingredients")
    @classmethod
    def _clean_ingredients(cls, v: List[str]) -> List[str]:
        return [i.strip() for i in v if i and i.strip()]

    @field_validator("dish_name")
    @classmethod
    def _clean_dish_name(cls, v: str) -> str:
        return (v or "").strip()

    @model_validator(mode="after")
    def _check_required(self) -> "RecipePayload":
        if self.query_type is QueryType.INGREDIENTS and not self.ingredients:
            raise ValueError("按食材查询时必须提供食材列表")
        if self.query_type is QueryType.DISH and not self.dish_name:
            raise ValueError("按菜名查询时必须提供菜名")
        return self

    def to_query(self) -> RecipeQuery:
        return RecipeQuery(query_type=self.query_type, ingredients=list(self.ingredients), dish_name=self.dish_name)


class RecipeResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    result: str = ""
    type: str = ""
    timestamp: Optional[datetime] = None
    supplementary_data: Dict[str, Any] = Field(default_factory=dict, alias="supplementaryData")
    success: bool
    message: Optional[str] = None
