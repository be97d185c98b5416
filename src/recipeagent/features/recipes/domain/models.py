from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class QueryType(str, Enum):
    INGREDIENTS = "ingredients"
    DISH = "dish"


class RecipeIngredient(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: Optional[int] = None
    name: str = ""
    amount: float = 0.0
    unit: str = ""


class Recipe(BaseModel):
    """
    A recipe record as returned by the search provider (camelCase on the wire).
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: int
    title: str = ""
    image: str = ""
    image_type: str = Field(default="", alias="imageType")
    instructions: Optional[str] = ""
    servings: Optional[int] = 0
    ready_in_minutes: Optional[int] = Field(default=0, alias="readyInMinutes")
    extended_ingredients: List[RecipeIngredient] = Field(default_factory=list, alias="extendedIngredients")


@dataclass(frozen=True)
class SourceResult(Generic[T]):
    """
    Outcome of one upstream call: either ``ok`` with a payload, or a failure
    with a human readable reason. Availability is read from ``ok`` only.
    """
    ok: bool
    payload: Optional[T] = None
    reason: str = ""

    @classmethod
    def success(cls, payload: T) -> "SourceResult[T]":
        return cls(ok=True, payload=payload)

    @classmethod
    def failure(cls, reason: str) -> "SourceResult[T]":
        return cls(ok=False, reason=reason)


@dataclass
class RecipeQuery:
    query_type: QueryType
    ingredients: List[str] = field(default_factory=list)
    dish_name: str = ""


@dataclass
class OrchestrationOutcome:
    query_type: QueryType
    result: str
    supplementary_data: Dict[str, Any]
    ai_available: bool
    api_available: bool
    timestamp: datetime = field(default_factory=datetime.now)
