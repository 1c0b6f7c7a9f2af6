from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field

from .recipe import Recipe
from .recommendation import recipe_to_dict


class NutritionFilters(BaseModel):
    max_calories: Optional[float] = Field(None, ge=0)
    min_protein: Optional[float] = Field(None, ge=0)
    max_carbs: Optional[float] = Field(None, ge=0)
    max_fat: Optional[float] = Field(None, ge=0)
    min_fiber: Optional[float] = Field(None, ge=0)
    max_sugar: Optional[float] = Field(None, ge=0)
    max_sodium: Optional[float] = Field(None, ge=0)

    max_prep_time: Optional[int] = Field(None, ge=0, description="Minutes")
    max_cook_time: Optional[int] = Field(None, ge=0, description="Minutes")

    exclude_allergens: List[str] = Field(default_factory=list)


class NutritionSummary(BaseModel):
    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    fiber: float = 0.0
    sugar: float = 0.0
    sodium: float = 0.0

    def averaged(self, count: int) -> "NutritionSummary":
        if count <= 0:
            return NutritionSummary()
        return NutritionSummary(**{k: v / count for k, v in self.model_dump().items()})


class NutritionInsight(BaseModel):
    type: str
    level: str
    message: str


class PageMeta(BaseModel):
    total: int
    page: int
    limit: int
    total_pages: int


class NutritionSearchResult:
    def __init__(self, recipes: List[Recipe], meta: PageMeta):
        self.recipes = recipes
        self.meta = meta

    def to_dict(self) -> Dict[str, Any]:
        return {
            "data": [recipe_to_dict(recipe) for recipe in self.recipes],
            "meta": self.meta.model_dump(),
        }
