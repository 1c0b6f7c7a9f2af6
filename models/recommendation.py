from typing import Optional, Dict, List, Any
from datetime import datetime, timezone
from enum import Enum
from uuid import UUID
from pydantic import BaseModel, Field

from .recipe import Recipe, DifficultyLevel, CuisineType, MealType


class RecommendationType(str, Enum):
    CONTENT = "content"
    COLLABORATIVE = "collaborative"
    HYBRID = "hybrid"


class RecommendationRequest(BaseModel):
    ingredient_ids: Optional[List[UUID]] = Field(None, description="Ingredients to build the content query from")
    limit: int = Field(10, ge=1)
    include_content_based: bool = True
    include_collaborative: bool = True
    include_hybrid: bool = True

    max_calories: Optional[float] = Field(None, ge=0)
    min_protein: Optional[float] = Field(None, ge=0)
    max_carbs: Optional[float] = Field(None, ge=0)
    max_fat: Optional[float] = Field(None, ge=0)
    min_fiber: Optional[float] = Field(None, ge=0)
    max_sugar: Optional[float] = Field(None, ge=0)
    max_sodium: Optional[float] = Field(None, ge=0)

    @classmethod
    def content_only(cls, ingredient_ids: List[UUID], limit: int = 10) -> "RecommendationRequest":
        return cls(
            ingredient_ids=ingredient_ids,
            limit=limit,
            include_content_based=True,
            include_collaborative=False,
            include_hybrid=False,
        )

    @classmethod
    def collaborative_only(cls, limit: int = 10) -> "RecommendationRequest":
        return cls(
            limit=limit,
            include_content_based=False,
            include_collaborative=True,
            include_hybrid=False,
        )

    @classmethod
    def hybrid(cls, ingredient_ids: Optional[List[UUID]] = None, limit: int = 10) -> "RecommendationRequest":
        return cls(
            ingredient_ids=ingredient_ids,
            limit=limit,
            include_content_based=True,
            include_collaborative=True,
            include_hybrid=True,
        )


class RecipeFilters(BaseModel):
    difficulty: Optional[DifficultyLevel] = None
    cuisine: Optional[CuisineType] = None
    meal_type: Optional[MealType] = None
    max_prep_time: Optional[int] = Field(None, ge=0)
    min_rating: Optional[float] = Field(None, ge=0)
    tags: Optional[List[str]] = None

    def matches(self, recipe: Recipe) -> bool:
        """All present filters must hold; an empty tag list is treated as absent."""
        if self.difficulty is not None and recipe.difficulty != self.difficulty:
            return False
        if self.cuisine is not None and recipe.cuisine != self.cuisine:
            return False
        if self.meal_type is not None and recipe.meal_type != self.meal_type:
            return False
        if self.max_prep_time is not None and recipe.prep_time > self.max_prep_time:
            return False
        if self.min_rating is not None and recipe.average_rating < self.min_rating:
            return False
        if self.tags and not set(self.tags) & set(recipe.tags or []):
            return False
        return True


def recipe_to_dict(recipe: Recipe) -> Dict[str, Any]:
    return {
        "id": str(recipe.id),
        "title": recipe.title,
        "description": recipe.description,
        "cuisine": recipe.cuisine,
        "difficulty": recipe.difficulty,
        "meal_type": recipe.meal_type,
        "prep_time": recipe.prep_time,
        "cook_time": recipe.cook_time,
        "servings": recipe.servings,
        "calories": recipe.calories,
        "protein": recipe.protein,
        "carbs": recipe.carbs,
        "fat": recipe.fat,
        "fiber": recipe.fiber,
        "sugar": recipe.sugar,
        "sodium": recipe.sodium,
        "average_rating": recipe.average_rating,
        "review_count": recipe.review_count,
        "tags": list(recipe.tags or []),
        "ingredients": recipe.ingredient_names(),
    }


class RecommendationItem:
    def __init__(
        self,
        recipe: Recipe,
        score: float,
        type: RecommendationType,
        reason: str
    ):
        self.recipe = recipe
        self.score = score
        self.type = type
        self.reason = reason

    @property
    def recipe_id(self) -> UUID:
        return self.recipe.id

    def ranking_key(self):
        recipe = self.recipe
        return (-self.score, -recipe.average_rating, -recipe.review_count, str(recipe.id))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "recipe": recipe_to_dict(self.recipe),
            "score": round(self.score, 6),
            "type": self.type.value,
            "reason": self.reason,
        }

    def __repr__(self) -> str:
        return f"RecommendationItem({self.recipe.title!r}, score={self.score:.3f}, type={self.type.value})"


class RecommendationMetadata(BaseModel):
    total_recommendations: int = 0
    content_based_count: int = 0
    collaborative_count: int = 0
    hybrid_count: int = 0
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class RecommendationResponse:
    def __init__(
        self,
        recommendations: List[RecommendationItem],
        metadata: RecommendationMetadata
    ):
        self.recommendations = recommendations
        self.metadata = metadata

    @classmethod
    def build(
        cls,
        recommendations: List[RecommendationItem],
        content_based_count: int = 0,
        collaborative_count: int = 0,
        hybrid_count: int = 0
    ) -> "RecommendationResponse":
        metadata = RecommendationMetadata(
            total_recommendations=len(recommendations),
            content_based_count=content_based_count,
            collaborative_count=collaborative_count,
            hybrid_count=hybrid_count,
        )
        return cls(recommendations, metadata)

    @classmethod
    def empty(cls) -> "RecommendationResponse":
        return cls([], RecommendationMetadata())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "recommendations": [item.to_dict() for item in self.recommendations],
            "metadata": self.metadata.model_dump(mode="json"),
        }
