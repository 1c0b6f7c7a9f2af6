from typing import List, Optional
from datetime import datetime, timezone
from uuid import uuid4, UUID
from enum import Enum
from sqlmodel import SQLModel, Field, Relationship
from sqlalchemy import Column, JSON

from .ingredient import Ingredient


class DifficultyLevel(str, Enum):
    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"


class CuisineType(str, Enum):
    ITALIAN = "Italian"
    MEXICAN = "Mexican"
    INDIAN = "Indian"
    CHINESE = "Chinese"
    JAPANESE = "Japanese"
    AMERICAN = "American"
    MEDITERRANEAN = "Mediterranean"
    THAI = "Thai"
    FRENCH = "French"
    OTHER = "Other"


class MealType(str, Enum):
    BREAKFAST = "Breakfast"
    LUNCH = "Lunch"
    DINNER = "Dinner"
    DESSERT = "Dessert"
    SNACK = "Snack"
    APPETIZER = "Appetizer"
    BEVERAGE = "Beverage"


class RecipeIngredientLink(SQLModel, table=True):
    recipe_id: UUID = Field(foreign_key="recipe.id", primary_key=True)
    ingredient_id: UUID = Field(foreign_key="ingredient.id", primary_key=True)


class Recipe(SQLModel, table=True):
    id: UUID = Field(default_factory=uuid4, primary_key=True)
    title: str = Field(index=True)
    description: str = ""
    instructions: List[str] = Field(default_factory=list, sa_column=Column(JSON))
    tags: List[str] = Field(default_factory=list, sa_column=Column(JSON))

    prep_time: int = 0  # minutes
    cook_time: int = 0
    servings: int = 1
    difficulty: DifficultyLevel = DifficultyLevel.MEDIUM
    cuisine: CuisineType = CuisineType.OTHER
    meal_type: MealType = MealType.DINNER

    # per serving
    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    fiber: float = 0.0
    sugar: float = 0.0
    sodium: float = 0.0

    average_rating: float = Field(default=0.0, ge=0)
    review_count: int = Field(default=0, ge=0)

    author_id: Optional[UUID] = Field(default=None, foreign_key="user.id", index=True)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    ingredients: List[Ingredient] = Relationship(link_model=RecipeIngredientLink)

    def ingredient_names(self) -> List[str]:
        return [ingredient.name for ingredient in self.ingredients]
