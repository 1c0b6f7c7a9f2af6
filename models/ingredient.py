from typing import Optional
from uuid import uuid4, UUID
from enum import Enum
from sqlmodel import SQLModel, Field


class IngredientCategory(str, Enum):
    VEGETABLE = "Vegetable"
    FRUIT = "Fruit"
    MEAT = "Meat"
    SEAFOOD = "Seafood"
    DAIRY = "Dairy"
    GRAIN = "Grain"
    LEGUME = "Legume"
    NUT = "Nut"
    SEED = "Seed"
    HERB = "Herb"
    SPICE = "Spice"
    CONDIMENT = "Condiment"
    OIL = "Oil"
    SWEETENER = "Sweetener"
    BAKING = "Baking"
    BEVERAGE = "Beverage"
    OTHER = "Other"


class Ingredient(SQLModel, table=True):
    id: UUID = Field(default_factory=uuid4, primary_key=True)
    # unique as stored; matching code lowercases both sides itself
    name: str = Field(unique=True, index=True)
    category: IngredientCategory = IngredientCategory.OTHER
    description: Optional[str] = None

    # per 100g
    calories_per_100g: Optional[float] = None
    protein_per_100g: Optional[float] = None
    carbs_per_100g: Optional[float] = None
    fat_per_100g: Optional[float] = None
    fiber_per_100g: Optional[float] = None
    sugar_per_100g: Optional[float] = None
    sodium_per_100g: Optional[float] = None
