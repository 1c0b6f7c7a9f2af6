from .ingredient import Ingredient, IngredientCategory
from .recipe import Recipe, RecipeIngredientLink, DifficultyLevel, CuisineType, MealType
from .user import User, UserLikedRecipe
from .pantry import PantryItem, QuantityUnit
from .recommendation import (
    RecommendationType,
    RecommendationRequest,
    RecipeFilters,
    RecommendationItem,
    RecommendationMetadata,
    RecommendationResponse,
    recipe_to_dict,
)
from .nutrition import (
    NutritionFilters,
    NutritionSummary,
    NutritionInsight,
    NutritionSearchResult,
    PageMeta,
)
