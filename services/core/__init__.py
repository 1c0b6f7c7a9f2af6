from services.core.errors import ValidationError, NotFoundError
from services.core.content_scorer import ContentScorer
from services.core.collaborative_scorer import CollaborativeScorer
from services.core.pantry_scorer import PantryScorer
from services.core.nutrition import (
    apply_nutrition_filters,
    within_nutrition_bounds,
    within_time_limits,
    nutritional_summary,
)
from services.core.recommendation_service import RecommendationService, merge_hybrid, dedupe_and_rank
from services.core.pantry_service import PantryRecommendationService
from services.core.nutrition_service import NutritionRecommendationService
from services.core.engine import RecommendationEngine

__all__ = [
    "ValidationError",
    "NotFoundError",
    "ContentScorer",
    "CollaborativeScorer",
    "PantryScorer",
    "apply_nutrition_filters",
    "within_nutrition_bounds",
    "within_time_limits",
    "nutritional_summary",
    "RecommendationService",
    "merge_hybrid",
    "dedupe_and_rank",
    "PantryRecommendationService",
    "NutritionRecommendationService",
    "RecommendationEngine",
]
