from __future__ import annotations
from typing import Optional
from uuid import UUID

from models.recommendation import RecipeFilters, RecommendationResponse
from services.catalog.stores import CatalogStore, UserStore, iter_all_recipes
from services.core.errors import NotFoundError
from services.core.pantry_scorer import PantryScorer
from services.features.embedding_store import IngredientEmbeddingStore
from services.features.safety import filter_safe_recipes, normalize_allergens
from utils.logger import setup_logger

logger = setup_logger(__name__)


class PantryRecommendationService:
    def __init__(
        self,
        catalog: CatalogStore,
        users: UserStore,
        embeddings: IngredientEmbeddingStore,
        batch_size: int = 100
    ):
        self.catalog = catalog
        self.users = users
        self.scorer = PantryScorer(embeddings)
        self.batch_size = batch_size

    def recommend(
        self,
        user_id: UUID,
        filters: Optional[RecipeFilters] = None,
        limit: int = 10
    ) -> RecommendationResponse:
        profile = self.users.find_user_profile(user_id)
        if profile is None:
            raise NotFoundError("user", user_id)

        allergens = normalize_allergens(profile.allergens)
        candidates = filter_safe_recipes(
            (r for r in iter_all_recipes(self.catalog, self.batch_size) if r.id not in profile.liked_recipe_ids),
            allergens,
        )

        items = self.scorer.score(candidates, profile.pantry_ingredient_names, filters, limit)

        logger.info(
            "Pantry recommendations generated",
            extra={
                "user_id": str(user_id),
                "pantry_items": len(profile.pantry_ingredient_names),
                "candidates": len(candidates),
                "returned": len(items),
            }
        )
        return RecommendationResponse.build(items, content_based_count=len(items))
