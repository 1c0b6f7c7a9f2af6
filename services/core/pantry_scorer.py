from __future__ import annotations
from typing import Iterable, List, Optional, Sequence

import numpy as np

from models.recipe import Recipe
from models.recommendation import RecipeFilters, RecommendationItem, RecommendationType
from services.features.embedding_store import IngredientEmbeddingStore
from services.features.similarity import cosine_similarity


class PantryScorer:
    def __init__(self, embeddings: IngredientEmbeddingStore):
        self.embeddings = embeddings

    def pantry_match_score(
        self,
        recipe_vectors: Sequence[np.ndarray],
        pantry_vectors: Sequence[np.ndarray]
    ) -> float:
        """Mean over recipe ingredients of the best cosine against any pantry item."""
        if not recipe_vectors or not pantry_vectors:
            return 0.0
        total = 0.0
        for rv in recipe_vectors:
            best = 0.0
            for pv in pantry_vectors:
                best = max(best, cosine_similarity(rv, pv))
            total += best
        return total / len(recipe_vectors)

    def score(
        self,
        recipes: Iterable[Recipe],
        pantry_names: Sequence[str],
        filters: Optional[RecipeFilters] = None,
        limit: int = 10
    ) -> List[RecommendationItem]:
        pantry_vectors = []
        matched_pantry = []
        for name in pantry_names:
            vector = self.embeddings.lookup(name)
            if vector is not None:
                pantry_vectors.append(vector)
                matched_pantry.append(name)

        items = []
        for recipe in recipes:
            if filters is not None and not filters.matches(recipe):
                continue
            recipe_vectors = self.embeddings.lookup_many(recipe.ingredient_names())
            score = self.pantry_match_score(recipe_vectors, pantry_vectors)
            items.append(RecommendationItem(
                recipe,
                score,
                RecommendationType.CONTENT,
                self._reason(recipe, matched_pantry),
            ))

        items.sort(key=lambda item: item.ranking_key())
        return items[:limit]

    @staticmethod
    def _reason(recipe: Recipe, pantry_names: Sequence[str]) -> str:
        if not pantry_names:
            return "No pantry ingredients with known flavor profiles"
        return f"Matches your pantry: {', '.join(pantry_names)}"
