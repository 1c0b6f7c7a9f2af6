from __future__ import annotations
from typing import List, Set
from uuid import UUID

from models.recommendation import RecommendationItem, RecommendationType
from services.catalog.stores import CatalogStore

POPULAR_REASON = "Popular among users with similar tastes"


class CollaborativeScorer:
    """Placeholder for collaborative filtering.

    There is no user-user or item-item model behind this yet. It returns the
    best rated recipes the user has not liked, scored by rank position with
    a linear decay floored at `min_score`.
    """

    def __init__(
        self,
        catalog: CatalogStore,
        base_score: float = 0.8,
        step: float = 0.1,
        min_score: float = 0.0
    ):
        self.catalog = catalog
        self.base_score = base_score
        self.step = step
        self.min_score = min_score

    def rank_score(self, rank: int) -> float:
        return max(self.min_score, self.base_score - self.step * rank)

    def score(self, excluded_ids: Set[UUID], limit: int) -> List[RecommendationItem]:
        recipes = self.catalog.find_recipes_excluding(set(excluded_ids), limit)
        recipes = [r for r in recipes if r.id not in excluded_ids][:limit]
        return [
            RecommendationItem(recipe, self.rank_score(rank), RecommendationType.COLLABORATIVE, POPULAR_REASON)
            for rank, recipe in enumerate(recipes)
        ]
