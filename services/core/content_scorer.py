from __future__ import annotations
from typing import List, Sequence, Set
from uuid import UUID

from models.recommendation import RecommendationItem, RecommendationType
from services.catalog.stores import CatalogStore
from services.features.recipe_corpus import RecipeCorpus
from utils.logger import setup_logger

logger = setup_logger(__name__)


class ContentScorer:
    """Ranks recipes by lexical similarity to a set of ingredient names."""

    def __init__(self, catalog: CatalogStore):
        self.catalog = catalog

    def score(
        self,
        corpus: RecipeCorpus,
        ingredient_ids: Sequence[UUID],
        excluded_ids: Set[UUID],
        limit: int
    ) -> List[RecommendationItem]:
        ingredients = self.catalog.find_ingredients_by_ids(list(ingredient_ids))
        names = [i.name for i in ingredients]
        if not names:
            logger.info(
                "No known ingredients in content query",
                extra={"requested_ids": len(ingredient_ids)}
            )
            return []

        query_vector = corpus.query_vector(" ".join(names))
        reason = f"Similar to ingredients: {', '.join(names)}"

        items = []
        for recipe, similarity in corpus.score(query_vector):
            if similarity <= 0 or recipe.id in excluded_ids:
                continue
            items.append(RecommendationItem(recipe, similarity, RecommendationType.CONTENT, reason))

        items.sort(key=lambda item: item.ranking_key())
        return items[:limit]
