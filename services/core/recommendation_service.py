from __future__ import annotations
from typing import Callable, Dict, List, Set
from uuid import UUID
import time

from config.config_loader import RecommendationTuning
from models.recommendation import (
    RecommendationItem,
    RecommendationRequest,
    RecommendationResponse,
    RecommendationType,
)
from services.catalog.stores import CatalogStore, UserStore
from services.core.collaborative_scorer import CollaborativeScorer
from services.core.content_scorer import ContentScorer
from services.core.errors import ValidationError
from services.core.nutrition import apply_nutrition_filters
from services.features.recipe_corpus import RecipeCorpus
from services.features.safety import is_safe, normalize_allergens
from utils.fallback import with_fallback
from utils.logger import setup_logger

logger = setup_logger(__name__)


def merge_hybrid(
    content: List[RecommendationItem],
    collaborative: List[RecommendationItem],
    limit: int
) -> List[RecommendationItem]:
    """Union of both lists keyed by recipe id.

    A recipe present in both lists gets the mean of its two scores and is
    tagged hybrid. Items from one list only keep their own tag.
    """
    merged: Dict[UUID, RecommendationItem] = {}
    for item in content + collaborative:
        existing = merged.get(item.recipe_id)
        if existing is None:
            merged[item.recipe_id] = RecommendationItem(item.recipe, item.score, item.type, item.reason)
            continue
        existing.score = (existing.score + item.score) / 2
        existing.type = RecommendationType.HYBRID
        existing.reason = f"{existing.reason}; {item.reason}"

    ranked = sorted(merged.values(), key=lambda item: item.ranking_key())
    return ranked[:limit]


def dedupe_and_rank(items: List[RecommendationItem], limit: int) -> List[RecommendationItem]:
    seen: Set[UUID] = set()
    unique = []
    for item in items:
        if item.recipe_id in seen:
            continue
        seen.add(item.recipe_id)
        unique.append(item)
    unique.sort(key=lambda item: item.ranking_key())
    return unique[:limit]


def _empty_response(*args, **kwargs) -> RecommendationResponse:
    return RecommendationResponse.empty()


class RecommendationService:
    def __init__(
        self,
        catalog: CatalogStore,
        users: UserStore,
        corpus_provider: Callable[[], RecipeCorpus],
        tuning: RecommendationTuning
    ):
        self.users = users
        self.corpus_provider = corpus_provider
        self.tuning = tuning
        self.content_scorer = ContentScorer(catalog)
        self.collaborative_scorer = CollaborativeScorer(
            catalog,
            base_score=tuning.collaborative.base_score,
            step=tuning.collaborative.step,
            min_score=tuning.collaborative.min_score,
        )

    @staticmethod
    def validate(request: RecommendationRequest) -> None:
        if not request.ingredient_ids and not request.include_collaborative:
            raise ValidationError("Either ingredient_ids or include_collaborative must be provided")

    def get_recommendations(self, user_id: UUID, request: RecommendationRequest) -> RecommendationResponse:
        self.validate(request)
        return self._run_pipeline(user_id, request)

    @with_fallback(_empty_response, passthrough=(ValidationError,))
    def _run_pipeline(self, user_id: UUID, request: RecommendationRequest) -> RecommendationResponse:
        start = time.time()
        limit = request.limit
        candidate_limit = limit * self.tuning.overfetch_factor

        profile = self.users.find_user_profile(user_id)
        if profile is None:
            logger.info("Unknown user, recommending without profile", extra={"user_id": str(user_id)})
            excluded: Set[UUID] = set()
            allergens: List[str] = []
        else:
            excluded = set(profile.liked_recipe_ids)
            allergens = normalize_allergens(profile.allergens)

        content: List[RecommendationItem] = []
        if request.include_content_based and request.ingredient_ids:
            content = self.content_scorer.score(
                self.corpus_provider(), request.ingredient_ids, excluded, candidate_limit
            )

        collaborative: List[RecommendationItem] = []
        if request.include_collaborative:
            collaborative = self.collaborative_scorer.score(excluded, candidate_limit)

        hybrid: List[RecommendationItem] = []
        if request.include_hybrid and (content or collaborative):
            hybrid = merge_hybrid(content, collaborative, candidate_limit)

        if request.include_hybrid and hybrid:
            working = hybrid
        else:
            working = content + collaborative

        working = [item for item in working if is_safe(item.recipe.ingredient_names(), allergens)]
        working = apply_nutrition_filters(working, request)
        final = dedupe_and_rank(working, limit)

        response = RecommendationResponse.build(
            final,
            content_based_count=sum(1 for i in final if i.type == RecommendationType.CONTENT),
            collaborative_count=sum(1 for i in final if i.type == RecommendationType.COLLABORATIVE),
            hybrid_count=sum(1 for i in final if i.type == RecommendationType.HYBRID),
        )

        logger.info(
            "Recommendations generated",
            extra={
                "user_id": str(user_id),
                "content_candidates": len(content),
                "collaborative_candidates": len(collaborative),
                "hybrid_candidates": len(hybrid),
                "returned": len(final),
                "duration_ms": round((time.time() - start) * 1000, 1),
            }
        )
        return response
