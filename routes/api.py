from fastapi import APIRouter, Depends, HTTPException, Query
from typing import List, Optional
from uuid import UUID

from models.recipe import CuisineType, DifficultyLevel, MealType
from models.nutrition import NutritionFilters
from models.recommendation import RecommendationRequest, RecipeFilters, RecommendationResponse
from routes.dependencies import get_engine
from services.core.engine import RecommendationEngine
from services.core.errors import NotFoundError, ValidationError
from utils.logger import setup_logger

logger = setup_logger(__name__)

router = APIRouter()


def _run(engine: RecommendationEngine, user_id: UUID, request: RecommendationRequest):
    try:
        response: RecommendationResponse = engine.recommendations.get_recommendations(user_id, request)
    except ValidationError as e:
        raise HTTPException(400, str(e))
    return response.to_dict()


def _limit(engine: RecommendationEngine, limit: Optional[int]) -> int:
    return limit if limit is not None else engine.tuning.default_limit


@router.post("/recommendations")
def get_recommendations(
    body: RecommendationRequest,
    user_id: UUID,
    engine: RecommendationEngine = Depends(get_engine)
):
    return _run(engine, user_id, body)


@router.get("/recommendations/content")
def content_recommendations(
    user_id: UUID,
    ingredient_ids: List[UUID] = Query(default=[]),
    limit: Optional[int] = Query(default=None, ge=1),
    engine: RecommendationEngine = Depends(get_engine)
):
    request = RecommendationRequest.content_only(ingredient_ids, limit=_limit(engine, limit))
    return _run(engine, user_id, request)


@router.get("/recommendations/collaborative")
def collaborative_recommendations(
    user_id: UUID,
    limit: Optional[int] = Query(default=None, ge=1),
    engine: RecommendationEngine = Depends(get_engine)
):
    request = RecommendationRequest.collaborative_only(limit=_limit(engine, limit))
    return _run(engine, user_id, request)


@router.get("/recommendations/hybrid")
def hybrid_recommendations(
    user_id: UUID,
    ingredient_ids: List[UUID] = Query(default=[]),
    limit: Optional[int] = Query(default=None, ge=1),
    engine: RecommendationEngine = Depends(get_engine)
):
    request = RecommendationRequest.hybrid(ingredient_ids or None, limit=_limit(engine, limit))
    return _run(engine, user_id, request)


@router.get("/recommendations/pantry")
def pantry_recommendations(
    user_id: UUID,
    difficulty: Optional[DifficultyLevel] = None,
    cuisine: Optional[CuisineType] = None,
    meal_type: Optional[MealType] = None,
    max_prep_time: Optional[int] = Query(default=None, ge=0),
    min_rating: Optional[float] = Query(default=None, ge=0),
    tags: List[str] = Query(default=[]),
    limit: Optional[int] = Query(default=None, ge=1),
    engine: RecommendationEngine = Depends(get_engine)
):
    filters = RecipeFilters(
        difficulty=difficulty,
        cuisine=cuisine,
        meal_type=meal_type,
        max_prep_time=max_prep_time,
        min_rating=min_rating,
        tags=tags or None,
    )
    try:
        response = engine.pantry.recommend(user_id, filters, _limit(engine, limit))
    except NotFoundError as e:
        raise HTTPException(404, str(e))
    return response.to_dict()


@router.get("/nutrition/recipes")
def recipes_by_nutrition(
    max_calories: Optional[float] = Query(default=None, ge=0),
    min_protein: Optional[float] = Query(default=None, ge=0),
    max_carbs: Optional[float] = Query(default=None, ge=0),
    max_fat: Optional[float] = Query(default=None, ge=0),
    min_fiber: Optional[float] = Query(default=None, ge=0),
    max_sugar: Optional[float] = Query(default=None, ge=0),
    max_sodium: Optional[float] = Query(default=None, ge=0),
    max_prep_time: Optional[int] = Query(default=None, ge=0),
    max_cook_time: Optional[int] = Query(default=None, ge=0),
    exclude_allergens: List[str] = Query(default=[]),
    page: int = Query(default=1, ge=1),
    limit: Optional[int] = Query(default=None, ge=1),
    engine: RecommendationEngine = Depends(get_engine)
):
    filters = NutritionFilters(
        max_calories=max_calories,
        min_protein=min_protein,
        max_carbs=max_carbs,
        max_fat=max_fat,
        min_fiber=min_fiber,
        max_sugar=max_sugar,
        max_sodium=max_sodium,
        max_prep_time=max_prep_time,
        max_cook_time=max_cook_time,
        exclude_allergens=exclude_allergens,
    )
    return engine.nutrition.recipes_by_nutrition(filters, page, _limit(engine, limit)).to_dict()


@router.get("/nutrition/insights")
def nutritional_insights(
    user_id: UUID,
    engine: RecommendationEngine = Depends(get_engine)
):
    try:
        return engine.nutrition.nutritional_insights(user_id)
    except NotFoundError as e:
        raise HTTPException(404, str(e))
