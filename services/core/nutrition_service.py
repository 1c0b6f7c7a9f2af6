from __future__ import annotations
import math
from typing import Any, Dict, List
from uuid import UUID

from models.nutrition import NutritionFilters, NutritionInsight, NutritionSearchResult, NutritionSummary, PageMeta
from models.recipe import Recipe
from services.catalog.stores import CatalogStore, UserStore, iter_all_recipes
from services.core.errors import NotFoundError, ValidationError
from services.core.nutrition import nutritional_summary, within_nutrition_bounds, within_time_limits
from services.features.safety import filter_safe_recipes
from utils.logger import setup_logger

logger = setup_logger(__name__)

GENERAL_TIPS = [
    "Try to include a variety of colorful vegetables in your meals.",
    "Consider adding a source of healthy fats like nuts, seeds, or avocados.",
    "Stay hydrated by drinking plenty of water throughout the day.",
]


def _rating_order(recipe: Recipe):
    return (-recipe.average_rating, -recipe.review_count, str(recipe.id))


def _percent(part: float, calories: float) -> float:
    return round(part / (calories or 1) * 100, 1)


class NutritionRecommendationService:
    """Browse the catalog by nutritional bounds and summarize what a user likes."""

    def __init__(self, catalog: CatalogStore, users: UserStore, batch_size: int = 100):
        self.catalog = catalog
        self.users = users
        self.batch_size = batch_size

    def recipes_by_nutrition(
        self,
        filters: NutritionFilters,
        page: int = 1,
        limit: int = 10
    ) -> NutritionSearchResult:
        if page < 1 or limit < 1:
            raise ValidationError("page and limit must be >= 1")

        candidates = (
            r for r in iter_all_recipes(self.catalog, self.batch_size)
            if within_nutrition_bounds(r, filters) and within_time_limits(r, filters)
        )
        matching = filter_safe_recipes(candidates, filters.exclude_allergens)
        matching.sort(key=_rating_order)

        start = (page - 1) * limit
        meta = PageMeta(
            total=len(matching),
            page=page,
            limit=limit,
            total_pages=math.ceil(len(matching) / limit),
        )

        logger.info(
            "Nutrition search completed",
            extra={
                "matching": meta.total,
                "page": page,
                "excluded_allergens": len(filters.exclude_allergens),
            }
        )
        return NutritionSearchResult(matching[start:start + limit], meta)

    def nutritional_insights(self, user_id: UUID) -> Dict[str, Any]:
        profile = self.users.find_user_profile(user_id)
        if profile is None:
            raise NotFoundError("user", user_id)

        recipes = self.catalog.find_recipes_by_ids(sorted(profile.liked_recipe_ids, key=str))
        if not recipes:
            return {"message": "Not enough data to generate insights. Like some recipes first."}

        summary = nutritional_summary(recipes)
        average = summary.averaged(len(recipes))
        distribution = {
            "carbs": _percent(average.carbs * 4, average.calories),
            "protein": _percent(average.protein * 4, average.calories),
            "fat": _percent(average.fat * 9, average.calories),
        }

        return {
            "summary": {
                "total_recipes": len(recipes),
                "total_calories": summary.calories,
                "average_per_recipe": average.model_dump(),
                "macronutrient_distribution": distribution,
            },
            "insights": [i.model_dump() for i in self._insights(average, distribution)],
            "recommendations": list(GENERAL_TIPS),
        }

    @staticmethod
    def _insights(average: NutritionSummary, distribution: Dict[str, float]) -> List[NutritionInsight]:
        insights = []

        if average.protein < 15:
            insights.append(NutritionInsight(
                type="protein", level="low",
                message="Your recipes are relatively low in protein. Consider chicken, fish, beans, or tofu.",
            ))
        elif average.protein > 40:
            insights.append(NutritionInsight(
                type="protein", level="high",
                message="Your recipes are high in protein, which helps with satiety.",
            ))

        if average.fiber < 5:
            insights.append(NutritionInsight(
                type="fiber", level="low",
                message="Your recipes could use more fiber. Try vegetables, whole grains, and legumes.",
            ))
        elif average.fiber > 15:
            insights.append(NutritionInsight(
                type="fiber", level="high",
                message="Your recipes are high in fiber.",
            ))

        if average.sugar > 25:
            insights.append(NutritionInsight(
                type="sugar", level="high",
                message="Your recipes are relatively high in sugar. Consider reducing added sugars.",
            ))

        if average.sodium > 800:
            insights.append(NutritionInsight(
                type="sodium", level="high",
                message="Your recipes are relatively high in sodium. Herbs and spices can replace some salt.",
            ))

        if distribution["carbs"] > 60 and distribution["fat"] < 20:
            insights.append(NutritionInsight(
                type="macronutrient_balance", level="info",
                message="Your recipes are high in carbohydrates and low in fat.",
            ))
        elif distribution["fat"] > 40 and distribution["carbs"] < 30:
            insights.append(NutritionInsight(
                type="macronutrient_balance", level="info",
                message="Your recipes are high in fat and low in carbohydrates.",
            ))

        return insights
