from typing import Iterable, List, Union

from models.nutrition import NutritionFilters, NutritionSummary
from models.recipe import Recipe
from models.recommendation import RecommendationItem, RecommendationRequest

# (request field, recipe attribute, is ceiling)
NUTRITION_BOUNDS = [
    ("max_calories", "calories", True),
    ("min_protein", "protein", False),
    ("max_carbs", "carbs", True),
    ("max_fat", "fat", True),
    ("min_fiber", "fiber", False),
    ("max_sugar", "sugar", True),
    ("max_sodium", "sodium", True),
]

TIME_CEILINGS = [
    ("max_prep_time", "prep_time"),
    ("max_cook_time", "cook_time"),
]

NutritionBounds = Union[RecommendationRequest, NutritionFilters]


def within_nutrition_bounds(recipe: Recipe, bounds: NutritionBounds) -> bool:
    for field_name, attribute, is_ceiling in NUTRITION_BOUNDS:
        bound = getattr(bounds, field_name)
        if bound is None:
            continue
        value = getattr(recipe, attribute) or 0.0
        if is_ceiling and value > bound:
            return False
        if not is_ceiling and value < bound:
            return False
    return True


def within_time_limits(recipe: Recipe, filters: NutritionFilters) -> bool:
    for field_name, attribute in TIME_CEILINGS:
        ceiling = getattr(filters, field_name)
        if ceiling is not None and (getattr(recipe, attribute) or 0) > ceiling:
            return False
    return True


def apply_nutrition_filters(
    items: Iterable[RecommendationItem],
    request: RecommendationRequest
) -> List[RecommendationItem]:
    return [item for item in items if within_nutrition_bounds(item.recipe, request)]


def nutritional_summary(recipes: Iterable[Recipe]) -> NutritionSummary:
    """Totals across recipes, each recipe's per-serving values times its servings."""
    totals = NutritionSummary()
    for recipe in recipes:
        servings = recipe.servings or 1
        for field_name in NutritionSummary.model_fields:
            value = getattr(recipe, field_name) or 0.0
            setattr(totals, field_name, getattr(totals, field_name) + value * servings)
    return totals
