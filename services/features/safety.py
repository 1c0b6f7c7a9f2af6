from __future__ import annotations
from typing import Iterable, List
import re

from models.recipe import Recipe


_ALLERGEN_NOISE = re.compile(r"[\[\]'\"]+")


def normalize_allergen(raw: str) -> str:
    # allergy lists are often stored as stringified arrays: "['peanut'", "'milk']"
    return _ALLERGEN_NOISE.sub("", raw or "").strip().lower()


def normalize_allergens(raw_allergens: Iterable[str]) -> List[str]:
    normalized = (normalize_allergen(a) for a in raw_allergens or [])
    return [a for a in normalized if a]


def is_safe(ingredient_names: Iterable[str], allergens: Iterable[str]) -> bool:
    """False when any ingredient name contains any allergen, case-insensitively.

    Allergens are normalized here as well, so raw profile values are accepted.
    """
    allergens = normalize_allergens(allergens)
    if not allergens:
        return True
    for name in ingredient_names:
        lowered = (name or "").lower()
        if any(allergen in lowered for allergen in allergens):
            return False
    return True


def filter_safe_recipes(recipes: Iterable[Recipe], allergens: Iterable[str]) -> List[Recipe]:
    allergens = normalize_allergens(allergens)
    return [r for r in recipes if is_safe(r.ingredient_names(), allergens)]
