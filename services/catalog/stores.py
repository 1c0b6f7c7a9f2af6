from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Protocol, Sequence, Set
from uuid import UUID

from models.ingredient import Ingredient
from models.recipe import Recipe


@dataclass
class UserProfile:
    user_id: UUID
    allergens: List[str] = field(default_factory=list)
    pantry_ingredient_names: List[str] = field(default_factory=list)
    liked_recipe_ids: Set[UUID] = field(default_factory=set)


class CatalogStore(Protocol):
    def list_recipes(self, offset: int, batch_size: int) -> List[Recipe]:
        """Recipes in a stable order, `batch_size` at a time."""
        ...

    def find_ingredients_by_ids(self, ids: Sequence[UUID]) -> List[Ingredient]:
        ...

    def find_recipes_excluding(self, excluded_ids: Set[UUID], limit: int) -> List[Recipe]:
        """Best rated recipes not in `excluded_ids`, rating desc then review count desc."""
        ...

    def find_recipes_by_ids(self, ids: Sequence[UUID]) -> List[Recipe]:
        ...


class UserStore(Protocol):
    def find_user_profile(self, user_id: UUID) -> Optional[UserProfile]:
        ...


def iter_recipe_batches(catalog: CatalogStore, batch_size: int) -> Iterator[List[Recipe]]:
    if batch_size < 1:
        raise ValueError("batch_size must be >= 1")
    offset = 0
    while True:
        batch = catalog.list_recipes(offset, batch_size)
        if not batch:
            return
        yield batch
        offset += len(batch)


def iter_all_recipes(catalog: CatalogStore, batch_size: int) -> Iterator[Recipe]:
    for batch in iter_recipe_batches(catalog, batch_size):
        yield from batch
