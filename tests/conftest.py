import json
from typing import Dict, List, Optional
from uuid import UUID, uuid4

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine

from models import Ingredient, Recipe
from services.catalog.stores import UserProfile


class FakeCatalogStore:
    def __init__(self, recipes: Optional[List[Recipe]] = None, ingredients: Optional[List[Ingredient]] = None):
        self.recipes = list(recipes or [])
        self.ingredients = {i.id: i for i in ingredients or []}
        for recipe in self.recipes:
            for ingredient in recipe.ingredients:
                self.ingredients.setdefault(ingredient.id, ingredient)
        self.list_calls = []

    def list_recipes(self, offset, batch_size):
        self.list_calls.append((offset, batch_size))
        return self.recipes[offset:offset + batch_size]

    def find_ingredients_by_ids(self, ids):
        return [self.ingredients[i] for i in ids if i in self.ingredients]

    def find_recipes_excluding(self, excluded_ids, limit):
        remaining = [r for r in self.recipes if r.id not in excluded_ids]
        remaining.sort(key=lambda r: (-r.average_rating, -r.review_count, str(r.id)))
        return remaining[:limit]

    def find_recipes_by_ids(self, ids):
        wanted = set(ids)
        return [r for r in self.recipes if r.id in wanted]


class FakeUserStore:
    def __init__(self, profiles: Optional[Dict[UUID, UserProfile]] = None):
        self.profiles = dict(profiles or {})

    def add(self, profile: UserProfile) -> UserProfile:
        self.profiles[profile.user_id] = profile
        return profile

    def find_user_profile(self, user_id):
        return self.profiles.get(user_id)


def make_recipe(title: str, ingredient_names: List[str], **fields) -> Recipe:
    recipe = Recipe(title=title, **fields)
    recipe.ingredients = [Ingredient(name=name) for name in ingredient_names]
    return recipe


@pytest.fixture
def recipe_factory():
    return make_recipe


@pytest.fixture
def fake_catalog_cls():
    return FakeCatalogStore


@pytest.fixture
def fake_users():
    return FakeUserStore()


@pytest.fixture
def db_engine():
    import models  # noqa: F401

    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture
def embeddings_path(tmp_path):
    path = tmp_path / "embeddings.json"
    path.write_text(json.dumps({
        "chicken_breast": [1.0, 0.0, 0.0, 0.0],
        "broccoli": [0.0, 1.0, 0.0, 0.0],
        "garlic": [0.5, 0.5, 0.0, 0.0],
        "olive oil": [0.0, 0.0, 1.0, 0.0],
        "Shrimp": [0.0, 0.0, 0.0, 1.0],
    }))
    return path
