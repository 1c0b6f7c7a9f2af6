from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from models import Ingredient, PantryItem, Recipe, User, UserLikedRecipe
from services.catalog.sql_stores import SqlCatalogStore, SqlUserStore
from services.catalog.stores import iter_all_recipes


def create_recipe(session: Session, title: str, ingredients, rating: float = 0.0, reviews: int = 0) -> Recipe:
    recipe = Recipe(title=title, average_rating=rating, review_count=reviews)
    recipe.ingredients = ingredients
    session.add(recipe)
    return recipe


class TestSqlCatalogStore:
    def test_list_recipes_pages_in_stable_order(self, db_engine):
        with Session(db_engine) as s:
            salt = Ingredient(name="salt")
            for i in range(5):
                create_recipe(s, f"Recipe {i}", [salt])
            s.commit()

        store = SqlCatalogStore(db_engine)
        first = [r.id for r in store.list_recipes(0, 3)]
        second = [r.id for r in store.list_recipes(3, 3)]

        assert len(first) == 3
        assert len(second) == 2
        assert not set(first) & set(second)
        assert first == [r.id for r in store.list_recipes(0, 3)]
        assert store.list_recipes(5, 3) == []

    def test_ingredients_usable_after_session_closes(self, db_engine):
        with Session(db_engine) as s:
            create_recipe(s, "Salad", [Ingredient(name="lettuce"), Ingredient(name="tomato")])
            s.commit()

        recipe = SqlCatalogStore(db_engine).list_recipes(0, 10)[0]
        assert sorted(recipe.ingredient_names()) == ["lettuce", "tomato"]

    def test_ingredient_names_are_unique_as_stored(self, db_engine):
        with Session(db_engine) as s:
            s.add(Ingredient(name="garlic"))
            s.add(Ingredient(name="Garlic"))
            s.commit()

        with Session(db_engine) as s:
            s.add(Ingredient(name="garlic"))
            with pytest.raises(IntegrityError):
                s.commit()

    def test_find_ingredients_by_ids(self, db_engine):
        with Session(db_engine) as s:
            garlic = Ingredient(name="garlic")
            s.add(garlic)
            s.commit()
            garlic_id = garlic.id

        store = SqlCatalogStore(db_engine)
        found = store.find_ingredients_by_ids([garlic_id, uuid4()])
        assert [i.name for i in found] == ["garlic"]
        assert store.find_ingredients_by_ids([]) == []

    def test_find_recipes_excluding_orders_by_rating_then_reviews(self, db_engine):
        with Session(db_engine) as s:
            salt = Ingredient(name="salt")
            top = create_recipe(s, "Top", [salt], rating=4.9, reviews=10)
            busy = create_recipe(s, "Busy", [salt], rating=4.5, reviews=500)
            quiet = create_recipe(s, "Quiet", [salt], rating=4.5, reviews=5)
            hidden = create_recipe(s, "Hidden", [salt], rating=5.0, reviews=1000)
            s.commit()
            hidden_id = hidden.id

        recipes = SqlCatalogStore(db_engine).find_recipes_excluding({hidden_id}, limit=10)
        assert [r.title for r in recipes] == ["Top", "Busy", "Quiet"]
        assert recipes[0].ingredient_names() == ["salt"]

    def test_find_recipes_excluding_respects_limit(self, db_engine):
        with Session(db_engine) as s:
            for i in range(4):
                create_recipe(s, f"R{i}", [], rating=float(i))
            s.commit()

        recipes = SqlCatalogStore(db_engine).find_recipes_excluding(set(), limit=2)
        assert [r.title for r in recipes] == ["R3", "R2"]

    def test_iter_all_recipes_streams_everything(self, db_engine):
        with Session(db_engine) as s:
            for i in range(7):
                create_recipe(s, f"R{i}", [])
            s.commit()

        assert len(list(iter_all_recipes(SqlCatalogStore(db_engine), 3))) == 7


class TestSqlUserStore:
    def test_profile_collects_pantry_likes_and_allergies(self, db_engine):
        with Session(db_engine) as s:
            user = User(email="cook@example.com", allergies=["['peanut'"])
            chicken = Ingredient(name="chicken breast")
            broccoli = Ingredient(name="broccoli")
            s.add(user)
            s.add(chicken)
            s.add(broccoli)
            liked = create_recipe(s, "Liked", [chicken])
            s.commit()
            s.add(PantryItem(user_id=user.id, ingredient_id=chicken.id))
            s.add(PantryItem(user_id=user.id, ingredient_id=broccoli.id))
            s.add(UserLikedRecipe(user_id=user.id, recipe_id=liked.id))
            s.commit()
            user_id, liked_id = user.id, liked.id

        profile = SqlUserStore(db_engine).find_user_profile(user_id)

        assert profile.user_id == user_id
        assert profile.allergens == ["['peanut'"]
        assert sorted(profile.pantry_ingredient_names) == ["broccoli", "chicken breast"]
        assert profile.liked_recipe_ids == {liked_id}

    def test_unknown_user(self, db_engine):
        assert SqlUserStore(db_engine).find_user_profile(uuid4()) is None


def test_timestamp_defaults_are_timezone_aware(db_engine):
    user = User(email="tz@example.com")
    recipe = Recipe(title="Timed")
    assert user.created_at.tzinfo is not None
    assert recipe.created_at.tzinfo is not None
    assert UserLikedRecipe(user_id=user.id, recipe_id=recipe.id).liked_at.tzinfo is not None
    assert PantryItem(user_id=user.id, ingredient_id=uuid4()).added_at.tzinfo is not None

    with Session(db_engine) as s:
        s.add(user)
        s.add(recipe)
        s.commit()

    assert SqlCatalogStore(db_engine).list_recipes(0, 10)[0].title == "Timed"


def test_find_recipes_by_ids(db_engine):
    with Session(db_engine) as s:
        salt = Ingredient(name="salt")
        wanted = create_recipe(s, "Wanted", [salt])
        create_recipe(s, "Other", [salt])
        s.commit()
        wanted_id = wanted.id

    store = SqlCatalogStore(db_engine)
    found = store.find_recipes_by_ids([wanted_id, uuid4()])
    assert [r.title for r in found] == ["Wanted"]
    assert found[0].ingredient_names() == ["salt"]
    assert store.find_recipes_by_ids([]) == []
