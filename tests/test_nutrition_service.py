from uuid import uuid4

import pytest

from models import NutritionFilters
from services.catalog.stores import UserProfile
from services.core.errors import NotFoundError, ValidationError
from services.core.nutrition import nutritional_summary, within_time_limits
from services.core.nutrition_service import NutritionRecommendationService


@pytest.fixture
def catalog(recipe_factory, fake_catalog_cls):
    recipes = [
        recipe_factory("Grilled Salmon", ["salmon", "lemon"], calories=450, protein=40, fiber=2,
                       prep_time=10, cook_time=15, average_rating=4.8, review_count=30),
        recipe_factory("Peanut Noodles", ["pasta", "peanut butter"], calories=650, protein=20, fiber=6,
                       prep_time=10, cook_time=10, average_rating=4.4, review_count=40),
        recipe_factory("Lentil Stew", ["lentils", "carrot"], calories=380, protein=22, fiber=16,
                       prep_time=15, cook_time=60, average_rating=4.4, review_count=90),
        recipe_factory("Sugar Cookies", ["flour", "sugar"], calories=300, protein=3, sugar=30,
                       prep_time=20, cook_time=12, average_rating=3.9, review_count=12),
    ]
    return fake_catalog_cls(recipes)


@pytest.fixture
def service(catalog, fake_users):
    return NutritionRecommendationService(catalog, fake_users, batch_size=2)


def titles(result):
    return [r.title for r in result.recipes]


class TestRecipesByNutrition:
    def test_no_filters_orders_by_rating_then_reviews(self, service):
        result = service.recipes_by_nutrition(NutritionFilters())
        assert titles(result) == ["Grilled Salmon", "Lentil Stew", "Peanut Noodles", "Sugar Cookies"]
        assert result.meta.total == 4

    def test_bounds_are_inclusive(self, service):
        result = service.recipes_by_nutrition(NutritionFilters(max_calories=450, min_protein=22))
        assert titles(result) == ["Grilled Salmon", "Lentil Stew"]

    def test_fiber_and_sugar_bounds(self, service):
        assert titles(service.recipes_by_nutrition(NutritionFilters(min_fiber=5))) == ["Lentil Stew", "Peanut Noodles"]
        assert "Sugar Cookies" not in titles(service.recipes_by_nutrition(NutritionFilters(max_sugar=25)))

    def test_time_ceilings(self, service):
        result = service.recipes_by_nutrition(NutritionFilters(max_prep_time=10, max_cook_time=12))
        assert titles(result) == ["Peanut Noodles"]

    def test_excludes_raw_allergens(self, service):
        result = service.recipes_by_nutrition(NutritionFilters(exclude_allergens=["['Peanut'"]))
        assert "Peanut Noodles" not in titles(result)
        assert result.meta.total == 3

    def test_paging(self, service):
        first = service.recipes_by_nutrition(NutritionFilters(), page=1, limit=3)
        second = service.recipes_by_nutrition(NutritionFilters(), page=2, limit=3)

        assert len(first.recipes) == 3
        assert titles(second) == ["Sugar Cookies"]
        assert second.meta.total_pages == 2
        assert service.recipes_by_nutrition(NutritionFilters(), page=3, limit=3).recipes == []

    def test_rejects_bad_paging(self, service):
        with pytest.raises(ValidationError):
            service.recipes_by_nutrition(NutritionFilters(), page=0)

    def test_to_dict_shape(self, service):
        body = service.recipes_by_nutrition(NutritionFilters(), limit=1).to_dict()
        assert body["meta"] == {"total": 4, "page": 1, "limit": 1, "total_pages": 4}
        assert body["data"][0]["title"] == "Grilled Salmon"
        assert body["data"][0]["ingredients"] == ["salmon", "lemon"]


def test_nutritional_summary_is_serving_weighted(recipe_factory):
    summary = nutritional_summary([
        recipe_factory("Soup", [], calories=200, protein=10, servings=4),
        recipe_factory("Toast", [], calories=150, sodium=300),
    ])
    assert summary.calories == pytest.approx(950)
    assert summary.protein == pytest.approx(40)
    assert summary.sodium == pytest.approx(300)
    assert nutritional_summary([]).calories == 0


def test_time_limits_ignore_absent_ceilings(recipe_factory):
    recipe = recipe_factory("Roast", [], prep_time=30, cook_time=120)
    assert within_time_limits(recipe, NutritionFilters())
    assert not within_time_limits(recipe, NutritionFilters(max_cook_time=90))


class TestNutritionalInsights:
    def test_unknown_user(self, service):
        with pytest.raises(NotFoundError):
            service.nutritional_insights(uuid4())

    def test_no_liked_recipes(self, service, fake_users):
        user = fake_users.add(UserProfile(user_id=uuid4()))
        assert "message" in service.nutritional_insights(user.user_id)

    def test_insights_for_liked_recipes(self, service, catalog, fake_users):
        cookies = next(r for r in catalog.recipes if r.title == "Sugar Cookies")
        user = fake_users.add(UserProfile(user_id=uuid4(), liked_recipe_ids={cookies.id}))

        report = service.nutritional_insights(user.user_id)

        assert report["summary"]["total_recipes"] == 1
        assert report["summary"]["total_calories"] == pytest.approx(300)
        kinds = {(i["type"], i["level"]) for i in report["insights"]}
        assert ("protein", "low") in kinds
        assert ("sugar", "high") in kinds
        assert report["recommendations"]
