from services.features.safety import (
    normalize_allergen,
    normalize_allergens,
    is_safe,
    filter_safe_recipes,
)


class TestNormalizeAllergen:
    def test_bracket_and_quote_pollution(self):
        assert normalize_allergen("['peanuts']") == "peanuts"
        assert normalize_allergen("['peanuts']") == normalize_allergen("peanuts")

    def test_partial_pollution(self):
        assert normalize_allergen("['shellfish'") == "shellfish"
        assert normalize_allergen(" 'Milk']") == "milk"
        assert normalize_allergen('"Soy"') == "soy"

    def test_normalize_list_drops_empty(self):
        assert normalize_allergens(["['Peanut'", "", "[]", " Dairy "]) == ["peanut", "dairy"]

    def test_normalize_none(self):
        assert normalize_allergens(None) == []


class TestIsSafe:
    def test_literal_substring_only(self):
        assert is_safe(["Cheddar Cheese"], ["dairy"])
        assert not is_safe(["Dairy Milk"], ["dairy"])

    def test_ingredient_contains_allergen_direction(self):
        assert not is_safe(["Shellfish Stock"], ["shellfish"])
        assert is_safe(["Shrimp"], ["shellfish"])
        # an ingredient that is a substring of the allergen does not match
        assert is_safe(["nut"], ["peanut"])

    def test_case_insensitive(self):
        assert not is_safe(["PEANUT Butter"], ["peanut"])

    def test_no_allergens(self):
        assert is_safe(["anything"], [])

    def test_no_ingredients(self):
        assert is_safe([], ["peanut"])

    def test_raw_allergens_are_normalized(self):
        assert not is_safe(["Peanut Butter"], ["['Peanut']"])
        assert not is_safe(["Peanut Butter"], [" Peanut "])
        assert not is_safe(["Whole Milk"], ["'milk']"])
        assert is_safe(["Peanut Butter"], ["[]", "  "])


def test_filter_safe_recipes(recipe_factory):
    shrimp = recipe_factory("Shrimp Scampi", ["Shrimp", "garlic"])
    stock = recipe_factory("Seafood Risotto", ["Shellfish Stock", "rice"])
    plain = recipe_factory("Plain Rice", ["rice"])

    safe = filter_safe_recipes([shrimp, stock, plain], ["shellfish"])

    assert [r.title for r in safe] == ["Shrimp Scampi", "Plain Rice"]


def test_filter_safe_recipes_accepts_raw_profile_allergens(recipe_factory):
    satay = recipe_factory("Satay", ["Peanut Sauce", "chicken"])
    plain = recipe_factory("Plain Rice", ["rice"])

    assert [r.title for r in filter_safe_recipes([satay, plain], ["['peanut'"])] == ["Plain Rice"]
