from uuid import uuid4
from pathlib import Path
import sys

# Ensure project root is on sys.path so `from models import ...` works whether this
# script is run inside the container or from the repository root.
sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlmodel import Session
from models import (
    Recipe, Ingredient, IngredientCategory, User, UserLikedRecipe, PantryItem, QuantityUnit,
    CuisineType, DifficultyLevel, MealType,
)
from config.database import engine, create_db_and_tables
from utils.logger import setup_logger

logger = setup_logger(__name__)


INGREDIENTS = {
    "chicken breast": IngredientCategory.MEAT,
    "broccoli": IngredientCategory.VEGETABLE,
    "garlic": IngredientCategory.VEGETABLE,
    "olive oil": IngredientCategory.OIL,
    "tomato": IngredientCategory.VEGETABLE,
    "mozzarella": IngredientCategory.DAIRY,
    "basil": IngredientCategory.HERB,
    "pasta": IngredientCategory.GRAIN,
    "shrimp": IngredientCategory.SEAFOOD,
    "peanut butter": IngredientCategory.NUT,
    "rice": IngredientCategory.GRAIN,
    "soy sauce": IngredientCategory.CONDIMENT,
}

RECIPES = [
    {
        "title": "Garlic Chicken with Broccoli",
        "description": "Pan seared chicken breast with garlicky broccoli.",
        "instructions": ["Season the chicken", "Sear in olive oil", "Add broccoli and garlic"],
        "tags": ["quick", "high-protein"],
        "ingredients": ["chicken breast", "broccoli", "garlic", "olive oil"],
        "cuisine": CuisineType.AMERICAN, "difficulty": DifficultyLevel.EASY, "meal_type": MealType.DINNER,
        "prep_time": 10, "cook_time": 20, "calories": 420, "protein": 45, "carbs": 12, "fat": 18,
        "average_rating": 4.6, "review_count": 120,
    },
    {
        "title": "Caprese Pasta",
        "description": "Pasta tossed with tomato, mozzarella and fresh basil.",
        "instructions": ["Boil the pasta", "Toss with tomato and mozzarella", "Finish with basil"],
        "tags": ["vegetarian", "quick"],
        "ingredients": ["pasta", "tomato", "mozzarella", "basil", "olive oil"],
        "cuisine": CuisineType.ITALIAN, "difficulty": DifficultyLevel.EASY, "meal_type": MealType.LUNCH,
        "prep_time": 5, "cook_time": 15, "calories": 610, "protein": 22, "carbs": 80, "fat": 21,
        "average_rating": 4.3, "review_count": 85,
    },
    {
        "title": "Shrimp Fried Rice",
        "description": "Wok fried rice with shrimp and soy sauce.",
        "instructions": ["Cook the rice a day ahead", "Stir fry shrimp", "Add rice and soy sauce"],
        "tags": ["wok"],
        "ingredients": ["shrimp", "rice", "garlic", "soy sauce"],
        "cuisine": CuisineType.CHINESE, "difficulty": DifficultyLevel.MEDIUM, "meal_type": MealType.DINNER,
        "prep_time": 15, "cook_time": 15, "calories": 540, "protein": 28, "carbs": 70, "fat": 14,
        "average_rating": 4.1, "review_count": 60,
    },
    {
        "title": "Peanut Noodles",
        "description": "Cold noodles in a peanut butter and soy dressing.",
        "instructions": ["Cook the pasta", "Whisk peanut butter with soy sauce", "Toss and chill"],
        "tags": ["vegetarian", "cold"],
        "ingredients": ["pasta", "peanut butter", "soy sauce", "garlic"],
        "cuisine": CuisineType.THAI, "difficulty": DifficultyLevel.EASY, "meal_type": MealType.LUNCH,
        "prep_time": 10, "cook_time": 10, "calories": 650, "protein": 20, "carbs": 75, "fat": 30,
        "average_rating": 4.4, "review_count": 40,
    },
]


def seed():
    create_db_and_tables()
    with Session(engine) as s:
        ingredients = {
            name: Ingredient(id=uuid4(), name=name, category=category)
            for name, category in INGREDIENTS.items()
        }
        for ingredient in ingredients.values():
            s.add(ingredient)

        chef = User(id=uuid4(), email="chef@example.com", name="Chef")
        s.add(chef)

        recipes = []
        for entry in RECIPES:
            data = dict(entry)
            names = data.pop("ingredients")
            recipe = Recipe(author_id=chef.id, **data)
            recipe.ingredients = [ingredients[n] for n in names]
            s.add(recipe)
            recipes.append(recipe)

        home_cook = User(id=uuid4(), email="cook@example.com", name="Home Cook", allergies=["['shellfish'", "peanut']"])
        s.add(home_cook)
        for name in ["chicken breast", "broccoli", "garlic"]:
            s.add(PantryItem(user_id=home_cook.id, ingredient_id=ingredients[name].id, quantity=1, unit=QuantityUnit.PIECES))
        s.add(UserLikedRecipe(user_id=home_cook.id, recipe_id=recipes[1].id))

        s.commit()
        logger.info(
            "Database seeded successfully",
            extra={"ingredients": len(ingredients), "recipes": len(recipes), "users": 2}
        )


if __name__ == "__main__":
    seed()
