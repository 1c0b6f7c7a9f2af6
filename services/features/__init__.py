from services.features.similarity import (
    cosine_similarity,
    magnitude,
    VectorLengthMismatchError,
)
from services.features.embedding_store import IngredientEmbeddingStore
from services.features.lexical_index import LexicalCorpusIndex
from services.features.recipe_corpus import RecipeCorpus, build_recipe_corpus, recipe_text
from services.features.safety import (
    normalize_allergen,
    normalize_allergens,
    is_safe,
    filter_safe_recipes,
)

__all__ = [
    "cosine_similarity",
    "magnitude",
    "VectorLengthMismatchError",
    "IngredientEmbeddingStore",
    "LexicalCorpusIndex",
    "RecipeCorpus",
    "build_recipe_corpus",
    "recipe_text",
    "normalize_allergen",
    "normalize_allergens",
    "is_safe",
    "filter_safe_recipes",
]
