from __future__ import annotations
from typing import List, Tuple
import time

import numpy as np

from models.recipe import Recipe
from services.catalog.stores import CatalogStore, iter_recipe_batches
from services.features.lexical_index import LexicalCorpusIndex
from utils.logger import setup_logger

logger = setup_logger(__name__)


def recipe_text(recipe: Recipe) -> str:
    parts = [recipe.title or "", recipe.description or ""]
    parts.extend(recipe.instructions or [])
    parts.extend(recipe.tags or [])
    parts.extend(recipe.ingredient_names())
    return " ".join(p for p in parts if p)


class CorpusEntry:
    def __init__(self, recipe: Recipe, vector: np.ndarray):
        self.recipe = recipe
        self.vector = vector


class RecipeCorpus:
    """Fitted lexical index plus every indexed recipe with its document vector."""

    def __init__(self, index: LexicalCorpusIndex, entries: List[CorpusEntry]):
        self.index = index
        self.entries = entries

    def __len__(self) -> int:
        return len(self.entries)

    def query_vector(self, text: str) -> np.ndarray:
        return self.index.vector_for(text)

    def score(self, query_vector: np.ndarray) -> List[Tuple[Recipe, float]]:
        return [
            (entry.recipe, self.index.similarity(query_vector, entry.vector))
            for entry in self.entries
        ]


def build_recipe_corpus(catalog: CatalogStore, batch_size: int = 100) -> RecipeCorpus:
    start = time.time()
    index = LexicalCorpusIndex()
    recipes: List[Recipe] = []

    for batch in iter_recipe_batches(catalog, batch_size):
        for recipe in batch:
            index.add_document(recipe_text(recipe))
            recipes.append(recipe)
        logger.debug(
            "Indexed recipe batch",
            extra={"batch_size": len(batch), "indexed_so_far": len(recipes)}
        )

    index.fit()

    entries = [CorpusEntry(recipe, index.vector_for(recipe_text(recipe))) for recipe in recipes]

    logger.info(
        "Recipe corpus built",
        extra={
            "recipe_count": len(entries),
            "vocabulary_size": index.vocabulary_size,
            "duration_ms": round((time.time() - start) * 1000, 1),
        }
    )
    return RecipeCorpus(index, entries)
