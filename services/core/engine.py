from __future__ import annotations
from typing import Any, Dict, Optional
import threading

from config.config_loader import RecommendationTuning
from services.catalog.stores import CatalogStore, UserStore
from services.core.nutrition_service import NutritionRecommendationService
from services.core.pantry_service import PantryRecommendationService
from services.core.recommendation_service import RecommendationService
from services.features.embedding_store import IngredientEmbeddingStore
from services.features.recipe_corpus import RecipeCorpus, build_recipe_corpus
from utils.logger import setup_logger

logger = setup_logger(__name__)


class RecommendationEngine:
    """Owns the long-lived read-mostly state shared by all requests.

    Built once by the application and handed to request handlers. `start()`
    loads the embedding table and builds the lexical corpus; both are only
    read afterwards. A rebuild produces a new corpus and swaps the reference.
    """

    def __init__(
        self,
        catalog: CatalogStore,
        users: UserStore,
        embeddings: IngredientEmbeddingStore,
        tuning: Optional[RecommendationTuning] = None
    ):
        self.catalog = catalog
        self.users = users
        self.embeddings = embeddings
        self.tuning = tuning or RecommendationTuning()

        self._corpus: Optional[RecipeCorpus] = None
        self._lock = threading.Lock()
        self._started = False

        self.recommendations = RecommendationService(catalog, users, lambda: self.corpus, self.tuning)
        self.pantry = PantryRecommendationService(
            catalog, users, embeddings, batch_size=self.tuning.lexical_batch_size
        )
        self.nutrition = NutritionRecommendationService(
            catalog, users, batch_size=self.tuning.lexical_batch_size
        )

    def start(self) -> None:
        with self._lock:
            if self._started:
                return
            self.embeddings.initialize()
            self._corpus = build_recipe_corpus(self.catalog, self.tuning.lexical_batch_size)
            self._started = True

        logger.info(
            "Recommendation engine started",
            extra={
                "embedding_count": self.embeddings.size,
                "indexed_recipes": len(self._corpus),
            }
        )

    @property
    def corpus(self) -> RecipeCorpus:
        corpus = self._corpus
        if corpus is None:
            raise RuntimeError("recommendation engine has not been started")
        return corpus

    def rebuild_corpus(self) -> RecipeCorpus:
        if not self._started:
            raise RuntimeError("recommendation engine has not been started")

        corpus = build_recipe_corpus(self.catalog, self.tuning.lexical_batch_size)
        with self._lock:
            previous = self._corpus
            self._corpus = corpus

        logger.info(
            "Recipe corpus rebuilt",
            extra={
                "previous_size": len(previous) if previous is not None else 0,
                "indexed_recipes": len(corpus),
            }
        )
        return corpus

    @property
    def is_ready(self) -> bool:
        return self._started

    def status(self) -> Dict[str, Any]:
        corpus = self._corpus
        return {
            "ready": self._started,
            "embedding_count": self.embeddings.size,
            "embedding_dimension": self.embeddings.dimension,
            "indexed_recipes": len(corpus) if corpus is not None else 0,
            "vocabulary_size": corpus.index.vocabulary_size if corpus is not None else 0,
        }
