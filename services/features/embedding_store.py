import json
import re
import threading
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

import numpy as np

from config.config_loader import ConfigurationError
from utils.logger import setup_logger

logger = setup_logger(__name__)

_WHITESPACE_RUN = re.compile(r"\s+")


class IngredientEmbeddingStore:
    """Read-only table of precomputed ingredient vectors.

    The artifact is a JSON object mapping an ingredient key to a list of
    floats. Keys are normalized on load and on lookup, so "Olive Oil" and
    "olive_oil" resolve to the same vector. The table is loaded once and
    never mutated afterwards.
    """

    def __init__(self, artifact_path: Union[str, Path]):
        self.artifact_path = Path(artifact_path)
        self._vectors: Dict[str, np.ndarray] = {}
        self._dimension: Optional[int] = None
        self._loaded = False
        self._lock = threading.Lock()

    @staticmethod
    def normalize(name: str) -> str:
        return _WHITESPACE_RUN.sub("_", name.strip().lower())

    def initialize(self) -> None:
        if self._loaded:
            return
        with self._lock:
            if self._loaded:
                return
            vectors, dimension = self._read_artifact()
            self._vectors = vectors
            self._dimension = dimension
            self._loaded = True

        logger.info(
            "Ingredient embeddings loaded",
            extra={
                "artifact_path": str(self.artifact_path),
                "embedding_count": len(self._vectors),
                "dimension": self._dimension,
            }
        )

    def _read_artifact(self):
        if not self.artifact_path.exists():
            raise ConfigurationError(f"embedding artifact not found: {self.artifact_path}")

        try:
            with open(self.artifact_path, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"embedding artifact is not valid JSON: {e}") from e

        if not isinstance(raw, dict):
            raise ConfigurationError("embedding artifact must be a JSON object of name -> vector")
        if not raw:
            raise ConfigurationError("embedding artifact is empty")

        vectors: Dict[str, np.ndarray] = {}
        dimension: Optional[int] = None

        for key, values in raw.items():
            if not isinstance(values, list) or not values:
                raise ConfigurationError(f"embedding for '{key}' must be a non-empty list")
            if not all(isinstance(x, (int, float)) and not isinstance(x, bool) for x in values):
                raise ConfigurationError(f"embedding for '{key}' contains non-numeric values")

            if dimension is None:
                dimension = len(values)
            elif len(values) != dimension:
                raise ConfigurationError(
                    f"embedding for '{key}' has dimension {len(values)}, expected {dimension}"
                )

            vector = np.asarray(values, dtype=np.float64)
            vector.setflags(write=False)
            vectors[self.normalize(key)] = vector

        return vectors, dimension

    def _require_loaded(self) -> None:
        if not self._loaded:
            self.initialize()

    def lookup(self, name: str) -> Optional[np.ndarray]:
        self._require_loaded()
        key = self.normalize(name)
        vector = self._vectors.get(key)
        if vector is None:
            logger.warning(
                "No embedding found for ingredient",
                extra={"ingredient": name, "normalized_key": key}
            )
        return vector

    def lookup_many(self, names: Iterable[str]) -> List[np.ndarray]:
        vectors = []
        for name in names:
            vector = self.lookup(name)
            if vector is not None:
                vectors.append(vector)
        return vectors

    @property
    def dimension(self) -> Optional[int]:
        return self._dimension

    @property
    def size(self) -> int:
        return len(self._vectors)

    @property
    def is_loaded(self) -> bool:
        return self._loaded
