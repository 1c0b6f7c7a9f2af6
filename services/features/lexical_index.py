from typing import List, Optional

import numpy as np
from sklearn.feature_extraction.text import TfidfVectorizer

from services.features.similarity import cosine_similarity, VectorLike
from utils.logger import setup_logger

logger = setup_logger(__name__)


class LexicalCorpusIndex:
    """TF-IDF index over an ordered set of documents.

    Vectors produced by `vector_for` live in document space: entry i is how
    strongly the text's terms weigh in document i. Two texts are similar when
    their terms matter in the same documents.

    Documents are appended first, then `fit()` freezes the index.
    """

    def __init__(self, stop_words: Optional[str] = "english"):
        self._documents: List[str] = []
        self._vectorizer = TfidfVectorizer(stop_words=stop_words)
        self._matrix = None
        self._vocabulary = {}
        self._analyzer = None
        self._fitted = False

    def add_document(self, text: str) -> int:
        if self._fitted:
            raise RuntimeError("cannot add documents to a fitted index")
        self._documents.append(text or "")
        return len(self._documents) - 1

    def fit(self) -> "LexicalCorpusIndex":
        if self._fitted:
            return self

        self._analyzer = self._vectorizer.build_analyzer()

        if self._documents:
            try:
                # column slicing is the hot path, so keep it in CSC form
                self._matrix = self._vectorizer.fit_transform(self._documents).tocsc()
                self._vocabulary = self._vectorizer.vocabulary_
            except ValueError:
                # every document was empty or stop words only
                logger.warning(
                    "Lexical index has no vocabulary",
                    extra={"document_count": len(self._documents)}
                )
                self._matrix = None
                self._vocabulary = {}

        self._fitted = True

        logger.info(
            "Lexical index fitted",
            extra={
                "document_count": len(self._documents),
                "vocabulary_size": len(self._vocabulary),
            }
        )
        return self

    def vector_for(self, text: str) -> np.ndarray:
        if not self._fitted:
            raise RuntimeError("lexical index has not been fitted")

        n_docs = len(self._documents)
        if not text or self._matrix is None:
            return np.zeros(n_docs)

        columns = [self._vocabulary[token] for token in self._analyzer(text) if token in self._vocabulary]
        if not columns:
            return np.zeros(n_docs)

        return np.asarray(self._matrix[:, columns].sum(axis=1), dtype=np.float64).ravel()

    def similarity(self, a: VectorLike, b: VectorLike) -> float:
        return cosine_similarity(a, b)

    @property
    def document_count(self) -> int:
        return len(self._documents)

    @property
    def vocabulary_size(self) -> int:
        return len(self._vocabulary)

    @property
    def is_fitted(self) -> bool:
        return self._fitted
