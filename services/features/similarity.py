from typing import Sequence, Union

import numpy as np

VectorLike = Union[Sequence[float], np.ndarray]


class VectorLengthMismatchError(ValueError):
    def __init__(self, left: int, right: int):
        super().__init__(f"cannot compare vectors of length {left} and {right}")
        self.left = left
        self.right = right


def _as_vector(v: VectorLike) -> np.ndarray:
    return np.asarray(v, dtype=np.float64).ravel()


def magnitude(v: VectorLike) -> float:
    return float(np.linalg.norm(_as_vector(v)))


def cosine_similarity(a: VectorLike, b: VectorLike) -> float:
    """Cosine of the angle between two equal-length vectors.

    Returns exactly 0.0 when either vector has zero magnitude. Raises
    VectorLengthMismatchError when the lengths differ.
    """
    va = _as_vector(a)
    vb = _as_vector(b)
    if va.shape[0] != vb.shape[0]:
        raise VectorLengthMismatchError(va.shape[0], vb.shape[0])

    na = np.linalg.norm(va)
    nb = np.linalg.norm(vb)
    if na == 0 or nb == 0:
        return 0.0

    # float rounding can push identical vectors just past 1.0
    return float(np.clip(np.dot(va, vb) / (na * nb), -1.0, 1.0))
