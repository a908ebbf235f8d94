"""Similarity helpers that work over any vector representation."""

import logging
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Sequence, Union

import numpy as np

from sparsevec.core.types import Value
from sparsevec.vectors.base import SparseVector, Vector

logger = logging.getLogger(__name__)

METRICS = ("cos", "dot")


@dataclass
class SimilarityResult:
    """
    One scored candidate.

    Attributes:
        key: Candidate key (mapping key or sequence position)
        score: Similarity to the query (higher is better)
    """
    key: Any
    score: float

    def __repr__(self) -> str:
        return f"SimilarityResult(key={self.key!r}, score={self.score:.3f})"


def mean_center(vector: SparseVector) -> Value:
    """
    Subtract the mean of the present values from each present value.

    Only the sparse support moves; absent entries stay zero. Mutates
    vector and returns the mean that was subtracted.
    """
    mean = vector.mean()
    vector.sub_const(mean)
    return mean


def centered_cosine(a: SparseVector, b: SparseVector) -> Value:
    """
    Cosine of mean-centered copies of a and b.

    Useful for rating vectors where users rate on different scales.
    Neither operand is modified.
    """
    a_centered = a.copy()
    b_centered = b.copy()
    mean_center(a_centered)
    mean_center(b_centered)
    return a_centered.cos(b_centered)


def rank_by_similarity(
    query: Vector,
    candidates: Union[Mapping[Any, Vector], Sequence[Vector]],
    top_k: Optional[int] = None,
    metric: str = "cos",
) -> List[SimilarityResult]:
    """
    Score candidates against query and sort by descending score.

    Args:
        query: Query vector
        candidates: Mapping of key -> vector, or a sequence (keys are positions)
        top_k: Number of results to return (None = all)
        metric: 'cos' or 'dot'

    Returns:
        List of SimilarityResult. Candidates with a non-finite score, e.g.
        a zero-magnitude vector under 'cos', are left out.

    Raises:
        ValueError: If metric is unknown
        KindMismatchError: If a candidate is a different representation
    """
    if metric not in METRICS:
        raise ValueError(f"Unknown metric: '{metric}'. Available: {list(METRICS)}")

    if isinstance(candidates, Mapping):
        items = list(candidates.items())
    else:
        items = list(enumerate(candidates))

    results = []
    skipped = 0
    for key, candidate in items:
        score = query.cos(candidate) if metric == "cos" else query.dot(candidate)
        if not np.isfinite(score):
            skipped += 1
            continue
        results.append(SimilarityResult(key=key, score=float(score)))

    if skipped:
        logger.debug(f"Skipped {skipped} candidates with non-finite {metric} score")

    results.sort(key=lambda r: r.score, reverse=True)
    if top_k is not None:
        results = results[:top_k]
    return results
