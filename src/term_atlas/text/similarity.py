"""Cosine similarity between term vectors."""

import math
from itertools import combinations

import numpy as np

from .vectorizer import TermVector


def cosine_similarity(a: TermVector, b: TermVector) -> float:
    """Cosine similarity of two sparse vectors; 0.0 if either is empty."""
    if not a or not b:
        return 0.0
    small, large = (a, b) if len(a) <= len(b) else (b, a)
    dot = sum(w * large[t] for t, w in small.items() if t in large)
    norm = math.sqrt(sum(w * w for w in a.values())) * math.sqrt(sum(w * w for w in b.values()))
    if norm == 0:
        return 0.0
    return min(1.0, max(0.0, dot / norm))


def similarity_matrix(vectors: list[TermVector]) -> np.ndarray:
    """Symmetric pairwise similarity matrix with a zero diagonal.

    Each unordered pair is computed once and mirrored.
    """
    n = len(vectors)
    sim = np.zeros((n, n), dtype=float)
    for i, j in combinations(range(n), 2):
        value = cosine_similarity(vectors[i], vectors[j])
        sim[i, j] = value
        sim[j, i] = value
    return sim
