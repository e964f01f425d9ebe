"""Force-directed layout for the members of one cluster.

Every pair repels with ``repulsion / d**2``; pairs whose similarity clears
``similarity_threshold`` are also joined by a spring whose rest length
shrinks as similarity grows. The simulation runs a fixed number of rounds
(optionally stopping early once movement dies down) and never touches
shared state, so the same ids and matrix always give the same positions.
"""

import logging
import math
from typing import Any

import numpy as np

from ..models import Position
from .prng import jitter, prng, seed_for

logger = logging.getLogger(__name__)

DEFAULT_SOLVER = {
    "iterations": 80,
    "repulsion": 1800.0,
    "attraction": 0.08,
    "damping": 0.6,
    "similarity_threshold": 0.08,
    "base_distance": 18.0,
    "spread": 50.0,
    "min_distance": 1.0,
    "jitter": 0.6,
    "radius_min": 12.0,
    "radius_band": 36.0,
    "tolerance": None,
}


def initial_positions(
    ids: list[int | str],
    cluster_offset: float = 0.0,
    radius_min: float = 12.0,
    radius_band: float = 36.0,
) -> np.ndarray:
    """Place each id on a seeded radius and angle around the origin."""
    coords = np.zeros((len(ids), 2), dtype=float)
    for i, identifier in enumerate(ids):
        s = seed_for(identifier) + cluster_offset
        radius = radius_min + prng(s) * radius_band
        angle = prng(s + 0.5) * 2 * math.pi
        coords[i] = (radius * math.cos(angle), radius * math.sin(angle))
    return coords


def _jitter_seed(index: int, iteration: int, cluster_offset: float, axis: int) -> float:
    return index * 31.7 + iteration * 7.3 + cluster_offset * 0.13 + axis * 1.9 + 1.1


def solve_layout(
    ids: list[int | str],
    similarity: np.ndarray,
    cluster_offset: float = 0.0,
    **params: Any,
) -> list[Position]:
    """Resolve local positions for one cluster.

    Args:
        ids: Record identifiers, in the same order as ``similarity``.
        similarity: Symmetric n x n matrix with a zero diagonal.
        cluster_offset: Seed offset distinguishing this cluster.
        **params: Overrides for any key in ``DEFAULT_SOLVER``.

    Returns:
        One local Position per id.
    """
    opts = {**DEFAULT_SOLVER, **{k: v for k, v in params.items() if k in DEFAULT_SOLVER}}
    n = len(ids)
    if n == 0:
        return []

    pos = initial_positions(ids, cluster_offset, opts["radius_min"], opts["radius_band"])
    if n == 1:
        return [Position(float(pos[0, 0]), float(pos[0, 1]))]

    sim = np.asarray(similarity, dtype=float)
    if sim.shape != (n, n):
        raise ValueError(f"Similarity matrix shape {sim.shape} does not match {n} ids")

    not_self = ~np.eye(n, dtype=bool)
    linked = (sim >= opts["similarity_threshold"]) & not_self
    target = opts["base_distance"] + (1.0 - sim) * opts["spread"]
    tolerance = opts["tolerance"]

    for iteration in range(opts["iterations"]):
        # delta[i, j] points from j to i
        delta = pos[:, None, :] - pos[None, :, :]
        dist = np.maximum(np.hypot(delta[..., 0], delta[..., 1]), opts["min_distance"])
        unit = delta / dist[..., None]

        push = np.where(not_self, opts["repulsion"] / dist ** 2, 0.0)
        pull = np.where(linked, (dist - target) * opts["attraction"] * sim, 0.0)
        step = ((push - pull)[..., None] * unit).sum(axis=1) * opts["damping"]

        noise = np.array([
            [jitter(_jitter_seed(i, iteration, cluster_offset, axis), opts["jitter"]) for axis in (0, 1)]
            for i in range(n)
        ])
        pos = pos + step + noise

        if tolerance is not None:
            movement = float(np.hypot(step[:, 0], step[:, 1]).mean())
            if movement < tolerance:
                logger.debug(f"Layout settled after {iteration + 1} iterations (movement {movement:.4f})")
                break

    return [Position(float(x), float(y)) for x, y in pos]
