"""Group records by key and compose per-cluster layouts onto one canvas.

Global coordinates are percentages (0-100 on each axis) of the containing
canvas. Cluster centroids sit on an ellipse around the centre; each
cluster's solved local layout is scaled to a radius that grows mildly with
its size and translated onto its centroid.
"""

import logging
import math
from itertools import combinations
from typing import Any, Iterable, Mapping

from ..models import ClusterLayout, LayoutEdge, LayoutNode, Position, Record
from ..text import build_tokenizer, similarity_matrix, top_terms, vectorize
from .prng import jitter, prng, seed_for
from .solver import DEFAULT_SOLVER, solve_layout

logger = logging.getLogger(__name__)

UNCLASSIFIED = "Unclassified"
CANVAS_CENTER = 50.0

DEFAULT_COMPOSER = {
    "member_cap": 14,
    "ring_radius_x": 32.0,
    "ring_radius_y": 28.0,
    "ring_jitter": 0.35,
    "base_radius": 6.0,
    "growth": 0.5,
    "growth_cap": 6.0,
    "scale_jitter": 0.25,
    "node_jitter": 0.4,
    "keyword_count": 5,
}


def group_records(records: Iterable[Record]) -> dict[Any, list[Record]]:
    """Bucket records by group key in order of first appearance.

    Records without a key share the ``None`` bucket.
    """
    groups: dict[Any, list[Record]] = {}
    for record in records:
        groups.setdefault(record.group, []).append(record)
    return groups


def display_name(key: Any, names: Mapping[Any, str] | None) -> str:
    if key is None or not names:
        return UNCLASSIFIED
    name = names.get(key)
    if name is None:
        name = names.get(str(key))
    return name or UNCLASSIFIED


def cluster_offset(index: int) -> float:
    """Seed offset for the cluster at ``index``."""
    return (index + 1) * 97.0


def ring_centroid(index: int, count: int, radius_x: float, radius_y: float, ring_jitter: float) -> Position:
    """Centroid for cluster ``index`` of ``count`` on the global ellipse."""
    if count <= 1:
        return Position(CANVAS_CENTER, CANVAS_CENTER)
    angle = 2 * math.pi * index / count + jitter(index * 13.37 + 0.7, ring_jitter)
    return Position(
        CANVAS_CENTER + radius_x * math.cos(angle),
        CANVAS_CENTER + radius_y * math.sin(angle),
    )


def _clamp(value: float) -> float:
    return min(100.0, max(0.0, value))


def compose_cluster(
    key: Any,
    members: list[Record],
    index: int,
    count: int,
    config: dict[str, Any] | None = None,
    names: Mapping[Any, str] | None = None,
) -> ClusterLayout:
    """Lay out one cluster and map it into global coordinates."""
    config = config or {}
    opts = {**DEFAULT_COMPOSER, **config.get("composer", {})}
    solver_opts = {**DEFAULT_SOLVER, **config.get("solver", {})}

    centroid = ring_centroid(index, count, opts["ring_radius_x"], opts["ring_radius_y"], opts["ring_jitter"])
    shown = members[: opts["member_cap"]]
    layout = ClusterLayout(
        key=key,
        name=display_name(key, names),
        member_count=len(members),
        centroid=centroid,
    )
    if not shown:
        return layout

    vectors = vectorize([r.document for r in shown], analyzer=build_tokenizer(config))
    sim = similarity_matrix(vectors)
    offset = cluster_offset(index)
    local = solve_layout([r.id for r in shown], sim, cluster_offset=offset, **solver_opts)

    max_dist = max(1.0, max(math.hypot(p.x, p.y) for p in local))
    radius = opts["base_radius"] + min(opts["growth_cap"], len(members) * opts["growth"])
    scale = radius / max_dist
    scale_x = scale * (1 + jitter(offset + 3.1, opts["scale_jitter"]))
    scale_y = scale * (1 + jitter(offset + 4.7, opts["scale_jitter"]))

    for record, p in zip(shown, local):
        s = seed_for(record.id) + offset
        x = centroid.x + p.x * scale_x + jitter(s + 5.3, opts["node_jitter"])
        y = centroid.y + p.y * scale_y + jitter(s + 6.1, opts["node_jitter"])
        layout.nodes.append(LayoutNode(record=record, position=Position(_clamp(x), _clamp(y))))

    threshold = solver_opts["similarity_threshold"]
    for i, j in combinations(range(len(shown)), 2):
        if sim[i, j] >= threshold:
            layout.edges.append(LayoutEdge(source=shown[i].id, target=shown[j].id, weight=float(sim[i, j])))

    layout.keywords = top_terms(vectors, opts["keyword_count"])
    return layout


def build_atlas(
    records: Iterable[Record],
    config: dict[str, Any] | None = None,
    names: Mapping[Any, str] | None = None,
) -> list[ClusterLayout]:
    """Compute the full atlas layout from scratch.

    Args:
        records: Records to place; order matters for determinism.
        config: Configuration dict (see ``term_atlas.config.DEFAULT_CONFIG``).
        names: Group key -> display name; defaults to ``config["group_names"]``.

    Returns:
        One ClusterLayout per group, in order of first appearance.
    """
    config = config or {}
    if names is None:
        names = config.get("group_names") or {}

    groups = group_records(records)
    count = len(groups)
    clusters = []
    for index, (key, members) in enumerate(groups.items()):
        logger.debug(f"Laying out cluster {key!r}: {len(members)} member(s)")
        clusters.append(compose_cluster(key, members, index, count, config, names))
    return clusters
