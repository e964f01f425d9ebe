"""Force-directed cluster layout."""

from .composer import UNCLASSIFIED, build_atlas, compose_cluster, group_records
from .prng import prng, seed_for
from .solver import solve_layout

__all__ = [
    "UNCLASSIFIED",
    "build_atlas",
    "compose_cluster",
    "group_records",
    "prng",
    "seed_for",
    "solve_layout",
]
