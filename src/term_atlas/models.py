"""Data models used throughout Term Atlas."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Record:
    """A single term (or caption) to place on the atlas."""
    id: int | str
    texts: tuple[str, ...] = ()
    group: Any = None

    @property
    def document(self) -> str:
        """Concatenated, lower-cased text used for vectorization."""
        return " ".join(t for t in self.texts if t).lower()


@dataclass(frozen=True)
class Position:
    x: float
    y: float


@dataclass
class LayoutNode:
    """A record and where it ends up on the canvas (percent coordinates)."""
    record: Record
    position: Position


@dataclass
class LayoutEdge:
    """A similarity link between two laid-out records."""
    source: int | str
    target: int | str
    weight: float


@dataclass
class ClusterLayout:
    """Result of laying out one group."""
    key: Any
    name: str
    member_count: int
    centroid: Position
    nodes: list[LayoutNode] = field(default_factory=list)
    edges: list[LayoutEdge] = field(default_factory=list)
    keywords: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "key": self.key,
            "name": self.name,
            "member_count": self.member_count,
            "centroid": {"x": self.centroid.x, "y": self.centroid.y},
            "nodes": [
                {
                    "id": n.record.id,
                    "texts": list(n.record.texts),
                    "x": n.position.x,
                    "y": n.position.y,
                }
                for n in self.nodes
            ],
            "edges": [
                {"source": e.source, "target": e.target, "weight": e.weight}
                for e in self.edges
            ],
            "keywords": list(self.keywords),
        }
