from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Iterable


@dataclass(frozen=True)
class Position:
    """A point in the 3D scene. Layouts replace positions, never mutate them."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def to_dict(self) -> Dict[str, float]:
        return {"x": self.x, "y": self.y, "z": self.z}

    def distance_to(self, other: "Position") -> float:
        return math.sqrt(
            (self.x - other.x) ** 2
            + (self.y - other.y) ** 2
            + (self.z - other.z) ** 2
        )

    @staticmethod
    def centroid(points: Iterable["Position"]) -> "Position":
        """Arithmetic mean of *points*; the origin for an empty iterable."""
        pts = list(points)
        if not pts:
            return Position()
        n = len(pts)
        return Position(
            x=sum(p.x for p in pts) / n,
            y=sum(p.y for p in pts) / n,
            z=sum(p.z for p in pts) / n,
        )
