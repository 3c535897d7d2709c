"""
Network Layouts

Defines the layout modes the layout engine can compute for a snapshot.
This is the **canonical** layout definition used by the CLI and services.

Layouts:
    force-directed → iterative repulsion/attraction simulation (default)
    circular       → one ring of fixed radius on the ground plane
    hierarchical   → one ring per role tier, higher tiers placed higher
    cluster        → cluster centroids on an outer ring, members around them
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Union


# ---------------------------------------------------------------------------
# Enum
# ---------------------------------------------------------------------------

class LayoutType(Enum):
    FORCE_DIRECTED = "force-directed"
    CIRCULAR = "circular"
    HIERARCHICAL = "hierarchical"
    CLUSTER = "cluster"

    @classmethod
    def from_string(cls, value: Union[str, "LayoutType"]) -> LayoutType:
        """Convert a string to LayoutType, supporting common aliases."""
        if isinstance(value, LayoutType):
            return value
        _ALIASES: Dict[str, LayoutType] = {
            "force": cls.FORCE_DIRECTED,
            "force_directed": cls.FORCE_DIRECTED,
            "spring": cls.FORCE_DIRECTED,
            "circle": cls.CIRCULAR,
            "ring": cls.CIRCULAR,
            "hierarchy": cls.HIERARCHICAL,
            "tiered": cls.HIERARCHICAL,
            "clusters": cls.CLUSTER,
            "clustered": cls.CLUSTER,
        }
        key = value.lower().strip()
        if key in _ALIASES:
            return _ALIASES[key]
        try:
            return cls(key)
        except ValueError:
            valid = sorted({t.value for t in cls} | set(_ALIASES))
            raise ValueError(f"Unknown layout '{value}'. Valid: {valid}")


# ---------------------------------------------------------------------------
# Physics / geometry parameters
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ForceLayoutConfig:
    """
    Parameters of the force-directed simulation.

    Attributes:
        iterations:       Fixed number of passes (no convergence check)
        k:                Ideal spring length; repulsion is k²/d, attraction d²/k·strength
        damping:          Multiplier applied to every capped displacement
        max_displacement: Per-iteration displacement cap
        min_distance:     Floor on pair distance
    """
    iterations: int = 100
    k: float = 50.0
    damping: float = 0.9
    max_displacement: float = 10.0
    min_distance: float = 0.1


CIRCULAR_RADIUS = 60.0
HIERARCHY_BASE_RADIUS = 30.0
HIERARCHY_RING_STEP = 25.0
HIERARCHY_LEVEL_HEIGHT = 30.0
CLUSTER_RING_RADIUS = 80.0
CLUSTER_MEMBER_RADIUS = 15.0


LAYOUT_DESCRIPTIONS: Dict[LayoutType, str] = {
    LayoutType.FORCE_DIRECTED: "Iterative repulsion/attraction simulation (default)",
    LayoutType.CIRCULAR: f"Evenly spaced on one ring of radius {CIRCULAR_RADIUS:g}",
    LayoutType.HIERARCHICAL: "One ring per role tier, owners on top",
    LayoutType.CLUSTER: "Cluster centroids on an outer ring, members around them",
}


def list_layouts() -> str:
    """Return a formatted string describing all available layouts."""
    lines = ["Available layouts:", ""]
    for layout in LayoutType:
        lines.append(f"  {layout.value:15} - {LAYOUT_DESCRIPTIONS[layout]}")
    return "\n".join(lines)
