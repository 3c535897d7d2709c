"""
Layout Engine

Computes node placements for a NetworkSnapshot. Every layout is a pure
function of the snapshot: it returns a new list of nodes and leaves the
snapshot untouched.

Force-directed (fixed iteration count, no early exit):
    repulsion   k²/d between every node pair, along the pair's unit vector
    attraction  (d²/k)·strength between the endpoints of every edge
    integration net force per node capped at max_displacement, scaled by damping

Forces for one iteration are computed from the positions at the start of
that iteration, then applied to all nodes together. There is no random
input, so the result is reproducible for a given snapshot.
"""

from __future__ import annotations

import logging
import math
from typing import Callable, Dict, List, Optional, Union

import numpy as np

from boardnet.domain.config.layouts import (
    CIRCULAR_RADIUS,
    CLUSTER_MEMBER_RADIUS,
    CLUSTER_RING_RADIUS,
    HIERARCHY_BASE_RADIUS,
    HIERARCHY_LEVEL_HEIGHT,
    HIERARCHY_RING_STEP,
    ForceLayoutConfig,
    LayoutType,
)
from boardnet.domain.models.network import NetworkNode, NetworkSnapshot, node_index
from boardnet.domain.models.value_objects import Position


def _ring(index: int, count: int, radius: float) -> tuple:
    angle = (index / count) * 2 * math.pi
    return math.cos(angle) * radius, math.sin(angle) * radius


class LayoutEngine:
    """
    Dispatches a snapshot to one of the layout algorithms by name.

    Example:
        >>> engine = LayoutEngine()
        >>> nodes = engine.calculate(snapshot, "hierarchical")
    """

    def __init__(self, force_config: Optional[ForceLayoutConfig] = None) -> None:
        self.force_config = force_config or ForceLayoutConfig()
        self._logger = logging.getLogger(__name__)
        self._layouts: Dict[LayoutType, Callable[[NetworkSnapshot], List[NetworkNode]]] = {
            LayoutType.FORCE_DIRECTED: self.force_directed,
            LayoutType.CIRCULAR: self.circular,
            LayoutType.HIERARCHICAL: self.hierarchical,
            LayoutType.CLUSTER: self.cluster,
        }

    def calculate(
        self,
        snapshot: NetworkSnapshot,
        layout: Union[str, LayoutType] = LayoutType.FORCE_DIRECTED,
    ) -> List[NetworkNode]:
        layout_type = LayoutType.from_string(layout)
        self._logger.info(
            "Computing %s layout for %d nodes", layout_type.value, len(snapshot.nodes),
        )
        return self._layouts[layout_type](snapshot)

    # ------------------------------------------------------------------
    # Force-directed
    # ------------------------------------------------------------------

    def force_directed(self, snapshot: NetworkSnapshot) -> List[NetworkNode]:
        nodes = list(snapshot.nodes)
        if not nodes:
            return []

        cfg = self.force_config
        index = {n.id: i for i, n in enumerate(nodes)}
        pos = np.array(
            [[n.position.x, n.position.y, n.position.z] for n in nodes], dtype=float,
        )

        springs = [
            (index[e.source], index[e.target], e.strength)
            for e in snapshot.edges
            if e.source in index and e.target in index
        ]
        src = np.array([s for s, _, _ in springs], dtype=int)
        dst = np.array([t for _, t, _ in springs], dtype=int)
        strength = np.array([w for _, _, w in springs], dtype=float)

        k_sq = cfg.k * cfg.k
        for _ in range(cfg.iterations):
            # Repulsion: delta[i, j] = pos[i] - pos[j]; the diagonal is zero.
            delta = pos[:, None, :] - pos[None, :, :]
            dist = np.maximum(np.linalg.norm(delta, axis=2), cfg.min_distance)
            magnitude = k_sq / dist
            forces = ((magnitude / dist)[:, :, None] * delta).sum(axis=1)

            if springs:
                d = pos[dst] - pos[src]
                d_len = np.maximum(np.linalg.norm(d, axis=1), cfg.min_distance)
                pull = (d_len * d_len / cfg.k) * strength
                vec = (pull / d_len)[:, None] * d
                np.add.at(forces, src, vec)
                np.add.at(forces, dst, -vec)

            displacement = np.linalg.norm(forces, axis=1)
            moving = displacement > 0
            scale = np.zeros_like(displacement)
            scale[moving] = (
                np.minimum(displacement[moving], cfg.max_displacement) / displacement[moving]
            )
            pos = pos + forces * (scale * cfg.damping)[:, None]

        return [
            node.moved_to(Position(x=float(p[0]), y=float(p[1]), z=float(p[2])))
            for node, p in zip(nodes, pos)
        ]

    # ------------------------------------------------------------------
    # Deterministic layouts
    # ------------------------------------------------------------------

    def circular(self, snapshot: NetworkSnapshot) -> List[NetworkNode]:
        count = len(snapshot.nodes)
        placed = []
        for i, node in enumerate(snapshot.nodes):
            x, z = _ring(i, count, CIRCULAR_RADIUS)
            placed.append(node.moved_to(Position(x=x, y=0.0, z=z)))
        return placed

    def hierarchical(self, snapshot: NetworkSnapshot) -> List[NetworkNode]:
        """
        One ring per role tier, returned in rank order.

        Nodes are ranked by role (owner first) then by influence descending;
        tier ``level`` sits on radius 30 + 25·level at height 30·level.
        """
        ranked = sorted(
            snapshot.nodes,
            key=lambda n: (-n.metadata.role.level, -n.influence_score),
        )
        tiers: Dict[int, List[NetworkNode]] = {}
        for node in ranked:
            tiers.setdefault(node.metadata.role.level, []).append(node)

        placed = []
        for node in ranked:
            level = node.metadata.role.level
            tier = tiers[level]
            radius = HIERARCHY_BASE_RADIUS + level * HIERARCHY_RING_STEP
            x, z = _ring(tier.index(node), len(tier), radius)
            placed.append(node.moved_to(Position(x=x, y=level * HIERARCHY_LEVEL_HEIGHT, z=z)))
        return placed

    def cluster(self, snapshot: NetworkSnapshot) -> List[NetworkNode]:
        """
        Cluster centroids on an outer ring, members on a small ring around each.

        Members in several clusters end up in the last cluster listing them;
        members outside every cluster keep their current position.
        """
        positions = {n.id: n.position for n in snapshot.nodes}
        known = node_index(snapshot.nodes)
        cluster_count = len(snapshot.clusters)

        for ci, cluster in enumerate(snapshot.clusters):
            cx, cz = _ring(ci, cluster_count, CLUSTER_RING_RADIUS)
            member_count = len(cluster.members)
            for mi, member_id in enumerate(cluster.members):
                if member_id not in known:
                    continue
                mx, mz = _ring(mi, member_count, CLUSTER_MEMBER_RADIUS)
                positions[member_id] = Position(x=cx + mx, y=0.0, z=cz + mz)

        return [n.moved_to(positions[n.id]) for n in snapshot.nodes]
