"""
Cluster Detector

Groups nodes in two independent passes whose results share one list:

    Expertise clusters → one group per expertise tag (a node with k tags joins k groups)
    Role clusters      → one group per role

Only groups with at least two members become clusters, so a member can
appear in several clusters at once. Clusters are recomputed wholesale on
every build.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Sequence

from boardnet.domain.models.enums import InfluenceLevel, MemberRole
from boardnet.domain.models.network import NetworkCluster, NetworkNode
from boardnet.domain.models.value_objects import Position

MIN_CLUSTER_SIZE = 2
RADIUS_PADDING = 10.0

EXPERTISE_COLORS: Dict[str, str] = {
    "Leadership": "#8B5CF6",
    "Finance": "#10B981",
    "Technology": "#3B82F6",
    "Strategy": "#F59E0B",
    "Operations": "#EF4444",
    "Marketing": "#EC4899",
    "Legal": "#6B7280",
}
FALLBACK_EXPERTISE_COLOR = "#9CA3AF"

ROLE_CLUSTER_COLORS: Dict[MemberRole, str] = {
    MemberRole.OWNER: "#7C3AED",
    MemberRole.ADMIN: "#DC2626",
    MemberRole.MEMBER: "#2563EB",
    MemberRole.VIEWER: "#059669",
}
FALLBACK_ROLE_COLOR = "#6B7280"


class ClusterDetector:

    def __init__(self, min_size: int = MIN_CLUSTER_SIZE) -> None:
        self.min_size = max(MIN_CLUSTER_SIZE, min_size)
        self._logger = logging.getLogger(__name__)

    def detect(self, nodes: Sequence[NetworkNode]) -> List[NetworkCluster]:
        clusters = self.expertise_clusters(nodes) + self.role_clusters(nodes)
        self._logger.debug("Detected %d clusters over %d nodes", len(clusters), len(nodes))
        return clusters

    def expertise_clusters(self, nodes: Sequence[NetworkNode]) -> List[NetworkCluster]:
        groups: Dict[str, List[NetworkNode]] = {}
        for node in nodes:
            for tag in node.metadata.expertise:
                groups.setdefault(tag, []).append(node)

        return [
            self._make_cluster(
                cluster_id=f"cluster-{tag}",
                name=f"{tag} Expertise",
                members=members,
                color=EXPERTISE_COLORS.get(tag, FALLBACK_EXPERTISE_COLOR),
            )
            for tag, members in groups.items()
            if len(members) >= self.min_size
        ]

    def role_clusters(self, nodes: Sequence[NetworkNode]) -> List[NetworkCluster]:
        groups: Dict[MemberRole, List[NetworkNode]] = {}
        for node in nodes:
            groups.setdefault(node.metadata.role, []).append(node)

        return [
            self._make_cluster(
                cluster_id=f"cluster-role-{role.value}",
                name=f"{role.value} Role Cluster",
                members=members,
                color=ROLE_CLUSTER_COLORS.get(role, FALLBACK_ROLE_COLOR),
            )
            for role, members in groups.items()
            if len(members) >= self.min_size
        ]

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------

    @staticmethod
    def center_of(nodes: Sequence[NetworkNode]) -> Position:
        return Position.centroid(n.position for n in nodes)

    @staticmethod
    def radius_of(nodes: Sequence[NetworkNode], center: Position) -> float:
        farthest = max((n.position.distance_to(center) for n in nodes), default=0.0)
        return farthest + RADIUS_PADDING

    @staticmethod
    def influence_of(nodes: Sequence[NetworkNode]) -> InfluenceLevel:
        if not nodes:
            return InfluenceLevel.LOW
        mean = sum(n.influence_score for n in nodes) / len(nodes)
        return InfluenceLevel.from_score(mean)

    def _make_cluster(
        self,
        cluster_id: str,
        name: str,
        members: Sequence[NetworkNode],
        color: str,
    ) -> NetworkCluster:
        center = self.center_of(members)
        return NetworkCluster(
            id=cluster_id,
            name=name,
            members=tuple(n.id for n in members),
            center=center,
            radius=self.radius_of(members, center),
            color=color,
            influence_level=self.influence_of(members),
        )
