"""
Graph Builder

Converts member profiles (plus optional relationship hints) into a complete
NetworkSnapshot in one call:

    1. Node creation      → ring placement, size and colour per member
    2. Edge creation      → pairwise relationship scoring, threshold filter
    3. Node adjacency     → derived from the final edge set
    4. Cluster detection  → expertise and role groupings
    5. Metrics            → graph-level statistics

Node placement:
    angle  = 2π·i/n
    radius = 50 + 30·influence
    x, z   = cos(angle)·radius, sin(angle)·radius
    y      = 20·performance − 10

Edge creation evaluates every unordered pair once (O(n²)), which is fine for
board-sized groups.
"""

from __future__ import annotations

import logging
import math
from dataclasses import replace
from datetime import datetime, timezone
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from boardnet.domain.models.entities import MemberProfile, RelationshipHint
from boardnet.domain.models.enums import MemberRole
from boardnet.domain.models.network import (
    EdgeMetadata,
    NetworkEdge,
    NetworkNode,
    NetworkSnapshot,
    NodeMetadata,
)
from boardnet.domain.models.value_objects import Position
from boardnet.domain.services.cluster_detector import ClusterDetector
from boardnet.domain.services.metric_calculator import MetricCalculator
from boardnet.domain.services.relationship_analyzer import (
    RelationshipAnalyzer,
    RelationshipScore,
    clamp,
    derived_fields,
)

DEFAULT_INFLUENCE = 0.5
DEFAULT_CENTRALITY = 0.5
DEFAULT_EDGE_THRESHOLD = 0.3

BASE_RING_RADIUS = 50.0
INFLUENCE_RING_SPREAD = 30.0

ROLE_COLORS: Dict[MemberRole, str] = {
    MemberRole.OWNER: "#8B5CF6",
    MemberRole.ADMIN: "#EF4444",
    MemberRole.MEMBER: "#3B82F6",
    MemberRole.VIEWER: "#10B981",
}
FALLBACK_NODE_COLOR = "#6B7280"


class GraphBuilder:
    """
    Builds NetworkSnapshots from member profiles.

    Example:
        >>> builder = GraphBuilder()
        >>> snapshot = builder.build(members)
        >>> snapshot.metrics.density
    """

    def __init__(
        self,
        analyzer: Optional[RelationshipAnalyzer] = None,
        cluster_detector: Optional[ClusterDetector] = None,
        metric_calculator: Optional[MetricCalculator] = None,
        edge_threshold: float = DEFAULT_EDGE_THRESHOLD,
    ) -> None:
        self.analyzer = analyzer or RelationshipAnalyzer()
        self.cluster_detector = cluster_detector or ClusterDetector()
        self.metric_calculator = metric_calculator or MetricCalculator()
        self.edge_threshold = edge_threshold
        self._logger = logging.getLogger(__name__)

    # ------------------------------------------------------------------
    # Public entry point
    # ------------------------------------------------------------------

    def build(
        self,
        members: Sequence[MemberProfile],
        relationships: Optional[Iterable[RelationshipHint]] = None,
        now: Optional[datetime] = None,
    ) -> NetworkSnapshot:
        """
        Build the full snapshot for *members*.

        Args:
            members: Member profiles; ids must be unique
            relationships: Optional hints overriding computed pair values
            now: Build timestamp (defaults to the current UTC time)

        Raises:
            ValueError: If two members share an id
        """
        members = list(members)
        self._check_unique_ids(members)
        now = now or datetime.now(timezone.utc)

        self._logger.info("Building network for %d members", len(members))

        hints = self._index_hints(members, relationships or ())
        nodes = self.create_nodes(members)
        edges = self.create_edges(members, hints, now)
        nodes = self.link_nodes(nodes, edges)

        clusters = self.cluster_detector.detect(nodes)
        metrics = self.metric_calculator.calculate(nodes, edges)

        self._logger.info(
            "Network built: %d nodes, %d edges, %d clusters (density %.3f)",
            len(nodes), len(edges), len(clusters), metrics.density,
        )

        return NetworkSnapshot(
            nodes=tuple(nodes),
            edges=tuple(edges),
            clusters=tuple(clusters),
            metrics=metrics,
            generated_at=now,
        )

    # ------------------------------------------------------------------
    # Nodes
    # ------------------------------------------------------------------

    def create_nodes(self, members: Sequence[MemberProfile]) -> List[NetworkNode]:
        n = len(members)
        nodes = []
        for index, member in enumerate(members):
            influence = self._influence_of(member)
            angle = (index / n) * 2 * math.pi
            radius = BASE_RING_RADIUS + influence * INFLUENCE_RING_SPREAD
            height = member.performance_score * 20 - 10

            nodes.append(NetworkNode(
                id=member.id,
                name=member.name,
                position=Position(
                    x=math.cos(angle) * radius,
                    y=height,
                    z=math.sin(angle) * radius,
                ),
                size=5 + influence * 10,
                color=ROLE_COLORS.get(member.role, FALLBACK_NODE_COLOR),
                influence_score=influence,
                centrality=(
                    member.centrality if member.centrality is not None else DEFAULT_CENTRALITY
                ),
                metadata=NodeMetadata(
                    role=member.role,
                    experience=member.years_experience,
                    expertise=member.expertise,
                    performance_score=member.performance_score,
                    risk_level=member.risk_level,
                ),
            ))
        return nodes

    @staticmethod
    def link_nodes(
        nodes: Sequence[NetworkNode], edges: Sequence[NetworkEdge],
    ) -> List[NetworkNode]:
        """Attach adjacency lists taken from the final edge set."""
        adjacency: Dict[str, List[str]] = {n.id: [] for n in nodes}
        for edge in edges:
            adjacency[edge.source].append(edge.target)
            adjacency[edge.target].append(edge.source)
        return [replace(n, connections=tuple(adjacency[n.id])) for n in nodes]

    # ------------------------------------------------------------------
    # Edges
    # ------------------------------------------------------------------

    def create_edges(
        self,
        members: Sequence[MemberProfile],
        hints: Optional[Dict[frozenset, RelationshipHint]] = None,
        now: Optional[datetime] = None,
    ) -> List[NetworkEdge]:
        hints = hints or {}
        now = now or datetime.now(timezone.utc)
        edges: List[NetworkEdge] = []

        for i in range(len(members)):
            for j in range(i + 1, len(members)):
                a, b = members[i], members[j]
                hint = hints.get(frozenset((a.id, b.id)))
                score = self.analyzer.analyze(a, b)
                if hint is not None:
                    score = self._apply_hint(score, hint)

                if score.strength <= self.edge_threshold:
                    self._logger.debug(
                        "Pair %s-%s below threshold (%.3f)", a.id, b.id, score.strength,
                    )
                    continue

                last = hint.last_interaction if hint and hint.last_interaction else now
                edges.append(NetworkEdge(
                    id=f"edge-{a.id}-{b.id}",
                    source=a.id,
                    target=b.id,
                    strength=score.strength,
                    type=score.type,
                    weight=score.weight,
                    metadata=EdgeMetadata(
                        interaction_frequency=score.interaction_frequency,
                        shared_projects=score.shared_projects,
                        communication_score=score.communication_score,
                        last_interaction=last,
                    ),
                ))

        return edges

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _influence_of(member: MemberProfile) -> float:
        if member.influence_score is None:
            return DEFAULT_INFLUENCE
        return member.influence_score

    @staticmethod
    def _check_unique_ids(members: Sequence[MemberProfile]) -> None:
        seen = set()
        for member in members:
            if member.id in seen:
                raise ValueError(f"Duplicate member id '{member.id}'")
            seen.add(member.id)

    def _index_hints(
        self,
        members: Sequence[MemberProfile],
        hints: Iterable[RelationshipHint],
    ) -> Dict[frozenset, RelationshipHint]:
        known = {m.id for m in members}
        index: Dict[frozenset, RelationshipHint] = {}
        for hint in hints:
            missing = [i for i in (hint.source_id, hint.target_id) if i not in known]
            if missing:
                self._logger.warning(
                    "Ignoring relationship hint %s-%s: unknown member(s) %s",
                    hint.source_id, hint.target_id, ", ".join(missing),
                )
                continue
            if hint.pair in index:
                self._logger.debug(
                    "Relationship hint %s-%s replaces an earlier one",
                    hint.source_id, hint.target_id,
                )
            index[hint.pair] = hint
        return index

    @staticmethod
    def _apply_hint(score: RelationshipScore, hint: RelationshipHint) -> RelationshipScore:
        updates: Dict[str, object] = {}
        if hint.strength is not None:
            strength = clamp(hint.strength)
            updates["strength"] = strength
            updates.update(derived_fields(strength))
        if hint.relationship_type is not None:
            updates["type"] = hint.relationship_type
        if hint.interaction_frequency is not None:
            updates["interaction_frequency"] = float(hint.interaction_frequency)
        if hint.shared_projects is not None:
            updates["shared_projects"] = int(hint.shared_projects)
        return replace(score, **updates) if updates else score


def pairs(ids: Sequence[str]) -> List[Tuple[str, str]]:
    """Every unordered pair of *ids* in input order."""
    return [(ids[i], ids[j]) for i in range(len(ids)) for j in range(i + 1, len(ids))]
