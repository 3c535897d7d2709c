"""
Network Domain Models

Graph structure produced by one build call:

    NetworkNode     one per member, 3D positioned, sized and coloured
    NetworkEdge     undirected weighted relationship above the threshold
    NetworkCluster  expertise or role grouping with centroid and radius
    NetworkMetrics  graph-level statistics
    NetworkSnapshot the immutable {nodes, edges, clusters, metrics} aggregate
"""

from __future__ import annotations

import hashlib
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any, Dict, Iterable, Optional, Tuple

from .enums import InfluenceLevel, MemberRole, RelationshipType
from .value_objects import Position


@dataclass(frozen=True)
class NodeMetadata:
    role: MemberRole
    experience: float
    expertise: Tuple[str, ...]
    performance_score: float
    risk_level: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "role": self.role.value,
            "experience": self.experience,
            "expertise": list(self.expertise),
            "performance_score": self.performance_score,
            "risk_level": self.risk_level,
        }


@dataclass(frozen=True)
class NetworkNode:
    """Graph vertex for one board member."""
    id: str
    name: str
    position: Position
    size: float
    color: str
    influence_score: float
    centrality: float
    metadata: NodeMetadata
    connections: Tuple[str, ...] = ()

    def moved_to(self, position: Position) -> NetworkNode:
        return replace(self, position=position)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "position": self.position.to_dict(),
            "size": self.size,
            "color": self.color,
            "influence_score": self.influence_score,
            "centrality": self.centrality,
            "connections": list(self.connections),
            "metadata": self.metadata.to_dict(),
        }


@dataclass(frozen=True)
class EdgeMetadata:
    interaction_frequency: float
    shared_projects: int
    communication_score: float
    last_interaction: datetime

    def to_dict(self) -> Dict[str, Any]:
        return {
            "interaction_frequency": self.interaction_frequency,
            "shared_projects": self.shared_projects,
            "communication_score": self.communication_score,
            "last_interaction": self.last_interaction.isoformat(),
        }


@dataclass(frozen=True)
class NetworkEdge:
    """Undirected relationship between two members."""
    id: str
    source: str
    target: str
    strength: float
    type: RelationshipType
    weight: float
    metadata: EdgeMetadata

    @property
    def pair(self) -> frozenset:
        return frozenset((self.source, self.target))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "source": self.source,
            "target": self.target,
            "strength": self.strength,
            "type": self.type.value,
            "weight": self.weight,
            "metadata": self.metadata.to_dict(),
        }


@dataclass(frozen=True)
class NetworkCluster:
    id: str
    name: str
    members: Tuple[str, ...]
    center: Position
    radius: float
    color: str
    influence_level: InfluenceLevel

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "members": list(self.members),
            "center": self.center.to_dict(),
            "radius": self.radius,
            "color": self.color,
            "influence_level": self.influence_level.value,
        }


@dataclass(frozen=True)
class InfluenceDistribution:
    """Share of total influence held by the top 20 % of members."""
    concentrated: float = 0.0
    distributed: float = 1.0
    balanced: float = 0.0

    def to_dict(self) -> Dict[str, float]:
        return {
            "concentrated": self.concentrated,
            "distributed": self.distributed,
            "balanced": self.balanced,
        }


@dataclass(frozen=True)
class NetworkMetrics:
    density: float = 0.0
    clustering_coefficient: float = 0.0
    average_path_length: float = 0.0
    centralization: float = 0.0
    modularity: float = 0.0
    influence_distribution: InfluenceDistribution = field(default_factory=InfluenceDistribution)
    community_count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "density": self.density,
            "clustering_coefficient": self.clustering_coefficient,
            "average_path_length": self.average_path_length,
            "centralization": self.centralization,
            "modularity": self.modularity,
            "influence_distribution": self.influence_distribution.to_dict(),
            "community_count": self.community_count,
        }


@dataclass(frozen=True)
class NetworkSnapshot:
    """
    Immutable result of one graph build.

    Layout passes never touch a snapshot; they return new node tuples which
    the caller may fold into a fresh snapshot with ``with_positions``.
    """
    nodes: Tuple[NetworkNode, ...] = ()
    edges: Tuple[NetworkEdge, ...] = ()
    clusters: Tuple[NetworkCluster, ...] = ()
    metrics: NetworkMetrics = field(default_factory=NetworkMetrics)
    generated_at: Optional[datetime] = field(default=None, compare=False)

    # -- convenience queries --------------------------------------------------

    def get_node(self, node_id: str) -> Optional[NetworkNode]:
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None

    def get_edge(self, a: str, b: str) -> Optional[NetworkEdge]:
        pair = frozenset((a, b))
        for edge in self.edges:
            if edge.pair == pair:
                return edge
        return None

    def degrees(self) -> Dict[str, int]:
        """Incident edge count per node id (zero for unconnected nodes)."""
        return degree_map(self.nodes, self.edges)

    def with_positions(self, nodes: Iterable[NetworkNode]) -> NetworkSnapshot:
        """
        Return a new snapshot whose node positions come from *nodes*.

        Nodes missing from *nodes* keep their position. Cluster centres and
        radii still describe the build-time placement.
        """
        by_id = {n.id: n.position for n in nodes}
        moved = tuple(
            node.moved_to(by_id[node.id]) if node.id in by_id else node
            for node in self.nodes
        )
        return replace(self, nodes=moved)

    @property
    def signature(self) -> str:
        """
        Stable content digest used as the analysis cache key.

        Covers every input of the analysis: node identity, scores, metadata and
        position, every edge with its strength and type, and cluster
        membership. Names, sizes, colours and edge metadata are left out; a
        cached result is rebound to the analysed snapshot with
        ``NetworkAnalysisResult.rebound_to`` before it is returned.
        """
        digest = hashlib.sha256()
        for node in sorted(self.nodes, key=lambda n: n.id):
            p = node.position
            digest.update(
                (
                    f"N|{node.id}|{node.influence_score!r}|{node.centrality!r}|"
                    f"{node.metadata.role.value}|{','.join(sorted(node.metadata.expertise))}|"
                    f"{node.metadata.performance_score!r}|{node.metadata.risk_level!r}|"
                    f"{p.x!r},{p.y!r},{p.z!r}\n"
                ).encode("utf-8")
            )
        for edge in sorted(self.edges, key=lambda e: tuple(sorted(e.pair))):
            a, b = sorted(edge.pair)
            digest.update(f"E|{a}|{b}|{edge.strength!r}|{edge.type.value}\n".encode("utf-8"))
        for cluster in sorted(self.clusters, key=lambda c: c.id):
            digest.update(f"C|{cluster.id}|{','.join(cluster.members)}\n".encode("utf-8"))
        return digest.hexdigest()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "generated_at": self.generated_at.isoformat() if self.generated_at else None,
            "nodes": [n.to_dict() for n in self.nodes],
            "edges": [e.to_dict() for e in self.edges],
            "clusters": [c.to_dict() for c in self.clusters],
            "metrics": self.metrics.to_dict(),
        }


def node_index(nodes: Iterable[NetworkNode]) -> Dict[str, NetworkNode]:
    return {n.id: n for n in nodes}


def degree_map(nodes: Iterable[NetworkNode], edges: Iterable[NetworkEdge]) -> Dict[str, int]:
    """Incident edge count per node id (zero for unconnected nodes)."""
    counts = {n.id: 0 for n in nodes}
    for edge in edges:
        counts[edge.source] = counts.get(edge.source, 0) + 1
        counts[edge.target] = counts.get(edge.target, 0) + 1
    return counts
