"""
Network Risk Detector

Derives the read-only analysis view of a board network:

    Key influencers             influence > 0.7, top 5 by influence
    Isolated members            at most ``isolation_max_degree`` incident edges
    Communication bridges       ≥ 3 incident edges and centrality > 0.6
    Potential conflicts         conflict-typed or weak edges
    Collaboration opportunities unconnected pairs with high potential, top 10

Risk Patterns:
    SINGLE_POINT_FAILURE: exactly one member with influence > 0.8
    ISOLATION:            any isolated members
    OVER_DEPENDENCE:      top 20 % of members hold more than half the influence
    ECHO_CHAMBER:         at least 75 % of relationships are expertise-typed

Collaboration potential for an unconnected pair:
    0.3·shared_tags + 0.35·(influenceA + influenceB) + 0.35·|A △ B| / |A ∪ B|
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

from boardnet.domain.models.analysis.results import (
    CollaborationOpportunity,
    NetworkAnalysisResult,
    RiskPattern,
)
from boardnet.domain.models.enums import RelationshipType, RiskPatternType
from boardnet.domain.models.network import (
    NetworkEdge,
    NetworkNode,
    NetworkSnapshot,
    degree_map,
)
from boardnet.domain.services.graph_builder import pairs
from boardnet.domain.services.metric_calculator import top_influence_members

INFLUENCER_THRESHOLD = 0.7
MAX_INFLUENCERS = 5
BRIDGE_MIN_DEGREE = 3
BRIDGE_MIN_CENTRALITY = 0.6
WEAK_EDGE_THRESHOLD = 0.3
OPPORTUNITY_THRESHOLD = 0.6
MAX_OPPORTUNITIES = 10
SPOF_INFLUENCE_THRESHOLD = 0.8
OVER_DEPENDENCE_SHARE = 0.5
ECHO_CHAMBER_SHARE = 0.75
MIN_PATTERN_MEMBERS = 3


class NetworkRiskDetector:
    """
    Computes influencers, isolation, bridges, conflicts, opportunities and
    named risk patterns for a snapshot.

    Example:
        >>> detector = NetworkRiskDetector()
        >>> result = detector.analyze(snapshot)
        >>> [p.type for p in result.risk_patterns]
    """

    def __init__(self, isolation_max_degree: int = 1) -> None:
        self.isolation_max_degree = isolation_max_degree
        self._logger = logging.getLogger(__name__)

    def analyze(self, snapshot: NetworkSnapshot) -> NetworkAnalysisResult:
        self._logger.info(
            "Analyzing network: %d nodes, %d edges", len(snapshot.nodes), len(snapshot.edges),
        )
        result = NetworkAnalysisResult(
            key_influencers=tuple(self.key_influencers(snapshot.nodes)),
            isolated_members=tuple(self.isolated_members(snapshot.nodes, snapshot.edges)),
            communication_bridges=tuple(
                self.communication_bridges(snapshot.nodes, snapshot.edges)
            ),
            potential_conflicts=tuple(self.potential_conflicts(snapshot.edges)),
            collaboration_opportunities=tuple(self.collaboration_opportunities(snapshot)),
            risk_patterns=tuple(self.risk_patterns(snapshot)),
        )
        self._logger.info(
            "Analysis complete: %d influencers, %d isolated, %d risk patterns",
            len(result.key_influencers), len(result.isolated_members), len(result.risk_patterns),
        )
        return result

    # ------------------------------------------------------------------
    # Member-level findings
    # ------------------------------------------------------------------

    @staticmethod
    def key_influencers(nodes: Sequence[NetworkNode]) -> List[NetworkNode]:
        strong = [n for n in nodes if n.influence_score > INFLUENCER_THRESHOLD]
        strong.sort(key=lambda n: n.influence_score, reverse=True)
        return strong[:MAX_INFLUENCERS]

    def isolated_members(
        self, nodes: Sequence[NetworkNode], edges: Sequence[NetworkEdge],
    ) -> List[NetworkNode]:
        degrees = degree_map(nodes, edges)
        return [n for n in nodes if degrees[n.id] <= self.isolation_max_degree]

    @staticmethod
    def communication_bridges(
        nodes: Sequence[NetworkNode], edges: Sequence[NetworkEdge],
    ) -> List[NetworkNode]:
        degrees = degree_map(nodes, edges)
        return [
            n for n in nodes
            if degrees[n.id] >= BRIDGE_MIN_DEGREE and n.centrality > BRIDGE_MIN_CENTRALITY
        ]

    @staticmethod
    def potential_conflicts(edges: Sequence[NetworkEdge]) -> List[NetworkEdge]:
        # Built edges always exceed the weak threshold; caller-assembled
        # snapshots may not.
        return [
            e for e in edges
            if e.type == RelationshipType.CONFLICT or e.strength < WEAK_EDGE_THRESHOLD
        ]

    @staticmethod
    def collaboration_potential(a: NetworkNode, b: NetworkNode) -> float:
        tags_a, tags_b = set(a.metadata.expertise), set(b.metadata.expertise)
        union = tags_a | tags_b
        complementarity = len(tags_a ^ tags_b) / len(union) if union else 0.0
        return (
            len(tags_a & tags_b) * 0.3
            + (a.influence_score + b.influence_score) * 0.35
            + complementarity * 0.35
        )

    def collaboration_opportunities(
        self, snapshot: NetworkSnapshot,
    ) -> List[CollaborationOpportunity]:
        connected = {e.pair for e in snapshot.edges}
        nodes = {n.id: n for n in snapshot.nodes}

        found = []
        for a_id, b_id in pairs([n.id for n in snapshot.nodes]):
            if frozenset((a_id, b_id)) in connected:
                continue
            potential = self.collaboration_potential(nodes[a_id], nodes[b_id])
            if potential > OPPORTUNITY_THRESHOLD:
                found.append(CollaborationOpportunity(a_id, b_id, potential))

        found.sort(key=lambda o: (-o.potential, o.source, o.target))
        return found[:MAX_OPPORTUNITIES]

    # ------------------------------------------------------------------
    # Risk patterns
    # ------------------------------------------------------------------

    def risk_patterns(self, snapshot: NetworkSnapshot) -> List[RiskPattern]:
        risks: List[RiskPattern] = []

        critical = [n for n in snapshot.nodes if n.influence_score > SPOF_INFLUENCE_THRESHOLD]
        if len(critical) == 1:
            risks.append(RiskPattern(
                type=RiskPatternType.SINGLE_POINT_FAILURE,
                description="Board depends heavily on a single influential member",
                affected_members=(critical[0].id,),
                risk_level=0.8,
                recommendations=(
                    "Develop succession planning",
                    "Distribute leadership responsibilities",
                    "Identify backup influencers",
                ),
            ))

        isolated = self.isolated_members(snapshot.nodes, snapshot.edges)
        if isolated:
            risks.append(RiskPattern(
                type=RiskPatternType.ISOLATION,
                description="Some members are poorly connected to the network",
                affected_members=tuple(n.id for n in isolated),
                risk_level=0.6,
                recommendations=(
                    "Facilitate introductions",
                    "Create cross-functional projects",
                    "Improve onboarding process",
                ),
            ))

        over_dependence = self._over_dependence(snapshot)
        if over_dependence is not None:
            risks.append(over_dependence)

        echo_chamber = self._echo_chamber(snapshot)
        if echo_chamber is not None:
            risks.append(echo_chamber)

        for risk in risks:
            self._logger.debug(
                "Risk pattern %s affects %s", risk.type.value, ", ".join(risk.affected_members),
            )
        return risks

    def _over_dependence(self, snapshot: NetworkSnapshot) -> Optional[RiskPattern]:
        if len(snapshot.nodes) < MIN_PATTERN_MEMBERS:
            return None
        share = snapshot.metrics.influence_distribution.concentrated
        if share <= OVER_DEPENDENCE_SHARE:
            return None
        return RiskPattern(
            type=RiskPatternType.OVER_DEPENDENCE,
            description=(
                f"The most influential fifth of the board holds {share:.0%} of total influence"
            ),
            affected_members=top_influence_members(snapshot.nodes),
            risk_level=0.7,
            recommendations=(
                "Rotate committee chairs",
                "Delegate decision rights to committees",
                "Broaden agenda ownership",
            ),
        )

    def _echo_chamber(self, snapshot: NetworkSnapshot) -> Optional[RiskPattern]:
        edges = snapshot.edges
        if len(snapshot.nodes) < MIN_PATTERN_MEMBERS or len(edges) < MIN_PATTERN_MEMBERS:
            return None
        expertise_edges = [e for e in edges if e.type == RelationshipType.EXPERTISE]
        if len(expertise_edges) / len(edges) < ECHO_CHAMBER_SHARE:
            return None

        involved = {i for e in expertise_edges for i in (e.source, e.target)}
        return RiskPattern(
            type=RiskPatternType.ECHO_CHAMBER,
            description="Relationships are dominated by members with the same expertise",
            affected_members=_in_node_order(snapshot.nodes, involved),
            risk_level=0.5,
            recommendations=(
                "Recruit members with complementary expertise",
                "Invite external advisors to key discussions",
                "Assign devil's advocate roles in reviews",
            ),
        )


def _in_node_order(nodes: Sequence[NetworkNode], ids: set) -> Tuple[str, ...]:
    return tuple(n.id for n in nodes if n.id in ids)
