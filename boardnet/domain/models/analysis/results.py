"""
Analysis Result Domain Models

Read-only views derived from a NetworkSnapshot by the risk detector and the
query router. NetworkAnalysisResult instances are cached per snapshot
signature, so they are frozen.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional, Tuple

from boardnet.domain.models.enums import QueryIntent, RiskPatternType
from boardnet.domain.models.network import NetworkEdge, NetworkNode, NetworkSnapshot


@dataclass(frozen=True)
class RiskPattern:
    """A named structural risk with remediation guidance."""
    type: RiskPatternType
    description: str
    affected_members: Tuple[str, ...]
    risk_level: float
    recommendations: Tuple[str, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type.value,
            "description": self.description,
            "affected_members": list(self.affected_members),
            "risk_level": self.risk_level,
            "recommendations": list(self.recommendations),
        }


@dataclass(frozen=True)
class CollaborationOpportunity:
    source: str
    target: str
    potential: float

    def to_dict(self) -> Dict[str, Any]:
        return {"source": self.source, "target": self.target, "potential": self.potential}


@dataclass(frozen=True)
class NetworkAnalysisResult:
    key_influencers: Tuple[NetworkNode, ...] = ()
    isolated_members: Tuple[NetworkNode, ...] = ()
    communication_bridges: Tuple[NetworkNode, ...] = ()
    potential_conflicts: Tuple[NetworkEdge, ...] = ()
    collaboration_opportunities: Tuple[CollaborationOpportunity, ...] = ()
    risk_patterns: Tuple[RiskPattern, ...] = ()

    @property
    def has_risks(self) -> bool:
        return bool(self.risk_patterns)

    def rebound_to(self, snapshot: NetworkSnapshot) -> NetworkAnalysisResult:
        """
        Copy whose nodes and edges are the ones held by *snapshot*.

        Findings are matched by node id and by edge pair, so a result computed
        for one snapshot reports the names, sizes and edge metadata of another
        snapshot with the same signature.
        """
        nodes = {n.id: n for n in snapshot.nodes}
        edges = {e.pair: e for e in snapshot.edges}
        return replace(
            self,
            key_influencers=tuple(nodes[n.id] for n in self.key_influencers),
            isolated_members=tuple(nodes[n.id] for n in self.isolated_members),
            communication_bridges=tuple(nodes[n.id] for n in self.communication_bridges),
            potential_conflicts=tuple(edges[e.pair] for e in self.potential_conflicts),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "key_influencers": [n.to_dict() for n in self.key_influencers],
            "isolated_members": [n.to_dict() for n in self.isolated_members],
            "communication_bridges": [n.to_dict() for n in self.communication_bridges],
            "potential_conflicts": [e.to_dict() for e in self.potential_conflicts],
            "collaboration_opportunities": [
                o.to_dict() for o in self.collaboration_opportunities
            ],
            "risk_patterns": [r.to_dict() for r in self.risk_patterns],
        }


@dataclass(frozen=True)
class VisualizationFocus:
    """Node and edge ids a renderer should highlight for a query answer."""
    nodes: Tuple[str, ...] = ()
    edges: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, List[str]]:
        return {"nodes": list(self.nodes), "edges": list(self.edges)}


@dataclass
class QueryResponse:
    intent: QueryIntent
    result: Any
    natural_language_response: str
    visualization_focus: Optional[VisualizationFocus] = None

    def to_dict(self) -> Dict[str, Any]:
        result = self.result
        if isinstance(result, (list, tuple)):
            result = [r.to_dict() if hasattr(r, "to_dict") else r for r in result]
        elif hasattr(result, "to_dict"):
            result = result.to_dict()
        payload: Dict[str, Any] = {
            "intent": self.intent.value,
            "result": result,
            "natural_language_response": self.natural_language_response,
        }
        if self.visualization_focus is not None:
            payload["visualization_focus"] = self.visualization_focus.to_dict()
        return payload
