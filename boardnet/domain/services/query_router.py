"""
Network Query Router

Answers free-text questions about a board network by keyword routing.
The lower-cased query is checked against fixed keyword sets in priority
order; the first match wins and anything unmatched falls through to the
full network analysis.

    influencer, leader        → key influencers
    isolated, disconnected    → isolated members
    cluster, group            → clusters
    risk, problem             → risk patterns
    (anything else)           → full analysis
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, Tuple

from boardnet.domain.models.analysis.results import (
    NetworkAnalysisResult,
    QueryResponse,
    VisualizationFocus,
)
from boardnet.domain.models.enums import QueryIntent
from boardnet.domain.models.network import NetworkSnapshot
from boardnet.domain.services.risk_detector import NetworkRiskDetector

KEYWORD_ROUTES: Tuple[Tuple[QueryIntent, Tuple[str, ...]], ...] = (
    (QueryIntent.INFLUENCERS, ("influencer", "leader")),
    (QueryIntent.ISOLATION, ("isolated", "disconnected")),
    (QueryIntent.CLUSTERS, ("cluster", "group")),
    (QueryIntent.RISKS, ("risk", "problem")),
)


def classify_query(query: str) -> QueryIntent:
    normalized = query.lower()
    for intent, keywords in KEYWORD_ROUTES:
        if any(word in normalized for word in keywords):
            return intent
    return QueryIntent.FULL_ANALYSIS


class NetworkQueryRouter:
    """
    Routes queries to the risk detector.

    Args:
        detector: Source of influencer, isolation and risk findings
        analyze: Full-analysis callable used for unmatched queries, usually
                 the caching ``analyze_network`` of the application service
    """

    def __init__(
        self,
        detector: Optional[NetworkRiskDetector] = None,
        analyze: Optional[Callable[[NetworkSnapshot], NetworkAnalysisResult]] = None,
    ) -> None:
        self.detector = detector or NetworkRiskDetector()
        self.analyze = analyze or self.detector.analyze
        self._logger = logging.getLogger(__name__)

    def route(self, query: str, snapshot: NetworkSnapshot) -> QueryResponse:
        intent = classify_query(query)
        self._logger.info("Query %r routed to %s", query, intent.value)

        if intent == QueryIntent.INFLUENCERS:
            influencers = self.detector.key_influencers(snapshot.nodes)
            sentence = f"I found {len(influencers)} key influencers in the board network."
            if influencers:
                sentence += f" {influencers[0].name} has the highest influence score."
            return QueryResponse(
                intent=intent,
                result=influencers,
                natural_language_response=sentence,
                visualization_focus=VisualizationFocus(nodes=tuple(n.id for n in influencers)),
            )

        if intent == QueryIntent.ISOLATION:
            isolated = self.detector.isolated_members(snapshot.nodes, snapshot.edges)
            return QueryResponse(
                intent=intent,
                result=isolated,
                natural_language_response=(
                    f"I identified {len(isolated)} isolated members who may benefit "
                    f"from stronger network connections."
                ),
                visualization_focus=VisualizationFocus(nodes=tuple(n.id for n in isolated)),
            )

        if intent == QueryIntent.CLUSTERS:
            return QueryResponse(
                intent=intent,
                result=list(snapshot.clusters),
                natural_language_response=(
                    f"The board network contains {len(snapshot.clusters)} distinct clusters "
                    f"based on expertise and collaboration patterns."
                ),
            )

        if intent == QueryIntent.RISKS:
            risks = self.detector.risk_patterns(snapshot)
            affected = []
            for risk in risks:
                affected.extend(m for m in risk.affected_members if m not in affected)
            return QueryResponse(
                intent=intent,
                result=risks,
                natural_language_response=(
                    f"I detected {len(risks)} potential risk patterns in the network "
                    f"that may need attention."
                ),
                visualization_focus=VisualizationFocus(nodes=tuple(affected)),
            )

        return QueryResponse(
            intent=QueryIntent.FULL_ANALYSIS,
            result=self.analyze(snapshot),
            natural_language_response=(
                "Here's a comprehensive analysis of the board network including key "
                "influencers, collaboration patterns, and potential improvements."
            ),
        )
