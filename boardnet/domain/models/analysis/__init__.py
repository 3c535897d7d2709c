"""
Analysis Models Package

Results produced by the risk detector and the query router.
"""

from .results import (
    CollaborationOpportunity,
    NetworkAnalysisResult,
    QueryResponse,
    RiskPattern,
    VisualizationFocus,
)

__all__ = [
    "CollaborationOpportunity",
    "NetworkAnalysisResult",
    "QueryResponse",
    "RiskPattern",
    "VisualizationFocus",
]
