"""
Domain Services Package

Pure domain logic for building and analysing board relationship networks.
These services contain the core algorithms without infrastructure dependencies.
"""

from .relationship_analyzer import RelationshipAnalyzer, RelationshipScore
from .cluster_detector import ClusterDetector
from .metric_calculator import MetricCalculator, build_graph
from .graph_builder import GraphBuilder
from .layout_engine import LayoutEngine
from .risk_detector import NetworkRiskDetector
from .query_router import NetworkQueryRouter, classify_query

__all__ = [
    # Relationship scoring
    "RelationshipAnalyzer",
    "RelationshipScore",
    # Graph construction
    "ClusterDetector",
    "MetricCalculator",
    "build_graph",
    "GraphBuilder",
    # Layout
    "LayoutEngine",
    # Reporting
    "NetworkRiskDetector",
    "NetworkQueryRouter",
    "classify_query",
]
