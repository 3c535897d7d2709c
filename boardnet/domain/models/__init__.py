"""
Domain Models Package

Pure domain entities with no infrastructure dependencies.
Re-exports all domain models for convenient imports.
"""

# Enums
from .enums import MemberRole, RelationshipType, InfluenceLevel, RiskPatternType, QueryIntent

# Value objects and inputs
from .value_objects import Position
from .entities import MemberProfile, RelationshipHint

# Network structure
from .network import (
    NodeMetadata, NetworkNode, EdgeMetadata, NetworkEdge, NetworkCluster,
    InfluenceDistribution, NetworkMetrics, NetworkSnapshot,
)

# Analysis results
from .analysis import (
    RiskPattern, CollaborationOpportunity, NetworkAnalysisResult,
    VisualizationFocus, QueryResponse,
)

__all__ = [
    # Enums
    "MemberRole", "RelationshipType", "InfluenceLevel", "RiskPatternType", "QueryIntent",
    # Inputs
    "Position", "MemberProfile", "RelationshipHint",
    # Network
    "NodeMetadata", "NetworkNode", "EdgeMetadata", "NetworkEdge", "NetworkCluster",
    "InfluenceDistribution", "NetworkMetrics", "NetworkSnapshot",
    # Analysis
    "RiskPattern", "CollaborationOpportunity", "NetworkAnalysisResult",
    "VisualizationFocus", "QueryResponse",
]
