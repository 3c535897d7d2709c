"""
boardnet - Board Relationship Network Analysis

Builds a weighted 3D relationship network over board members, computes
graph metrics, detects clusters, lays the network out for rendering and
reports structural risks.

Usage:
    from boardnet import NetworkVisualizationService, MemberProfile

    service = NetworkVisualizationService()
    snapshot = service.generate_network_data(members)
    analysis = service.analyze_network(snapshot)
    nodes = service.calculate_optimal_layout(snapshot, "hierarchical")
"""

from boardnet.domain.models import MemberProfile, RelationshipHint, NetworkSnapshot
from boardnet.application.services.network_service import NetworkVisualizationService

__all__ = [
    "MemberProfile",
    "RelationshipHint",
    "NetworkSnapshot",
    "NetworkVisualizationService",
]

__version__ = "1.0.0"
