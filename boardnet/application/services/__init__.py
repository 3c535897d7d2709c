"""
Application Services Package

Use case implementations and supporting services.
"""

from .analysis_cache import AnalysisCache, CacheStats
from .display_service import Colors, DisplayService
from .network_service import NetworkVisualizationService

__all__ = [
    "AnalysisCache",
    "CacheStats",
    "Colors",
    "DisplayService",
    "NetworkVisualizationService",
]
