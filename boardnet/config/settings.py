"""
Application Settings

Environment configuration for the application.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings from environment."""

    # Graph construction
    edge_strength_threshold: float = 0.3
    community_seed: int = 42

    # Analysis
    analysis_cache_size: int = 128
    isolation_max_degree: int = 1

    # Layout
    layout_iterations: int = 100

    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from environment variables."""
        return cls(
            edge_strength_threshold=float(os.getenv("BOARDNET_EDGE_THRESHOLD", "0.3")),
            community_seed=int(os.getenv("BOARDNET_COMMUNITY_SEED", "42")),
            analysis_cache_size=int(os.getenv("BOARDNET_CACHE_SIZE", "128")),
            isolation_max_degree=int(os.getenv("BOARDNET_ISOLATION_MAX_DEGREE", "1")),
            layout_iterations=int(os.getenv("BOARDNET_LAYOUT_ITERATIONS", "100")),
            log_level=os.getenv("BOARDNET_LOG_LEVEL", "INFO").upper(),
        )
