"""
Test Configuration and Fixtures
================================

Shared pytest fixtures for testing the boardnet project.

Usage:
    pytest tests/                    # Run all tests
    pytest tests/ -v                 # Verbose output
    pytest tests/ -k "layout"        # Run only layout tests
    pytest tests/ --quick            # Quick subset
"""

from datetime import datetime, timezone
from typing import Callable, List

import pytest

from boardnet.domain.models import (
    EdgeMetadata,
    MemberProfile,
    MemberRole,
    NetworkEdge,
    NetworkNode,
    NodeMetadata,
    Position,
    RelationshipType,
)


# =============================================================================
# Custom Markers
# =============================================================================

def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line("markers", "slow: marks tests as slow")
    config.addinivalue_line("markers", "integration: marks integration tests")


def pytest_addoption(parser):
    """Add custom command line options"""
    parser.addoption(
        "--quick",
        action="store_true",
        default=False,
        help="Skip slow tests",
    )


def pytest_collection_modifyitems(config, items):
    """Skip slow tests if --quick is specified"""
    if config.getoption("--quick"):
        skip_slow = pytest.mark.skip(reason="Skipped with --quick")
        for item in items:
            if "slow" in item.keywords:
                item.add_marker(skip_slow)


# =============================================================================
# Member Fixtures
# =============================================================================

FIXED_NOW = datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def build_time() -> datetime:
    return FIXED_NOW


@pytest.fixture
def finance_trio() -> List[MemberProfile]:
    """Three identical Finance members: every pair has strength 1.0."""
    return [
        MemberProfile(
            id=f"f{i}", name=f"Finance {i}", role="member",
            expertise=("Finance",), years_experience=5, performance_score=0.8,
        )
        for i in range(1, 4)
    ]


@pytest.fixture
def opposite_pair() -> List[MemberProfile]:
    """Owner and viewer with nothing in common: strength 0."""
    return [
        MemberProfile(
            id="own", name="Olivia Owner", role="owner",
            expertise=("Finance",), years_experience=30, performance_score=1.0,
        ),
        MemberProfile(
            id="view", name="Victor Viewer", role="viewer",
            expertise=("Legal",), years_experience=0, performance_score=0.0,
        ),
    ]


@pytest.fixture
def board() -> List[MemberProfile]:
    """Realistic mixed board of six members."""
    return [
        MemberProfile(
            id="m1", name="Alice Chen", role="owner",
            expertise=("Leadership", "Strategy", "Finance"), years_experience=22,
            performance_score=0.92, influence_score=0.95, centrality=0.9,
        ),
        MemberProfile(
            id="m2", name="Bob Martinez", role="admin",
            expertise=("Finance", "Operations"), years_experience=15,
            performance_score=0.85, influence_score=0.75, centrality=0.7,
        ),
        MemberProfile(
            id="m3", name="Carol Singh", role="admin",
            expertise=("Technology", "Strategy"), years_experience=12,
            performance_score=0.8, influence_score=0.72, centrality=0.65,
        ),
        MemberProfile(
            id="m4", name="David Okafor", role="member",
            expertise=("Technology",), years_experience=8,
            performance_score=0.75, influence_score=0.5, centrality=0.45,
        ),
        MemberProfile(
            id="m5", name="Eva Novak", role="member",
            expertise=("Marketing", "Strategy"), years_experience=10,
            performance_score=0.7, influence_score=0.45, centrality=0.4,
        ),
        MemberProfile(
            id="m6", name="Frank Li", role="viewer",
            expertise=("Legal",), years_experience=3,
            performance_score=0.6, influence_score=0.2, centrality=0.1,
        ),
    ]


# =============================================================================
# Graph Element Factories
# =============================================================================

@pytest.fixture
def make_node() -> Callable[..., NetworkNode]:
    """Factory for hand-built nodes."""
    def _make(
        node_id: str,
        influence: float = 0.5,
        centrality: float = 0.5,
        role: MemberRole = MemberRole.MEMBER,
        expertise=(),
        position: Position = Position(),
    ) -> NetworkNode:
        return NetworkNode(
            id=node_id,
            name=node_id.upper(),
            position=position,
            size=5 + influence * 10,
            color="#3B82F6",
            influence_score=influence,
            centrality=centrality,
            metadata=NodeMetadata(
                role=role,
                experience=5.0,
                expertise=tuple(expertise),
                performance_score=0.7,
                risk_level=0.2,
            ),
        )
    return _make


@pytest.fixture
def make_edge() -> Callable[..., NetworkEdge]:
    """Factory for hand-built edges."""
    def _make(
        source: str,
        target: str,
        strength: float = 0.8,
        rel_type: RelationshipType = RelationshipType.COLLABORATION,
    ) -> NetworkEdge:
        return NetworkEdge(
            id=f"edge-{source}-{target}",
            source=source,
            target=target,
            strength=strength,
            type=rel_type,
            weight=strength * 10,
            metadata=EdgeMetadata(
                interaction_frequency=strength * 100,
                shared_projects=int(strength * 5),
                communication_score=strength * 0.9 + 0.1,
                last_interaction=FIXED_NOW,
            ),
        )
    return _make
