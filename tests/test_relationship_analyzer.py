"""
Unit Tests for the relationship analyzer

Tests for:
    - Signal computation (skill, role, experience, performance)
    - Strength range and symmetry
    - Relationship type classification order
"""

import itertools

import pytest

from boardnet.domain.models import MemberProfile, RelationshipType
from boardnet.domain.services import RelationshipAnalyzer
from boardnet.domain.services.relationship_analyzer import derived_fields


@pytest.fixture
def analyzer():
    return RelationshipAnalyzer()


# =============================================================================
# Scenario Tests
# =============================================================================

class TestScenarios:
    """Hand-computed pairs."""

    def test_identical_members_have_full_strength(self, analyzer, finance_trio):
        a, b, _ = finance_trio
        score = analyzer.analyze(a, b)

        assert score.strength == pytest.approx(1.0)
        assert score.skill_similarity == 1.0
        assert score.role_distance == 0.0
        assert score.type == RelationshipType.EXPERTISE

    def test_opposite_members_have_zero_strength(self, analyzer, opposite_pair):
        owner, viewer = opposite_pair
        score = analyzer.analyze(owner, viewer)

        assert score.strength == pytest.approx(0.0)
        assert score.role_distance == pytest.approx(1.0)
        assert score.experience_compatibility == pytest.approx(0.0)
        assert score.performance_alignment == pytest.approx(0.0)
        # Role distance is checked before performance alignment
        assert score.type == RelationshipType.MENTORSHIP

    def test_partial_overlap(self, analyzer):
        a = MemberProfile(id="a", name="A", role="admin",
                          expertise=("Finance", "Strategy"), years_experience=10,
                          performance_score=0.8)
        b = MemberProfile(id="b", name="B", role="member",
                          expertise=("Finance",), years_experience=16,
                          performance_score=0.6)
        score = analyzer.analyze(a, b)

        # 0.3·0.5 + 0.2·(1 − 1/3) + 0.2·0.8 + 0.3·0.8
        expected = 0.15 + 0.2 * (2 / 3) + 0.16 + 0.24
        assert score.strength == pytest.approx(expected)
        assert score.type == RelationshipType.COLLABORATION

    def test_large_experience_gap_is_clamped(self, analyzer):
        a = MemberProfile(id="a", name="A", years_experience=0)
        b = MemberProfile(id="b", name="B", years_experience=60)
        score = analyzer.analyze(a, b)

        assert score.experience_compatibility == pytest.approx(-1.0)
        assert 0.0 <= score.strength <= 1.0


# =============================================================================
# Classification Tests
# =============================================================================

class TestClassification:
    """First matching rule wins."""

    def test_expertise_beats_mentorship(self, analyzer):
        assert analyzer.classify(0.8, 1.0, 0.0) == RelationshipType.EXPERTISE

    def test_mentorship_beats_conflict(self, analyzer):
        assert analyzer.classify(0.0, 0.7, 0.1) == RelationshipType.MENTORSHIP

    def test_conflict_on_low_alignment(self, analyzer):
        assert analyzer.classify(0.0, 0.0, 0.2) == RelationshipType.CONFLICT

    def test_collaboration_default(self, analyzer):
        assert analyzer.classify(0.5, 0.3, 0.9) == RelationshipType.COLLABORATION

    def test_thresholds_are_strict(self, analyzer):
        assert analyzer.classify(0.7, 0.5, 0.3) == RelationshipType.COLLABORATION


# =============================================================================
# Property Tests
# =============================================================================

class TestProperties:

    def test_symmetric_and_bounded(self, analyzer, board, opposite_pair):
        members = board + opposite_pair
        for a, b in itertools.permutations(members, 2):
            forward = analyzer.analyze(a, b)
            backward = analyzer.analyze(b, a)
            assert 0.0 <= forward.strength <= 1.0
            assert forward == backward

    def test_derived_fields_follow_strength(self, analyzer, board):
        score = analyzer.analyze(board[0], board[1])
        derived = derived_fields(score.strength)

        assert score.weight == pytest.approx(score.strength * 10)
        assert score.interaction_frequency == pytest.approx(score.strength * 100)
        assert score.shared_projects == derived["shared_projects"]
        assert score.communication_score == pytest.approx(score.strength * 0.9 + 0.1)

    def test_empty_expertise_has_zero_similarity(self, analyzer):
        a = MemberProfile(id="a", name="A")
        b = MemberProfile(id="b", name="B")
        assert analyzer.skill_similarity(a, b) == 0.0
