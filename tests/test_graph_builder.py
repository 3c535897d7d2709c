"""
Unit Tests for the graph builder

Tests for:
    - Node creation (placement, size, colour, defaults)
    - Edge creation (threshold, uniqueness, ids, metadata)
    - Adjacency derived from the edge set
    - Relationship hints
    - Input validation
"""

import math
from datetime import datetime, timezone

import pytest

from boardnet.domain.models import MemberProfile, RelationshipHint, RelationshipType
from boardnet.domain.services import GraphBuilder
from boardnet.domain.services.graph_builder import ROLE_COLORS


@pytest.fixture
def builder():
    return GraphBuilder()


# =============================================================================
# Scenario Tests
# =============================================================================

class TestScenarios:

    def test_identical_trio_is_fully_connected(self, builder, finance_trio, build_time):
        snapshot = builder.build(finance_trio, now=build_time)

        assert len(snapshot.edges) == 3
        assert snapshot.metrics.density == pytest.approx(1.0)
        assert all(e.type == RelationshipType.EXPERTISE for e in snapshot.edges)

        expertise = [c for c in snapshot.clusters if c.id == "cluster-Finance"]
        assert len(expertise) == 1
        assert expertise[0].members == ("f1", "f2", "f3")

    def test_opposite_pair_has_no_edges(self, builder, opposite_pair):
        snapshot = builder.build(opposite_pair)

        assert snapshot.edges == ()
        assert snapshot.metrics.density == 0.0
        assert all(n.connections == () for n in snapshot.nodes)

    def test_empty_input(self, builder):
        snapshot = builder.build([])

        assert snapshot.nodes == ()
        assert snapshot.edges == ()
        assert snapshot.clusters == ()
        assert snapshot.metrics.density == 0.0


# =============================================================================
# Node Tests
# =============================================================================

class TestNodes:

    def test_ring_placement(self, builder, board):
        nodes = builder.create_nodes(board)
        first = nodes[0]
        radius = 50 + 30 * 0.95

        assert first.position.x == pytest.approx(radius)
        assert first.position.z == pytest.approx(0.0)
        assert first.position.y == pytest.approx(0.92 * 20 - 10)

        second = nodes[1]
        angle = 2 * math.pi / len(board)
        r2 = 50 + 30 * 0.75
        assert second.position.x == pytest.approx(math.cos(angle) * r2)
        assert second.position.z == pytest.approx(math.sin(angle) * r2)

    def test_size_and_colour(self, builder, board):
        nodes = builder.create_nodes(board)

        assert nodes[0].size == pytest.approx(5 + 0.95 * 10)
        assert nodes[0].color == ROLE_COLORS[board[0].role] == "#8B5CF6"
        assert nodes[5].color == "#10B981"

    def test_lookup_by_id(self, builder, board):
        snapshot = builder.build(board)
        assert snapshot.get_node("m3").name == "Carol Singh"
        assert snapshot.get_node("nobody") is None

    def test_missing_scores_use_defaults(self, builder):
        nodes = builder.create_nodes([MemberProfile(id="x", name="X")])

        assert nodes[0].influence_score == 0.5
        assert nodes[0].centrality == 0.5
        assert nodes[0].metadata.performance_score == 0.7
        assert nodes[0].metadata.risk_level == 0.2

    def test_explicit_zero_influence_is_kept(self, builder):
        nodes = builder.create_nodes([MemberProfile(id="x", name="X", influence_score=0.0)])
        assert nodes[0].influence_score == 0.0
        assert nodes[0].size == 5


# =============================================================================
# Edge Tests
# =============================================================================

class TestEdges:

    def test_threshold_and_uniqueness(self, builder, board):
        snapshot = builder.build(board)

        pairs = [e.pair for e in snapshot.edges]
        assert len(pairs) == len(set(pairs))
        assert all(e.strength > 0.3 for e in snapshot.edges)
        assert all(e.source != e.target for e in snapshot.edges)

    def test_edge_ids_and_metadata(self, builder, finance_trio, build_time):
        snapshot = builder.build(finance_trio, now=build_time)
        edge = snapshot.get_edge("f1", "f2")

        assert edge.id == "edge-f1-f2"
        assert edge.weight == pytest.approx(edge.strength * 10)
        assert edge.metadata.interaction_frequency == pytest.approx(edge.strength * 100)
        assert edge.metadata.last_interaction == build_time
        assert snapshot.generated_at == build_time

    def test_custom_threshold(self, board):
        strict = GraphBuilder(edge_threshold=0.9).build(board)
        loose = GraphBuilder(edge_threshold=0.0).build(board)
        assert len(strict.edges) <= len(loose.edges)
        assert all(e.strength > 0.9 for e in strict.edges)

    def test_connections_match_edges(self, builder, board):
        snapshot = builder.build(board)
        degrees = snapshot.degrees()

        for node in snapshot.nodes:
            assert len(node.connections) == degrees[node.id]
            for other in node.connections:
                assert snapshot.get_edge(node.id, other) is not None


# =============================================================================
# Relationship Hint Tests
# =============================================================================

class TestRelationshipHints:

    def test_hint_can_remove_edge(self, builder, finance_trio):
        hint = RelationshipHint(source_id="f2", target_id="f1", strength=0.1)
        snapshot = builder.build(finance_trio, [hint])

        assert snapshot.get_edge("f1", "f2") is None
        assert len(snapshot.edges) == 2

    def test_hint_can_create_edge(self, builder, opposite_pair):
        last = datetime(2023, 6, 1, tzinfo=timezone.utc)
        hint = RelationshipHint(
            source_id="own", target_id="view", strength=0.9,
            relationship_type="reporting", shared_projects=7, last_interaction=last,
        )
        snapshot = builder.build(opposite_pair, [hint])
        edge = snapshot.get_edge("own", "view")

        assert edge is not None
        assert edge.strength == pytest.approx(0.9)
        assert edge.weight == pytest.approx(9.0)
        assert edge.type == RelationshipType.REPORTING
        assert edge.metadata.shared_projects == 7
        assert edge.metadata.last_interaction == last

    def test_type_only_hint_keeps_strength(self, builder, finance_trio):
        hint = RelationshipHint(source_id="f1", target_id="f3", relationship_type="conflict")
        snapshot = builder.build(finance_trio, [hint])
        edge = snapshot.get_edge("f1", "f3")

        assert edge.type == RelationshipType.CONFLICT
        assert edge.strength == pytest.approx(1.0)

    def test_later_hint_wins(self, builder, finance_trio):
        hints = [
            RelationshipHint(source_id="f1", target_id="f2", strength=0.1),
            RelationshipHint(source_id="f2", target_id="f1", strength=0.6),
        ]
        snapshot = builder.build(finance_trio, hints)
        assert snapshot.get_edge("f1", "f2").strength == pytest.approx(0.6)

    def test_unknown_member_hint_is_ignored(self, builder, finance_trio, caplog):
        hint = RelationshipHint(source_id="f1", target_id="ghost", strength=0.0)
        snapshot = builder.build(finance_trio, [hint])

        assert len(snapshot.edges) == 3
        assert "ghost" in caplog.text

    def test_self_link_hint_rejected(self):
        with pytest.raises(ValueError):
            RelationshipHint(source_id="f1", target_id="f1")


# =============================================================================
# Validation Tests
# =============================================================================

class TestValidation:

    def test_duplicate_ids_rejected(self, builder, finance_trio):
        with pytest.raises(ValueError, match="Duplicate member id"):
            builder.build(finance_trio + [finance_trio[0]])

    def test_unknown_role_rejected(self):
        with pytest.raises(ValueError, match="Unknown member role"):
            MemberProfile(id="x", name="X", role="chair")

    @pytest.mark.parametrize("field", ["performance_score", "risk_level", "influence_score"])
    def test_out_of_range_scores_rejected(self, field):
        with pytest.raises(ValueError):
            MemberProfile(id="x", name="X", **{field: 1.5})

    def test_negative_experience_rejected(self):
        with pytest.raises(ValueError):
            MemberProfile(id="x", name="X", years_experience=-1)
