"""
Unit Tests for the layout engine

Tests for:
    - Force-directed determinism and snapshot immutability
    - Circular, hierarchical and cluster geometry
    - Layout name resolution
"""

import math

import pytest

from boardnet.domain.config.layouts import ForceLayoutConfig, LayoutType, list_layouts
from boardnet.domain.models import MemberRole, Position
from boardnet.domain.services import GraphBuilder, LayoutEngine


@pytest.fixture
def engine():
    return LayoutEngine()


@pytest.fixture
def board_snapshot(board, build_time):
    return GraphBuilder().build(board, now=build_time)


def _radius_xz(position: Position) -> float:
    return math.hypot(position.x, position.z)


# =============================================================================
# Force-directed
# =============================================================================

class TestForceDirected:

    def test_deterministic(self, engine, board_snapshot):
        first = engine.calculate(board_snapshot, "force-directed")
        second = LayoutEngine().calculate(board_snapshot, "force-directed")

        assert [n.position for n in first] == [n.position for n in second]

    def test_snapshot_is_not_mutated(self, engine, board_snapshot):
        before = [n.position for n in board_snapshot.nodes]
        moved = engine.force_directed(board_snapshot)

        assert [n.position for n in board_snapshot.nodes] == before
        assert [n.position for n in moved] != before
        assert [n.id for n in moved] == [n.id for n in board_snapshot.nodes]

    def test_displacement_is_capped(self, board_snapshot):
        cfg = ForceLayoutConfig(iterations=1)
        moved = LayoutEngine(cfg).force_directed(board_snapshot)

        for old, new in zip(board_snapshot.nodes, moved):
            step = old.position.distance_to(new.position)
            assert step <= cfg.max_displacement * cfg.damping + 1e-9

    def test_coincident_nodes_stay_finite(self, engine, make_node, make_edge):
        from boardnet.domain.models import NetworkSnapshot
        snapshot = NetworkSnapshot(
            nodes=(make_node("a"), make_node("b")),
            edges=(make_edge("a", "b"),),
        )
        moved = engine.force_directed(snapshot)
        for node in moved:
            assert all(math.isfinite(v) for v in (node.position.x, node.position.y, node.position.z))

    def test_empty_snapshot(self, engine):
        from boardnet.domain.models import NetworkSnapshot
        assert engine.calculate(NetworkSnapshot()) == []

    @pytest.mark.parametrize("with_edge,expected_a,expected_b", [
        # repulsion k^2/d = 2500/10 = 250, spring d^2/k * s = 100/50 = 2
        (True, -223.2, 233.2),
        (False, -225.0, 235.0),
    ])
    def test_single_step_forces(self, make_node, make_edge, with_edge, expected_a, expected_b):
        from boardnet.domain.models import NetworkSnapshot
        snapshot = NetworkSnapshot(
            nodes=(
                make_node("a", position=Position(0.0, 0.0, 0.0)),
                make_node("b", position=Position(10.0, 0.0, 0.0)),
            ),
            edges=(make_edge("a", "b", strength=1.0),) if with_edge else (),
        )
        engine = LayoutEngine(ForceLayoutConfig(iterations=1, max_displacement=1000.0))

        a, b = engine.force_directed(snapshot)

        assert a.position.x == pytest.approx(expected_a)
        assert b.position.x == pytest.approx(expected_b)
        assert (a.position.y, a.position.z, b.position.y, b.position.z) == (0.0, 0.0, 0.0, 0.0)


# =============================================================================
# Deterministic layouts
# =============================================================================

class TestGeometricLayouts:

    def test_circular(self, engine, board_snapshot):
        placed = engine.calculate(board_snapshot, LayoutType.CIRCULAR)

        assert len(placed) == len(board_snapshot.nodes)
        for node in placed:
            assert node.position.y == 0.0
            assert _radius_xz(node.position) == pytest.approx(60.0)

    def test_hierarchical(self, engine, board_snapshot):
        placed = engine.calculate(board_snapshot, "hierarchical")

        # Rank order: owner, admins by influence, members by influence, viewer
        assert [n.id for n in placed] == ["m1", "m2", "m3", "m4", "m5", "m6"]
        heights = {n.id: n.position.y for n in placed}
        assert heights["m1"] == 90
        assert heights["m2"] == heights["m3"] == 60
        assert heights["m6"] == 0

        for node in placed:
            level = node.metadata.role.level
            assert _radius_xz(node.position) == pytest.approx(30 + 25 * level)

    def test_hierarchical_level_of_roles(self):
        assert MemberRole.OWNER.level == 3
        assert MemberRole.VIEWER.level == 0

    def test_cluster_layout_last_cluster_wins(self, engine, finance_trio):
        snapshot = GraphBuilder().build(finance_trio)
        assert [c.id for c in snapshot.clusters] == ["cluster-Finance", "cluster-role-member"]

        placed = engine.calculate(snapshot, "cluster")
        # Second of two clusters sits opposite the first on the outer ring
        center = Position(x=-80.0, y=0.0, z=0.0)
        for node in placed:
            assert node.position.distance_to(center) == pytest.approx(15.0)

    def test_cluster_layout_keeps_unclustered_nodes(self, engine, opposite_pair):
        snapshot = GraphBuilder().build(opposite_pair)
        placed = engine.calculate(snapshot, "cluster")

        assert [n.position for n in placed] == [n.position for n in snapshot.nodes]


# =============================================================================
# Layout Resolution
# =============================================================================

class TestLayoutResolution:

    @pytest.mark.parametrize("name,expected", [
        ("force-directed", LayoutType.FORCE_DIRECTED),
        ("spring", LayoutType.FORCE_DIRECTED),
        ("Circle", LayoutType.CIRCULAR),
        ("hierarchy", LayoutType.HIERARCHICAL),
        ("clusters", LayoutType.CLUSTER),
    ])
    def test_aliases(self, name, expected):
        assert LayoutType.from_string(name) == expected

    def test_unknown_layout_raises(self, engine, board_snapshot):
        with pytest.raises(ValueError, match="Unknown layout"):
            engine.calculate(board_snapshot, "spiral")

    def test_list_layouts(self):
        text = list_layouts()
        for layout in LayoutType:
            assert layout.value in text
