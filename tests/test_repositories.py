"""
Tests for member repositories and the JSON exporter
"""

import json

import pytest
import yaml

from boardnet.adapters.outbound.export import JsonResultExporter
from boardnet.adapters.outbound.persistence import FileMemberRepository, InMemoryMemberRepository
from boardnet.domain.models import MemberProfile, MemberRole, RelationshipHint, RelationshipType
from boardnet.domain.services import GraphBuilder


@pytest.fixture
def roster_data():
    return {
        "members": [
            {
                "id": "m1", "name": "Alice Chen", "role": "owner",
                "expertise": ["Leadership", "Finance"], "years_experience": 22,
                "performance_score": 0.9, "influence_score": 0.95,
            },
            {
                "id": "m2", "full_name": "Bob Martinez", "role": "admin",
                "expertise_profile": {"core_competencies": ["Finance"], "years_experience": 15},
                "performance_metrics": {"overall_score": 0.85},
                "network_position": {"influence_score": 0.7, "centrality_measure": 0.6},
                "risk_assessment": {"overall_risk_level": 0.3},
            },
            {"id": "m3", "name": "Carol Singh"},
        ],
        "relationships": [
            {
                "source": "m1", "target": "m3", "type": "mentorship", "strength": 0.75,
                "last_interaction": "2024-02-01T09:30:00+00:00", "note": "quarterly",
            },
        ],
    }


# =============================================================================
# File Repository
# =============================================================================

class TestFileMemberRepository:

    def test_json_roster(self, tmp_path, roster_data):
        path = tmp_path / "roster.json"
        path.write_text(json.dumps(roster_data))
        repo = FileMemberRepository(path)

        members = repo.get_members()
        assert [m.id for m in members] == ["m1", "m2", "m3"]
        assert members[0].role == MemberRole.OWNER
        assert members[0].influence_score == 0.95

        bob = members[1]
        assert bob.name == "Bob Martinez"
        assert bob.expertise == ("Finance",)
        assert bob.years_experience == 15
        assert bob.performance_score == 0.85
        assert bob.risk_level == 0.3
        assert bob.centrality == 0.6

        carol = members[2]
        assert carol.role == MemberRole.MEMBER
        assert carol.performance_score == 0.7
        assert carol.influence_score is None

    def test_relationships(self, tmp_path, roster_data):
        path = tmp_path / "roster.json"
        path.write_text(json.dumps(roster_data))
        hints = FileMemberRepository(path).get_relationships()

        assert len(hints) == 1
        hint = hints[0]
        assert hint.pair == frozenset(("m1", "m3"))
        assert hint.relationship_type == RelationshipType.MENTORSHIP
        assert hint.strength == 0.75
        assert hint.last_interaction.year == 2024
        assert hint.properties == {"note": "quarterly"}

    def test_yaml_roster(self, tmp_path, roster_data):
        path = tmp_path / "roster.yaml"
        path.write_text(yaml.safe_dump(roster_data))
        repo = FileMemberRepository(path)

        assert len(repo.get_members()) == 3
        snapshot = GraphBuilder().build(repo.get_members(), repo.get_relationships())
        assert snapshot.get_edge("m1", "m3").type == RelationshipType.MENTORSHIP

    def test_bare_member_list(self, tmp_path):
        path = tmp_path / "members.json"
        path.write_text(json.dumps([{"id": "a", "name": "A"}, {"id": "b", "name": "B"}]))
        repo = FileMemberRepository(path)

        assert [m.id for m in repo.get_members()] == ["a", "b"]
        assert repo.get_relationships() == []

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            FileMemberRepository(tmp_path / "nope.json").get_members()

    def test_schema_violation_names_file(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"members": [{"id": "a", "performance_score": 3}]}))

        with pytest.raises(ValueError, match="bad.json"):
            FileMemberRepository(path).get_members()

    def test_non_numeric_nested_score_names_file(self, tmp_path):
        path = tmp_path / "nested.json"
        path.write_text(json.dumps(
            {"members": [{"id": "a", "performance_metrics": {"overall_score": [1]}}]}
        ))

        with pytest.raises(ValueError, match="nested.json"):
            FileMemberRepository(path).get_members()

    def test_unknown_role_names_file(self, tmp_path):
        path = tmp_path / "roles.yaml"
        path.write_text(yaml.safe_dump({"members": [{"id": "a", "role": "chair"}]}))

        with pytest.raises(ValueError, match="Unknown member role"):
            FileMemberRepository(path).get_members()


# =============================================================================
# In-Memory Repository
# =============================================================================

class TestInMemoryMemberRepository:

    def test_save_and_get(self):
        repo = InMemoryMemberRepository()
        repo.save_members([MemberProfile(id="a", name="A")])
        repo.save_members([MemberProfile(id="b", name="B")])
        repo.add_relationship(RelationshipHint(source_id="a", target_id="b", strength=0.5))

        assert [m.id for m in repo.get_members()] == ["a", "b"]
        assert len(repo.get_relationships()) == 1

        repo.save_members([MemberProfile(id="c", name="C")], clear=True)
        assert [m.id for m in repo.get_members()] == ["c"]


# =============================================================================
# JSON Export
# =============================================================================

class TestJsonResultExporter:

    def test_exports_snapshot(self, tmp_path, board):
        snapshot = GraphBuilder().build(board)
        out = tmp_path / "nested" / "network.json"

        path = JsonResultExporter().export_json(snapshot, str(out))
        data = json.loads(out.read_text())

        assert path == str(out)
        assert len(data["nodes"]) == len(board)
        assert data["nodes"][0]["metadata"]["role"] == "owner"
        assert set(data["metrics"]) >= {"density", "modularity", "influence_distribution"}
