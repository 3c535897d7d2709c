"""
Domain Entities

Inputs to a network analysis run, supplied fresh by the caller on every call:

    MemberProfile     one board member (role, expertise, experience, scores)
    RelationshipHint  optional caller knowledge about a pair of members

Both accept the flat record shape used by roster files as well as the nested
board-member record shape (expertise_profile, performance_metrics,
network_position, risk_assessment).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Iterable, Optional, Tuple

from .enums import MemberRole, RelationshipType

DEFAULT_PERFORMANCE_SCORE = 0.7
DEFAULT_RISK_LEVEL = 0.2


def _unit_interval(name: str, value: Optional[float]) -> None:
    if value is not None and not 0.0 <= value <= 1.0:
        raise ValueError(f"{name} must be within [0, 1], got {value}")


def _dedupe(tags: Iterable[str]) -> Tuple[str, ...]:
    seen = []
    for tag in tags:
        if tag not in seen:
            seen.append(tag)
    return tuple(seen)


@dataclass(frozen=True)
class MemberProfile:
    """
    A board member as seen by the network analysis.

    Attributes:
        id: Member identifier, reused as the node id
        name: Display name
        role: Organization role (owner, admin, member, viewer)
        expertise: Expertise tags, de-duplicated in first-seen order
        years_experience: Non-negative years of experience
        performance_score: Overall performance in [0, 1]
        risk_level: Overall risk assessment in [0, 1]
        influence_score: Optional explicit influence in [0, 1]
        centrality: Optional explicit centrality in [0, 1]
    """
    id: str
    name: str
    role: MemberRole = MemberRole.MEMBER
    expertise: Tuple[str, ...] = ()
    years_experience: float = 0.0
    performance_score: float = DEFAULT_PERFORMANCE_SCORE
    risk_level: float = DEFAULT_RISK_LEVEL
    influence_score: Optional[float] = None
    centrality: Optional[float] = None

    def __post_init__(self) -> None:
        if not isinstance(self.role, MemberRole):
            object.__setattr__(self, "role", MemberRole.from_string(self.role))
        object.__setattr__(self, "expertise", _dedupe(self.expertise))
        if self.years_experience < 0:
            raise ValueError(
                f"years_experience must be non-negative, got {self.years_experience}"
            )
        _unit_interval("performance_score", self.performance_score)
        _unit_interval("risk_level", self.risk_level)
        _unit_interval("influence_score", self.influence_score)
        _unit_interval("centrality", self.centrality)

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "role": self.role.value,
            "expertise": list(self.expertise),
            "years_experience": self.years_experience,
            "performance_score": self.performance_score,
            "risk_level": self.risk_level,
        }
        if self.influence_score is not None:
            result["influence_score"] = self.influence_score
        if self.centrality is not None:
            result["centrality"] = self.centrality
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> MemberProfile:
        """Build a profile from a flat or nested board-member record."""
        expertise_profile = data.get("expertise_profile") or {}
        performance = data.get("performance_metrics") or {}
        position = data.get("network_position") or {}
        risk = data.get("risk_assessment") or {}

        def pick(*candidates: Any) -> Any:
            for value in candidates:
                if value is not None:
                    return value
            return None

        member_id = str(data.get("id", ""))
        return cls(
            id=member_id,
            name=pick(data.get("name"), data.get("full_name"), member_id),
            role=data.get("role", MemberRole.MEMBER.value),
            expertise=tuple(
                pick(data.get("expertise"), expertise_profile.get("core_competencies")) or ()
            ),
            years_experience=float(
                pick(data.get("years_experience"), expertise_profile.get("years_experience"), 0.0)
            ),
            performance_score=float(
                pick(
                    data.get("performance_score"),
                    performance.get("overall_score"),
                    DEFAULT_PERFORMANCE_SCORE,
                )
            ),
            risk_level=float(
                pick(data.get("risk_level"), risk.get("overall_risk_level"), DEFAULT_RISK_LEVEL)
            ),
            influence_score=pick(data.get("influence_score"), position.get("influence_score")),
            centrality=pick(data.get("centrality"), position.get("centrality_measure")),
        )


@dataclass(frozen=True)
class RelationshipHint:
    """
    Caller-supplied knowledge about an unordered pair of members.

    Every field that is set overrides the value the relationship analyzer
    computes for the pair. The edge threshold still applies to the final
    strength.
    """
    source_id: str
    target_id: str
    relationship_type: Optional[RelationshipType] = None
    strength: Optional[float] = None
    interaction_frequency: Optional[float] = None
    shared_projects: Optional[int] = None
    last_interaction: Optional[datetime] = None
    properties: Dict[str, Any] = field(default_factory=dict, compare=False)

    def __post_init__(self) -> None:
        if self.relationship_type is not None and not isinstance(
            self.relationship_type, RelationshipType
        ):
            object.__setattr__(
                self, "relationship_type", RelationshipType(str(self.relationship_type).lower())
            )
        if self.source_id == self.target_id:
            raise ValueError(f"Relationship hint links '{self.source_id}' to itself")

    @property
    def pair(self) -> frozenset:
        return frozenset((self.source_id, self.target_id))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source": self.source_id,
            "target": self.target_id,
            "type": self.relationship_type.value if self.relationship_type else None,
            "strength": self.strength,
            "interaction_frequency": self.interaction_frequency,
            "shared_projects": self.shared_projects,
            "last_interaction": (
                self.last_interaction.isoformat() if self.last_interaction else None
            ),
            **self.properties,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> RelationshipHint:
        known = {
            "source", "target", "source_id", "target_id", "member_a_id", "member_b_id",
            "type", "relationship_type", "strength", "interaction_frequency",
            "shared_projects", "last_interaction",
        }
        last = data.get("last_interaction")
        if isinstance(last, str):
            last = datetime.fromisoformat(last)
        strength = data.get("strength")
        return cls(
            source_id=str(data.get("source_id") or data.get("source") or data.get("member_a_id", "")),
            target_id=str(data.get("target_id") or data.get("target") or data.get("member_b_id", "")),
            relationship_type=data.get("relationship_type") or data.get("type"),
            strength=float(strength) if strength is not None else None,
            interaction_frequency=data.get("interaction_frequency"),
            shared_projects=data.get("shared_projects"),
            last_interaction=last,
            properties={k: v for k, v in data.items() if k not in known},
        )
