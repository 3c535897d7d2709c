from __future__ import annotations

from enum import Enum


class MemberRole(str, Enum):
    """Organization role of a board member."""
    OWNER = "owner"
    ADMIN = "admin"
    MEMBER = "member"
    VIEWER = "viewer"

    @property
    def rank(self) -> int:
        """Hierarchy rank used for role distance (owner=4 ... viewer=1)."""
        return {"owner": 4, "admin": 3, "member": 2, "viewer": 1}[self.value]

    @property
    def level(self) -> int:
        """Tier used by the hierarchical layout (owner=3 ... viewer=0)."""
        return self.rank - 1

    @classmethod
    def from_string(cls, value: str) -> MemberRole:
        key = str(value).lower().strip()
        try:
            return cls(key)
        except ValueError:
            valid = sorted(r.value for r in cls)
            raise ValueError(f"Unknown member role '{value}'. Valid: {valid}")


class RelationshipType(str, Enum):
    COLLABORATION = "collaboration"
    MENTORSHIP = "mentorship"
    CONFLICT = "conflict"
    REPORTING = "reporting"
    EXPERTISE = "expertise"


class InfluenceLevel(str, Enum):
    """Aggregate influence of a cluster."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

    @classmethod
    def from_score(cls, mean_influence: float) -> InfluenceLevel:
        if mean_influence > 0.8:
            return cls.CRITICAL
        if mean_influence > 0.6:
            return cls.HIGH
        if mean_influence > 0.4:
            return cls.MEDIUM
        return cls.LOW


class RiskPatternType(str, Enum):
    SINGLE_POINT_FAILURE = "single_point_failure"
    ECHO_CHAMBER = "echo_chamber"
    ISOLATION = "isolation"
    OVER_DEPENDENCE = "over_dependence"


class QueryIntent(str, Enum):
    """What a free-text network query was routed to."""
    INFLUENCERS = "influencers"
    ISOLATION = "isolation"
    CLUSTERS = "clusters"
    RISKS = "risks"
    FULL_ANALYSIS = "full_analysis"
