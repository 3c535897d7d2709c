"""
Relationship Analyzer

Scores a pair of member profiles and classifies the relationship.

Signals:
    skill_similarity          |A ∩ B| / max(|A|, |B|, 1) over expertise tags
    role_distance             |rank(A) − rank(B)| / 3   (owner=4 … viewer=1)
    experience_compatibility  1 − |expA − expB| / 30
    performance_alignment     1 − |perfA − perfB|

Strength:
    clamp(0.3·skill + 0.2·(1 − role_distance) + 0.2·experience + 0.3·performance, 0, 1)

Type (first match wins):
    skill_similarity > 0.7       → expertise
    role_distance > 0.5          → mentorship
    performance_alignment < 0.3  → conflict
    otherwise                    → collaboration

All signals are symmetric, so analyze(A, B) == analyze(B, A).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict

from boardnet.domain.models.entities import MemberProfile
from boardnet.domain.models.enums import RelationshipType

SKILL_WEIGHT = 0.3
ROLE_WEIGHT = 0.2
EXPERIENCE_WEIGHT = 0.2
PERFORMANCE_WEIGHT = 0.3

ROLE_SPAN = 3.0
EXPERIENCE_SPAN = 30.0


@dataclass(frozen=True)
class RelationshipScore:
    """Weighted, typed relationship between two members."""
    strength: float
    type: RelationshipType
    weight: float
    interaction_frequency: float
    shared_projects: int
    communication_score: float
    skill_similarity: float = 0.0
    role_distance: float = 0.0
    experience_compatibility: float = 0.0
    performance_alignment: float = 0.0


def clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return max(low, min(high, value))


def derived_fields(strength: float) -> Dict[str, Any]:
    """Values that follow from a strength alone."""
    return {
        "weight": strength * 10,
        "interaction_frequency": strength * 100,
        "shared_projects": int(math.floor(strength * 5)),
        "communication_score": strength * 0.9 + 0.1,
    }


class RelationshipAnalyzer:
    """
    Pure pairwise scorer for member profiles.

    Example:
        >>> score = RelationshipAnalyzer().analyze(alice, bob)
        >>> score.strength, score.type
    """

    def skill_similarity(self, a: MemberProfile, b: MemberProfile) -> float:
        shared = len(set(a.expertise) & set(b.expertise))
        return shared / max(len(a.expertise), len(b.expertise), 1)

    def role_distance(self, a: MemberProfile, b: MemberProfile) -> float:
        return abs(a.role.rank - b.role.rank) / ROLE_SPAN

    def experience_compatibility(self, a: MemberProfile, b: MemberProfile) -> float:
        # May go negative for gaps above 30 years; strength clamping absorbs it.
        return 1 - abs(a.years_experience - b.years_experience) / EXPERIENCE_SPAN

    def performance_alignment(self, a: MemberProfile, b: MemberProfile) -> float:
        return 1 - abs(a.performance_score - b.performance_score)

    def classify(
        self, skill: float, role_distance: float, performance: float,
    ) -> RelationshipType:
        if skill > 0.7:
            return RelationshipType.EXPERTISE
        if role_distance > 0.5:
            return RelationshipType.MENTORSHIP
        if performance < 0.3:
            return RelationshipType.CONFLICT
        return RelationshipType.COLLABORATION

    def analyze(self, a: MemberProfile, b: MemberProfile) -> RelationshipScore:
        skill = self.skill_similarity(a, b)
        role = self.role_distance(a, b)
        experience = self.experience_compatibility(a, b)
        performance = self.performance_alignment(a, b)

        strength = clamp(
            SKILL_WEIGHT * skill
            + ROLE_WEIGHT * (1 - role)
            + EXPERIENCE_WEIGHT * experience
            + PERFORMANCE_WEIGHT * performance
        )

        return RelationshipScore(
            strength=strength,
            type=self.classify(skill, role, performance),
            skill_similarity=skill,
            role_distance=role,
            experience_compatibility=experience,
            performance_alignment=performance,
            **derived_fields(strength),
        )
