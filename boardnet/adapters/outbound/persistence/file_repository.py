"""
File Member Repository Adapter

Implements IMemberRepository over a roster file (JSON or YAML):

    members:
      - id: m1
        name: Alice Chen
        role: owner
        expertise: [Leadership, Finance]
        years_experience: 22
        performance_score: 0.9
    relationships:
      - source: m1
        target: m2
        type: mentorship
        strength: 0.8

Members may also use the nested board-member record shape
(expertise_profile, performance_metrics, network_position,
risk_assessment). Records are validated with pydantic before they become
domain entities.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from boardnet.application.ports import IMemberRepository
from boardnet.domain.models import MemberProfile, RelationshipHint

YAML_SUFFIXES = {".yaml", ".yml"}


# =============================================================================
# Roster schema
# =============================================================================

class MemberRecord(BaseModel):
    """One roster member, flat or nested."""
    model_config = ConfigDict(extra="ignore")

    id: str = Field(..., min_length=1, description="Unique member id")
    name: Optional[str] = Field(default=None, description="Display name")
    full_name: Optional[str] = Field(default=None, description="Display name (nested shape)")
    role: str = Field(default="member", description="owner, admin, member or viewer")
    expertise: Optional[List[str]] = Field(default=None, description="Expertise tags")
    years_experience: Optional[float] = Field(default=None, ge=0)
    performance_score: Optional[float] = Field(default=None, ge=0, le=1)
    risk_level: Optional[float] = Field(default=None, ge=0, le=1)
    influence_score: Optional[float] = Field(default=None, ge=0, le=1)
    centrality: Optional[float] = Field(default=None, ge=0, le=1)

    expertise_profile: Optional[Dict[str, Any]] = None
    performance_metrics: Optional[Dict[str, Any]] = None
    network_position: Optional[Dict[str, Any]] = None
    risk_assessment: Optional[Dict[str, Any]] = None


class RelationshipRecord(BaseModel):
    """One relationship hint; unknown keys are kept as properties."""
    model_config = ConfigDict(extra="allow")

    source: Optional[str] = None
    target: Optional[str] = None
    source_id: Optional[str] = None
    target_id: Optional[str] = None
    member_a_id: Optional[str] = None
    member_b_id: Optional[str] = None
    type: Optional[str] = None
    relationship_type: Optional[str] = None
    strength: Optional[float] = Field(default=None, ge=0, le=1)
    interaction_frequency: Optional[float] = Field(default=None, ge=0)
    shared_projects: Optional[int] = Field(default=None, ge=0)
    last_interaction: Optional[datetime] = None


class RosterRecord(BaseModel):
    members: List[MemberRecord] = Field(default_factory=list)
    relationships: List[RelationshipRecord] = Field(default_factory=list)


# =============================================================================
# Repository
# =============================================================================

class FileMemberRepository(IMemberRepository):
    """
    Roster-file adapter implementing IMemberRepository.

    The file is read and validated once, on first access.

    Raises:
        FileNotFoundError: If the roster file does not exist
        ValueError: If the file content fails validation
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)
        self._members: Optional[List[MemberProfile]] = None
        self._relationships: Optional[List[RelationshipHint]] = None
        self._logger = logging.getLogger(__name__)

    def get_members(self) -> List[MemberProfile]:
        if self._members is None:
            self._load()
        return list(self._members)

    def get_relationships(self) -> List[RelationshipHint]:
        if self._relationships is None:
            self._load()
        return list(self._relationships)

    def close(self) -> None:
        """No-op for file repository."""
        pass

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def _read(self) -> Any:
        if not self.path.exists():
            raise FileNotFoundError(f"Roster file not found: {self.path}")

        self._logger.info("Loading roster from %s", self.path)
        with open(self.path, "r", encoding="utf-8") as f:
            if self.path.suffix.lower() in YAML_SUFFIXES:
                return yaml.safe_load(f)
            return json.load(f)

    def _load(self) -> None:
        data = self._read()
        if isinstance(data, list):
            data = {"members": data}
        elif data is None:
            data = {}

        try:
            roster = RosterRecord.model_validate(data)
        except ValidationError as exc:
            raise ValueError(f"Invalid roster file {self.path}:\n{exc}") from exc

        try:
            members = [
                MemberProfile.from_dict(record.model_dump()) for record in roster.members
            ]
            relationships = [
                RelationshipHint.from_dict(
                    {k: v for k, v in record.model_dump().items() if v is not None}
                )
                for record in roster.relationships
            ]
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Invalid roster file {self.path}: {exc}") from exc

        self._logger.info(
            "Loaded %d members and %d relationships", len(members), len(relationships),
        )
        self._members = members
        self._relationships = relationships
