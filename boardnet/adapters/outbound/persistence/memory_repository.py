"""
In-Memory Member Repository Adapter

Implements IMemberRepository using in-memory storage for testing.
"""

from typing import Iterable, List, Optional

from boardnet.application.ports import IMemberRepository
from boardnet.domain.models import MemberProfile, RelationshipHint


class InMemoryMemberRepository(IMemberRepository):
    """
    In-memory adapter implementing IMemberRepository.

    Useful for tests and for callers that already hold member profiles.
    """

    def __init__(
        self,
        members: Optional[Iterable[MemberProfile]] = None,
        relationships: Optional[Iterable[RelationshipHint]] = None,
    ) -> None:
        self.members: List[MemberProfile] = list(members or [])
        self.relationships: List[RelationshipHint] = list(relationships or [])

    def close(self) -> None:
        """No-op for in-memory repository."""
        pass

    def save_members(self, members: Iterable[MemberProfile], clear: bool = False) -> None:
        if clear:
            self.members = []
        self.members.extend(members)

    def add_relationship(self, hint: RelationshipHint) -> None:
        self.relationships.append(hint)

    def get_members(self) -> List[MemberProfile]:
        return list(self.members)

    def get_relationships(self) -> List[RelationshipHint]:
        return list(self.relationships)
