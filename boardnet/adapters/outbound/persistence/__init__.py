"""
Persistence Adapters

Member repository implementations.
"""

from .file_repository import FileMemberRepository
from .memory_repository import InMemoryMemberRepository

__all__ = ["FileMemberRepository", "InMemoryMemberRepository"]
