"""
Outbound Ports

Interfaces defining contracts for outbound adapters.
"""

from abc import ABC, abstractmethod
from typing import Any, List

from boardnet.domain.models import MemberProfile, RelationshipHint


# =============================================================================
# Member Repository
# =============================================================================

class IMemberRepository(ABC):
    """
    Outbound port for board member data.

    Defines the contract for loading member profiles and relationship hints
    regardless of where they are stored (roster files, in-memory, etc.).
    """

    @abstractmethod
    def get_members(self) -> List[MemberProfile]:
        """
        Retrieve all member profiles.

        Returns:
            Member profiles in roster order
        """
        pass

    @abstractmethod
    def get_relationships(self) -> List[RelationshipHint]:
        """
        Retrieve relationship hints.

        Returns:
            Hints in roster order (may be empty)
        """
        pass

    @abstractmethod
    def close(self) -> None:
        """Release any held resources."""
        pass


# =============================================================================
# Result Exporter
# =============================================================================

class IResultExporter(ABC):
    """
    Outbound port for exporting snapshots and analysis results.
    """

    @abstractmethod
    def export_json(self, data: Any, output_path: str) -> str:
        """
        Export data to JSON format.

        Args:
            data: Object with ``to_dict`` or plain JSON-serializable data
            output_path: Path to output file

        Returns:
            Path to exported file
        """
        pass
