"""
Inbound Ports

Interface defining the contract for board network analysis use cases.
"""

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional, Sequence, Union

from boardnet.domain.config.layouts import LayoutType
from boardnet.domain.models import (
    MemberProfile,
    NetworkAnalysisResult,
    NetworkNode,
    NetworkSnapshot,
    QueryResponse,
    RelationshipHint,
)


class INetworkAnalysisUseCase(ABC):
    """
    Inbound port for board network use cases.

    Covers building a network from member profiles, analysing it, laying it
    out for 3D display and answering free-text questions about it.
    """

    @abstractmethod
    def generate_network_data(
        self,
        members: Sequence[MemberProfile],
        relationships: Optional[Iterable[RelationshipHint]] = None,
    ) -> NetworkSnapshot:
        """
        Build the network snapshot for a set of members.

        Args:
            members: Member profiles with unique ids
            relationships: Optional hints overriding computed pair values

        Returns:
            Snapshot with nodes, edges, clusters and metrics
        """
        pass

    @abstractmethod
    def analyze_network(self, snapshot: NetworkSnapshot) -> NetworkAnalysisResult:
        """Derive influencers, isolation, bridges, conflicts, opportunities and risks."""
        pass

    @abstractmethod
    def calculate_optimal_layout(
        self,
        snapshot: NetworkSnapshot,
        layout_type: Union[str, LayoutType] = LayoutType.FORCE_DIRECTED,
    ) -> List[NetworkNode]:
        """Return repositioned copies of the snapshot's nodes."""
        pass

    @abstractmethod
    def process_network_voice_query(
        self, query: str, snapshot: NetworkSnapshot,
    ) -> QueryResponse:
        """Answer a free-text question about the network."""
        pass
