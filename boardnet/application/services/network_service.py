"""
Network Visualization Service

Application service implementing INetworkAnalysisUseCase.
Orchestrates the board network pipeline:

    1. Graph Building   → nodes, edges, clusters and metrics from member profiles
    2. Network Analysis → influencers, isolation, bridges, conflicts, risks
    3. Layout           → 3D positions for one of the named layouts
    4. Query Routing    → free-text questions answered from the analysis

Analysis results are cached by the snapshot's content signature and rebound
to the analysed snapshot on a hit, so an unchanged network is analysed once.
Building, layout and query routing are stateless.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence, Union

from boardnet.application.ports import IMemberRepository, INetworkAnalysisUseCase
from boardnet.application.services.analysis_cache import AnalysisCache
from boardnet.config.settings import Settings
from boardnet.domain.config.layouts import ForceLayoutConfig, LayoutType
from boardnet.domain.models import (
    MemberProfile,
    NetworkAnalysisResult,
    NetworkNode,
    NetworkSnapshot,
    QueryResponse,
    RelationshipHint,
)
from boardnet.domain.services import (
    GraphBuilder,
    LayoutEngine,
    MetricCalculator,
    NetworkQueryRouter,
    NetworkRiskDetector,
)


class NetworkVisualizationService(INetworkAnalysisUseCase):
    """
    Main service for board network visualization and analysis.

    Follows the hexagonal architecture pattern:
    - Inbound port: INetworkAnalysisUseCase
    - Outbound port: IMemberRepository (optional, injected)

    Every collaborator defaults to one configured from ``settings``.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        repository: Optional[IMemberRepository] = None,
        graph_builder: Optional[GraphBuilder] = None,
        layout_engine: Optional[LayoutEngine] = None,
        detector: Optional[NetworkRiskDetector] = None,
        cache: Optional[AnalysisCache] = None,
    ) -> None:
        self._settings = settings or Settings()
        self._repo = repository
        self._builder = graph_builder or GraphBuilder(
            metric_calculator=MetricCalculator(community_seed=self._settings.community_seed),
            edge_threshold=self._settings.edge_strength_threshold,
        )
        self._layouts = layout_engine or LayoutEngine(
            ForceLayoutConfig(iterations=self._settings.layout_iterations)
        )
        self._detector = detector or NetworkRiskDetector(
            isolation_max_degree=self._settings.isolation_max_degree,
        )
        self._cache = cache if cache is not None else AnalysisCache(
            self._settings.analysis_cache_size
        )
        self._router = NetworkQueryRouter(self._detector, analyze=self.analyze_network)
        self._logger = logging.getLogger(__name__)

    @property
    def cache(self) -> AnalysisCache:
        return self._cache

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def generate_network_data(
        self,
        members: Sequence[MemberProfile],
        relationships: Optional[Iterable[RelationshipHint]] = None,
    ) -> NetworkSnapshot:
        """
        Build the network snapshot for *members*.

        Raises:
            ValueError: If two members share an id
        """
        return self._builder.build(members, relationships)

    def generate_from_repository(self) -> NetworkSnapshot:
        """Build the snapshot for the members held by the injected repository."""
        if self._repo is None:
            raise RuntimeError("No member repository configured")
        members = self._repo.get_members()
        relationships = self._repo.get_relationships()
        self._logger.info(
            "Loaded %d members and %d relationship hints from repository",
            len(members), len(relationships),
        )
        return self.generate_network_data(members, relationships)

    def analyze_network(self, snapshot: NetworkSnapshot) -> NetworkAnalysisResult:
        key = snapshot.signature
        cached = self._cache.get(key)
        if cached is not None:
            self._logger.info("Using cached analysis for %d-node network", len(snapshot.nodes))
            return cached.rebound_to(snapshot)

        result = self._detector.analyze(snapshot)
        self._cache.put(key, result)
        return result

    def calculate_optimal_layout(
        self,
        snapshot: NetworkSnapshot,
        layout_type: Union[str, LayoutType] = LayoutType.FORCE_DIRECTED,
    ) -> List[NetworkNode]:
        """
        Return repositioned copies of the snapshot's nodes.

        Raises:
            ValueError: If *layout_type* names no known layout
        """
        return self._layouts.calculate(snapshot, layout_type)

    def apply_layout(
        self,
        snapshot: NetworkSnapshot,
        layout_type: Union[str, LayoutType] = LayoutType.FORCE_DIRECTED,
    ) -> NetworkSnapshot:
        """New snapshot whose nodes carry the positions of *layout_type*."""
        return snapshot.with_positions(self.calculate_optimal_layout(snapshot, layout_type))

    def process_network_voice_query(
        self, query: str, snapshot: NetworkSnapshot,
    ) -> QueryResponse:
        return self._router.route(query, snapshot)

    # ------------------------------------------------------------------
    # Cache management
    # ------------------------------------------------------------------

    def invalidate(self, snapshot: NetworkSnapshot) -> bool:
        """Forget the cached analysis of *snapshot*; returns whether one existed."""
        removed = self._cache.invalidate(snapshot.signature)
        if removed:
            self._logger.debug("Invalidated cached analysis for %d-node network", len(snapshot.nodes))
        return removed

    def clear_cache(self) -> int:
        count = self._cache.clear()
        self._logger.info("Cleared %d cached analyses", count)
        return count
